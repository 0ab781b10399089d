"""
Services module for Tasknote
Contains the task pipeline and its collaborators
"""
from .filters import SortOption, TaskFilter
from .task_service import TaskService
from .reminder_service import NotificationScheduler, Reminder, ReminderService
from .speech_service import DictationSession, SpeechRecognitionError, ScriptedSpeechBackend
from .theme_service import AppTheme, ThemeManager

__all__ = [
    "SortOption",
    "TaskFilter",
    "TaskService",
    "NotificationScheduler",
    "Reminder",
    "ReminderService",
    "DictationSession",
    "SpeechRecognitionError",
    "ScriptedSpeechBackend",
    "AppTheme",
    "ThemeManager",
]
