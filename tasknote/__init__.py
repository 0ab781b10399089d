"""
Tasknote: personal task lists with categories, priorities, filters and reminders
"""
__version__ = "0.1.0"
