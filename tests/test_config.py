"""Tests for settings and logging helpers."""
import os
import unittest
from unittest.mock import patch

from tasknote.config import Settings
from tasknote.utils.logging import get_logger, log_error


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.reminder_title, "Task Reminder")
        self.assertEqual(settings.default_theme, "system")
        self.assertEqual(settings.suggestion_limit, 5)

    def test_environment_overrides_use_prefix(self):
        env = {"TASKNOTE_DATABASE_URL": "sqlite://", "TASKNOTE_SUGGESTION_LIMIT": "3"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.database_url, "sqlite://")
        self.assertEqual(settings.suggestion_limit, 3)


class LoggingTests(unittest.TestCase):
    def test_loggers_live_under_package_logger(self):
        self.assertEqual(get_logger("tasknote.services").name, "tasknote.services")
        self.assertEqual(get_logger("scripts").name, "tasknote.scripts")
        self.assertEqual(get_logger().name, "tasknote")

    def test_log_error_includes_context_and_task(self):
        with self.assertLogs("tasknote", level="ERROR") as logs:
            log_error(ValueError("bad value"), "TaskService.update_task", 7)
        self.assertIn("TaskService.update_task (task_id=7): ValueError: bad value", logs.output[0])
