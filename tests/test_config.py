"""Tests for toastwrap.core.config module."""

import tempfile
import unittest
from pathlib import Path

from toastwrap.core.config import Settings, load_settings


class TestLoadSettings(unittest.TestCase):
    """Tests for load_settings function."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "toastwrap.conf"

    def tearDown(self):
        self._tmp.cleanup()

    def test_defaults_without_file(self):
        self.assertEqual(load_settings(self.path, environ={}), Settings())

    def test_reads_file(self):
        self.path.write_text(
            "# toast settings\n"
            "powershell = pwsh\n"
            "timeout = 12.5\n"
            "debug_script = yes\n"
            "app_id = com.example.app\n"
            "unknown = ignored\n",
            encoding="utf-8",
        )
        settings = load_settings(self.path, environ={})
        self.assertEqual(settings.powershell, "pwsh")
        self.assertEqual(settings.timeout, 12.5)
        self.assertTrue(settings.debug_script)
        self.assertEqual(settings.app_id, "com.example.app")

    def test_environment_overrides_file(self):
        self.path.write_text("timeout = 12\n", encoding="utf-8")
        settings = load_settings(
            self.path,
            environ={"TOASTWRAP_TIMEOUT": "3", "TOASTWRAP_TEMP_DIR": "/tmp/toasts", "PATH": "x"},
        )
        self.assertEqual(settings.timeout, 3.0)
        self.assertEqual(settings.temp_dir, "/tmp/toasts")

    def test_invalid_timeout_keeps_default(self):
        self.path.write_text("timeout = soon\n", encoding="utf-8")
        with self.assertLogs("toastwrap.core.config", level="WARNING"):
            settings = load_settings(self.path, environ={})
        self.assertEqual(settings.timeout, Settings().timeout)

    def test_undecodable_file_falls_back_to_defaults(self):
        self.path.write_bytes(b"\xff\xfe timeout = 3\n")
        with self.assertLogs("toastwrap.core.config", level="WARNING") as logs:
            settings = load_settings(self.path, environ={})
        self.assertEqual(settings, Settings())
        self.assertIn("unreadable config", logs.output[0])

    def test_unreadable_path_falls_back_to_defaults(self):
        """A directory at the config path cannot be read as text."""
        self.path.mkdir()
        with self.assertLogs("toastwrap.core.config", level="WARNING"):
            settings = load_settings(self.path, environ={"TOASTWRAP_TIMEOUT": "4"})
        self.assertEqual(settings.timeout, 4.0)


if __name__ == "__main__":
    unittest.main()
