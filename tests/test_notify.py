"""End-to-end tests for toastwrap.core.notify with a stubbed PowerShell."""

import subprocess
import tempfile
import unittest
import xml.etree.ElementTree as ET
from pathlib import Path
from unittest import mock

from toastwrap.core.config import Settings
from toastwrap.core.enums import Audio, Duration
from toastwrap.core.errors import DispatchError, RenderError
from toastwrap.core.manager import new_manager
from toastwrap.core.model import Action, Notification
from toastwrap.core.notify import notify, push

RUN = "toastwrap.core.powershell.subprocess.run"


class _FakePowerShell:
    """Records the scripts it is asked to run."""

    def __init__(self, returncode: int = 0):
        self.returncode = returncode
        self.scripts: list[bytes] = []

    def __call__(self, cmd, **kwargs):
        self.scripts.append(Path(cmd[-1]).read_bytes())
        return subprocess.CompletedProcess(cmd, self.returncode, "", "")

    @property
    def last_markup(self) -> str:
        text = self.scripts[-1][3:].decode("utf-8")
        start = text.index("<toast ")
        end = text.index("</toast>") + len("</toast>")
        return text[start:end]


class TestPush(unittest.TestCase):
    """Tests for push function."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.settings = Settings(temp_dir=self._tmp.name)
        self.ps = _FakePowerShell()

    def tearDown(self):
        self._tmp.cleanup()

    def test_simple_toast_from_manager(self):
        """Manager + simple toast renders protocol/Short/silent and dispatches."""
        with mock.patch(RUN, side_effect=self.ps):
            manager = new_manager("com.windows.app", "Windows App", "testdata/icon.png", self.settings)
            toast = manager.new_simple_toast(
                "Hello World", "Lorem ipsum dolor sit amet, consectetur adipiscing elit."
            )
            push(toast, self.settings)

        self.assertEqual(len(self.ps.scripts), 2)
        self.assertTrue(self.ps.scripts[-1].startswith(b"\xef\xbb\xbf"))
        markup = self.ps.last_markup
        self.assertIn('activationType="protocol"', markup)
        self.assertIn('duration="Short"', markup)
        self.assertIn('<audio silent="true" />', markup)
        self.assertIn("<text>Hello World</text>", markup)
        self.assertIn("Lorem ipsum dolor sit amet", markup)
        self.assertEqual(list(Path(self._tmp.name).iterdir()), [])

    def test_two_actions(self):
        toast = Notification(
            title="Lunch",
            actions=[
                Action(action_type="protocol", label="Open Maps", arguments="bingmaps:?q=sushi"),
                Action(action_type="protocol", label="Cancel"),
            ],
        )
        with mock.patch(RUN, side_effect=self.ps):
            push(toast, self.settings)

        root = ET.fromstring(self.ps.last_markup)
        actions = root.find("actions")
        self.assertEqual(
            [(a.get("activationType"), a.get("content"), a.get("arguments")) for a in actions],
            [("protocol", "Open Maps", "bingmaps:?q=sushi"), ("protocol", "Cancel", "")],
        )

    def test_defaults_applied_before_render(self):
        """Empty activation type and duration become protocol and Short."""
        with mock.patch(RUN, side_effect=self.ps):
            push(Notification(title="t"), self.settings)

        root = ET.fromstring(self.ps.last_markup)
        self.assertEqual(root.get("activationType"), "protocol")
        self.assertEqual(root.get("duration"), "Short")
        self.assertEqual(root.find("audio").get("src"), Audio.DEFAULT.value)

    def test_manager_toast_gets_same_defaults(self):
        """Manager-built toasts with unset fields are defaulted at push time too."""
        manager_toast = Notification(app_id="App", icon="/i.png", title="t")
        with mock.patch(RUN, side_effect=self.ps):
            push(manager_toast, self.settings)
        root = ET.fromstring(self.ps.last_markup)
        self.assertEqual(root.get("activationType"), "protocol")
        self.assertEqual(root.get("duration"), "Short")

    def test_explicit_values_survive_defaulting(self):
        toast = Notification(
            title="t", activation_type="background", audio=Audio.REMINDER, loop=True,
            duration=Duration.LONG,
        )
        with mock.patch(RUN, side_effect=self.ps):
            push(toast, self.settings)
        root = ET.fromstring(self.ps.last_markup)
        self.assertEqual(root.get("activationType"), "background")
        self.assertEqual(root.get("duration"), "Long")
        self.assertEqual(root.find("audio").get("loop"), "true")

    def test_render_error_before_dispatch(self):
        with mock.patch(RUN, side_effect=self.ps) as run:
            with self.assertRaises(RenderError):
                push(Notification(title="\x07"), self.settings)
        run.assert_not_called()

    def test_dispatch_error_propagates(self):
        with mock.patch(RUN, side_effect=_FakePowerShell(returncode=1)):
            with self.assertRaises(DispatchError):
                push(Notification(title="t"), self.settings)


class TestNotify(unittest.TestCase):
    """Tests for the string-based notify helper."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.settings = Settings(temp_dir=self._tmp.name)
        self.ps = _FakePowerShell()

    def tearDown(self):
        self._tmp.cleanup()

    def test_resolves_names(self):
        with mock.patch(RUN, side_effect=self.ps):
            notify("t", "m", audio="LOOPINGALARM3", duration="long", loop=True, settings=self.settings)
        root = ET.fromstring(self.ps.last_markup)
        self.assertEqual(root.find("audio").get("src"), Audio.LOOPING_ALARM3.value)
        self.assertEqual(root.get("duration"), "Long")

    def test_default_is_silent(self):
        with mock.patch(RUN, side_effect=self.ps):
            notify("t", "m", settings=self.settings)
        self.assertIn('<audio silent="true" />', self.ps.last_markup)

    def test_unknown_names_fall_back_with_warning(self):
        with mock.patch(RUN, side_effect=self.ps):
            with self.assertLogs("toastwrap.core.notify", level="WARNING") as logs:
                notify("t", "m", audio="kazoo", duration="forever", settings=self.settings)
        self.assertEqual(len(logs.output), 2)
        root = ET.fromstring(self.ps.last_markup)
        self.assertEqual(root.find("audio").get("src"), Audio.DEFAULT.value)
        self.assertEqual(root.get("duration"), "Short")


if __name__ == "__main__":
    unittest.main()
