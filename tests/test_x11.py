import subprocess
import threading
import time
from unittest.mock import patch

from qmkonnect.notifier import Notifier, set_notifier
from qmkonnect.window import WindowInfo
from qmkonnect.x11 import X11Monitor


def _xprop(text):
    def fake_run(args, **kwargs):
        return subprocess.CompletedProcess(args, 0, stdout=text.encode(), stderr=b"")

    return fake_run


class RecordingNotifier(Notifier):
    def __init__(self):
        self.messages = []
        self.lock = threading.Lock()

    def notify(self, message):
        with self.lock:
            self.messages.append(message)


def test_platform_name():
    assert X11Monitor(True).platform_name() == "Linux (X11)"


def test_verbose_flag_kept():
    assert X11Monitor(True).verbose is True
    assert X11Monitor(False).verbose is False


def test_active_window_detected():
    output = "_NET_ACTIVE_WINDOW(WINDOW): window id # 0x1234\n"
    with patch("qmkonnect.x11.subprocess.run", _xprop(output)):
        info = X11Monitor(False).get_active_window_info()
    assert info == WindowInfo("X11Application", "Active Window")


def test_no_active_window_gives_desktop():
    with patch("qmkonnect.x11.subprocess.run", _xprop("")):
        info = X11Monitor(False).get_active_window_info()
    assert info == WindowInfo("Linux", "Desktop")


def test_missing_xprop_gives_desktop():
    with patch("qmkonnect.x11.subprocess.run", side_effect=FileNotFoundError("xprop")):
        info = X11Monitor(False).get_active_window_info()
    assert info == WindowInfo("Linux", "Desktop")


def test_start_and_stop_toggle_running():
    monitor = X11Monitor(False)
    assert monitor.running is False
    recorder = RecordingNotifier()
    set_notifier(recorder)
    with patch("qmkonnect.x11.subprocess.run", _xprop("")):
        monitor.start()
        assert monitor.running is True
        monitor.stop()
    assert monitor.running is False


def test_start_reports_active_window():
    recorder = RecordingNotifier()
    set_notifier(recorder)
    output = "_NET_ACTIVE_WINDOW(WINDOW): window id # 0x1234\n"
    monitor = X11Monitor(False)
    with patch("qmkonnect.x11.subprocess.run", _xprop(output)):
        monitor.start()
        deadline = time.monotonic() + 3
        while time.monotonic() < deadline:
            with recorder.lock:
                if recorder.messages:
                    break
            time.sleep(0.05)
        monitor.stop()
    with recorder.lock:
        messages = list(recorder.messages)
    assert messages[0] == "X11Application\x1dActive Window"
    assert len(messages) == 1