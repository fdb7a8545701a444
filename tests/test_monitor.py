import pytest

from qmkonnect.monitor import WindowMonitor


class MockWindowMonitor(WindowMonitor):
    def __init__(self, name):
        self._name = name
        self.start_called = False
        self.stop_called = False

    def platform_name(self):
        return self._name

    def start(self):
        self.start_called = True

    def stop(self):
        self.stop_called = True


class MinimalMonitor(WindowMonitor):
    def platform_name(self):
        return "Minimal"

    def start(self):
        return None


def test_window_monitor_implementation():
    monitor = MockWindowMonitor("Mock Platform")

    assert monitor.platform_name() == "Mock Platform"

    assert monitor.start() is None
    assert monitor.start_called

    # The base class's stop is a no-op and must not reach the override.
    assert WindowMonitor.stop(monitor) is None
    assert monitor.stop_called is False

    assert monitor.stop() is None
    assert monitor.stop_called


def test_default_stop_does_nothing():
    monitor = MinimalMonitor()
    assert WindowMonitor.stop(monitor) is None
    assert monitor.stop() is None
    assert monitor.platform_name() == "Minimal"


def test_abstract_monitor_cannot_be_created():
    with pytest.raises(TypeError):
        WindowMonitor()