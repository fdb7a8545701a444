from pathlib import Path

import pytest

from qmkonnect import windows
from qmkonnect.window import WindowInfo


@pytest.mark.parametrize(
    "app_class",
    [
        "ForegroundStaging",
        "XamlExplorerHostIslandWindow",
        "TaskSwitcherWnd",
        "Windows.UI.Core.CoreWindow",
        "ApplicationFrameWindow",
    ],
)
def test_internal_classes_are_ignored(app_class):
    assert windows.should_ignore_window(WindowInfo(app_class, "Some Title")) is True


def test_ordinary_window_is_kept():
    assert windows.should_ignore_window(WindowInfo("Notepad", "Untitled - Notepad")) is False


def test_empty_title_is_ignored_for_unknown_class():
    assert windows.should_ignore_window(WindowInfo("Notepad", "")) is True


@pytest.mark.parametrize(
    "app_class", ["CASCADIA_HOSTING_WINDOW_CLASS", "Chrome_WidgetWin_1"]
)
def test_empty_title_allowed_for_some_classes(app_class):
    assert windows.should_ignore_window(WindowInfo(app_class, "")) is False


def test_single_character_title_is_ignored():
    assert windows.should_ignore_window(WindowInfo("Notepad", "x")) is True


def test_two_character_title_is_kept():
    assert windows.should_ignore_window(WindowInfo("Notepad", "ab")) is False


def test_single_multibyte_character_title_is_kept():
    assert windows.should_ignore_window(WindowInfo("Notepad", "é")) is False


def test_config_paths_order(monkeypatch, tmp_path):
    roaming = tmp_path / "roaming"
    local = tmp_path / "local"
    monkeypatch.setenv("APPDATA", str(roaming))
    monkeypatch.setenv("LOCALAPPDATA", str(local))
    paths = windows.get_config_paths()
    assert paths[0] == roaming / "QMKonnect" / "config.toml"
    assert paths[1] == local / "QMKonnect" / "config.toml"
    assert len(paths) == 3
    assert paths[2].name == "config.toml"


def test_config_paths_without_app_data(monkeypatch):
    monkeypatch.delenv("APPDATA", raising=False)
    monkeypatch.delenv("LOCALAPPDATA", raising=False)
    paths = windows.get_config_paths()
    assert len(paths) == 1
    assert paths[0].name == "config.toml"


def test_create_config_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    created = windows.create_config_dir()
    assert created == tmp_path / "QMKonnect"
    assert created.is_dir()


def test_create_config_dir_is_idempotent(monkeypatch, tmp_path):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    first = windows.create_config_dir()
    second = windows.create_config_dir()
    assert first == second
    assert Path(second).is_dir()


def test_create_config_dir_without_app_data(monkeypatch):
    monkeypatch.delenv("APPDATA", raising=False)
    with pytest.raises(RuntimeError, match="APPDATA"):
        windows.create_config_dir()