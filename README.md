# qmkonnect

Tracks which window has focus and turns each focus change into a message for
a QMK keyboard, so keyboard firmware can react to the application in use.

A message is the window's application class and title joined by a
group-separator character (`0x1D`). Focus changes are debounced: a change
that follows a quiet spell is sent at once, while during a quick burst only
the last window is sent, after 100 ms without further changes.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
qmkonnect [OPTIONS]
```

| Option            | Meaning                                          |
|-------------------|--------------------------------------------------|
| `-h`, `--help`    | Show the help text                               |
| `-v`, `--verbose` | Print what is detected and sent                  |
| `-c`, `--config`  | Create a default configuration file              |
| `-r`, `--reload`  | Reload configuration and update system files     |

Running `qmkonnect` without options starts the window monitor in the
foreground (Linux only); stop it with Ctrl+C. On any error the command prints
`Application error: ...` and exits with status 1.

## Configuration

Create a starting configuration with:

```
qmkonnect --config
```

An existing file is left untouched. The file is `config.toml` and holds your
keyboard's USB identifiers:

```toml
# QMKonnect Configuration

# Your QMK keyboard's vendor ID (in hex)
vendor_id = 0xfeed

# Your QMK keyboard's product ID (in hex)
product_id = 0x0000
```

It is looked for, in order, at:

- Linux: `$XDG_CONFIG_HOME/qmk-notifier/config.toml`,
  `~/.config/qmk-notifier/config.toml`, `/etc/qmk-notifier/config.toml`
- macOS: `~/Library/Application Support/QMKonnect/config.toml`,
  `~/.config/qmk-notifier/config.toml`, `/etc/qmk-notifier/config.toml`
- Windows: `%APPDATA%\QMKonnect\config.toml`,
  `%LOCALAPPDATA%\QMKonnect\config.toml`, then next to the program

On Linux, after editing the identifiers, run:

```
qmkonnect --reload
```

This rewrites the vendor and product IDs in
`/etc/udev/rules.d/99-qmkonnect.rules` (the file must already exist) and asks
udev to reload its rules; both steps use `sudo`. Failures of these steps are
reported only with `--verbose`.

## Using it as a library

Delivery to the keyboard goes through a `qmkonnect.notifier.Notifier`, which
you supply:

```python
from qmkonnect.notifier import Notifier, notify_qmk, set_notifier
from qmkonnect.window import WindowInfo


class PrintingNotifier(Notifier):
    def notify(self, message: str) -> None:
        print(repr(message))


set_notifier(PrintingNotifier())
notify_qmk(WindowInfo("firefox", "Inbox"))   # prints 'firefox\x1dInbox'
```

Other pieces:

- `qmkonnect.notifier.Debouncer` — a debouncer of your own, with its own
  notifier, interval and quiet period; `format_message` builds a message.
- `qmkonnect.config` — `parse_config`, `create_default_config`,
  `render_config`, and the `Config` and `ConfigError` types.
- `qmkonnect.config_manager.create_config_manager` — finds, loads and creates
  the configuration for the running platform.
- `qmkonnect.platforms` — `get_config_paths`, `create_config_dir` and
  `create_monitor` for the running platform.
- `qmkonnect.linux` — udev rule helpers (`extract_attr_value`,
  `rewrite_udev_rules`, `update_udev_rules`, `reload_udev_rules`,
  `decimal_to_hex`).
- `qmkonnect.windows.should_ignore_window` — tells shell components apart
  from applications.
- `qmkonnect.hyprland` — `check_hyprland_environment`, `is_hyprland_running`
  and the `window_changed` comparison of `WindowState` values.

## What it does not do

- It does not talk to USB/HID devices. No notifier is installed by default,
  so until `set_notifier` is called, messages cannot be delivered; the
  command-line monitor then prints `Failed to notify QMK: ...` for each focus
  change.
- The only window monitor is `qmkonnect.x11.X11Monitor`, which polls `xprop`
  and reports just whether some window is active (`X11Application` /
  `Active Window`) or not (`Linux` / `Desktop`), not the real class and title.
- There is no monitor for Hyprland, macOS or Windows; on those systems
  `create_monitor` and the no-option command raise an error.
- There is no system tray icon, settings dialog or background service.