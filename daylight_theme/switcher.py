"""
Time-of-day theme switching.

Preferences (a locked hour and whether auto switching is on) live in a small
JSON file. Switching writes the hour's theme name into the editor's JSON
settings under "workbench.colorTheme".
"""

import json
import os
import shutil
import tempfile
import time
from collections import namedtuple
from datetime import datetime

from .palette import is_dark
from .palette.loader import validate_hour
from .vscode import theme_name

Settings = namedtuple("Settings", ["override_hour", "auto_switch"], defaults=(-1, True))

COLOR_THEME_KEY = "workbench.colorTheme"
CHECK_INTERVAL = 60  # seconds


def load_settings(path):
    """Load switcher settings, falling back to defaults when the file is absent."""
    if not os.path.exists(path):
        return Settings()

    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")

    override_hour = data.get("overrideHour", -1)
    if not isinstance(override_hour, int) or isinstance(override_hour, bool):
        raise ValueError(f"overrideHour: expected an integer, got {override_hour!r}")

    auto_switch = data.get("autoSwitch", True)
    if not isinstance(auto_switch, bool):
        raise ValueError(f"autoSwitch: expected true or false, got {auto_switch!r}")

    return Settings(override_hour=override_hour, auto_switch=auto_switch)


def save_settings(path, settings):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    data = {
        "overrideHour": settings.override_hour,
        "autoSwitch": settings.auto_switch,
    }
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


def is_locked(settings):
    return 0 <= settings.override_hour <= 23


def current_hour(now=None):
    return (now or datetime.now()).hour


def effective_hour(settings, now=None):
    """The locked hour if one is set, otherwise the current local hour."""
    if is_locked(settings):
        return settings.override_hour
    return current_hour(now)


def status_text(settings, now=None):
    hour = effective_hour(settings, now)
    if is_locked(settings):
        return f"Daylight: {hour:02d}:00 (locked)"
    if settings.auto_switch:
        return f"Daylight: {hour:02d}:00 (auto)"
    return "Daylight: Manual"


def lock_hour(path, hour):
    """Lock the theme to one hour and turn auto switching on."""
    settings = Settings(override_hour=validate_hour(hour), auto_switch=True)
    save_settings(path, settings)
    return settings


def unlock(path):
    """Go back to following the clock."""
    settings = Settings(override_hour=-1, auto_switch=True)
    save_settings(path, settings)
    return settings


def set_auto_switch(path, enabled):
    settings = load_settings(path)._replace(auto_switch=bool(enabled))
    save_settings(path, settings)
    return settings


def switch_to_theme(editor_settings_path, hour):
    """Point the editor at the theme for hour.

    Returns:
        bool: True if the setting changed, False if it already matched
    """
    name = theme_name(hour)

    editor_settings = {}
    if os.path.exists(editor_settings_path):
        with open(editor_settings_path) as f:
            editor_settings = json.load(f)

    if editor_settings.get(COLOR_THEME_KEY) == name:
        return False

    editor_settings[COLOR_THEME_KEY] = name
    directory = os.path.dirname(editor_settings_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    # A failed write must leave the existing settings file intact.
    with tempfile.NamedTemporaryFile(
        "w", dir=directory or ".", suffix=".tmp", delete=False
    ) as f:
        tmp_path = f.name
        try:
            json.dump(editor_settings, f, indent=4)
        except BaseException:
            f.close()
            os.remove(tmp_path)
            raise
    if os.path.exists(editor_settings_path):
        shutil.copymode(editor_settings_path, tmp_path)
    os.replace(tmp_path, editor_settings_path)

    print(f"Switched to {name}")
    return True


def check_and_switch(settings_path, editor_settings_path, now=None):
    """Apply the effective hour's theme if auto switching is on.

    Returns:
        The hour applied, or None when auto switching is disabled
    """
    settings = load_settings(settings_path)
    if not settings.auto_switch:
        return None

    hour = effective_hour(settings, now)
    switch_to_theme(editor_settings_path, hour)
    return hour


def watch(
    settings_path,
    editor_settings_path,
    interval=CHECK_INTERVAL,
    iterations=None,
    sleep=time.sleep,
):
    """Re-check the schedule every interval seconds.

    Runs forever unless iterations is given. Settings are re-read on every
    check so lock/unlock from another process takes effect on the next tick.
    """
    count = 0
    while iterations is None or count < iterations:
        check_and_switch(settings_path, editor_settings_path)
        count += 1
        if iterations is None or count < iterations:
            sleep(interval)


def hour_choices():
    """List (hour, label, is_dark) for every hour, for pickers and listings."""
    choices = []
    for hour in range(24):
        dark = is_dark(hour)
        label = f"{hour:02d}:00  {'Dark' if dark else 'Light'} theme"
        choices.append((hour, label, dark))
    return choices
