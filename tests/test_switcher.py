import json
from datetime import datetime

import pytest

from daylight_theme import switcher
from daylight_theme.switcher import Settings

AFTERNOON = datetime(2024, 6, 1, 14, 30)


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "daylight" / "settings.json")


@pytest.fixture
def editor_path(tmp_path):
    return str(tmp_path / "Code" / "User" / "settings.json")


def test_missing_settings_file_gives_defaults(settings_path):
    assert switcher.load_settings(settings_path) == Settings(-1, True)


def test_settings_round_trip(settings_path):
    switcher.save_settings(settings_path, Settings(override_hour=7, auto_switch=False))
    assert switcher.load_settings(settings_path) == Settings(7, False)
    with open(settings_path) as f:
        assert json.load(f) == {"overrideHour": 7, "autoSwitch": False}


def test_effective_hour():
    assert switcher.effective_hour(Settings(), now=AFTERNOON) == 14
    assert switcher.effective_hour(Settings(override_hour=3), now=AFTERNOON) == 3
    assert switcher.effective_hour(Settings(override_hour=99), now=AFTERNOON) == 14


def test_status_text():
    assert switcher.status_text(Settings(override_hour=5), AFTERNOON) == (
        "Daylight: 05:00 (locked)"
    )
    assert switcher.status_text(Settings(), AFTERNOON) == "Daylight: 14:00 (auto)"
    assert switcher.status_text(Settings(auto_switch=False), AFTERNOON) == (
        "Daylight: Manual"
    )


def test_lock_unlock_and_auto(settings_path):
    assert switcher.lock_hour(settings_path, 20) == Settings(20, True)
    assert switcher.load_settings(settings_path) == Settings(20, True)

    assert switcher.set_auto_switch(settings_path, False) == Settings(20, False)
    assert switcher.unlock(settings_path) == Settings(-1, True)


@pytest.mark.parametrize("hour", [-1, 24])
def test_lock_rejects_invalid_hour(settings_path, hour):
    with pytest.raises(ValueError):
        switcher.lock_hour(settings_path, hour)


def test_switch_to_theme_updates_editor_settings(editor_path, capsys):
    assert switcher.switch_to_theme(editor_path, 9) is True
    assert switcher.switch_to_theme(editor_path, 9) is False
    with open(editor_path) as f:
        assert json.load(f) == {"workbench.colorTheme": "Daylight 09:00"}
    assert capsys.readouterr().out.count("Switched to Daylight 09:00") == 1


def test_switch_keeps_other_editor_settings(editor_path, tmp_path):
    (tmp_path / "Code" / "User").mkdir(parents=True)
    with open(editor_path, "w") as f:
        json.dump({"editor.fontSize": 14, "workbench.colorTheme": "Other"}, f)

    switcher.switch_to_theme(editor_path, 21)

    with open(editor_path) as f:
        data = json.load(f)
    assert data == {"editor.fontSize": 14, "workbench.colorTheme": "Daylight 21:00"}


def test_check_and_switch(settings_path, editor_path):
    assert switcher.check_and_switch(settings_path, editor_path, now=AFTERNOON) == 14
    with open(editor_path) as f:
        assert json.load(f)["workbench.colorTheme"] == "Daylight 14:00"

    switcher.lock_hour(settings_path, 2)
    assert switcher.check_and_switch(settings_path, editor_path, now=AFTERNOON) == 2


def test_check_and_switch_does_nothing_when_disabled(settings_path, editor_path):
    switcher.set_auto_switch(settings_path, False)
    assert switcher.check_and_switch(settings_path, editor_path) is None
    with pytest.raises(FileNotFoundError):
        open(editor_path)


def test_watch_sleeps_between_checks(settings_path, editor_path):
    switcher.lock_hour(settings_path, 6)
    sleeps = []

    switcher.watch(
        settings_path, editor_path, interval=5, iterations=3, sleep=sleeps.append
    )

    assert sleeps == [5, 5]
    with open(editor_path) as f:
        assert json.load(f)["workbench.colorTheme"] == "Daylight 06:00"


def test_hour_choices():
    choices = switcher.hour_choices()
    assert len(choices) == 24
    assert choices[0] == (0, "00:00  Dark theme", True)
    assert choices[8] == (8, "08:00  Light theme", False)
    assert choices[16][2] is True


@pytest.mark.parametrize(
    "data, key",
    [
        ({"overrideHour": None, "autoSwitch": True}, "overrideHour"),
        ({"overrideHour": "7"}, "overrideHour"),
        ({"overrideHour": True}, "overrideHour"),
        ({"overrideHour": 7, "autoSwitch": "false"}, "autoSwitch"),
        ({"autoSwitch": 0}, "autoSwitch"),
    ],
)
def test_load_settings_rejects_bad_values(settings_path, data, key):
    switcher.save_settings(settings_path, Settings())
    with open(settings_path, "w") as f:
        json.dump(data, f)

    with pytest.raises(ValueError, match=key):
        switcher.load_settings(settings_path)


def test_load_settings_rejects_non_object(settings_path):
    switcher.save_settings(settings_path, Settings())
    with open(settings_path, "w") as f:
        json.dump([20, True], f)

    with pytest.raises(ValueError, match="JSON object"):
        switcher.load_settings(settings_path)


def test_failed_switch_leaves_editor_settings_intact(editor_path, tmp_path, monkeypatch):
    editor_dir = tmp_path / "Code" / "User"
    editor_dir.mkdir(parents=True)
    with open(editor_path, "w") as f:
        json.dump({"editor.fontSize": 14, "workbench.colorTheme": "Other"}, f)

    def broken_dump(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(switcher.json, "dump", broken_dump)
    with pytest.raises(OSError, match="disk full"):
        switcher.switch_to_theme(editor_path, 3)
    monkeypatch.undo()

    with open(editor_path) as f:
        assert json.load(f) == {"editor.fontSize": 14, "workbench.colorTheme": "Other"}
    assert [p.name for p in editor_dir.iterdir()] == ["settings.json"]


def test_switch_leaves_no_temp_files(editor_path, tmp_path):
    switcher.switch_to_theme(editor_path, 10)
    switcher.switch_to_theme(editor_path, 11)

    editor_dir = tmp_path / "Code" / "User"
    assert [p.name for p in editor_dir.iterdir()] == ["settings.json"]
