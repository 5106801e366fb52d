from __future__ import annotations

from neonsnake.storage import Preferences


def test_missing_file_gives_defaults(tmp_path) -> None:
    prefs = Preferences.load(tmp_path / "nope.json")
    assert prefs.high_score == 0
    assert prefs.sound and prefs.music


def test_save_then_load(tmp_path) -> None:
    path = tmp_path / "save.json"
    prefs = Preferences(path)
    prefs.high_score = 120
    prefs.music = False
    prefs.save()

    loaded = Preferences.load(path)
    assert loaded.to_dict() == {"high_score": 120, "sound": True, "music": False}


def test_corrupt_file_is_ignored(tmp_path, caplog) -> None:
    path = tmp_path / "save.json"
    path.write_text("{not json")
    prefs = Preferences.load(path)
    assert prefs.high_score == 0
    assert "could not read preferences" in caplog.text


def test_unwritable_location_is_logged_not_raised(tmp_path, caplog) -> None:
    prefs = Preferences(tmp_path / "missing-dir" / "save.json")
    prefs.high_score = 5
    prefs.save()
    assert "could not save preferences" in caplog.text


def test_in_memory_preferences_never_touch_disk() -> None:
    prefs = Preferences()
    prefs.high_score = 7
    prefs.save()
    assert prefs.path is None


def test_muted_run_keeps_the_saved_audio_switches(tmp_path) -> None:
    path = tmp_path / "save.json"
    Preferences(path).save()

    prefs = Preferences.load(path)
    prefs.mute()
    assert prefs.muted
    assert not prefs.sound and not prefs.music

    assert prefs.toggle("sound") is True
    assert prefs.sound
    assert Preferences.load(path).to_dict() == {"high_score": 0, "sound": True, "music": True}


def test_high_score_saved_while_muted_leaves_switches_alone(tmp_path) -> None:
    path = tmp_path / "save.json"
    prefs = Preferences(path)
    prefs.music = False
    prefs.save()

    prefs = Preferences.load(path)
    prefs.mute()
    prefs.high_score = 90
    prefs.save()
    assert Preferences.load(path).to_dict() == {"high_score": 90, "sound": True, "music": False}


def test_toggle_without_mute_is_saved(tmp_path) -> None:
    path = tmp_path / "save.json"
    prefs = Preferences(path)
    assert prefs.toggle("music") is False
    assert Preferences.load(path).music is False
