"""Tests for settings persistence and logging setup."""

import json

from loguru import logger

from studyhub.log import setup_logging
from studyhub.settings import (
    Settings, load_settings, save_settings, settings_path, app_support_dir,
)


class TestSettingsDefaults:

    def test_timer_defaults(self):
        s = Settings()
        assert s.work_duration_minutes == 25
        assert s.break_duration_minutes == 5

    def test_other_defaults(self):
        s = Settings()
        assert s.dark_mode is False
        assert s.sound_enabled is True
        assert s.sound_volume == 70
        assert s.log_level == "INFO"

    def test_durations_are_clamped(self):
        s = Settings(work_duration_minutes=120, break_duration_minutes=45)
        assert s.work_duration_minutes == 60
        assert s.break_duration_minutes == 30

    def test_bad_durations_fall_back(self):
        s = Settings(work_duration_minutes=0, break_duration_minutes="x")
        assert s.work_duration_minutes == 25
        assert s.break_duration_minutes == 5

    def test_volume_clamped(self):
        assert Settings(sound_volume=150).sound_volume == 100


class TestSettingsPersistence:

    def test_support_dir_follows_env(self, studyhub_home):
        assert app_support_dir() == studyhub_home
        assert settings_path() == studyhub_home / "settings.json"

    def test_missing_file_gives_defaults(self):
        assert load_settings() == Settings()

    def test_round_trip(self):
        original = Settings(work_duration_minutes=45, break_duration_minutes=15, dark_mode=True)
        save_settings(original)
        assert load_settings() == original

    def test_unknown_keys_ignored(self):
        path = settings_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"dark_mode": True, "theme": "neon"}))
        loaded = load_settings()
        assert loaded.dark_mode is True
        assert not hasattr(loaded, "theme")

    def test_corrupt_file_gives_defaults(self):
        path = settings_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("{not json")
        assert load_settings() == Settings()

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.json"
        save_settings(Settings(sound_volume=20), path)
        assert load_settings(path).sound_volume == 20


class TestLogging:

    def test_file_sink_written(self, tmp_path):
        log_dir = tmp_path / "logs"
        setup_logging("DEBUG", log_dir)
        logger.info("hello from the test")
        logger.complete()
        files = list(log_dir.glob("studyhub_*.log"))
        assert len(files) == 1
        assert "hello from the test" in files[0].read_text(encoding="utf-8")
        logger.remove()
