# tests/unit/config/test_unit_settings.py - v2
"""Tests for config/settings.py - typed Settings and validation rules."""

from __future__ import annotations

from pathlib import Path

import pytest

from mbchunker.config.settings import Settings, load_settings
from mbchunker.core.errors import ConfigurationError


class TestSettingsDefaults:
    def test_chunking_defaults(self):
        s = Settings(_env_file=None)
        assert s.default_encoding == "utf-8"
        assert s.text_chunk_size == 2000
        assert s.file_chunk_size == 8192

    def test_logging_defaults(self):
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.log_format == "text"
        assert s.log_file is None


class TestSettingsValidation:
    def test_encoding_normalized(self):
        assert Settings(_env_file=None, default_encoding="UTF8").default_encoding == "utf-8"

    def test_unknown_encoding(self):
        with pytest.raises(ConfigurationError, match="unsupported encoding"):
            Settings(_env_file=None, default_encoding="foo")

    def test_auto_detect_rejected(self):
        with pytest.raises(ConfigurationError, match="auto-detection"):
            Settings(_env_file=None, default_encoding="auto")

    def test_text_size(self):
        with pytest.raises(ConfigurationError, match="TEXT_CHUNK_SIZE"):
            Settings(_env_file=None, text_chunk_size=0)

    def test_file_size(self):
        with pytest.raises(ConfigurationError, match="FILE_CHUNK_SIZE"):
            Settings(_env_file=None, file_chunk_size=3)

    def test_errors_are_joined(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Settings(_env_file=None, text_chunk_size=0, file_chunk_size=1)
        assert "TEXT_CHUNK_SIZE" in str(exc_info.value)
        assert "FILE_CHUNK_SIZE" in str(exc_info.value)

    def test_log_level_case_insensitive(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


class TestSettingsSources:
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MBCHUNKER_FILE_CHUNK_SIZE", "16")
        monkeypatch.setenv("MBCHUNKER_DEFAULT_ENCODING", "utf-16-be")
        s = Settings(_env_file=None)
        assert s.file_chunk_size == 16
        assert s.default_encoding == "utf-16-be"

    def test_env_file(self, tmp_path: Path):
        env = tmp_path / "custom.env"
        env.write_text("MBCHUNKER_TEXT_CHUNK_SIZE=7\n", encoding="utf-8")
        assert Settings(_env_file=env).text_chunk_size == 7

    def test_load_settings_overrides(self):
        s = load_settings(_env_file=None, file_chunk_size=64)
        assert s.file_chunk_size == 64
