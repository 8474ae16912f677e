"""Tests for settings loading."""

import pytest
from pydantic import ValidationError
from rps_shoot.config import Settings


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("RPS_KEY_BYTES", raising=False)
        settings = Settings(_env_file=None)
        assert settings.key_bytes == 32
        assert settings.show_banner is True

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("RPS_KEY_BYTES", "64")
        monkeypatch.setenv("rps_show_banner", "false")
        settings = Settings(_env_file=None)
        assert settings.key_bytes == 64
        assert settings.show_banner is False

    def test_short_keys_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, key_bytes=16)
