import logging

import pytest
from pydantic import ValidationError

from pretty_text.config import Settings
from pretty_text.main import bootstrap, configure_logging
from pretty_text.registry import get_registry


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PTX_LOG_LEVEL", raising=False)
        monkeypatch.delenv("PTX_PRELOAD_DISPLAY_NAMES", raising=False)
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.preload_display_names is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("PTX_LOG_LEVEL", "debug")
        monkeypatch.setenv("PTX_PRELOAD_DISPLAY_NAMES", "true")
        s = Settings(_env_file=None)
        assert s.log_level == "DEBUG"
        assert s.preload_display_names is True

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")


class TestBootstrap:
    def test_configure_logging_uses_settings_level(self, monkeypatch):
        monkeypatch.setattr("pretty_text.main.settings.log_level", "WARNING")
        configure_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_bootstrap_returns_global_registry(self, monkeypatch):
        monkeypatch.setattr("pretty_text.main.settings.log_level", "INFO")
        assert bootstrap() is get_registry()
