"""Tests for Settings."""

import logging

import pytest
from pydantic import ValidationError

from docrepo.core.config import Settings
from docrepo.core.logging import setup_logging


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("DOCREPO_LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)

    assert settings.app_title == "DocRepo"
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DOCREPO_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DOCREPO_CORS_ORIGINS", '["http://localhost:3000"]')

    settings = Settings(_env_file=None)
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://localhost:3000"]


def test_settings_reject_unknown_log_level(monkeypatch):
    monkeypatch.setenv("DOCREPO_LOG_LEVEL", "VERBOSE")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_setup_logging_does_not_duplicate_handlers():
    setup_logging("DEBUG")
    logger = setup_logging("warning")

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_setup_logging_unknown_level_raises():
    with pytest.raises(ValueError):
        setup_logging("verbose")
