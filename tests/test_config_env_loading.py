"""
Test settings loading.

Tests that the nearest .env is discovered from the working directory, that
already-set environment variables take precedence, and that each settings
group reads its own prefix.
"""

import os

import pytest
from pydantic import ValidationError

from healthscript.core.config import (
    DatabaseSettings,
    SecuritySettings,
    _load_env_file_if_available,
    get_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_env_file_found_in_parent_directory(monkeypatch, tmp_path):
    """Test that .env is loaded from a parent of the working directory."""
    monkeypatch.delenv("MONGO_DB_NAME", raising=False)
    (tmp_path / ".env").write_text("MONGO_DB_NAME=from_parent_env\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)

    _load_env_file_if_available()

    assert os.getenv("MONGO_DB_NAME") == "from_parent_env"
    monkeypatch.delenv("MONGO_DB_NAME", raising=False)


def test_already_set_env_vars_take_precedence(monkeypatch, tmp_path):
    """Test that already-set environment variables are not overridden."""
    monkeypatch.setenv("MONGO_DB_NAME", "already_set")
    (tmp_path / ".env").write_text("MONGO_DB_NAME=from_env_file\n")
    monkeypatch.chdir(tmp_path)

    _load_env_file_if_available()

    assert os.getenv("MONGO_DB_NAME") == "already_set"


def test_no_env_file_no_crash(monkeypatch, tmp_path):
    """Test that a missing .env does not cause a crash."""
    monkeypatch.chdir(tmp_path)
    _load_env_file_if_available()


def test_settings_read_prefixed_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MONGO_DB_NAME", "clinic_test")
    monkeypatch.setenv("RECORDS_MAX_SIZE_MB", "2")
    monkeypatch.setenv("LOGGING_LEVEL", "debug")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "http://a.example, http://b.example")

    settings = get_settings()

    assert settings.database.db_name == "clinic_test"
    assert settings.records.max_size_mb == 2
    assert settings.logging.level == "DEBUG"
    assert settings.cors.allowed_origins == ["http://a.example", "http://b.example"]
    assert settings.is_testing


def test_settings_are_cached_until_reset(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    first = get_settings()
    assert get_settings() is first
    reset_settings()
    assert get_settings() is not first


def test_invalid_mongo_uri_rejected(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "postgres://localhost/db")
    with pytest.raises(ValidationError):
        DatabaseSettings()


def test_short_secret_key_rejected(monkeypatch):
    monkeypatch.setenv("SECURITY_SECRET_KEY", "too-short")
    with pytest.raises(ValidationError):
        SecuritySettings()
