"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from marketplace.infrastructure.config import DEV_SECRET_KEY, Settings


def test_defaults(monkeypatch):
    for name in (
        "MARKETPLACE_DATA_DIR",
        "MARKETPLACE_SECRET_KEY",
        "MARKETPLACE_TOKEN_TTL",
        "MARKETPLACE_BCRYPT_ROUNDS",
        "MARKETPLACE_VERIFY_CATALOG",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.secret_key == DEV_SECRET_KEY
    assert settings.uses_dev_secret
    assert settings.token_ttl_seconds == 86400
    assert settings.bcrypt_rounds == 12
    assert settings.verify_catalog is False
    assert settings.log_level == "WARNING"


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MARKETPLACE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("MARKETPLACE_SECRET_KEY", "prod-secret")
    monkeypatch.setenv("MARKETPLACE_TOKEN_TTL", "60")
    monkeypatch.setenv("MARKETPLACE_BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("MARKETPLACE_VERIFY_CATALOG", "Yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.data_dir == Path(tmp_path)
    assert not settings.uses_dev_secret
    assert settings.token_ttl_seconds == 60
    assert settings.bcrypt_rounds == 4
    assert settings.verify_catalog is True
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("name", ["MARKETPLACE_TOKEN_TTL", "MARKETPLACE_BCRYPT_ROUNDS"])
def test_non_numeric_integer_setting(monkeypatch, name):
    monkeypatch.setenv(name, "lots")
    with pytest.raises(ValueError, match=f"{name} must be an integer"):
        Settings.from_env()
