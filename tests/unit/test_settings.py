from pathlib import Path

import pytest
from pydantic import ValidationError

from criminal_checker.config.settings import Settings, load_settings
from criminal_checker.domain.auth.credentials import MIN_SALT_ITEMS_COUNT

REQUIRED_ENV = {
    "SALT_FILE_PATH": "/run/secrets/salt.txt",
    "SALT_ITEMS_COUNT": "64",
}


def _set_required_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key, value in REQUIRED_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


def test_required_env_var_missing_raises_validation_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _set_required_env(monkeypatch)
    monkeypatch.delenv("SALT_FILE_PATH", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_defaults_are_deterministic(monkeypatch: pytest.MonkeyPatch) -> None:
    _set_required_env(monkeypatch)

    settings = Settings(_env_file=None)

    assert settings.salt_file_path == "/run/secrets/salt.txt"
    assert settings.salt_items_count == 64
    assert settings.log_level == "INFO"


def test_empty_salt_file_path_raises_validation_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _set_required_env(monkeypatch)
    monkeypatch.setenv("SALT_FILE_PATH", "")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize("count", ["20", "0", "-1"])
def test_salt_items_count_at_or_below_minimum_raises_validation_error(
    monkeypatch: pytest.MonkeyPatch,
    count: str,
) -> None:
    _set_required_env(monkeypatch)
    monkeypatch.setenv("SALT_ITEMS_COUNT", count)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_salt_items_count_just_above_minimum_is_accepted(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _set_required_env(monkeypatch)
    monkeypatch.setenv("SALT_ITEMS_COUNT", "21")

    assert Settings(_env_file=None).salt_items_count == 21


def test_log_level_is_read_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    _set_required_env(monkeypatch)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    assert Settings(_env_file=None).log_level == "DEBUG"


def test_load_settings_is_cached(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _set_required_env(monkeypatch)
    monkeypatch.chdir(tmp_path)
    load_settings.cache_clear()

    try:
        first = load_settings()
        monkeypatch.setenv("SALT_ITEMS_COUNT", "99")
        second = load_settings()
    finally:
        load_settings.cache_clear()

    assert first is second
    assert second.salt_items_count == 64


def test_salt_items_count_floor_matches_hasher_minimum(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _set_required_env(monkeypatch)
    monkeypatch.setenv("SALT_ITEMS_COUNT", str(MIN_SALT_ITEMS_COUNT))

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
