"""Tests for environment settings and Contact snapshot construction."""

import pytest

from addressbook.domain import Contact
from menu.settings import Settings


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("ADDRESSBOOK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ADDRESSBOOK_DEFAULT_REGION", raising=False)
    assert Settings.from_env() == Settings(log_level="WARNING", default_region=None)


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("ADDRESSBOOK_LOG_LEVEL", "debug")
    monkeypatch.setenv("ADDRESSBOOK_DEFAULT_REGION", " ps ")
    settings = Settings.from_env()
    assert settings.log_level == "DEBUG"
    assert settings.default_region == "PS"


def test_contact_requires_name_and_number() -> None:
    with pytest.raises(ValueError):
        Contact(id=1, name="  ", category="Other", phone_numbers=("1111111",))
    with pytest.raises(ValueError):
        Contact(id=1, name="Alice", category="Other", phone_numbers=())


def test_contact_numbers_stored_as_tuple() -> None:
    numbers = ["111", "222"]
    contact = Contact(id=1, name="Alice", category="Other", phone_numbers=numbers)
    numbers.append("333")
    assert contact.phone_numbers == ("111", "222")


def test_unknown_log_level_falls_back_to_warning(monkeypatch) -> None:
    monkeypatch.setenv("ADDRESSBOOK_LOG_LEVEL", "verbose")
    assert Settings.from_env().log_level == "WARNING"
    monkeypatch.setenv("ADDRESSBOOK_LOG_LEVEL", "  ")
    assert Settings.from_env().log_level == "WARNING"
