"""Tests for configuration parsing."""

import pytest

from moodlog import config


def test_locale_first_weekday():
    """Should follow the locale's calendar convention (Monday = 0)."""
    assert config.locale_first_weekday("en_US") == 6
    assert config.locale_first_weekday("de_DE") == 0


def test_locale_first_weekday_uses_host_locale(monkeypatch):
    monkeypatch.setattr(config, "default_locale", lambda: "en_US")

    assert config.locale_first_weekday() == 6


def test_locale_first_weekday_without_locale(monkeypatch):
    monkeypatch.setattr(config, "default_locale", lambda: None)

    assert config.locale_first_weekday() == 0


def test_locale_first_weekday_unknown_locale():
    assert config.locale_first_weekday("xx") == 0


def test_parse_first_weekday_default_is_locale(monkeypatch):
    monkeypatch.setattr(config, "default_locale", lambda: "en_US")

    assert config.parse_first_weekday(None) == 6
    assert config.parse_first_weekday("  ") == 6


def test_parse_first_weekday_explicit():
    assert config.parse_first_weekday("0") == 0
    assert config.parse_first_weekday("6") == 6


def test_parse_first_weekday_rejects_non_integer():
    with pytest.raises(ValueError, match="must be an integer"):
        config.parse_first_weekday("sunday")


@pytest.mark.parametrize("value", ["7", "9", "-1"])
def test_parse_first_weekday_rejects_out_of_range(value):
    """Should fail instead of wrapping values outside 0-6."""
    with pytest.raises(ValueError, match="between 0"):
        config.parse_first_weekday(value)
