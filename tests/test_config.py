"""Tests for configuration helpers."""

import pytest

from diet_planner.config import Settings, parse_locale


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("tr_tr", "tr-TR"),
        (" en-us ", "en-US"),
        ("DE", "de"),
        ("", "tr-TR"),
        (None, "tr-TR"),
        ("12-34", "tr-TR"),
    ],
)
def test_parse_locale(raw: str | None, expected: str) -> None:
    assert parse_locale(raw) == expected


def test_parse_locale_uses_given_default() -> None:
    assert parse_locale("  ", default="en-GB") == "en-GB"


def test_settings_defaults(settings: Settings) -> None:
    assert settings.fdc_api_key is None
    assert settings.supabase_url is None
    assert settings.default_locale == "tr-TR"
    assert settings.openai_store is False
