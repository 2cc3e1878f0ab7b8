"""
Tests for utilkit/utils/text.py

greet() never raises; build_greeting() adds a timestamp from an injected clock
so its output can be compared against a literal expected value.
"""

from datetime import datetime, timezone

import pytest

from utilkit.utils.text import Greeting, build_greeting, greet


def test_greet_valid_name():
    """Test greet returns a personalised greeting for a non-empty string."""
    assert greet("Alice") == "Hello, Alice!"


@pytest.mark.parametrize("name", ["", None, 123, 4.5, ["Bob"], {"name": "Bob"}])
def test_greet_invalid_names_fall_back_to_unknown(name):
    """Test empty, missing and non-text names are greeted as unknown."""
    assert greet(name) == "Hello, unknown!"


def test_greet_whitespace_is_kept_verbatim():
    """Test a whitespace-only string is still non-empty text."""
    assert greet("  ") == "Hello,   !"


def test_greet_french_locale():
    """Test French greetings, including the fallback."""
    assert greet("Alice", locale="fr") == "Bonjour, Alice !"
    assert greet(None, locale="fr") == "Bonjour, inconnu !"


def test_greet_uses_configured_locale(monkeypatch):
    """Test greet picks up UTILKIT_LOCALE when no locale is passed."""
    from utilkit.config.settings import reset_settings

    monkeypatch.setenv("UTILKIT_LOCALE", "fr")
    reset_settings()

    assert greet("Bob") == "Bonjour, Bob !"


def test_build_greeting_matches_expected_structure(manual_clock):
    """Test the structured greeting equals a literal expected dict."""
    result = build_greeting("Bob", manual_clock)

    assert result.to_dict() == {
        "message": "Hello, Bob!",
        "timestamp": "2024-01-15T09:30:00+00:00",
    }


def test_build_greeting_returns_greeting(manual_clock, start_time):
    """Test build_greeting returns a frozen Greeting with the clock's time."""
    result = build_greeting("", manual_clock)

    assert isinstance(result, Greeting)
    assert result.message == "Hello, unknown!"
    assert result.timestamp == start_time

    with pytest.raises(AttributeError):
        result.message = "changed"


def test_build_greeting_default_clock_is_real_time():
    """Test build_greeting without a clock stamps the current UTC time."""
    before = datetime.now(timezone.utc)
    result = build_greeting("Alice")
    after = datetime.now(timezone.utc)

    assert before <= result.timestamp <= after


def test_greet_unsupported_locale_is_a_configuration_error(monkeypatch):
    """Test only the locale, never the name, can make greet raise."""
    from utilkit.config.settings import reset_settings

    with pytest.raises(ValueError, match="Unsupported locale"):
        greet("Alice", locale="de")

    monkeypatch.setenv("UTILKIT_LOCALE", "de")
    reset_settings()

    with pytest.raises(ValueError, match="UTILKIT_LOCALE"):
        greet("Alice")
