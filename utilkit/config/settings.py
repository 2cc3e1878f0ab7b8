"""
Configuration settings for utilkit.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). All settings are validated
when loaded, so a bad locale or log level fails fast with a clear message
instead of surfacing later inside a utility call.

Settings are frozen dataclasses. Tests can construct them directly instead of
touching the environment, or call reset_settings() after changing variables.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from utilkit.utils.messages import DEFAULT_LOCALE, SUPPORTED_LOCALES

# Load .env from project root (dev/local environments); real env vars win
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


@dataclass(frozen=True)
class UtilitySettings:
    """
    Configuration for the utility functions and the demo CLI.

    Attributes:
        locale: Message locale, "en" or "fr" (default "en").
        log_level: Console log level name for the CLI (default "WARNING").
        default_delay_ms: Delay used by the CLI fetch command when none is
                          given (default 100). Must be non-negative.
    """
    locale: str = DEFAULT_LOCALE
    log_level: str = "WARNING"
    default_delay_ms: int = 100

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.locale not in SUPPORTED_LOCALES:
            raise ValueError(
                f"UTILKIT_LOCALE must be one of {', '.join(SUPPORTED_LOCALES)}, "
                f"got: {self.locale}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(
                f"UTILKIT_LOG_LEVEL must be a logging level name, got: {self.log_level}"
            )
        if self.default_delay_ms < 0:
            raise ValueError(
                f"UTILKIT_DEFAULT_DELAY_MS must be non-negative, got: {self.default_delay_ms}"
            )

    @classmethod
    def from_env(cls) -> "UtilitySettings":
        """
        Load utility settings from environment variables.

        **Environment variables**:
          - UTILKIT_LOCALE (optional): "en" or "fr". Defaults to "en".
          - UTILKIT_LOG_LEVEL (optional): e.g. "INFO". Defaults to "WARNING".
          - UTILKIT_DEFAULT_DELAY_MS (optional): integer milliseconds. Defaults to 100.

        Returns:
            UtilitySettings object with values loaded from environment.

        Raises:
            ValueError: If any variable is present but invalid.
        """
        locale = os.getenv("UTILKIT_LOCALE", DEFAULT_LOCALE).strip().lower()
        log_level = os.getenv("UTILKIT_LOG_LEVEL", "WARNING").strip().upper()
        delay_str = os.getenv("UTILKIT_DEFAULT_DELAY_MS", "100")

        try:
            default_delay_ms = int(delay_str)
        except ValueError:
            raise ValueError(
                f"UTILKIT_DEFAULT_DELAY_MS must be an integer, got: {delay_str}"
            )

        return cls(
            locale=locale,
            log_level=log_level,
            default_delay_ms=default_delay_ms,
        )


@dataclass(frozen=True)
class Settings:
    """
    Global settings for utilkit.

    Top-level object aggregating subsystem settings, so new sections can be
    added without changing call sites (settings.utility, ...).

    Attributes:
        utility: Locale, logging and fetch defaults.
    """
    utility: UtilitySettings = field(default_factory=UtilitySettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load global settings from environment variables."""
        return cls(utility=UtilitySettings.from_env())


# Lazily loaded singleton; tests can inject their own Settings or reset it
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("UTILKIT_LOCALE", "fr")
          reset_settings()
          assert get_settings().utility.locale == "fr"
      ```
    """
    global _default_settings
    _default_settings = None
