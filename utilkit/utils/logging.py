"""
Logging setup for the utilkit command line.

Library modules only create module loggers (logging.getLogger(__name__)) and
never attach handlers. Entry points call configure_logging() once to send
records to stderr through a Rich console handler.
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "utilkit"


class ThirdPartyPrefixFilter(logging.Filter):
    """
    Annotate third-party log records with a short prefix.

    Records from outside the utilkit package get record.prefix set to a
    bracketed token such as "[asyncio]"; utilkit records get an empty prefix.
    Always returns True.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "asyncio.base_events" -> "[asyncio]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def parse_log_level(level: Union[int, str]) -> int:
    """
    Convert a level name ("debug", "INFO") or number to a logging level.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """
    Create a RichHandler writing to stderr.

    In debug mode the handler logs at DEBUG and shows the source path of each
    record; otherwise third-party records are prefixed with their package name.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: Enable debug formatting.
        color: Enable color output.

    Returns:
        Configured RichHandler.
    """
    console = Console(color_system="auto" if color else None, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
    )

    fmt = "%(prefix)s %(message)s" if not debug_mode else "%(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def configure_logging(
    level: Optional[Union[int, str]] = None, color: bool = True
) -> RichHandler:
    """
    Attach a Rich console handler to the root logger.

    Replaces any RichHandler installed by an earlier call so repeated calls do
    not duplicate output.

    Args:
        level: Level name or number; None uses UTILKIT_LOG_LEVEL from settings.
        color: Enable color output.

    Returns:
        The installed handler.
    """
    if level is None:
        from utilkit.config.settings import get_settings
        level = get_settings().utility.log_level

    numeric_level = parse_log_level(level)
    handler = config_console_handler(
        level=numeric_level,
        debug_mode=numeric_level <= logging.DEBUG,
        color=color,
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(numeric_level)
    return handler
