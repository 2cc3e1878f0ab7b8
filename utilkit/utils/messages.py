"""
Localized user-visible messages.

Every string a utility returns or puts in an exception comes from this catalog,
keyed by locale and message id. English is the default locale; French mirrors
the wording of the first version of these utilities.
"""

from typing import Dict, Optional

DEFAULT_LOCALE = "en"

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "greeting": "Hello, {name}!",
        "unknown_name": "unknown",
        "arguments_must_be_numbers": "arguments must be numbers",
        "argument_must_be_sequence": "argument must be a sequence",
        "fetch_result": "Data after {delay_ms}ms",
        "invalid_delay": "invalid delay: {delay_ms!r}",
    },
    "fr": {
        "greeting": "Bonjour, {name} !",
        "unknown_name": "inconnu",
        "arguments_must_be_numbers": "Les arguments doivent être des nombres",
        "argument_must_be_sequence": "L'argument doit être un tableau",
        "fetch_result": "Données après {delay_ms}ms",
        "invalid_delay": "Délai invalide : {delay_ms!r}",
    },
}

SUPPORTED_LOCALES = tuple(MESSAGES)


def resolve_locale(locale: Optional[str] = None) -> str:
    """
    Pick the locale to use for a message.

    An explicit locale wins; otherwise the configured locale from settings is
    used. Unknown locales raise ValueError rather than silently falling back.

    Args:
        locale: Explicit locale code ("en", "fr") or None.

    Returns:
        A supported locale code.

    Raises:
        ValueError: If the locale is not in the catalog.
    """
    if locale is None:
        # Imported lazily: settings imports this module for validation
        from utilkit.config.settings import get_settings
        locale = get_settings().utility.locale

    if locale not in MESSAGES:
        raise ValueError(
            f"Unsupported locale: {locale!r}. "
            f"Expected one of: {', '.join(SUPPORTED_LOCALES)}"
        )
    return locale


def get_message(key: str, locale: Optional[str] = None, **params) -> str:
    """
    Look up a message and fill in its placeholders.

    Args:
        key: Message id (e.g. "greeting").
        locale: Explicit locale, or None for the configured one.
        **params: Values for the message placeholders.

    Returns:
        The formatted message.

    Raises:
        KeyError: If the message id is unknown.
        ValueError: If the locale is unsupported.

    Usage example:
        >>> get_message("greeting", "fr", name="Alice")
        'Bonjour, Alice !'
    """
    template = MESSAGES[resolve_locale(locale)][key]
    return template.format(**params)
