"""Locale-aware summary lines for check results.

Counts are formatted with Babel's CLDR number rules so the --stats line
reads naturally in the user's locale ("1,234" in en_US, "1.234" in de_DE).

Python 3.13+.
"""

import logging
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from babel.numbers import format_decimal

from depcycle.check import CheckResult
from depcycle.constants import DEFAULT_LOCALE

__all__ = ["format_summary", "resolve_locale"]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=32)
def resolve_locale(locale_code: str) -> Locale:
    """Parse a locale code, falling back to DEFAULT_LOCALE.

    Accepts both BCP 47 (``en-US``) and POSIX (``en_US``) separators.
    Unknown or malformed codes are logged and replaced by the default.
    """
    normalized = locale_code.strip().replace("-", "_")
    try:
        return Locale.parse(normalized)
    except UnknownLocaleError as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s",
            locale_code,
            e,
            DEFAULT_LOCALE,
        )
    return Locale.parse(DEFAULT_LOCALE)


def format_summary(result: CheckResult, locale_code: str = DEFAULT_LOCALE) -> str:
    """Return ``"<verdict> (nodes: N, edges: M)"`` with localized counts.

    Example:
        >>> format_summary(CheckResult(False, 1234, 5678))
        'No Cyclic dependency (nodes: 1,234, edges: 5,678)'
        >>> format_summary(CheckResult(True, 1234, 5678), "de_DE")
        'Cyclic dependency (nodes: 1.234, edges: 5.678)'
    """
    locale = resolve_locale(locale_code)
    nodes = format_decimal(result.node_count, locale=locale)
    edges = format_decimal(result.edge_count, locale=locale)
    return f"{result.message} (nodes: {nodes}, edges: {edges})"
