"""Key normalization and English inflection helpers.

Zoho Desk returns lowerCamelCase keys (``ticketNumber``, ``webUrl``). Records
expose them in snake_case, and resource names are pluralized/singularized to
derive loader names (``tickets`` -> ``load_tickets`` / ``load_ticket``).
"""

import re
from collections.abc import Mapping
from typing import Any, Dict, List, Tuple

import inflection

# Acronyms are kept whole: lowercase form -> display form
_ACRONYMS: Dict[str, str] = {}
_ACRONYM_PATTERNS: List[Tuple[re.Pattern, str]] = []


def add_acronym(word: str) -> None:
    """Register an acronym that is never split or suffixed letter by letter."""
    _ACRONYMS[word.lower()] = word
    # Fold "webURL" / "URLField" / "imageURLs" into capitalized words so the
    # snake_case conversion treats the acronym as one word.
    pattern = re.compile(rf"(?<![A-Z]){re.escape(word)}(?=s?(?:[^a-z]|$))")
    _ACRONYM_PATTERNS.append((pattern, word.capitalize()))


add_acronym("URL")


def underscore(key: Any) -> Any:
    """Convert a camelCase key to snake_case.

    Non-string keys are returned unchanged, and keys that are already in
    snake_case (digits included, e.g. ``cf_address_line1``) come back as they
    went in.
    """
    if not isinstance(key, str):
        return key
    for pattern, replacement in _ACRONYM_PATTERNS:
        key = pattern.sub(replacement, key)
    return inflection.underscore(key)


def normalize_keys(value: Any) -> Any:
    """Recursively rewrite every mapping key in ``value`` to snake_case."""
    if isinstance(value, Mapping):
        return {underscore(k): normalize_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [normalize_keys(item) for item in value]
    if isinstance(value, tuple):
        return tuple(normalize_keys(item) for item in value)
    return value


def is_uncountable(word: str) -> bool:
    """Check whether the last segment of ``word`` has no distinct plural."""
    return word.rpartition("_")[2].lower() in inflection.UNCOUNTABLES


def pluralize(word: str) -> str:
    """Return the plural form of ``word`` (the last segment of a snake_case name)."""
    prefix, sep, last = word.rpartition("_")
    if not last or is_uncountable(last):
        return word
    if last.lower() in _ACRONYMS:
        return prefix + sep + last + "s"
    return prefix + sep + inflection.pluralize(last)


def singularize(word: str) -> str:
    """Return the singular form of ``word`` (the last segment of a snake_case name)."""
    prefix, sep, last = word.rpartition("_")
    lowered = last.lower()
    if not last or is_uncountable(last) or lowered in _ACRONYMS:
        return word
    if lowered.endswith("s") and lowered[:-1] in _ACRONYMS:
        return prefix + sep + last[:-1]
    return prefix + sep + inflection.singularize(last)
