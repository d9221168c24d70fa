"""
Field extraction for Dialogflow parameter bags.

Parameters arrive loosely typed: plain strings for @sys.email, objects such as
{"name": "Ali", "original": "ali"} for @sys.person, or empty strings when a
slot was not filled. Each field is resolved through an ordered list of key
paths and the first non-empty normalized match wins.
"""

import logging
from typing import Any, Optional, Sequence, Tuple

from app.utils.helpers import get_nested_value

logger = logging.getLogger(__name__)

KeyPath = Tuple[str, ...]

# Object-valued parameters carry their text under one of these keys
_OBJECT_TEXT_KEYS = ("name", "original", "displayName")

NAME_LOOKUPS: Tuple[KeyPath, ...] = (
    ("name",),
    ("person",),
    ("person", "name"),
    ("person", "original"),
    ("given-name",),
)

EMAIL_LOOKUPS: Tuple[KeyPath, ...] = (
    ("email",),
    ("emailAddress",),
    ("email-address",),
)

MESSAGE_LOOKUPS: Tuple[KeyPath, ...] = (
    ("problem",),
    ("issue",),
    ("message",),
    ("problem-description",),
    ("customer_message",),
)


def normalize_field(value: Any) -> Optional[str]:
    """
    Coerces a raw parameter value into a trimmed, non-empty string.

    Strings are trimmed; dicts are read through `name`, `original` and
    `displayName` in that order. Anything else, or anything that ends up
    blank, becomes None.
    """
    if not value:
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, dict):
        for key in _OBJECT_TEXT_KEYS:
            if value.get(key):
                return str(value[key]).strip() or None
    return None


def find_first(parameters: Any, lookups: Sequence[KeyPath]) -> Optional[str]:
    """Tries each key path in order and returns the first normalized hit."""
    if not isinstance(parameters, dict):
        return None

    for path in lookups:
        value = normalize_field(get_nested_value(parameters, path))
        if value:
            logger.debug("Parameter resolved from '%s'", ".".join(path))
            return value
    return None


def extract_name(parameters: Any) -> Optional[str]:
    return find_first(parameters, NAME_LOOKUPS)


def extract_email(parameters: Any) -> Optional[str]:
    return find_first(parameters, EMAIL_LOOKUPS)


def extract_user_message(parameters: Any, fallback_text: Any = None) -> Optional[str]:
    """Problem description from the parameters, else the raw query text."""
    return find_first(parameters, MESSAGE_LOOKUPS) or normalize_field(fallback_text)
