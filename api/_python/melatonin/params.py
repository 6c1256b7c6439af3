"""
Query-string parsing for the page and the timeline endpoint.

The page never rejects input: the slider's bounds clamp the hour and
unreadable values fall back to the first-load defaults. The JSON endpoint
accepts any integer hour and reports anything else as an error.
"""

import logging
import re
from urllib.parse import parse_qs

from .content import FAQ_ITEMS
from .exceptions import InvalidParameterError
from .faq import DEFAULT_OPEN_INDEX
from .types import PageState

logger = logging.getLogger(__name__)

DEFAULT_HOUR = 22
MIN_HOUR = 0
MAX_HOUR = 23
MAX_QUERY_LENGTH = 2048  # bytes
FAQ_CLOSED = "none"
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: str | None) -> int | None:
    """Parse a base-10 integer, or None if the value isn't one."""
    if value is None:
        return None
    value = value.strip()
    # ASCII digits only; int() also takes "1_0" and non-Latin numerals
    if not INTEGER_PATTERN.fullmatch(value):
        return None
    return int(value)


def parse_hour(value: str | None) -> int:
    """
    Selected hour from a query value.

    Args:
        value: Raw "hour" value, or None if absent

    Returns:
        Hour clamped to 0-23; DEFAULT_HOUR if missing or not an integer
    """
    hour = _parse_int(value)
    if hour is None:
        if value:
            logger.debug("Ignoring non-integer hour %r", value)
        return DEFAULT_HOUR
    clamped = min(max(hour, MIN_HOUR), MAX_HOUR)
    if clamped != hour:
        logger.debug("Clamped hour %d to %d", hour, clamped)
    return clamped


def parse_faq_index(value: str | None, item_count: int) -> int | None:
    """
    Open FAQ index from a query value.

    Args:
        value: Raw "faq" value, or None if absent
        item_count: Number of FAQ items on the page

    Returns:
        None for "none" or an out-of-range index (all collapsed);
        DEFAULT_OPEN_INDEX if missing or unreadable
    """
    if value is not None and value.strip().lower() == FAQ_CLOSED:
        return None
    index = _parse_int(value)
    if index is None:
        return DEFAULT_OPEN_INDEX
    if not 0 <= index < item_count:
        logger.debug("FAQ index %d out of range, collapsing all", index)
        return None
    return index


def first_values(query: str) -> dict[str, str]:
    """First value of each key in a query string (blank values kept)."""
    if len(query) > MAX_QUERY_LENGTH:
        logger.debug("Ignoring query string of %d bytes", len(query))
        return {}
    return {key: values[0] for key, values in parse_qs(query, keep_blank_values=True).items()}


def format_faq_value(index: int | None) -> str:
    """Query value that encodes an open FAQ index."""
    return FAQ_CLOSED if index is None else str(index)


def parse_api_hour(value: str | None) -> int:
    """
    Hour for the timeline endpoint.

    Any integer is accepted as-is; normalization happens in the resolver.

    Raises:
        InvalidParameterError: If the value is missing or not an integer
    """
    if value is None or not value.strip():
        raise InvalidParameterError("Missing required parameter: hour")
    hour = _parse_int(value)
    if hour is None:
        raise InvalidParameterError(f"Invalid hour: {value}")
    return hour


def parse_page_state(query: str) -> PageState:
    """Page state from a raw query string ("hour=3&faq=none")."""
    values = first_values(query)
    return PageState(
        hour=parse_hour(values.get("hour")),
        open_faq_index=parse_faq_index(values.get("faq"), len(FAQ_ITEMS)),
    )
