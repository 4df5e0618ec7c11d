"""Calendar-date formatting.

``format_date`` reduces any supported point-in-time value to its
``YYYY-MM-DD`` calendar date. Timezone-aware values are normalized to UTC
first, so the same instant always yields the same date regardless of the
offset it was expressed in. Naive values are taken at face value.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timezone

from scanfixtures.exceptions import InvalidInputError
from scanfixtures.types import DateInput

logger = logging.getLogger(__name__)


def format_date(value: DateInput) -> str:
    """Return the ``YYYY-MM-DD`` calendar date for a point-in-time value.

    Args:
        value: A ``datetime``, ``date``, POSIX timestamp in seconds, or an
            ISO-8601 date/datetime string.

    Raises:
        InvalidInputError: If ``value`` cannot be interpreted as a date.
    """
    return _to_date(value).isoformat()


def _to_date(value: object) -> date:
    if isinstance(value, datetime):
        return _datetime_to_date(value)
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        raise _invalid(value, "booleans are not timestamps")
    if isinstance(value, int | float):
        return _timestamp_to_date(value)
    if isinstance(value, str):
        return _datetime_to_date(_parse_iso(value))
    raise _invalid(value, f"unsupported type {type(value).__name__}")


def _datetime_to_date(value: datetime) -> date:
    if value.utcoffset() is None:
        return value.date()
    try:
        return value.astimezone(timezone.utc).date()
    except OverflowError as exc:
        raise _invalid(value, "outside the representable UTC range") from exc


def _timestamp_to_date(value: int | float) -> date:
    try:
        finite = math.isfinite(value)
    except OverflowError as exc:
        raise _invalid(value, "timestamp out of range") from exc
    if not finite:
        raise _invalid(value, "timestamp must be finite")
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc).date()
    except (OverflowError, OSError, ValueError) as exc:
        raise _invalid(value, "timestamp out of range") from exc


def _parse_iso(text: str) -> datetime:
    stripped = text.strip()
    if not stripped:
        raise _invalid(text, "empty string")
    try:
        return datetime.fromisoformat(stripped)
    except ValueError as exc:
        raise _invalid(text, "not an ISO-8601 date") from exc


def _invalid(value: object, reason: str) -> InvalidInputError:
    logger.debug("Rejected date input %r: %s", value, reason)
    return InvalidInputError(f"Cannot format {value!r} as a date: {reason}")
