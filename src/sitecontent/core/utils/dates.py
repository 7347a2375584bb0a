"""Conversion of frontmatter date values to comparable UTC instants"""

from datetime import UTC, date, datetime

from dateutil import parser as date_parser


def to_instant(value) -> datetime:
    """Return value as a timezone-aware UTC datetime.

    Accepts datetime, date (midnight UTC), ISO 8601 strings and any other
    string dateutil can read. Naive values are taken to be UTC. Raises
    ValueError when the value is empty or unparseable.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        parsed = _parse_string(value)
    else:
        raise ValueError(f"expected a date, got {type(value).__name__}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def _parse_string(text: str) -> datetime:
    normalized = text.strip()
    if not normalized:
        raise ValueError("empty date string")
    try:
        return date_parser.isoparse(normalized)
    except (ValueError, OverflowError):
        pass
    try:
        return date_parser.parse(normalized)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"unparseable date {text!r}") from e
