"""Timestamp parsing and relative-date labels"""

from datetime import datetime, timedelta

from docview.core.errors import FormatError


_ONE_DAY = timedelta(days=1)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 date ('2023-05-10') or timestamp into a datetime."""
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise FormatError(f"Invalid timestamp {value!r}: {e}") from e


def _comparable(modified: datetime, now: datetime) -> tuple[datetime, datetime]:
    """Make a naive/aware pair comparable by reading naive values as local time."""
    if (modified.tzinfo is None) != (now.tzinfo is None):
        return modified.astimezone(), now.astimezone()
    return modified, now


def whole_days_between(modified: datetime, now: datetime) -> int:
    """Signed whole days from now to modified, truncated toward zero."""
    modified, now = _comparable(modified, now)
    delta = modified - now
    days = abs(delta) // _ONE_DAY
    return -days if delta < timedelta(0) else days


def format_relative_date(modified: datetime, now: datetime | None = None) -> str:
    """Return a short label such as 'today', '3 days ago' or '2 weeks from now'.

    Rules are evaluated in order and the first match wins. Future offsets of
    two to seven days fall through to the generic 'N days from now' label,
    and a single future week still reads '1 weeks from now'.
    """
    if now is None:
        now = datetime.now(modified.tzinfo)
    days = whole_days_between(modified, now)

    if days == 0:
        return "today"
    if days == 1:
        return "tomorrow"
    if days == -1:
        return "yesterday"
    if days > 7:
        return f"{days // 7} weeks from now"
    if -14 < days < -7:
        return f"{abs(days) // 7} week ago"
    if days < -7:
        return f"{abs(days) // 7} weeks ago"
    if days < 0:
        return f"{abs(days)} days ago"
    return f"{days} days from now"
