from datetime import datetime, timedelta, timezone
from typing import Optional


class InvalidTimestamp(ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"invalid timestamp: {value!r}")


def _to_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        # naive timestamps from the API are treated as UTC
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_timestamp(value: str) -> datetime:
    if not isinstance(value, str) or not value.strip():
        raise InvalidTimestamp(value)
    s = value.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        # offsets at the edges of the datetime range overflow on conversion
        return _to_utc(datetime.fromisoformat(s))
    except (ValueError, OverflowError) as e:
        raise InvalidTimestamp(value) from e


def elapsed_seconds(then: datetime, now: Optional[datetime] = None) -> int:
    now = _to_utc(now) if now is not None else datetime.now(timezone.utc)
    # future timestamps clamp to zero
    return max((now - _to_utc(then)) // timedelta(seconds=1), 0)


def time_since(date_string: str, now: Optional[datetime] = None) -> str:
    """
    Coarse "time ago" label for an ISO-8601 timestamp.

    Uses the largest whole unit among seconds/minutes/hours/days, truncated.
    Unit names are always plural. Raises InvalidTimestamp for unparseable input.
    """
    seconds = elapsed_seconds(parse_timestamp(date_string), now)

    if seconds < 60:
        return f"{seconds} seconds ago"
    elif seconds < 3600:
        return f"{seconds // 60} minutes ago"
    elif seconds < 86400:
        return f"{seconds // 3600} hours ago"
    return f"{seconds // 86400} days ago"
