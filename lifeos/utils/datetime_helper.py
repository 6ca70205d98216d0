"""Date helpers"""
from datetime import date, datetime, timezone
from typing import Optional


def get_today_str(now: Optional[datetime] = None) -> str:
    """
    Current UTC date in the format daily contexts are keyed by.

    Args:
        now: Reference time (defaults to the current time). Naive values are taken as UTC.

    Returns:
        str: "2025-10-14" style string
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return format_date(now.astimezone(timezone.utc).date())


def format_date(d: date) -> str:
    return d.isoformat()


def get_utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with a Z suffix"""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
