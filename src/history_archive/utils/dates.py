"""
Date helpers for naming archive subsections.

Pure functions, no external dependencies.
"""

import re
from datetime import date, datetime, timedelta
from typing import Optional


def today_string(fmt: str = "%Y-%m-%d", now: Optional[datetime] = None) -> str:
    """Local calendar date, zero padded (e.g. "2026-02-05")."""
    return (now or datetime.now()).strftime(fmt)


def parse_date(date_str: str) -> Optional[str]:
    """
    Parse various date formats into ISO 8601 (YYYY-MM-DD).

    Supports:
    - ISO 8601: "2026-02-15"
    - Natural language: "today", "yesterday", "Friday", "last Monday"
    - Relative: "3 days ago", "2 weeks ago"
    - Prose prefixes: "on March 15", "for Friday"

    Weekday names resolve to the most recent such day (archives look back).

    Returns:
        ISO 8601 date string or None if unparseable
    """
    if not date_str:
        return None

    date_str = date_str.strip()
    today = datetime.now().date()

    if date_str.lower() in ("today", "now"):
        return today.isoformat()
    if date_str.lower() == "yesterday":
        return (today - timedelta(days=1)).isoformat()

    for prefix in ("on ", "for "):
        if date_str.lower().startswith(prefix):
            date_str = date_str[len(prefix):].strip()

    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date().isoformat()
    except ValueError:
        pass

    for fmt in ("%B %d", "%b %d", "%m/%d", "%B %d, %Y", "%b %d, %Y"):
        try:
            parsed = datetime.strptime(date_str, fmt).date()
            if parsed.year == 1900:
                parsed = parsed.replace(year=today.year)
                if parsed > today:
                    parsed = parsed.replace(year=today.year - 1)
            return parsed.isoformat()
        except ValueError:
            continue

    day_names = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
    date_lower = date_str.lower()
    is_last = date_lower.startswith("last ")
    if is_last:
        date_lower = date_lower[5:].strip()

    for i, day_name in enumerate(day_names):
        if date_lower == day_name:
            days_back = today.weekday() - i
            if days_back < 0 or (days_back == 0 and is_last):
                days_back += 7
            return (today - timedelta(days=days_back)).isoformat()

    relative_match = re.match(r'(\d+) (days?|weeks?) ago$', date_lower)
    if relative_match:
        amount = int(relative_match.group(1))
        unit = relative_match.group(2)
        delta = timedelta(weeks=amount) if unit.startswith("week") else timedelta(days=amount)
        return (today - delta).isoformat()

    return None


def format_day(iso_day: str, fmt: str = "%Y-%m-%d") -> str:
    """Render an ISO date in the configured heading format."""
    return date.fromisoformat(iso_day).strftime(fmt)
