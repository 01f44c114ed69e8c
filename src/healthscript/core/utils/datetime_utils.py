"""
Date and time utility functions for HealthScript application.
"""

from datetime import date, datetime, timezone
from typing import Optional, Union


def format_date(value: Union[date, datetime], format_str: str = "%Y-%m-%d") -> str:
    """Format a date or timestamp to string."""
    return value.strftime(format_str)


def parse_date(date_str: str, format_str: str = "%Y-%m-%d") -> Optional[date]:
    """Parse a date string, returning None when it does not match the format."""
    try:
        return datetime.strptime(date_str, format_str).date()
    except (TypeError, ValueError):
        return None


def get_age_from_birthdate(
    birthdate: Union[str, date, datetime], today: Optional[date] = None
) -> int:
    """Calculate age in whole years from birthdate."""
    if isinstance(birthdate, str):
        parsed = parse_date(birthdate)
        if parsed is None:
            raise ValueError("Invalid date format. Use YYYY-MM-DD")
        birthdate = parsed

    if isinstance(birthdate, datetime):
        birthdate = birthdate.date()

    today = today or date.today()
    age = today.year - birthdate.year

    # Adjust if birthday hasn't occurred this year
    if (today.month, today.day) < (birthdate.month, birthdate.day):
        age -= 1

    return age


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps read back from MongoDB."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
