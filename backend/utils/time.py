"""Time-related utility functions."""

from datetime import date, datetime, time


def parse_clock(time_str: str) -> time:
    """Parse an HH:MM clock string into a time."""
    return datetime.strptime(time_str, "%H:%M").time()


def clock_minutes(time_str: str) -> int:
    """Minutes since midnight for an HH:MM clock string."""
    t = parse_clock(time_str)
    return t.hour * 60 + t.minute


def parse_day(date_str: str) -> date:
    """Parse a YYYY-MM-DD date string."""
    return date.fromisoformat(date_str)


def combine(date_str: str, time_str: str) -> datetime:
    """Get the wall-clock instant for a date and an HH:MM time, taken literally."""
    return datetime.combine(parse_day(date_str), parse_clock(time_str))
