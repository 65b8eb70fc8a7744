"""Whole-day date arithmetic helpers."""

from datetime import date, datetime, timedelta


def add_days(value: datetime, days: int) -> datetime:
    """Shift a timestamp by a signed number of whole days."""
    return value + timedelta(days=days)


def day_number(value: date) -> int:
    """Proleptic ordinal of the calendar day (time of day is dropped)."""
    return value.toordinal()


def from_day_number(number: int) -> date:
    """Inverse of ``day_number``."""
    return date.fromordinal(number)

