"""
Report period helpers.

Maps a quarter/year period onto a concrete date range and formats periods
and dates for report headings.
"""

import calendar
from datetime import datetime

from ..providers.models import DateRange, PERIOD_TYPES, ReportPeriod
from ..utils.errors import ValidationError

MIN_YEAR = 1970
MAX_YEAR = 9999

QUARTER_START_MONTH = {
    "Q1": 1,
    "Q2": 4,
    "Q3": 7,
    "Q4": 10,
}

QUARTER_NAMES = {
    "Q1": "First Quarter",
    "Q2": "Second Quarter",
    "Q3": "Third Quarter",
    "Q4": "Fourth Quarter",
}


def validate_period(period: ReportPeriod | None) -> ReportPeriod:
    """Raise ValidationError unless the period carries a known type and a year."""
    if period is None or not period.type or not period.year:
        raise ValidationError("Invalid period specified. Must include type and year.")
    if period.type not in PERIOD_TYPES:
        raise ValidationError(
            f"Invalid period type '{period.type}'. Must be one of: {', '.join(PERIOD_TYPES)}."
        )
    if not MIN_YEAR <= period.year <= MAX_YEAR:
        raise ValidationError(
            f"Invalid period year {period.year}. Must be between {MIN_YEAR} and {MAX_YEAR}."
        )
    return period


def resolve_date_range(period: ReportPeriod) -> DateRange:
    """
    Get the date range covered by a report period.

    A year spans Jan 1 00:00:00 to Dec 31 23:59:59. A quarter spans the first
    instant of its first month to 23:59:59 on the last day of its third month.

    Raises:
        ValidationError: If the type or year is missing or unknown
    """
    period = validate_period(period)
    year = period.year

    if period.type == "year":
        return DateRange(
            start=datetime(year, 1, 1),
            end=datetime(year, 12, 31, 23, 59, 59),
        )

    start_month = QUARTER_START_MONTH[period.type]
    end_month = start_month + 2
    last_day = calendar.monthrange(year, end_month)[1]
    return DateRange(
        start=datetime(year, start_month, 1),
        end=datetime(year, end_month, last_day, 23, 59, 59),
    )


def describe_period(period: ReportPeriod) -> str:
    """Human-readable period, e.g. "Second Quarter 2024" or "Year 2024"."""
    if period.type == "year":
        return f"Year {period.year}"
    return f"{QUARTER_NAMES[period.type]} {period.year}"


def format_date(value: datetime) -> str:
    """Format a date as YYYY-MM-DD"""
    return value.strftime("%Y-%m-%d")


def format_range(date_range: DateRange) -> str:
    return f"{format_date(date_range.start)} to {format_date(date_range.end)}"
