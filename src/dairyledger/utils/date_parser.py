"""Date and month parsing utilities."""

from datetime import date, datetime, time, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month(month_str: str) -> date:
    """Parse a month string into the first day of that month.

    Accepts "2025-03", "March 2025", "mar 2025", "this month", "last month"
    and anything ``parse_date`` understands (the day is discarded).

    Raises:
        ValueError: If month string cannot be parsed
    """
    month_str = month_str.strip().lower()
    today = date.today()

    if month_str in ("this month", "this-month", "current"):
        return today.replace(day=1)
    if month_str in ("last month", "last-month", "previous"):
        return (today - relativedelta(months=1)).replace(day=1)

    try:
        # Default day 1 so "2025-02" does not borrow today's day-of-month
        dt = date_parser.parse(month_str, default=datetime(today.year, 1, 1))
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse month '{month_str}': {e}")
    return dt.date().replace(day=1)


def get_month_range(month: date) -> tuple[date, date]:
    """Get the first and last calendar day of the month containing ``month``.

    Args:
        month: Any day within the target month

    Returns:
        Tuple of (month_start, month_end)
    """
    month_start = month.replace(day=1)
    month_end = month_start + relativedelta(months=1) - timedelta(days=1)
    return (month_start, month_end)


def get_day_bounds(day: date) -> tuple[datetime, datetime]:
    """Get the first and last instant of a day for inclusive range queries."""
    return (datetime.combine(day, time.min), datetime.combine(day, time.max))


def recent_months(count: int = 6, today: date | None = None) -> list[date]:
    """List the first day of the current and previous months, newest first."""
    today = today or date.today()
    first = today.replace(day=1)
    return [first - relativedelta(months=offset) for offset in range(count)]
