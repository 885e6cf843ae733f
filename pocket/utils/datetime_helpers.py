from datetime import date, datetime, timedelta, timezone

DATE_FORMAT = "%Y-%m-%d"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def add_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


def add_months(value: date, months: int) -> date:
    """
    Shift by calendar months.

    A day missing from the target month rolls over into the next one:
    Jan 31 + 1 month is Mar 2 in a leap year.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, 1) + timedelta(days=value.day - 1)


def add_years(value: date, years: int) -> date:
    return add_months(value, years * 12)


def parse_date(value: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` string.

    Raises:
        ValueError: If the string is not a valid calendar date.
    """
    return datetime.strptime(value.strip(), DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_timestamp(value: datetime) -> str:
    return value.isoformat()
