import calendar
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Union

from moodlog import config

DateLike = Union[date, datetime]


def day_key(timestamp: DateLike) -> date:
    """Local calendar day of a timestamp.

    Naive datetimes are already local wall-clock time; aware ones are
    converted to the host timezone first.
    """
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is not None:
            timestamp = timestamp.astimezone()
        return timestamp.date()
    return timestamp


def is_same_day(a: DateLike, b: DateLike) -> bool:
    return day_key(a) == day_key(b)


def start_of_day(day: DateLike) -> datetime:
    return datetime.combine(day_key(day), time.min)


def start_of_month(day: DateLike) -> date:
    return day_key(day).replace(day=1)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_days(day: DateLike, delta: int) -> DateLike:
    return day + timedelta(days=delta)


def add_months(day: DateLike, delta: int) -> DateLike:
    # Day of month clamps into shorter months (Jan 31 + 1 -> Feb 28/29)
    month_index = day.year * 12 + (day.month - 1) + delta
    year, month = divmod(month_index, 12)
    month += 1
    return day.replace(year=year, month=month, day=min(day.day, days_in_month(year, month)))


def month_grid(reference: DateLike, first_weekday: Optional[int] = None) -> List[Optional[date]]:
    """
    7-column grid of the month containing `reference`.

    Leading slots before day 1 are None; the last row is not padded.
    Weekdays are numbered Monday=0 .. Sunday=6.
    """
    if first_weekday is None:
        first_weekday = config.FIRST_WEEKDAY

    first_day = start_of_month(reference)
    padding = (first_day.weekday() - first_weekday) % 7

    grid: List[Optional[date]] = [None] * padding
    for offset in range(days_in_month(first_day.year, first_day.month)):
        grid.append(first_day + timedelta(days=offset))
    return grid


def day_label(day: DateLike, today: DateLike) -> str:
    day = day_key(day)
    today = day_key(today)
    if day == today:
        return "Today"
    if day == today - timedelta(days=1):
        return "Yesterday"
    return f"{day:%A, %B} {day.day}, {day.year}"


def month_title(day: DateLike) -> str:
    return f"{day:%B %Y}"


def to_local_naive(value: datetime) -> datetime:
    # Entries are stored as naive local wall-clock time
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value
