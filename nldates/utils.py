"""
Calendar primitives used by the recognizers: the current instant, unit
arithmetic, Sunday-based day-of-week navigation and moment-style formatting.
"""

import calendar
from datetime import datetime, timedelta

import pendulum
from dateutil.relativedelta import relativedelta
from tzlocal import get_localzone

from nldates.conf import WEEKDAYS

CANONICAL_UNITS = ("minute", "hour", "day", "week", "month", "year")


def now():
    """Current local wall-clock time as a naive datetime."""
    return datetime.now(get_localzone()).replace(tzinfo=None)


def shift(date_obj, count, unit):
    """Add ``count`` (possibly negative) ``unit``s to ``date_obj``.

    Month and year arithmetic clamp to the last valid day of the target month,
    as ``relativedelta`` does.
    """
    if unit not in CANONICAL_UNITS:
        raise ValueError("Invalid unit: %s" % unit)
    return date_obj + relativedelta(**{unit + "s": count})


def day_of_week(date_obj):
    """Day index with Sunday = 0 ... Saturday = 6."""
    return (date_obj.weekday() + 1) % 7


def set_day_of_week(date_obj, index):
    """Move to day ``index`` of the Sunday-based week containing ``date_obj``."""
    return date_obj + timedelta(days=index - day_of_week(date_obj))


def start_of_day(date_obj):
    return date_obj.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_month(date_obj):
    return start_of_day(date_obj).replace(day=1)


def start_of_year(date_obj):
    return start_of_month(date_obj).replace(month=1)


def is_before_day(date_obj, other):
    return date_obj.date() < other.date()


def iter_days(start, end):
    """Yield every calendar day from ``start`` to ``end`` inclusive."""
    current = start
    while current.date() <= end.date():
        yield current
        current += timedelta(days=1)


def week_start_index(preference):
    """Resolve a ``WEEK_START`` setting to a Sunday-based day index."""
    if preference == "locale-default":
        # calendar counts Monday as 0
        return (calendar.firstweekday() + 1) % 7
    return WEEKDAYS.index(preference.lower())


def format_date(date_obj, pattern):
    """Format ``date_obj`` with a moment.js style pattern, e.g. ``YYYY-MM-DD HH:mm``.

    Text wrapped in square brackets is copied verbatim.
    """
    return pendulum.instance(date_obj).format(pattern)
