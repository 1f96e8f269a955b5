"""
Date ranges: "from monday to friday" and "next week".
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from nldates.utils import is_before_day, iter_days, set_day_of_week, shift

logger = logging.getLogger(__name__)


@dataclass
class DateRange:
    """An inclusive range of calendar days."""
    start: datetime
    end: datetime
    included_days: List[datetime] = field(default_factory=list)

    def __post_init__(self):
        if not self.included_days:
            self.included_days = list(iter_days(self.start, self.end))

    def __repr__(self) -> str:
        return (
            f"DateRange(start={self.start.date().isoformat()}, "
            f"end={self.end.date().isoformat()}, days={len(self.included_days)})"
        )


def weekday_range(start_index: int, end_index: int, now: datetime) -> DateRange:
    """
    Range from the next ``start_index`` day to the following ``end_index`` day.

    Both indexes are Sunday-based. The start rolls over to next week when this
    week's occurrence is already past; the end is never before the start.
    """
    start = set_day_of_week(now, start_index)
    if is_before_day(start, now):
        start = shift(start, 1, 'week')

    end = set_day_of_week(now, end_index)
    if is_before_day(end, start):
        end = shift(end, 1, 'week')
    if is_before_day(end, start):
        end = set_day_of_week(shift(start, 1, 'week'), end_index)

    return DateRange(start=start, end=end)


def next_week_range(week_start: int, now: datetime) -> DateRange:
    """The seven days of next week, starting on ``week_start`` (Sunday = 0)."""
    start = set_day_of_week(shift(now, 1, 'week'), week_start)
    return DateRange(start=start, end=shift(start, 6, 'day'))


class RangeExtractor:
    """
    Resolves range expressions with the weekday-range recognizer and the
    "next" period pattern of ``recognizers``.
    """

    def __init__(self, recognizers, clock):
        self.recognizers = recognizers
        self.keywords = recognizers.keywords
        self.clock = clock

    def resolve(self, text: str, week_start: int) -> Optional[DateRange]:
        now = self.clock()
        date_range = None

        match = self.recognizers.match("weekday_range", text)
        if match:
            date_range = weekday_range(
                self.keywords.day_index_of(match.group(1)),
                self.keywords.day_index_of(match.group(2)),
                now,
            )
        else:
            period = self.recognizers.next_period(text)
            if period and self.keywords.means(period, "week"):
                date_range = next_week_range(week_start, now)

        if date_range is not None:
            logger.debug("Range %r resolved from %r", date_range, text)
        return date_range

    def next_week(self, week_start: int) -> DateRange:
        return next_week_range(week_start, self.clock())
