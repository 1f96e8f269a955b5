"""
Formatting layer between the parser and a text editor: turns resolved dates
into the strings that get inserted in place of the selection.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from nldates.conf import Settings, apply_settings, check_settings
from nldates.parser import NLDParser
from nldates.utils import format_date

logger = logging.getLogger(__name__)

RANGE_FORMAT = "YYYY-MM-DD"
RENDER_MODES = ("replace", "link", "clean", "time")


@dataclass
class NLDResult:
    formatted_string: str
    date: datetime


@dataclass
class NLDRangeResult:
    formatted_string: str
    start_date: datetime
    end_date: datetime
    date_list: List[datetime] = field(default_factory=list)


class NaturalLanguageDates:
    """
    Holds the settings and the current :class:`NLDParser`.

    :param settings:
        Configure behavior using settings defined in :mod:`nldates.conf.Settings`.
    :type settings: dict

    :param parser_options:
        Extra keyword arguments for every :class:`NLDParser` built, e.g. ``clock``.
    """

    @apply_settings
    def __init__(self, settings=None, **parser_options):
        self.settings = settings
        self._parser_options = parser_options
        self.parser = None
        self.reset_parser()

    def reset_parser(self):
        """Build a parser for the current languages and swap it in."""
        parser = NLDParser(self.settings.LANGUAGES, **self._parser_options)
        self.parser = parser
        logger.debug("Parser rebuilt for languages %s", list(parser.languages))

    def update_settings(self, settings=None):
        """
        Replace the settings, rebuilding the parser only if the languages changed.

        A dict only overrides the keys it names; the rest keep their current values.
        """
        if isinstance(settings, dict):
            settings = self.settings.replace(**settings)
        if not isinstance(settings, Settings):
            raise TypeError(
                "settings can only be either dict or instance of Settings class"
            )
        check_settings(settings)

        languages_changed = settings.LANGUAGES != self.settings.LANGUAGES
        self.settings = settings
        if languages_changed:
            self.reset_parser()

    def parse(self, date_string, format):
        date = self.parser.resolve_date(date_string, self.settings.WEEK_START)
        formatted_string = format_date(date, format)
        return NLDResult(formatted_string=formatted_string, date=date)

    def parse_date(self, date_string):
        """Format with the date format, adding the time format when a time was given."""
        format = self.settings.DATE_FORMAT
        if self.parser.has_explicit_time(date_string):
            format = "%s%s%s" % (format, self.settings.SEPARATOR, self.settings.TIME_FORMAT)
        return self.parse(date_string, format)

    def parse_time(self, date_string):
        return self.parse(date_string, self.settings.TIME_FORMAT)

    def parse_range(self, date_string):
        date_range = self.parser.resolve_range(date_string, self.settings.WEEK_START)
        if date_range is None:
            return None
        return NLDRangeResult(
            formatted_string="%s to %s" % (
                format_date(date_range.start, RANGE_FORMAT),
                format_date(date_range.end, RANGE_FORMAT),
            ),
            start_date=date_range.start,
            end_date=date_range.end,
            date_list=list(date_range.included_days),
        )

    def has_time_component(self, date_string):
        return self.parser.has_explicit_time(date_string)

    def now(self):
        format = "%s%s%s" % (self.settings.DATE_FORMAT, self.settings.SEPARATOR, self.settings.TIME_FORMAT)
        return format_date(self.parser.clock(), format)

    def current_date(self):
        return format_date(self.parser.clock(), self.settings.DATE_FORMAT)

    def current_time(self):
        return format_date(self.parser.clock(), self.settings.TIME_FORMAT)

    def render(self, selected_text, mode="replace"):
        """
        Text that replaces ``selected_text`` in the editor.

        * ``replace``: ``[[date]]``, or ``[[date]] time`` when a time was given
        * ``link``: ``[selected text](date)``
        * ``clean``: the formatted date only
        * ``time``: the formatted time only
        """
        if mode not in RENDER_MODES:
            raise ValueError("Unknown render mode: %r" % mode)

        if mode == "time":
            return self.parse_time(selected_text).formatted_string

        result = self.parse_date(selected_text)
        if mode == "link":
            return "[%s](%s)" % (selected_text, result.formatted_string)
        if mode == "clean":
            return result.formatted_string

        if self.parser.has_explicit_time(selected_text):
            date_part = format_date(result.date, self.settings.DATE_FORMAT)
            time_part = format_date(result.date, self.settings.TIME_FORMAT or "HH:mm")
            return "[[%s]] %s" % (date_part, time_part)
        return "[[%s]]" % result.formatted_string
