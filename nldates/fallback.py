"""
Fuzzy fallback parsing.

When no recognizer matches, the text is handed to one grammar parser per
configured language and the result with the longest matched substring wins.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, List, Optional, Sequence

import regex as re
from dateparser import DateDataParser
from dateparser.languages.loader import default_loader
from dateparser.search import search_dates

from nldates.conf import WEEKDAYS
from nldates.errors import UnsupportedLanguageError
from nldates.lang import NOT_FOUND, lookup, split_synonyms
from nldates.utils import now as local_now, shift, start_of_month, start_of_year

logger = logging.getLogger(__name__)

ORDINAL_DAY_PATTERN = re.compile(r"\b([0-9]{1,2})(?:st|nd|rd|th|er|e|º|ª)\b", re.I)

CERTAIN_HOUR = "hour"
CERTAIN_MINUTE = "minute"
CERTAIN_WEEKDAY = "weekday"


@dataclass(frozen=True)
class ParsingOptions:
    """Options forwarded to every grammar parser for one call."""
    week_start: int = 0
    forward_date: bool = False


@dataclass(frozen=True)
class GrammarMatch:
    """One match reported by a grammar parser."""
    text: str
    start: datetime
    certain: FrozenSet[str] = field(default_factory=frozenset)

    def is_certain(self, component: str) -> bool:
        return component in self.certain


class GrammarParser:
    """
    Grammar parser for a single language, backed by ``dateparser``.

    :param language: a language code ``dateparser`` knows, e.g. ``'fr'``.
    :raises: :class:`UnsupportedLanguageError` if ``dateparser`` has no data for it.
    """

    def __init__(self, language: str):
        try:
            default_loader.get_locale_map(languages=[language])
        except ValueError as e:
            raise UnsupportedLanguageError(language) from e

        self.language = language
        self._weekday_names = frozenset(
            word.lower()
            for day in WEEKDAYS
            if lookup(day, language) != NOT_FOUND
            for word in split_synonyms(lookup(day, language))
        )
        # Only the period of a match is read from it, which does not depend
        # on the reference date
        self._period_parser = DateDataParser(
            languages=[language],
            settings={"RETURN_AS_TIMEZONE_AWARE": False, "RETURN_TIME_AS_PERIOD": True},
        )

    def __repr__(self) -> str:
        return f"GrammarParser(language={self.language!r})"

    def parse(
        self,
        text: str,
        reference_date: Optional[datetime] = None,
        options: Optional[ParsingOptions] = None,
    ) -> List[GrammarMatch]:
        settings = {"RETURN_AS_TIMEZONE_AWARE": False}
        if reference_date is not None:
            settings["RELATIVE_BASE"] = reference_date
        # dateparser has no notion of week start, only the forward bias applies
        if options is not None and options.forward_date:
            settings["PREFER_DATES_FROM"] = "future"

        ordinal = self._parse_ordinal(text, reference_date)
        found = search_dates(text, languages=[self.language], settings=settings)
        if not found:
            return ordinal

        matches = []
        for substring, date_obj in found:
            # dateparser reads a lone "5th" as the fifth month
            if ordinal and self._is_bare_ordinal(substring):
                matches.append(GrammarMatch(text=substring, start=ordinal[0].start))
            else:
                matches.append(GrammarMatch(text=substring, start=date_obj,
                                            certain=self._certain_fields(substring)))
        return matches

    def _is_bare_ordinal(self, substring: str) -> bool:
        """Whether ``substring`` is an ordinal day plus words that carry no date."""
        if not ORDINAL_DAY_PATTERN.search(substring):
            return False
        rest = ORDINAL_DAY_PATTERN.sub(" ", substring).strip()
        return not rest or self._period_parser.get_date_data(rest).date_obj is None

    def _certain_fields(self, substring: str) -> FrozenSet[str]:
        certain = set()
        date_data = self._period_parser.get_date_data(substring)
        if date_data.period == "time":
            certain.update((CERTAIN_HOUR, CERTAIN_MINUTE))
        words = set(re.findall(r"\w+(?:-\w+)?", substring.lower()))
        if words & self._weekday_names:
            certain.add(CERTAIN_WEEKDAY)
        return frozenset(certain)

    def _parse_ordinal(self, text: str, reference_date: Optional[datetime]) -> List[GrammarMatch]:
        """Resolve a bare ordinal ("the 5th") to that day of the reference month."""
        match = ORDINAL_DAY_PATTERN.search(text)
        if not match:
            return []
        reference = reference_date or local_now()
        try:
            date_obj = reference.replace(day=int(match.group(1)))
        except ValueError:
            return []
        return [GrammarMatch(text=match.group(0), start=date_obj)]


class FallbackArbitrator:
    """
    Runs every language's grammar parser and keeps the longest match.

    :param parsers: grammar parsers in language declaration order.
    :param recognizers: recognizer bank, used for the "next <period>" rewrites.
    :param clock: callable returning the current instant.
    :param ranges: range extractor consulted for "next week".
    """

    def __init__(self, parsers: Sequence, recognizers, clock, ranges=None):
        self.parsers = tuple(parsers)
        self.recognizers = recognizers
        self.keywords = recognizers.keywords
        self.clock = clock
        self.ranges = ranges

    def first_matches(self, text: str, reference_date=None, options=None) -> List[GrammarMatch]:
        """First match of every parser that found something, in parser order."""
        matches = []
        for parser in self.parsers:
            try:
                results = parser.parse(text, reference_date, options)
            except Exception:
                logger.warning("Grammar parser %r failed on %r", parser, text, exc_info=True)
                continue
            if results:
                matches.append(results[0])
        return matches

    def best_match(self, text: str, reference_date=None, options=None) -> Optional[GrammarMatch]:
        """The match with the longest matched text; ties go to the earlier parser."""
        best = None
        best_score = 0
        for match in self.first_matches(text, reference_date, options):
            if len(match.text) > best_score:
                best_score = len(match.text)
                best = match
        return best

    def parse_time_on(self, text: str, reference_date: datetime) -> Optional[datetime]:
        """Resolve ``text`` against ``reference_date``, or ``None`` if nobody matched."""
        match = self.best_match(text, reference_date)
        return match.start if match else None

    def resolve(self, text: str, week_start: int) -> datetime:
        now = self.clock()
        if not self.parsers:
            return now

        if self.best_match(text) is None:
            logger.debug("Input date %r can't be parsed by nldates", text)
            return now

        period_date = self._resolve_next_period(text, week_start, now)
        if period_date is not None:
            return period_date

        options = ParsingOptions(week_start=week_start, forward_date=True)
        match = self.best_match(text, now, options)
        return match.start if match else now

    def _resolve_next_period(self, text, week_start, now):
        period = self.recognizers.next_period(text)
        if not period:
            return None

        if self.keywords.means(period, "week"):
            if self.ranges is None:
                return None
            return self.ranges.next_week(week_start).start
        if self.keywords.means(period, "month"):
            return start_of_month(shift(now, 1, "month"))
        if self.keywords.means(period, "year"):
            return start_of_year(shift(now, 1, "year"))
        return None
