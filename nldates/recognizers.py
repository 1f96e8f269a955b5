"""
Recognizer Bank

Hand-written recognizers for the expression shapes that are resolved without
the fuzzy fallback. Each recognizer is a compiled pattern plus a handler and is
tried against the whole trimmed input.

Precedence (highest first):
1. Immediate keyword: "now", "today", "tomorrow", "yesterday"
2. Combined relative offset: "in 2 weeks and 3 days"
3. Simple relative offset: "in 2 minutes"
4. Weekday range: "from monday to friday"
5. Weekday with time: "next monday at 3pm"
6. Simple weekday: "next monday"
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Tuple

import regex as re

from nldates.keywords import IMMEDIATE_KEYS, CompiledKeywords
from nldates.ranges import weekday_range
from nldates.utils import set_day_of_week, shift

logger = logging.getLogger(__name__)

TimeParser = Callable[[str, datetime], Optional[datetime]]


# =============================================================================
# Pattern Definition
# =============================================================================

@dataclass
class Recognizer:
    """Definition of a recognizer."""
    name: str
    regex: re.Pattern
    handler: str  # Name of handler method
    priority: int


# =============================================================================
# RecognizerBank
# =============================================================================

class RecognizerBank:
    """
    The ordered recognizers compiled for one set of keyword tables.

    A recognizer whose vocabulary is empty for every configured language is
    left out of the bank.
    """

    def __init__(self, keywords: CompiledKeywords):
        self.keywords = keywords
        self._patterns = self._compile_patterns()
        self._patterns.sort(key=lambda p: p.priority, reverse=True)
        self._by_name = {p.name: p for p in self._patterns}

        next_pattern = "|".join(re.escape(w) for w in sorted(keywords.prefix_keywords['next']))
        self._next_period_regex = (
            re.compile(r'(%s)\s+(\w+)' % next_pattern, re.IGNORECASE) if next_pattern else None
        )

    def _compile_patterns(self) -> List[Recognizer]:
        kw = self.keywords
        immediate_pattern = "|".join(re.escape(w) for w in sorted(kw.immediate_keywords))
        definitions = [
            (
                'immediate',
                (immediate_pattern,),
                r'(%s)' % immediate_pattern,
                'handle_immediate',
                60,
            ),
            (
                'combined_offset',
                (kw.in_pattern, kw.duration_unit_pattern, kw.and_pattern),
                r'(?:%s)\s+(\d+)\s*(%s)\s+(?:%s)\s+(\d+)\s*(%s)' % (
                    kw.in_pattern, kw.duration_unit_pattern, kw.and_pattern,
                    kw.duration_unit_pattern,
                ),
                'handle_combined_offset',
                50,
            ),
            (
                'relative_offset',
                (kw.in_pattern, kw.duration_unit_pattern),
                r'(?:%s)\s+(\d+)\s*(%s)' % (kw.in_pattern, kw.duration_unit_pattern),
                'handle_relative_offset',
                40,
            ),
            (
                'weekday_range',
                (kw.from_pattern, kw.weekday_pattern, kw.to_pattern),
                r'(?:%s)\s+(%s)\s+(?:%s)\s+(%s)' % (
                    kw.from_pattern, kw.weekday_pattern, kw.to_pattern, kw.weekday_pattern,
                ),
                'handle_weekday_range',
                30,
            ),
            (
                'weekday_with_time',
                (kw.prefix_pattern, kw.weekday_pattern, kw.at_pattern),
                r'(%s)\s*(%s)\s+(?:%s)\s+(.+)' % (
                    kw.prefix_pattern, kw.weekday_pattern, kw.at_pattern,
                ),
                'handle_weekday_with_time',
                20,
            ),
            (
                'weekday',
                (kw.prefix_pattern, kw.weekday_pattern),
                r'(%s)\s*(%s)' % (kw.prefix_pattern, kw.weekday_pattern),
                'handle_weekday',
                10,
            ),
        ]

        patterns = []
        for name, required, pattern, handler, priority in definitions:
            if not all(required):
                logger.debug("Recognizer '%s' disabled for languages %s", name, kw.languages)
                continue
            patterns.append(Recognizer(
                name=name,
                regex=re.compile(pattern, re.IGNORECASE),
                handler=handler,
                priority=priority,
            ))
        return patterns

    @property
    def recognizers(self) -> List[Recognizer]:
        return list(self._patterns)

    def match(self, name: str, text: str) -> Optional[re.Match]:
        """Match ``text`` against a single recognizer, ``None`` if disabled or no match."""
        recognizer = self._by_name.get(name)
        if recognizer is None:
            return None
        return recognizer.regex.fullmatch(text.strip())

    def next_period(self, text: str) -> Optional[str]:
        """The word following a "next" prefix anywhere in ``text`` ("next month" -> "month")."""
        if self._next_period_regex is None:
            return None
        match = self._next_period_regex.search(text)
        return match.group(2) if match else None

    def find(self, text: str) -> Optional[Tuple[Recognizer, re.Match]]:
        """First recognizer in precedence order that matches ``text``."""
        text = text.strip()
        for recognizer in self._patterns:
            match = recognizer.regex.fullmatch(text)
            if match:
                return recognizer, match
        return None

    def resolve(self, text: str, now: datetime, time_parser: TimeParser) -> Optional[datetime]:
        """
        Resolve ``text`` with the first matching recognizer.

        Args:
            text: The expression to resolve
            now: The current instant
            time_parser: Resolves a time-of-day expression against a reference date

        Returns:
            The resolved datetime, or None when no recognizer matched.
        """
        found = self.find(text)
        if found is None:
            return None
        recognizer, match = found
        logger.debug(f"Recognizer '{recognizer.name}' matched: {text}")
        handler = getattr(self, recognizer.handler)
        try:
            return handler(match, now, time_parser)
        except (ValueError, OverflowError) as e:
            # Offsets past the supported calendar range
            logger.warning("Recognizer '%s' could not resolve %r: %s", recognizer.name, text, e)
            return now

    # =========================================================================
    # Unit and weekday helpers
    # =========================================================================

    def resolve_unit(self, token: str) -> str:
        """
        Map a duration word to its canonical unit.

        Words missing from the compiled table fall back to prefix checks on the
        token as typed, in this order: hour, day, week, minute, month, year.
        A single "m" is a minute and a single "M" a month.

        The recognizers only capture words from the tables, so the prefix
        checks are reached by direct calls with other tokens.
        """
        unit = self.keywords.duration_unit_map.get(token.lower())
        if unit:
            return unit
        if token.startswith('h'):
            return 'hour'
        if token.startswith(('d', 'j')):
            return 'day'
        if token.startswith(('w', 's')):
            return 'week'
        if token == 'm' or token.startswith('min'):
            return 'minute'
        if token.startswith('mo') or token == 'M' or token.startswith('mois'):
            return 'month'
        if token.startswith(('y', 'a')):
            return 'year'
        return 'minute'

    def weekday_for_prefix(self, prefix: str, day_name: str, now: datetime) -> datetime:
        """Day ``day_name`` of this, next or last (Sunday-based) week."""
        prefix = prefix.lower()
        day_index = self.keywords.day_index_of(day_name)
        prefixes = self.keywords.prefix_keywords
        if prefix in prefixes['this']:
            return set_day_of_week(now, day_index)
        if prefix in prefixes['next']:
            return set_day_of_week(shift(now, 1, 'week'), day_index)
        if prefix in prefixes['last']:
            return set_day_of_week(shift(now, -1, 'week'), day_index)
        return now

    # =========================================================================
    # Handler Methods
    # =========================================================================

    def handle_immediate(self, match: re.Match, now: datetime, time_parser: TimeParser) -> datetime:
        """Handle 'now', 'today', 'tomorrow' and 'yesterday'."""
        word = match.group(1)
        for key in IMMEDIATE_KEYS:
            if self.keywords.means(word, key):
                break
        else:
            key = 'now'

        if key == 'tomorrow':
            return shift(now, 1, 'day')
        if key == 'yesterday':
            return shift(now, -1, 'day')
        return now

    def handle_combined_offset(self, match: re.Match, now: datetime, time_parser: TimeParser) -> datetime:
        """Handle 'in 2 weeks and 3 days'. The first amount is added first."""
        unit1 = self.resolve_unit(match.group(2).strip())
        unit2 = self.resolve_unit(match.group(4).strip())
        date_obj = shift(now, int(match.group(1)), unit1)
        return shift(date_obj, int(match.group(3)), unit2)

    def handle_relative_offset(self, match: re.Match, now: datetime, time_parser: TimeParser) -> datetime:
        """Handle 'in 2 minutes'."""
        unit = self.resolve_unit(match.group(2).strip())
        return shift(now, int(match.group(1)), unit)

    def handle_weekday_range(self, match: re.Match, now: datetime, time_parser: TimeParser) -> datetime:
        """Handle 'from monday to friday'. A point result is the start of the range."""
        start_index = self.keywords.day_index_of(match.group(1))
        end_index = self.keywords.day_index_of(match.group(2))
        return weekday_range(start_index, end_index, now).start

    def handle_weekday_with_time(self, match: re.Match, now: datetime, time_parser: TimeParser) -> datetime:
        """Handle 'next monday at 3pm'. Without a usable time the bare day is returned."""
        day = self.weekday_for_prefix(match.group(1), match.group(2), now)
        timed = time_parser(match.group(3).strip(), day)
        return timed if timed is not None else day

    def handle_weekday(self, match: re.Match, now: datetime, time_parser: TimeParser) -> datetime:
        """Handle 'this friday', 'next monday', 'last sunday'."""
        return self.weekday_for_prefix(match.group(1), match.group(2), now)
