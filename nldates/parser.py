import logging
from collections.abc import Set
from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional, Tuple

from nldates.errors import UnsupportedLanguageError
from nldates.fallback import FallbackArbitrator, GrammarParser
from nldates.keywords import compile_keywords
from nldates.lang import lookup as default_lookup
from nldates.oracle import TimePresenceOracle
from nldates.ranges import DateRange, RangeExtractor
from nldates.recognizers import RecognizerBank
from nldates.utils import now, week_start_index

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGES = ("en",)


@dataclass(frozen=True)
class LanguageProfile:
    """What one configured language contributes: its vocabulary and its grammar parser."""
    code: str
    vocabulary: Mapping[str, Tuple[str, ...]]
    parser: Optional[object] = None


class NLDParser:
    """
    Resolves natural language date expressions for a fixed set of languages.

    Every table, recognizer and grammar parser is built here once; resolution
    never mutates the instance. A language change means building a new parser.

    :param languages:
        Language codes in priority order, e.g. ['en', 'fr']. Empty or None means ['en'].
    :type languages: list

    :param lookup:
        Translation lookup ``lookup(key, lang)`` returning ``|`` separated
        synonyms or :data:`nldates.lang.NOT_FOUND`.

    :param parser_factory:
        Builds the grammar parser of a language. It raises
        :class:`nldates.errors.UnsupportedLanguageError` for languages it
        cannot handle; those languages get no grammar parser.

    :param clock:
        Returns the current instant.

    :raises:
        ``TypeError``: Languages argument must be a list.
    """

    def __init__(self, languages=None, lookup=default_lookup, parser_factory=GrammarParser, clock=now):
        if languages is not None and not isinstance(languages, (list, tuple, Set)):
            raise TypeError(
                "languages argument must be a list (%r given)" % type(languages)
            )

        self.languages = tuple(languages) if languages else DEFAULT_LANGUAGES
        self.clock = clock
        self.keywords = compile_keywords(self.languages, lookup)

        profiles = {}
        for code in self.languages:
            try:
                parser = parser_factory(code)
            except UnsupportedLanguageError as e:
                logger.warning("Skipping grammar parser for %r: %s", code, e)
                parser = None
            profiles[code] = LanguageProfile(
                code=code, vocabulary=self.keywords.vocabulary[code], parser=parser,
            )
        self.profiles = profiles

        self.recognizers = RecognizerBank(self.keywords)
        self.ranges = RangeExtractor(self.recognizers, clock)
        self.fallback = FallbackArbitrator(
            [p.parser for p in profiles.values() if p.parser is not None],
            self.recognizers,
            clock,
            self.ranges,
        )
        self.oracle = TimePresenceOracle(self.recognizers, self.fallback)

    def __repr__(self) -> str:
        return f"NLDParser(languages={list(self.languages)!r})"

    def resolve_date(self, text: str, week_start: str = "locale-default") -> datetime:
        """
        Resolve ``text`` to a single datetime.

        Recognizers are tried first, then the grammar parsers. Text nobody
        understands resolves to the current instant.

        :param text: e.g. "tomorrow", "in 2 weeks and 3 days", "next friday at 3pm".
        :param week_start: weekday name or "locale-default".
        """
        if not isinstance(text, str):
            raise TypeError("Input type must be str")

        date_obj = self.recognizers.resolve(text, self.clock(), self.fallback.parse_time_on)
        if date_obj is not None:
            return date_obj
        return self.fallback.resolve(text, week_start_index(week_start))

    def resolve_range(self, text: str, week_start: str = "locale-default") -> Optional[DateRange]:
        """Resolve "from <day> to <day>" or "next week" to a range, else ``None``."""
        if not isinstance(text, str):
            raise TypeError("Input type must be str")
        return self.ranges.resolve(text, week_start_index(week_start))

    def has_explicit_time(self, text: str) -> bool:
        if not isinstance(text, str):
            raise TypeError("Input type must be str")
        return self.oracle.has_time(text)
