"""
Keyword compilation.

Scans the translation tables once per language set and produces the lookup
sets, the duration unit mapping and the escaped alternations the recognizers
are built from.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Iterable, List, Mapping, Tuple

import regex as re

from nldates.conf import WEEKDAYS
from nldates.lang import NOT_FOUND, lookup, split_synonyms
from nldates.utils import CANONICAL_UNITS

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

IMMEDIATE_KEYS = ("now", "today", "tomorrow", "yesterday")
PREFIX_KEYS = ("this", "next", "last")
CONNECTOR_KEYS = ("in", "and", "at", "from", "to")

GRAMMAR_KEYS = IMMEDIATE_KEYS + PREFIX_KEYS + CONNECTOR_KEYS + WEEKDAYS + CANONICAL_UNITS

BASE_DAY_INDEX = {
    'sunday': 0, 'sun': 0,
    'monday': 1, 'mon': 1,
    'tuesday': 2, 'tue': 2, 'tues': 2,
    'wednesday': 3, 'wed': 3,
    'thursday': 4, 'thu': 4, 'thur': 4, 'thurs': 4,
    'friday': 5, 'fri': 5,
    'saturday': 6, 'sat': 6,
}


# =============================================================================
# Compiled tables
# =============================================================================

@dataclass(frozen=True)
class CompiledKeywords:
    """Keyword tables derived from a language set and a translation lookup."""
    languages: Tuple[str, ...]
    vocabulary: Mapping[str, Mapping[str, Tuple[str, ...]]]
    immediate_keywords: FrozenSet[str]
    prefix_keywords: Mapping[str, FrozenSet[str]]
    duration_unit_map: Mapping[str, str]
    day_index: Mapping[str, int]
    in_pattern: str = ""
    prefix_pattern: str = ""
    weekday_pattern: str = ""
    duration_unit_pattern: str = ""
    and_pattern: str = ""
    at_pattern: str = ""
    from_pattern: str = ""
    to_pattern: str = ""
    _concepts: Mapping[str, FrozenSet[str]] = field(default_factory=dict, repr=False)

    def concepts_of(self, word: str) -> FrozenSet[str]:
        """Grammar keys that ``word`` translates in any configured language."""
        return self._concepts.get(word.lower(), frozenset())

    def means(self, word: str, key: str) -> bool:
        return key in self.concepts_of(word)

    def words_for(self, key: str) -> List[str]:
        words = []
        for language in self.languages:
            words.extend(self.vocabulary[language].get(key, ()))
        return _dedupe(w.lower() for w in words)

    def day_index_of(self, name: str) -> int:
        # Unknown names fall back to Sunday
        return self.day_index.get(name.lower(), 0)


def _dedupe(words: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(words))


def build_alternation(words: Iterable[str]) -> str:
    """Join literal words into a regex alternation, escaping each one first."""
    return "|".join(_dedupe(re.escape(word) for word in words))


def compile_keywords(
    languages: Iterable[str],
    lookup: Callable[[str, str], str] = lookup,
) -> CompiledKeywords:
    """
    Compile the keyword tables for ``languages``.

    A key a language does not translate is skipped: that language simply does
    not contribute to the corresponding recognizer.

    :param languages: ordered language codes.
    :param lookup: translation lookup, ``lookup(key, lang) -> str | NOT_FOUND``.
    :return: a :class:`CompiledKeywords` instance.
    """
    languages = tuple(languages)

    vocabulary: Dict[str, Dict[str, Tuple[str, ...]]] = {}
    for language in languages:
        entries = {}
        for key in GRAMMAR_KEYS:
            value = lookup(key, language)
            if not value or value == NOT_FOUND:
                continue
            words = split_synonyms(value)
            if words:
                entries[key] = tuple(words)
        if not entries:
            logger.warning("No translations found for language %r", language)
        vocabulary[language] = entries

    def collect(*keys):
        words = []
        for language in languages:
            for key in keys:
                words.extend(vocabulary[language].get(key, ()))
        return words

    immediate_keywords = frozenset(w.lower() for w in collect(*IMMEDIATE_KEYS))
    prefix_keywords = {key: frozenset(w.lower() for w in collect(key)) for key in PREFIX_KEYS}

    duration_unit_map = {}
    for language in languages:
        for unit in CANONICAL_UNITS:
            for word in vocabulary[language].get(unit, ()):
                duration_unit_map[word.lower()] = unit

    day_index = dict(BASE_DAY_INDEX)
    for index, day in enumerate(WEEKDAYS):
        for language in languages:
            for word in vocabulary[language].get(day, ()):
                day_index[word.lower()] = index

    concepts: Dict[str, set] = {}
    for language in languages:
        for key, words in vocabulary[language].items():
            for word in words:
                concepts.setdefault(word.lower(), set()).add(key)

    return CompiledKeywords(
        languages=languages,
        vocabulary=vocabulary,
        immediate_keywords=immediate_keywords,
        prefix_keywords=prefix_keywords,
        duration_unit_map=duration_unit_map,
        day_index=day_index,
        in_pattern=build_alternation(collect("in")),
        prefix_pattern=build_alternation(collect(*PREFIX_KEYS)),
        weekday_pattern=build_alternation(w.lower() for w in collect(*WEEKDAYS)),
        duration_unit_pattern=build_alternation(collect(*CANONICAL_UNITS)),
        and_pattern=build_alternation(collect("and")),
        at_pattern=build_alternation(collect("at")),
        from_pattern=build_alternation(collect("from")),
        to_pattern=build_alternation(collect("to")),
        _concepts={word: frozenset(keys) for word, keys in concepts.items()},
    )
