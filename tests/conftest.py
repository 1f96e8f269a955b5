"""
Shared fixtures: a frozen clock and stub grammar parsers, so resolution does
not depend on the wall clock or on dateparser's heuristics.
"""

from datetime import datetime

import pytest

from nldates.errors import UnsupportedLanguageError
from nldates.fallback import GrammarMatch
from nldates.parser import NLDParser

# Wednesday
NOW = datetime(2024, 1, 17, 10, 30)


class StubParser:
    """Grammar parser returning canned matches and recording its calls."""

    def __init__(self, language, respond=None, error=None):
        self.language = language
        self.respond = respond
        self.error = error
        self.calls = []

    def __repr__(self):
        return f"StubParser({self.language!r})"

    def parse(self, text, reference_date=None, options=None):
        self.calls.append((text, reference_date, options))
        if self.error is not None:
            raise self.error
        if self.respond is None:
            return []
        return self.respond(text, reference_date, options)


def always(matched_text, start, certain=()):
    """A ``respond`` callable that always reports the same match."""
    def respond(text, reference_date, options):
        return [GrammarMatch(text=matched_text, start=start, certain=frozenset(certain))]
    return respond


def stub_factory(**parsers):
    """Parser factory serving the given stubs; other languages are unsupported."""
    def factory(language):
        if language not in parsers:
            raise UnsupportedLanguageError(language)
        return parsers[language]
    return factory


def make_parser(languages=("en",), parsers=None, clock_time=NOW, **kwargs):
    if parsers is None:
        parsers = {code: StubParser(code) for code in languages}
    return NLDParser(
        list(languages),
        parser_factory=stub_factory(**parsers),
        clock=lambda: clock_time,
        **kwargs
    )


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def parser():
    return make_parser()
