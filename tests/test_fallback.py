"""
Tests for the fallback arbitration between grammar parsers.
"""

import logging
from datetime import datetime

import pytest

from conftest import NOW, StubParser, always, make_parser
from nldates.errors import UnsupportedLanguageError
from nldates.fallback import CERTAIN_WEEKDAY, GrammarMatch, GrammarParser, ParsingOptions
from nldates.parser import NLDParser

FRIDAY = datetime(2024, 1, 19, 9, 0)
SATURDAY = datetime(2024, 1, 20, 9, 0)


class TestArbitration:
    """The longest matched text wins, ties go to the earlier language."""

    def test_longest_match_wins(self):
        parser = make_parser(["en", "fr"], parsers={
            "en": StubParser("en", respond=always("friday", FRIDAY)),
            "fr": StubParser("fr", respond=always("samedi 9h", SATURDAY)),
        })
        assert parser.resolve_date("friday-ish samedi 9h") == SATURDAY

    def test_tie_goes_to_first_language(self):
        parser = make_parser(["en", "fr"], parsers={
            "en": StubParser("en", respond=always("abcdef", FRIDAY)),
            "fr": StubParser("fr", respond=always("ghijkl", SATURDAY)),
        })
        assert parser.resolve_date("abcdef ghijkl") == FRIDAY

    def test_only_first_match_of_each_parser_counts(self):
        def respond(text, reference_date, options):
            return [
                GrammarMatch(text="fri", start=FRIDAY),
                GrammarMatch(text="a much longer match", start=SATURDAY),
            ]

        parser = make_parser(parsers={"en": StubParser("en", respond=respond)})
        assert parser.resolve_date("fri or later") == FRIDAY

    def test_failing_parser_is_skipped(self, caplog):
        parser = make_parser(["en", "fr"], parsers={
            "en": StubParser("en", error=RuntimeError("boom")),
            "fr": StubParser("fr", respond=always("samedi", SATURDAY)),
        })
        with caplog.at_level(logging.WARNING, logger="nldates.fallback"):
            assert parser.resolve_date("samedi") == SATURDAY
        assert "Grammar parser" in caplog.text

    def test_unparseable_text_resolves_to_now(self, parser):
        assert parser.resolve_date("blah blah") == NOW

    def test_empty_parser_pool_resolves_to_now(self, caplog):
        with caplog.at_level(logging.WARNING, logger="nldates.parser"):
            parser = make_parser(["xx"], parsers={})
        assert "Skipping grammar parser" in caplog.text
        assert parser.fallback.parsers == ()
        assert parser.resolve_date("whenever") == NOW

    def test_unsupported_language_keeps_the_others(self):
        parser = make_parser(["en", "xx"], parsers={
            "en": StubParser("en", respond=always("someday", FRIDAY)),
        })
        assert list(parser.profiles) == ["en", "xx"]
        assert parser.profiles["xx"].parser is None
        assert parser.resolve_date("someday") == FRIDAY


class TestOptions:

    def test_reference_and_options_are_forwarded(self):
        stub = StubParser("en", respond=always("the 5th", FRIDAY))
        parser = make_parser(parsers={"en": stub})
        parser.resolve_date("the 5th", week_start="monday")

        # a plain parse first, then the forward biased one
        assert stub.calls[0] == ("the 5th", None, None)
        assert stub.calls[-1] == (
            "the 5th", NOW, ParsingOptions(week_start=1, forward_date=True),
        )


class TestNextPeriod:
    """"next month", "next year" and "next week" are computed, not parsed."""

    @pytest.fixture
    def parser(self):
        return make_parser(parsers={
            "en": StubParser("en", respond=always("next", FRIDAY)),
        })

    def test_next_month(self, parser):
        assert parser.resolve_date("next month") == datetime(2024, 2, 1, 0, 0)

    def test_next_year(self, parser):
        assert parser.resolve_date("next year") == datetime(2025, 1, 1, 0, 0)

    @pytest.mark.parametrize("week_start, expected", [
        ("monday", datetime(2024, 1, 22, 10, 30)),
        ("sunday", datetime(2024, 1, 21, 10, 30)),
    ])
    def test_next_week_is_the_range_start(self, parser, week_start, expected):
        assert parser.resolve_date("next week", week_start=week_start) == expected

    def test_other_periods_go_to_the_parser(self, parser):
        assert parser.resolve_date("next decade") == FRIDAY

    def test_rewrite_needs_a_grammar_match(self):
        parser = make_parser()
        assert parser.resolve_date("next month") == NOW

    def test_french_period(self):
        parser = make_parser(["en", "fr"], parsers={
            "en": StubParser("en"),
            "fr": StubParser("fr", respond=always("mois prochain", FRIDAY)),
        })
        assert parser.resolve_date("prochain mois") == datetime(2024, 2, 1, 0, 0)


class TestGrammarParser:

    def test_unknown_language(self):
        with pytest.raises(UnsupportedLanguageError) as excinfo:
            GrammarParser("xx")
        assert excinfo.value.language == "xx"

    def test_ordinal_day_of_reference_month(self):
        matches = GrammarParser("en")._parse_ordinal("on the 5th", NOW)
        assert matches == [GrammarMatch(text="5th", start=datetime(2024, 1, 5, 10, 30))]

    def test_ordinal_out_of_month(self):
        reference = datetime(2024, 2, 10)
        assert GrammarParser("en")._parse_ordinal("the 31st", reference) == []

    def test_ordinal_absent(self):
        assert GrammarParser("en")._parse_ordinal("soon", NOW) == []


class TestDateparserBackend:
    """The real grammar parser, with the engine clock frozen."""

    @pytest.fixture
    def engine(self):
        return NLDParser(["en"], clock=lambda: NOW)

    @pytest.mark.parametrize("text", ["the 5th", "5th"])
    def test_ordinal_is_a_day_of_the_reference_month(self, engine, text):
        assert engine.resolve_date(text) == datetime(2024, 1, 5, 10, 30)

    def test_ordinal_wins_over_month_reading(self):
        matches = GrammarParser("en").parse("5th", NOW)
        assert matches[0].start == datetime(2024, 1, 5, 10, 30)

    def test_ordinal_with_month_is_left_to_dateparser(self):
        matches = GrammarParser("en").parse("march 5th", NOW)
        assert (matches[0].start.month, matches[0].start.day) == (3, 5)

    def test_explicit_time(self, engine):
        assert engine.has_explicit_time("tomorrow at 5pm") is True
        assert engine.has_explicit_time("march 5") is False

    def test_weekday_certainty(self):
        matches = GrammarParser("en").parse("friday 14:30", NOW)
        assert any(match.is_certain(CERTAIN_WEEKDAY) for match in matches)

    def test_period_parser_is_reused(self):
        parser = GrammarParser("en")
        period_parser = parser._period_parser
        parser.parse("march 5", NOW)
        parser.parse("tomorrow at 5pm", NOW)
        assert parser._period_parser is period_parser
