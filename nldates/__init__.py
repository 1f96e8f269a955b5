__version__ = "0.9.0"

from .conf import apply_settings
from .errors import SettingValidationError, UnsupportedLanguageError
from .fallback import FallbackArbitrator, GrammarMatch, GrammarParser, ParsingOptions
from .keywords import CompiledKeywords, compile_keywords
from .parser import NLDParser
from .ranges import DateRange
from .service import NaturalLanguageDates, NLDRangeResult, NLDResult

_default_parser = NLDParser()


def _get_parser(settings):
    if settings._default:
        return _default_parser
    return NLDParser(languages=settings.LANGUAGES)


@apply_settings
def parse(date_string, settings=None):
    """Resolve a natural language date expression to a datetime.

    :param date_string:
        A string such as "tomorrow", "in 2 weeks and 3 days" or "next friday at 3pm".
    :type date_string: str

    :param settings:
        Configure customized behavior using settings defined in :mod:`nldates.conf.Settings`.
    :type settings: dict

    :return: Returns a datetime. Expressions that cannot be understood resolve
        to the current date and time.
    :rtype: datetime

    :raises:
        ``SettingValidationError``: A provided setting is not valid.

    Example usage::

        >>> import nldates
        >>> nldates.parse("in 2 days")
        datetime.datetime(2024, 1, 19, 10, 30)
        >>> nldates.parse("prochain lundi", settings={"LANGUAGES": ["en", "fr"]})
        datetime.datetime(2024, 1, 22, 10, 30)
    """
    return _get_parser(settings).resolve_date(date_string, settings.WEEK_START)


@apply_settings
def parse_range(date_string, settings=None):
    """Resolve "from monday to friday" or "next week" to a :class:`DateRange`, else ``None``."""
    return _get_parser(settings).resolve_range(date_string, settings.WEEK_START)


@apply_settings
def has_time(date_string, settings=None):
    """Whether ``date_string`` carries an explicit time of day."""
    return _get_parser(settings).has_explicit_time(date_string)
