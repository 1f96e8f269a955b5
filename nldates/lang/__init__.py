"""
Translation tables for the grammar keywords understood by the recognizers.

Each language lives in its own module exposing an ``info`` dict that maps a
semantic key ("next", "monday", "week", ...) to a string of ``|`` separated
synonyms.
"""

from importlib import import_module

NOT_FOUND = "NOTFOUND"

SUPPORTED_LANGUAGES = ("en", "fr", "de", "pt", "nl", "ja")

_tables = {}


def _get_table(lang):
    if lang not in _tables:
        if lang in SUPPORTED_LANGUAGES:
            _tables[lang] = import_module("nldates.lang.%s" % lang).info
        else:
            _tables[lang] = {}
    return _tables[lang]


def lookup(key, lang):
    """Return the synonyms registered for ``key`` in ``lang``.

    :param key: semantic key, e.g. ``"tomorrow"``.
    :param lang: language code, e.g. ``"fr"``.
    :return: the raw ``|`` separated value, or :data:`NOT_FOUND`.
    """
    return _get_table(lang).get(key, NOT_FOUND)


def split_synonyms(value):
    return [word.strip() for word in value.split("|") if word.strip()]
