"""
Decides whether an expression carries an explicit time of day, so callers can
pick between a date-only and a date+time format.
"""

from nldates.fallback import CERTAIN_HOUR, CERTAIN_MINUTE

TIME_UNITS = frozenset(("hour", "minute"))
DATE_ONLY_KEYS = ("today", "tomorrow", "yesterday")


class TimePresenceOracle:
    """
    Answers "has explicit time" with the recognizer bank's patterns and unit
    resolution. Only expressions no recognizer understands reach the grammar
    parsers.
    """

    def __init__(self, recognizers, fallback):
        self.recognizers = recognizers
        self.fallback = fallback
        keywords = recognizers.keywords
        self._now_words = frozenset(keywords.words_for("now"))
        self._date_words = frozenset(
            word for key in DATE_ONLY_KEYS for word in keywords.words_for(key)
        )

    def has_time(self, text):
        text = text.strip()
        folded = text.lower()

        if folded in self._now_words:
            return True

        match = self.recognizers.match("combined_offset", text)
        if match:
            units = {
                self.recognizers.resolve_unit(match.group(2).strip()),
                self.recognizers.resolve_unit(match.group(4).strip()),
            }
            return bool(units & TIME_UNITS)

        match = self.recognizers.match("relative_offset", text)
        if match:
            return self.recognizers.resolve_unit(match.group(2).strip()) in TIME_UNITS

        if self.recognizers.match("weekday_with_time", text):
            return True

        if self.recognizers.match("weekday", text) or folded in self._date_words:
            return False

        for match in self.fallback.first_matches(text):
            if match.is_certain(CERTAIN_HOUR) or match.is_certain(CERTAIN_MINUTE):
                return True
        return False
