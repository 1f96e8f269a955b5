class UnsupportedLanguageError(ValueError):
    """Raised when no grammar parser exists for a configured language code."""

    def __init__(self, language):
        self.language = language
        super().__init__("Unsupported language: %r" % language)


class SettingValidationError(ValueError):
    pass
