from functools import wraps

from nldates.errors import SettingValidationError

WEEKDAYS = (
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
)

DEFAULT_SETTINGS = {
    "LANGUAGES": ["en"],
    "WEEK_START": "locale-default",
    "DATE_FORMAT": "YYYY-MM-DD",
    "TIME_FORMAT": "HH:mm",
    "SEPARATOR": " ",
}


class Settings:
    """Control and configure default parsing behavior of nldates.

    Currently, supported settings are:

    * `LANGUAGES`
    * `WEEK_START`
    * `DATE_FORMAT`
    * `TIME_FORMAT`
    * `SEPARATOR`
    """

    _default = True

    def __init__(self, settings=None):
        self._updateall(DEFAULT_SETTINGS.items())
        if settings:
            self._updateall(settings.items())
        if not self.LANGUAGES:
            self.LANGUAGES = list(DEFAULT_SETTINGS["LANGUAGES"])

    def _updateall(self, iterable):
        for key, value in iterable:
            if isinstance(value, list):
                value = list(value)
            setattr(self, key, value)

    def replace(self, **kwds):
        for k, v in kwds.items():
            if v is None:
                raise TypeError('Invalid {{"{}": {}}}'.format(k, v))

        for x in DEFAULT_SETTINGS.keys():
            kwds.setdefault(x, getattr(self, x))

        new_settings = self.__class__(settings=kwds)
        new_settings._default = False
        return new_settings

    def as_dict(self):
        return {key: getattr(self, key) for key in DEFAULT_SETTINGS}


settings = Settings()


def apply_settings(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        mod_settings = kwargs.get("settings")

        kwargs["settings"] = mod_settings or settings

        if isinstance(kwargs["settings"], dict):
            kwargs["settings"] = settings.replace(**kwargs["settings"])

        if not isinstance(kwargs["settings"], Settings):
            raise TypeError(
                "settings can only be either dict or instance of Settings class"
            )

        check_settings(kwargs["settings"])
        return f(*args, **kwargs)

    return wrapper


def check_settings(settings):
    """
    Check if provided settings are valid, if not it raises `SettingValidationError`.
    Only checks for the modified settings.
    """
    settings_values = {
        "LANGUAGES": {
            "type": list,
        },
        "WEEK_START": {
            "values": WEEKDAYS + ("locale-default",),
            "type": str,
        },
        "DATE_FORMAT": {
            "type": str,
        },
        "TIME_FORMAT": {
            "type": str,
        },
        "SEPARATOR": {
            "type": str,
        },
    }

    modified_settings = settings.as_dict()
    for setting_name, setting_value in modified_settings.items():
        setting_type = type(setting_value)
        setting_props = settings_values[setting_name]

        # check type:
        if not setting_type == setting_props["type"]:
            raise SettingValidationError(
                '"{}" must be "{}", not "{}".'.format(
                    setting_name, setting_props["type"].__name__, setting_type.__name__
                )
            )

        # check values:
        if setting_props.get("values") and setting_value not in setting_props["values"]:
            raise SettingValidationError(
                '"{}" is not a valid value for "{}", it should be: "{}"'.format(
                    setting_value,
                    setting_name,
                    '", "'.join(setting_props["values"]),
                )
            )

        if setting_name == "LANGUAGES":
            _check_languages(setting_value)


def _check_languages(languages):
    for language in languages:
        if not isinstance(language, str):
            raise SettingValidationError(
                '"LANGUAGES" must contain language codes, not "{}".'.format(
                    type(language).__name__
                )
            )
    if len(set(languages)) != len(languages):
        raise SettingValidationError(
            'There are repeated values in the "LANGUAGES" setting'
        )
