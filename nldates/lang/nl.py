info = {
    "now": "nu",
    "today": "vandaag",
    "tomorrow": "morgen",
    "yesterday": "gisteren",
    "in": "over",
    "next": "volgende|volgend",
    "last": "vorige|afgelopen",
    "this": "deze|dit",
    "and": "en",
    "at": "om",
    "from": "van",
    "to": "tot",
    "sunday": "zondag",
    "monday": "maandag",
    "tuesday": "dinsdag",
    "wednesday": "woensdag",
    "thursday": "donderdag",
    "friday": "vrijdag",
    "saturday": "zaterdag",
    "minute": "minuut|minuten",
    "hour": "uur|uren",
    "day": "dag|dagen",
    "week": "week|weken",
    "month": "maand|maanden",
    "year": "jaar|jaren",
}
