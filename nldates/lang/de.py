info = {
    "now": "jetzt",
    "today": "heute",
    "tomorrow": "morgen",
    "yesterday": "gestern",
    "in": "in",
    "next": "nächsten|nächste|nächster|kommenden",
    "last": "letzten|letzte|letzter|vergangenen",
    "this": "diesen|diese|dieser",
    "and": "und",
    "at": "um",
    "from": "von",
    "to": "bis",
    "sunday": "sonntag",
    "monday": "montag",
    "tuesday": "dienstag",
    "wednesday": "mittwoch",
    "thursday": "donnerstag",
    "friday": "freitag",
    "saturday": "samstag",
    "minute": "minute|minuten",
    "hour": "stunde|stunden|std",
    "day": "tag|tage|tagen",
    "week": "woche|wochen",
    "month": "monat|monate|monaten",
    "year": "jahr|jahre|jahren",
}
