info = {
    "now": "now",
    "today": "today",
    "tomorrow": "tomorrow",
    "yesterday": "yesterday",
    "in": "in",
    "next": "next",
    "last": "last",
    "this": "this",
    "and": "and",
    "at": "at",
    "from": "from",
    "to": "to|until",
    "sunday": "sunday",
    "monday": "monday",
    "tuesday": "tuesday",
    "wednesday": "wednesday",
    "thursday": "thursday",
    "friday": "friday",
    "saturday": "saturday",
    "minute": "minute|minutes|min|mins",
    "hour": "hour|hours|hr|hrs",
    "day": "day|days",
    "week": "week|weeks|wk|wks",
    "month": "month|months",
    "year": "year|years|yr|yrs",
}
