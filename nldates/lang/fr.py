info = {
    "now": "maintenant",
    "today": "aujourd'hui",
    "tomorrow": "demain",
    "yesterday": "hier",
    "in": "dans",
    "next": "prochain|prochaine",
    "last": "dernier|dernière",
    "this": "ce|cette",
    "and": "et",
    "at": "à",
    "from": "de|du",
    "to": "à|au|jusqu'à",
    "sunday": "dimanche",
    "monday": "lundi",
    "tuesday": "mardi",
    "wednesday": "mercredi",
    "thursday": "jeudi",
    "friday": "vendredi",
    "saturday": "samedi",
    "minute": "minute|minutes|min",
    "hour": "heure|heures",
    "day": "jour|jours",
    "week": "semaine|semaines",
    "month": "mois",
    "year": "an|ans|année|années",
}
