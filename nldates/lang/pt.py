info = {
    "now": "agora",
    "today": "hoje",
    "tomorrow": "amanhã",
    "yesterday": "ontem",
    "in": "em|daqui a",
    "next": "próximo|próxima",
    "last": "último|última|passado|passada",
    "this": "este|esta",
    "and": "e",
    "at": "às|as",
    "from": "de",
    "to": "a|até",
    "sunday": "domingo",
    "monday": "segunda-feira|segunda",
    "tuesday": "terça-feira|terça",
    "wednesday": "quarta-feira|quarta",
    "thursday": "quinta-feira|quinta",
    "friday": "sexta-feira|sexta",
    "saturday": "sábado",
    "minute": "minuto|minutos",
    "hour": "hora|horas",
    "day": "dia|dias",
    "week": "semana|semanas",
    "month": "mês|meses",
    "year": "ano|anos",
}
