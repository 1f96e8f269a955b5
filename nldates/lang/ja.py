# Japanese relative offsets are suffixed ("2日後"), so there is no "in",
# "and", "at", "from" or "to" entry and those recognizers stay disabled.
info = {
    "now": "今",
    "today": "今日",
    "tomorrow": "明日",
    "yesterday": "昨日",
    "next": "来週の|次の",
    "last": "先週の|前の",
    "this": "今週の|この",
    "sunday": "日曜日",
    "monday": "月曜日",
    "tuesday": "火曜日",
    "wednesday": "水曜日",
    "thursday": "木曜日",
    "friday": "金曜日",
    "saturday": "土曜日",
    "minute": "分",
    "hour": "時間",
    "day": "日",
    "week": "週間|週",
    "month": "ヶ月|か月",
    "year": "年",
}
