from __future__ import annotations

from datetime import date, timedelta

# 0 = Monday ... 6 = Sunday, same numbering as date.weekday()
FIRST_WEEKDAY_BY_LOCALE = {
    "fr": 0,
    "de": 0,
    "es": 0,
    "it": 0,
    "en_gb": 0,
    "en": 6,
    "en_us": 6,
    "en_ca": 6,
    "pt_br": 6,
    "ar": 5,
}

WEEKDAY_NAMES = {
    "fr": ("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"),
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
}

SHORT_WEEKDAY_NAMES = {
    "fr": ("Lun", "Mar", "Mer", "Jeu", "Ven", "Sam", "Dim"),
    "en": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
}

MONTH_NAMES = {
    "fr": (
        "Janvier", "Février", "Mars", "Avril", "Mai", "Juin",
        "Juillet", "Août", "Septembre", "Octobre", "Novembre", "Décembre",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}

SHORT_MONTH_NAMES = {
    "fr": ("janv.", "févr.", "mars", "avr.", "mai", "juin", "juil.", "août", "sept.", "oct.", "nov.", "déc."),
    "en": ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
}


def _normalize(locale: str) -> str:
    return (locale or "").strip().lower().replace("-", "_")


def _language(locale: str) -> str:
    lang = _normalize(locale).split("_", 1)[0]
    return lang if lang in WEEKDAY_NAMES else "en"


def first_weekday_for(locale: str, override: int | None = None) -> int:
    if override is not None:
        if not 0 <= override <= 6:
            raise ValueError(f"first weekday must be between 0 and 6, got {override}")
        return override
    key = _normalize(locale)
    if key in FIRST_WEEKDAY_BY_LOCALE:
        return FIRST_WEEKDAY_BY_LOCALE[key]
    return FIRST_WEEKDAY_BY_LOCALE.get(key.split("_", 1)[0], 0)


def weekday_name(day: date, locale: str) -> str:
    return WEEKDAY_NAMES[_language(locale)][day.weekday()]


def short_day_label(day: date, locale: str) -> str:
    """Day label such as "27 janv." (fr) or "27 Jan" (en)."""
    return f"{day.day} {SHORT_MONTH_NAMES[_language(locale)][day.month - 1]}"


def month_title(year: int, month: int, locale: str) -> str:
    return f"{MONTH_NAMES[_language(locale)][month - 1]} {year}"


def week_start(day: date, first_weekday: int) -> date:
    """First day of the week containing `day` (first_weekday uses date.weekday() numbering)."""
    return day - timedelta(days=(day.weekday() - first_weekday) % 7)


def week_number(day: date, first_weekday: int) -> int:
    """Week of the year for weeks starting on `first_weekday`.

    Monday-first weeks follow ISO 8601: week 1 holds January 4th. Other week starts
    count the week holding January 1st as week 1, as US calendars do.
    """
    first_week_day = 4 if first_weekday == 0 else 1
    start = week_start(day, first_weekday)
    year = day.year + 1
    while start < week_start(date(year, 1, first_week_day), first_weekday):
        year -= 1
    return (start - week_start(date(year, 1, first_week_day), first_weekday)).days // 7 + 1


def week_label(anchor: date, locale: str, first_weekday: int | None = None) -> str:
    week = week_number(anchor, first_weekday_for(locale, first_weekday))
    if _language(locale) == "fr":
        return f"{week}e semaine {anchor.year}"
    return f"Week {week}, {anchor.year}"


def ordered_short_weekday_names(first_weekday: int, locale: str) -> tuple[str, ...]:
    names = SHORT_WEEKDAY_NAMES[_language(locale)]
    return tuple(names[(first_weekday + i) % 7] for i in range(7))
