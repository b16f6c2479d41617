from __future__ import annotations

import calendar
from collections.abc import Callable, Iterable
from datetime import date

from salon_planning.application.utils.locale_calendar import month_title, ordered_short_weekday_names
from salon_planning.application.utils.time_parser import parse_calendar_date
from salon_planning.domain.entities.appointment import Appointment
from salon_planning.domain.entities.planning import MonthCalendar, MonthDay


class MonthNavigator:
    def __init__(self, year: int | None = None, month: int | None = None, clock: Callable[[], date] = date.today) -> None:
        self._clock = clock
        today = clock()
        self._year = year or today.year
        self._month = month or today.month
        if not 1 <= self._month <= 12:
            raise ValueError(f"Invalid month {self._month}")

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    def next(self) -> tuple[int, int]:
        if self._month == 12:
            self._year, self._month = self._year + 1, 1
        else:
            self._month += 1
        return self._year, self._month

    def prev(self) -> tuple[int, int]:
        if self._month == 1:
            self._year, self._month = self._year - 1, 12
        else:
            self._month -= 1
        return self._year, self._month

    def today(self) -> tuple[int, int]:
        today = self._clock()
        self._year, self._month = today.year, today.month
        return self._year, self._month


def group_by_date(appointments: Iterable[Appointment]) -> dict[date, list[Appointment]]:
    grouped: dict[date, list[Appointment]] = {}
    for apt in appointments:
        grouped.setdefault(parse_calendar_date(apt.appointment_date), []).append(apt)
    return grouped


def build_month_calendar(
    year: int,
    month: int,
    appointments: Iterable[Appointment],
    first_weekday: int = 0,
    today: date | None = None,
    locale: str = "fr",
) -> MonthCalendar:
    """Month grid with blank cells before day 1 so that columns line up with the week start."""
    leading = (date(year, month, 1).weekday() - first_weekday) % 7
    days_in_month = calendar.monthrange(year, month)[1]
    by_date = group_by_date(appointments)

    cells: list[MonthDay | None] = [None] * leading
    for day_number in range(1, days_in_month + 1):
        day = date(year, month, day_number)
        cells.append(
            MonthDay(
                day=day,
                appointments=tuple(by_date.get(day, ())),
                is_today=day == today,
            )
        )

    return MonthCalendar(
        year=year,
        month=month,
        title=month_title(year, month, locale),
        weekday_names=ordered_short_weekday_names(first_weekday, locale),
        cells=tuple(cells),
    )
