from __future__ import annotations

from collections.abc import Callable
from datetime import date, timedelta

from salon_planning.application.utils.locale_calendar import first_weekday_for, week_label, week_start

DAYS_PER_WEEK = 7


class WeekNavigator:
    def __init__(
        self,
        anchor: date | None = None,
        first_weekday: int = 0,
        clock: Callable[[], date] = date.today,
        locale: str = "fr",
    ) -> None:
        self._first_weekday = first_weekday
        self._clock = clock
        self._locale = locale
        self._anchor = week_start(anchor or clock(), first_weekday)

    @classmethod
    def for_locale(
        cls,
        locale: str,
        anchor: date | None = None,
        first_weekday: int | None = None,
        clock: Callable[[], date] = date.today,
    ) -> "WeekNavigator":
        return cls(
            anchor=anchor,
            first_weekday=first_weekday_for(locale, first_weekday),
            clock=clock,
            locale=locale,
        )

    @property
    def anchor(self) -> date:
        return self._anchor

    @property
    def first_weekday(self) -> int:
        return self._first_weekday

    def next(self) -> date:
        self._anchor += timedelta(days=DAYS_PER_WEEK)
        return self._anchor

    def prev(self) -> date:
        self._anchor -= timedelta(days=DAYS_PER_WEEK)
        return self._anchor

    def today(self) -> date:
        self._anchor = week_start(self._clock(), self._first_weekday)
        return self._anchor

    def days(self) -> list[date]:
        # recomputed from the anchor on every call
        return [self._anchor + timedelta(days=i) for i in range(DAYS_PER_WEEK)]

    def week_label(self) -> str:
        return week_label(self._anchor, self._locale, self._first_weekday)
