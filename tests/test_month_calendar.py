from __future__ import annotations

from datetime import date

from salon_planning.application.use_cases.month_calendar import MonthNavigator, build_month_calendar, group_by_date
from salon_planning.domain.entities.appointment import Appointment


def _apt(apt_id: int, day: str) -> Appointment:
    return Appointment(
        id=apt_id,
        client_name="Client",
        service_name="Brushing",
        start_time="10:00",
        end_time="10:30",
        appointment_date=day,
    )


def test_month_grid_aligns_first_day_with_week_start():
    # 1 February 2025 is a Saturday
    monday_first = build_month_calendar(2025, 2, [], first_weekday=0)
    assert monday_first.cells[:5] == (None,) * 5
    assert monday_first.cells[5].day == date(2025, 2, 1)
    assert len([c for c in monday_first.cells if c is not None]) == 28
    assert monday_first.weekday_names[0] == "Lun"

    sunday_first = build_month_calendar(2025, 2, [], first_weekday=6, locale="en_US")
    assert sunday_first.cells[:6] == (None,) * 6
    assert sunday_first.weekday_names[0] == "Sun"


def test_month_grid_groups_appointments_by_day():
    appointments = [_apt(1, "2025-02-14"), _apt(2, "2025-02-14T09:00:00Z"), _apt(3, "2025-02-03")]
    month = build_month_calendar(2025, 2, appointments, first_weekday=0, today=date(2025, 2, 14))

    days = {cell.day: cell for cell in month.cells if cell is not None}
    assert [a.id for a in days[date(2025, 2, 14)].appointments] == [1, 2]
    assert days[date(2025, 2, 14)].is_today
    assert not days[date(2025, 2, 3)].is_today
    assert month.title == "Février 2025"


def test_group_by_date():
    grouped = group_by_date([_apt(1, "2025-02-14"), _apt(2, "2025-02-15"), _apt(3, "2025-02-14")])
    assert [a.id for a in grouped[date(2025, 2, 14)]] == [1, 3]


def test_month_navigator_wraps_years():
    navigator = MonthNavigator(2024, 12, clock=lambda: date(2025, 6, 10))
    assert navigator.next() == (2025, 1)
    assert navigator.prev() == (2024, 12)
    assert navigator.prev() == (2024, 11)
    assert navigator.today() == (2025, 6)
