from functools import lru_cache
import logging
from datetime import date, timedelta

from salon_planning.core.config import settings
from salon_planning.application.ports.appointment_source import AppointmentSourcePort
from salon_planning.application.ports.new_appointment import NewAppointmentPort
from salon_planning.application.ports.staff_source import StaffSourcePort
from salon_planning.application.ports.staff_store import StaffStorePort
from salon_planning.application.use_cases.planning_view import PlanningViewUseCase
from salon_planning.application.use_cases.staff_directory import StaffDirectory
from salon_planning.application.use_cases.week_navigator import week_start
from salon_planning.application.utils.locale_calendar import first_weekday_for
from salon_planning.application.utils.staff_cache import StaffCache
from salon_planning.domain.entities.appointment import Appointment
from salon_planning.infrastructure.booking_api.client import BookingApiClient
from salon_planning.infrastructure.booking_api.http_sources import (
    HttpAppointmentSource,
    HttpNewAppointmentFlow,
    HttpStaffStore,
)
from salon_planning.infrastructure.booking_api.mock_booking import MockBookingApi
from salon_planning.infrastructure.staff.json_store import JsonStaffStore


logger = logging.getLogger(__name__)


def _use_mocks() -> bool:
    return not settings.BOOKING_API_BASE_URL or settings.ENV.lower() in {"dev", "local"}


def _demo_appointments() -> list[Appointment]:
    monday = week_start(date.today(), first_weekday_for(settings.PLANNING_LOCALE, settings.PLANNING_FIRST_WEEKDAY))
    rows = [
        (1, "Léa Martin", "Coupe femme", "09:00", "10:00", 0, 2, 45.0),
        (2, "Hugo Bernard", "Coupe homme", "10:30", "11:00", 0, 1, 25.0),
        (3, "Chloé Petit", "Coloration", "14:00", "16:00", 2, 2, 80.0),
        (4, "Lucas Durand", "Barbe", "14:30", "15:00", 2, 1, 15.0),
        (5, "Emma Leroy", "Chignon", "11:00", "12:00", 5, 4, 60.0),
    ]
    return [
        Appointment(
            id=apt_id,
            client_name=client,
            service_name=service,
            start_time=start,
            end_time=end,
            appointment_date=(monday + timedelta(days=offset)).isoformat(),
            status="confirmed",
            staff_id=staff_id,
            price=price,
        )
        for apt_id, client, service, start, end, offset, staff_id, price in rows
    ]


@lru_cache
def get_booking_api_client() -> BookingApiClient:
    return BookingApiClient()


@lru_cache
def get_mock_booking_api() -> MockBookingApi:
    return MockBookingApi(_demo_appointments())


@lru_cache
def get_staff_directory() -> StaffDirectory:
    """The one staff directory, read by the planning and edited through /staff."""
    if _use_mocks():
        store: StaffStorePort = JsonStaffStore(settings.STAFF_STORE_PATH)
    else:
        store = HttpStaffStore(get_booking_api_client(), default_color=settings.DEFAULT_STAFF_COLOR)
    return StaffDirectory(store=store, cache=StaffCache(ttl_seconds=settings.STAFF_CACHE_TTL_SECONDS))


def get_appointment_source() -> AppointmentSourcePort:
    if _use_mocks():
        return get_mock_booking_api()
    return HttpAppointmentSource(get_booking_api_client())


def get_staff_source() -> StaffSourcePort:
    return get_staff_directory()


def get_new_appointment_flow() -> NewAppointmentPort:
    if _use_mocks():
        return get_mock_booking_api()
    return HttpNewAppointmentFlow(get_booking_api_client())


def get_planning_view_use_case() -> PlanningViewUseCase:
    logger.debug("ENV=%s mocks=%s", settings.ENV, _use_mocks())
    return PlanningViewUseCase(
        appointments=get_appointment_source(),
        staff=get_staff_source(),
        new_appointment=get_new_appointment_flow(),
        locale=settings.PLANNING_LOCALE,
        first_weekday=settings.PLANNING_FIRST_WEEKDAY,
        start_hour=settings.PLANNING_START_HOUR,
        end_hour=settings.PLANNING_END_HOUR,
        default_color=settings.DEFAULT_STAFF_COLOR,
        premium_weekdays=tuple(settings.PREMIUM_WEEKDAYS),
    )
