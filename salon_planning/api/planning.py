from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from salon_planning.api.schemas import (
    MonthCalendarSchema,
    NewAppointmentRequestSchema,
    NewAppointmentResponseSchema,
    ViewMode,
    WeekPlanningSchema,
)
from salon_planning.application.exceptions import BookingApiContractError, BookingApiUpstreamError
from salon_planning.application.use_cases.planning_view import PlanningViewUseCase
from salon_planning.wiring.dependencies import get_planning_view_use_case

router = APIRouter(prefix="/planning")


@router.get("/week", response_model=WeekPlanningSchema)
def week_planning(
    anchor: date | None = Query(None, description="Any day of the week to show; defaults to today"),
    mode: ViewMode = ViewMode.group,
    staff_id: int | None = None,
    uc: PlanningViewUseCase = Depends(get_planning_view_use_case),
):
    try:
        planning = uc.build_week(anchor=anchor, mode=mode.value, selected_staff_id=staff_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return WeekPlanningSchema.from_entity(planning)


@router.get("/month", response_model=MonthCalendarSchema)
def month_calendar(
    year: int | None = Query(None, ge=1, le=9999),
    month: int | None = Query(None, ge=1, le=12),
    uc: PlanningViewUseCase = Depends(get_planning_view_use_case),
):
    try:
        calendar = uc.build_month(year=year, month=month)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return MonthCalendarSchema.from_entity(calendar)


@router.post("/slots", response_model=NewAppointmentResponseSchema, status_code=201)
def new_appointment(
    req: NewAppointmentRequestSchema,
    uc: PlanningViewUseCase = Depends(get_planning_view_use_case),
):
    try:
        request_id = uc.request_new_appointment(req.date, req.hour, req.staff_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (BookingApiUpstreamError, BookingApiContractError) as e:
        raise HTTPException(status_code=502, detail=str(e))
    return NewAppointmentResponseSchema(request_id=request_id)
