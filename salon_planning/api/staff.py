from fastapi import APIRouter, Depends, HTTPException, Response

from salon_planning.api.schemas import StaffCreateSchema, StaffMemberSchema, StaffUpdateSchema
from salon_planning.application.exceptions import (
    BookingApiContractError,
    BookingApiUpstreamError,
    StaffNotFoundError,
)
from salon_planning.application.use_cases.staff_directory import StaffDirectory
from salon_planning.wiring.dependencies import get_staff_directory

router = APIRouter(prefix="/staff")


@router.get("", response_model=list[StaffMemberSchema])
def list_staff(directory: StaffDirectory = Depends(get_staff_directory)):
    try:
        staff = directory.list_staff()
    except (BookingApiUpstreamError, BookingApiContractError) as e:
        raise HTTPException(status_code=502, detail=str(e))
    return [StaffMemberSchema.from_entity(m) for m in staff]


@router.post("", response_model=StaffMemberSchema, status_code=201)
def add_staff(req: StaffCreateSchema, directory: StaffDirectory = Depends(get_staff_directory)):
    try:
        member = directory.add_staff(
            first_name=req.first_name,
            last_name=req.last_name,
            color=req.color,
            specialties=req.specialties,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (BookingApiUpstreamError, BookingApiContractError) as e:
        raise HTTPException(status_code=502, detail=str(e))
    return StaffMemberSchema.from_entity(member)


@router.put("/{staff_id}", response_model=StaffMemberSchema)
def update_staff(staff_id: int, req: StaffUpdateSchema, directory: StaffDirectory = Depends(get_staff_directory)):
    try:
        member = directory.update_staff(staff_id, **req.model_dump(exclude_none=True))
    except StaffNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (BookingApiUpstreamError, BookingApiContractError) as e:
        raise HTTPException(status_code=502, detail=str(e))
    return StaffMemberSchema.from_entity(member)


@router.delete("/{staff_id}", status_code=204)
def delete_staff(staff_id: int, directory: StaffDirectory = Depends(get_staff_directory)) -> Response:
    try:
        directory.delete_staff(staff_id)
    except StaffNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (BookingApiUpstreamError, BookingApiContractError) as e:
        raise HTTPException(status_code=502, detail=str(e))
    return Response(status_code=204)
