from decimal import Decimal
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.bracket import BracketLimitsUpdate, BracketLimitUpdate, BracketScheduleResponse
from app.services.bracket_service import BracketService

router = APIRouter()


def _schedule_response(service: BracketService, limits: list[Decimal]) -> dict[str, Any]:
    return {
        "limits": limits,
        "ranges": service.ranges(limits),
        "updated_at": service.get_schedule().updated_at,
    }


@router.get(
    "/",
    response_model=BracketScheduleResponse,
    summary="Get bracket limits",
)
async def get_brackets(db: Session = Depends(get_db)) -> dict[str, Any]:
    """Return the weight bracket limits shared by every rate table."""
    service = BracketService(db)
    return _schedule_response(service, service.get_limits())


@router.put(
    "/",
    response_model=BracketScheduleResponse,
    summary="Replace bracket limits",
    responses={422: {"description": "Validation error"}},
)
async def replace_brackets(
    data: BracketLimitsUpdate,
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    """Replace all limits; every route's rates are padded or truncated to match."""
    service = BracketService(db)
    try:
        limits = service.replace_limits(data.limits)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    return _schedule_response(service, limits)


@router.post(
    "/append",
    response_model=BracketScheduleResponse,
    summary="Append a bracket",
)
async def append_bracket(db: Session = Depends(get_db)) -> dict[str, Any]:
    """Add a bracket after the last limit and an empty rate cell to every route."""
    service = BracketService(db)
    return _schedule_response(service, service.append_bracket())


@router.put(
    "/{index}",
    response_model=BracketScheduleResponse,
    summary="Edit one bracket limit",
    responses={
        404: {"description": "Bracket not found"},
        422: {"description": "Validation error"},
    },
)
async def update_bracket(
    index: int,
    data: BracketLimitUpdate,
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    service = BracketService(db)
    try:
        limits = service.update_limit(index, data.value)
    except ValueError as e:
        detail = str(e)
        if "not found" in detail:
            raise HTTPException(status_code=404, detail=detail) from None
        raise HTTPException(status_code=400, detail=detail) from None
    return _schedule_response(service, limits)
