from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.quote import QuoteRequest, QuoteResponse
from app.services.quote_service import QuoteService, RouteNotFoundError

router = APIRouter()


@router.post(
    "/",
    response_model=QuoteResponse,
    summary="Quote a shipment",
    responses={
        400: {"description": "Weight or dimensions missing"},
        404: {"description": "Client, rate table or route not found"},
        422: {"description": "Validation error"},
    },
)
async def create_quote(data: QuoteRequest, db: Session = Depends(get_db)) -> dict[str, Any]:
    """Price a shipment on a route.

    A weight over the largest bracket or a blank rate is not an error: the
    response carries ``status`` ``over_limit`` or ``missing_rate`` and a
    message explaining it.
    """
    try:
        return QuoteService(db).quote(data)
    except RouteNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None
    except ValueError as e:
        detail = str(e)
        if "not found" in detail:
            raise HTTPException(status_code=404, detail=detail) from None
        raise HTTPException(status_code=400, detail=detail) from None
