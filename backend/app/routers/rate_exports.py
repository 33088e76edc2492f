from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.rate_export import MatrixExport, MatrixImportResult
from app.services.rate_export_service import RateExportService

router = APIRouter()


@router.get(
    "/",
    response_model=MatrixExport,
    summary="Export the full rate matrix",
)
async def export_matrix(db: Session = Depends(get_db)) -> MatrixExport:
    """Export the bracket limits and every client's rate tables as one JSON document."""
    return RateExportService(db).export_matrix()


@router.post(
    "/",
    response_model=MatrixImportResult,
    summary="Import a rate matrix",
    responses={400: {"description": "Malformed matrix document"}},
)
async def import_matrix(
    payload: dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
) -> MatrixImportResult:
    """Replace all clients and tables from an exported matrix document.

    Documents from another format version only update the bracket limits.
    """
    try:
        return RateExportService(db).import_matrix(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
