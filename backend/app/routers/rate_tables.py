from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.rate_table import PricingModel, RateTable
from app.models.route import Route
from app.repositories.rate_table_repository import RateTableRepository
from app.repositories.route_repository import RouteRepository
from app.schemas.rate_table import RateTableCreate, RateTableResponse, RateTableUpdate
from app.schemas.route import LocationsResponse, RouteCreate, RouteResponse, RouteUpdate
from app.services.rate_export_service import RateExportService
from app.services.rate_table_service import RateTableService

router = APIRouter()


def _http_error(e: ValueError) -> HTTPException:
    detail = str(e)
    if "not found" in detail:
        return HTTPException(status_code=404, detail=detail)
    return HTTPException(status_code=400, detail=detail)


def _table_to_response(repo: RouteRepository, table: RateTable) -> dict[str, Any]:
    """Convert RateTable model to response dict with its routes."""
    return {
        "id": table.id,
        "client_id": table.client_id,
        "pricing_model": table.pricing_model,
        "name": table.name,
        "is_active": table.is_active,
        "routes": repo.get_by_table(table.id),  # type: ignore[arg-type]
        "created_at": table.created_at,
        "updated_at": table.updated_at,
    }


@router.get(
    "/",
    response_model=list[RateTableResponse],
    summary="List rate tables",
)
async def list_rate_tables(
    response: Response,
    client_id: UUID | None = Query(default=None),
    pricing_model: PricingModel | None = Query(default=None),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db),
) -> list[dict[str, Any]]:
    repo = RateTableRepository(db)
    route_repo = RouteRepository(db)
    response.headers["X-Total-Count"] = str(repo.count(client_id, pricing_model))
    tables = repo.get_all(client_id, pricing_model, skip=skip, limit=limit)
    return [_table_to_response(route_repo, table) for table in tables]


@router.get(
    "/active",
    response_model=RateTableResponse,
    summary="Get the active rate table",
    responses={404: {"description": "Client not found"}},
)
async def get_active_rate_table(
    client_id: UUID = Query(...),
    pricing_model: PricingModel = Query(...),
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    """Return the active table of a client and pricing model, creating a default one if needed."""
    try:
        table = RateTableService(db).get_active_table(client_id, pricing_model)
    except ValueError as e:
        raise _http_error(e) from None
    return _table_to_response(RouteRepository(db), table)


@router.get(
    "/{table_id}",
    response_model=RateTableResponse,
    summary="Get rate table",
    responses={404: {"description": "Rate table not found"}},
)
async def get_rate_table(table_id: UUID, db: Session = Depends(get_db)) -> dict[str, Any]:
    table = RateTableRepository(db).get_by_id(table_id)
    if not table:
        raise HTTPException(status_code=404, detail="Rate table not found")
    return _table_to_response(RouteRepository(db), table)


@router.post(
    "/",
    response_model=RateTableResponse,
    status_code=201,
    summary="Create rate table",
    responses={
        404: {"description": "Client not found"},
        422: {"description": "Validation error"},
    },
)
async def create_rate_table(
    data: RateTableCreate,
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    """Create a table with one empty route; it becomes the active table of its model."""
    try:
        table = RateTableService(db).create_table(data)
    except ValueError as e:
        raise _http_error(e) from None
    return _table_to_response(RouteRepository(db), table)


@router.put(
    "/{table_id}",
    response_model=RateTableResponse,
    summary="Rename rate table",
    responses={404: {"description": "Rate table not found"}},
)
async def rename_rate_table(
    table_id: UUID,
    data: RateTableUpdate,
    db: Session = Depends(get_db),
) -> dict[str, Any]:
    try:
        table = RateTableService(db).rename_table(table_id, data.name)
    except ValueError as e:
        raise _http_error(e) from None
    return _table_to_response(RouteRepository(db), table)


@router.post(
    "/{table_id}/activate",
    response_model=RateTableResponse,
    summary="Activate rate table",
    responses={404: {"description": "Rate table not found"}},
)
async def activate_rate_table(table_id: UUID, db: Session = Depends(get_db)) -> dict[str, Any]:
    try:
        table = RateTableService(db).activate_table(table_id)
    except ValueError as e:
        raise _http_error(e) from None
    return _table_to_response(RouteRepository(db), table)


@router.delete(
    "/{table_id}",
    status_code=204,
    summary="Delete rate table",
    responses={
        400: {"description": "Last table of its pricing model"},
        404: {"description": "Rate table not found"},
    },
)
async def delete_rate_table(table_id: UUID, db: Session = Depends(get_db)) -> Response:
    try:
        RateTableService(db).delete_table(table_id)
    except ValueError as e:
        raise _http_error(e) from None
    return Response(status_code=204)


@router.post(
    "/{table_id}/routes",
    response_model=RouteResponse,
    status_code=201,
    summary="Add route",
    responses={404: {"description": "Rate table not found"}},
)
async def add_route(
    table_id: UUID,
    data: RouteCreate | None = None,
    db: Session = Depends(get_db),
) -> Route:
    """Append a route; rates are padded or truncated to the bracket count."""
    try:
        return RateTableService(db).add_route(table_id, data)
    except ValueError as e:
        raise _http_error(e) from None


@router.put(
    "/{table_id}/routes/{route_id}",
    response_model=RouteResponse,
    summary="Update route",
    responses={404: {"description": "Route not found"}},
)
async def update_route(
    table_id: UUID,
    route_id: UUID,
    data: RouteUpdate,
    db: Session = Depends(get_db),
) -> Route:
    try:
        return RateTableService(db).update_route(table_id, route_id, data)
    except ValueError as e:
        raise _http_error(e) from None


@router.delete(
    "/{table_id}/routes/{route_id}",
    status_code=204,
    summary="Delete route",
    responses={
        400: {"description": "Last route of the table"},
        404: {"description": "Route not found"},
    },
)
async def delete_route(
    table_id: UUID,
    route_id: UUID,
    db: Session = Depends(get_db),
) -> Response:
    try:
        RateTableService(db).delete_route(table_id, route_id)
    except ValueError as e:
        raise _http_error(e) from None
    return Response(status_code=204)


@router.get(
    "/{table_id}/locations",
    response_model=LocationsResponse,
    summary="List origins and destinations",
    responses={404: {"description": "Rate table not found"}},
)
async def get_locations(table_id: UUID, db: Session = Depends(get_db)) -> dict[str, list[str]]:
    try:
        origins, destinations = RateTableService(db).locations(table_id)
    except ValueError as e:
        raise _http_error(e) from None
    return {"origins": origins, "destinations": destinations}


@router.get(
    "/{table_id}/export",
    summary="Export rate table as CSV",
    responses={
        200: {"content": {"text/csv": {}}, "description": "CSV file"},
        404: {"description": "Rate table not found"},
    },
)
async def export_rate_table_csv(table_id: UUID, db: Session = Depends(get_db)) -> Response:
    try:
        filename, content = RateExportService(db).export_table_csv(table_id)
    except ValueError as e:
        raise _http_error(e) from None
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
