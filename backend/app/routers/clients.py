from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.client import Client
from app.repositories.client_repository import ClientRepository
from app.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from app.services.rate_table_service import RateTableService

router = APIRouter()


@router.get(
    "/",
    response_model=list[ClientResponse],
    summary="List clients",
)
async def list_clients(
    response: Response,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    db: Session = Depends(get_db),
) -> list[Client]:
    repo = ClientRepository(db)
    response.headers["X-Total-Count"] = str(repo.count())
    return repo.get_all(skip=skip, limit=limit)


@router.get(
    "/{client_id}",
    response_model=ClientResponse,
    summary="Get client",
    responses={404: {"description": "Client not found"}},
)
async def get_client(client_id: UUID, db: Session = Depends(get_db)) -> Client:
    client = ClientRepository(db).get_by_id(client_id)
    if not client:
        raise HTTPException(status_code=404, detail="Client not found")
    return client


@router.post(
    "/",
    response_model=ClientResponse,
    status_code=201,
    summary="Create client",
    responses={
        409: {"description": "Client with this name already exists"},
        422: {"description": "Validation error"},
    },
)
async def create_client(data: ClientCreate, db: Session = Depends(get_db)) -> Client:
    """Create a client with a default rate table for every pricing model."""
    try:
        return RateTableService(db).create_client(data)
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e)) from None


@router.put(
    "/{client_id}",
    response_model=ClientResponse,
    summary="Update client",
    responses={
        404: {"description": "Client not found"},
        409: {"description": "Client with this name already exists"},
    },
)
async def update_client(
    client_id: UUID,
    data: ClientUpdate,
    db: Session = Depends(get_db),
) -> Client:
    try:
        return RateTableService(db).update_client(client_id, data)
    except ValueError as e:
        detail = str(e)
        if "not found" in detail:
            raise HTTPException(status_code=404, detail=detail) from None
        raise HTTPException(status_code=409, detail=detail) from None


@router.delete(
    "/{client_id}",
    status_code=204,
    summary="Delete client",
    responses={404: {"description": "Client not found"}},
)
async def delete_client(client_id: UUID, db: Session = Depends(get_db)) -> Response:
    """Delete a client together with its rate tables and routes."""
    if not ClientRepository(db).delete(client_id):
        raise HTTPException(status_code=404, detail="Client not found")
    return Response(status_code=204)
