from app.schemas.bracket import (
    BracketLimitsUpdate,
    BracketLimitUpdate,
    BracketRange,
    BracketScheduleResponse,
)
from app.schemas.client import ClientCreate, ClientResponse, ClientUpdate
from app.schemas.quote import QuoteRequest, QuoteResponse
from app.schemas.rate_export import (
    ClientExport,
    MatrixExport,
    MatrixImportResult,
    RateTableExport,
    RouteExport,
)
from app.schemas.rate_table import RateTableCreate, RateTableResponse, RateTableUpdate
from app.schemas.route import LocationsResponse, RouteCreate, RouteResponse, RouteUpdate

__all__ = [
    "BracketLimitUpdate",
    "BracketLimitsUpdate",
    "BracketRange",
    "BracketScheduleResponse",
    "ClientCreate",
    "ClientExport",
    "ClientResponse",
    "ClientUpdate",
    "LocationsResponse",
    "MatrixExport",
    "MatrixImportResult",
    "QuoteRequest",
    "QuoteResponse",
    "RateTableCreate",
    "RateTableExport",
    "RateTableResponse",
    "RateTableUpdate",
    "RouteCreate",
    "RouteExport",
    "RouteResponse",
    "RouteUpdate",
]
