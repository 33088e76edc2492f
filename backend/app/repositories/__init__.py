from app.repositories.bracket_schedule_repository import BracketScheduleRepository
from app.repositories.client_repository import ClientRepository
from app.repositories.rate_table_repository import RateTableRepository
from app.repositories.route_repository import RouteRepository

__all__ = [
    "BracketScheduleRepository",
    "ClientRepository",
    "RateTableRepository",
    "RouteRepository",
]
