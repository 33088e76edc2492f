from app.models.bracket_schedule import BracketSchedule
from app.models.client import Client
from app.models.rate_table import PricingModel, RateTable
from app.models.route import Route

__all__ = [
    "BracketSchedule",
    "Client",
    "PricingModel",
    "RateTable",
    "Route",
]
