from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.routers import brackets, clients, quotes, rate_exports, rate_tables

OPENAPI_TAGS = [
    {"name": "Brackets", "description": "Edit the weight brackets shared by all rate tables."},
    {"name": "Clients", "description": "Create, read, update, and delete clients."},
    {"name": "Rate Tables", "description": "Manage rate tables, their routes and rates."},
    {"name": "Quotes", "description": "Price a shipment against a rate table."},
    {"name": "Rate Exports", "description": "Export and import the full rate matrix."},
]

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.version,
    description=(
        "Rate card API. Define per-client, per-pricing-model weight bracket "
        "rate tables and quote shipping charges against them."
    ),
    openapi_tags=OPENAPI_TAGS,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count", "Content-Disposition"],
)


app.include_router(brackets.router, prefix="/v1/brackets", tags=["Brackets"])
app.include_router(clients.router, prefix="/v1/clients", tags=["Clients"])
app.include_router(rate_tables.router, prefix="/v1/rate_tables", tags=["Rate Tables"])
app.include_router(quotes.router, prefix="/v1/quotes", tags=["Quotes"])
app.include_router(rate_exports.router, prefix="/v1/rate_exports", tags=["Rate Exports"])


@app.get("/")
async def root() -> dict[str, str]:
    return {
        "app": settings.APP_NAME,
        "version": settings.version,
        "status": "running",
    }
