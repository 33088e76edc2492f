"""Minimal smoke tests.

Proves the app boots, the seed flow works, and a quote can be priced end to end.
"""

from decimal import Decimal

from fastapi import FastAPI
from starlette.testclient import TestClient

from app.main import app


def test_app_starts():
    """The FastAPI app object can be imported and is a FastAPI instance."""
    assert isinstance(app, FastAPI)


def test_health_endpoint(client: TestClient):
    """GET / returns 200 with app info."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["app"] == "ratecard"
    assert data["status"] == "running"
    assert "version" in data


def test_openapi_lists_routes(client: TestClient):
    paths = client.get("/openapi.json").json()["paths"]
    assert "/v1/quotes/" in paths
    assert "/v1/rate_tables/{table_id}/export" in paths


def test_create_client_and_quote(client: TestClient):
    """POST /v1/clients/ seeds tables that can be filled in and quoted."""
    created = client.post("/v1/clients/", json={"name": "Smoke Client"})
    assert created.status_code == 201
    client_id = created.json()["id"]

    table = client.get(
        "/v1/rate_tables/active",
        params={"client_id": client_id, "pricing_model": "flat"},
    ).json()
    route_id = table["routes"][0]["id"]
    client.put(
        f"/v1/rate_tables/{table['id']}/routes/{route_id}",
        json={"origin": "MNL", "destination": "DVO", "rates": [100, 150, 200, 400]},
    )

    response = client.post(
        "/v1/quotes/",
        json={
            "client_id": client_id,
            "pricing_model": "flat",
            "origin": "MNL",
            "destination": "DVO",
            "weight": 120,
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert Decimal(data["amount"]) == Decimal("200")
    assert data["display_amount"] == "200.00"


def test_init_db_creates_tables():
    from sqlalchemy import inspect

    from app.core import database

    database.init_db()
    names = set(inspect(database.engine).get_table_names())
    assert {"clients", "rate_tables", "routes", "bracket_schedules"} <= names
