"""Quote API tests."""

import uuid
from decimal import Decimal

import pytest

from app.services.quote_service import display_amount


@pytest.fixture
def acme(client) -> dict:
    response = client.post("/v1/clients/", json={"name": "Acme Freight"})
    assert response.status_code == 201
    return response.json()


def set_route(client, client_id: str, model: str, rates: list, origin="MNL", destination="CEB"):
    """Fill the seeded route of the active table for a model."""
    table = client.get(
        "/v1/rate_tables/active", params={"client_id": client_id, "pricing_model": model}
    ).json()
    response = client.put(
        f"/v1/rate_tables/{table['id']}/routes/{table['routes'][0]['id']}",
        json={"origin": origin, "destination": destination, "rates": rates},
    )
    assert response.status_code == 200
    return table


def quote(client, client_id: str, model: str = "fixed", **overrides) -> dict:
    payload = {
        "client_id": client_id,
        "pricing_model": model,
        "origin": "MNL",
        "destination": "CEB",
        "weight": 30,
        "charge_basis": "actual",
    }
    payload.update(overrides)
    return client.post("/v1/quotes/", json=payload)


class TestQuote:
    def test_fixed(self, client, acme):
        set_route(client, acme["id"], "fixed", [10, 8, 6, 5])
        response = quote(client, acme["id"])
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert Decimal(data["amount"]) == Decimal("300")
        assert data["display_amount"] == "300.00"
        assert data["currency"] == "Php"
        assert data["bracket_label"] == "1-50kg"
        assert data["message"] == "fixed | Act. Wt. (30kg) | [Bracket: 1-50kg]"

    def test_cumulative(self, client, acme):
        set_route(client, acme["id"], "cumulative", [10, 8, 6, 5])
        data = quote(client, acme["id"], "cumulative", weight=120).json()
        # 50 x 10 + 50 x 8 + 20 x 6
        assert Decimal(data["amount"]) == Decimal("1020")
        assert data["display_amount"] == "1,020.00"
        assert data["bracket_label"] == "101-150kg"

    def test_min_cumulative(self, client, acme):
        set_route(client, acme["id"], "minCumulative", [20, 8, 6, 5])
        data = quote(client, acme["id"], "minCumulative", weight=70).json()
        assert Decimal(data["amount"]) == Decimal("180")

    def test_fractional_weight_uses_truncated_bracket(self, client, acme):
        set_route(client, acme["id"], "flat", [100, 200, 300, 400])
        data = quote(client, acme["id"], "flat", weight=50.5).json()
        assert Decimal(data["amount"]) == Decimal("100")
        assert data["message"] == "flat | Act. Wt. (50.5kg) | [Bracket: 1-50kg]"

    def test_over_limit(self, client, acme):
        set_route(client, acme["id"], "fixed", [10, 8, 6, 5])
        response = quote(client, acme["id"], weight=600)
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "over_limit"
        assert data["amount"] is None
        assert data["display_amount"] is None
        assert data["message"] == "Weight (600kg) exceeds 500kg limit"

    def test_missing_rate(self, client, acme):
        set_route(client, acme["id"], "fixed", [None, 8, 6, 5])
        data = quote(client, acme["id"]).json()
        assert data["status"] == "missing_rate"
        assert data["amount"] is None
        assert data["message"] == "Rate is blank/missing for this bracket."

    def test_excess_beyond_last_bracket(self, client, acme):
        set_route(client, acme["id"], "excess", [3, 2, None, None])
        data = quote(client, acme["id"], "excess", weight=600).json()
        assert data["status"] == "ok"
        assert Decimal(data["amount"]) == Decimal("1250")
        assert data["bracket_label"] is None
        assert data["message"].endswith("[Bracket: Unknown]")

    def test_volumetric(self, client, acme):
        set_route(client, acme["id"], "fixed", [10, 8, 6, 5])
        data = quote(
            client,
            acme["id"],
            weight=5,
            length=100,
            width=50,
            height=60,
            charge_basis="volumetric",
        ).json()
        assert Decimal(data["chargeable_weight"]) == Decimal("50")
        assert Decimal(data["actual_weight"]) == Decimal("5")
        assert Decimal(data["cbm"]) == Decimal("0.3")
        assert Decimal(data["amount"]) == Decimal("500")
        assert data["charge_basis"] == "volumetric"
        assert data["message"] == "fixed | Vol. Wt. (50kg) | [Bracket: 1-50kg]"

    def test_duplicate_routes_use_first(self, client, acme):
        table = set_route(client, acme["id"], "flat", [100, 200, 300, 400])
        client.post(
            f"/v1/rate_tables/{table['id']}/routes",
            json={"origin": "MNL", "destination": "CEB", "rates": [1, 2, 3, 4]},
        )
        data = quote(client, acme["id"], "flat").json()
        assert Decimal(data["amount"]) == Decimal("100")
        assert data["route_id"] == table["routes"][0]["id"]

    def test_explicit_table(self, client, acme):
        set_route(client, acme["id"], "fixed", [10, 8, 6, 5])
        vip = client.post(
            "/v1/rate_tables/",
            json={"client_id": acme["id"], "pricing_model": "fixed", "name": "VIP"},
        ).json()
        client.put(
            f"/v1/rate_tables/{vip['id']}/routes/{vip['routes'][0]['id']}",
            json={"origin": "MNL", "destination": "CEB", "rates": [9, 7, 5, 3]},
        )
        seeded = [
            t
            for t in client.get(
                "/v1/rate_tables/", params={"client_id": acme["id"], "pricing_model": "fixed"}
            ).json()
            if t["id"] != vip["id"]
        ][0]

        assert Decimal(quote(client, acme["id"]).json()["amount"]) == Decimal("270")
        data = quote(client, acme["id"], table_id=seeded["id"]).json()
        assert Decimal(data["amount"]) == Decimal("300")


class TestQuoteErrors:
    def test_route_not_found(self, client, acme):
        set_route(client, acme["id"], "fixed", [10, 8, 6, 5])
        response = quote(client, acme["id"], destination="DVO")
        assert response.status_code == 404
        assert response.json()["detail"] == (
            "No configured rate for this route in table: Standard Table"
        )

    def test_zero_weight(self, client, acme):
        response = quote(client, acme["id"], weight=0)
        assert response.status_code == 400
        assert response.json()["detail"] == "Please enter valid weight/dimensions"

    def test_volumetric_without_dimensions(self, client, acme):
        response = quote(client, acme["id"], charge_basis="volumetric")
        assert response.status_code == 400

    def test_negative_weight(self, client, acme):
        response = quote(client, acme["id"], weight=-5)
        assert response.status_code == 422

    def test_unknown_client(self, client):
        response = quote(client, str(uuid.uuid4()))
        assert response.status_code == 404

    def test_table_of_other_model(self, client, acme):
        flat = client.get(
            "/v1/rate_tables/active", params={"client_id": acme["id"], "pricing_model": "flat"}
        ).json()
        response = quote(client, acme["id"], "fixed", table_id=flat["id"])
        assert response.status_code == 404

    def test_unknown_model(self, client, acme):
        response = quote(client, acme["id"], "volume")
        assert response.status_code == 422


class TestDisplayAmount:
    def test_rounds_half_up(self):
        assert display_amount(Decimal("10.005")) == "10.01"

    def test_thousands_separator(self):
        assert display_amount(Decimal("1234567.8")) == "1,234,567.80"
