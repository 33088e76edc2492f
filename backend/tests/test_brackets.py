"""Bracket limit API tests."""

from decimal import Decimal

import pytest

from app.models.bracket_schedule import BracketSchedule
from app.models.route import Route
from app.repositories.bracket_schedule_repository import BracketScheduleRepository
from app.services.bracket_service import BracketService, format_number, range_label


def limits_of(response) -> list[Decimal]:
    return [Decimal(limit) for limit in response.json()["limits"]]


@pytest.fixture
def acme(client) -> dict:
    response = client.post("/v1/clients/", json={"name": "Acme Freight"})
    assert response.status_code == 201
    return response.json()


def route_widths(db_session) -> set[int]:
    return {len(route.rates) for route in db_session.query(Route).all()}


class TestGetBrackets:
    def test_default_limits(self, client):
        response = client.get("/v1/brackets/")
        assert response.status_code == 200
        assert limits_of(response) == [Decimal(n) for n in (50, 100, 150, 500)]

    def test_ranges(self, client):
        ranges = client.get("/v1/brackets/").json()["ranges"]
        assert [r["label"] for r in ranges] == ["1-50", "51-100", "101-150", "151-500"]
        assert [r["index"] for r in ranges] == [0, 1, 2, 3]


class TestReplaceBrackets:
    def test_replace_truncates_routes(self, client, acme, db_session):
        response = client.put("/v1/brackets/", json={"limits": [50, 100]})
        assert response.status_code == 200
        assert limits_of(response) == [Decimal(50), Decimal(100)]
        assert route_widths(db_session) == {2}

    def test_replace_pads_routes(self, client, acme, db_session):
        client.put("/v1/brackets/", json={"limits": [10, 20, 30, 40, 50, 60]})
        assert route_widths(db_session) == {6}

    def test_keeps_existing_rates_when_truncating(self, client, acme):
        table = client.get(
            "/v1/rate_tables/active", params={"client_id": acme["id"], "pricing_model": "fixed"}
        ).json()
        route_id = table["routes"][0]["id"]
        client.put(
            f"/v1/rate_tables/{table['id']}/routes/{route_id}",
            json={"rates": [10, 8, 6, 5]},
        )
        client.put("/v1/brackets/", json={"limits": [50, 100, 150]})
        rates = client.get(f"/v1/rate_tables/{table['id']}").json()["routes"][0]["rates"]
        assert [Decimal(r) for r in rates] == [Decimal(10), Decimal(8), Decimal(6)]

    def test_rejects_non_positive(self, client):
        response = client.put("/v1/brackets/", json={"limits": [50, 0]})
        assert response.status_code == 422

    def test_rejects_empty(self, client):
        response = client.put("/v1/brackets/", json={"limits": []})
        assert response.status_code == 422

    @pytest.mark.parametrize("limit", ["NaN", "Infinity"])
    def test_rejects_non_finite(self, client, limit):
        response = client.put("/v1/brackets/", json={"limits": [50, limit]})
        assert response.status_code == 422
        assert client.get("/v1/brackets/").status_code == 200


class TestAppendBracket:
    def test_appends_after_last_limit(self, client, acme, db_session):
        response = client.post("/v1/brackets/append")
        assert response.status_code == 200
        assert limits_of(response)[-1] == Decimal(550)
        assert response.json()["ranges"][-1]["label"] == "501-550"
        assert route_widths(db_session) == {5}

    def test_new_cell_is_unset(self, client, acme):
        table = client.get(
            "/v1/rate_tables/active", params={"client_id": acme["id"], "pricing_model": "flat"}
        ).json()
        client.post("/v1/brackets/append")
        rates = client.get(f"/v1/rate_tables/{table['id']}").json()["routes"][0]["rates"]
        assert rates[-1] is None


class TestUpdateBracket:
    def test_edit_one_limit(self, client):
        response = client.put("/v1/brackets/1", json={"value": 120})
        assert response.status_code == 200
        assert limits_of(response) == [Decimal(n) for n in (50, 120, 150, 500)]

    def test_fractional_limit(self, client):
        response = client.put("/v1/brackets/0", json={"value": "0.5"})
        assert response.json()["ranges"][0]["label"] == "1-0.5"
        assert response.json()["ranges"][1]["label"] == "1.5-100"

    def test_index_out_of_range(self, client):
        response = client.put("/v1/brackets/9", json={"value": 120})
        assert response.status_code == 404

    def test_rejects_non_positive(self, client):
        response = client.put("/v1/brackets/0", json={"value": -1})
        assert response.status_code == 422


class TestBracketService:
    def test_replace_rejects_non_positive(self, db_session):
        with pytest.raises(ValueError, match="greater than zero"):
            BracketService(db_session).replace_limits([Decimal(50), Decimal(-1)])

    def test_replace_rejects_non_finite(self, db_session):
        with pytest.raises(ValueError, match="finite"):
            BracketService(db_session).replace_limits([Decimal(50), Decimal("NaN")])

    def test_update_rejects_non_finite(self, db_session):
        with pytest.raises(ValueError, match="greater than zero"):
            BracketService(db_session).update_limit(0, Decimal("Infinity"))

    def test_seeding_the_schedule_leaves_commit_to_caller(self, db_session):
        BracketScheduleRepository(db_session).get()
        db_session.rollback()
        assert db_session.query(BracketSchedule).count() == 0

    def test_seeded_schedule_persists_with_caller_commit(self, db_session):
        BracketScheduleRepository(db_session).get()
        db_session.commit()
        assert db_session.query(BracketSchedule).count() == 1

    def test_append_to_empty_schedule(self, db_session):
        service = BracketService(db_session)
        service.repo.set_limits([])
        assert service.append_bracket() == [Decimal(50)]

    def test_format_number(self):
        assert format_number(Decimal("100")) == "100"
        assert format_number(Decimal("2.50")) == "2.5"

    def test_range_label(self):
        assert range_label(1, [Decimal(50), Decimal(100)]) == "51-100"
