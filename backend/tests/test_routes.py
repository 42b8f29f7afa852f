"""
COVID-19 India API — Endpoint Tests
=====================================

What:  Exercises every route through the full app against a real SQLite store.
How:   HTTPX AsyncClient over ASGITransport; the store is seeded by conftest.

What we test:
    ✅ State listing, lookup and per-state aggregation
    ✅ District create → read round trip, update, delete
    ✅ Unknown ids answer 200 with {} instead of failing
    ✅ Quotes and SQL fragments in input are stored verbatim
    ✅ Statement failures answer a generic 500
"""

import pytest
from sqlalchemy import func, select, text

from covid19_api.models.district import District

NEW_DISTRICT = {
    "districtName": "X",
    "stateId": 21,
    "cases": 10,
    "cured": 5,
    "active": 3,
    "deaths": 2,
}


async def latest_district_id(storage):
    async with storage.session() as session:
        result = await session.execute(select(func.max(District.district_id)))
        return result.scalar_one()


class TestStates:
    """GET /states/ and GET /states/{state_id}."""

    @pytest.mark.asyncio
    async def test_list_states(self, test_client):
        response = await test_client.get("/states/")

        assert response.status_code == 200
        states = response.json()
        assert len(states) == 4
        assert states[0] == {
            "stateId": 1,
            "stateName": "Andaman and Nicobar Islands",
            "population": 380581,
        }

    @pytest.mark.asyncio
    async def test_get_state(self, test_client):
        response = await test_client.get("/states/21")

        assert response.status_code == 200
        assert response.json() == {
            "stateId": 21,
            "stateName": "Maharashtra",
            "population": 112374333,
        }

    @pytest.mark.asyncio
    async def test_get_unknown_state_is_empty_object(self, test_client):
        response = await test_client.get("/states/9999")

        assert response.status_code == 200
        assert response.json() == {}

    @pytest.mark.asyncio
    async def test_non_numeric_state_id_is_rejected(self, test_client):
        """Ids are coerced to integers; text never reaches the store."""
        response = await test_client.get("/states/1' OR '1'='1")

        assert response.status_code == 422


class TestStateStats:
    """GET /states/{state_id}/stats."""

    @pytest.mark.asyncio
    async def test_stats_sum_district_counters(self, test_client):
        """Cases [10,20], cured [5,5], active [3,10], deaths [2,5]."""
        response = await test_client.get("/states/21/stats")

        assert response.status_code == 200
        assert response.json() == {
            "totalCases": 30,
            "totalCured": 10,
            "totalActive": 13,
            "totalDeaths": 7,
        }

    @pytest.mark.asyncio
    async def test_stats_for_state_without_districts_are_null(self, test_client):
        response = await test_client.get("/states/36/stats")

        assert response.status_code == 200
        assert response.json() == {
            "totalCases": None,
            "totalCured": None,
            "totalActive": None,
            "totalDeaths": None,
        }

    @pytest.mark.asyncio
    async def test_stats_follow_new_districts(self, test_client):
        await test_client.post("/districts", json={**NEW_DISTRICT, "stateId": 36})

        response = await test_client.get("/states/36/stats")

        assert response.json() == {
            "totalCases": 10,
            "totalCured": 5,
            "totalActive": 3,
            "totalDeaths": 2,
        }


class TestDistrictLifecycle:
    """POST, GET, PUT and DELETE on /districts."""

    @pytest.mark.asyncio
    async def test_create_then_read_round_trip(self, test_client, storage):
        response = await test_client.post("/districts", json=NEW_DISTRICT)

        assert response.status_code == 200
        assert response.text == "District Successfully Added"
        assert response.headers["content-type"].startswith("text/plain")

        district_id = await latest_district_id(storage)
        assert district_id == 4

        response = await test_client.get(f"/districts/{district_id}")
        assert response.status_code == 200
        assert response.json() == {"districtId": district_id, **NEW_DISTRICT}

    @pytest.mark.asyncio
    async def test_get_seeded_district(self, test_client):
        response = await test_client.get("/districts/1")

        assert response.json() == {
            "districtId": 1,
            "districtName": "Mumbai",
            "stateId": 21,
            "cases": 10,
            "cured": 5,
            "active": 3,
            "deaths": 2,
        }

    @pytest.mark.asyncio
    async def test_get_unknown_district_is_empty_object(self, test_client):
        response = await test_client.get("/districts/9999")

        assert response.status_code == 200
        assert response.json() == {}

    @pytest.mark.asyncio
    async def test_update_replaces_all_fields(self, test_client):
        body = {
            "districtName": "Thane",
            "stateId": 21,
            "cases": 100,
            "cured": 60,
            "active": 30,
            "deaths": 10,
        }

        response = await test_client.put("/districts/2", json=body)

        assert response.status_code == 200
        assert response.text == "District Details Updated"
        assert (await test_client.get("/districts/2")).json() == {"districtId": 2, **body}

    @pytest.mark.asyncio
    async def test_update_is_idempotent(self, test_client):
        body = {**NEW_DISTRICT, "districtName": "Guntur", "stateId": 2}

        await test_client.put("/districts/3", json=body)
        first = (await test_client.get("/districts/3")).json()
        await test_client.put("/districts/3", json=body)
        second = (await test_client.get("/districts/3")).json()

        assert first == second == {"districtId": 3, **body}

    @pytest.mark.asyncio
    async def test_update_unknown_district_still_succeeds(self, test_client):
        response = await test_client.put("/districts/9999", json=NEW_DISTRICT)

        assert response.status_code == 200
        assert response.text == "District Details Updated"
        assert (await test_client.get("/districts/9999")).json() == {}

    @pytest.mark.asyncio
    async def test_delete_then_read(self, test_client):
        response = await test_client.delete("/districts/1")

        assert response.status_code == 200
        assert response.text == "District Removed"
        assert (await test_client.get("/districts/1")).json() == {}

    @pytest.mark.asyncio
    async def test_delete_unknown_district_still_succeeds(self, test_client):
        response = await test_client.delete("/districts/9999")

        assert response.status_code == 200
        assert response.text == "District Removed"


class TestDistrictInput:
    """Type coercion without further validation."""

    @pytest.mark.asyncio
    async def test_numeric_strings_are_coerced(self, test_client, storage):
        body = {**NEW_DISTRICT, "cases": "42", "stateId": "2"}

        response = await test_client.post("/districts", json=body)

        assert response.status_code == 200
        district = (await test_client.get(f"/districts/{await latest_district_id(storage)}")).json()
        assert district["cases"] == 42
        assert district["stateId"] == 2

    @pytest.mark.asyncio
    async def test_missing_field_is_rejected(self, test_client):
        body = {key: value for key, value in NEW_DISTRICT.items() if key != "deaths"}

        response = await test_client.post("/districts", json=body)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_negative_counts_are_accepted(self, test_client, storage):
        response = await test_client.post("/districts", json={**NEW_DISTRICT, "active": -5})

        assert response.status_code == 200
        district = (await test_client.get(f"/districts/{await latest_district_id(storage)}")).json()
        assert district["active"] == -5

    @pytest.mark.asyncio
    async def test_unknown_state_id_is_accepted(self, test_client, storage):
        response = await test_client.post("/districts", json={**NEW_DISTRICT, "stateId": 777})

        assert response.status_code == 200
        district_id = await latest_district_id(storage)
        assert (await test_client.get(f"/districts/{district_id}")).json()["stateId"] == 777
        assert (await test_client.get(f"/districts/{district_id}/details")).json() == {}

    @pytest.mark.asyncio
    async def test_quotes_and_sql_are_stored_verbatim(self, test_client, storage):
        hostile = "O'Brien'); DROP TABLE district; --"

        response = await test_client.post("/districts", json={**NEW_DISTRICT, "districtName": hostile})

        assert response.status_code == 200
        district_id = await latest_district_id(storage)
        assert (await test_client.get(f"/districts/{district_id}")).json()["districtName"] == hostile
        # Table survived and still holds the seed rows
        assert (await test_client.get("/districts/1")).json()["districtName"] == "Mumbai"


class TestDistrictDetails:
    """GET /districts/{district_id}/details."""

    @pytest.mark.asyncio
    async def test_details_returns_state_name(self, test_client):
        response = await test_client.get("/districts/1/details")

        assert response.status_code == 200
        assert response.json() == {"stateName": "Maharashtra"}

    @pytest.mark.asyncio
    async def test_details_for_unknown_district(self, test_client):
        response = await test_client.get("/districts/9999/details")

        assert response.status_code == 200
        assert response.json() == {}


class TestErrorsAndPlumbing:
    """Error responses, request IDs and health."""

    @pytest.mark.asyncio
    async def test_statement_failure_returns_generic_500(self, test_client, storage):
        async with storage.engine.begin() as conn:
            await conn.execute(text("DROP TABLE district"))

        response = await test_client.get("/districts/1")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert "district" not in body["message"]
        assert body["request_id"] == response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/states/", headers={"X-Request-ID": "abc12345"})

        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
        assert "uptimeSeconds" in body
