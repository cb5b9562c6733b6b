"""API route tests using FastAPI's TestClient."""

from decimal import Decimal
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from src.api.app import app
from src.api.deps import get_calculation_delay


@pytest.fixture(scope="module")
def client():
    app.dependency_overrides[get_calculation_delay] = lambda: 0.0
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


RWH_PAYLOAD = {
    "location": "Bengaluru",
    "roof_area": 200,
    "roof_type": "concrete",
    "rainfall": 1200,
    "residents": 4,
    "environment_type": "residential",
    "budget": "medium",
}

AR_PAYLOAD = {
    "location": "Chennai",
    "catchment_area": 500,
    "soil_type": "sand",
    "rainfall": 1000,
    "groundwater_depth": 3,
    "open_space": 60,
    "existing_borewell": False,
    "budget": "low",
}


def test_health(client: TestClient):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


class TestRWHRoutes:
    def test_estimate(self, client: TestClient):
        resp = client.post("/api/v1/rwh/estimate", json=RWH_PAYLOAD)
        assert resp.status_code == 200
        body = resp.json()
        assert Decimal(str(body["harvestable_volume"])) == Decimal("163200")
        assert Decimal(str(body["coverage"])) == Decimal("82.8")
        assert Decimal(str(body["tank_size"])) == Decimal("8100")
        assert Decimal(str(body["estimated_cost"])) == Decimal("145800")
        assert Decimal(str(body["payback_period"])) == Decimal("111.6")
        assert body["feasibility"] == "Highly Feasible"

    def test_defaults_to_zero(self, client: TestClient):
        """Empty form: zero everywhere, no division error."""
        resp = client.post("/api/v1/rwh/estimate", json={})
        assert resp.status_code == 200
        body = resp.json()
        assert Decimal(str(body["coverage"])) == Decimal("0")
        assert body["feasibility"] == "Limited Feasibility"

    def test_negative_area_rejected(self, client: TestClient):
        resp = client.post("/api/v1/rwh/estimate", json={**RWH_PAYLOAD, "roof_area": -5})
        assert resp.status_code == 422

    def test_non_numeric_rejected(self, client: TestClient):
        resp = client.post("/api/v1/rwh/estimate", json={**RWH_PAYLOAD, "rainfall": "lots"})
        assert resp.status_code == 422

    def test_options(self, client: TestClient):
        body = client.get("/api/v1/rwh/options").json()
        roofs = {o["value"]: o for o in body["roof_types"]}
        assert set(roofs) == {"concrete", "metal", "tile", "asbestos"}
        assert Decimal(str(roofs["metal"]["coefficient"])) == Decimal("0.95")
        assert [b["value"] for b in body["budgets"]] == ["low", "medium", "high"]
        assert len(body["environment_types"]) == 4


class TestRechargeRoutes:
    def test_estimate(self, client: TestClient):
        resp = client.post("/api/v1/recharge/estimate", json=AR_PAYLOAD)
        assert resp.status_code == 200
        body = resp.json()
        assert Decimal(str(body["recharge_volume"])) == Decimal("350000")
        assert Decimal(str(body["required_area"])) == Decimal("40")
        assert body["recommended_structure"] == "Recharge Pit"
        assert Decimal(str(body["total_cost"])) == Decimal("22500")
        assert Decimal(str(body["carbon_offset"])) == Decimal("56.0")
        assert Decimal(str(body["feasibility_score"])) == Decimal("100")
        assert Decimal(str(body["score_breakdown"]["space"])) == Decimal("30")
        assert body["feasibility"] == "Highly Feasible"

    def test_unset_budget(self, client: TestClient):
        payload = {**AR_PAYLOAD, "budget": ""}
        body = client.post("/api/v1/recharge/estimate", json=payload).json()
        assert Decimal(str(body["total_cost"])) == Decimal("32500")

    def test_negative_depth_rejected(self, client: TestClient):
        resp = client.post("/api/v1/recharge/estimate", json={**AR_PAYLOAD, "groundwater_depth": -1})
        assert resp.status_code == 422

    def test_options(self, client: TestClient):
        body = client.get("/api/v1/recharge/options").json()
        soils = {o["value"]: o for o in body["soil_types"]}
        assert Decimal(str(soils["gravel"]["coefficient"])) == Decimal("10.0")
        assert soils["clay"]["label"] == "Clay (Low Permeability)"


class TestLargeInputs:
    def test_rwh_huge_roof(self, client: TestClient):
        payload = {**RWH_PAYLOAD, "roof_area": 1e15, "rainfall": 1e15}
        resp = client.post("/api/v1/rwh/estimate", json=payload)
        assert resp.status_code == 200
        assert Decimal(str(resp.json()["harvestable_volume"])) == Decimal("6.8e29")

    def test_recharge_huge_catchment(self, client: TestClient):
        payload = {**AR_PAYLOAD, "catchment_area": 1e15, "rainfall": 1e15}
        resp = client.post("/api/v1/recharge/estimate", json=payload)
        assert resp.status_code == 200
        assert Decimal(str(resp.json()["recharge_volume"])) == Decimal("7e29")


class TestCalculationDelay:
    @pytest.fixture
    def sleeps(self, monkeypatch):
        calls = []

        async def fake_sleep(seconds):
            calls.append(seconds)

        monkeypatch.setattr("src.api.deps.asyncio", SimpleNamespace(sleep=fake_sleep))
        monkeypatch.setitem(app.dependency_overrides, get_calculation_delay, lambda: 0.75)
        return calls

    def test_rwh_waits_before_estimating(self, client: TestClient, sleeps):
        assert client.post("/api/v1/rwh/estimate", json=RWH_PAYLOAD).status_code == 200
        assert sleeps == [0.75]

    def test_recharge_waits_before_estimating(self, client: TestClient, sleeps):
        assert client.post("/api/v1/recharge/estimate", json=AR_PAYLOAD).status_code == 200
        assert sleeps == [0.75]

    def test_options_do_not_wait(self, client: TestClient, sleeps):
        client.get("/api/v1/rwh/options")
        assert sleeps == []
