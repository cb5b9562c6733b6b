"""CLI tests: local computation, JSON output and API mode over a mock transport."""

import asyncio
import json
from decimal import Decimal

import httpx
import pytest

from src import cli
from src.api.routes.rwh import _result_to_response
from src.engine.rwh import estimate_rwh

RWH_ARGS = [
    "rwh", "--roof-area", "200", "--roof-type", "concrete",
    "--rainfall", "1200", "--residents", "4", "--budget", "medium",
]
AR_ARGS = [
    "recharge", "--catchment-area", "500", "--soil-type", "sand",
    "--rainfall", "1000", "--depth", "3", "--open-space", "60", "--budget", "low",
]


def _run(argv):
    return asyncio.run(cli.main(argv))


def _mock_client(monkeypatch, handler):
    real_client = httpx.AsyncClient

    def factory(*args, **kwargs):
        kwargs["transport"] = httpx.MockTransport(handler)
        return real_client(*args, **kwargs)

    monkeypatch.setattr(cli.httpx, "AsyncClient", factory)


class TestLocal:
    def test_rwh_report(self, capsys):
        assert _run(RWH_ARGS) == 0
        out = capsys.readouterr().out
        assert "Rainwater Harvesting Report" in out
        assert "111.6 years" in out

    def test_recharge_json(self, capsys):
        assert _run(["--json"] + AR_ARGS) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["recharge_volume"] == 350000
        assert data["recommended_structure"] == "Recharge Pit"
        assert data["feasibility_score"] == 100
        assert data["score_breakdown"]["space"] == 30

    def test_borewell_flag(self, capsys):
        argv = [
            "--json", "recharge", "--catchment-area", "300", "--soil-type", "clay",
            "--rainfall", "500", "--depth", "25", "--open-space", "20", "--borewell",
            "--budget", "medium",
        ]
        assert _run(argv) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["recommended_structure"] == "Borewell Recharge"
        assert data["total_cost"] == 16500


class TestArgumentValidation:
    def test_negative_area_is_usage_error(self):
        with pytest.raises(SystemExit) as exc:
            _run(["rwh", "--roof-area", "-1", "--rainfall", "1200", "--residents", "4"])
        assert exc.value.code == 2

    def test_non_numeric_rainfall(self):
        with pytest.raises(SystemExit):
            _run(["rwh", "--roof-area", "200", "--rainfall", "wet", "--residents", "4"])

    def test_unknown_soil_rejected(self):
        with pytest.raises(SystemExit):
            _run(["recharge", "--catchment-area", "500", "--soil-type", "loam", "--rainfall", "900"])

    def test_parser_types(self):
        args = cli.build_parser().parse_args(RWH_ARGS)
        assert args.roof_area == Decimal("200")
        assert args.residents == 4
        assert args.api_url is None


class TestAPIMode:
    def test_rwh_via_api(self, monkeypatch, capsys, canonical_rwh_input):
        body = _result_to_response(estimate_rwh(canonical_rwh_input)).model_dump(mode="json")
        seen = {}

        def handler(request: httpx.Request):
            seen["path"] = request.url.path
            seen["payload"] = json.loads(request.content)
            return httpx.Response(200, json=body)

        _mock_client(monkeypatch, handler)
        assert _run(["--api-url", "http://api.test/", "--json"] + RWH_ARGS) == 0

        assert seen["path"] == "/api/v1/rwh/estimate"
        assert seen["payload"]["roof_area"] == "200"
        assert seen["payload"]["residents"] == 4
        data = json.loads(capsys.readouterr().out)
        assert data["estimated_cost"] == 145800
        assert data["feasibility"] == "Highly Feasible"

    def test_server_error_exits_nonzero(self, monkeypatch, capsys):
        _mock_client(monkeypatch, lambda request: httpx.Response(500, json={"detail": "boom"}))
        assert _run(["--api-url", "http://api.test"] + AR_ARGS) == 1
        assert "API returned 500: boom" in capsys.readouterr().err

    def test_connection_refused(self, monkeypatch, capsys):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        _mock_client(monkeypatch, handler)
        assert _run(["--api-url", "http://api.test"] + RWH_ARGS) == 1
        assert "Could not connect" in capsys.readouterr().err
