"""Command-line estimator for rainwater harvesting and artificial recharge.

Usage:
    python -m src.cli rwh --roof-area 200 --roof-type concrete --rainfall 1200 --residents 4 --budget medium
    python -m src.cli recharge --catchment-area 500 --soil-type sand --rainfall 1000 --depth 3 --open-space 60
    python -m src.cli --api-url http://localhost:8000 rwh ...   # compute on a running API
    python -m src.cli --json recharge ...
"""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from decimal import Decimal

import httpx

from src.config import settings
from src.engine.recharge import estimate_recharge
from src.engine.report import recharge_report, rwh_report
from src.engine.rwh import estimate_rwh
from src.models.common import BudgetRange, Feasibility
from src.models.recharge import (
    ARInput,
    ARResult,
    FeasibilityBreakdown,
    RechargeStructure,
    SoilType,
)
from src.models.rwh import EnvironmentType, RoofType, RWHInput, RWHResult

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Remote estimate could not be obtained."""


# ── Request / response mapping ───────────────────────────────────────────────

def _payload(inputs) -> dict:
    return {
        k: str(v) if isinstance(v, Decimal) else v
        for k, v in asdict(inputs).items()
    }


def _rwh_from_json(data: dict) -> RWHResult:
    return RWHResult(
        runoff_coefficient=Decimal(str(data["runoff_coefficient"])),
        water_demand=Decimal(str(data["water_demand"])),
        annual_demand=Decimal(str(data["annual_demand"])),
        harvestable_volume=Decimal(str(data["harvestable_volume"])),
        annual_harvest=Decimal(str(data["annual_harvest"])),
        coverage=Decimal(str(data["coverage"])),
        tank_size=Decimal(str(data["tank_size"])),
        estimated_cost=Decimal(str(data["estimated_cost"])),
        annual_savings=Decimal(str(data["annual_savings"])),
        payback_period=Decimal(str(data["payback_period"])),
        feasibility=Feasibility(data["feasibility"]),
        feasibility_note=data["feasibility_note"],
    )


def _recharge_from_json(data: dict) -> ARResult:
    b = data["score_breakdown"]
    return ARResult(
        permeability=Decimal(str(data["permeability"])),
        infiltration_rate=Decimal(str(data["infiltration_rate"])),
        recharge_volume=Decimal(str(data["recharge_volume"])),
        annual_recharge=Decimal(str(data["annual_recharge"])),
        required_area=Decimal(str(data["required_area"])),
        recommended_structure=RechargeStructure(data["recommended_structure"]),
        structure_cost=Decimal(str(data["structure_cost"])),
        total_cost=Decimal(str(data["total_cost"])),
        carbon_offset=Decimal(str(data["carbon_offset"])),
        feasibility_score=Decimal(str(data["feasibility_score"])),
        score_breakdown=FeasibilityBreakdown(
            soil=Decimal(str(b["soil"])),
            space=Decimal(str(b["space"])),
            groundwater=Decimal(str(b["groundwater"])),
            rainfall=Decimal(str(b["rainfall"])),
        ),
        feasibility=Feasibility(data["feasibility"]),
        feasibility_note=data["feasibility_note"],
    )


def _result_to_json(result) -> str:
    def default(o):
        if isinstance(o, Decimal):
            return float(o)
        if isinstance(o, (Feasibility, RechargeStructure)):
            return o.value
        raise TypeError(f"Cannot serialize {type(o).__name__}")

    return json.dumps(asdict(result), default=default, indent=2)


async def _post(api_url: str, path: str, payload: dict) -> dict:
    url = f"{api_url.rstrip('/')}{path}"
    async with httpx.AsyncClient(timeout=30) as client:
        try:
            resp = await client.post(url, json=payload)
        except httpx.ConnectError as e:
            raise APIError(f"Could not connect to API at {api_url}") from e
        except httpx.TimeoutException as e:
            raise APIError("Request timed out") from e

    if resp.status_code != 200:
        try:
            detail = resp.json().get("detail", resp.text)
        except ValueError:
            detail = resp.text
        raise APIError(f"API returned {resp.status_code}: {detail}")
    return resp.json()


# ── Commands ─────────────────────────────────────────────────────────────────

async def run_rwh(args: argparse.Namespace) -> tuple[RWHInput, RWHResult]:
    inputs = RWHInput(
        location=args.location,
        roof_area=args.roof_area,
        roof_type=args.roof_type,
        rainfall=args.rainfall,
        residents=args.residents,
        environment_type=args.environment_type,
        budget=args.budget,
    )
    if args.api_url:
        data = await _post(args.api_url, "/api/v1/rwh/estimate", _payload(inputs))
        return inputs, _rwh_from_json(data)
    return inputs, estimate_rwh(inputs)


async def run_recharge(args: argparse.Namespace) -> tuple[ARInput, ARResult]:
    site = ARInput(
        location=args.location,
        catchment_area=args.catchment_area,
        soil_type=args.soil_type,
        rainfall=args.rainfall,
        groundwater_depth=args.depth,
        open_space=args.open_space,
        existing_borewell=args.borewell,
        budget=args.budget,
    )
    if args.api_url:
        data = await _post(args.api_url, "/api/v1/recharge/estimate", _payload(site))
        return site, _recharge_from_json(data)
    return site, estimate_recharge(site)


# ── Main ─────────────────────────────────────────────────────────────────────

def _non_negative(value: str) -> Decimal:
    try:
        d = Decimal(value)
    except ArithmeticError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not d.is_finite() or d < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative number: {value!r}")
    return d


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value!r}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rainwater harvesting and artificial recharge estimator"
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--api-url",
        default=None,
        help=f"Compute on a running API instead of locally (e.g. {settings.api_base_url})",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")

    budgets = [b.value for b in BudgetRange]
    sub = parser.add_subparsers(dest="command", required=True)

    rwh = sub.add_parser("rwh", help="Rooftop rainwater harvesting")
    rwh.add_argument("--location", default="", help="City/district (display only)")
    rwh.add_argument("--roof-area", type=_non_negative, required=True, help="Roof area (sq.m)")
    rwh.add_argument("--roof-type", choices=[r.value for r in RoofType], default="", help="Roof material")
    rwh.add_argument("--rainfall", type=_non_negative, required=True, help="Annual rainfall (mm)")
    rwh.add_argument("--residents", type=_non_negative_int, required=True, help="Number of residents")
    rwh.add_argument(
        "--environment-type", choices=[e.value for e in EnvironmentType], default="",
        help="Building use (display only)",
    )
    rwh.add_argument("--budget", choices=budgets, default="", help="Budget range (default: low)")

    ar = sub.add_parser("recharge", help="Artificial groundwater recharge")
    ar.add_argument("--location", default="", help="City/district (display only)")
    ar.add_argument("--catchment-area", type=_non_negative, required=True, help="Catchment area (sq.m)")
    ar.add_argument("--soil-type", choices=[s.value for s in SoilType], required=True, help="Soil type")
    ar.add_argument("--rainfall", type=_non_negative, required=True, help="Annual rainfall (mm)")
    ar.add_argument("--depth", type=_non_negative, default=Decimal("0"), help="Groundwater depth (m)")
    ar.add_argument("--open-space", type=_non_negative, default=Decimal("0"), help="Open space (sq.m)")
    ar.add_argument("--borewell", action="store_true", help="An existing borewell is available")
    ar.add_argument("--budget", choices=budgets, default="", help="Budget range (default: high)")

    return parser


async def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "rwh":
            inputs, result = await run_rwh(args)
            text = rwh_report(inputs, result)
        else:
            inputs, result = await run_recharge(args)
            text = recharge_report(inputs, result)
    except APIError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(_result_to_json(result) if args.json else text)
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
