"""Rainwater harvesting routes."""

import logging

from fastapi import APIRouter, Depends

from src.api.deps import get_calculation_delay, simulate_latency
from src.api.schemas import (
    OptionResponse,
    RWHOptionsResponse,
    RWHRequest,
    RWHResponse,
)
from src.engine.rwh import RUNOFF_COEFFICIENTS, estimate_rwh
from src.models.common import BUDGET_LABELS
from src.models.rwh import ENVIRONMENT_LABELS, ROOF_TYPE_LABELS, RWHInput, RWHResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/rwh", tags=["rwh"])


def _result_to_response(result: RWHResult) -> RWHResponse:
    return RWHResponse(
        runoff_coefficient=result.runoff_coefficient,
        water_demand=result.water_demand,
        annual_demand=result.annual_demand,
        harvestable_volume=result.harvestable_volume,
        annual_harvest=result.annual_harvest,
        coverage=result.coverage,
        tank_size=result.tank_size,
        estimated_cost=result.estimated_cost,
        annual_savings=result.annual_savings,
        payback_period=result.payback_period,
        feasibility=result.feasibility.value,
        feasibility_note=result.feasibility_note,
    )


@router.post("/estimate", response_model=RWHResponse)
async def estimate(
    req: RWHRequest,
    delay: float = Depends(get_calculation_delay),
):
    """Roof, rainfall and household size → harvest, tank, cost and payback."""
    await simulate_latency(delay)

    inputs = RWHInput(
        location=req.location,
        roof_area=req.roof_area,
        roof_type=req.roof_type,
        rainfall=req.rainfall,
        residents=req.residents,
        environment_type=req.environment_type,
        budget=req.budget,
    )
    result = estimate_rwh(inputs)
    logger.info(
        "RWH estimate for %r: %s L/year, coverage %s%% (%s)",
        req.location, result.harvestable_volume, result.coverage, result.feasibility.value,
    )
    return _result_to_response(result)


@router.get("/options", response_model=RWHOptionsResponse)
async def options():
    """Selectable roof types, environments and budgets for the form."""
    return RWHOptionsResponse(
        roof_types=[
            OptionResponse(value=roof.value, label=label, coefficient=RUNOFF_COEFFICIENTS[roof])
            for roof, label in ROOF_TYPE_LABELS.items()
        ],
        environment_types=[
            OptionResponse(value=env.value, label=label)
            for env, label in ENVIRONMENT_LABELS.items()
        ],
        budgets=[
            OptionResponse(value=budget.value, label=label)
            for budget, label in BUDGET_LABELS.items()
        ],
    )
