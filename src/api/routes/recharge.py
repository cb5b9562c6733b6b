"""Artificial recharge routes."""

import logging

from fastapi import APIRouter, Depends

from src.api.deps import get_calculation_delay, simulate_latency
from src.api.schemas import (
    AROptionsResponse,
    ARRequest,
    ARResponse,
    OptionResponse,
    ScoreBreakdownResponse,
)
from src.engine.recharge import SOIL_PERMEABILITY, estimate_recharge
from src.models.common import BUDGET_LABELS
from src.models.recharge import SOIL_TYPE_LABELS, ARInput, ARResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/recharge", tags=["recharge"])


def _result_to_response(result: ARResult) -> ARResponse:
    b = result.score_breakdown
    return ARResponse(
        permeability=result.permeability,
        infiltration_rate=result.infiltration_rate,
        recharge_volume=result.recharge_volume,
        annual_recharge=result.annual_recharge,
        required_area=result.required_area,
        recommended_structure=result.recommended_structure.value,
        structure_cost=result.structure_cost,
        total_cost=result.total_cost,
        carbon_offset=result.carbon_offset,
        feasibility_score=result.feasibility_score,
        score_breakdown=ScoreBreakdownResponse(
            soil=b.soil,
            space=b.space,
            groundwater=b.groundwater,
            rainfall=b.rainfall,
        ),
        feasibility=result.feasibility.value,
        feasibility_note=result.feasibility_note,
    )


@router.post("/estimate", response_model=ARResponse)
async def estimate(
    req: ARRequest,
    delay: float = Depends(get_calculation_delay),
):
    """Catchment, soil and groundwater conditions → structure, cost and site score."""
    await simulate_latency(delay)

    site = ARInput(
        location=req.location,
        catchment_area=req.catchment_area,
        soil_type=req.soil_type,
        rainfall=req.rainfall,
        groundwater_depth=req.groundwater_depth,
        open_space=req.open_space,
        existing_borewell=req.existing_borewell,
        budget=req.budget,
    )
    result = estimate_recharge(site)
    logger.info(
        "AR estimate for %r: %s, score %s (%s)",
        req.location, result.recommended_structure.value,
        result.feasibility_score, result.feasibility.value,
    )
    return _result_to_response(result)


@router.get("/options", response_model=AROptionsResponse)
async def options():
    """Selectable soil types (with permeability in m/day) and budgets."""
    return AROptionsResponse(
        soil_types=[
            OptionResponse(value=soil.value, label=label, coefficient=SOIL_PERMEABILITY[soil])
            for soil, label in SOIL_TYPE_LABELS.items()
        ],
        budgets=[
            OptionResponse(value=budget.value, label=label)
            for budget, label in BUDGET_LABELS.items()
        ],
    )
