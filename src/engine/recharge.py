"""Artificial recharge estimator: recharge volume, structure choice, site score.

Scoring dimensions (0-100 total, capped):
  Soil permeability:  permeability x 20 (uncapped before the total cap)
  Open space:         10 or 30
  Groundwater depth:  5 or 25
  Rainfall:           10 or 25

Pure functions. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from src.engine.rounding import ONE_PLACE, round_half_up
from src.models.common import BudgetRange, Feasibility, parse_choice
from src.models.recharge import (
    ARInput,
    ARResult,
    FeasibilityBreakdown,
    RechargeStructure,
    SoilType,
)

RECHARGE_EFFICIENCY = Decimal("0.7")  # Share of rainfall routed to the structure
GROUNDWATER_FRACTION = Decimal("0.8")  # Share that reaches the aquifer
CARBON_PER_LITRE = Decimal("0.0002")  # kg CO2 avoided per litre recharged
HOURS_PER_DAY = 24
MAX_SCORE = Decimal("100")

# m/day
SOIL_PERMEABILITY: dict[SoilType, Decimal] = {
    SoilType.CLAY: Decimal("0.01"),
    SoilType.SILT: Decimal("0.1"),
    SoilType.SAND: Decimal("1.0"),
    SoilType.GRAVEL: Decimal("10.0"),
    SoilType.ROCK: Decimal("0.001"),
}

# Unknown or missing budget falls through to the high multiplier
COST_MULTIPLIERS: dict[BudgetRange, Decimal] = {
    BudgetRange.LOW: Decimal("0.9"),
    BudgetRange.MEDIUM: Decimal("1.1"),
    BudgetRange.HIGH: Decimal("1.3"),
}

FEASIBILITY_NOTES: dict[Feasibility, str] = {
    Feasibility.HIGHLY_FEASIBLE: "Excellent site conditions for artificial recharge implementation.",
    Feasibility.MODERATELY_FEASIBLE: "Good potential with site optimization recommendations.",
    Feasibility.REQUIRES_OPTIMIZATION: "Consider site modifications or alternative recharge methods.",
}


@dataclass(frozen=True)
class StructureRule:
    structure: RechargeStructure
    base_cost: Decimal
    applies: Callable[[ARInput], bool]


# Evaluated in order; the first rule that applies wins.
STRUCTURE_RULES: tuple[StructureRule, ...] = (
    StructureRule(
        RechargeStructure.RECHARGE_PIT,
        Decimal("25000"),
        lambda site: site.groundwater_depth < 5 and site.open_space > 50,
    ),
    StructureRule(
        RechargeStructure.PERCOLATION_TANK,
        Decimal("75000"),
        lambda site: site.groundwater_depth < 15 and site.open_space > 100,
    ),
    StructureRule(
        RechargeStructure.BOREWELL_RECHARGE,
        Decimal("15000"),
        lambda site: site.existing_borewell,
    ),
    StructureRule(
        RechargeStructure.INFILTRATION_TRENCH,
        Decimal("50000"),
        lambda site: True,
    ),
)


def soil_permeability(soil_type) -> Decimal:
    soil = parse_choice(SoilType, soil_type)
    if soil is None:
        return Decimal("0")
    return SOIL_PERMEABILITY[soil]


def recharge_volume(catchment_area: Decimal, rainfall: Decimal) -> Decimal:
    return catchment_area * rainfall * RECHARGE_EFFICIENCY


def infiltration_rate(permeability: Decimal) -> Decimal:
    return permeability * HOURS_PER_DAY


def required_area(volume: Decimal, rate: Decimal) -> Decimal:
    """Minimum infiltration footprint. Zero rate gives 0."""
    annual_capacity = rate * 365
    if annual_capacity == 0:
        return Decimal("0")
    return volume / annual_capacity


def select_structure(site: ARInput) -> StructureRule:
    for rule in STRUCTURE_RULES:
        if rule.applies(site):
            return rule
    return STRUCTURE_RULES[-1]


def cost_multiplier(budget) -> Decimal:
    key = parse_choice(BudgetRange, budget)
    return COST_MULTIPLIERS.get(key, COST_MULTIPLIERS[BudgetRange.HIGH])


def annual_recharge(volume: Decimal) -> Decimal:
    return volume * GROUNDWATER_FRACTION


def carbon_offset(recharged: Decimal) -> Decimal:
    return recharged * CARBON_PER_LITRE


def score_breakdown(
    permeability: Decimal,
    open_space: Decimal,
    min_area: Decimal,
    groundwater_depth: Decimal,
    rainfall: Decimal,
) -> FeasibilityBreakdown:
    return FeasibilityBreakdown(
        soil=permeability * 20,
        space=Decimal("30") if open_space > min_area else Decimal("10"),
        groundwater=Decimal("25") if groundwater_depth < 20 else Decimal("5"),
        rainfall=Decimal("25") if rainfall > 600 else Decimal("10"),
    )


def feasibility_score(breakdown: FeasibilityBreakdown) -> Decimal:
    return min(MAX_SCORE, breakdown.total)


def recharge_feasibility(score: Decimal) -> Feasibility:
    if score > 75:
        return Feasibility.HIGHLY_FEASIBLE
    if score > 50:
        return Feasibility.MODERATELY_FEASIBLE
    return Feasibility.REQUIRES_OPTIMIZATION


def estimate_recharge(site: ARInput) -> ARResult:
    """Run the full artificial recharge estimate for a site."""
    permeability = soil_permeability(site.soil_type)
    volume = recharge_volume(site.catchment_area, site.rainfall)
    rate = infiltration_rate(permeability)
    min_area = required_area(volume, rate)

    rule = select_structure(site)
    total_cost = rule.base_cost * cost_multiplier(site.budget)

    recharged = annual_recharge(volume)

    breakdown = score_breakdown(
        permeability, site.open_space, min_area, site.groundwater_depth, site.rainfall
    )
    score = feasibility_score(breakdown)
    feasibility = recharge_feasibility(score)

    return ARResult(
        permeability=permeability,
        infiltration_rate=round_half_up(rate, ONE_PLACE),
        recharge_volume=round_half_up(volume),
        annual_recharge=round_half_up(recharged),
        required_area=round_half_up(min_area),
        recommended_structure=rule.structure,
        structure_cost=rule.base_cost,
        total_cost=round_half_up(total_cost),
        carbon_offset=round_half_up(carbon_offset(recharged), ONE_PLACE),
        feasibility_score=round_half_up(score),
        score_breakdown=breakdown,
        feasibility=feasibility,
        feasibility_note=FEASIBILITY_NOTES[feasibility],
    )
