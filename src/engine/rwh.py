"""Rainwater harvesting estimator: roof runoff, tank sizing, payback.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal

from src.engine.rounding import ONE_PLACE, round_half_up
from src.models.common import BudgetRange, Feasibility, parse_choice
from src.models.rwh import RoofType, RWHInput, RWHResult

LITRES_PER_PERSON_PER_DAY = Decimal("135")
SYSTEM_EFFICIENCY = Decimal("0.8")  # Gutter, first-flush and overflow losses
STORAGE_DAYS = 15
COST_PER_LITRE = Decimal("15")  # Tank capacity
WATER_RATE_PER_KL = Decimal("8")  # Municipal tariff per 1000 L

DEFAULT_RUNOFF_COEFFICIENT = Decimal("0.8")

RUNOFF_COEFFICIENTS: dict[RoofType, Decimal] = {
    RoofType.CONCRETE: Decimal("0.85"),
    RoofType.METAL: Decimal("0.95"),
    RoofType.TILE: Decimal("0.75"),
    RoofType.ASBESTOS: Decimal("0.80"),
}

# Unknown or missing budget falls through to the low multiplier
COST_MULTIPLIERS: dict[BudgetRange, Decimal] = {
    BudgetRange.LOW: Decimal("1.0"),
    BudgetRange.MEDIUM: Decimal("1.2"),
    BudgetRange.HIGH: Decimal("1.5"),
}

FEASIBILITY_NOTES: dict[Feasibility, str] = {
    Feasibility.HIGHLY_FEASIBLE: "Excellent potential for rainwater harvesting implementation.",
    Feasibility.MODERATELY_FEASIBLE: "Good potential with some limitations to consider.",
    Feasibility.LIMITED_FEASIBILITY: "Consider supplementary water sources or system optimization.",
}


def runoff_coefficient(roof_type) -> Decimal:
    """Fraction of rain on the roof that reaches the gutters."""
    roof = parse_choice(RoofType, roof_type)
    if roof is None:
        return DEFAULT_RUNOFF_COEFFICIENT
    return RUNOFF_COEFFICIENTS[roof]


def daily_water_demand(residents: int) -> Decimal:
    return Decimal(residents) * LITRES_PER_PERSON_PER_DAY


def harvestable_volume(roof_area: Decimal, rainfall: Decimal, coefficient: Decimal) -> Decimal:
    """Litres per year: 1 mm of rain on 1 sq.m is 1 L."""
    return roof_area * rainfall * coefficient * SYSTEM_EFFICIENCY


def annual_demand(water_demand: Decimal) -> Decimal:
    return water_demand * 365


def demand_coverage(harvest: Decimal, demand: Decimal) -> Decimal:
    """Percent of annual demand met by harvest. Zero demand gives 0."""
    if demand == 0:
        return Decimal("0")
    return harvest / demand * 100


def tank_size(water_demand: Decimal) -> Decimal:
    return water_demand * STORAGE_DAYS


def cost_multiplier(budget) -> Decimal:
    key = parse_choice(BudgetRange, budget)
    return COST_MULTIPLIERS.get(key, COST_MULTIPLIERS[BudgetRange.LOW])


def setup_cost(tank_litres: Decimal, budget) -> Decimal:
    return tank_litres * COST_PER_LITRE * cost_multiplier(budget)


def annual_savings(harvest: Decimal) -> Decimal:
    return harvest / 1000 * WATER_RATE_PER_KL


def payback_period(cost: Decimal, savings: Decimal) -> Decimal:
    """Years to recover the setup cost. Zero savings gives 0."""
    if savings == 0:
        return Decimal("0")
    return cost / savings


def rwh_feasibility(coverage: Decimal) -> Feasibility:
    if coverage > 60:
        return Feasibility.HIGHLY_FEASIBLE
    if coverage > 30:
        return Feasibility.MODERATELY_FEASIBLE
    return Feasibility.LIMITED_FEASIBILITY


def estimate_rwh(inputs: RWHInput) -> RWHResult:
    """Run the full rainwater harvesting estimate.

    Volumes and money are rounded to whole units, coverage and payback to
    one decimal. Payback is derived from the rounded cost and savings so the
    displayed figures agree with each other. Savings that round to 0 but are
    not 0 fall back to the unrounded figure.
    """
    coefficient = runoff_coefficient(inputs.roof_type)
    demand = daily_water_demand(inputs.residents)
    yearly_demand = annual_demand(demand)

    harvest = harvestable_volume(inputs.roof_area, inputs.rainfall, coefficient)
    coverage = demand_coverage(harvest, yearly_demand)

    tank = tank_size(demand)
    cost = round_half_up(setup_cost(tank, inputs.budget))
    raw_savings = annual_savings(harvest)
    savings = round_half_up(raw_savings)
    payback = payback_period(cost, savings if savings else raw_savings)

    feasibility = rwh_feasibility(coverage)
    harvest_rounded = round_half_up(harvest)

    return RWHResult(
        runoff_coefficient=coefficient,
        water_demand=round_half_up(demand),
        annual_demand=round_half_up(yearly_demand),
        harvestable_volume=harvest_rounded,
        annual_harvest=harvest_rounded,
        coverage=round_half_up(coverage, ONE_PLACE),
        tank_size=round_half_up(tank),
        estimated_cost=cost,
        annual_savings=savings,
        payback_period=round_half_up(payback, ONE_PLACE),
        feasibility=feasibility,
        feasibility_note=FEASIBILITY_NOTES[feasibility],
    )
