"""Artificial recharge data types."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from src.models.common import Feasibility


class SoilType(Enum):
    CLAY = "clay"
    SILT = "silt"
    SAND = "sand"
    GRAVEL = "gravel"
    ROCK = "rock"


SOIL_TYPE_LABELS: dict[SoilType, str] = {
    SoilType.CLAY: "Clay (Low Permeability)",
    SoilType.SILT: "Silt (Low-Medium Permeability)",
    SoilType.SAND: "Sandy Soil (High Permeability)",
    SoilType.GRAVEL: "Gravel (Very High Permeability)",
    SoilType.ROCK: "Rocky (Very Low Permeability)",
}


class RechargeStructure(Enum):
    RECHARGE_PIT = "Recharge Pit"
    PERCOLATION_TANK = "Percolation Tank"
    BOREWELL_RECHARGE = "Borewell Recharge"
    INFILTRATION_TRENCH = "Infiltration Trench"


@dataclass(frozen=True)
class ARInput:
    location: str = ""  # Display only
    catchment_area: Decimal = Decimal("0")  # sq.m
    soil_type: str = ""  # SoilType value; unknown -> zero permeability
    rainfall: Decimal = Decimal("0")  # mm/year
    groundwater_depth: Decimal = Decimal("0")  # m below ground
    open_space: Decimal = Decimal("0")  # sq.m
    existing_borewell: bool = False
    budget: str = ""  # BudgetRange value; unset -> high


@dataclass(frozen=True)
class FeasibilityBreakdown:
    """Points contributed by each site factor (before the 100 cap)."""
    soil: Decimal = Decimal("0")
    space: Decimal = Decimal("0")
    groundwater: Decimal = Decimal("0")
    rainfall: Decimal = Decimal("0")

    @property
    def total(self) -> Decimal:
        return self.soil + self.space + self.groundwater + self.rainfall


@dataclass(frozen=True)
class ARResult:
    # Soil
    permeability: Decimal = Decimal("0")  # m/day
    infiltration_rate: Decimal = Decimal("0")  # mm/day

    # Volumes
    recharge_volume: Decimal = Decimal("0")  # L/year
    annual_recharge: Decimal = Decimal("0")  # L/year reaching groundwater
    required_area: Decimal = Decimal("0")  # sq.m

    # Structure
    recommended_structure: RechargeStructure = RechargeStructure.INFILTRATION_TRENCH
    structure_cost: Decimal = Decimal("0")  # Before budget multiplier
    total_cost: Decimal = Decimal("0")

    # Environment
    carbon_offset: Decimal = Decimal("0")  # kg CO2/year

    # Scoring
    feasibility_score: Decimal = Decimal("0")  # 0-100
    score_breakdown: FeasibilityBreakdown = field(default_factory=FeasibilityBreakdown)
    feasibility: Feasibility = Feasibility.REQUIRES_OPTIMIZATION
    feasibility_note: str = ""
