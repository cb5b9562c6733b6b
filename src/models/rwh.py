"""Rainwater harvesting data types."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from src.models.common import Feasibility


class RoofType(Enum):
    CONCRETE = "concrete"
    METAL = "metal"
    TILE = "tile"
    ASBESTOS = "asbestos"


class EnvironmentType(Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    AGRICULTURAL = "agricultural"


ROOF_TYPE_LABELS: dict[RoofType, str] = {
    RoofType.CONCRETE: "Concrete",
    RoofType.METAL: "Metal Sheet",
    RoofType.TILE: "Clay Tile",
    RoofType.ASBESTOS: "Asbestos",
}

ENVIRONMENT_LABELS: dict[EnvironmentType, str] = {
    EnvironmentType.RESIDENTIAL: "Residential",
    EnvironmentType.COMMERCIAL: "Commercial",
    EnvironmentType.INDUSTRIAL: "Industrial",
    EnvironmentType.AGRICULTURAL: "Agricultural",
}


@dataclass(frozen=True)
class RWHInput:
    # Site
    location: str = ""  # Display only
    roof_area: Decimal = Decimal("0")  # sq.m
    roof_type: str = ""  # RoofType value; unknown -> default coefficient
    rainfall: Decimal = Decimal("0")  # mm/year

    # Demand
    residents: int = 0
    environment_type: str = ""  # Display only

    # Cost
    budget: str = ""  # BudgetRange value


@dataclass(frozen=True)
class RWHResult:
    # Coefficients and demand
    runoff_coefficient: Decimal = Decimal("0")
    water_demand: Decimal = Decimal("0")  # L/day
    annual_demand: Decimal = Decimal("0")  # L/year

    # Supply
    harvestable_volume: Decimal = Decimal("0")  # L/year
    annual_harvest: Decimal = Decimal("0")  # L/year
    coverage: Decimal = Decimal("0")  # % of annual demand

    # Storage & economics
    tank_size: Decimal = Decimal("0")  # L
    estimated_cost: Decimal = Decimal("0")
    annual_savings: Decimal = Decimal("0")
    payback_period: Decimal = Decimal("0")  # years

    feasibility: Feasibility = Feasibility.LIMITED_FEASIBILITY
    feasibility_note: str = ""
