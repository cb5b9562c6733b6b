"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class RWHRequest(BaseModel):
    location: str = ""
    roof_area: Decimal = Field(Decimal("0"), ge=0, description="Roof area in sq.m")
    roof_type: str = Field("", description="concrete, metal, tile or asbestos")
    rainfall: Decimal = Field(Decimal("0"), ge=0, description="Annual rainfall in mm")
    residents: int = Field(0, ge=0)
    environment_type: str = ""
    budget: str = Field("", description="low, medium or high")


class ARRequest(BaseModel):
    location: str = ""
    catchment_area: Decimal = Field(Decimal("0"), ge=0, description="Catchment area in sq.m")
    soil_type: str = Field("", description="clay, silt, sand, gravel or rock")
    rainfall: Decimal = Field(Decimal("0"), ge=0, description="Annual rainfall in mm")
    groundwater_depth: Decimal = Field(Decimal("0"), ge=0, description="Depth to water table in m")
    open_space: Decimal = Field(Decimal("0"), ge=0, description="Available open space in sq.m")
    existing_borewell: bool = False
    budget: str = Field("", description="low, medium or high")


# ---- Response schemas ----

class RWHResponse(BaseModel):
    runoff_coefficient: Decimal
    water_demand: Decimal
    annual_demand: Decimal
    harvestable_volume: Decimal
    annual_harvest: Decimal
    coverage: Decimal
    tank_size: Decimal
    estimated_cost: Decimal
    annual_savings: Decimal
    payback_period: Decimal
    feasibility: str
    feasibility_note: str


class ScoreBreakdownResponse(BaseModel):
    soil: Decimal
    space: Decimal
    groundwater: Decimal
    rainfall: Decimal


class ARResponse(BaseModel):
    permeability: Decimal
    infiltration_rate: Decimal
    recharge_volume: Decimal
    annual_recharge: Decimal
    required_area: Decimal
    recommended_structure: str
    structure_cost: Decimal
    total_cost: Decimal
    carbon_offset: Decimal
    feasibility_score: Decimal
    score_breakdown: ScoreBreakdownResponse
    feasibility: str
    feasibility_note: str


class OptionResponse(BaseModel):
    value: str
    label: str
    coefficient: Decimal | None = None


class RWHOptionsResponse(BaseModel):
    roof_types: list[OptionResponse]
    environment_types: list[OptionResponse]
    budgets: list[OptionResponse]


class AROptionsResponse(BaseModel):
    soil_types: list[OptionResponse]
    budgets: list[OptionResponse]
