"""Canonical test fixtures used across engine, API and CLI tests.

RWH fixture: 200 sq.m concrete roof, 1200 mm rainfall, 4 residents, medium budget.
AR fixture: 500 sq.m catchment on sand, 1000 mm rainfall, water table at 3 m,
60 sq.m of open space, no borewell, low budget.
"""

import pytest
from decimal import Decimal

from src.models.rwh import RWHInput
from src.models.recharge import ARInput


@pytest.fixture
def canonical_rwh_input() -> RWHInput:
    """Four-person house with a concrete roof in a 1200 mm rainfall zone."""
    return RWHInput(
        location="Bengaluru",
        roof_area=Decimal("200"),
        roof_type="concrete",
        rainfall=Decimal("1200"),
        residents=4,
        environment_type="residential",
        budget="medium",
    )


@pytest.fixture
def canonical_ar_input() -> ARInput:
    """Sandy plot with a shallow water table and room for a pit."""
    return ARInput(
        location="Chennai",
        catchment_area=Decimal("500"),
        soil_type="sand",
        rainfall=Decimal("1000"),
        groundwater_depth=Decimal("3"),
        open_space=Decimal("60"),
        existing_borewell=False,
        budget="low",
    )


@pytest.fixture
def clay_ar_input() -> ARInput:
    """Deep water table on clay, dry climate, borewell on site."""
    return ARInput(
        catchment_area=Decimal("300"),
        soil_type="clay",
        rainfall=Decimal("500"),
        groundwater_depth=Decimal("25"),
        open_space=Decimal("20"),
        existing_borewell=True,
        budget="medium",
    )
