"""Enumerations shared by both calculators."""

from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


def parse_choice(enum_cls: type[E], value) -> E | None:
    """Map a raw form value onto an enum member, or None if it is not one."""
    if isinstance(value, enum_cls):
        return value
    if value is None:
        return None
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return None


class BudgetRange(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Feasibility(Enum):
    HIGHLY_FEASIBLE = "Highly Feasible"
    MODERATELY_FEASIBLE = "Moderately Feasible"
    LIMITED_FEASIBILITY = "Limited Feasibility"  # RWH only
    REQUIRES_OPTIMIZATION = "Requires Optimization"  # AR only


BUDGET_LABELS: dict[BudgetRange, str] = {
    BudgetRange.LOW: "Low Budget",
    BudgetRange.MEDIUM: "Medium Budget",
    BudgetRange.HIGH: "High Budget",
}
