"""Plain-text reports for the downloadable / terminal summaries.

Pure string builders. No I/O.
"""

from decimal import Decimal

from src.models.recharge import ARInput, ARResult
from src.models.rwh import RWHInput, RWHResult

WIDTH = 64


def _litres(v: Decimal) -> str:
    return f"{int(v):,} L"


def _rupees(v: Decimal) -> str:
    return f"₹{int(v):,}"


def _header(title: str) -> list[str]:
    return ["", "=" * WIDTH, f"  {title}", "=" * WIDTH]


def _row(label: str, value: str) -> str:
    return f"  {label + ':':<26}{value}"


def rwh_report(inputs: RWHInput, result: RWHResult) -> str:
    lines = _header("Rainwater Harvesting Report")
    lines += [
        _row("Location", inputs.location or "Not specified"),
        _row("Roof", f"{inputs.roof_area} sq.m ({inputs.roof_type or 'unspecified'}, "
                     f"runoff {result.runoff_coefficient})"),
        _row("Annual Rainfall", f"{inputs.rainfall} mm"),
        _row("Residents", f"{inputs.residents} ({_litres(result.water_demand)}/day)"),
        _row("Environment", inputs.environment_type or "Not specified"),
        _row("Budget", inputs.budget or "Not specified"),
    ]

    lines += _header("Supply & Demand")
    lines += [
        _row("Harvestable Volume", f"{_litres(result.harvestable_volume)}/year"),
        _row("Annual Demand", f"{_litres(result.annual_demand)}/year"),
        _row("Demand Coverage", f"{result.coverage}%"),
        _row("Recommended Tank", _litres(result.tank_size)),
    ]

    lines += _header("Economic Analysis")
    lines += [
        _row("Estimated Setup Cost", _rupees(result.estimated_cost)),
        _row("Annual Savings", _rupees(result.annual_savings)),
        _row("Payback Period", f"{result.payback_period} years"),
    ]

    lines += _header(result.feasibility.value)
    lines.append(f"  {result.feasibility_note}")
    lines.append("")
    return "\n".join(lines)


def recharge_report(site: ARInput, result: ARResult) -> str:
    lines = _header("Artificial Recharge Report")
    lines += [
        _row("Location", site.location or "Not specified"),
        _row("Catchment Area", f"{site.catchment_area} sq.m"),
        _row("Open Space", f"{site.open_space} sq.m"),
        _row("Soil", f"{site.soil_type or 'unspecified'} ({result.permeability} m/day)"),
        _row("Annual Rainfall", f"{site.rainfall} mm"),
        _row("Groundwater Depth", f"{site.groundwater_depth} m"),
        _row("Existing Borewell", "Yes" if site.existing_borewell else "No"),
        _row("Budget", site.budget or "Not specified"),
    ]

    lines += _header("Recharge Analysis")
    lines += [
        _row("Recharge Potential", f"{_litres(result.recharge_volume)}/year"),
        _row("Infiltration Rate", f"{result.infiltration_rate} mm/day"),
        _row("Min. Required Area", f"{int(result.required_area):,} sq.m"),
        _row("Recommended Structure", result.recommended_structure.value),
        _row("Estimated Cost", _rupees(result.total_cost)),
    ]

    lines += _header("Environmental Impact")
    lines += [
        _row("Groundwater Recharge", f"{_litres(result.annual_recharge)}/year"),
        _row("Carbon Offset", f"{result.carbon_offset} kg CO2/year"),
    ]

    b = result.score_breakdown
    lines += _header(f"{result.feasibility.value} ({result.feasibility_score}/100)")
    lines += [
        _row("Soil", str(b.soil)),
        _row("Open Space", str(b.space)),
        _row("Groundwater", str(b.groundwater)),
        _row("Rainfall", str(b.rainfall)),
        f"  {result.feasibility_note}",
        "",
    ]
    return "\n".join(lines)
