"""Rainwater harvesting calculator page.

Features:
  - Daily demand auto-calculated from residents (135 L/person/day)
  - Harvest vs demand chart
  - Downloadable plain-text report
"""

import logging

import dash
from dash import html, dcc, callback, Input, Output, State, no_update
import plotly.graph_objects as go

from src.dashboard.components import (
    BTN_STYLE,
    FIELD_STYLE,
    ROW_STYLE,
    error_message,
    feasibility_banner,
    field,
    metric_card,
    to_decimal,
)
from src.engine.report import rwh_report
from src.engine.rwh import RUNOFF_COEFFICIENTS, daily_water_demand, estimate_rwh
from src.models.common import BUDGET_LABELS
from src.models.rwh import ENVIRONMENT_LABELS, ROOF_TYPE_LABELS, RWHInput, RWHResult

logger = logging.getLogger(__name__)

dash.register_page(__name__, path="/rwh", name="RWH Calculator")

ROOF_OPTIONS = [
    {"label": f"{label} ({RUNOFF_COEFFICIENTS[roof]})", "value": roof.value}
    for roof, label in ROOF_TYPE_LABELS.items()
]
ENVIRONMENT_OPTIONS = [{"label": label, "value": env.value} for env, label in ENVIRONMENT_LABELS.items()]
BUDGET_OPTIONS = [{"label": label, "value": b.value} for b, label in BUDGET_LABELS.items()]

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

layout = html.Div([
    html.H2("Rainwater Harvesting Calculator"),
    html.P("Calculate your rainwater harvesting potential using CGWB-compliant formulas."),

    html.Div([
        html.Div([
            field("Location", dcc.Input(id="rwh-location", type="text", placeholder="Enter city/district", style=FIELD_STYLE)),
        ], style=ROW_STYLE),
        html.Div([
            field("Roof Area (sq.m)", dcc.Input(id="rwh-roof-area", type="number", min=0, placeholder="200", style=FIELD_STYLE)),
            field("Roof Type", dcc.Dropdown(id="rwh-roof-type", options=ROOF_OPTIONS, placeholder="Select type")),
        ], style=ROW_STYLE),
        html.Div([
            field("Annual Rainfall (mm)", dcc.Input(id="rwh-rainfall", type="number", min=0, placeholder="1200", style=FIELD_STYLE)),
            field("No. of Residents", dcc.Input(id="rwh-residents", type="number", min=0, step=1, placeholder="4", style=FIELD_STYLE)),
        ], style=ROW_STYLE),
        html.Div([
            field("Daily Water Demand (Litres)", dcc.Input(
                id="rwh-water-demand", type="text", placeholder="Calculated automatically",
                disabled=True, style=FIELD_STYLE,
            )),
        ], style=ROW_STYLE),
        html.Div([
            field("Environment Type", dcc.Dropdown(id="rwh-environment", options=ENVIRONMENT_OPTIONS, placeholder="Select")),
            field("Budget Range", dcc.Dropdown(id="rwh-budget", options=BUDGET_OPTIONS, placeholder="Select budget")),
        ], style=ROW_STYLE),
        html.Div([
            html.Button("Calculate RWH Potential", id="rwh-calculate-btn", n_clicks=0, style=BTN_STYLE),
            html.Button("Download Detailed Report", id="rwh-download-btn", n_clicks=0, disabled=True,
                        style={**BTN_STYLE, "backgroundColor": "#2e8b57"}),
        ], style={"display": "flex", "gap": "1rem"}),
    ], style={"marginBottom": "1.5rem"}),

    dcc.Loading(
        id="rwh-loading",
        children=[html.Div(id="rwh-results")],
        type="circle",
    ),
    dcc.Store(id="rwh-report-store"),
    dcc.Download(id="rwh-download"),
])


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------


@callback(
    Output("rwh-water-demand", "value"),
    Input("rwh-residents", "value"),
)
def update_water_demand(residents):
    if not residents:
        return ""
    return f"{int(daily_water_demand(int(residents))):,}"


@callback(
    [
        Output("rwh-results", "children"),
        Output("rwh-report-store", "data"),
        Output("rwh-download-btn", "disabled"),
    ],
    Input("rwh-calculate-btn", "n_clicks"),
    [
        State("rwh-location", "value"),
        State("rwh-roof-area", "value"),
        State("rwh-roof-type", "value"),
        State("rwh-rainfall", "value"),
        State("rwh-residents", "value"),
        State("rwh-environment", "value"),
        State("rwh-budget", "value"),
    ],
    prevent_initial_call=True,
)
def run_estimate(n_clicks, location, roof_area, roof_type, rainfall, residents, environment, budget):
    if not n_clicks:
        return no_update, no_update, no_update
    if not roof_area or not rainfall or not residents:
        return error_message("Roof area, rainfall and number of residents are required."), None, True

    try:
        inputs = RWHInput(
            location=location or "",
            roof_area=to_decimal(roof_area),
            roof_type=roof_type or "",
            rainfall=to_decimal(rainfall),
            residents=int(residents),
            environment_type=environment or "",
            budget=budget or "",
        )
        result = estimate_rwh(inputs)
    except (ValueError, ArithmeticError) as e:
        logger.warning("RWH estimate failed: %s", e)
        return error_message(f"Error: {e}"), None, True

    return _build_results(result), rwh_report(inputs, result), False


@callback(
    Output("rwh-download", "data"),
    Input("rwh-download-btn", "n_clicks"),
    State("rwh-report-store", "data"),
    prevent_initial_call=True,
)
def download_report(n_clicks, report):
    if not report:
        return no_update
    return dcc.send_string(report, "rwh_report.txt")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def _harvest_chart(result: RWHResult):
    fig = go.Figure(go.Bar(
        x=["Harvestable", "Annual Demand"],
        y=[float(result.harvestable_volume), float(result.annual_demand)],
        marker_color=["#0b4f6c", "#e94560"],
        text=[f"{int(result.harvestable_volume):,} L", f"{int(result.annual_demand):,} L"],
        textposition="auto",
    ))
    fig.update_layout(
        title="Annual Harvest vs Demand",
        yaxis_title="Litres / year",
        height=320,
        margin=dict(l=40, r=20, t=50, b=40),
    )
    return fig


def _build_results(result: RWHResult):
    return html.Div([
        feasibility_banner(result.feasibility, result.feasibility_note),
        html.Div([
            metric_card("Harvestable Volume (L/year)", f"{int(result.harvestable_volume):,}"),
            metric_card("Annual Demand Coverage", f"{result.coverage}%"),
            metric_card("Recommended Tank Size (L)", f"{int(result.tank_size):,}"),
            metric_card("Estimated Setup Cost", f"₹{int(result.estimated_cost):,}"),
        ], style={"display": "flex", "gap": "0.75rem", "flexWrap": "wrap", "marginBottom": "1rem"}),
        html.Div([
            metric_card("Annual Savings", f"₹{int(result.annual_savings):,}"),
            metric_card("Payback Period", f"{result.payback_period} years"),
        ], style={"display": "flex", "gap": "0.75rem", "flexWrap": "wrap", "marginBottom": "1rem"}),
        dcc.Graph(figure=_harvest_chart(result)),
    ])
