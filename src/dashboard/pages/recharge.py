"""Artificial recharge calculator page."""

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
from src.engine.recharge import estimate_recharge, soil_permeability
from src.engine.report import recharge_report
from src.models.common import BUDGET_LABELS
from src.models.recharge import SOIL_TYPE_LABELS, ARInput, ARResult

logger = logging.getLogger(__name__)

dash.register_page(__name__, path="/recharge", name="AR Calculator")

SOIL_OPTIONS = [{"label": label, "value": soil.value} for soil, label in SOIL_TYPE_LABELS.items()]
BUDGET_OPTIONS = [{"label": label, "value": b.value} for b, label in BUDGET_LABELS.items()]
BOREWELL_OPTIONS = [
    {"label": "Yes, Available", "value": "true"},
    {"label": "No Borewell", "value": "false"},
]

layout = html.Div([
    html.H2("Artificial Recharge Calculator"),
    html.P(
        "Design groundwater recharge structures using scientific principles "
        "and CGWB guidelines for sustainable water management."
    ),

    html.Div([
        html.Div([
            field("Location", dcc.Input(id="ar-location", type="text", placeholder="Enter city/district", style=FIELD_STYLE)),
        ], style=ROW_STYLE),
        html.Div([
            field("Catchment Area (sq.m)", dcc.Input(id="ar-catchment", type="number", min=0, placeholder="500", style=FIELD_STYLE)),
            field("Available Open Space (sq.m)", dcc.Input(id="ar-open-space", type="number", min=0, placeholder="100", style=FIELD_STYLE)),
        ], style=ROW_STYLE),
        html.Div([
            field("Soil Type", dcc.Dropdown(id="ar-soil-type", options=SOIL_OPTIONS, placeholder="Select soil type")),
            field("Permeability (m/day)", dcc.Input(
                id="ar-permeability", type="text", placeholder="Auto-calculated",
                disabled=True, style=FIELD_STYLE,
            )),
        ], style=ROW_STYLE),
        html.Div([
            field("Annual Rainfall (mm)", dcc.Input(id="ar-rainfall", type="number", min=0, placeholder="1200", style=FIELD_STYLE)),
            field("Groundwater Depth (m)", dcc.Input(id="ar-depth", type="number", min=0, placeholder="10", style=FIELD_STYLE)),
        ], style=ROW_STYLE),
        html.Div([
            field("Existing Borewell", dcc.Dropdown(id="ar-borewell", options=BOREWELL_OPTIONS, placeholder="Select")),
            field("Budget Range", dcc.Dropdown(id="ar-budget", options=BUDGET_OPTIONS, placeholder="Select budget")),
        ], style=ROW_STYLE),
        html.Div([
            html.Button("Calculate AR Potential", id="ar-calculate-btn", n_clicks=0, style=BTN_STYLE),
            html.Button("Download Detailed Report", id="ar-download-btn", n_clicks=0, disabled=True,
                        style={**BTN_STYLE, "backgroundColor": "#2e8b57"}),
        ], style={"display": "flex", "gap": "1rem"}),
    ], style={"marginBottom": "1.5rem"}),

    dcc.Loading(
        id="ar-loading",
        children=[html.Div(id="ar-results")],
        type="circle",
    ),
    dcc.Store(id="ar-report-store"),
    dcc.Download(id="ar-download"),
])


@callback(
    Output("ar-permeability", "value"),
    Input("ar-soil-type", "value"),
)
def update_permeability(soil_type):
    if not soil_type:
        return ""
    return str(soil_permeability(soil_type))


@callback(
    [
        Output("ar-results", "children"),
        Output("ar-report-store", "data"),
        Output("ar-download-btn", "disabled"),
    ],
    Input("ar-calculate-btn", "n_clicks"),
    [
        State("ar-location", "value"),
        State("ar-catchment", "value"),
        State("ar-soil-type", "value"),
        State("ar-rainfall", "value"),
        State("ar-depth", "value"),
        State("ar-open-space", "value"),
        State("ar-borewell", "value"),
        State("ar-budget", "value"),
    ],
    prevent_initial_call=True,
)
def run_estimate(n_clicks, location, catchment, soil_type, rainfall, depth, open_space, borewell, budget):
    if not n_clicks:
        return no_update, no_update, no_update
    if not catchment or not rainfall or not soil_type:
        return error_message("Catchment area, rainfall and soil type are required."), None, True

    try:
        site = ARInput(
            location=location or "",
            catchment_area=to_decimal(catchment),
            soil_type=soil_type,
            rainfall=to_decimal(rainfall),
            groundwater_depth=to_decimal(depth),
            open_space=to_decimal(open_space),
            existing_borewell=borewell == "true",
            budget=budget or "",
        )
        result = estimate_recharge(site)
    except (ValueError, ArithmeticError) as e:
        logger.warning("AR estimate failed: %s", e)
        return error_message(f"Error: {e}"), None, True

    return _build_results(result), recharge_report(site, result), False


@callback(
    Output("ar-download", "data"),
    Input("ar-download-btn", "n_clicks"),
    State("ar-report-store", "data"),
    prevent_initial_call=True,
)
def download_report(n_clicks, report):
    if not report:
        return no_update
    return dcc.send_string(report, "recharge_report.txt")


def _score_chart(result: ARResult):
    b = result.score_breakdown
    factors = ["Soil", "Open Space", "Groundwater", "Rainfall"]
    points = [float(b.soil), float(b.space), float(b.groundwater), float(b.rainfall)]
    fig = go.Figure(go.Bar(
        x=points,
        y=factors,
        orientation="h",
        marker_color="#2e8b57",
        text=[f"{p:g}" for p in points],
        textposition="auto",
    ))
    fig.update_layout(
        title=f"Feasibility Score Breakdown ({result.feasibility_score}/100)",
        xaxis_title="Points",
        height=300,
        margin=dict(l=90, r=20, t=50, b=40),
    )
    return fig


def _build_results(result: ARResult):
    return html.Div([
        feasibility_banner(result.feasibility, result.feasibility_note, extra=f"{result.feasibility_score}%"),
        html.Div([
            metric_card("Annual Recharge Potential (L)", f"{int(result.recharge_volume):,}"),
            metric_card("Feasibility Score", f"{result.feasibility_score}%"),
            metric_card("Min. Required Area (sq.m)", f"{int(result.required_area):,}"),
            metric_card("Estimated Cost", f"₹{int(result.total_cost):,}"),
        ], style={"display": "flex", "gap": "0.75rem", "flexWrap": "wrap", "marginBottom": "1rem"}),
        html.Div([
            metric_card("Recommended Structure", result.recommended_structure.value),
            metric_card("Infiltration Rate", f"{result.infiltration_rate} mm/day"),
            metric_card("Annual Groundwater Recharge", f"{int(result.annual_recharge):,} L"),
            metric_card("Carbon Offset", f"{result.carbon_offset} kg CO₂/year"),
        ], style={"display": "flex", "gap": "0.75rem", "flexWrap": "wrap", "marginBottom": "1rem"}),
        dcc.Graph(figure=_score_chart(result)),
    ])
