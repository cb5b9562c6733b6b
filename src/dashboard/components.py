"""Layout pieces shared by the calculator pages."""

from decimal import Decimal, InvalidOperation

from dash import html

from src.models.common import Feasibility

BTN_STYLE = {
    "padding": "0.75rem 2rem",
    "fontSize": "1rem",
    "backgroundColor": "#0b4f6c",
    "color": "white",
    "border": "none",
    "cursor": "pointer",
}

FIELD_STYLE = {"width": "100%", "padding": "0.5rem", "fontSize": "0.95rem"}

ROW_STYLE = {"display": "flex", "gap": "1rem", "marginBottom": "0.75rem"}

FEASIBILITY_COLORS = {
    Feasibility.HIGHLY_FEASIBLE: "#2ecc71",
    Feasibility.MODERATELY_FEASIBLE: "#f39c12",
    Feasibility.LIMITED_FEASIBILITY: "#e94560",
    Feasibility.REQUIRES_OPTIMIZATION: "#e94560",
}


def to_decimal(value) -> Decimal:
    """Form value → Decimal. Empty or non-numeric input counts as 0."""
    if value is None or value == "":
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")


def field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block"}),
        component,
    ], style={"flex": "1", "minWidth": "160px"})


def metric_card(label, display_value):
    return html.Div([
        html.Div(display_value, style={"fontSize": "1.4rem", "fontWeight": "bold"}),
        html.Div(label, style={"fontSize": "0.8rem", "color": "#666"}),
    ], style={
        "backgroundColor": "white", "border": "1px solid #ddd",
        "borderRadius": "8px", "padding": "0.75rem 1rem",
        "minWidth": "180px", "flex": "1",
    })


def feasibility_banner(feasibility: Feasibility, note: str, extra=None):
    color = FEASIBILITY_COLORS[feasibility]
    title = feasibility.value if extra is None else f"{feasibility.value} · {extra}"
    return html.Div([
        html.Div(title, style={"fontSize": "1.5rem", "fontWeight": "bold", "color": color}),
        html.Div(note, style={"fontSize": "0.95rem", "color": "#666"}),
    ], style={
        "textAlign": "center", "padding": "1rem",
        "border": f"3px solid {color}", "borderRadius": "12px",
        "marginBottom": "1rem",
    })


def error_message(text):
    return html.Div(text, style={"color": "red", "padding": "1rem"})
