"""Landing page with entry points to both calculators."""

import dash
from dash import html, dcc

dash.register_page(__name__, path="/", name="Home")

CARD_STYLE = {
    "flex": "1",
    "padding": "1.5rem",
    "border": "1px solid #ddd",
    "borderRadius": "12px",
    "backgroundColor": "white",
}


def _card(title, text, href, link_text):
    return html.Div([
        html.H3(title),
        html.P(text, style={"color": "#555"}),
        dcc.Link(link_text, href=href, style={"fontWeight": "bold"}),
    ], style=CARD_STYLE)


layout = html.Div([
    html.H2("Rainwater Harvesting & Artificial Recharge"),
    html.P(
        "Estimate rooftop harvesting potential and design groundwater recharge "
        "structures following CGWB guidelines."
    ),
    html.Div([
        _card(
            "Rainwater Harvesting",
            "Calculate storage potential, tank sizing, and cost-benefit analysis "
            "for rooftop collection systems.",
            "/rwh",
            "Open RWH Calculator →",
        ),
        _card(
            "Artificial Recharge",
            "Design groundwater recharge structures with scientific feasibility "
            "and environmental impact assessment.",
            "/recharge",
            "Open AR Calculator →",
        ),
    ], style={"display": "flex", "gap": "1.5rem", "marginTop": "1.5rem"}),
])
