"""Chart generation using Plotly."""

import pandas as pd
import plotly.graph_objects as go

# Industrial Design System - sharp, professional, compact
THEME = {
    "text": "#e8eaed",
    "text_secondary": "#9aa0a6",
    "grid": "rgba(30, 33, 36, 0.8)",
    "cyan": "#00d4ff",
    "cyan_fill": "rgba(0, 212, 255, 0.12)",
    "amber": "#ffab00",
    "green": "#00e676",
}


def apply_dark_layout(fig: go.Figure, title: str, x_title: str, y_title: str, showlegend: bool = True) -> None:
    """Apply industrial dark theme layout for charts - compact and professional."""
    fig.update_layout(
        title={
            "text": title,
            "x": 0,
            "xanchor": "left",
            "font": {"size": 11, "color": THEME["text_secondary"], "family": "Inter, -apple-system, sans-serif"}
        },
        xaxis_title=x_title,
        yaxis_title=y_title,
        hovermode="x unified",
        template="plotly_dark",
        height=340,
        margin=dict(l=50, r=20, t=40, b=40),
        showlegend=showlegend,
        legend=dict(
            orientation="h",
            yanchor="bottom",
            y=1.02,
            xanchor="left",
            x=0,
            font=dict(size=10, family="Inter, -apple-system, sans-serif"),
            bgcolor="rgba(0,0,0,0)"
        ),
        plot_bgcolor="rgba(8, 9, 10, 1)",
        paper_bgcolor="rgba(8, 9, 10, 1)",
        font={"color": THEME["text"], "family": "Inter, -apple-system, sans-serif", "size": 11},
        xaxis=dict(gridcolor=THEME["grid"], zerolinecolor=THEME["grid"]),
        yaxis=dict(gridcolor=THEME["grid"], zerolinecolor=THEME["grid"]),
    )


def create_emission_chart(series: pd.DataFrame) -> go.Figure:
    """Cumulative minted tokens per period."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=series['period'],
        y=series['minted'],
        name='Minted tokens',
        mode='lines',
        line=dict(color=THEME["cyan"], width=2),
        fill='tozeroy',
        fillcolor=THEME["cyan_fill"]
    ))
    apply_dark_layout(fig, "Token Emission by Period", "Period", "Tokens")
    return fig


def create_bonding_curve_chart(series: pd.DataFrame) -> go.Figure:
    """Token price against total minted supply."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=series['total_minted'],
        y=series['price'],
        name='Token price',
        mode='lines',
        line=dict(color=THEME["green"], width=2)
    ))
    apply_dark_layout(fig, "Bonding Curve", "Total minted tokens", "Token price")
    return fig


def create_burn_split_chart(series: pd.DataFrame) -> go.Figure:
    """Pie of destroyed vs redistributed burn."""
    fig = go.Figure()
    fig.add_trace(go.Pie(
        labels=series['name'],
        values=series['value'],
        marker=dict(colors=[THEME["cyan"], THEME["amber"]]),
        hole=0.4,
        sort=False
    ))
    apply_dark_layout(fig, "Burn Distribution", "", "")
    fig.update_layout(hovermode=False)
    return fig
