# app/charts.py
from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

import pandas as pd
import plotly.graph_objects as go

from budget_advisor.view import format_amount
from app.styles import ALLOCATION_COLORS, CURRENT_BAR_COLOR, GRAY_100, GRAY_400, PREDICTED_BAR_COLOR


# =====================
# Allocation (needs / wants / savings)
# =====================
def draw_allocation_pie(split: Sequence[Tuple[str, float]]):
    """Donut chart from ``view.category_split`` output."""
    pie_df = pd.DataFrame(list(split), columns=["category", "amount"])

    fig = go.Figure(
        data=[
            go.Pie(
                labels=pie_df["category"],
                values=pie_df["amount"],
                hole=0.6,
                sort=False,
                marker=dict(colors=ALLOCATION_COLORS[: len(pie_df)]),
                textinfo="percent",
                hovertemplate="%{label}<br>₹%{value:,.0f} (%{percent})<extra></extra>",
            )
        ]
    )
    fig.update_layout(
        showlegend=True,
        legend=dict(orientation="h", yanchor="bottom", y=-0.15, xanchor="center", x=0.5),
        margin=dict(t=10, b=10, l=10, r=10),
        height=320,
    )
    return fig


# =====================
# Current vs. next-month projection
# =====================
def draw_prediction_bars(series: List[Dict[str, Any]]):
    """Grouped bars from ``view.comparison_series`` output."""
    bar_df = pd.DataFrame(series, columns=["name", "current", "predicted"])

    fig = go.Figure()
    fig.add_bar(
        x=bar_df["name"],
        y=bar_df["current"],
        name="Current Month",
        marker_color=CURRENT_BAR_COLOR,
        text=bar_df["current"].apply(format_amount),
        textposition="outside",
        hovertemplate="%{x}<br>Current: ₹%{y:,.0f}<extra></extra>",
    )
    fig.add_bar(
        x=bar_df["name"],
        y=bar_df["predicted"],
        name="AI Projected",
        marker_color=PREDICTED_BAR_COLOR,
        text=bar_df["predicted"].apply(format_amount),
        textposition="outside",
        hovertemplate="%{x}<br>Projected: ₹%{y:,.0f}<extra></extra>",
    )

    fig.update_layout(
        barmode="group",
        legend=dict(orientation="h", yanchor="bottom", y=-0.2, xanchor="center", x=0.5),
        margin=dict(t=30, b=10, l=10, r=10),
        height=320,
    )
    fig.update_xaxes(showgrid=False, tickfont=dict(color=GRAY_400))
    fig.update_yaxes(tickformat=",", separatethousands=True, gridcolor=GRAY_100, tickfont=dict(color=GRAY_400))
    return fig
