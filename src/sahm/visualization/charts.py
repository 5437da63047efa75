# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sahm Chart Helpers

Plotly figures for the feasibility dashboard: construction timeline,
scenario comparison, value projection and land use. Each helper takes
calculator outputs and returns a ``go.Figure``; none of them computes
financial figures.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd
import plotly.graph_objects as go

from ..analysis.metrics import AreaBreakdown
from ..analysis.progress import ProgressSnapshot
from ..analysis.scenario import ScenarioSet
from ..core.primitives import FeasibilityLabelEnum, PhaseStatusEnum, ScenarioEnum
from ..utils.formatting import format_compact, format_percentage

# =============================================================================
# Color Schemes and Styling
# =============================================================================

# Dashboard color palette
RE_COLORS = {
    "primary": "#2E5984",  # Blue
    "secondary": "#8B4A6B",  # Muted purple
    "accent": "#D4A574",  # Warm gold
    "success": "#28A745",  # Green for positive
    "warning": "#FFC107",  # Yellow for caution
    "danger": "#DC3545",  # Red for negative
    "neutral": "#6C757D",  # Gray for neutral
}

SCENARIO_COLORS = {
    ScenarioEnum.PESSIMISTIC: RE_COLORS["danger"],
    ScenarioEnum.REALISTIC: RE_COLORS["primary"],
    ScenarioEnum.OPTIMISTIC: RE_COLORS["success"],
}

PHASE_STATUS_COLORS = {
    PhaseStatusEnum.COMPLETED: RE_COLORS["success"],
    PhaseStatusEnum.IN_PROGRESS: RE_COLORS["warning"],
    PhaseStatusEnum.PENDING: RE_COLORS["neutral"],
}

FEASIBILITY_LABEL_COLORS = {
    FeasibilityLabelEnum.EXCELLENT: "#28A745",
    FeasibilityLabelEnum.GOOD: "#2E5984",
    FeasibilityLabelEnum.ACCEPTABLE: "#FFC107",
    FeasibilityLabelEnum.AVERAGE: "#DC3545",
}


def get_label_color(label: FeasibilityLabelEnum) -> str:
    """Badge color for a feasibility verdict."""
    return FEASIBILITY_LABEL_COLORS[label]


# =============================================================================
# Chart Creation Functions
# =============================================================================


def create_phase_timeline(
    progress: ProgressSnapshot,
    title: str = "زمان‌بندی فازهای ساخت",
    height: int = 400,
) -> go.Figure:
    """
    Create Gantt-style construction timeline in months.

    Bars are colored by phase status and a dashed line marks the elapsed
    month.

    Args:
        progress: Progress snapshot from ``progress_snapshot``
        title: Chart title
        height: Chart height in pixels

    Returns:
        Plotly horizontal bar figure
    """
    phases = progress.phases
    fig = go.Figure()

    for phase in phases:
        duration = phase.end_month - phase.start_month
        fig.add_trace(
            go.Bar(
                x=[duration],
                y=[phase.name],
                base=[phase.start_month],
                orientation="h",
                name=phase.name,
                marker_color=PHASE_STATUS_COLORS[phase.status],
                hovertemplate=f"<b>{phase.name}</b><br>"
                + f"ماه {phase.start_month:g} تا {phase.end_month:g}<br>"
                + f"{phase.status.value}<extra></extra>",
                showlegend=False,
            )
        )

    if phases:
        fig.add_vline(
            x=progress.elapsed_months,
            line_dash="dash",
            line_color=RE_COLORS["danger"],
            annotation_text=f"{format_percentage(progress.progress_percentage, decimals=0)}",
        )

    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        height=height,
        xaxis_title="ماه",
        yaxis=dict(autorange="reversed", showgrid=False),
        template="plotly_white",
        barmode="overlay",
        margin=dict(l=150),  # Space for phase names
    )

    return fig


def create_scenario_comparison_chart(
    scenarios: ScenarioSet,
    threshold_rate: Optional[float] = None,
    title: str = "مقایسه بازدهی سالانه سناریوها",
    height: int = 400,
) -> go.Figure:
    """
    Create bar chart of annual ROI per scenario.

    Args:
        scenarios: Output of ``compute_scenarios``
        threshold_rate: Optional reference rate drawn as a horizontal line
        title: Chart title
        height: Chart height in pixels

    Returns:
        Plotly bar chart figure
    """
    labels = []
    values = []
    colors = []
    for scenario, outcome in scenarios.items():
        labels.append(scenario.persian_label)
        values.append(outcome.annual_roi_percent)
        colors.append(SCENARIO_COLORS[scenario])

    fig = go.Figure(
        data=[
            go.Bar(
                x=labels,
                y=values,
                marker_color=colors,
                text=[format_percentage(v) for v in values],
                textposition="outside",
                hovertemplate="<b>%{x}</b><br>%{y:.1f}%<extra></extra>",
            )
        ]
    )

    if threshold_rate is not None:
        fig.add_hline(
            y=threshold_rate,
            line_dash="dash",
            line_color=RE_COLORS["neutral"],
            annotation_text=f"نرخ مبنا {format_percentage(threshold_rate)}",
        )

    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        height=height,
        yaxis_title="بازدهی سالانه (٪)",
        template="plotly_white",
        showlegend=False,
    )

    return fig


def create_value_projection_chart(
    projection: pd.DataFrame,
    title: str = "ارزش سهم در برابر سرمایه پرداختی",
    height: int = 450,
) -> go.Figure:
    """
    Create line chart of projected share value against cumulative outlay.

    Args:
        projection: DataFrame from ``value_projection`` (indexed by month)
        title: Chart title
        height: Chart height

    Returns:
        Plotly figure with one line per scenario and a stepped outlay line
    """
    fig = go.Figure()

    fig.add_trace(
        go.Scatter(
            x=projection.index,
            y=projection["cumulative_investment"],
            mode="lines",
            name="سرمایه پرداختی",
            line=dict(color=RE_COLORS["accent"], width=3, shape="hv"),
        )
    )

    for scenario in ScenarioEnum:
        column = scenario.name.lower()
        if column not in projection.columns:
            continue
        fig.add_trace(
            go.Scatter(
                x=projection.index,
                y=projection[column],
                mode="lines+markers",
                name=scenario.persian_label,
                line=dict(color=SCENARIO_COLORS[scenario], width=2),
                marker=dict(size=6),
            )
        )

    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        height=height,
        template="plotly_white",
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="center", x=0.5),
    )
    fig.update_yaxes(title_text="تومان", tickformat=",.0s")
    fig.update_xaxes(title_text="ماه")

    return fig


def create_land_use_chart(
    areas: AreaBreakdown,
    title: str = "تفکیک زیربنا",
    height: int = 400,
) -> go.Figure:
    """
    Create donut chart splitting gross area into residential, commercial and
    common/service space.

    A negative common area (net exceeding gross) is drawn as zero.
    """
    labels = ["مفید مسکونی", "مفید تجاری", "مشاعات و خدمات"]
    values = [
        areas.net_residential_area,
        areas.net_commercial_area,
        max(areas.common_and_service_area, 0.0),
    ]
    colors = [RE_COLORS["primary"], RE_COLORS["accent"], RE_COLORS["neutral"]]

    fig = go.Figure(
        data=[
            go.Pie(
                labels=labels,
                values=values,
                hole=0.4,  # Makes it a donut
                marker=dict(colors=colors, line=dict(color="#FFFFFF", width=2)),
                textinfo="label+percent",
                hovertemplate="<b>%{label}</b><br>"
                + "%{value:,.0f} m²<br>"
                + "%{percent}<extra></extra>",
            )
        ]
    )

    fig.add_annotation(
        text=f"<b>{format_compact(areas.gross_total_area)}<br>m²</b>",
        x=0.5,
        y=0.5,
        font_size=14,
        showarrow=False,
    )

    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        height=height,
        template="plotly_white",
        showlegend=False,
    )

    return fig


def create_kpi_cards_data(
    annual_roi_percent: float,
    buyer_profit: float,
    total_cost_to_buyer: float,
    label: FeasibilityLabelEnum,
    progress_percentage: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Prepare data for the dashboard KPI cards (``st.metric``).

    Args:
        annual_roi_percent: Realistic annual ROI in percent
        buyer_profit: Realistic buyer profit per share
        total_cost_to_buyer: Sum of installments per share
        label: Feasibility verdict
        progress_percentage: Optional construction progress

    Returns:
        List of dicts with ``label``, ``value``, ``color`` and ``caption``
    """
    kpi_data = [
        {
            "label": "بازدهی سالانه (محتمل)",
            "value": format_percentage(annual_roi_percent),
            "color": get_label_color(label),
            "caption": label.persian_label,
        },
        {
            "label": "سود خالص خریدار",
            "value": format_compact(buyer_profit),
            "color": RE_COLORS["success"] if buyer_profit > 0 else RE_COLORS["danger"],
            "caption": "تومان",
        },
        {
            "label": "کل پرداختی",
            "value": format_compact(total_cost_to_buyer),
            "color": RE_COLORS["primary"],
            "caption": "تومان",
        },
    ]
    if progress_percentage is not None:
        kpi_data.append(
            {
                "label": "پیشرفت پروژه",
                "value": format_percentage(progress_percentage, decimals=0),
                "color": RE_COLORS["accent"],
                "caption": "درصد تکمیل",
            }
        )

    return kpi_data
