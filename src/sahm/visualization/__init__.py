# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sahm Visualization Helpers

Plotly chart helpers for the feasibility dashboard.
"""

from .charts import (
    FEASIBILITY_LABEL_COLORS,
    PHASE_STATUS_COLORS,
    RE_COLORS,
    SCENARIO_COLORS,
    create_kpi_cards_data,
    create_land_use_chart,
    create_phase_timeline,
    create_scenario_comparison_chart,
    create_value_projection_chart,
    get_label_color,
)

__all__ = [
    "FEASIBILITY_LABEL_COLORS",
    "PHASE_STATUS_COLORS",
    "RE_COLORS",
    "SCENARIO_COLORS",
    "create_kpi_cards_data",
    "create_land_use_chart",
    "create_phase_timeline",
    "create_scenario_comparison_chart",
    "create_value_projection_chart",
    "get_label_color",
]
