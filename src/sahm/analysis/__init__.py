# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Feasibility analysis: aggregate metrics, scenario calculator, classifier,
progress tracking and the ``analyze`` entry point.
"""

from .api import analyze
from .classifier import classify, threshold_rate
from .metrics import (
    AreaBreakdown,
    OccupancyCheck,
    ProjectMetrics,
    area_breakdown,
    average_unit_size,
    calculate_project_metrics,
    estimated_unit_count,
    land_cost_per_meter,
    occupancy_consistency_check,
    total_base_construction_cost_per_meter,
    total_cost_to_buyer,
    total_duration,
)
from .progress import (
    PhaseProgress,
    ProgressSnapshot,
    construction_stage,
    phase_statuses,
    progress_percentage,
    progress_snapshot,
)
from .results import FeasibilityResult
from .scenario import (
    ScenarioResult,
    ScenarioSet,
    annualize_roi,
    compute_scenario,
    compute_scenarios,
    realistic_growth_rate,
    scenario_rates,
    value_projection,
)

__all__ = [
    "analyze",
    "FeasibilityResult",
    # Metrics
    "AreaBreakdown",
    "OccupancyCheck",
    "ProjectMetrics",
    "area_breakdown",
    "average_unit_size",
    "calculate_project_metrics",
    "estimated_unit_count",
    "land_cost_per_meter",
    "occupancy_consistency_check",
    "total_base_construction_cost_per_meter",
    "total_cost_to_buyer",
    "total_duration",
    # Scenarios
    "ScenarioResult",
    "ScenarioSet",
    "annualize_roi",
    "compute_scenario",
    "compute_scenarios",
    "realistic_growth_rate",
    "scenario_rates",
    "value_projection",
    # Classification
    "classify",
    "threshold_rate",
    # Progress
    "PhaseProgress",
    "ProgressSnapshot",
    "construction_stage",
    "phase_statuses",
    "progress_percentage",
    "progress_snapshot",
]
