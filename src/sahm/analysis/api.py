# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Feasibility Analysis API

Public entry point that runs one complete computation cycle over a
``ProjectInputs`` snapshot. The cycle is synchronous and uncached; callers
re-run it in full whenever any input changes.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..core.primitives import FeasibilitySettings
from .classifier import classify, threshold_rate
from .metrics import calculate_project_metrics
from .progress import progress_snapshot
from .results import FeasibilityResult
from .scenario import compute_scenarios

if TYPE_CHECKING:
    from ..core.inputs import ProjectInputs

logger = logging.getLogger(__name__)


def analyze(
    inputs: 'ProjectInputs',
    settings: Optional[FeasibilitySettings] = None,
) -> FeasibilityResult:
    """
    Run the feasibility analysis.

    Workflow:
      1) Derive scenario-independent metrics (durations, costs, areas)
      2) Run the scenario calculator for the pessimistic, realistic and
         optimistic growth rates
      3) Classify the realistic annual ROI against the threshold rate
      4) Snapshot construction progress

    Args:
        inputs: Project parameters.
        settings: Calculation constants; defaults when omitted.

    Returns:
        FeasibilityResult holding every output of the cycle.
    """
    settings = settings or FeasibilitySettings()

    # Step 1: Aggregate metrics
    metrics = calculate_project_metrics(inputs, settings)

    # Step 2: Scenarios
    scenarios = compute_scenarios(inputs)

    # Step 3: Classification
    threshold = threshold_rate(inputs, settings.threshold_basis)
    label = classify(
        scenarios.realistic.annual_roi_percent,
        threshold,
        margin=settings.excellent_margin,
    )

    # Step 4: Progress
    progress = progress_snapshot(inputs.construction_phases, inputs.elapsed_months)

    logger.debug(
        f"Analyzed '{inputs.project_name}': realistic annual ROI "
        f"{scenarios.realistic.annual_roi_percent:.1f}% vs threshold {threshold:.1f}% -> {label.value}"
    )

    return FeasibilityResult(
        inputs=inputs,
        settings=settings,
        metrics=metrics,
        scenarios=scenarios,
        threshold_rate=threshold,
        label=label,
        progress=progress,
    )
