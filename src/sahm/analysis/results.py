# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Feasibility result model.

One instance holds every output of a computation cycle, so presentation code
(dashboard, reports, PDF) reads a single consistent snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sahm.core.inputs import ProjectInputs
from sahm.core.primitives import FeasibilityLabelEnum, FeasibilitySettings

from .metrics import ProjectMetrics
from .progress import ProgressSnapshot
from .scenario import ScenarioResult, ScenarioSet

if TYPE_CHECKING:
    from sahm.reporting.interface import ReportingInterface


@dataclass(frozen=True)
class FeasibilityResult:
    """
    Results of one full feasibility analysis.

    Attributes:
        inputs: Snapshot of the inputs the result was computed from
        settings: Calculation constants used
        metrics: Scenario-independent project metrics
        scenarios: Pessimistic, realistic and optimistic outcomes per share
        threshold_rate: Rate the realistic annual ROI was compared against
        label: Qualitative verdict on the realistic scenario
        progress: Construction progress snapshot
    """

    inputs: ProjectInputs
    settings: FeasibilitySettings
    metrics: ProjectMetrics
    scenarios: ScenarioSet
    threshold_rate: float
    label: FeasibilityLabelEnum
    progress: ProgressSnapshot

    @property
    def realistic(self) -> ScenarioResult:
        return self.scenarios.realistic

    @property
    def is_density_consistent(self) -> bool:
        return self.metrics.occupancy.is_consistent

    @property
    def reporting(self) -> "ReportingInterface":
        """Access to the feasibility report tables and the PDF export."""
        # Import at runtime to avoid circular dependencies
        from ..reporting.interface import ReportingInterface  # noqa: PLC0415

        return ReportingInterface(self)
