# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scenario Classifier

Maps the realistic scenario's annual ROI to a qualitative label by comparing
it against a threshold rate (construction cost escalation by default, or the
pessimistic market growth).
"""

from __future__ import annotations

from ..core.inputs import ProjectInputs
from ..core.primitives import FeasibilityLabelEnum, ThresholdBasisEnum

DEFAULT_EXCELLENT_MARGIN = 15.0


def classify(
    realistic_annual_roi: float,
    escalation_rate: float,
    margin: float = DEFAULT_EXCELLENT_MARGIN,
) -> FeasibilityLabelEnum:
    """
    Label a realistic annual ROI. First matching rule wins:

    1. roi > escalation + margin -> EXCELLENT
    2. roi > escalation          -> GOOD
    3. roi > 0                   -> ACCEPTABLE
    4. otherwise                 -> AVERAGE

    Comparisons are strict, so equality falls through to the next rule.
    """
    if realistic_annual_roi > escalation_rate + margin:
        return FeasibilityLabelEnum.EXCELLENT
    if realistic_annual_roi > escalation_rate:
        return FeasibilityLabelEnum.GOOD
    if realistic_annual_roi > 0:
        return FeasibilityLabelEnum.ACCEPTABLE
    return FeasibilityLabelEnum.AVERAGE


def threshold_rate(
    inputs: ProjectInputs,
    basis: ThresholdBasisEnum = ThresholdBasisEnum.COST_ESCALATION,
) -> float:
    """Rate the realistic ROI is compared against."""
    if basis == ThresholdBasisEnum.PESSIMISTIC_GROWTH:
        return inputs.pessimistic_market_growth
    return inputs.construction_cost_escalation
