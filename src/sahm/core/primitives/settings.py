# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import os
from typing import Optional

from pydantic import Field

from .enums import ThresholdBasisEnum
from .model import Model
from .types import PositiveFloat, PositiveIntGe1, StrictlyPositiveFloat


class FeasibilitySettings(Model):
    """
    Tunable constants of the feasibility calculators.

    The defaults reproduce the dashboard's standard behaviour; callers
    only need a custom instance to experiment with tolerances.

    Usage Examples:
        # Standard analysis
        settings = FeasibilitySettings()

        # Compare against pessimistic growth instead of cost escalation
        settings = FeasibilitySettings(
            threshold_basis=ThresholdBasisEnum.PESSIMISTIC_GROWTH
        )
    """

    default_average_unit_size: StrictlyPositiveFloat = Field(
        default=90.0,
        description="Average unit size (m²) used when the unit mix cannot be parsed.",
    )
    consistency_tolerance_percentage: PositiveFloat = Field(
        default=5.0,
        description="Declared vs occupancy-derived gross area must differ by less than this (exclusive).",
    )
    excellent_margin: PositiveFloat = Field(
        default=15.0,
        description="Points above the threshold rate needed for an 'Excellent' label.",
    )
    threshold_basis: ThresholdBasisEnum = Field(
        default=ThresholdBasisEnum.COST_ESCALATION,
        description="Rate the realistic annual ROI is compared against.",
    )
    projection_step_months: PositiveIntGe1 = Field(
        default=6,
        description="Sampling step of the value projection used by charts.",
    )


class ProposalSettings(Model):
    """
    Settings of the generative-AI proposal writer.

    The API key is never stored in shared state; when ``api_key`` is not set
    it is read from ``GEMINI_API_KEY`` (then ``API_KEY``) at call time.
    """

    text_model: str = Field(
        default="gemini-2.5-flash", description="Model used for proposal text and phase suggestions."
    )
    image_model: str = Field(
        default="imagen-4.0-generate-001", description="Model used for the conceptual image."
    )
    generate_image: bool = Field(
        default=True, description="If False, skip the conceptual image request."
    )
    timeout_seconds: StrictlyPositiveFloat = Field(
        default=60.0, description="HTTP timeout applied to every model request."
    )
    api_key: Optional[str] = Field(default=None, repr=False)

    def resolve_api_key(self) -> Optional[str]:
        return self.api_key or os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
