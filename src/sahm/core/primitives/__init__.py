# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sahm Core Primitives

Building blocks shared by every calculator: the immutable model base,
enumerations, constrained numeric types and calculation settings.
"""

from .enums import (
    ConstructionQualityEnum,
    ConstructionStageEnum,
    ConstructionTypeEnum,
    FeasibilityLabelEnum,
    LandConditionEnum,
    PhaseStatusEnum,
    ScenarioEnum,
    ThresholdBasisEnum,
)
from .model import Model
from .settings import FeasibilitySettings, ProposalSettings
from .types import (
    GrowthRate,
    Percentage,
    PositiveFloat,
    PositiveInt,
    PositiveIntGe1,
    StrictlyPositiveFloat,
)

__all__ = [
    # Core models
    "Model",
    # Settings
    "FeasibilitySettings",
    "ProposalSettings",
    # Enums
    "ConstructionQualityEnum",
    "ConstructionStageEnum",
    "ConstructionTypeEnum",
    "FeasibilityLabelEnum",
    "LandConditionEnum",
    "PhaseStatusEnum",
    "ScenarioEnum",
    "ThresholdBasisEnum",
    # Types
    "GrowthRate",
    "Percentage",
    "PositiveFloat",
    "PositiveInt",
    "PositiveIntGe1",
    "StrictlyPositiveFloat",
]
