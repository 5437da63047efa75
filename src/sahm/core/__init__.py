# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sahm Core

Input model and primitives shared by all calculators.
"""

from .inputs import (
    DEFAULT_INPUTS,
    ConstructionPhase,
    Installment,
    ProjectInputs,
    UnitMixBand,
    apply_change,
    default_inputs,
    resolve_field_name,
)

__all__ = [
    "DEFAULT_INPUTS",
    "ConstructionPhase",
    "Installment",
    "ProjectInputs",
    "UnitMixBand",
    "apply_change",
    "default_inputs",
    "resolve_field_name",
]
