# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for Sahm testing.

The default project doubles as the reference scenario: installments summing
to 1,530,000,000 Toman, a 10 m² share, 250,000,000 Toman per meter today,
3% commission, 42 months of construction and a 25%/45% growth band (35%
realistic).
"""

from __future__ import annotations

import pytest

from sahm.analysis import FeasibilityResult, analyze
from sahm.core import (
    ConstructionPhase,
    Installment,
    ProjectInputs,
    UnitMixBand,
    apply_change,
    default_inputs,
)


def make_inputs(**overrides) -> ProjectInputs:
    """Build a small, fully specified project for unit tests."""
    data = dict(
        project_name="Test Project",
        land_area=1000.0,
        parking_occupancy_percentage=50.0,
        ground_floor_occupancy_percentage=50.0,
        residential_occupancy_percentage=40.0,
        gross_total_area=3000.0,
        net_residential_area=2000.0,
        net_commercial_area=200.0,
        floors=5,
        underground_floors=2,
        blocks=1,
        construction_phases=[
            ConstructionPhase(id=1, name="Foundation", duration_months=6, cost_per_meter=10_000_000),
            ConstructionPhase(id=2, name="Structure", duration_months=18, cost_per_meter=20_000_000),
        ],
        unit_share_size=10.0,
        unit_share_price=500_000_000.0,
        installments=[
            Installment(id=1, name="Down payment", amount=500_000_000, due_month=0),
            Installment(id=2, name="Final", amount=500_000_000, due_month=12),
        ],
        unit_mix=[UnitMixBand(size="80-100", percentage=100)],
        pessimistic_market_growth=20.0,
        optimistic_market_growth=40.0,
        construction_cost_escalation=25.0,
        admin_overhead_percentage=10.0,
        sales_commission_percentage=0.0,
        market_price_per_meter=100_000_000.0,
    )
    data.update(overrides)
    return ProjectInputs(**data)


@pytest.fixture
def reference_inputs() -> ProjectInputs:
    """Default project: the reference scenario."""
    return default_inputs()


@pytest.fixture
def small_inputs() -> ProjectInputs:
    """Compact project with round numbers."""
    return make_inputs()


@pytest.fixture
def inconsistent_density_inputs(reference_inputs: ProjectInputs) -> ProjectInputs:
    """Reference project with a declared gross area of 55,000 m²."""
    return apply_change(reference_inputs, "gross_total_area", 55000)


@pytest.fixture
def reference_result(reference_inputs: ProjectInputs) -> FeasibilityResult:
    """Full analysis of the reference project."""
    return analyze(reference_inputs)


@pytest.fixture
def inputs_factory():
    """Factory building the compact project with field overrides."""
    return make_inputs
