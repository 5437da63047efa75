# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for scenario-independent project metrics.

Test Coverage:
1. Schedule and cost rollups
2. Land cost basis (month-0 installment and fallback)
3. Average unit size and estimated unit count
4. Occupancy consistency check, including the exclusive 5% boundary
5. Area breakdown and project-level totals
"""

from __future__ import annotations

import pytest

from sahm.analysis import (
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
from sahm.core import ConstructionPhase, Installment, ProjectInputs, UnitMixBand
from sahm.core.primitives import FeasibilitySettings


class TestRollups:
    def test_total_duration(self, reference_inputs: ProjectInputs):
        assert total_duration(reference_inputs.construction_phases) == 42

    def test_total_duration_empty(self):
        assert total_duration([]) == 0.0

    def test_construction_cost_per_meter(self, reference_inputs: ProjectInputs):
        assert total_base_construction_cost_per_meter(
            reference_inputs.construction_phases
        ) == 85_000_000

    def test_total_cost_to_buyer(self, reference_inputs: ProjectInputs):
        assert total_cost_to_buyer(reference_inputs.installments) == 1_530_000_000


class TestLandCostPerMeter:
    def test_uses_month_zero_installment(self, reference_inputs: ProjectInputs):
        """680,000,000 down payment over a 10 m² share."""
        assert land_cost_per_meter(
            reference_inputs.installments, 10, fallback_share_price=1
        ) == pytest.approx(68_000_000)

    def test_falls_back_to_share_price(self):
        installments = [Installment(id=1, name="Later", amount=100, due_month=3)]
        assert land_cost_per_meter(installments, 10, fallback_share_price=500) == 50

    def test_zero_share_size(self):
        installments = [Installment(id=1, name="Land", amount=100, due_month=0)]
        assert land_cost_per_meter(installments, 0, fallback_share_price=500) == 0.0


class TestAverageUnitSize:
    def test_weighted_midpoints(self, reference_inputs: ProjectInputs):
        """(70*20 + 90*40 + 115*30 + 145*10) / 100 = 99."""
        assert average_unit_size(reference_inputs.unit_mix) == pytest.approx(99.0)

    def test_empty_mix_defaults_to_90(self):
        assert average_unit_size([]) == 90

    def test_unparseable_bands_skipped(self):
        """Weights renormalize over the bands that parse."""
        mix = [
            UnitMixBand(size="80-100", percentage=50),
            UnitMixBand(size="penthouse", percentage=50),
        ]
        assert average_unit_size(mix) == pytest.approx(90.0)

    def test_weights_need_not_sum_to_100(self):
        mix = [
            UnitMixBand(size="60-80", percentage=1),
            UnitMixBand(size="100-120", percentage=1),
        ]
        assert average_unit_size(mix) == pytest.approx(90.0)

    def test_zero_weights_use_default(self):
        mix = [UnitMixBand(size="60-80", percentage=0)]
        assert average_unit_size(mix, default=75) == 75

    def test_estimated_unit_count(self):
        assert estimated_unit_count(95000, 99) == 960
        assert estimated_unit_count(95000, 0) == 0


class TestOccupancyConsistency:
    def _check(self, declared: float, tolerance: float = 5.0):
        return occupancy_consistency_check(
            land_area=18500,
            parking_occupancy_percentage=80,
            underground_floors=4,
            ground_floor_occupancy_percentage=60,
            residential_occupancy_percentage=40,
            floors=13,
            declared_gross_total_area=declared,
            tolerance=tolerance,
        )

    def test_floor_areas(self):
        check = self._check(166500)
        assert check.parking_area == pytest.approx(59200)
        assert check.ground_floor_area == pytest.approx(11100)
        assert check.residential_area == pytest.approx(96200)
        assert check.computed_gross_area == pytest.approx(166500)
        assert check.is_consistent

    def test_inconsistent_declared_area(self):
        """166,500 computed vs 55,000 declared is about 202.7% off."""
        check = self._check(55000)
        assert check.difference_percentage == pytest.approx(202.727, abs=1e-3)
        assert not check.is_consistent

    @pytest.mark.parametrize(
        "land_area, expected_consistent",
        [(105.0, False), (104.99, True), (95.0, False), (95.01, True)],
    )
    def test_boundary_is_exclusive(self, land_area, expected_consistent):
        """Exactly 5% off either way is inconsistent; just inside is consistent."""
        # Ground floor only at 100% occupancy: computed area == land area
        check = occupancy_consistency_check(
            land_area=land_area,
            parking_occupancy_percentage=0,
            underground_floors=0,
            ground_floor_occupancy_percentage=100,
            residential_occupancy_percentage=0,
            floors=0,
            declared_gross_total_area=100,
        )
        assert check.is_consistent is expected_consistent

    def test_negative_difference_uses_absolute_value(self):
        check = self._check(200000)
        assert check.difference_percentage < 0
        assert not check.is_consistent

    def test_zero_declared_area(self):
        check = self._check(0)
        assert check.difference_percentage == 0.0
        assert check.is_consistent

    def test_inconsistency_is_reported_not_raised(self, inconsistent_density_inputs):
        metrics = calculate_project_metrics(inconsistent_density_inputs)
        assert not metrics.occupancy.is_consistent
        assert metrics.occupancy.computed_gross_area == pytest.approx(166500)


class TestAreaBreakdown:
    def test_within_gross(self, reference_inputs: ProjectInputs):
        areas = area_breakdown(reference_inputs)
        assert areas.net_sellable_area == 100000
        assert areas.common_and_service_area == 66500
        assert areas.is_within_gross

    def test_net_exceeding_gross_is_flagged(self, inputs_factory):
        areas = area_breakdown(inputs_factory(gross_total_area=1000))
        assert not areas.is_within_gross
        assert areas.common_and_service_area < 0


class TestProjectMetrics:
    def test_reference_project(self, reference_inputs: ProjectInputs):
        metrics = calculate_project_metrics(reference_inputs)

        assert metrics.total_duration_months == 42
        assert metrics.land_cost_per_meter == pytest.approx(68_000_000)
        assert metrics.total_cost_per_meter_with_overhead == pytest.approx(168_300_000)
        assert metrics.initial_value_gap_per_meter == pytest.approx(81_700_000)
        assert metrics.estimated_unit_count == 960

    def test_project_totals(self, reference_inputs: ProjectInputs):
        metrics = calculate_project_metrics(reference_inputs)

        construction = 166500 * 85_000_000 * 1.1
        land = 100000 * 68_000_000
        revenue = 100000 * 250_000_000 * 0.97
        assert metrics.total_construction_cost_with_overhead == pytest.approx(construction)
        assert metrics.total_land_cost == pytest.approx(land)
        assert metrics.total_project_revenue == pytest.approx(revenue)
        assert metrics.total_project_profit == pytest.approx(revenue - construction - land)

    def test_custom_default_unit_size(self, inputs_factory):
        inputs = inputs_factory(unit_mix=[])
        metrics = calculate_project_metrics(
            inputs, FeasibilitySettings(default_average_unit_size=100)
        )
        assert metrics.average_unit_size == 100
        assert metrics.estimated_unit_count == 20

    def test_empty_project_degrades_to_zero(self):
        """No phases, no installments: zeros rather than errors."""
        metrics = calculate_project_metrics(ProjectInputs())
        assert metrics.total_duration_months == 0
        assert metrics.total_cost_to_buyer == 0
        assert metrics.land_cost_per_meter == 0

    def test_phase_order_does_not_change_totals(self, reference_inputs: ProjectInputs):
        reversed_phases = list(reversed(reference_inputs.construction_phases))
        a = calculate_project_metrics(reference_inputs)
        b = calculate_project_metrics(
            reference_inputs.copy(updates={"construction_phases": reversed_phases})
        )
        assert a.total_cost_per_meter_with_overhead == pytest.approx(
            b.total_cost_per_meter_with_overhead
        )
        assert isinstance(reversed_phases[0], ConstructionPhase)
