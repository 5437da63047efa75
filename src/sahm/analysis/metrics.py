# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Aggregate / Derived Project Metrics

Everything that follows from ``ProjectInputs`` alone, independent of the
market growth scenario: schedule and cost rollups, the land cost basis of a
share, unit-mix statistics, the occupancy-based density check and the
project-level cost, revenue and profit figures.

All functions are pure. Zero or empty inputs degrade to zero or to a stated
default; nothing here raises for ordinary edge cases.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.inputs import ConstructionPhase, Installment, ProjectInputs, UnitMixBand
from ..core.primitives import FeasibilitySettings, Model
from ..utils.safe_math import safe_divide, safe_percentage, size_band_midpoint

logger = logging.getLogger(__name__)

DEFAULT_AVERAGE_UNIT_SIZE = 90.0
DEFAULT_CONSISTENCY_TOLERANCE = 5.0


def total_duration(phases: Iterable[ConstructionPhase]) -> float:
    """Total project duration in months; 0 for an empty schedule."""
    return float(sum(phase.duration_months for phase in phases))


def total_base_construction_cost_per_meter(phases: Iterable[ConstructionPhase]) -> float:
    """Sum of the phases' construction cost per meter."""
    return float(sum(phase.cost_per_meter for phase in phases))


def total_cost_to_buyer(installments: Iterable[Installment]) -> float:
    """Nominal sum of the buyer's installment schedule."""
    return float(sum(installment.amount for installment in installments))


def land_cost_per_meter(
    installments: Iterable[Installment],
    unit_share_size: float,
    fallback_share_price: float,
) -> float:
    """
    Land cost basis per meter of a share.

    The installment due at month 0 (the land / down payment) divided by the
    share size. Without such an installment the full share price is used
    instead.

    Args:
        installments: Buyer's payment schedule
        unit_share_size: Meters per share
        fallback_share_price: Share price used when no month-0 installment exists

    Returns:
        Land cost per meter, 0 when the share size is 0
    """
    down_payment = next((i for i in installments if i.due_month == 0), None)
    basis = down_payment.amount if down_payment is not None else fallback_share_price
    return safe_divide(basis, unit_share_size)


def average_unit_size(
    unit_mix: Iterable[UnitMixBand],
    default: float = DEFAULT_AVERAGE_UNIT_SIZE,
) -> float:
    """
    Weighted average unit size from the unit mix.

    Each band contributes its ``low-high`` midpoint weighted by its
    percentage. Bands that do not parse are skipped; the weights of the bands
    that do parse are normalized to their own total.

    Returns:
        Average size in m², or ``default`` when no band parses or the parsed
        weights do not sum to a positive number
    """
    weighted_sum = 0.0
    total_weight = 0.0
    for band in unit_mix:
        midpoint = size_band_midpoint(band.size)
        if midpoint is None:
            logger.debug(f"Skipping unparseable unit-mix band {band.size!r}")
            continue
        weighted_sum += midpoint * band.percentage
        total_weight += band.percentage

    if total_weight <= 0:
        return default
    return weighted_sum / total_weight


def estimated_unit_count(net_residential_area: float, average_size: float) -> int:
    """Number of units the residential area yields; 0 when the size is not positive."""
    if average_size <= 0:
        return 0
    return round(net_residential_area / average_size)


class OccupancyCheck(Model):
    """
    Declared gross area compared with the area implied by occupancy ratios.

    A report, not a constraint: an inconsistent project is still analysed.
    """

    parking_area: float
    ground_floor_area: float
    residential_area: float
    computed_gross_area: float
    declared_gross_area: float
    area_difference: float
    difference_percentage: float
    is_consistent: bool


def occupancy_consistency_check(
    land_area: float,
    parking_occupancy_percentage: float,
    underground_floors: int,
    ground_floor_occupancy_percentage: float,
    residential_occupancy_percentage: float,
    floors: int,
    declared_gross_total_area: float,
    tolerance: float = DEFAULT_CONSISTENCY_TOLERANCE,
) -> OccupancyCheck:
    """
    Cross-check the declared gross area against occupancy-derived floor areas.

    computed = land * parking% * underground floors
             + land * ground%  * 1
             + land * residential% * floors

    The difference percentage is signed, relative to the declared area, and
    0 when nothing is declared. The project is consistent when its absolute
    value is strictly below ``tolerance``.
    """
    parking_area = land_area * (parking_occupancy_percentage / 100) * underground_floors
    ground_floor_area = land_area * (ground_floor_occupancy_percentage / 100) * 1
    residential_area = land_area * (residential_occupancy_percentage / 100) * floors
    computed = parking_area + ground_floor_area + residential_area

    difference = computed - declared_gross_total_area
    difference_pct = (
        safe_percentage(difference, declared_gross_total_area)
        if declared_gross_total_area > 0
        else 0.0
    )

    return OccupancyCheck(
        parking_area=parking_area,
        ground_floor_area=ground_floor_area,
        residential_area=residential_area,
        computed_gross_area=computed,
        declared_gross_area=declared_gross_total_area,
        area_difference=difference,
        difference_percentage=difference_pct,
        is_consistent=abs(difference_pct) < tolerance,
    )


class AreaBreakdown(Model):
    """Gross area split into sellable and common/service space."""

    gross_total_area: float
    net_residential_area: float
    net_commercial_area: float
    net_sellable_area: float
    common_and_service_area: float
    is_within_gross: bool


def area_breakdown(inputs: ProjectInputs) -> AreaBreakdown:
    """Split the gross area; ``is_within_gross`` reports the soft net <= gross invariant."""
    net_sellable = inputs.net_residential_area + inputs.net_commercial_area
    return AreaBreakdown(
        gross_total_area=inputs.gross_total_area,
        net_residential_area=inputs.net_residential_area,
        net_commercial_area=inputs.net_commercial_area,
        net_sellable_area=net_sellable,
        common_and_service_area=inputs.gross_total_area - net_sellable,
        is_within_gross=net_sellable <= inputs.gross_total_area,
    )


def overhead_factor(admin_overhead_percentage: float) -> float:
    return 1 + admin_overhead_percentage / 100


class ProjectMetrics(Model):
    """
    Scenario-independent metrics of a project.

    Per-meter figures are in Toman per m²; totals in Toman.
    """

    total_duration_months: float
    total_base_construction_cost_per_meter: float
    land_cost_per_meter: float
    total_cost_per_meter_with_overhead: float
    initial_value_gap_per_meter: float
    total_cost_to_buyer: float

    average_unit_size: float
    estimated_unit_count: int

    areas: AreaBreakdown
    occupancy: OccupancyCheck

    total_construction_cost_with_overhead: float
    total_land_cost: float
    total_project_cost: float
    total_project_revenue: float
    total_project_profit: float


def calculate_project_metrics(
    inputs: ProjectInputs,
    settings: Optional[FeasibilitySettings] = None,
) -> ProjectMetrics:
    """
    Compute every scenario-independent metric of ``inputs``.

    Args:
        inputs: Project parameters
        settings: Calculation constants; defaults when omitted

    Returns:
        Frozen ``ProjectMetrics`` record
    """
    settings = settings or FeasibilitySettings()

    duration = total_duration(inputs.construction_phases)
    construction_per_meter = total_base_construction_cost_per_meter(
        inputs.construction_phases
    )
    land_per_meter = land_cost_per_meter(
        inputs.installments, inputs.unit_share_size, inputs.unit_share_price
    )
    factor = overhead_factor(inputs.admin_overhead_percentage)
    cost_with_overhead_per_meter = (land_per_meter + construction_per_meter) * factor

    avg_size = average_unit_size(
        inputs.unit_mix, default=settings.default_average_unit_size
    )
    areas = area_breakdown(inputs)
    occupancy = occupancy_consistency_check(
        land_area=inputs.land_area,
        parking_occupancy_percentage=inputs.parking_occupancy_percentage,
        underground_floors=inputs.underground_floors,
        ground_floor_occupancy_percentage=inputs.ground_floor_occupancy_percentage,
        residential_occupancy_percentage=inputs.residential_occupancy_percentage,
        floors=inputs.floors,
        declared_gross_total_area=inputs.gross_total_area,
        tolerance=settings.consistency_tolerance_percentage,
    )
    if not occupancy.is_consistent:
        logger.info(
            f"Declared gross area differs from occupancy-derived area by "
            f"{occupancy.difference_percentage:.1f}%"
        )

    construction_total = inputs.gross_total_area * construction_per_meter * factor
    land_total = areas.net_sellable_area * land_per_meter
    project_cost = construction_total + land_total
    revenue = (
        areas.net_sellable_area
        * inputs.market_price_per_meter
        * (1 - inputs.sales_commission_percentage / 100)
    )

    return ProjectMetrics(
        total_duration_months=duration,
        total_base_construction_cost_per_meter=construction_per_meter,
        land_cost_per_meter=land_per_meter,
        total_cost_per_meter_with_overhead=cost_with_overhead_per_meter,
        initial_value_gap_per_meter=inputs.market_price_per_meter
        - cost_with_overhead_per_meter,
        total_cost_to_buyer=total_cost_to_buyer(inputs.installments),
        average_unit_size=avg_size,
        estimated_unit_count=estimated_unit_count(inputs.net_residential_area, avg_size),
        areas=areas,
        occupancy=occupancy,
        total_construction_cost_with_overhead=construction_total,
        total_land_cost=land_total,
        total_project_cost=project_cost,
        total_project_revenue=revenue,
        total_project_profit=revenue - project_cost,
    )
