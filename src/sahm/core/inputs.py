# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Project Input Model

The complete parameter set of one share-based construction project: land and
occupancy, structure, areas, construction phases, the buyer's installment
schedule, unit mix, sales terms, scenario rates, overheads and the narrative
fields consumed by the proposal writer.

Records are immutable. The only way to edit one is ``apply_change``, which
validates the new value and returns a fresh record, leaving the old snapshot
intact for anything still rendering it.
"""

from __future__ import annotations

import logging
from typing import Any, List

from pydantic import Field

from .primitives import (
    ConstructionQualityEnum,
    ConstructionTypeEnum,
    GrowthRate,
    LandConditionEnum,
    Model,
    Percentage,
    PositiveFloat,
    PositiveInt,
    PositiveIntGe1,
    StrictlyPositiveFloat,
)

logger = logging.getLogger(__name__)


class ConstructionPhase(Model):
    """One step of the construction schedule."""

    id: int
    name: str
    duration_months: PositiveFloat = 0.0
    cost_per_meter: PositiveFloat = 0.0


class Installment(Model):
    """
    One payment of the buyer's schedule.

    ``due_month == 0`` is the land / down payment and defines the land cost
    basis of a share.
    """

    id: int
    name: str
    amount: PositiveFloat = 0.0
    due_month: PositiveFloat = 0.0


class UnitMixBand(Model):
    """
    A size band of the unit mix.

    ``size`` is free text such as ``"80-100"``; ``percentage`` is a weight and
    the bands need not sum to 100.
    """

    size: str
    percentage: float = 0.0


class ProjectInputs(Model):
    """
    All parameters of one feasibility study.

    Attributes are grouped the way the input form groups them. Soft
    invariants (net areas fitting inside the gross area, declared gross area
    matching the occupancy-derived one) are reported by the calculators and
    never enforced here.
    """

    # Identity & presentation
    project_name: str = ""
    company_logo: str = ""
    facade_image: str = ""

    # Land & occupancy
    land_area: StrictlyPositiveFloat = 1.0
    parking_occupancy_percentage: Percentage = 0.0
    ground_floor_occupancy_percentage: Percentage = 0.0
    residential_occupancy_percentage: Percentage = 0.0

    # Areas
    gross_total_area: PositiveFloat = 0.0
    net_residential_area: PositiveFloat = 0.0
    net_commercial_area: PositiveFloat = 0.0

    # Structure
    floors: PositiveInt = 0
    underground_floors: PositiveInt = 0
    blocks: PositiveIntGe1 = 1
    construction_type: ConstructionTypeEnum = ConstructionTypeEnum.CONCRETE
    land_condition: LandConditionEnum = LandConditionEnum.NORMAL
    facade: str = ""

    # Timing & costs
    elapsed_months: PositiveFloat = 0.0
    construction_phases: List[ConstructionPhase] = Field(default_factory=list)

    # Sales
    unit_share_size: StrictlyPositiveFloat = 10.0
    unit_share_price: PositiveFloat = 0.0
    installments: List[Installment] = Field(default_factory=list)
    second_payment_date: str = ""
    additional_fee: PositiveFloat = 0.0
    unit_mix: List[UnitMixBand] = Field(default_factory=list)

    # Scenarios & quality
    construction_quality: ConstructionQualityEnum = ConstructionQualityEnum.STANDARD
    pessimistic_market_growth: GrowthRate = 0.0
    optimistic_market_growth: GrowthRate = 0.0
    construction_cost_escalation: GrowthRate = 0.0

    # Overheads
    admin_overhead_percentage: Percentage = 0.0
    sales_commission_percentage: Percentage = 0.0

    # Market & strategic analysis
    market_price_per_meter: PositiveFloat = 0.0
    project_vibe: str = ""
    location_advantages: str = ""

    # Descriptions
    location: str = ""
    access: str = ""
    project_description: str = ""
    architecture_style: str = ""
    common_amenities: str = ""
    builder_resume: str = ""
    construction_description: str = ""
    facade_description: str = ""
    core_shell_description: str = ""

    # Technical details
    foundation_system: str = ""
    roof_system: str = ""
    interior_finishes: str = ""
    hvac_system: str = ""
    electrical_system: str = ""


DEFAULT_INPUTS = ProjectInputs(
    project_name="نارنجستان ۷",
    company_logo="",
    land_area=18500.0,
    parking_occupancy_percentage=80.0,
    ground_floor_occupancy_percentage=60.0,
    residential_occupancy_percentage=40.0,
    gross_total_area=166500.0,
    net_residential_area=95000.0,
    net_commercial_area=5000.0,
    floors=13,
    underground_floors=4,
    blocks=4,
    construction_type=ConstructionTypeEnum.CONCRETE,
    land_condition=LandConditionEnum.NORMAL,
    facade="تلفیقی مدرن",
    elapsed_months=6.0,
    construction_phases=[
        ConstructionPhase(id=1, name="گودبرداری و فونداسیون", duration_months=9, cost_per_meter=15_000_000),
        ConstructionPhase(id=2, name="اجرای اسکلت", duration_months=12, cost_per_meter=25_000_000),
        ConstructionPhase(id=3, name="سفت‌کاری", duration_months=12, cost_per_meter=20_000_000),
        ConstructionPhase(id=4, name="نازک‌کاری و تحویل", duration_months=9, cost_per_meter=25_000_000),
    ],
    unit_share_size=10.0,
    unit_share_price=680_000_000.0,
    installments=[
        Installment(id=1, name="پیش‌پرداخت زمین", amount=680_000_000, due_month=0),
        Installment(id=2, name="قسط دوم", amount=250_000_000, due_month=6),
        Installment(id=3, name="قسط سوم", amount=250_000_000, due_month=12),
        Installment(id=4, name="قسط چهارم", amount=200_000_000, due_month=24),
        Installment(id=5, name="قسط پایانی", amount=150_000_000, due_month=36),
    ],
    second_payment_date="1403/12/20",
    unit_mix=[
        UnitMixBand(size="60-80", percentage=20),
        UnitMixBand(size="80-100", percentage=40),
        UnitMixBand(size="100-130", percentage=30),
        UnitMixBand(size="130-160", percentage=10),
    ],
    construction_quality=ConstructionQualityEnum.SUPER_LUXURY,
    pessimistic_market_growth=25.0,
    optimistic_market_growth=45.0,
    construction_cost_escalation=30.0,
    admin_overhead_percentage=10.0,
    sales_commission_percentage=3.0,
    market_price_per_meter=250_000_000.0,
    project_vibe="زندگی لوکس در قلب غرب تهران",
    location_advantages="نزدیکی به بزرگراه حکیم و مترو ارم سبز",
    location="تهران، منطقه ۵، بلوار فردوس غرب",
    access="دسترسی سریع به بزرگراه حکیم، ستاری و باکری، نزدیکی به مترو ارم سبز",
    project_description="پروژه لوکس نارنجستان ۷ شامل طبقات منفی پارکینگ، پودیوم تجاری/لابی و برج‌های مسکونی.",
    architecture_style="معماری مدرن با رویکرد سبز، طراحی پودیوم یکپارچه و لابی هتلینگ با سقف مرتفع.",
    common_amenities="لابی مجلل، سالن اجتماعات، سالن ورزش، استخر و سونا، روف گاردن، سیستم هوشمند BMS.",
    builder_resume="شرکت تعاونی عمرانی نوین ساز ابنیه آکام با سابقه ساخت پروژه‌های موفق نارنجستان.",
)


def default_inputs() -> ProjectInputs:
    """
    Return a fresh copy of the session-start record.

    Frozen models still hold plain lists, so every caller gets its own deep
    copy and ``DEFAULT_INPUTS`` stays the untouched template.
    """
    return DEFAULT_INPUTS.model_copy(deep=True)


def resolve_field_name(field: str) -> str:
    """
    Map a Python field name or its camelCase alias to the Python name.

    Raises:
        KeyError: If the name matches no field of ``ProjectInputs``
    """
    fields = ProjectInputs.model_fields
    if field in fields:
        return field
    for name, info in fields.items():
        if info.alias == field:
            return name
    raise KeyError(f"Unknown project input field: {field!r}")


def apply_change(state: ProjectInputs, field: str, value: Any) -> ProjectInputs:
    """
    Reduce one form edit into a new ``ProjectInputs`` record.

    The previous state is never mutated; on a validation error it remains the
    current, valid state.

    Args:
        state: Current record
        field: Field to change (snake_case name or camelCase alias)
        value: New value, validated against the field's schema

    Returns:
        A new record with the change applied

    Raises:
        KeyError: Unknown field
        pydantic.ValidationError: Value rejected by the schema
    """
    name = resolve_field_name(field)
    logger.debug(f"Applying change to '{name}'")
    return state.copy(updates={name: value})
