# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class ConstructionTypeEnum(str, Enum):
    """Structural system of the building."""

    STEEL = "Steel"
    CONCRETE = "Concrete"
    TUNNEL_FORM = "TunnelForm"


class LandConditionEnum(str, Enum):
    """Site condition, used only as proposal context."""

    NORMAL = "Normal"
    SLOPED = "Sloped"
    COMPLEX = "Complex"


class ConstructionQualityEnum(str, Enum):
    """Finish grade of the project."""

    STANDARD = "Standard"
    LUXURY = "Luxury"
    SUPER_LUXURY = "SuperLuxury"


class ScenarioEnum(str, Enum):
    """
    Market growth scenarios.

    A scenario is only a choice of growth rate; every scenario runs through
    the same calculator.

    Options:
        PESSIMISTIC: Lower bound of the market growth assumption
        REALISTIC: Arithmetic midpoint of pessimistic and optimistic
        OPTIMISTIC: Upper bound of the market growth assumption
    """

    PESSIMISTIC = "Pessimistic"
    REALISTIC = "Realistic"
    OPTIMISTIC = "Optimistic"

    @property
    def persian_label(self) -> str:
        return _SCENARIO_LABELS[self]


_SCENARIO_LABELS = {
    ScenarioEnum.PESSIMISTIC: "بدبینانه",
    ScenarioEnum.REALISTIC: "محتمل",
    ScenarioEnum.OPTIMISTIC: "خوش‌بینانه",
}


class FeasibilityLabelEnum(str, Enum):
    """
    Qualitative verdict on the realistic scenario's annual ROI.

    Options:
        EXCELLENT: ROI beats the threshold rate by more than the margin
        GOOD: ROI beats the threshold rate
        ACCEPTABLE: ROI is positive
        AVERAGE: Fallback for everything else
    """

    EXCELLENT = "Excellent"
    GOOD = "Good"
    ACCEPTABLE = "Acceptable"
    AVERAGE = "Average"

    @property
    def persian_label(self) -> str:
        return _FEASIBILITY_LABELS[self]


_FEASIBILITY_LABELS = {
    FeasibilityLabelEnum.EXCELLENT: "فوق‌العاده",
    FeasibilityLabelEnum.GOOD: "خوب",
    FeasibilityLabelEnum.ACCEPTABLE: "قابل قبول",
    FeasibilityLabelEnum.AVERAGE: "معمولی",
}


class ThresholdBasisEnum(str, Enum):
    """Which input rate the classifier compares the realistic ROI against."""

    COST_ESCALATION = "Cost Escalation"
    PESSIMISTIC_GROWTH = "Pessimistic Growth"


class PhaseStatusEnum(str, Enum):
    """Status of a construction phase relative to the elapsed months."""

    COMPLETED = "Completed"
    IN_PROGRESS = "In Progress"
    PENDING = "Pending"


class ConstructionStageEnum(str, Enum):
    """
    Coarse construction stage derived from percent complete.

    Thresholds (inclusive upper bounds): 10, 30, 60, 90, then delivery.
    """

    SUBSCRIPTION = "Subscription & Mobilization"
    FOUNDATION = "Excavation & Foundation"
    STRUCTURE = "Structure & Slabs"
    FINISHING = "Shell & Finishing"
    DELIVERY = "Fit-out & Delivery"

    @property
    def persian_label(self) -> str:
        return _STAGE_LABELS[self]


_STAGE_LABELS = {
    ConstructionStageEnum.SUBSCRIPTION: "پذیره‌نویسی و تجهیز",
    ConstructionStageEnum.FOUNDATION: "گودبرداری و فونداسیون",
    ConstructionStageEnum.STRUCTURE: "اجرای اسکلت و سقف",
    ConstructionStageEnum.FINISHING: "سفت‌کاری و نازک‌کاری",
    ConstructionStageEnum.DELIVERY: "تجهیز و تحویل نهایی",
}
