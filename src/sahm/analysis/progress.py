# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Construction progress: percent complete, coarse stage and per-phase status
from the elapsed months and the phase schedule.
"""

from __future__ import annotations

from typing import Iterable, List

from ..core.inputs import ConstructionPhase
from ..core.primitives import ConstructionStageEnum, Model, PhaseStatusEnum
from ..utils.safe_math import safe_percentage
from .metrics import total_duration

# Inclusive upper bounds of percent complete for each stage
_STAGE_THRESHOLDS = [
    (10, ConstructionStageEnum.SUBSCRIPTION),
    (30, ConstructionStageEnum.FOUNDATION),
    (60, ConstructionStageEnum.STRUCTURE),
    (90, ConstructionStageEnum.FINISHING),
]


def progress_percentage(elapsed_months: float, total_months: float) -> int:
    """Rounded percent complete in ``[0, 100]``; 0 for an empty schedule."""
    percent = round(safe_percentage(elapsed_months, total_months))
    return max(0, min(percent, 100))


def remaining_months(elapsed_months: float, total_months: float) -> float:
    return max(total_months - elapsed_months, 0.0)


def construction_stage(progress: float) -> ConstructionStageEnum:
    for upper_bound, stage in _STAGE_THRESHOLDS:
        if progress <= upper_bound:
            return stage
    return ConstructionStageEnum.DELIVERY


class PhaseProgress(Model):
    """Position of one phase on the schedule and its status."""

    phase_id: int
    name: str
    start_month: float
    end_month: float
    status: PhaseStatusEnum


def phase_statuses(
    phases: Iterable[ConstructionPhase], elapsed_months: float
) -> List[PhaseProgress]:
    """
    Lay the phases end to end and mark each one against ``elapsed_months``.

    COMPLETED when elapsed >= end, IN_PROGRESS when start <= elapsed < end,
    PENDING otherwise. A zero-length phase is COMPLETED once reached.
    """
    statuses = []
    start = 0.0
    for phase in phases:
        end = start + phase.duration_months
        if elapsed_months >= end:
            status = PhaseStatusEnum.COMPLETED
        elif elapsed_months >= start:
            status = PhaseStatusEnum.IN_PROGRESS
        else:
            status = PhaseStatusEnum.PENDING
        statuses.append(
            PhaseProgress(
                phase_id=phase.id,
                name=phase.name,
                start_month=start,
                end_month=end,
                status=status,
            )
        )
        start = end
    return statuses


class ProgressSnapshot(Model):
    elapsed_months: float
    total_months: float
    remaining_months: float
    progress_percentage: int
    stage: ConstructionStageEnum
    phases: List[PhaseProgress]


def progress_snapshot(
    phases: List[ConstructionPhase], elapsed_months: float
) -> ProgressSnapshot:
    """Bundle every progress figure for the dashboard."""
    total = total_duration(phases)
    percent = progress_percentage(elapsed_months, total)
    return ProgressSnapshot(
        elapsed_months=elapsed_months,
        total_months=total,
        remaining_months=remaining_months(elapsed_months, total),
        progress_percentage=percent,
        stage=construction_stage(percent),
        phases=phase_statuses(phases, elapsed_months),
    )
