# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sahm Reporting

Presentation tables (pandas) and the PDF export built from a
``FeasibilityResult``. Reports only format values; they never compute.
"""

from .base import BaseReport, ReportTemplate
from .feasibility_reports import (
    CostBreakdownReport,
    DensityCheckReport,
    InstallmentScheduleReport,
    PhaseScheduleReport,
    ScenarioReport,
)
from .interface import ReportingInterface
from .pdf import export_pdf

__all__ = [
    "BaseReport",
    "ReportTemplate",
    "CostBreakdownReport",
    "DensityCheckReport",
    "InstallmentScheduleReport",
    "PhaseScheduleReport",
    "ScenarioReport",
    "ReportingInterface",
    "export_pdf",
]
