# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reporting Interface

Fluent access to the feasibility reports from a ``FeasibilityResult``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import pandas as pd

from .base import ReportTemplate
from .feasibility_reports import (
    CostBreakdownReport,
    DensityCheckReport,
    InstallmentScheduleReport,
    PhaseScheduleReport,
    ScenarioReport,
)

if TYPE_CHECKING:
    from ..analysis.results import FeasibilityResult
    from ..proposal.content import ProposalContent


class ReportingInterface:
    """
    Fluent interface for accessing standardized reports.

    Exposed via the ``reporting`` property on FeasibilityResult.

    Example:
        result = analyze(inputs)
        scenarios_df = result.reporting.scenario_table(formatted=True)
        pdf_bytes = result.reporting.pdf()
    """

    def __init__(self, result: "FeasibilityResult", persian: bool = True):
        self._result = result
        self._persian = persian

    def _template(self, template_type: str) -> ReportTemplate:
        return ReportTemplate(
            name=template_type, template_type=template_type, persian=self._persian
        )

    def scenario_table(self, formatted: bool = False) -> pd.DataFrame:
        """Scenario metrics as rows, pessimistic/realistic/optimistic as columns."""
        report = ScenarioReport(self._result, self._template("scenario_table"))
        return report.generate(formatted=formatted)

    def density_check(self, formatted: bool = False) -> pd.DataFrame:
        """Declared vs occupancy-derived gross area."""
        report = DensityCheckReport(self._result, self._template("density_check"))
        return report.generate(formatted=formatted)

    def cost_breakdown(self, formatted: bool = False) -> pd.DataFrame:
        report = CostBreakdownReport(self._result, self._template("cost_breakdown"))
        return report.generate(formatted=formatted)

    def installment_schedule(self, formatted: bool = False) -> pd.DataFrame:
        report = InstallmentScheduleReport(
            self._result, self._template("installment_schedule")
        )
        return report.generate(formatted=formatted)

    def phase_schedule(self, formatted: bool = False) -> pd.DataFrame:
        report = PhaseScheduleReport(self._result, self._template("phase_schedule"))
        return report.generate(formatted=formatted)

    def pdf(self, content: Optional["ProposalContent"] = None) -> bytes:
        """Render the PDF report; see ``sahm.reporting.pdf.export_pdf``."""
        from .pdf import export_pdf  # noqa: PLC0415

        return export_pdf(self._result, content)
