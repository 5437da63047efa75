# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for feasibility report tables.

Test Coverage:
1. Report base class validation and templates
2. Scenario, density, cost, installment and phase tables (raw and formatted)
3. Fluent access through FeasibilityResult.reporting
"""

from __future__ import annotations

import pandas as pd
import pytest

from sahm.analysis import FeasibilityResult, analyze
from sahm.reporting import (
    CostBreakdownReport,
    DensityCheckReport,
    InstallmentScheduleReport,
    PhaseScheduleReport,
    ReportingInterface,
    ReportTemplate,
    ScenarioReport,
)


class TestBaseReport:
    def test_requires_feasibility_result(self):
        with pytest.raises(TypeError, match="FeasibilityResult"):
            ScenarioReport({"not": "a result"})

    def test_terminology_override(self, reference_result: FeasibilityResult):
        template = ReportTemplate(
            name="custom",
            template_type="scenario_table",
            terminology={"buyer_profit": "Net Profit"},
            persian=False,
        )
        df = ScenarioReport(reference_result, template).generate()

        assert "Net Profit" in df.index
        assert list(df.columns) == ["Pessimistic", "Realistic", "Optimistic"]


class TestScenarioReport:
    def test_raw_values(self, reference_result: FeasibilityResult):
        df = reference_result.reporting.scenario_table()

        assert df.shape == (7, 3)
        assert list(df.columns) == ["بدبینانه", "محتمل", "خوش‌بینانه"]
        assert df.loc["سود خالص", "محتمل"] == pytest.approx(
            reference_result.realistic.buyer_profit
        )

    def test_formatted_values(self, reference_result: FeasibilityResult):
        df = ReportingInterface(reference_result, persian=False).scenario_table(formatted=True)

        assert df.loc["رشد سالانه بازار", "Realistic"] == "35.0%"
        assert df.loc["کل پرداختی خریدار", "Realistic"] == "1,530,000,000"


class TestDensityCheckReport:
    def test_values(self, reference_result: FeasibilityResult):
        df = DensityCheckReport(reference_result).generate()

        assert len(df) == 7
        assert df.iloc[3, 0] == pytest.approx(166500)
        assert df.iloc[-1, 0] == pytest.approx(0.0)

    def test_formatted(self, reference_result: FeasibilityResult):
        template = ReportTemplate(name="d", template_type="density_check", persian=False)
        df = DensityCheckReport(reference_result, template).generate(formatted=True)

        assert df.iloc[3, 0] == "166,500"
        assert df.iloc[-1, 0] == "0.0%"


class TestCostBreakdownReport:
    def test_values(self, reference_result: FeasibilityResult):
        df = CostBreakdownReport(reference_result).generate()
        values = df.iloc[:, 0]

        assert values.iloc[0] == pytest.approx(68_000_000)
        assert values.iloc[2] == pytest.approx(168_300_000)
        assert values.iloc[3] == 250_000_000
        assert values.iloc[-1] == pytest.approx(reference_result.metrics.total_project_profit)


class TestInstallmentScheduleReport:
    def test_running_total(self, reference_result: FeasibilityResult):
        df = InstallmentScheduleReport(reference_result).generate()

        assert len(df) == 5
        assert df["جمع پرداختی"].iloc[-1] == 1_530_000_000
        assert df["سهم از کل"].sum() == pytest.approx(100.0)

    def test_empty_schedule(self, reference_result: FeasibilityResult):
        result = analyze(reference_result.inputs.copy(updates={"installments": []}))
        df = InstallmentScheduleReport(result).generate(formatted=True)

        assert df.empty
        assert list(df.columns) == ["عنوان", "ماه سررسید", "مبلغ", "جمع پرداختی", "سهم از کل"]


class TestPhaseScheduleReport:
    def test_statuses(self, reference_result: FeasibilityResult):
        df = PhaseScheduleReport(reference_result).generate()

        assert list(df["وضعیت"]) == ["In Progress", "Pending", "Pending", "Pending"]
        assert list(df["ماه پایان"]) == [9, 21, 33, 42]

    def test_formatted_persian_status(self, reference_result: FeasibilityResult):
        df = reference_result.reporting.phase_schedule(formatted=True)
        assert df["وضعیت"].iloc[0] == "در حال اجرا"


def test_reporting_tables_are_dataframes(reference_result: FeasibilityResult):
    reporting = reference_result.reporting
    for table in (
        reporting.scenario_table(),
        reporting.density_check(),
        reporting.cost_breakdown(),
        reporting.installment_schedule(),
        reporting.phase_schedule(),
    ):
        assert isinstance(table, pd.DataFrame)
