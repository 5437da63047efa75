# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Feasibility report tables.

Each report returns a pandas DataFrame. With ``formatted=True`` numeric
cells become display strings (Persian digits by default), ready for the
dashboard or the PDF export.
"""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from .base import BaseReport


class ScenarioReport(BaseReport):
    """
    Side-by-side comparison of the three market growth scenarios.

    Rows are metrics, columns are scenarios (pessimistic first).
    """

    template_type = "scenario_table"
    default_terminology = {
        "market_growth_rate_percent": "رشد سالانه بازار",
        "future_value_share": "ارزش سهم در پایان",
        "future_value_after_commission": "ارزش پس از کمیسیون",
        "total_cost_to_buyer": "کل پرداختی خریدار",
        "buyer_profit": "سود خالص",
        "total_roi_percent": "بازدهی کل",
        "annual_roi_percent": "بازدهی سالانه",
    }

    _PERCENT_ROWS = ("market_growth_rate_percent", "total_roi_percent", "annual_roi_percent")

    def generate(self, formatted: bool = False, **kwargs) -> pd.DataFrame:
        columns: Dict[str, List[Any]] = {}
        for scenario, outcome in self._result.scenarios.items():
            name = scenario.persian_label if self.persian else scenario.value
            values = outcome.model_dump()
            columns[name] = [
                self._format(key, values[key]) if formatted else values[key]
                for key in self.default_terminology
            ]
        index = [self.label(key) for key in self.default_terminology]
        return pd.DataFrame(columns, index=index)

    def _format(self, key: str, value: float) -> str:
        if key in self._PERCENT_ROWS:
            return self.format_percentage(value)
        return self.format_currency(value)


class DensityCheckReport(BaseReport):
    """Declared gross area against the area implied by occupancy percentages."""

    template_type = "density_check"
    default_terminology = {
        "parking_area": "زیربنای پارکینگ",
        "ground_floor_area": "زیربنای همکف",
        "residential_area": "زیربنای مسکونی",
        "computed_gross_area": "زیربنای محاسبه‌شده",
        "declared_gross_area": "زیربنای اعلام‌شده",
        "area_difference": "اختلاف",
        "difference_percentage": "درصد اختلاف",
    }

    def generate(self, formatted: bool = False, column: str = "متر مربع", **kwargs) -> pd.DataFrame:
        occupancy = self._result.metrics.occupancy.model_dump()
        values = [occupancy[key] for key in self.default_terminology]
        if formatted:
            values = [
                self.format_percentage(value)
                if key == "difference_percentage"
                else self.format_currency(value)
                for key, value in zip(self.default_terminology, values)
            ]
        index = [self.label(key) for key in self.default_terminology]
        return pd.DataFrame({column: values}, index=index)


class CostBreakdownReport(BaseReport):
    """Per-meter cost build-up and project-level totals, in Toman."""

    template_type = "cost_breakdown"
    default_terminology = {
        "land_cost_per_meter": "قیمت زمین هر متر",
        "total_base_construction_cost_per_meter": "هزینه ساخت هر متر",
        "total_cost_per_meter_with_overhead": "قیمت تمام‌شده هر متر (با بالاسری)",
        "market_price_per_meter": "قیمت روز بازار هر متر",
        "initial_value_gap_per_meter": "اختلاف ارزش اولیه هر متر",
        "total_land_cost": "کل ارزش زمین",
        "total_construction_cost_with_overhead": "کل هزینه ساخت",
        "total_project_cost": "کل هزینه پروژه",
        "total_project_revenue": "کل درآمد فروش",
        "total_project_profit": "سود کل پروژه",
    }

    def generate(self, formatted: bool = False, column: str = "تومان", **kwargs) -> pd.DataFrame:
        metrics = self._result.metrics.model_dump()
        metrics["market_price_per_meter"] = self._result.inputs.market_price_per_meter
        values = [metrics[key] for key in self.default_terminology]
        if formatted:
            values = [self.format_currency(value) for value in values]
        index = [self.label(key) for key in self.default_terminology]
        return pd.DataFrame({column: values}, index=index)


class InstallmentScheduleReport(BaseReport):
    """Share installments with their due month and running total."""

    template_type = "installment_schedule"
    default_terminology = {
        "name": "عنوان",
        "due_month": "ماه سررسید",
        "amount": "مبلغ",
        "cumulative_amount": "جمع پرداختی",
        "share_of_total": "سهم از کل",
    }

    def generate(self, formatted: bool = False, **kwargs) -> pd.DataFrame:
        total = self._result.metrics.total_cost_to_buyer
        running = 0.0
        records: List[Dict[str, Any]] = []
        for installment in self._result.inputs.installments:
            running += installment.amount
            share = installment.amount / total * 100 if total > 0 else 0.0
            if formatted:
                records.append(
                    {
                        "name": installment.name,
                        "due_month": self.format_currency(installment.due_month),
                        "amount": self.format_currency(installment.amount),
                        "cumulative_amount": self.format_currency(running),
                        "share_of_total": self.format_percentage(share),
                    }
                )
            else:
                records.append(
                    {
                        "name": installment.name,
                        "due_month": installment.due_month,
                        "amount": installment.amount,
                        "cumulative_amount": running,
                        "share_of_total": share,
                    }
                )

        df = pd.DataFrame(records, columns=list(self.default_terminology))
        df.columns = [self.label(col) for col in df.columns]
        return df


class PhaseScheduleReport(BaseReport):
    """Construction phases with their start/end months and progress status."""

    template_type = "phase_schedule"
    default_terminology = {
        "name": "فاز",
        "start_month": "ماه شروع",
        "end_month": "ماه پایان",
        "cost_per_meter": "هزینه هر متر",
        "status": "وضعیت",
    }

    _STATUS_LABELS = {
        "Completed": "تکمیل شده",
        "In Progress": "در حال اجرا",
        "Pending": "در انتظار",
    }

    def generate(self, formatted: bool = False, **kwargs) -> pd.DataFrame:
        phases = self._result.inputs.construction_phases
        records: List[Dict[str, Any]] = []
        # Progress entries follow the input order one-to-one
        for phase, progress in zip(phases, self._result.progress.phases):
            status = progress.status.value
            if formatted:
                records.append(
                    {
                        "name": phase.name,
                        "start_month": self.format_currency(progress.start_month),
                        "end_month": self.format_currency(progress.end_month),
                        "cost_per_meter": self.format_currency(phase.cost_per_meter),
                        "status": self._STATUS_LABELS[status] if self.persian else status,
                    }
                )
            else:
                records.append(
                    {
                        "name": phase.name,
                        "start_month": progress.start_month,
                        "end_month": progress.end_month,
                        "cost_per_meter": phase.cost_per_meter,
                        "status": status,
                    }
                )

        df = pd.DataFrame(records, columns=list(self.default_terminology))
        df.columns = [self.label(col) for col in df.columns]
        return df
