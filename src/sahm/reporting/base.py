# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting classes for feasibility report generation.

Reports translate a ``FeasibilityResult`` into presentation tables. They only
format and arrange values the calculators already produced; no report
performs a financial calculation of its own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict

from pydantic import BaseModel, Field

from ..utils.formatting import format_currency, format_percentage

if TYPE_CHECKING:
    from ..analysis.results import FeasibilityResult


class ReportTemplate(BaseModel):
    """
    Template configuration for report generation.

    Allows switching column labels and digit style without touching the
    underlying data logic.
    """

    name: str
    template_type: str  # "scenario_table", "density_check", etc.
    version: str = "1.0"

    # Column label overrides, keyed by internal column name
    terminology: Dict[str, str] = Field(default_factory=dict)

    # Persian digits and ٪ signs when True, ASCII otherwise
    persian: bool = True


class BaseReport(ABC):
    """
    Abstract base class for all report formatters.

    Reports operate on final FeasibilityResult objects and transform them into
    presentation-ready DataFrames.
    """

    template_type: str = "base"
    default_terminology: Dict[str, str] = {}

    def __init__(self, result: "FeasibilityResult", template: ReportTemplate | None = None):
        """
        Initialize report with analysis results.

        Args:
            result: Complete FeasibilityResult from sahm.analysis.analyze()
            template: Optional template overriding labels and digit style
        """
        # Import at runtime to avoid circular dependencies
        from ..analysis.results import FeasibilityResult  # noqa: PLC0415

        if not isinstance(result, FeasibilityResult):
            raise TypeError("BaseReport requires a FeasibilityResult object")
        self._result = result
        self._template = template or ReportTemplate(
            name=type(self).__name__, template_type=self.template_type
        )

    @property
    def persian(self) -> bool:
        return self._template.persian

    def label(self, key: str) -> str:
        """Display label for ``key``: template override, then class default."""
        return self._template.terminology.get(key, self.default_terminology.get(key, key))

    def format_currency(self, amount: float) -> str:
        return format_currency(amount, persian=self.persian)

    def format_percentage(self, value: float, decimals: int = 1) -> str:
        return format_percentage(value, decimals=decimals, persian=self.persian)

    @abstractmethod
    def generate(self, formatted: bool = False, **kwargs) -> Any:
        """
        Generate the report output.

        Args:
            formatted: If True, return display strings instead of numbers
        """
        pass
