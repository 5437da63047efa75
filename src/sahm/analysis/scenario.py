# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scenario Calculator

Financial outcome of one investment share under a single annual market
growth assumption. The pessimistic, realistic and optimistic scenarios are
three invocations of the same formula with different rates; nothing in the
calculator branches on the scenario.

Per share:
    years                = total phase duration / 12
    total_cost_to_buyer  = sum of installments (nominal)
    future_value / m²    = market_price * (1 + g) ** years
    after commission     = future_value_share * (1 - commission)
    buyer_profit         = after commission - total_cost_to_buyer
    total ROI            = buyer_profit / total_cost_to_buyer
    annual ROI           = (1 + total ROI) ** (1 / years) - 1

The annual ROI inverts the same annual compounding used for the future
value, so a project whose cost equals today's market value of the share and
pays no commission reports exactly the growth rate.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterator, List

import pandas as pd

from ..core.inputs import ProjectInputs
from ..core.primitives import Model, ScenarioEnum
from ..utils.safe_math import safe_percentage, safe_power
from .metrics import total_cost_to_buyer, total_duration

logger = logging.getLogger(__name__)


class ScenarioResult(Model):
    """Outcome of one share under one market growth rate. Percentages in percent units."""

    market_growth_rate_percent: float
    years: float
    total_cost_to_buyer: float
    future_value_per_meter: float
    future_value_share: float
    future_value_after_commission: float
    buyer_profit: float
    total_roi_percent: float
    annual_roi_percent: float


def annualize_roi(total_roi_percent: float, years: float) -> float:
    """
    Convert a total-period ROI into a compound annual rate.

    Returns 0 when ``years`` is not positive. A loss of the whole stake or
    more has no real annual root and is reported as -100.
    """
    if years <= 0:
        return 0.0
    growth_multiple = 1 + total_roi_percent / 100
    if growth_multiple <= 0:
        return -100.0
    return (safe_power(growth_multiple, 1 / years) - 1) * 100


def compute_scenario(inputs: ProjectInputs, market_growth_rate_percent: float) -> ScenarioResult:
    """
    Compute one scenario's outcome for one share of ``unit_share_size`` meters.

    Args:
        inputs: Project parameters
        market_growth_rate_percent: Annual market price growth, e.g. 35 for 35%

    Returns:
        ScenarioResult; negative profit propagates as negative ROI. A rate of
        -100% or lower values the share at 0; compounding beyond float range
        saturates at infinity.
    """
    years = total_duration(inputs.construction_phases) / 12
    cost = total_cost_to_buyer(inputs.installments)

    growth = safe_power(1 + market_growth_rate_percent / 100, years)
    if math.isinf(growth):
        logger.warning(f"Market growth of {market_growth_rate_percent}% over {years:g} years overflows")
    future_value_per_meter = inputs.market_price_per_meter * growth
    future_value_share = future_value_per_meter * inputs.unit_share_size
    after_commission = future_value_share * (1 - inputs.sales_commission_percentage / 100)
    profit = after_commission - cost
    total_roi = safe_percentage(profit, cost)

    return ScenarioResult(
        market_growth_rate_percent=market_growth_rate_percent,
        years=years,
        total_cost_to_buyer=cost,
        future_value_per_meter=future_value_per_meter,
        future_value_share=future_value_share,
        future_value_after_commission=after_commission,
        buyer_profit=profit,
        total_roi_percent=total_roi,
        annual_roi_percent=annualize_roi(total_roi, years),
    )


def realistic_growth_rate(inputs: ProjectInputs) -> float:
    """Arithmetic midpoint of the pessimistic and optimistic growth rates."""
    return (inputs.pessimistic_market_growth + inputs.optimistic_market_growth) / 2


def scenario_rates(inputs: ProjectInputs) -> Dict[ScenarioEnum, float]:
    """Annual growth rate of each scenario, in scenario order."""
    return {
        ScenarioEnum.PESSIMISTIC: inputs.pessimistic_market_growth,
        ScenarioEnum.REALISTIC: realistic_growth_rate(inputs),
        ScenarioEnum.OPTIMISTIC: inputs.optimistic_market_growth,
    }


class ScenarioSet(Model):
    """The three scenario outcomes of one computation cycle."""

    pessimistic: ScenarioResult
    realistic: ScenarioResult
    optimistic: ScenarioResult

    def get(self, scenario: ScenarioEnum) -> ScenarioResult:
        return getattr(self, scenario.name.lower())

    def items(self) -> Iterator[tuple]:
        """Yield ``(ScenarioEnum, ScenarioResult)`` pairs, pessimistic first."""
        for scenario in ScenarioEnum:
            yield scenario, self.get(scenario)

    def to_frame(self) -> pd.DataFrame:
        """One row per scenario, one column per ``ScenarioResult`` field."""
        rows = [result.model_dump() for _, result in self.items()]
        index = pd.Index([s.value for s in ScenarioEnum], name="scenario")
        return pd.DataFrame(rows, index=index)


def compute_scenarios(inputs: ProjectInputs) -> ScenarioSet:
    """Run the calculator once per scenario rate."""
    results = {
        scenario.name.lower(): compute_scenario(inputs, rate)
        for scenario, rate in scenario_rates(inputs).items()
    }
    logger.debug(
        "Scenario annual ROI: "
        + ", ".join(f"{name}={r.annual_roi_percent:.1f}%" for name, r in results.items())
    )
    return ScenarioSet(**results)


def value_projection(inputs: ProjectInputs, months_step: int = 6) -> pd.DataFrame:
    """
    Cumulative buyer outlay against the share's projected value over time.

    Sampled every ``months_step`` months from 0 to the end of the schedule
    (the final month is always included). Values compound annually with a
    fractional exponent, matching ``compute_scenario``.

    Args:
        inputs: Project parameters
        months_step: Sampling interval in months (>= 1)

    Returns:
        DataFrame indexed by ``month`` with a ``cumulative_investment`` column
        and one column per scenario (``pessimistic``, ``realistic``,
        ``optimistic``) holding the share value after commission
    """
    if months_step < 1:
        raise ValueError("months_step must be at least 1")

    duration = total_duration(inputs.construction_phases)
    months: List[float] = list(range(0, int(duration) + 1, months_step))
    if not months or months[-1] != duration:
        months.append(duration)

    commission_factor = 1 - inputs.sales_commission_percentage / 100
    share_value_today = inputs.market_price_per_meter * inputs.unit_share_size * commission_factor

    data: Dict[str, List[float]] = {"cumulative_investment": []}
    rates = scenario_rates(inputs)
    for scenario in rates:
        data[scenario.name.lower()] = []

    for month in months:
        data["cumulative_investment"].append(
            sum(i.amount for i in inputs.installments if i.due_month <= month)
        )
        for scenario, rate in rates.items():
            data[scenario.name.lower()].append(
                share_value_today * safe_power(1 + rate / 100, month / 12)
            )

    return pd.DataFrame(data, index=pd.Index(months, name="month"))
