"""
Comparative analytics - several projections side by side.

Covers the cost of waiting, fund versus savings account and a retirement
projection across all risk profiles. Everything here is composition of
project(); no new numerics.
"""
import logging
from dataclasses import dataclass
from typing import Sequence

import pandas as pd

from compounding.simulation.profiles import PROFILES, Profile
from compounding.simulation.projection import ProjectionResult, project
from compounding.simulation.tax import ASK_TAX_RATE, TaxResult, apply_tax

logger = logging.getLogger(__name__)

INFLATION_RATE = 2.5  # percentage points
SAVINGS_ACCOUNT_RATE = 3.5
SAVINGS_ACCOUNT_REAL_RATE = 1.0
DELAY_YEARS = (0, 1, 3, 5)


def effective_rate(annual_rate_percent: float, adjust_for_inflation: bool = False) -> float:
    """Nominal rate, or real rate when inflation adjustment is on."""
    if adjust_for_inflation:
        return annual_rate_percent - INFLATION_RATE
    return annual_rate_percent


def savings_account_rate(adjust_for_inflation: bool = False) -> float:
    return SAVINGS_ACCOUNT_REAL_RATE if adjust_for_inflation else SAVINGS_ACCOUNT_RATE


def delay_label(delay_years: int) -> str:
    if delay_years == 0:
        return "Start i dag"
    return f"Vent {delay_years} år"


@dataclass(frozen=True)
class DelayCost:
    """Outcome of starting after a delay."""

    delay_years: int
    result: ProjectionResult
    lost_return: float

    @property
    def label(self) -> str:
        return delay_label(self.delay_years)

    @property
    def final_total(self) -> float:
        return self.result.final_total


@dataclass(frozen=True)
class DelayComparison:
    """Same savings plan started today and after each delay."""

    costs: tuple[DelayCost, ...]

    @property
    def baseline(self) -> DelayCost:
        return self.costs[0]

    def get(self, delay_years: int) -> DelayCost:
        for cost in self.costs:
            if cost.delay_years == delay_years:
                return cost
        raise KeyError(delay_years)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    "delay_years": c.delay_years,
                    "label": c.label,
                    "final_total": c.final_total,
                    "lost_return": c.lost_return,
                }
                for c in self.costs
            ],
            columns=["delay_years", "label", "final_total", "lost_return"]
        )


def compare_delays(
    lump_sum: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    horizon_years: int,
    delays: Sequence[int] = DELAY_YEARS
) -> DelayComparison:
    """
    Run the same plan once per start delay.

    The lost return of a delay is the no-delay final value minus the final
    value after that delay. A no-delay run is always included as baseline.
    """
    baseline = project(lump_sum, monthly_contribution, annual_rate_percent, horizon_years)
    costs = [DelayCost(delay_years=0, result=baseline, lost_return=0.0)]

    for delay in delays:
        if delay == 0:
            continue
        result = project(
            lump_sum, monthly_contribution, annual_rate_percent, horizon_years,
            start_delay_years=delay
        )
        costs.append(DelayCost(
            delay_years=delay,
            result=result,
            lost_return=baseline.final_total - result.final_total
        ))

    logger.debug("Delay comparison over %s years: %s", horizon_years,
                 [(c.delay_years, c.lost_return) for c in costs])
    return DelayComparison(costs=tuple(costs))


@dataclass(frozen=True)
class FundVsAccount:
    """A fund projection next to a savings account projection."""

    fund: ProjectionResult
    savings: ProjectionResult

    @property
    def advantage(self) -> float:
        """How much more the fund ends up with."""
        return self.fund.final_total - self.savings.final_total

    def to_dataframe(self) -> pd.DataFrame:
        rows = []
        for i, sample in enumerate(self.fund.series):
            savings_total = self.savings.series[i].total if i < len(self.savings.series) else 0.0
            rows.append({
                "year": sample.year,
                "label": sample.label,
                "invested": sample.invested,
                "fund": sample.total,
                "savings": savings_total,
            })
        return pd.DataFrame(rows, columns=["year", "label", "invested", "fund", "savings"])


def compare_fund_vs_account(
    lump_sum: float,
    monthly_contribution: float,
    profile: Profile,
    horizon_years: int,
    adjust_for_inflation: bool = False
) -> FundVsAccount:
    """Project the profile's fund against a savings account over the same horizon."""
    fund = project(
        lump_sum, monthly_contribution,
        effective_rate(profile.annual_rate_percent, adjust_for_inflation),
        horizon_years
    )
    savings = project(
        lump_sum, monthly_contribution,
        savings_account_rate(adjust_for_inflation),
        horizon_years
    )
    return FundVsAccount(fund=fund, savings=savings)


def retirement_horizon(current_age: int, retirement_age: int) -> int:
    """Years until retirement, at least one."""
    return max(1, retirement_age - current_age)


@dataclass(frozen=True)
class RetirementProjection:
    """One projection per profile up to retirement age."""

    current_age: int
    retirement_age: int
    horizon_years: int
    profiles: tuple[Profile, ...]
    results: tuple[ProjectionResult, ...]

    def result_for(self, profile: Profile) -> ProjectionResult:
        return self.results[self.profiles.index(profile)]

    def after_tax(self, flat_rate: float = ASK_TAX_RATE) -> dict[str, TaxResult]:
        """Tax on each profile's final value, keyed by profile id."""
        return {
            profile.id.value: apply_tax(result.final_total, result.final_invested, flat_rate)
            for profile, result in zip(self.profiles, self.results)
        }

    def to_dataframe(self) -> pd.DataFrame:
        """
        Merge all profile series into one table keyed by year.

        The invested column comes from the first profile; every profile shares
        the same lump sum and contributions, so the invested tracks are equal.
        """
        length = max(len(r.series) for r in self.results)
        rows = []
        for i in range(length):
            age = self.current_age + i
            row = {"year": i, "age": age, "label": f"{age} år"}
            for profile, result in zip(self.profiles, self.results):
                row[profile.id.value] = result.series[i].total if i < len(result.series) else 0.0
            first = self.results[0].series
            row["invested"] = first[i].invested if i < len(first) else 0.0
            rows.append(row)

        columns = ["year", "age", "label"] + [p.id.value for p in self.profiles] + ["invested"]
        return pd.DataFrame(rows, columns=columns)


def project_retirement(
    lump_sum: float,
    monthly_contribution: float,
    current_age: int,
    retirement_age: int,
    adjust_for_inflation: bool = False,
    profiles: Sequence[Profile] = PROFILES
) -> RetirementProjection:
    """
    Project savings until retirement once per profile.

    Args:
        lump_sum: One-time principal today
        monthly_contribution: Monthly amount until retirement
        current_age: Age today
        retirement_age: Planned retirement age
        adjust_for_inflation: Use real instead of nominal rates
        profiles: Profiles to compare, catalog order by default

    Returns:
        RetirementProjection with one result per profile
    """
    horizon = retirement_horizon(current_age, retirement_age)
    results = tuple(
        project(
            lump_sum, monthly_contribution,
            effective_rate(p.annual_rate_percent, adjust_for_inflation),
            horizon
        )
        for p in profiles
    )
    return RetirementProjection(
        current_age=current_age,
        retirement_age=retirement_age,
        horizon_years=horizon,
        profiles=tuple(profiles),
        results=results
    )
