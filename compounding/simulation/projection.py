"""
Projection engine - deterministic monthly compounding with annual sampling.
"""
import logging
import math
from dataclasses import dataclass

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def round_currency(value: float) -> float:
    """Round to whole currency units, halves upwards."""
    return float(math.floor(value + 0.5))


def monthly_rate(annual_rate_percent: float) -> float:
    """
    Convert an annual rate in percent to a monthly rate.

    Flat division by twelve, not the compounding-equivalent
    (1 + r) ** (1 / 12) - 1. Every projection depends on this convention.
    """
    return annual_rate_percent / 100 / 12


def step_month(
    invested: float,
    total: float,
    rate: float,
    contribution: float
) -> tuple[float, float]:
    """
    Advance the running balances by one month.

    Growth is applied to the existing balance first, the contribution is
    added at the end of the month.

    Args:
        invested: Principal paid in so far
        total: Current value
        rate: Monthly rate (see monthly_rate)
        contribution: Amount paid in at the end of the month

    Returns:
        (invested, total) after the month
    """
    return invested + contribution, total * (1 + rate) + contribution


@dataclass(frozen=True)
class Sample:
    """One annual observation of a projection."""

    year: int
    invested: float
    total: float
    interest: float

    @property
    def label(self) -> str:
        return f"År {self.year}"

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "label": self.label,
            "invested": self.invested,
            "total": self.total,
            "interest": self.interest,
        }


@dataclass(frozen=True)
class ProjectionResult:
    """Annual series of a projection plus its final figures."""

    series: tuple[Sample, ...]
    annual_rate_percent: float
    monthly_contribution: float
    lump_sum: float
    start_delay_years: int = 0

    @property
    def horizon_years(self) -> int:
        return self.series[-1].year

    @property
    def final_total(self) -> float:
        return self.series[-1].total

    @property
    def final_invested(self) -> float:
        return self.series[-1].invested

    @property
    def final_interest(self) -> float:
        return self.series[-1].interest

    @property
    def interest_share(self) -> float:
        """Share of the final value that came from returns."""
        if self.final_total <= 0:
            return 0.0
        return self.final_interest / self.final_total

    @property
    def years(self) -> np.ndarray:
        return np.array([s.year for s in self.series], dtype=int)

    @property
    def totals(self) -> np.ndarray:
        return np.array([s.total for s in self.series], dtype=float)

    @property
    def invested(self) -> np.ndarray:
        return np.array([s.invested for s in self.series], dtype=float)

    @property
    def interests(self) -> np.ndarray:
        return np.array([s.interest for s in self.series], dtype=float)

    def sample_at(self, year: int) -> Sample:
        """Sample for a given year (the series is indexed by elapsed years)."""
        return self.series[year]

    def to_dataframe(self) -> pd.DataFrame:
        """Chart-ready table with one row per year."""
        return pd.DataFrame(
            [s.to_dict() for s in self.series],
            columns=["year", "label", "invested", "total", "interest"]
        )


def _sample(year: int, invested: float, total: float) -> Sample:
    # interest is derived from the rounded figures so the row always adds up
    invested_rounded = round_currency(invested)
    total_rounded = round_currency(total)
    return Sample(
        year=year,
        invested=invested_rounded,
        total=total_rounded,
        interest=total_rounded - invested_rounded
    )


def project(
    lump_sum: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    horizon_years: int,
    start_delay_years: int = 0
) -> ProjectionResult:
    """
    Project invested capital and accumulated value year by year.

    The simulation runs month by month over the whole horizon. While a start
    delay is running nothing is paid in and nothing grows; the lump sum is
    injected in the first month after the delay. Balances are accumulated
    unrounded, only the emitted samples are rounded.

    Args:
        lump_sum: One-time principal at the start (or at the end of the delay)
        monthly_contribution: Amount paid in at the end of every active month
        annual_rate_percent: Annual growth rate in percent, e.g. 7.5
        horizon_years: Simulated duration in years, including any delay
        start_delay_years: Years before contributions and growth start

    Returns:
        ProjectionResult with one sample per year from 0 to horizon_years
    """
    rate = monthly_rate(annual_rate_percent)
    total_months = int(round(horizon_years * 12))
    delay_months = int(round(start_delay_years * 12))

    if start_delay_years > 0:
        invested, total = 0.0, 0.0
    else:
        invested, total = float(lump_sum), float(lump_sum)

    series = [_sample(0, invested, total)]

    for month in range(1, total_months + 1):
        if month > delay_months:
            if month == delay_months + 1 and start_delay_years > 0:
                invested, total = float(lump_sum), float(lump_sum)
            invested, total = step_month(invested, total, rate, monthly_contribution)

        if month % 12 == 0:
            series.append(_sample(month // 12, invested, total))

    logger.debug(
        "Projection %.2f%% over %s years (delay %s): final total %.0f",
        annual_rate_percent, horizon_years, start_delay_years, series[-1].total
    )

    return ProjectionResult(
        series=tuple(series),
        annual_rate_percent=annual_rate_percent,
        monthly_contribution=monthly_contribution,
        lump_sum=lump_sum,
        start_delay_years=start_delay_years
    )
