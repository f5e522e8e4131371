"""
Milestone scanner - first month a balance crosses fixed amounts.
"""
from dataclasses import dataclass
from typing import Sequence

from compounding.simulation.projection import monthly_rate, step_month

MILESTONE_THRESHOLDS = (
    100_000,
    250_000,
    500_000,
    1_000_000,
    2_000_000,
    5_000_000,
    10_000_000,
)


def format_duration(months: int) -> str:
    """Format a month count as "Y år M mnd", leaving out zero months."""
    years, rest = divmod(months, 12)
    if rest > 0:
        return f"{years} år {rest} mnd"
    return f"{years} år"


@dataclass(frozen=True)
class Milestone:
    """First crossing of a threshold."""

    threshold_amount: float
    months_to_reach: int

    @property
    def years(self) -> int:
        return self.months_to_reach // 12

    @property
    def label(self) -> str:
        return format_duration(self.months_to_reach)


def scan_milestones(
    lump_sum: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    horizon_years: int,
    thresholds: Sequence[float] = MILESTONE_THRESHOLDS
) -> list[Milestone]:
    """
    Find the first month each threshold is reached.

    Thresholds that are never reached within the horizon are left out.

    Args:
        lump_sum: Starting balance
        monthly_contribution: Amount paid in at the end of every month
        annual_rate_percent: Annual growth rate in percent
        horizon_years: Years to scan
        thresholds: Amounts to look for, checked in the given order

    Returns:
        One Milestone per reached threshold, in order of recording
    """
    rate = monthly_rate(annual_rate_percent)
    invested, total = float(lump_sum), float(lump_sum)
    found: dict[float, Milestone] = {}

    for month in range(1, int(round(horizon_years * 12)) + 1):
        invested, total = step_month(invested, total, rate, monthly_contribution)
        for threshold in thresholds:
            if threshold not in found and total >= threshold:
                found[threshold] = Milestone(
                    threshold_amount=threshold,
                    months_to_reach=month
                )
        if len(found) == len(set(thresholds)):
            break

    return list(found.values())
