"""
Calculator - all views for one set of inputs.
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

from compounding.simulation.comparison import (
    DelayComparison,
    FundVsAccount,
    RetirementProjection,
    compare_delays,
    compare_fund_vs_account,
    effective_rate,
    project_retirement,
)
from compounding.simulation.milestones import MILESTONE_THRESHOLDS, Milestone, scan_milestones
from compounding.simulation.profiles import Profile, ProfileId, get_profile
from compounding.simulation.projection import ProjectionResult, project
from compounding.simulation.tax import TaxConfig, TaxResult, apply_tax

logger = logging.getLogger(__name__)


@dataclass
class CalculatorParameters:
    """Inputs as supplied by the user interface."""
    monthly_contribution: float = 3000.0
    lump_sum: float = 0.0
    horizon_years: int = 25
    profile_id: ProfileId = ProfileId.AGGRESSIVE
    current_age: int = 30
    retirement_age: int = 67
    adjust_for_inflation: bool = False
    include_tax: bool = False

    def __post_init__(self):
        if self.lump_sum < 0:
            raise ValueError("Lump sum cannot be negative")
        if self.monthly_contribution < 0:
            raise ValueError("Monthly contribution cannot be negative")
        self.profile_id = ProfileId(self.profile_id)
        self.horizon_years = max(1, int(self.horizon_years))

    @property
    def profile(self) -> Profile:
        return get_profile(self.profile_id)

    @property
    def rate(self) -> float:
        """Rate fed into the projections (real rate if inflation adjusted)."""
        return effective_rate(self.profile.annual_rate_percent, self.adjust_for_inflation)


@dataclass
class CalculatorResults:
    """Every view derived from one CalculatorParameters."""
    parameters: CalculatorParameters
    projection: ProjectionResult
    delays: DelayComparison
    fund_vs_account: FundVsAccount
    retirement: RetirementProjection
    milestones: list[Milestone]
    tax: Optional[TaxResult] = field(default=None)
    retirement_tax: Optional[dict[str, TaxResult]] = field(default=None)

    @property
    def rate(self) -> float:
        return self.parameters.rate

    @property
    def interest_exceeds_invested(self) -> bool:
        """True once returns have outgrown the paid-in principal."""
        return self.projection.final_interest > self.projection.final_invested


class CompoundCalculator:
    """
    Runs the projection engine for every view of the calculator.

    The tax config is fixed per calculator; tax figures are only produced
    when the parameters ask for them.
    """

    def __init__(
        self,
        tax_config: Optional[TaxConfig] = None,
        thresholds: tuple[float, ...] = MILESTONE_THRESHOLDS
    ):
        self.tax_config = tax_config or TaxConfig()
        self.thresholds = thresholds

    def run(self, params: CalculatorParameters) -> CalculatorResults:
        """
        Compute all views for the given parameters.

        Args:
            params: Calculator inputs

        Returns:
            CalculatorResults with projection, comparisons and milestones
        """
        rate = params.rate
        logger.debug(
            "Running calculator: profile=%s rate=%.2f%% years=%s",
            params.profile_id.value, rate, params.horizon_years
        )

        projection = project(
            params.lump_sum, params.monthly_contribution, rate, params.horizon_years
        )
        delays = compare_delays(
            params.lump_sum, params.monthly_contribution, rate, params.horizon_years
        )
        fund_vs_account = compare_fund_vs_account(
            params.lump_sum, params.monthly_contribution, params.profile,
            params.horizon_years, params.adjust_for_inflation
        )
        retirement = project_retirement(
            params.lump_sum, params.monthly_contribution,
            params.current_age, params.retirement_age,
            params.adjust_for_inflation
        )
        milestones = scan_milestones(
            params.lump_sum, params.monthly_contribution, rate,
            params.horizon_years, self.thresholds
        )

        tax = None
        retirement_tax = None
        if params.include_tax:
            tax = apply_tax(
                projection.final_total, projection.final_invested, self.tax_config.tax_rate
            )
            retirement_tax = retirement.after_tax(self.tax_config.tax_rate)

        return CalculatorResults(
            parameters=params,
            projection=projection,
            delays=delays,
            fund_vs_account=fund_vs_account,
            retirement=retirement,
            milestones=milestones,
            tax=tax,
            retirement_tax=retirement_tax
        )
