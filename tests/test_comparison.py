"""
Tests for delay cost, fund vs account and retirement comparisons.
"""
import pandas as pd
import pytest

from compounding.simulation.comparison import (
    INFLATION_RATE,
    SAVINGS_ACCOUNT_RATE,
    SAVINGS_ACCOUNT_REAL_RATE,
    compare_delays,
    compare_fund_vs_account,
    delay_label,
    effective_rate,
    project_retirement,
    retirement_horizon,
)
from compounding.simulation.profiles import PROFILES, ProfileId, get_profile
from compounding.simulation.projection import project


class TestEffectiveRate:
    def test_nominal(self):
        assert effective_rate(10) == 10

    def test_inflation_adjusted(self):
        assert effective_rate(10, adjust_for_inflation=True) == 10 - INFLATION_RATE


class TestCompareDelays:
    def test_default_delays(self):
        comparison = compare_delays(0, 3000, 10, 25)
        assert [c.delay_years for c in comparison.costs] == [0, 1, 3, 5]
        assert [c.label for c in comparison.costs] == [
            "Start i dag", "Vent 1 år", "Vent 3 år", "Vent 5 år"
        ]

    def test_lost_return(self):
        comparison = compare_delays(0, 3000, 10, 25)
        baseline = comparison.baseline.final_total
        for cost in comparison.costs:
            assert cost.lost_return == baseline - cost.final_total
        assert comparison.get(0).lost_return == 0

    def test_longer_delay_costs_more(self):
        comparison = compare_delays(50_000, 2000, 7.5, 20)
        lost = [c.lost_return for c in comparison.costs]
        assert lost == sorted(lost)
        assert all(v > 0 for v in lost[1:])

    def test_matches_direct_projection(self):
        comparison = compare_delays(0, 3000, 10, 25)
        assert comparison.get(3).final_total == project(0, 3000, 10, 25, 3).final_total

    def test_nothing_invested_costs_nothing(self):
        comparison = compare_delays(0, 0, 10, 25)
        assert all(c.lost_return == 0 for c in comparison.costs)

    def test_unknown_delay(self):
        with pytest.raises(KeyError):
            compare_delays(0, 3000, 10, 25).get(2)

    def test_to_dataframe(self):
        df = compare_delays(0, 3000, 10, 25).to_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["delay_years", "label", "final_total", "lost_return"]
        assert len(df) == 4


class TestFundVsAccount:
    def test_fund_beats_account(self):
        comparison = compare_fund_vs_account(0, 3000, get_profile("aggressive"), 25)
        assert comparison.fund.annual_rate_percent == 10
        assert comparison.savings.annual_rate_percent == SAVINGS_ACCOUNT_RATE
        assert comparison.advantage > 0

    def test_inflation_adjusted_rates(self):
        comparison = compare_fund_vs_account(
            0, 3000, get_profile("balanced"), 10, adjust_for_inflation=True
        )
        assert comparison.fund.annual_rate_percent == 7.5 - INFLATION_RATE
        assert comparison.savings.annual_rate_percent == SAVINGS_ACCOUNT_REAL_RATE

    def test_table_zips_by_year(self):
        comparison = compare_fund_vs_account(10_000, 1000, get_profile("conservative"), 15)
        df = comparison.to_dataframe()
        assert list(df.columns) == ["year", "label", "invested", "fund", "savings"]
        assert len(df) == 16
        assert df["fund"].iloc[-1] == comparison.fund.final_total
        assert df["savings"].iloc[-1] == comparison.savings.final_total


class TestRetirement:
    def test_horizon(self):
        assert retirement_horizon(30, 67) == 37
        assert retirement_horizon(67, 67) == 1
        assert retirement_horizon(70, 67) == 1

    def test_one_result_per_profile(self):
        retirement = project_retirement(0, 3000, 30, 67)
        assert retirement.horizon_years == 37
        assert len(retirement.results) == len(PROFILES)
        finals = [r.final_total for r in retirement.results]
        assert finals == sorted(finals)

    def test_invested_identical_across_profiles(self):
        retirement = project_retirement(20_000, 3000, 40, 60)
        tracks = [tuple(r.invested) for r in retirement.results]
        assert len(set(tracks)) == 1

    def test_merged_table(self):
        retirement = project_retirement(0, 3000, 30, 67)
        df = retirement.to_dataframe()
        assert list(df.columns) == [
            "year", "age", "label", "conservative", "balanced", "aggressive", "invested"
        ]
        assert len(df) == 38
        assert df["age"].iloc[0] == 30
        assert df["label"].iloc[-1] == "67 år"
        aggressive = retirement.result_for(get_profile(ProfileId.AGGRESSIVE))
        assert df["aggressive"].iloc[-1] == aggressive.final_total
        assert df["invested"].iloc[-1] == 3000 * 12 * 37

    def test_inflation_adjusted(self):
        nominal = project_retirement(0, 3000, 30, 67)
        real = project_retirement(0, 3000, 30, 67, adjust_for_inflation=True)
        for n, r in zip(nominal.results, real.results):
            assert r.final_total < n.final_total

    def test_after_tax(self):
        taxes = project_retirement(0, 3000, 30, 67).after_tax(0.3784)
        assert set(taxes) == {"conservative", "balanced", "aggressive"}
        assert all(t.tax > 0 for t in taxes.values())


def test_delay_label():
    assert delay_label(0) == "Start i dag"
    assert delay_label(5) == "Vent 5 år"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
