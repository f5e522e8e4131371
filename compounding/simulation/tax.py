"""
Flat capital-gains tax on withdrawal.

Supports:
- Aksjesparekonto (ASK): 22% x 1.72 = 37.84% on the gain
- Any other flat rate between 0 and 1
"""
from dataclasses import dataclass

from compounding.simulation.projection import round_currency

ASK_TAX_RATE = 0.3784  # 22% x 1.72


@dataclass
class TaxConfig:
    """Configuration for the flat capital-gains tax."""
    tax_rate: float = ASK_TAX_RATE

    def __post_init__(self):
        if not 0 <= self.tax_rate <= 1:
            raise ValueError("Tax rate must be between 0 and 1")


@dataclass(frozen=True)
class TaxResult:
    """Gain, tax and net value at withdrawal."""
    gain: float
    tax: float
    after_tax: float

    @property
    def before_tax(self) -> float:
        return self.after_tax + self.tax

    @property
    def effective_rate(self) -> float:
        """Tax as a share of the whole withdrawal."""
        if self.before_tax <= 0:
            return 0.0
        return self.tax / self.before_tax


def apply_tax(
    final_total: float,
    final_invested: float,
    flat_rate: float = ASK_TAX_RATE
) -> TaxResult:
    """
    Tax the gain between final value and paid-in principal.

    The gain is floored at zero, a value below principal is never taxed.
    """
    gain = max(0.0, final_total - final_invested)
    tax = gain * flat_rate
    return TaxResult(
        gain=round_currency(gain),
        tax=round_currency(tax),
        after_tax=round_currency(final_total - tax)
    )
