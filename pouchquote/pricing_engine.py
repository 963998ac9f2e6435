"""
Final stage: ex-factory and tax-inclusive quotes in CNY and USD.

Pure math. The exchange rate is CNY per 1 USD, so conversion always divides.
"""

from .schemas import PriceTier, Quote


class PricingEngine:
    """
    Turns a pre-tax CNY total into the two-tier, two-currency quote.

    Args:
        vat_rate: percent, e.g. 13 for 13% VAT
        exchange_rate: CNY per USD; 0 means "no rate set" and converts 1:1
    """

    def __init__(self, vat_rate: float, exchange_rate: float):
        self.vat_rate = vat_rate
        self.exchange_rate = exchange_rate

    @property
    def tax_multiplier(self) -> float:
        return 1 + self.vat_rate / 100

    def to_usd(self, value: float) -> float:
        return value / (self.exchange_rate or 1)

    def _tier(self, unit: float, total: float) -> PriceTier:
        return PriceTier(
            unit=unit,
            total=total,
            unit_usd=self.to_usd(unit),
            total_usd=self.to_usd(total),
        )

    def price(self, total: float, quantity: float) -> Quote:
        """Quantity ≤ 0 prices to all zeros rather than dividing."""
        if quantity <= 0:
            return Quote()
        unit = total / quantity
        return Quote(
            ex_factory=self._tier(unit, total),
            with_tax=self._tier(unit * self.tax_multiplier, total * self.tax_multiplier),
        )
