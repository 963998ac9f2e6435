"""
Currency / tax conversion tests.

Tests:
1. Unit price and VAT multiplier
2. USD divides by the exchange rate
3. Zero exchange rate converts 1:1
4. Non-positive quantity prices to zero
"""

import pytest

from pouchquote.pricing_engine import PricingEngine
from pouchquote.schemas import Quote


def test_unit_and_tax_inclusive_prices():
    quote = PricingEngine(vat_rate=13, exchange_rate=7.2).price(total=15000, quantity=30000)
    assert quote.ex_factory.unit == pytest.approx(0.5, abs=1e-9)
    assert quote.with_tax.unit == pytest.approx(quote.ex_factory.unit * 1.13, abs=1e-9)
    assert quote.with_tax.total == pytest.approx(15000 * 1.13, abs=1e-9)


def test_usd_divides_by_exchange_rate():
    quote = PricingEngine(vat_rate=13, exchange_rate=7.2).price(total=7200, quantity=100)
    assert quote.ex_factory.total_usd == pytest.approx(1000, abs=1e-9)
    assert quote.ex_factory.unit_usd == pytest.approx(10, abs=1e-9)
    assert quote.with_tax.total_usd == pytest.approx(quote.with_tax.total / 7.2, abs=1e-9)


def test_zero_exchange_rate_is_one_to_one():
    quote = PricingEngine(vat_rate=0, exchange_rate=0).price(total=500, quantity=10)
    assert quote.ex_factory.total_usd == 500
    assert quote.with_tax.unit_usd == 50


@pytest.mark.parametrize("quantity", [0, -1])
def test_non_positive_quantity_is_zero(quantity):
    assert PricingEngine(13, 7.2).price(total=500, quantity=quantity) == Quote()
