from decimal import Decimal

import pytest

from shipping_campaigns.discounts import FixedAmountDiscount, PercentageDiscount
from shipping_campaigns.engine.cart import ShippingRate
from shipping_campaigns.engine.errors import InvalidConfiguration


@pytest.mark.parametrize("price", ["20.00", "0.01", "13.37", "999.99"])
def test_hundred_percent_zeroes_exactly(price):
    rate = ShippingRate(name="Priority Shipping", price=Decimal(price))
    PercentageDiscount(100, "Free Shipping").apply(rate)

    assert rate.price == Decimal("0.00")
    assert rate.discount_message == "Free Shipping"


def test_partial_percentage():
    rate = ShippingRate(name="Standard", price=Decimal("20.00"))
    taken = PercentageDiscount(25, "25% off").apply(rate)

    assert taken == Decimal("5.00")
    assert rate.price == Decimal("15.00")


def test_percentage_fraction_is_exact():
    assert PercentageDiscount("12.5", "x").fraction == Decimal("0.125")


@pytest.mark.parametrize("percent", [-1, 101, "abc"])
def test_invalid_percent(percent):
    with pytest.raises(InvalidConfiguration) as exc:
        PercentageDiscount(percent, "x")
    assert exc.value.code == "INVALID_PERCENT"


def test_fixed_amount_caps_at_price():
    rate = ShippingRate(name="Standard", price=Decimal("4.00"))
    FixedAmountDiscount(5, "$5 off shipping").apply(rate)
    assert rate.price == Decimal("0.00")


@pytest.mark.parametrize("percent", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_percent(percent):
    with pytest.raises(InvalidConfiguration) as exc:
        PercentageDiscount(percent, "x")
    assert exc.value.code == "INVALID_PERCENT"


def test_partial_percentage_rounds_half_up():
    rate = ShippingRate(name="Standard", price=Decimal("9.90"))
    taken = PercentageDiscount(15, "15% off").apply(rate)

    assert taken == Decimal("1.49")
    assert rate.price == Decimal("8.41")
