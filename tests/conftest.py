from __future__ import annotations

from decimal import Decimal

import pytest

import shipping_campaigns.discounts  # noqa: F401 (register all types)
import shipping_campaigns.qualifiers  # noqa: F401
import shipping_campaigns.selectors  # noqa: F401

from shipping_campaigns.core.settings import get_settings
from shipping_campaigns.discounts import PercentageDiscount
from shipping_campaigns.engine.campaign import ShippingDiscount
from shipping_campaigns.engine.cart import Cart, Customer, LineItem, ShippingRate
from shipping_campaigns.qualifiers import (
    CartAmountQualifier,
    CustomerAcceptsMarketingQualifier,
    NoCodeQualifier,
)
from shipping_campaigns.selectors import AndSelector, RateNameSelector


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def customer():
    return Customer(accepts_marketing=True, tags=["VIP", "newsletter"], customer_id="c1")


@pytest.fixture
def line_items():
    return [
        LineItem(
            line_id="l1",
            title="Trail Running Shoe",
            tags=["shoes", "sale"],
            line_price=Decimal("120.00"),
        ),
        LineItem(
            line_id="l2",
            title="Merino Socks",
            tags=["socks"],
            line_price=Decimal("30.00"),
        ),
    ]


@pytest.fixture
def cart(line_items, customer):
    # subtotal 150.00, geen code, klant accepteert marketing
    return Cart(line_items=line_items, discount_code=None, customer=customer)


@pytest.fixture
def rates():
    return [
        ShippingRate(name="Priority Shipping", price=Decimal("20.00")),
        ShippingRate(name="Standard", price=Decimal("10.00")),
    ]


@pytest.fixture
def sample_campaign():
    return ShippingDiscount(
        "all",
        CustomerAcceptsMarketingQualifier("does"),
        AndSelector(
            CartAmountQualifier("cart", "greater_than_or_equal", 100),
            NoCodeQualifier(),
            None,
        ),
        "any",
        None,
        RateNameSelector("does", "match", ["Priority Shipping"]),
        PercentageDiscount(100, "Free Shipping"),
        campaign_id="free_priority_shipping",
    )


@pytest.fixture
def checkout_payload():
    return {
        "cart": {
            "line_items": [
                {"line_id": "l1", "line_price": "120.00", "title": "Trail Running Shoe", "tags": ["shoes"]},
                {"line_id": "l2", "line_price": "30.00", "title": "Merino Socks"},
            ],
            "discount_code": None,
            "customer": {"accepts_marketing": True},
        },
        "shipping_rates": [
            {"name": "Priority Shipping", "price": "20.00"},
            {"name": "Standard", "price": "10.00"},
        ],
    }
