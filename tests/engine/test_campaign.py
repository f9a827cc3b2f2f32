from decimal import Decimal

import pytest

from shipping_campaigns.discounts import PercentageDiscount
from shipping_campaigns.engine.campaign import (
    DECISION_NOT_QUALIFIED,
    DECISION_QUALIFIED,
    DECISION_REVERTED,
    Campaign,
    ShippingDiscount,
)
from shipping_campaigns.engine.cart import Cart, LineItem, ShippingRate
from shipping_campaigns.engine.errors import InvalidConfiguration
from shipping_campaigns.qualifiers import (
    CartAmountQualifier,
    CustomerAcceptsMarketingQualifier,
    NoCodeQualifier,
)
from shipping_campaigns.selectors import (
    AndSelector,
    OrSelector,
    ProductTagSelector,
    RateNameSelector,
)


def _priority_free(**overrides):
    args = dict(
        condition="all",
        customer_qualifier=None,
        cart_qualifier=None,
        li_match_type=None,
        line_item_qualifier=None,
        rate_selector=RateNameSelector("does", "match", ["Priority Shipping"]),
        discount=PercentageDiscount(100, "Free Shipping"),
    )
    args.update(overrides)
    return ShippingDiscount(**args)


# -----------------
# end-to-end scenarios
# -----------------


def test_sample_campaign_frees_priority_only(sample_campaign, cart, rates):
    outcome = sample_campaign.run(rates, cart)

    priority, standard = rates
    assert priority.price == Decimal("0.00")
    assert priority.discount_message == "Free Shipping"
    assert standard.price == Decimal("10.00")
    assert standard.discount_message is None

    assert outcome.decision == DECISION_QUALIFIED
    assert outcome.discounted_rates == ["Priority Shipping"]


def test_sample_campaign_subtotal_99(sample_campaign, cart, rates):
    cart.line_items[1].change_line_price(Decimal("0.00"), "x")
    cart.line_items[0].change_line_price(Decimal("99.00"), "x")
    assert cart.subtotal_price == Decimal("99.00")

    sample_campaign.run(rates, cart)
    assert all(not r.discounted for r in rates)


@pytest.mark.parametrize("subtotal", ["150.00", "1000.00", "20.00"])
def test_sample_campaign_with_code_never_applies(sample_campaign, customer, rates, subtotal):
    cart = Cart(
        line_items=[LineItem(line_id="l1", line_price=Decimal(subtotal))],
        discount_code="WELCOME",
        customer=customer,
    )
    sample_campaign.run(rates, cart)
    assert all(not r.discounted for r in rates)


def test_no_rate_selector_discounts_every_rate(cart, rates):
    campaign = _priority_free(rate_selector=None)
    campaign.run(rates, cart)
    assert [r.price for r in rates] == [Decimal("0.00"), Decimal("0.00")]


def test_missing_discount_raises(cart, rates):
    campaign = _priority_free(discount=None)
    with pytest.raises(InvalidConfiguration) as exc:
        campaign.run(rates, cart)
    assert exc.value.code == "MISSING_DISCOUNT"


def test_run_is_deterministic(sample_campaign, cart, rates, customer):
    sample_campaign.run(rates, cart)

    rates2 = [
        ShippingRate(name="Priority Shipping", price=Decimal("20.00")),
        ShippingRate(name="Standard", price=Decimal("10.00")),
    ]
    cart2 = Cart(line_items=[li.snapshot().restore() for li in cart.line_items], customer=customer)
    sample_campaign.run(rates2, cart2)

    assert [(r.price, r.discount_message) for r in rates] == [
        (r.price, r.discount_message) for r in rates2
    ]


# -----------------
# qualification
# -----------------


def test_empty_qualifiers_always_qualify():
    campaign = _priority_free()
    assert campaign.qualifiers == []
    assert campaign.qualifies(Cart())
    assert campaign.qualifies(Cart(discount_code="X"))


def test_and_is_dissolved_under_all(sample_campaign):
    types = [type(q).__name__ for q in sample_campaign.qualifiers]
    assert types == [
        "CustomerAcceptsMarketingQualifier",
        "CartAmountQualifier",
        "NoCodeQualifier",
    ]


def test_composites_kept_whole_under_any():
    and_ = AndSelector(CartAmountQualifier("cart", "gte", 100), NoCodeQualifier())
    campaign = Campaign("any", CustomerAcceptsMarketingQualifier("does"), and_)

    assert campaign.qualifiers[1] is and_

    # klant zonder marketing, maar AND(>=100, geen code) klopt
    cart = Cart(line_items=[LineItem(line_id="l1", line_price="100")])
    assert campaign.qualifies(cart)

    # ANY must not be satisfied by one half of the AND
    cart.discount_code = "X"
    assert not campaign.qualifies(cart)


def test_or_composite_under_all(cart):
    either = OrSelector(NoCodeQualifier(), CartAmountQualifier("cart", "gte", 1000))
    campaign = Campaign("all", CustomerAcceptsMarketingQualifier("does"), either)

    assert campaign.qualifiers[1] is either
    assert campaign.qualifies(cart)
    cart.discount_code = "X"
    assert not campaign.qualifies(cart)


def test_line_item_qualifier_is_evaluated_per_item(cart):
    socks = ProductTagSelector("does", "match", ["socks"])

    any_item = Campaign("all", socks, line_item_match="any")
    all_items = Campaign("all", socks, line_item_match="all")

    assert any_item.qualifies(cart)
    assert not all_items.qualifies(cart)


def test_selector_composite_is_evaluated_per_item(cart):
    shoes_on_sale = AndSelector(
        ProductTagSelector("does", "match", ["shoes"]),
        ProductTagSelector("does", "match", ["sale"]),
    )
    campaign = Campaign("all", shoes_on_sale, line_item_match="any")
    assert campaign.qualifies(cart)


def test_missing_line_item_match_type(cart):
    campaign = Campaign("all", ProductTagSelector("does", "match", ["socks"]))
    with pytest.raises(InvalidConfiguration) as exc:
        campaign.qualifies(cart)
    assert exc.value.code == "MISSING_LINE_ITEM_MATCH_TYPE"
    assert exc.value.message == "Missing line item match type"


def test_line_item_qualifier_is_the_item_amount_selector(cart, rates):
    # item-bedrag over de schoenen: 120 >= 100
    campaign = _priority_free(
        cart_qualifier=CartAmountQualifier("item", "gte", 100),
        li_match_type="any",
        line_item_qualifier=ProductTagSelector("does", "match", ["shoes"]),
    )
    assert campaign.line_item_selector is not None
    assert campaign.qualifies(cart)

    campaign.run(rates, cart)
    assert rates[0].price == Decimal("0.00")


def test_first_cart_amount_qualifier_is_post_amount():
    first = CartAmountQualifier("diff_item", "lte", 10)
    second = CartAmountQualifier("cart", "gte", 100)
    campaign = Campaign(
        "any",
        NoCodeQualifier(),
        OrSelector(AndSelector(first, NoCodeQualifier())),
        second,
    )
    assert campaign.post_amount_qualifier is first


def test_no_post_amount_no_checkpoint(sample_campaign, cart):
    assert _priority_free().checkpoint(cart) is None
    assert sample_campaign.checkpoint(cart) is not None
