from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional, Sequence

from .core.settings import get_settings
from .engine.campaign import Campaign
from .engine.cart import Cart, Customer, LineItem, ShippingRate
from .engine.loader import load_campaigns
from .engine.runner import CampaignRunner
from .schemas.checkout_v1 import (
    CampaignOutcomeV1,
    CheckoutInputV1,
    CheckoutOutputV1,
    ShippingRateOutputV1,
)


def _money_2dp(value: Decimal) -> str:
    return f"{value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):.2f}"


def cart_from_input(qin: CheckoutInputV1) -> Cart:
    c = qin.cart
    customer = None
    if c.customer is not None:
        customer = Customer(
            accepts_marketing=c.customer.accepts_marketing,
            tags=list(c.customer.tags),
            customer_id=c.customer.customer_id,
            email=c.customer.email,
        )

    return Cart(
        line_items=[
            LineItem(
                line_id=li.line_id,
                line_price=li.line_price,
                original_line_price=li.original_line_price,
                title=li.title,
                tags=list(li.tags),
                quantity=li.quantity,
                properties=dict(li.properties),
            )
            for li in c.line_items
        ],
        discount_code=c.discount_code,
        customer=customer,
        subtotal_price_was_override=c.subtotal_price_was,
    )


def rates_from_input(qin: CheckoutInputV1) -> List[ShippingRate]:
    return [
        ShippingRate(name=r.name, price=r.price, code=r.code, source=r.source)
        for r in qin.shipping_rates
    ]


def run_checkout(
    payload: Dict[str, Any], campaigns: Optional[Sequence[Campaign]] = None
) -> Dict[str, Any]:
    """
    Input -> campaigns -> Output, as a pure function over JSON-like dicts.

    campaigns=None: load the campaign set from settings.CAMPAIGNS_PATH.
    Raises pydantic.ValidationError for a bad payload and InvalidConfiguration
    for a bad campaign set.
    """
    settings = get_settings()
    qin = CheckoutInputV1.model_validate(payload)

    if campaigns is None:
        campaigns = load_campaigns(settings.CAMPAIGNS_PATH)

    cart = cart_from_input(qin)
    rates = rates_from_input(qin)

    result = CampaignRunner(campaigns).run(cart, rates)

    out = CheckoutOutputV1(
        currency=settings.CURRENCY,
        shipping_rates=[
            ShippingRateOutputV1(
                name=r.name,
                code=r.code,
                price=_money_2dp(r.price),
                original_price=_money_2dp(r.original_price),
                discount_message=r.discount_message,
            )
            for r in result.rates
        ],
        campaigns=[
            CampaignOutcomeV1(
                campaign_id=o.campaign_id,
                decision=o.decision,
                discounted_rates=list(o.discounted_rates),
            )
            for o in result.outcomes
        ],
    )
    return out.model_dump()
