# shipping_campaigns/__init__.py
from __future__ import annotations

from .engine.campaign import Campaign, CampaignOutcome, ShippingDiscount
from .engine.cart import Cart, Customer, LineItem, ShippingRate
from .engine.errors import CampaignError, InvalidConfiguration
from .engine.runner import CampaignRunner, CheckoutResult

__all__ = [
    "Campaign",
    "CampaignOutcome",
    "ShippingDiscount",
    "Cart",
    "Customer",
    "LineItem",
    "ShippingRate",
    "CampaignError",
    "InvalidConfiguration",
    "CampaignRunner",
    "CheckoutResult",
]
