# shipping_campaigns/schemas/checkout_v1.py
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, constr


class CustomerV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    accepts_marketing: bool = False
    tags: List[str] = Field(default_factory=list)
    customer_id: Optional[str] = None
    email: Optional[str] = None


class LineItemV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    line_id: constr(strip_whitespace=True, min_length=1)  # type: ignore
    line_price: Decimal = Field(ge=0)
    original_line_price: Optional[Decimal] = Field(default=None, ge=0)
    title: str = ""
    tags: List[str] = Field(default_factory=list)
    quantity: NonNegativeInt = 1
    properties: Dict[str, Any] = Field(default_factory=dict)


class CartV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    line_items: List[LineItemV1] = Field(default_factory=list)
    discount_code: Optional[str] = None
    customer: Optional[CustomerV1] = None
    subtotal_price_was: Optional[Decimal] = Field(default=None, ge=0)


class ShippingRateV1(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: constr(strip_whitespace=True, min_length=1)  # type: ignore
    price: Decimal = Field(ge=0)
    code: Optional[str] = None
    source: Optional[str] = None


class CheckoutInputV1(BaseModel):
    """
    What the host hands to the script: one cart + the shipping rates offered.
    Money as string or number; strings are preferred ("20.00") to stay exact.
    """

    model_config = ConfigDict(extra="forbid")

    cart: CartV1
    shipping_rates: List[ShippingRateV1] = Field(default_factory=list)


class ShippingRateOutputV1(BaseModel):
    name: str
    code: Optional[str] = None
    price: str
    original_price: str
    discount_message: Optional[str] = None


class CampaignOutcomeV1(BaseModel):
    campaign_id: str
    decision: str
    discounted_rates: List[str] = Field(default_factory=list)


class CheckoutOutputV1(BaseModel):
    version: str = "v1"
    currency: str
    shipping_rates: List[ShippingRateOutputV1]
    campaigns: List[CampaignOutcomeV1] = Field(default_factory=list)
