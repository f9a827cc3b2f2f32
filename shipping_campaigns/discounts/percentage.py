from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..engine.compare import to_money
from ..engine.errors import InvalidConfiguration
from ..engine.registry import register_discount
from .base import D, Discount


@register_discount
class PercentageDiscount(Discount):
    """
    params:
      percent: 100      # 0..100
      message: "Free Shipping"
    """

    type_name = "percentage"

    def __init__(self, percent: Any, message: str):
        try:
            pct = D(str(percent))
        except (InvalidOperation, ValueError):
            raise InvalidConfiguration(
                "INVALID_PERCENT", f"Percent is not a number: {percent!r}"
            ) from None
        if not pct.is_finite():
            raise InvalidConfiguration(
                "INVALID_PERCENT", f"Percent is not a number: {percent!r}"
            )
        if pct < 0 or pct > 100:
            raise InvalidConfiguration(
                "INVALID_PERCENT", f"Percent must be between 0 and 100, got {pct}"
            )

        self.percent = pct
        self.fraction = pct / D("100")
        self.message = str(message)

    def apply(self, rate) -> D:
        return rate.apply_discount(rate.price * self.fraction, self.message)


@register_discount
class FixedAmountDiscount(Discount):
    """Take a fixed amount off the rate; the price never goes below 0.00."""

    type_name = "fixed_amount"

    def __init__(self, amount: Any, message: str):
        self.amount = to_money(amount)
        if self.amount < 0:
            raise InvalidConfiguration(
                "INVALID_AMOUNT", f"Discount amount must be >= 0, got {self.amount}"
            )
        self.message = str(message)

    def apply(self, rate) -> D:
        return rate.apply_discount(min(self.amount, rate.price), self.message)
