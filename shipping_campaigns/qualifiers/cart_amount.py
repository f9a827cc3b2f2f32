from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Union

from ..engine.compare import CENTS, Comparator, compare_amounts, to_money
from ..engine.errors import InvalidConfiguration
from ..engine.registry import register_condition
from .base import Qualifier

D = Decimal


class AmountScope(str, Enum):
    CART = "cart"
    ITEM = "item"
    DIFF_CART = "diff_cart"
    DIFF_ITEM = "diff_item"

    @classmethod
    def parse(cls, raw: Any) -> "AmountScope":
        if isinstance(raw, AmountScope):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise InvalidConfiguration(
                "INVALID_AMOUNT_SCOPE",
                f"Unknown cart amount behaviour: {raw!r}",
                {"allowed": [s.value for s in cls]},
            ) from None


@register_condition
class CartAmountQualifier(Qualifier):
    """
    Compare a cart amount against a threshold (in currency units, 100 == $100.00).

      cart:      subtotal                     <cmp> amount
      item:      sum(line_price of matched)   <cmp> amount
      diff_cart: subtotal_was - amount        <cmp> subtotal
      diff_item: sum(original of matched) - amount <cmp> sum(line_price of matched)

    "matched" = line items the selector passed to matches() accepts; without a
    selector no item counts and the sums are 0.00.

    The first CartAmountQualifier in a campaign's tree is re-checked after the
    discount ran (see Campaign.after_run).
    """

    type_name = "cart_amount"

    def __init__(
        self,
        scope: Union[AmountScope, str],
        comparator: Union[Comparator, str],
        amount: Any,
    ):
        self.amount_scope = AmountScope.parse(scope)
        self.comparator = Comparator.parse(comparator)
        self.amount = to_money(amount)

    @staticmethod
    def _sum_matched(cart, selector, attr: str) -> D:
        total = D("0.00")
        if selector is None:
            return total
        for item in cart.line_items:
            if selector.matches(item):
                total += getattr(item, attr)
        return total.quantize(CENTS)

    def matches(self, cart, selector=None) -> bool:
        s = self.amount_scope

        if s is AmountScope.CART:
            return compare_amounts(cart.subtotal_price, self.comparator, self.amount)

        if s is AmountScope.ITEM:
            total = self._sum_matched(cart, selector, "line_price")
            return compare_amounts(total, self.comparator, self.amount)

        if s is AmountScope.DIFF_CART:
            return compare_amounts(
                cart.subtotal_price_was - self.amount,
                self.comparator,
                cart.subtotal_price,
            )

        # DIFF_ITEM
        total = self._sum_matched(cart, selector, "line_price")
        original = self._sum_matched(cart, selector, "original_line_price")
        return compare_amounts(original - self.amount, self.comparator, total)
