from __future__ import annotations

import copy
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from .compare import CENTS, to_money

D = Decimal

ZERO = D("0.00")


@dataclass
class Customer:
    accepts_marketing: bool = False
    tags: List[str] = field(default_factory=list)
    customer_id: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class LineItemSnapshot:
    """
    Value copy of every mutable LineItem field, taken before a campaign
    applies its discount. Containers are stored as tuples so the snapshot
    itself cannot be mutated through a live line item.
    """

    line_id: str
    title: str
    tags: Tuple[str, ...]
    quantity: int
    line_price: D
    original_line_price: D
    properties: Tuple[Tuple[str, Any], ...]
    messages: Tuple[str, ...]

    def restore(self) -> "LineItem":
        return LineItem(
            line_id=self.line_id,
            title=self.title,
            tags=list(self.tags),
            quantity=self.quantity,
            line_price=self.line_price,
            original_line_price=self.original_line_price,
            properties={k: copy.deepcopy(v) for k, v in self.properties},
            messages=list(self.messages),
        )


@dataclass
class LineItem:
    line_id: str
    line_price: D
    original_line_price: Optional[D] = None
    title: str = ""
    tags: List[str] = field(default_factory=list)
    quantity: int = 1
    properties: Dict[str, Any] = field(default_factory=dict)

    # discount reasons written by whoever rewrote line_price
    messages: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.line_price = to_money(self.line_price)
        if self.original_line_price is None:
            self.original_line_price = self.line_price
        else:
            self.original_line_price = to_money(self.original_line_price)

    def change_line_price(self, new_price: D, message: str) -> None:
        """
        Hook for line-item discounts run by the host (or an earlier script).
        Campaigns never call this themselves; they only snapshot/restore.
        """
        self.line_price = to_money(new_price)
        self.messages.append(str(message))

    def snapshot(self) -> LineItemSnapshot:
        return LineItemSnapshot(
            line_id=self.line_id,
            title=self.title,
            tags=tuple(self.tags),
            quantity=self.quantity,
            line_price=self.line_price,
            original_line_price=self.original_line_price,
            properties=tuple((k, copy.deepcopy(v)) for k, v in self.properties.items()),
            messages=tuple(self.messages),
        )


@dataclass(frozen=True)
class CartUndo:
    """Token returned by Cart.checkpoint(); consumed by Cart.revert()."""

    line_items: Tuple[LineItemSnapshot, ...]


@dataclass
class Cart:
    line_items: List[LineItem] = field(default_factory=list)
    discount_code: Optional[str] = None
    customer: Optional[Customer] = None

    # baseline supplied by the host; falls back to the sum of original prices
    subtotal_price_was_override: Optional[D] = None

    def __post_init__(self) -> None:
        if self.subtotal_price_was_override is not None:
            self.subtotal_price_was_override = to_money(self.subtotal_price_was_override)

    @property
    def subtotal_price(self) -> D:
        total = ZERO
        for item in self.line_items:
            total += item.line_price
        return total.quantize(CENTS)

    @property
    def subtotal_price_was(self) -> D:
        if self.subtotal_price_was_override is not None:
            return self.subtotal_price_was_override
        total = ZERO
        for item in self.line_items:
            total += item.original_line_price
        return total.quantize(CENTS)

    def checkpoint(self) -> CartUndo:
        return CartUndo(line_items=tuple(item.snapshot() for item in self.line_items))

    def revert(self, undo: CartUndo) -> None:
        # fresh LineItem objects: nothing the discount touched survives
        self.line_items = [snap.restore() for snap in undo.line_items]


@dataclass
class ShippingRate:
    name: str
    price: D
    code: Optional[str] = None
    source: Optional[str] = None
    original_price: Optional[D] = None
    discount_message: Optional[str] = None

    def __post_init__(self) -> None:
        self.price = to_money(self.price)
        if self.original_price is None:
            self.original_price = self.price
        else:
            self.original_price = to_money(self.original_price)

    @property
    def discounted(self) -> bool:
        return self.price != self.original_price

    def apply_discount(self, amount: D, message: str) -> D:
        """
        Lower the price by `amount` (cents, never below 0.00).
        Returns the amount actually taken off.
        """
        amount = to_money(amount)
        if amount > self.price:
            amount = self.price
        self.price = (self.price - amount).quantize(CENTS)
        self.discount_message = str(message)
        return amount
