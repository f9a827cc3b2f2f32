from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, TypeVar

from .errors import InvalidConfiguration

T = TypeVar("T")


class ConditionScope(str, Enum):
    """
    CART: evaluated once against the whole cart (customer, code, totals).
    CANDIDATE: evaluated against one line item or shipping rate at a time.
    """

    CART = "cart"
    CANDIDATE = "candidate"


class Mode(str, Enum):
    DOES = "does"
    DOES_NOT = "does_not"

    @classmethod
    def parse(cls, raw: Any) -> "Mode":
        if isinstance(raw, Mode):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise InvalidConfiguration(
                "INVALID_MODE", f"Mode must be 'does' or 'does_not', got {raw!r}"
            ) from None


class Aggregation(str, Enum):
    ALL = "all"
    ANY = "any"

    @classmethod
    def parse(cls, raw: Any) -> "Aggregation":
        if isinstance(raw, Aggregation):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise InvalidConfiguration(
                "INVALID_AGGREGATION",
                f"Aggregation must be 'all' or 'any', got {raw!r}",
            ) from None

    def evaluate(self, items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
        if self is Aggregation.ALL:
            return all(predicate(i) for i in items)
        return any(predicate(i) for i in items)


class Condition:
    """
    Base for qualifiers and selectors.

    matches(subject, selector): subject is a Cart for CART scope, a LineItem or
    ShippingRate for CANDIDATE scope. `selector` narrows item-level amounts
    (CartAmountQualifier ITEM / DIFF_ITEM) and is ignored by everything else.
    """

    type_name: str = "base"
    scope: ConditionScope = ConditionScope.CART

    @property
    def children(self) -> Sequence["Condition"]:
        return ()

    def matches(self, subject: Any, selector: Optional["Condition"] = None) -> bool:
        raise NotImplementedError

    @classmethod
    def from_config(
        cls, params: Dict[str, Any], build: Callable[[Dict[str, Any]], "Condition"]
    ) -> "Condition":
        return cls(**params)

    def walk(self) -> Iterable["Condition"]:
        """Depth-first, self first, children in declaration order."""
        yield self
        for child in self.children:
            yield from child.walk()
