from __future__ import annotations

import operator
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Dict

from .errors import InvalidConfiguration

D = Decimal

CENTS = D("0.01")


def to_money(value: Any) -> D:
    """
    Exact money value (cents, half up). Floats go through str() so 0.1 stays 0.10.
    NaN and Infinity are rejected.
    """
    try:
        d = D(str(value))
    except (InvalidOperation, ValueError) as e:
        raise InvalidConfiguration(
            "INVALID_AMOUNT", f"Not a money amount: {value!r}"
        ) from e
    if not d.is_finite():
        raise InvalidConfiguration("INVALID_AMOUNT", f"Not a money amount: {value!r}")
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)


class Comparator(str, Enum):
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    EQUAL_TO = "equal_to"

    @classmethod
    def parse(cls, raw: Any) -> "Comparator":
        if isinstance(raw, Comparator):
            return raw
        key = str(raw).strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidConfiguration(
                "INVALID_COMPARATOR",
                f"Invalid comparison type: {raw!r}",
                {"allowed": [c.value for c in cls]},
            ) from None


_ALIASES = {
    "gt": "greater_than",
    "gte": "greater_than_or_equal",
    "lt": "less_than",
    "lte": "less_than_or_equal",
    "eq": "equal_to",
}

_OPS: Dict[Comparator, Callable[[D, D], bool]] = {
    Comparator.GREATER_THAN: operator.gt,
    Comparator.GREATER_THAN_OR_EQUAL: operator.ge,
    Comparator.LESS_THAN: operator.lt,
    Comparator.LESS_THAN_OR_EQUAL: operator.le,
    Comparator.EQUAL_TO: operator.eq,
}


def compare_amounts(compare: D, comparator: Comparator, compare_to: D) -> bool:
    return _OPS[Comparator.parse(comparator)](compare, compare_to)
