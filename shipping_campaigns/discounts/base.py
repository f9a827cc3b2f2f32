from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict

D = Decimal


class Discount:
    """
    Base class for discount strategies. apply(rate) mutates the rate in place
    and returns the amount taken off.
    """

    type_name: str = "base"

    def apply(self, rate) -> D:
        raise NotImplementedError

    def apply_final_discount(self) -> None:
        """Called once after all rates were processed; no-op by default."""
        return None

    @classmethod
    def from_config(cls, params: Dict[str, Any]) -> "Discount":
        return cls(**params)
