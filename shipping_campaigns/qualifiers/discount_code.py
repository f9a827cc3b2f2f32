from __future__ import annotations

from typing import Iterable, Union

from ..engine.conditions import Mode
from ..engine.matching import MatchKind, partial_match
from ..engine.registry import register_condition
from .base import Qualifier


@register_condition
class NoCodeQualifier(Qualifier):
    type_name = "no_code"

    def matches(self, cart, selector=None) -> bool:
        return cart.discount_code is None


@register_condition
class DiscountCodeQualifier(Qualifier):
    """Match the code attached to the cart (case-insensitive). No code -> False."""

    type_name = "discount_code"

    def __init__(
        self,
        mode: Union[Mode, str],
        match_kind: Union[MatchKind, str],
        codes: Iterable[str],
    ):
        self.mode = Mode.parse(mode)
        self.match_kind = MatchKind.parse(match_kind)
        self.codes = [str(c).lower() for c in codes]

    def matches(self, cart, selector=None) -> bool:
        if cart.discount_code is None:
            return False
        code = str(cart.discount_code).lower()
        hit = partial_match(self.match_kind, code, self.codes)
        return hit ^ (self.mode is Mode.DOES_NOT)
