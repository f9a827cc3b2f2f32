from __future__ import annotations

from typing import Iterable, Union

from ..engine.conditions import Mode
from ..engine.matching import MatchKind, partial_match
from ..engine.registry import register_condition
from .base import Qualifier


@register_condition
class CustomerAcceptsMarketingQualifier(Qualifier):
    type_name = "customer_accepts_marketing"

    def __init__(self, mode: Union[Mode, str] = Mode.DOES):
        self.mode = Mode.parse(mode)

    def matches(self, cart, selector=None) -> bool:
        if cart.customer is None:
            return False
        accepts = bool(cart.customer.accepts_marketing)
        return accepts if self.mode is Mode.DOES else not accepts


@register_condition
class CustomerTagQualifier(Qualifier):
    """
    params:
      mode: does | does_not
      match_kind: match | start_with | end_with | contain (+ does_not_*)
      tags: ["vip", "wholesale"]
    """

    type_name = "customer_tag"

    def __init__(
        self,
        mode: Union[Mode, str],
        match_kind: Union[MatchKind, str],
        tags: Iterable[str],
    ):
        self.mode = Mode.parse(mode)
        self.match_kind = MatchKind.parse(match_kind)
        self.tags = [str(t).lower() for t in tags]

    def matches(self, cart, selector=None) -> bool:
        if cart.customer is None:
            return False
        customer_tags = [str(t).lower() for t in cart.customer.tags]
        hit = partial_match(self.match_kind, customer_tags, self.tags)
        return hit ^ (self.mode is Mode.DOES_NOT)
