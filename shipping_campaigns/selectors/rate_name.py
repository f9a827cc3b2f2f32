from __future__ import annotations

from typing import Iterable, Union

from ..engine.conditions import Mode
from ..engine.matching import MatchKind, partial_match
from ..engine.registry import register_condition
from .base import Selector


@register_condition
class RateNameSelector(Selector):
    """
    params:
      mode: does | does_not
      match_kind: match (exact name) | start_with | end_with | contain | does_not_*
      names: ["Priority Shipping"]

    Names are compared case-insensitively.
    """

    type_name = "rate_name"

    def __init__(
        self,
        mode: Union[Mode, str],
        match_kind: Union[MatchKind, str],
        names: Iterable[str],
    ):
        self.mode = Mode.parse(mode)
        self.match_kind = MatchKind.parse(match_kind)
        self.names = [str(n).lower() for n in names]

    def matches(self, shipping_rate, selector=None) -> bool:
        name = str(shipping_rate.name).lower()
        if self.match_kind is MatchKind.MATCH:
            hit = name in self.names
        else:
            hit = partial_match(self.match_kind, name, self.names)
        return hit ^ (self.mode is Mode.DOES_NOT)
