from __future__ import annotations

from ..engine.conditions import Condition, ConditionScope


class Selector(Condition):
    """Predicate over a single candidate: a LineItem or a ShippingRate."""

    type_name = "selector"
    scope = ConditionScope.CANDIDATE
