from __future__ import annotations

from ..engine.conditions import Condition, ConditionScope


class Qualifier(Condition):
    """
    Cart-level predicate: customer, discount code, totals.
    Data that is absent (no customer, no code) is a plain False, never an error.
    """

    type_name = "qualifier"
    scope = ConditionScope.CART
