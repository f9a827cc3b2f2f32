from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Sequence

from ..engine.conditions import Aggregation, Condition, ConditionScope
from ..engine.errors import InvalidConfiguration
from ..engine.registry import register_condition


class CompositeCondition(Condition):
    """
    AND / OR over child conditions (qualifiers or selectors, not both).

    Scope follows the children: a composite of selectors is itself evaluated
    per candidate, a composite of qualifiers against the cart.
    """

    aggregation: Aggregation = Aggregation.ALL

    def __init__(self, *conditions: Optional[Condition]):
        self._children = tuple(c for c in conditions if c is not None)

        scopes = {c.scope for c in self._children}
        if len(scopes) > 1:
            raise InvalidConfiguration(
                "MIXED_SCOPE",
                f"{type(self).__name__} mixes cart qualifiers and item/rate selectors",
                {"children": [type(c).__name__ for c in self._children]},
            )
        self._scope = scopes.pop() if scopes else ConditionScope.CART

    @property
    def scope(self) -> ConditionScope:  # type: ignore[override]
        return self._scope

    @property
    def children(self) -> Sequence[Condition]:
        return self._children

    def matches(self, subject: Any, selector: Optional[Condition] = None) -> bool:
        if selector is not None:
            return self.aggregation.evaluate(
                self._children, lambda c: c.matches(subject, selector)
            )
        return self.aggregation.evaluate(self._children, lambda c: c.matches(subject))

    @classmethod
    def from_config(
        cls, params: Dict[str, Any], build: Callable[[Dict[str, Any]], Condition]
    ) -> "CompositeCondition":
        unknown = sorted(set(params) - {"conditions"})
        if unknown or "conditions" not in params:
            raise InvalidConfiguration(
                "INVALID_PARAMS",
                f"{cls.type_name!r} takes exactly one param 'conditions', got {sorted(params)}",
                {"type": cls.type_name, "unknown": unknown},
            )
        return cls(*[build(node) for node in params["conditions"] or []])


@register_condition
class AndSelector(CompositeCondition):
    type_name = "and"
    aggregation = Aggregation.ALL


@register_condition
class OrSelector(CompositeCondition):
    type_name = "or"
    aggregation = Aggregation.ANY
