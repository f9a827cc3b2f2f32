# shipping_campaigns/engine/registry.py
from __future__ import annotations

from typing import Dict, Generic, List, Type, TypeVar

from .errors import InvalidConfiguration

T = TypeVar("T", bound=type)


class TypeRegistry(Generic[T]):
    """
    type_name -> class. Used by the loader to turn config nodes into objects.
    Fails fast on duplicate registrations (useful during dev/reload).
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._types: Dict[str, T] = {}

    def register(self, cls: T) -> T:
        key = getattr(cls, "type_name", None)
        if not key:
            raise ValueError(f"{self.kind} class {cls.__name__} has no type_name")

        if key in self._types and self._types[key] is not cls:
            raise ValueError(
                f"Duplicate {self.kind} registration for type '{key}': "
                f"{self._types[key].__name__} vs {cls.__name__}"
            )

        self._types[key] = cls
        return cls

    def get(self, key: str) -> T:
        try:
            return self._types[key]
        except KeyError:
            raise InvalidConfiguration(
                "UNKNOWN_TYPE",
                f"Unknown {self.kind} type '{key}'. Registered: {self.names()}",
                {"kind": self.kind, "type": key},
            ) from None

    def names(self) -> List[str]:
        return sorted(self._types.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._types


condition_registry: "TypeRegistry[Type]" = TypeRegistry("condition")
discount_registry: "TypeRegistry[Type]" = TypeRegistry("discount")


def register_condition(cls):
    return condition_registry.register(cls)


def register_discount(cls):
    return discount_registry.register(cls)
