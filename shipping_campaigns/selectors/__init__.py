# Ensure registration happens by importing modules
from .base import Selector  # noqa
from .composite import AndSelector, CompositeCondition, OrSelector  # noqa
from .product import ProductTagSelector, ProductTitleSelector  # noqa
from .rate_name import RateNameSelector  # noqa

__all__ = [
    "Selector",
    "AndSelector",
    "CompositeCondition",
    "OrSelector",
    "ProductTagSelector",
    "ProductTitleSelector",
    "RateNameSelector",
]
