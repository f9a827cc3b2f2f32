# Ensure registration happens by importing modules
from .base import Discount  # noqa
from .percentage import FixedAmountDiscount, PercentageDiscount  # noqa

__all__ = ["Discount", "FixedAmountDiscount", "PercentageDiscount"]
