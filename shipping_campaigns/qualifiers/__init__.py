# Ensure registration happens by importing modules
from .base import Qualifier  # noqa
from .cart_amount import AmountScope, CartAmountQualifier  # noqa
from .customer import CustomerAcceptsMarketingQualifier, CustomerTagQualifier  # noqa
from .discount_code import DiscountCodeQualifier, NoCodeQualifier  # noqa

__all__ = [
    "Qualifier",
    "AmountScope",
    "CartAmountQualifier",
    "CustomerAcceptsMarketingQualifier",
    "CustomerTagQualifier",
    "DiscountCodeQualifier",
    "NoCodeQualifier",
]
