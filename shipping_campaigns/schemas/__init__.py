from .checkout_v1 import (  # noqa
    CartV1,
    CheckoutInputV1,
    CheckoutOutputV1,
    CustomerV1,
    LineItemV1,
    ShippingRateOutputV1,
    ShippingRateV1,
)
