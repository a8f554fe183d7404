"""Checkout - point-of-sale pricing with volume discounts."""

from checkoutcalc.checkout import CheckoutSession, apply_discount
from checkoutcalc.errors import (
    CheckoutError,
    EmptyCheckoutError,
    InvalidPricingRuleError,
    PricingSourceLoadError,
    UnknownItemError,
)
from checkoutcalc.models import PricingRule
from checkoutcalc.pricing import (
    FilePricingSource,
    InMemoryPricingSource,
    PricingSource,
    load_pricing_source,
)

__version__ = "0.1.0"

__all__ = [
    "CheckoutSession",
    "apply_discount",
    "PricingRule",
    "PricingSource",
    "InMemoryPricingSource",
    "FilePricingSource",
    "load_pricing_source",
    "CheckoutError",
    "UnknownItemError",
    "InvalidPricingRuleError",
    "EmptyCheckoutError",
    "PricingSourceLoadError",
]
