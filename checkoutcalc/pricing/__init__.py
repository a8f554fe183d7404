"""Pricing sources for the checkout."""

from checkoutcalc.pricing.loader import FilePricingSource, load_pricing_source
from checkoutcalc.pricing.source import InMemoryPricingSource, PricingSource

__all__ = [
    "PricingSource",
    "InMemoryPricingSource",
    "FilePricingSource",
    "load_pricing_source",
]
