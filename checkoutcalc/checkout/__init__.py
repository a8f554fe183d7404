"""Checkout session and discount arithmetic."""

from checkoutcalc.checkout.discount import apply_discount, validate_pricing_rule
from checkoutcalc.checkout.session import CheckoutSession

__all__ = ["CheckoutSession", "apply_discount", "validate_pricing_rule"]
