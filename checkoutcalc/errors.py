"""Checkout error taxonomy.

Every error raised by the pricing and checkout core derives from
``CheckoutError`` so callers can catch the whole family in one place.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from checkoutcalc.models import PricingRule


class CheckoutError(Exception):
    """Base class for checkout errors."""


class UnknownItemError(CheckoutError):
    """No pricing rule exists for a SKU."""

    def __init__(self, sku: str):
        self.sku = sku
        super().__init__(f"no pricing rule found for SKU: {sku}")


class InvalidPricingRuleError(CheckoutError):
    """A pricing rule breaks the positive-price invariants."""

    def __init__(self, sku: str, rule: PricingRule):
        self.sku = sku
        self.rule = rule
        super().__init__(f"invalid pricing rule for SKU: {sku}")


class EmptyCheckoutError(CheckoutError):
    """A total was requested before anything was scanned."""

    total = 0

    def __init__(self) -> None:
        super().__init__("no items have been scanned")


class PricingSourceLoadError(CheckoutError):
    """A file-backed pricing source could not be opened, read, or parsed."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason} ({self.path})")
