"""Checkout session: accumulate scans, then price them."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from types import MappingProxyType

from checkoutcalc.checkout.discount import apply_discount, validate_pricing_rule
from checkoutcalc.errors import EmptyCheckoutError, UnknownItemError
from checkoutcalc.pricing.source import PricingSource

logger = logging.getLogger(__name__)


class CheckoutSession:
    """Scan counts for one transaction, priced against a PricingSource.

    Not safe for concurrent use; give each transaction its own session.
    SKUs are opaque, case-sensitive strings.
    """

    def __init__(self, pricing_source: PricingSource) -> None:
        self.pricing_source = pricing_source
        self._counts: Counter[str] = Counter()

    @property
    def counts(self) -> Mapping[str, int]:
        """Read-only view of SKU -> number of scans."""
        return MappingProxyType(self._counts)

    def scan(self, sku: str) -> None:
        """Record one unit of ``sku``.

        Raises:
            UnknownItemError: If the pricing source has no rule for ``sku``.
                Counts are left unchanged.
        """
        if self.pricing_source.lookup(sku) is None:
            raise UnknownItemError(sku)
        self._counts[sku] += 1
        logger.debug(f"Scanned {sku} (count={self._counts[sku]})")

    def compute_total(self) -> int:
        """Total price of everything scanned so far.

        Can be called repeatedly; it does not change the session.

        Raises:
            EmptyCheckoutError: If nothing has been scanned
            UnknownItemError: If a scanned SKU no longer resolves
            InvalidPricingRuleError: If a resolved rule is malformed
        """
        if not self._counts:
            raise EmptyCheckoutError()

        total = 0
        for sku, count in self._counts.items():
            rule = self.pricing_source.lookup(sku)
            if rule is None:
                raise UnknownItemError(sku)
            validate_pricing_rule(sku, rule)
            total += apply_discount(rule, count)
        return total

    def clear(self) -> None:
        """Forget all scans so the session can be reused for a new transaction."""
        self._counts.clear()

    def __len__(self) -> int:
        return sum(self._counts.values())
