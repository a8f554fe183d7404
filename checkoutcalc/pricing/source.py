"""Pricing sources: anything that can resolve a SKU to a PricingRule."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Protocol, runtime_checkable

from checkoutcalc.models import PricingRule


@runtime_checkable
class PricingSource(Protocol):
    """Read-only lookup of pricing rules by SKU."""

    def lookup(self, sku: str) -> PricingRule | None:
        """Return the rule for ``sku``, or None if the SKU is not priced."""
        ...


class InMemoryPricingSource:
    """Pricing source over a fixed mapping of SKU -> PricingRule.

    The mapping is copied at construction, so later changes to the caller's
    dict are not visible to sessions using this source.
    """

    def __init__(self, rules: Mapping[str, PricingRule]) -> None:
        self._rules: dict[str, PricingRule] = dict(rules)

    def lookup(self, sku: str) -> PricingRule | None:
        return self._rules.get(sku)

    def items(self) -> Iterator[tuple[str, PricingRule]]:
        """Iterate (sku, rule) pairs sorted by SKU."""
        for sku in sorted(self._rules):
            yield sku, self._rules[sku]

    def __contains__(self, sku: object) -> bool:
        return sku in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._rules)} rules)"
