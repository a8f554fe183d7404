"""Volume-discount arithmetic for a single SKU."""

from __future__ import annotations

from checkoutcalc.errors import InvalidPricingRuleError
from checkoutcalc.models import PricingRule


def validate_pricing_rule(sku: str, rule: PricingRule) -> None:
    """Raise InvalidPricingRuleError if ``rule`` breaks the positivity invariants."""
    if not rule.is_valid:
        raise InvalidPricingRuleError(sku, rule)


def apply_discount(rule: PricingRule, count: int) -> int:
    """Price ``count`` units of one SKU.

    Full bundles of ``discount_qty`` are charged ``discount_price`` each and
    the remainder is charged at ``unit_price``. Without a discount, or when
    fewer than ``discount_qty`` units were scanned, every unit is charged at
    ``unit_price``.

    Example:
        >>> rule = PricingRule(unit_price=50, discount_qty=3, discount_price=130)
        >>> apply_discount(rule, 4)
        180
    """
    if rule.discount_qty > 0 and count >= rule.discount_qty:
        bundles, remainder = divmod(count, rule.discount_qty)
        return bundles * rule.discount_price + remainder * rule.unit_price
    return count * rule.unit_price
