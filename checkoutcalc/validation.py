"""Catalogue validation for pricing sources.

Checks every rule up front instead of waiting for a checkout total to trip
over a bad one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from checkoutcalc.checkout.discount import validate_pricing_rule
from checkoutcalc.errors import InvalidPricingRuleError
from checkoutcalc.models import PricingRule

logger = logging.getLogger(__name__)


def find_invalid_rules(
    rules: Iterable[tuple[str, PricingRule]],
) -> list[InvalidPricingRuleError]:
    """Return one InvalidPricingRuleError per malformed rule, in input order.

    Args:
        rules: (sku, rule) pairs, e.g. ``InMemoryPricingSource.items()``

    Returns:
        List of errors (empty list if every rule is valid)
    """
    problems: list[InvalidPricingRuleError] = []
    checked = 0
    for sku, rule in rules:
        checked += 1
        try:
            validate_pricing_rule(sku, rule)
        except InvalidPricingRuleError as e:
            logger.warning(f"Invalid pricing rule for {sku}: {rule!r}")
            problems.append(e)

    logger.info(f"Validated {checked} pricing rules ({len(problems)} invalid)")
    return problems
