"""Unit tests for catalogue validation."""

from __future__ import annotations

from checkoutcalc.models import PricingRule
from checkoutcalc.pricing.source import InMemoryPricingSource
from checkoutcalc.validation import find_invalid_rules


def test_valid_catalogue(pricing_source):
    assert find_invalid_rules(pricing_source.items()) == []


def test_reports_each_invalid_rule():
    source = InMemoryPricingSource(
        {
            "A": PricingRule(unit_price=50, discount_qty=3, discount_price=130),
            "X": PricingRule(unit_price=0),
            "Y": PricingRule(unit_price=10, discount_qty=2, discount_price=-1),
        }
    )

    problems = find_invalid_rules(source.items())

    assert [p.sku for p in problems] == ["X", "Y"]
    assert problems[0].rule == PricingRule(unit_price=0)


def test_empty_input():
    assert find_invalid_rules([]) == []
