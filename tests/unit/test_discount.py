"""Unit tests for volume-discount arithmetic."""

from __future__ import annotations

import pytest

from checkoutcalc.checkout.discount import apply_discount, validate_pricing_rule
from checkoutcalc.errors import InvalidPricingRuleError
from checkoutcalc.models import PricingRule

THREE_FOR_130 = PricingRule(unit_price=50, discount_qty=3, discount_price=130)


class TestApplyDiscount:
    """Bundle pricing for a single SKU."""

    @pytest.mark.parametrize(
        "count,expected",
        [
            (1, 50),
            (2, 100),
            (3, 130),
            (4, 180),
            (5, 230),
            (6, 260),
            (7, 310),
        ],
    )
    def test_three_for_130(self, count, expected):
        assert apply_discount(THREE_FOR_130, count) == expected

    def test_no_discount_charges_every_unit(self):
        rule = PricingRule(unit_price=20)
        assert apply_discount(rule, 5) == 100

    def test_zero_count_costs_nothing(self):
        assert apply_discount(THREE_FOR_130, 0) == 0

    def test_matches_formula_across_counts(self):
        rule = PricingRule(unit_price=30, discount_qty=2, discount_price=45)
        for count in range(0, 25):
            if count < rule.discount_qty:
                expected = count * rule.unit_price
            else:
                expected = (count // 2) * 45 + (count % 2) * 30
            assert apply_discount(rule, count) == expected

    def test_bundle_can_cost_more_than_units(self):
        """The arithmetic applies the bundle price as given."""
        rule = PricingRule(unit_price=10, discount_qty=2, discount_price=25)
        assert apply_discount(rule, 2) == 25


class TestValidatePricingRule:
    def test_valid_rule_passes(self):
        validate_pricing_rule("A", THREE_FOR_130)

    def test_invalid_unit_price(self):
        rule = PricingRule(unit_price=0)

        with pytest.raises(InvalidPricingRuleError) as exc_info:
            validate_pricing_rule("X", rule)

        assert exc_info.value.sku == "X"
        assert exc_info.value.rule == rule
        assert "X" in str(exc_info.value)

    def test_invalid_discount_price(self):
        with pytest.raises(InvalidPricingRuleError):
            validate_pricing_rule("X", PricingRule(unit_price=10, discount_qty=2))

    def test_negative_discount_qty(self):
        with pytest.raises(InvalidPricingRuleError):
            validate_pricing_rule("X", PricingRule(unit_price=10, discount_qty=-2, discount_price=15))
