"""Pytest configuration and fixtures for checkout tests.

Provides common fixtures for testing.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from checkoutcalc.config import reset_config
from checkoutcalc.models import PricingRule
from checkoutcalc.pricing.source import InMemoryPricingSource


@pytest.fixture
def pricing_rules() -> dict[str, PricingRule]:
    """Reference catalogue: two offers and two plain-priced items."""
    return {
        "A": PricingRule(unit_price=50, discount_qty=3, discount_price=130),
        "B": PricingRule(unit_price=30, discount_qty=2, discount_price=45),
        "C": PricingRule(unit_price=20),
        "D": PricingRule(unit_price=15),
    }


@pytest.fixture
def pricing_source(pricing_rules: dict[str, PricingRule]) -> InMemoryPricingSource:
    """In-memory pricing source over the reference catalogue."""
    return InMemoryPricingSource(pricing_rules)


@pytest.fixture
def pricing_file(tmp_path: Path) -> Path:
    """Reference catalogue written in the on-disk JSON format."""
    path = tmp_path / "pricing_rules.json"
    path.write_text(
        json.dumps(
            {
                "A": {"UnitPrice": 50, "DiscountQty": 3, "DiscountPrice": 130},
                "B": {"UnitPrice": 30, "DiscountQty": 2, "DiscountPrice": 45},
                "C": {"UnitPrice": 20},
                "D": {"UnitPrice": 15},
            }
        )
    )
    return path


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, tmp_path: Path):
    """Set up test environment variables."""
    monkeypatch.setenv("PRICING_FILE", str(tmp_path / "missing.json"))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.delenv("CHECKOUT_SENTINEL", raising=False)
    monkeypatch.delenv("NORMALIZE_SKUS", raising=False)
    reset_config()

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers, root.level = handlers, level
    reset_config()
