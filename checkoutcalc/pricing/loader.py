"""File-backed pricing source.

Reads a pricing catalogue from disk once, at construction, and serves
lookups from memory afterwards. The catalogue maps each SKU to a record::

    {"A": {"UnitPrice": 50, "DiscountQty": 3, "DiscountPrice": 130},
     "C": {"UnitPrice": 20}}

JSON is the default format; files ending in ``.yaml`` or ``.yml`` are read
with PyYAML instead.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from checkoutcalc.errors import PricingSourceLoadError
from checkoutcalc.models import PricingRule
from checkoutcalc.pricing.source import InMemoryPricingSource

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class FilePricingSource(InMemoryPricingSource):
    """Pricing source loaded from a JSON or YAML file."""

    def __init__(self, path: Path | str):
        """Load and parse the pricing file.

        Args:
            path: Path to the pricing catalogue

        Raises:
            PricingSourceLoadError: If the file cannot be opened, read, or parsed,
                or if any rule record is malformed
        """
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self) -> dict[str, PricingRule]:
        try:
            with open(self.path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise PricingSourceLoadError(
                self.path, f"could not open pricing file: {e.strerror or e}"
            ) from e

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PricingSourceLoadError(
                self.path, f"could not read pricing file: {e}"
            ) from e

        data = self._parse(text)

        if not isinstance(data, dict):
            raise PricingSourceLoadError(
                self.path,
                f"could not parse pricing file: expected a mapping of SKU to rule, "
                f"got {type(data).__name__}",
            )

        rules: dict[str, PricingRule] = {}
        for sku, record in data.items():
            if not isinstance(sku, str):
                # YAML 1.1 reads keys like NO, ON or 007 as bool/int
                raise PricingSourceLoadError(
                    self.path,
                    f"could not parse pricing file: SKU key {sku!r} is not a string",
                )
            if not isinstance(record, dict):
                raise PricingSourceLoadError(
                    self.path,
                    f"could not parse pricing file: rule for SKU {sku} is not a mapping",
                )
            try:
                rules[sku] = PricingRule.model_validate(record)
            except ValidationError as e:
                raise PricingSourceLoadError(
                    self.path,
                    f"could not parse pricing file: bad rule for SKU {sku}: "
                    f"{e.error_count()} validation error(s)",
                ) from e

        logger.info(f"Loaded {len(rules)} pricing rules from {self.path}")
        return rules

    def _parse(self, text: str) -> Any:
        if self.path.suffix.lower() in YAML_SUFFIXES:
            try:
                return yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise PricingSourceLoadError(
                    self.path, f"could not parse pricing file: {e}"
                ) from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise PricingSourceLoadError(
                self.path, f"could not parse pricing file: {e}"
            ) from e


def load_pricing_source(path: Path | str) -> FilePricingSource:
    """Load a pricing catalogue file.

    Example:
        >>> source = load_pricing_source("pricing_rules.json")
        >>> source.lookup("A")
        PricingRule(unit_price=50, discount_qty=3, discount_price=130)
    """
    return FilePricingSource(path)
