"""Checkout configuration management.

Loads configuration from environment variables with sensible defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

LOG_FORMATS = ("text", "json")


@dataclass
class CLIConfig:
    """Interactive checkout loop settings."""

    sentinel: str = "CHECKOUT"  # input that ends scanning
    uppercase: bool = True  # upper-case SKUs before scanning


@dataclass
class AppConfig:
    """Root application configuration."""

    pricing_file: Path = Path("pricing_rules.json")
    log_level: str = "INFO"
    log_format: str = "text"  # text or json

    cli: CLIConfig = field(default_factory=CLIConfig)

    @classmethod
    def from_env(cls) -> AppConfig:
        """Load configuration from environment variables.

        Optional (with defaults):
        - PRICING_FILE: Pricing catalogue path (default: "pricing_rules.json")
        - LOG_LEVEL: Logging verbosity (default: "INFO")
        - LOG_FORMAT: "text" or "json" (default: "text")
        - CHECKOUT_SENTINEL: Input that finishes scanning (default: "CHECKOUT")
        - NORMALIZE_SKUS: Upper-case scanned input (default: "true")

        Raises:
            ValueError: If LOG_FORMAT is not a known format
        """
        log_format = os.getenv("LOG_FORMAT", "text").lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got '{log_format}'"
            )

        return cls(
            pricing_file=Path(os.getenv("PRICING_FILE", "pricing_rules.json")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_format=log_format,
            cli=CLIConfig(
                sentinel=os.getenv("CHECKOUT_SENTINEL", "CHECKOUT"),
                uppercase=os.getenv("NORMALIZE_SKUS", "true").lower() == "true",
            ),
        )


# Singleton instance (lazy-loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create singleton AppConfig instance from environment."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None
