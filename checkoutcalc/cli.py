"""Checkout CLI.

Commands:
- run: Interactive checkout; scan SKUs from stdin until CHECKOUT, then print the total
- total: Price a list of SKUs given on the command line
- prices: Show the pricing catalogue
- validate: Check every pricing rule in the catalogue
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from checkoutcalc.checkout.session import CheckoutSession
from checkoutcalc.config import get_config
from checkoutcalc.core.logging import configure_logging
from checkoutcalc.errors import CheckoutError, PricingSourceLoadError
from checkoutcalc.pricing.loader import FilePricingSource, load_pricing_source
from checkoutcalc.validation import find_invalid_rules

app = typer.Typer(
    name="checkoutcalc",
    help="Checkout - scan items and price them with volume discounts",
    no_args_is_help=True,
)

console = Console(highlight=False, soft_wrap=True)

PRICING_OPTION_HELP = "Pricing file (JSON or YAML); defaults to PRICING_FILE"


@app.callback()
def main() -> None:
    """Checkout - scan items and price them with volume discounts."""
    config = get_config()
    configure_logging(config.log_level, config.log_format)


def _load_source(pricing: Path | None) -> FilePricingSource:
    path = pricing or get_config().pricing_file
    try:
        return load_pricing_source(path)
    except PricingSourceLoadError as e:
        console.print(f"Error loading pricing service: {escape(str(e))}")
        raise typer.Exit(code=1)


def _normalize(raw: str) -> str:
    text = raw.strip()
    return text.upper() if get_config().cli.uppercase else text


@app.command()
def run(
    pricing: Path | None = typer.Option(None, "--pricing", "-p", help=PRICING_OPTION_HELP),
):
    """Scan SKUs interactively, then print the total."""
    cli_config = get_config().cli
    sentinel = _normalize(cli_config.sentinel)
    shown = sentinel.lower() if cli_config.uppercase else sentinel
    checkout = CheckoutSession(_load_source(pricing))

    console.print("Welcome to the checkout system!")
    console.print(
        f"Type SKU letters to scan items. Type '{escape(shown)}' "
        "to finish and see the total price."
    )

    while True:
        console.print("Enter SKU: ", end="")
        line = sys.stdin.readline()
        if not line:  # EOF
            console.print()
            break

        sku = _normalize(line)
        if sku == sentinel:
            break

        try:
            checkout.scan(sku)
        except CheckoutError as e:
            console.print(f"Error scanning item: {escape(str(e))}")
        else:
            console.print(f"Scanned {escape(sku)}")

    try:
        total_price = checkout.compute_total()
    except CheckoutError as e:
        console.print(f"Error calculating total price: {escape(str(e))}")
    else:
        console.print(f"Total Price: {total_price}")


@app.command()
def total(
    skus: list[str] = typer.Argument(..., help="SKUs to scan, one per unit"),
    pricing: Path | None = typer.Option(None, "--pricing", "-p", help=PRICING_OPTION_HELP),
):
    """Price a basket of SKUs given as arguments."""
    checkout = CheckoutSession(_load_source(pricing))

    for raw in skus:
        sku = _normalize(raw)
        try:
            checkout.scan(sku)
        except CheckoutError as e:
            console.print(f"[yellow]⚠[/yellow] {escape(str(e))}")

    try:
        total_price = checkout.compute_total()
    except CheckoutError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    console.print(f"Total Price: {total_price}")


@app.command()
def prices(
    pricing: Path | None = typer.Option(None, "--pricing", "-p", help=PRICING_OPTION_HELP),
):
    """Show every pricing rule in the catalogue."""
    source = _load_source(pricing)

    table = Table(title=f"Pricing Rules ({source.path})")
    table.add_column("SKU", style="cyan")
    table.add_column("Unit Price", justify="right")
    table.add_column("Offer")

    for sku, rule in source.items():
        offer = (
            f"{rule.discount_qty} for {rule.discount_price}" if rule.has_discount else "-"
        )
        table.add_row(escape(sku), str(rule.unit_price), offer)

    console.print(table)
    console.print(f"{len(source)} rules")


@app.command()
def validate(
    pricing: Path | None = typer.Option(None, "--pricing", "-p", help=PRICING_OPTION_HELP),
):
    """Check that every pricing rule has positive prices."""
    source = _load_source(pricing)
    problems = find_invalid_rules(source.items())

    if problems:
        for err in problems:
            console.print(f"  [red]✗[/red] {escape(str(err))}: {escape(repr(err.rule))}")
        console.print(f"[bold red]✗[/bold red] {len(problems)} invalid of {len(source)} rules")
        raise typer.Exit(code=1)

    console.print(f"[bold green]✓[/bold green] {len(source)} rules OK")


if __name__ == "__main__":
    app()
