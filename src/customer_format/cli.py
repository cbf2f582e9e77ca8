"""Command-line interface for customer formatting."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Annotated

import typer

from . import context
from .config import FormatConfig, find_config
from .exceptions import CustomerFormatError
from .logger import get_logger, setup_logger
from .models import Customer
from .protocols import FormatProvider
from .provider import CustomerFormatProvider

app = typer.Typer(
    name="customer-format",
    help="Render customer records with locale-aware format codes",
    add_completion=False,
)

logger = get_logger()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show dispatch, 2=debug",
            min=0,
            max=2,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: customer_format.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for customer-format commands."""
    setup_logger(verbose)
    context.set_config_path(config)


def _load_config() -> FormatConfig:
    try:
        return find_config(context.get_config_path())
    except (FileNotFoundError, CustomerFormatError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


@app.command()
def render(  # noqa: PLR0913 - CLI command needs multiple options
    name: Annotated[str, typer.Argument(help="Customer name")],
    phone: Annotated[str, typer.Argument(help="Customer contact phone")],
    revenue: Annotated[str, typer.Argument(help="Customer revenue (non-negative decimal)")],
    *,
    format: Annotated[  # noqa: A002 - 'format' is appropriate name for CLI option
        str | None, typer.Option("--format", "-f", help="Format code (default: G)")
    ] = None,
    locale: Annotated[
        str | None, typer.Option("--locale", "-l", help="Locale name, e.g. en_GB")
    ] = None,
    use_provider: Annotated[
        bool | None,
        typer.Option(
            "--provider/--no-provider",
            help="Render through CustomerFormatProvider (enables NP and NR)",
        ),
    ] = None,
) -> None:
    """Render a customer record."""
    config = _load_config()

    try:
        amount = Decimal(revenue)
    except InvalidOperation as e:
        typer.echo(f"Error: Invalid revenue: {revenue}", err=True)
        raise typer.Exit(1) from e

    if use_provider is None:
        use_provider = config.use_provider
    if locale:
        config = config.model_copy(update={"locale": locale})

    try:
        culture = config.culture()
        with context.use_culture(culture):
            customer = Customer(name, phone, amount)
            provider: FormatProvider = CustomerFormatProvider() if use_provider else culture
            logger.debug(f"Rendering with {provider!r}")
            typer.echo(customer.to_string(format, provider))
    except CustomerFormatError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


@app.command()
def codes(
    use_provider: Annotated[
        bool | None,
        typer.Option(
            "--provider/--no-provider",
            help="Include composite codes supported by CustomerFormatProvider",
        ),
    ] = None,
) -> None:
    """List supported format codes."""
    config = _load_config()
    with_provider = use_provider if use_provider is not None else config.use_provider
    supported = (
        CustomerFormatProvider.supported_formats() if with_provider else Customer.supported_formats()
    )
    for code in supported:
        typer.echo(code)


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
