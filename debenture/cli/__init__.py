"""CLI entry point for debenture."""

import logging
import sys
import traceback

import click
from rich.console import Console

from debenture import __version__
from debenture.cli import contract
from debenture.cli import init as init_cmd
from debenture.lib.config import CONTRACT_ID_ENV_VAR, DEFAULT_CONTRACT_ID
from debenture.lib.errors import DebentureError, format_error_message, get_error_color
from debenture.lib.logging_config import setup_logging

console = Console()


@click.group()  # type: ignore[misc]
@click.option("--debug", is_flag=True, help="Enable debug mode")  # type: ignore[misc]
@click.option(  # type: ignore[misc]
    "--contract-id",
    envvar=CONTRACT_ID_ENV_VAR,
    default=DEFAULT_CONTRACT_ID,
    show_default=True,
    help="Contract instance to operate on",
)
@click.pass_context  # type: ignore[misc]
def main(ctx: click.Context, debug: bool, contract_id: str) -> None:
    """Debenture - issue a fixed-coupon bond and compute its coupon payments."""
    ctx.ensure_object(dict)
    ctx.obj["DEBUG"] = debug
    ctx.obj["CONTRACT_ID"] = contract_id
    setup_logging(logging.DEBUG if debug else logging.WARNING)


def handle_exception(
    exc_type: type[BaseException], exc_value: BaseException, exc_traceback: object
) -> None:
    """
    Global exception handler for CLI.

    Formats exceptions with Rich colors and provides user-friendly messages.
    """
    # Don't handle KeyboardInterrupt
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)  # type: ignore[arg-type]
        return

    color = get_error_color(exc_value) if isinstance(exc_value, Exception) else "red"
    message = (
        format_error_message(exc_value) if isinstance(exc_value, Exception) else str(exc_value)
    )

    console.print(f"\n[{color}]✗ Error: {message}[/{color}]\n")

    debug_mode = "--debug" in sys.argv
    if isinstance(exc_value, DebentureError):
        if debug_mode:
            console.print("[dim]Traceback:[/dim]")
            traceback.print_exception(exc_value)
    else:
        console.print("[dim]Unexpected error occurred. Use --debug for full traceback.[/dim]")
        if debug_mode:
            traceback.print_exception(exc_value)

    sys.exit(1)


# Install global exception handler
sys.excepthook = handle_exception


@main.command()  # type: ignore[misc]
def version() -> None:
    """Show version information."""
    click.echo(f"debenture version {__version__}")


# Register subcommands
main.add_command(contract.issue)
main.add_command(contract.maturity)
main.add_command(contract.par_value)
main.add_command(contract.coupon_payment)
main.add_command(contract.show)
main.add_command(init_cmd.init)


if __name__ == "__main__":
    main()
