"""Debenture contract commands."""

import secrets
import sys
import time
from contextlib import contextmanager
from typing import Generator

import click
from rich.console import Console
from rich.table import Table

from debenture.lib.config import HOLDER_ID_BYTES
from debenture.lib.db import db_session, init_db
from debenture.lib.errors import DebentureError, format_error_message, get_error_color
from debenture.lib.validators import parse_timestamp
from debenture.models.frequency import CouponPaymentFrequency
from debenture.services.debenture_contract import DebentureContract
from debenture.services.instrument_store import SqlInstrumentStore

console = Console()

FREQUENCY_CHOICES = [f.name.lower() for f in CouponPaymentFrequency]


@contextmanager
def _open_contract(ctx: click.Context) -> Generator[DebentureContract, None, None]:
    """Yield a contract bound to the selected contract id in one transaction.

    Domain errors are printed and turn into exit code 1.
    """
    contract_id = ctx.obj["CONTRACT_ID"]
    try:
        init_db()
        with db_session() as session:
            yield DebentureContract(SqlInstrumentStore(contract_id, session=session))
    except DebentureError as e:
        color = get_error_color(e)
        console.print(f"[{color}]Error: {format_error_message(e)}[/{color}]")
        sys.exit(1)


def _resolve_now(now: str | None) -> int:
    if now is None:
        return int(time.time())
    return parse_timestamp(now)


@click.command()
@click.option(
    "--maturity", required=True, help="Maturity as Unix seconds or date (YYYY-MM-DD)"
)
@click.option("--coupon-rate", required=True, type=int, help="Annual coupon rate in basis points")
@click.option("--par-value", required=True, type=int, help="Face value")
@click.option(
    "--frequency",
    default="annually",
    show_default=True,
    help=f"Coupon payment frequency ({', '.join(FREQUENCY_CHOICES)}) or code 0-5",
)
@click.option("--holder", help="Holder identity as 64 hex characters (random if omitted)")
@click.pass_context
def issue(
    ctx: click.Context,
    maturity: str,
    coupon_rate: int,
    par_value: int,
    frequency: str,
    holder: str | None,
) -> None:
    """Issue the debenture, writing all of its terms."""
    with _open_contract(ctx) as contract:
        holder_id: bytes | str = holder if holder else secrets.token_bytes(HOLDER_ID_BYTES)
        terms = contract.issue(
            maturity=parse_timestamp(maturity),
            coupon_rate=coupon_rate,
            par_value=par_value,
            coupon_payment_frequency=CouponPaymentFrequency.from_name(frequency),
            debenture_holder=holder_id,
        )

        console.print("[green]Debenture issued successfully![/green]")
        console.print(f"Contract: {ctx.obj['CONTRACT_ID']}")
        console.print(f"Maturity: {terms.maturity}")
        console.print(f"Coupon Rate: {terms.coupon_rate}bp")
        console.print(f"Par Value: {terms.par_value}")
        console.print(f"Frequency: {terms.coupon_payment_frequency}")
        console.print(f"Holder: {terms.holder_hex}")


@click.command()
@click.pass_context
def maturity(ctx: click.Context) -> None:
    """Show the maturity timestamp."""
    with _open_contract(ctx) as contract:
        console.print(str(contract.maturity()))


@click.command("par-value")
@click.pass_context
def par_value(ctx: click.Context) -> None:
    """Show the par value."""
    with _open_contract(ctx) as contract:
        console.print(str(contract.par_value()))


@click.command("coupon-payment")
@click.option("--now", help="Timestamp as Unix seconds or date (default: current time)")
@click.pass_context
def coupon_payment(ctx: click.Context, now: str | None) -> None:
    """Show the coupon payment owed at a point in time."""
    with _open_contract(ctx) as contract:
        console.print(str(contract.coupon_payment(_resolve_now(now))))


@click.command()
@click.option("--now", help="Timestamp for the coupon column (default: current time)")
@click.pass_context
def show(ctx: click.Context, now: str | None) -> None:
    """Show all terms of the debenture and the coupon owed now."""
    with _open_contract(ctx) as contract:
        timestamp = _resolve_now(now)
        terms = contract.terms()
        payment = contract.coupon_payment(timestamp)

        table = Table(title=f"Debenture {ctx.obj['CONTRACT_ID']}", show_header=True)
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Maturity", str(terms.maturity))
        table.add_row("Coupon Rate (bp)", str(terms.coupon_rate))
        table.add_row("Par Value", str(terms.par_value))
        table.add_row(
            "Frequency",
            f"{terms.coupon_payment_frequency} ({terms.coupon_payment_frequency.periods_per_year}/yr)",
        )
        table.add_row("Holder", terms.holder_hex)
        table.add_row("Status", "[red]Matured[/red]" if timestamp > terms.maturity else "Accruing")
        table.add_row(f"Coupon @ {timestamp}", str(payment))

        console.print(table)
