"""Command: print the billing statement for an invoice."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from playbill.commands._base import PlaybillCommand

if TYPE_CHECKING:
    from playbill.commands._context import AppContext


@click.command(
    cls=PlaybillCommand,
    examples="""\
  playbill statement invoice.json plays.json
  playbill statement invoice.yaml plays.yaml --table
  playbill --json statement invoice.json plays.json
  playbill -c pricing.toml statement invoice.json plays.json""",
)
@click.argument("invoice", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("plays", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--table", is_flag=True, help="Show a per-performance breakdown table.")
@click.pass_obj
def statement(app: AppContext, invoice: Path, plays: Path, table: bool) -> None:
    """Print the statement for INVOICE priced against the PLAYS catalog."""
    from playbill.services.statement import StatementService

    app.emit(StatementService(app.settings).statement_from_files(invoice, plays), table=table)
