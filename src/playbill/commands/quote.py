"""Command: price a single performance."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from playbill.commands._base import PlaybillCommand

if TYPE_CHECKING:
    from playbill.commands._context import AppContext


@click.command(
    cls=PlaybillCommand,
    examples="""\
  playbill quote tragedy 55
  playbill quote comedy 35
  playbill --json quote comedy 20""",
)
@click.argument("play_type")
@click.argument("audience", type=click.IntRange(min=0))
@click.pass_obj
def quote(app: AppContext, play_type: str, audience: int) -> None:
    """Quote price and volume credits for AUDIENCE seats of a PLAY_TYPE play."""
    from playbill.services.statement import StatementService

    app.emit(StatementService(app.settings).quote(play_type, audience))
