"""Operation-specific renderers for ServiceResult.

Renderers are dispatched by ``result.op``. The statement renderer emits
the statement text verbatim, since its layout is a contract; the other
renderers go through a StringIO-backed Rich Console.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from playbill.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from playbill.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult for humans."""
    if result.ok and result.op == "statement":
        return str(result.data.get("text", "")).rstrip("\r\n")

    console = create_console()
    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_table(result: ServiceResult) -> str:
    """Render a statement result as a per-performance Rich table."""
    if not result.ok:
        return render_result(result)

    console = create_console()
    d = result.data
    console.print(Text(f"Statement for {d.get('customer', '')}", style="bill.play"))

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Play", style="bill.play")
    table.add_column("Seats", justify="right")
    table.add_column("Amount", style="bill.amount", justify="right")
    table.add_column("Credits", style="bill.credits", justify="right")
    for line in d.get("lines", []):
        table.add_row(
            Text(str(line["play_name"])),
            str(line["audience"]),
            str(line["amount_formatted"]),
            str(line["credits"]),
        )
    table.add_section()
    table.add_row(
        "Total",
        "",
        str(d.get("total_amount_formatted", "")),
        str(d.get("total_credits", 0)),
    )
    console.print(table)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "statement":
        return str(result.data.get("total_amount_formatted", ""))
    if result.op == "quote":
        return str(result.data.get("amount_formatted", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="bill.ok")
    op = Text(f"  {result.op}", style="bill.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="bill.key")
    console.print(k, Text(str(value), style=style), sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="bill.error")
    op = Text(f"  {result.op}", style="bill.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_quote(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "type", d.get("type", ""), style_for_type(str(d.get("type", ""))))
    _field(console, "audience", d.get("audience", 0))
    _field(console, "amount", d.get("amount_formatted", ""), "bill.amount")
    _field(console, "credits", d.get("credits", 0), "bill.credits")


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "quote": _render_quote,
}
