"""Output mode dispatch for ServiceResult.

Modes, in precedence order: JSON (--json), quiet (-q), table (--table,
statements only), and the default human rendering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from playbill.output.renderers import render_quiet, render_result, render_table

if TYPE_CHECKING:
    from playbill.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Rendering flags derived from the CLI."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    table: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    if settings.table and result.op == "statement":
        return render_table(result)
    return render_result(result, verbose=settings.verbose)
