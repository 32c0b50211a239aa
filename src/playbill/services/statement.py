"""StatementService — invoice statements and single-performance quotes.

Pipeline: LOAD → COMPUTE → RENDER → RESPOND
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from playbill.domain.credits import credits
from playbill.domain.errors import DomainError, InvalidInputError, UnknownPlayTypeError
from playbill.domain.models import Catalog, Invoice, Performance, Play
from playbill.domain.pricing import amount
from playbill.domain.statement import Statement
from playbill.infrastructure.loader import load_catalog, load_invoice
from playbill.services.base import BaseService
from playbill.services.result import ServiceResult

logger = logging.getLogger(__name__)


class StatementService(BaseService):
    """Computes statements and quotes under the configured pricing rules."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def statement(self, invoice: Invoice, catalog: Catalog) -> ServiceResult:
        """Compute and render the statement for *invoice*.

        Unknown plays and unknown play types fail the whole statement.
        """
        op = "statement"
        try:
            computed = self.printer.compute(invoice, catalog)
        except DomainError as exc:
            logger.debug("Statement failed for %s: %s", invoice.customer, exc)
            return ServiceResult.failure(op, exc, customer=invoice.customer)

        warnings = [
            f"No audience for {line.play_name} ({line.play_id})"
            for line in computed.lines
            if line.audience == 0
        ]
        logger.debug(
            "Statement computed for %s: %d lines, total=%d, credits=%d",
            computed.customer,
            len(computed.lines),
            computed.total_amount,
            computed.total_credits,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data=self._statement_data(computed),
            warnings=warnings,
        )

    def statement_from_files(self, invoice_path: Path, plays_path: Path) -> ServiceResult:
        """Load an invoice and catalog from disk, then compute the statement."""
        try:
            invoice = load_invoice(invoice_path)
            catalog = load_catalog(plays_path)
        except InvalidInputError as exc:
            return ServiceResult.failure("statement", exc, path=exc.path)
        return self.statement(invoice, catalog)

    def quote(self, play_type: str, audience: int) -> ServiceResult:
        """Price a single hypothetical performance of a *play_type* play."""
        op = "quote"
        play = Play(name=play_type or "?", type=play_type)
        performance = Performance(play_id=play_type, audience=audience)
        try:
            cents = amount(performance, play, self._settings.pricing)
        except UnknownPlayTypeError as exc:
            return ServiceResult.failure(op, exc, play_type=exc.play_type)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "type": play_type,
                "audience": audience,
                "amount": cents,
                "amount_formatted": self.printer.formatter(cents),
                "credits": credits(performance, play, self._settings.pricing),
            },
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _statement_data(self, computed: Statement) -> dict[str, Any]:
        fmt = self.printer.formatter
        return {
            "customer": computed.customer,
            "lines": [
                {**line.model_dump(), "amount_formatted": fmt(line.amount)}
                for line in computed.lines
            ],
            "total_amount": computed.total_amount,
            "total_amount_formatted": fmt(computed.total_amount),
            "total_credits": computed.total_credits,
            "text": self.printer.render(computed),
        }
