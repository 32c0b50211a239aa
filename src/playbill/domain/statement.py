"""StatementPrinter aggregates an invoice into a billing statement.

Single linear pass over the invoice's performances:
RESOLVE play → PRICE → ACCRUE credits → EMIT line → ACCUMULATE total.

Pricing runs before credit accrual for each performance, so a performance
with an unrecognized play type never contributes credits. Any error
abandons the whole statement; there is no partial output.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from functools import partial

from pydantic import BaseModel

from playbill.domain.credits import credits
from playbill.domain.errors import UnknownPlayError
from playbill.domain.models import Catalog, Invoice, Performance, Play
from playbill.domain.money import format_usd
from playbill.domain.pricing import amount
from playbill.domain.rules import DEFAULT_RULES, PricingRules

CurrencyFormatter = Callable[[int], str]


class StatementLine(BaseModel):
    """One priced performance."""

    model_config = {"frozen": True}

    play_id: str
    play_name: str
    audience: int
    amount: int
    credits: int


class Statement(BaseModel):
    """Structured statement, before text rendering."""

    model_config = {"frozen": True}

    customer: str
    lines: tuple[StatementLine, ...] = ()
    total_amount: int = 0
    total_credits: int = 0


def resolve_play(performance: Performance, catalog: Catalog) -> Play:
    """Look up the play a performance refers to.

    Raises:
        UnknownPlayError: If ``performance.play_id`` is not in *catalog*.
    """
    play = catalog.get(performance.play_id)
    if play is None:
        raise UnknownPlayError(performance.play_id)
    return play


class StatementPrinter:
    """Compute and render statements under one set of pricing rules.

    Holds no per-invoice state; one instance may serve any number of
    invoices and catalogs.
    """

    def __init__(
        self,
        rules: PricingRules = DEFAULT_RULES,
        formatter: CurrencyFormatter | None = None,
    ) -> None:
        self.rules = rules
        self.formatter = formatter or partial(
            format_usd, cents_per_dollar=rules.cents_per_dollar
        )

    def compute(self, invoice: Invoice, catalog: Catalog) -> Statement:
        """Price every performance and total amounts and credits."""
        lines: list[StatementLine] = []
        total_amount = 0
        total_credits = 0

        for performance in invoice.performances:
            play = resolve_play(performance, catalog)
            this_amount = amount(performance, play, self.rules)
            this_credits = credits(performance, play, self.rules)
            lines.append(
                StatementLine(
                    play_id=performance.play_id,
                    play_name=play.name,
                    audience=performance.audience,
                    amount=this_amount,
                    credits=this_credits,
                )
            )
            total_amount += this_amount
            total_credits += this_credits

        return Statement(
            customer=invoice.customer,
            lines=tuple(lines),
            total_amount=total_amount,
            total_credits=total_credits,
        )

    def render(self, statement: Statement) -> str:
        """Lay out a computed statement as text, one line per entry."""
        fmt = self.formatter
        out = [f"Statement for {statement.customer}"]
        for line in statement.lines:
            out.append(f"  {line.play_name}: {fmt(line.amount)} ({line.audience} seats)")
        out.append(f"Amount owed is {fmt(statement.total_amount)}")
        out.append(f"You earned {statement.total_credits} credits")
        return "".join(f"{text}{os.linesep}" for text in out)

    def statement(self, invoice: Invoice, catalog: Catalog) -> str:
        """Return the formatted statement for *invoice* against *catalog*.

        Raises:
            UnknownPlayError: A performance references a missing play.
            UnknownPlayTypeError: A referenced play has no pricing rule.
        """
        return self.render(self.compute(invoice, catalog))


def statement(invoice: Invoice, catalog: Catalog, rules: PricingRules = DEFAULT_RULES) -> str:
    """Render *invoice* with a default-configured :class:`StatementPrinter`."""
    return StatementPrinter(rules).statement(invoice, catalog)
