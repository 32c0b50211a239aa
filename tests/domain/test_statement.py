"""Tests for StatementPrinter: golden output, totals and failure modes."""

import os

import pytest

from playbill.domain.errors import UnknownPlayError, UnknownPlayTypeError
from playbill.domain.models import Invoice, Performance, Play
from playbill.domain.pricing import amount
from playbill.domain.rules import PricingRules
from playbill.domain.statement import StatementPrinter, statement


def _text(*lines: str) -> str:
    return "".join(line + os.linesep for line in lines)


class TestGoldenOutput:
    def test_bigco(self, invoice: Invoice, catalog: dict[str, Play]) -> None:
        assert statement(invoice, catalog) == _text(
            "Statement for BigCo",
            "  Hamlet: $650.00 (55 seats)",
            "  As You Like It: $580.00 (35 seats)",
            "  Othello: $500.00 (40 seats)",
            "Amount owed is $1,730.00",
            "You earned 47 credits",
        )

    def test_empty_invoice(self, catalog: dict[str, Play]) -> None:
        assert statement(Invoice(customer="Nobody"), catalog) == _text(
            "Statement for Nobody",
            "Amount owed is $0.00",
            "You earned 0 credits",
        )

    def test_hamlet_example(self) -> None:
        invoice = Invoice(
            customer="Solo",
            performances=(Performance(play_id="hamlet", audience=55),),
        )
        text = statement(invoice, {"hamlet": Play(name="Hamlet", type="tragedy")})
        assert "  Hamlet: $650.00 (55 seats)" in text
        assert "You earned 25 credits" in text

    def test_line_order_follows_invoice(self, catalog: dict[str, Play]) -> None:
        invoice = Invoice(
            customer="BigCo",
            performances=(
                Performance(play_id="othello", audience=1),
                Performance(play_id="hamlet", audience=1),
            ),
        )
        lines = statement(invoice, catalog).splitlines()
        assert lines[1].startswith("  Othello:")
        assert lines[2].startswith("  Hamlet:")


class TestCompute:
    def test_total_is_sum_of_lines(self, invoice: Invoice, catalog: dict[str, Play]) -> None:
        computed = StatementPrinter().compute(invoice, catalog)
        independent = sum(
            amount(p, catalog[p.play_id]) for p in invoice.performances
        )
        assert computed.total_amount == sum(line.amount for line in computed.lines)
        assert computed.total_amount == independent == 173000
        assert computed.total_credits == 47

    def test_custom_rules_and_formatter(self, invoice: Invoice, catalog: dict[str, Play]) -> None:
        printer = StatementPrinter(
            PricingRules(tragedy_base_amount=0, tragedy_extra_amount_per_person=0),
            formatter=lambda cents: f"{cents}c",
        )
        text = printer.statement(invoice, catalog)
        assert "  Hamlet: 0c (55 seats)" in text
        assert "Amount owed is 58000c" in text


class TestFailures:
    def test_unknown_play_id(self, catalog: dict[str, Play]) -> None:
        invoice = Invoice(
            customer="BigCo",
            performances=(Performance(play_id="macbeth", audience=10),),
        )
        with pytest.raises(UnknownPlayError) as exc_info:
            statement(invoice, catalog)
        assert exc_info.value.play_id == "macbeth"

    def test_unknown_play_type_abandons_statement(self, catalog: dict[str, Play]) -> None:
        plays = {**catalog, "carmen": Play(name="Carmen", type="opera")}
        invoice = Invoice(
            customer="BigCo",
            performances=(
                Performance(play_id="hamlet", audience=55),
                Performance(play_id="carmen", audience=40),
            ),
        )
        with pytest.raises(UnknownPlayTypeError) as exc_info:
            statement(invoice, plays)
        assert exc_info.value.play_type == "opera"
