"""Shared pytest fixtures and test helpers for playbill tests."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from playbill.domain.models import Invoice, Play

PLAYS_DATA = {
    "hamlet": {"name": "Hamlet", "type": "tragedy"},
    "as-like": {"name": "As You Like It", "type": "comedy"},
    "othello": {"name": "Othello", "type": "tragedy"},
}

INVOICE_DATA = {
    "customer": "BigCo",
    "performances": [
        {"playID": "hamlet", "audience": 55},
        {"playID": "as-like", "audience": 35},
        {"playID": "othello", "audience": 40},
    ],
}

EXPECTED_LINES = [
    "Statement for BigCo",
    "  Hamlet: $650.00 (55 seats)",
    "  As You Like It: $580.00 (35 seats)",
    "  Othello: $500.00 (40 seats)",
    "Amount owed is $1,730.00",
    "You earned 47 credits",
]


@pytest.fixture(autouse=True)
def _no_config_discovery(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a stray playbill.toml or PLAYBILL_* env var from leaking into tests."""
    for key in [k for k in os.environ if k.startswith("PLAYBILL_")]:
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog() -> dict[str, Play]:
    return {play_id: Play(**entry) for play_id, entry in PLAYS_DATA.items()}


@pytest.fixture
def invoice() -> Invoice:
    return Invoice.model_validate(INVOICE_DATA)


@pytest.fixture
def invoice_file(tmp_path: Path) -> Path:
    path = tmp_path / "invoice.json"
    path.write_text(json.dumps(INVOICE_DATA), encoding="utf-8")
    return path


@pytest.fixture
def plays_file(tmp_path: Path) -> Path:
    path = tmp_path / "plays.json"
    path.write_text(json.dumps(PLAYS_DATA), encoding="utf-8")
    return path
