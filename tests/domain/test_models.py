"""Tests for Play, Performance and Invoice value objects."""

import pytest
from pydantic import ValidationError

from playbill.domain.models import Invoice, Performance, Play
from playbill.domain.types import PlayType


class TestPlay:
    def test_known_kind(self) -> None:
        assert Play(name="Hamlet", type="tragedy").kind is PlayType.TRAGEDY
        assert Play(name="As You Like It", type="comedy").kind is PlayType.COMEDY

    def test_unknown_type_accepted_at_construction(self) -> None:
        play = Play(name="Carmen", type="opera")
        assert play.type == "opera"
        assert play.kind is None

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Play(name="", type="tragedy")

    def test_frozen(self) -> None:
        play = Play(name="Hamlet", type="tragedy")
        with pytest.raises(ValidationError):
            play.name = "Othello"  # type: ignore[misc]


class TestPerformance:
    def test_accepts_play_id_alias(self) -> None:
        performance = Performance.model_validate({"playID": "hamlet", "audience": 55})
        assert performance.play_id == "hamlet"
        assert performance.audience == 55

    def test_accepts_field_name(self) -> None:
        assert Performance(play_id="hamlet", audience=0).audience == 0

    def test_rejects_negative_audience(self) -> None:
        with pytest.raises(ValidationError):
            Performance(play_id="hamlet", audience=-1)


class TestInvoice:
    def test_defaults_to_no_performances(self) -> None:
        invoice = Invoice(customer="BigCo")
        assert invoice.performances == ()

    def test_preserves_order(self) -> None:
        invoice = Invoice.model_validate(
            {
                "customer": "BigCo",
                "performances": [
                    {"playID": "b", "audience": 1},
                    {"playID": "a", "audience": 2},
                ],
            }
        )
        assert [p.play_id for p in invoice.performances] == ["b", "a"]
