"""Tests for per-performance pricing."""

import pytest

from playbill.domain.errors import ErrorCode, UnknownPlayTypeError
from playbill.domain.models import Performance, Play
from playbill.domain.pricing import amount
from playbill.domain.rules import DEFAULT_RULES, PricingRules

TRAGEDY = Play(name="Hamlet", type="tragedy")
COMEDY = Play(name="As You Like It", type="comedy")


def _perf(audience: int) -> Performance:
    return Performance(play_id="x", audience=audience)


class TestTragedy:
    @pytest.mark.parametrize("audience", [0, 1, 29, 30])
    def test_flat_up_to_threshold(self, audience: int) -> None:
        assert amount(_perf(audience), TRAGEDY) == DEFAULT_RULES.tragedy_base_amount

    def test_linear_above_threshold(self) -> None:
        step = DEFAULT_RULES.tragedy_extra_amount_per_person
        assert amount(_perf(32), TRAGEDY) - amount(_perf(31), TRAGEDY) == step
        assert amount(_perf(31), TRAGEDY) == DEFAULT_RULES.tragedy_base_amount + step

    def test_hamlet_example(self) -> None:
        assert amount(_perf(55), TRAGEDY) == 65000


class TestComedy:
    def test_at_threshold(self) -> None:
        # 30000 + 300 * 20
        assert amount(_perf(20), COMEDY) == 36000

    def test_above_threshold(self) -> None:
        # 30000 + 10000 + 500 * 15 + 300 * 35
        assert amount(_perf(35), COMEDY) == 58000

    @pytest.mark.parametrize("audience", [0, 10, 20, 21, 100])
    def test_always_includes_per_audience_term(self, audience: int) -> None:
        no_per_audience = DEFAULT_RULES.model_copy(update={"comedy_amount_per_audience": 0})
        diff = amount(_perf(audience), COMEDY) - amount(_perf(audience), COMEDY, no_per_audience)
        assert diff == DEFAULT_RULES.comedy_amount_per_audience * audience


class TestUnknownType:
    def test_opera_raises_naming_type(self) -> None:
        with pytest.raises(UnknownPlayTypeError) as exc_info:
            amount(_perf(10), Play(name="Carmen", type="opera"))
        assert exc_info.value.play_type == "opera"
        assert exc_info.value.code is ErrorCode.UNKNOWN_PLAY_TYPE
        assert "opera" in str(exc_info.value)

    def test_type_match_is_case_sensitive(self) -> None:
        with pytest.raises(UnknownPlayTypeError):
            amount(_perf(10), Play(name="Hamlet", type="Tragedy"))


def test_custom_rules() -> None:
    rules = PricingRules(tragedy_base_amount=1, tragedy_extra_amount_per_person=2)
    assert amount(_perf(31), TRAGEDY, rules) == 3
