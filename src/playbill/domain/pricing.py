"""Per-performance pricing rules.

Dispatch is keyed by :class:`PlayType`. A play whose type has no entry
in the table is an error; there is no default price.
"""

from __future__ import annotations

from collections.abc import Callable

from playbill.domain.errors import UnknownPlayTypeError
from playbill.domain.models import Performance, Play
from playbill.domain.rules import DEFAULT_RULES, PricingRules
from playbill.domain.types import PlayType


def tragedy_amount(audience: int, rules: PricingRules) -> int:
    """Flat base, plus a per-head surcharge above the threshold."""
    result = rules.tragedy_base_amount
    if audience > rules.tragedy_audience_threshold:
        result += (
            audience - rules.tragedy_audience_threshold
        ) * rules.tragedy_extra_amount_per_person
    return result


def comedy_amount(audience: int, rules: PricingRules) -> int:
    """Flat base, an over-capacity surcharge, and a per-audience charge."""
    result = rules.comedy_base_amount
    if audience > rules.comedy_audience_threshold:
        result += (
            rules.comedy_over_base_capacity_amount
            + (audience - rules.comedy_audience_threshold)
            * rules.comedy_over_base_capacity_per_person
        )
    result += rules.comedy_amount_per_audience * audience
    return result


_AMOUNT_RULES: dict[PlayType, Callable[[int, PricingRules], int]] = {
    PlayType.TRAGEDY: tragedy_amount,
    PlayType.COMEDY: comedy_amount,
}


def amount(performance: Performance, play: Play, rules: PricingRules = DEFAULT_RULES) -> int:
    """Return the amount owed for *performance* of *play*, in cents.

    Raises:
        UnknownPlayTypeError: If ``play.type`` is not a recognized category.
    """
    kind = play.kind
    if kind is None or kind not in _AMOUNT_RULES:
        raise UnknownPlayTypeError(play.type)
    return _AMOUNT_RULES[kind](performance.audience, rules)
