"""Volume-credit accrual.

INVARIANT: credits never validate the play type. An unknown type still
earns the base term; only pricing rejects it.
"""

from __future__ import annotations

from playbill.domain.models import Performance, Play
from playbill.domain.rules import DEFAULT_RULES, PricingRules
from playbill.domain.types import PlayType


def credits(performance: Performance, play: Play, rules: PricingRules = DEFAULT_RULES) -> int:
    """Return the loyalty credits earned by one performance."""
    audience = performance.audience
    result = max(audience - rules.base_volume_credit_threshold, 0)
    if play.type == PlayType.COMEDY:
        result += audience // rules.comedy_extra_volume_factor
    return result
