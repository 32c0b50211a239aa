"""Currency rendering for integer minor units."""

from __future__ import annotations

from decimal import Decimal


def format_usd(cents: int, *, cents_per_dollar: int = 100, symbol: str = "$") -> str:
    """Render *cents* as US-dollar text, e.g. ``3000000 -> "$30,000.00"``.

    Uses Decimal so the major-unit conversion never drifts.
    """
    major = Decimal(abs(cents)) / Decimal(cents_per_dollar)
    sign = "-" if cents < 0 else ""
    return f"{sign}{symbol}{major:,.2f}"
