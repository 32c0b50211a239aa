"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, playbill.toml only contains
overrides. An empty file (or none at all) yields the reference rule set.
"""

from __future__ import annotations

from pydantic import BaseModel

from playbill.domain.rules import PricingRules

# --- playbill.toml sections ---


class PricingConfig(PricingRules):
    """[pricing] section."""


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    currency_symbol: str = "$"
