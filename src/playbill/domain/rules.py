"""Pricing and volume-credit parameters.

All monetary values are integer cents. The defaults are the reference
rule set; ``[pricing]`` in playbill.toml may override any of them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PricingRules(BaseModel):
    """Tunable constants for the pricing engine and credit accrual."""

    model_config = {"frozen": True}

    # --- tragedy ---
    tragedy_base_amount: int = 40000
    tragedy_audience_threshold: int = 30
    tragedy_extra_amount_per_person: int = 1000

    # --- comedy ---
    comedy_base_amount: int = 30000
    comedy_audience_threshold: int = 20
    comedy_over_base_capacity_amount: int = 10000
    comedy_over_base_capacity_per_person: int = 500
    comedy_amount_per_audience: int = 300

    # --- volume credits ---
    base_volume_credit_threshold: int = 30
    comedy_extra_volume_factor: int = Field(default=5, gt=0)

    cents_per_dollar: int = Field(default=100, gt=0)


DEFAULT_RULES = PricingRules()
