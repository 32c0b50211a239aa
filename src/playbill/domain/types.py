"""Play type classification.

Only the recognized pricing categories are enumerated here. A Play may
carry any type string; unrecognized ones are rejected lazily by the
pricing engine, not at construction time.
"""

from __future__ import annotations

from enum import StrEnum


class PlayType(StrEnum):
    """Pricing categories understood by the rule engine."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"
