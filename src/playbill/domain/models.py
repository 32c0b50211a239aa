"""Play, Performance and Invoice value objects.

All models are frozen after construction. A Performance refers to its
Play only by catalog key; resolution happens against a caller-supplied
catalog at statement time.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field

from playbill.domain.types import PlayType


class Play(BaseModel):
    """A play as listed in the catalog."""

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    type: str

    @property
    def kind(self) -> PlayType | None:
        """The recognized pricing category, or None for unknown types."""
        try:
            return PlayType(self.type)
        except ValueError:
            return None


class Performance(BaseModel):
    """A single booked show: which play, and how many attended."""

    model_config = {"frozen": True, "populate_by_name": True}

    play_id: str = Field(alias="playID")
    audience: int = Field(ge=0)


class Invoice(BaseModel):
    """A customer's invoice. Performance order is statement line order."""

    model_config = {"frozen": True}

    customer: str
    performances: tuple[Performance, ...] = ()


Catalog = Mapping[str, Play]
