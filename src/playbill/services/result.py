"""ServiceResult and ServiceError — the contract between services and CLI.

Domain errors never cross this boundary as exceptions; services convert
them into a failed ServiceResult carrying the error code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from playbill.domain.errors import DomainError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, exc: DomainError, **detail: Any) -> ServiceError:
        return cls(code=exc.code.value, message=exc.message, detail=detail)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"statement"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, exc: DomainError, **detail: Any) -> ServiceResult:
        """Build a failed result from a domain error."""
        return cls(ok=False, op=op, error=ServiceError.from_domain(exc, **detail))
