"""ServiceResult and ServiceError: the envelope handed to interfaces.

The rule engine raises; the CLI adapter catches engine and store errors
and wraps every outcome in a ServiceResult so output formatting and
exit codes are decided in one place.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from voucherctl.domain.errors import VoucherError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_voucher_error(cls, exc: VoucherError) -> ServiceError:
        """Build an error payload whose code is the upper-cased error kind."""
        return cls(code=exc.kind.upper(), message=exc.message)


class ServiceResult(BaseModel):
    """Outcome of one voucher operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"apply_voucher"``).
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
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
