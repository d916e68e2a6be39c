"""The result envelope returned by every service method.

Commands never see exceptions from the domain layer; they receive a
``ServiceResult`` and hand it to ``AppContext.emit``. ``--json`` prints the
envelope as-is, so its field names are part of the CLI's output format.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    ``detail`` carries the rejected field, value and expected range for
    ``INVALID_VALUE`` errors.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False when ``error`` is set.
        op: Operation name, e.g. ``"parse_date"`` or ``"date_today"``.
        data: The described value on success.
        warnings: Things worth telling the user about a successful result,
            such as a clamped day of month.
        error: Set on failure only.
        meta: The clock and zone behind operations that read the current
            time; None for everything else.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls,
        op: str,
        data: dict[str, Any],
        *,
        warnings: list[str] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [], meta=meta)

    @classmethod
    def failure(
        cls, op: str, code: str, message: str, detail: dict[str, Any] | None = None
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
