"""ServiceResult and ServiceError — the envelope every DateService method returns.

A successful result carries the operation's payload in ``data``; its
``value`` key is the primary answer (a date string, a count, a boolean).
A failed result carries a :class:`ServiceError` built from the domain
exception, with the exception's text/pattern/locale context in ``detail``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from datectl.domain.errors import DateError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_date_error(cls, exc: DateError) -> ServiceError:
        """Map *exc* to its error code, keeping non-empty context attributes."""
        detail = {k: v for k, v in vars(exc).items() if isinstance(v, (str, int)) and v != ""}
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Outcome of one date operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the domain operation (e.g. ``"parse_date"``).
        data: Operation payload on success, always with a ``value`` key.
        warnings: Non-fatal issues, such as a day clamped to the month's end.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def value(self) -> Any:
        """The operation's primary answer, or None on failure."""
        return self.data.get("value")
