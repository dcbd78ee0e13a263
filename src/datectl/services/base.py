"""BaseService — abstract foundation for datectl services.

Every service receives the frozen :class:`DatectlSettings` and a clock
at construction time. Domain exceptions raised inside an operation are
converted to a failed :class:`ServiceResult` by :meth:`BaseService._run`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from datectl.domain.errors import DateError
from datectl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from datectl.config.settings import DatectlSettings
    from datectl.domain.clock import Clock

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class DateService(BaseService):
            def add_days(self, value: str, days: int) -> ServiceResult:
                return self._run("add_days", lambda: {...})
    """

    def __init__(self, settings: DatectlSettings, *, clock: Clock | None = None) -> None:
        self._settings = settings
        self._clock = clock if clock is not None else settings.make_clock()

    def _run(
        self,
        op: str,
        fn: Callable[[], dict[str, Any]],
        *,
        warnings: list[str] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Execute *fn* and wrap its payload (or its DateError) in a ServiceResult.

        *warnings* is the list *fn* appends non-fatal issues to; whatever it
        holds when *fn* returns or raises travels on the result.

        Only :class:`DateError` is converted; anything else is a bug and
        propagates. Log records emitted while *fn* runs carry ``op``.
        """
        if warnings is None:
            warnings = []
        with structlog.contextvars.bound_contextvars(op=op):
            try:
                data = fn()
            except DateError as exc:
                logger.debug("%s failed: %s", op, exc)
                return ServiceResult(
                    ok=False,
                    op=op,
                    warnings=list(warnings),
                    error=ServiceError.from_date_error(exc),
                    meta=meta,
                )
            for warning in warnings:
                logger.debug("%s warning: %s", op, warning)
        return ServiceResult(ok=True, op=op, data=data, warnings=list(warnings), meta=meta)
