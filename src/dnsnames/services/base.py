"""BaseService — shared foundation for dnsnames services.

Services are stateless apart from an optional default zone origin, which
operations fall back to when the caller gives none. Every failure is
returned as a ServiceResult value, never raised.
"""

from __future__ import annotations

from typing import Any

import structlog

from dnsnames.domain.errors import CompositeNameError, DomainNameError, SegmentError
from dnsnames.domain.names import FullyQualifiedDomainName
from dnsnames.services.result import ServiceError, ServiceResult

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------

INVALID_NAME = "INVALID_NAME"
INVALID_PATTERN = "INVALID_PATTERN"
INVALID_JOIN = "INVALID_JOIN"
NO_ORIGIN = "NO_ORIGIN"
SUFFIX_MISMATCH = "SUFFIX_MISMATCH"


def error_detail(exc: DomainNameError) -> dict[str, Any]:
    """Flatten a domain error into JSON-friendly detail fields."""
    detail: dict[str, Any] = {"error_type": type(exc).__name__}
    if isinstance(exc, SegmentError):
        detail["kind"] = str(exc.kind)
    elif isinstance(exc, CompositeNameError):
        detail["kind"] = str(exc.kind)
        if exc.segment_error is not None:
            detail["segment_index"] = exc.index
            detail["segment_kind"] = str(exc.segment_error.kind)
    return detail


class BaseService:
    """Base for service classes.

    Usage::

        class NameService(BaseService):
            def inspect(self, text: str) -> ServiceResult:
                ...
    """

    def __init__(self, origin: FullyQualifiedDomainName | None = None) -> None:
        self._origin = origin

    @property
    def origin(self) -> FullyQualifiedDomainName | None:
        """Default zone origin used when an operation is given none."""
        return self._origin

    @staticmethod
    def _failure(
        op: str,
        code: str,
        message: str,
        *,
        exc: DomainNameError | None = None,
        **detail: Any,
    ) -> ServiceResult:
        """Build an ``ok=False`` result, logging it at debug level."""
        payload = dict(detail)
        if exc is not None:
            payload.update(error_detail(exc))
        logger.debug("operation_failed", op=op, code=code, message=message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=payload),
        )
