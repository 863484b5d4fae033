"""The value every NameService operation returns.

Services do not raise on bad input. A parse or algebra failure becomes
``ServiceResult(ok=False, error=ServiceError(...))`` with a stable code from
:mod:`dnsnames.services.base`; the CLI renders or serializes it as is.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed.

    Attributes:
        code: Stable machine-readable code, e.g. ``"SUFFIX_MISMATCH"``.
        message: The domain error's message.
        detail: The offending input and the flattened error kind/index.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation.

    ``data`` is only meaningful when ``ok`` is True and ``error`` only when it
    is False. ``warnings`` lists inputs that were skipped without failing
    the operation, such as unparseable names given to ``match``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
