"""ServiceResult and ServiceError — the contract between services and CLI.

INVARIANT: Service methods return ServiceResult; they never raise for
expected failures. Error codes reuse ``BeltError.code`` where one exists.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``exit_code`` is the process status the CLI exits with; commands that
    wrap a child process pass the child's status through.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)
    exit_code: int = 1


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (e.g. ``"resolve_home"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as a degenerate HOME.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls, op: str, code: str, message: str, **detail: Any
    ) -> ServiceResult:
        """Shorthand for an ``ok=False`` result."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
