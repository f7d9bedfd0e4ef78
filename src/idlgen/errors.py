"""Errors raised while configuring and running IDL compiler invocations.

Every error carries a stable code so callers can tell input problems apart
from environment faults.  Compiler rejections are not errors: they come
back from ``Invocation.compile()`` as a non-zero exit status.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable error identifiers used across the invocation surface."""

    INVALID_ARGUMENT = "E_INVALID_ARGUMENT"
    PATH_NOT_IN_SEARCH_PATH = "E_PATH_NOT_IN_SEARCH_PATH"
    ILLEGAL_STATE = "E_ILLEGAL_STATE"
    ENVIRONMENT_FAULT = "E_ENVIRONMENT_FAULT"
    # Reported as a non-zero exit status, never raised.
    COMPILER_FAILURE = "E_COMPILER_FAILURE"


class IdlgenError(Exception):
    """Base error class that carries code, optional hint, and context."""

    code: str
    hint: str | None
    context: Mapping[str, str]

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code.value
        self.hint = hint
        self.context = dict(context or {})

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        if self.context:
            for k, v in self.context.items():
                if v:
                    parts.append(f"  {k}: {v}")
        return "\n".join(parts)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "code": self.code,
            "message": str(self),
            "context": dict(self.context),
        }
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class InvalidArgumentError(IdlgenError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.INVALID_ARGUMENT, hint=hint, context=context)


class PathNotInSearchPathError(IdlgenError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(
            message, code=ErrorCode.PATH_NOT_IN_SEARCH_PATH, hint=hint, context=context
        )


class IllegalStateError(IdlgenError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.ILLEGAL_STATE, hint=hint, context=context)


class EnvironmentFaultError(IdlgenError):
    """Orchestration assumptions were violated; never retried."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.ENVIRONMENT_FAULT, hint=hint, context=context)


__all__ = [
    "EnvironmentFaultError",
    "ErrorCode",
    "IdlgenError",
    "IllegalStateError",
    "InvalidArgumentError",
    "PathNotInSearchPathError",
]
