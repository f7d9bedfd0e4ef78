"""Public package entrypoint for the IDL compiler orchestration SDK."""

from .builder import InvocationBuilder
from .errors import (
    EnvironmentFaultError,
    ErrorCode,
    IdlgenError,
    IllegalStateError,
    InvalidArgumentError,
    PathNotInSearchPathError,
)
from .invocation import Invocation
from .observability import StructuredLogger
from .runner import OutputCapture, ProcessOutcome, ProcessRunner, SubprocessRunner
from .settings import CompilerSettings

__all__ = [
    "CompilerSettings",
    "EnvironmentFaultError",
    "ErrorCode",
    "IdlgenError",
    "IllegalStateError",
    "InvalidArgumentError",
    "Invocation",
    "InvocationBuilder",
    "OutputCapture",
    "PathNotInSearchPathError",
    "ProcessOutcome",
    "ProcessRunner",
    "StructuredLogger",
    "SubprocessRunner",
]
