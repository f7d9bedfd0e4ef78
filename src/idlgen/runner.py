"""Compiler process execution and output capture."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from idlgen.errors import EnvironmentFaultError


@dataclass(frozen=True, slots=True)
class ProcessOutcome:
    returncode: int
    stdout: str = ""
    stderr: str = ""


@dataclass(slots=True)
class OutputCapture:
    """Append-only stdout/stderr accumulators shared across compiler runs."""

    stdout_chunks: list[str] = field(default_factory=list)
    stderr_chunks: list[str] = field(default_factory=list)

    def append(self, outcome: ProcessOutcome) -> None:
        if outcome.stdout:
            self.stdout_chunks.append(outcome.stdout)
        if outcome.stderr:
            self.stderr_chunks.append(outcome.stderr)

    @property
    def stdout(self) -> str:
        return "".join(self.stdout_chunks)

    @property
    def stderr(self) -> str:
        return "".join(self.stderr_chunks)


class ProcessRunner(Protocol):
    name: str

    def run(self, command: Sequence[str]) -> ProcessOutcome:
        """Execute *command* to completion and return its exit status and output."""


@dataclass(slots=True)
class SubprocessRunner:
    name: str = "subprocess"

    def run(self, command: Sequence[str]) -> ProcessOutcome:
        try:
            result = subprocess.run(
                list(command),
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise EnvironmentFaultError(
                "Failed to launch the IDL compiler.",
                hint="Check that the compiler executable exists and is executable.",
                context={
                    "runner": self.name,
                    "executable": command[0] if command else "",
                    "reason": str(exc),
                },
            ) from exc
        return ProcessOutcome(
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
        )
