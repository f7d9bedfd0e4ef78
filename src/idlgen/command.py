"""Compiler argument vector construction."""

from __future__ import annotations

import shlex
from collections.abc import Iterable, Sequence
from pathlib import Path


def build_compiler_command(
    *,
    import_paths: Iterable[Path],
    generator: str,
    working_dir: Path,
    schema_file: Path,
) -> tuple[str, ...]:
    """Return the compiler arguments for one schema file, executable excluded.

    The output target is always the working directory, so several schema
    files can compile into one scratch area before a single relocation pass.
    """
    command: list[str] = []
    for import_path in import_paths:
        command.extend(["-I", str(import_path)])
    command.extend(["-o", str(working_dir)])
    command.extend(["--gen", generator])
    command.append(str(schema_file))
    return tuple(command)


def render_command_line(executable: str, arguments: Sequence[str]) -> str:
    return shlex.join([executable, *arguments])
