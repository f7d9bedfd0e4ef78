"""Relocation of compiler output from the working directory to the destination.

The compiler writes everything for one invocation beneath a single
``gen-*`` directory.  That directory is stripped during relocation, so
``<work>/gen-java/tutorial/Calculator.java`` lands at
``<destination>/tutorial/Calculator.java``.  Existing files in the
destination are overwritten, which allows targeting a source tree that is
already under version control.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from idlgen.errors import EnvironmentFaultError
from idlgen.settings import DEFAULT_GENERATED_DIR_PREFIX


def locate_generated_root(
    working_dir: Path,
    *,
    prefix: str = DEFAULT_GENERATED_DIR_PREFIX,
) -> Path:
    """Return the single generated root directory beneath *working_dir*."""
    try:
        matches = [
            candidate
            for candidate in sorted(working_dir.iterdir())
            if candidate.is_dir() and candidate.name.startswith(prefix)
        ]
    except OSError as exc:
        raise EnvironmentFaultError(
            "Failed to list the working directory.",
            hint="Working directories are deleted after a successful compile.",
            context={
                "operation": "locate_generated_root",
                "working_dir": str(working_dir),
                "reason": str(exc),
            },
        ) from exc
    if not matches:
        raise EnvironmentFaultError(
            "Failed to find the compiler-generated parent directory.",
            hint=f"The compiler is expected to create one '{prefix}*' directory.",
            context={"operation": "locate_generated_root", "working_dir": str(working_dir)},
        )
    if len(matches) > 1:
        raise EnvironmentFaultError(
            f"Encountered more than one directory matching pattern [{prefix}*].",
            hint="Compile with a single generator per invocation.",
            context={
                "operation": "locate_generated_root",
                "working_dir": str(working_dir),
                "matches": ", ".join(match.name for match in matches),
            },
        )
    return matches[0]


def move_generated_files(
    working_dir: Path,
    destination_dir: Path,
    *,
    prefix: str = DEFAULT_GENERATED_DIR_PREFIX,
) -> tuple[Path, ...]:
    """Copy the generated tree into *destination_dir* and delete *working_dir*.

    Returns the destination paths written.  On a copy failure the files
    already copied stay in place and *working_dir* is kept for diagnosis.
    """
    generated_root = locate_generated_root(working_dir, prefix=prefix)
    written: list[Path] = []
    try:
        for source in sorted(generated_root.rglob("*")):
            if source.is_dir():
                continue
            target = destination_dir / source.relative_to(generated_root)
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)
            written.append(target)
    except OSError as exc:
        raise EnvironmentFaultError(
            "Failed to move file(s) to output directory.",
            hint="Check permissions on the destination directory.",
            context={
                "operation": "move_generated_files",
                "working_dir": str(working_dir),
                "destination_dir": str(destination_dir),
                "copied": str(len(written)),
                "reason": str(exc),
            },
        ) from exc

    try:
        shutil.rmtree(working_dir)
    except OSError as exc:
        raise EnvironmentFaultError(
            "Failed to delete working directory after relocation.",
            context={
                "operation": "move_generated_files",
                "working_dir": str(working_dir),
                "reason": str(exc),
            },
        ) from exc
    return tuple(written)
