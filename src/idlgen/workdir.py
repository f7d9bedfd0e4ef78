"""Private scratch directory allocation for compiler output."""

from __future__ import annotations

import uuid
from pathlib import Path

from idlgen.errors import EnvironmentFaultError
from idlgen.settings import CompilerSettings


def allocate_working_directory(settings: CompilerSettings) -> Path:
    """Create a new, uniquely named working directory under the temp root.

    The directory must not exist beforehand; a collision is fatal.
    """
    root = settings.resolved_temp_root()
    working_dir = root / f"{settings.work_dir_prefix}{uuid.uuid4()}"
    try:
        working_dir.mkdir()
    except FileExistsError as exc:
        raise EnvironmentFaultError(
            "Working directory already exists.",
            hint="Working directories are never reused; retry to allocate a fresh one.",
            context={"operation": "allocate_working_directory", "path": str(working_dir)},
        ) from exc
    except OSError as exc:
        raise EnvironmentFaultError(
            "Failed to create working directory.",
            hint="Check that the temporary root exists and is writable.",
            context={
                "operation": "allocate_working_directory",
                "path": str(working_dir),
                "reason": str(exc),
            },
        ) from exc
    return working_dir
