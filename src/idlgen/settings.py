"""Settings shared by the builder, working-directory allocator and relocator."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path

DEFAULT_WORK_DIR_PREFIX = "thrift-work-dir_"
DEFAULT_GENERATED_DIR_PREFIX = "gen-"
DEFAULT_SCHEMA_SUFFIX = ".thrift"


@dataclass(frozen=True, slots=True)
class CompilerSettings:
    temp_root: Path | None = None
    work_dir_prefix: str = DEFAULT_WORK_DIR_PREFIX
    generated_dir_prefix: str = DEFAULT_GENERATED_DIR_PREFIX
    schema_suffix: str = DEFAULT_SCHEMA_SUFFIX

    def resolved_temp_root(self) -> Path:
        """Return the scratch root, falling back to the platform temp dir."""
        if self.temp_root is not None:
            return Path(self.temp_root)
        return Path(tempfile.gettempdir())
