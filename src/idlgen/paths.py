"""Import-search path containment checks."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def find_search_root(schema_file: Path, import_paths: Iterable[Path]) -> Path | None:
    """Return the import-search directory that contains *schema_file*, if any.

    Walks the file's ancestor chain, starting at its containing directory,
    until a registered directory matches or the filesystem root is reached.
    Paths are compared in absolute, resolved form.
    """
    roots = {Path(path).resolve(): Path(path) for path in import_paths}
    directory = Path(schema_file).resolve().parent
    for candidate in (directory, *directory.parents):
        if candidate in roots:
            return roots[candidate]
    return None


def is_in_search_path(schema_file: Path, import_paths: Iterable[Path]) -> bool:
    return find_search_root(schema_file, import_paths) is not None
