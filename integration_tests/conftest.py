"""Shared helpers for integration tests."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

IDL_DIR = Path(__file__).parent / "idl"


def snapshot_tree(root: Path) -> dict[str, str]:
    """Capture every file under *root* as ``{relative_path: content}``."""
    tree: dict[str, str] = {}
    for path in sorted(root.rglob("*")):
        if path.is_file():
            try:
                tree[str(path.relative_to(root))] = path.read_text(encoding="utf-8")
            except UnicodeDecodeError:
                tree[str(path.relative_to(root))] = "<binary>"
    return tree


@pytest.fixture
def thrift_executable() -> str:
    executable = shutil.which("thrift")
    if executable is None:
        pytest.skip("thrift compiler is not installed")
    return executable
