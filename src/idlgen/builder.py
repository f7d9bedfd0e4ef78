"""Fail-fast assembly of :class:`idlgen.invocation.Invocation` instances."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from idlgen.errors import (
    IllegalStateError,
    InvalidArgumentError,
    PathNotInSearchPathError,
)
from idlgen.invocation import Invocation
from idlgen.observability import StructuredLogger
from idlgen.paths import is_in_search_path
from idlgen.runner import ProcessRunner
from idlgen.settings import CompilerSettings


class InvocationBuilder:
    """Accumulates and validates compiler inputs before building an invocation.

    Every ``add_*`` call validates immediately.  Import-search directories
    must be added before the schema files they contain.  The builder produces
    exactly one invocation; it rejects further use after :meth:`build`.
    """

    def __init__(
        self,
        executable: str,
        destination_dir: str | Path,
        *,
        settings: CompilerSettings | None = None,
        runner: ProcessRunner | None = None,
        logger: StructuredLogger | None = None,
    ) -> None:
        if not executable:
            raise InvalidArgumentError(
                "Compiler executable must be a non-empty string.",
                context={"operation": "builder"},
            )
        if destination_dir is None or not Path(destination_dir).is_dir():
            raise InvalidArgumentError(
                "Destination must be an existing directory.",
                hint="Create the output directory before configuring the compiler.",
                context={"operation": "builder", "path": str(destination_dir)},
            )
        self.executable = executable
        self.destination_dir = Path(destination_dir)
        self.settings = settings or CompilerSettings()
        self._runner = runner
        self._logger = logger
        self._import_paths: dict[Path, None] = {}
        self._schema_files: dict[Path, None] = {}
        self._generator: str | None = None
        self._built = False

    @property
    def import_paths(self) -> tuple[Path, ...]:
        return tuple(self._import_paths)

    @property
    def schema_files(self) -> tuple[Path, ...]:
        return tuple(self._schema_files)

    @property
    def generator(self) -> str | None:
        return self._generator

    def add_import_path(self, import_path: str | Path) -> InvocationBuilder:
        self._ensure_not_built("add_import_path")
        if import_path is None:
            raise InvalidArgumentError(
                "Import path must not be None.",
                context={"operation": "add_import_path"},
            )
        path = Path(import_path)
        if not path.is_dir():
            raise InvalidArgumentError(
                "Import path must be an existing directory.",
                context={"operation": "add_import_path", "path": str(path)},
            )
        self._import_paths[path] = None
        return self

    def add_import_paths(self, import_paths: Iterable[str | Path]) -> InvocationBuilder:
        for import_path in import_paths:
            self.add_import_path(import_path)
        return self

    def add_schema_file(self, schema_file: str | Path) -> InvocationBuilder:
        self._ensure_not_built("add_schema_file")
        if schema_file is None:
            raise InvalidArgumentError(
                "Schema file must not be None.",
                context={"operation": "add_schema_file"},
            )
        path = Path(schema_file)
        if not path.is_file():
            raise InvalidArgumentError(
                "Schema file must be an existing regular file.",
                context={"operation": "add_schema_file", "path": str(path)},
            )
        if not path.name.endswith(self.settings.schema_suffix):
            raise InvalidArgumentError(
                f"Schema file must have the '{self.settings.schema_suffix}' extension.",
                context={"operation": "add_schema_file", "path": str(path)},
            )
        if not is_in_search_path(path, self._import_paths):
            raise PathNotInSearchPathError(
                "Schema file is not beneath any registered import path.",
                hint="Add the containing directory with add_import_path() first.",
                context={
                    "operation": "add_schema_file",
                    "path": str(path),
                    "import_paths": ", ".join(str(p) for p in self._import_paths),
                },
            )
        self._schema_files[path] = None
        return self

    def add_schema_files(self, schema_files: Iterable[str | Path]) -> InvocationBuilder:
        for schema_file in schema_files:
            self.add_schema_file(schema_file)
        return self

    def set_generator(self, generator: str) -> InvocationBuilder:
        self._ensure_not_built("set_generator")
        if generator is None:
            raise InvalidArgumentError(
                "Generator option must not be None.",
                context={"operation": "set_generator"},
            )
        self._generator = generator
        return self

    def build(self) -> Invocation:
        self._ensure_not_built("build")
        if not self._schema_files:
            raise IllegalStateError(
                "No schema files have been added.",
                hint="Call add_schema_file() before build().",
                context={"operation": "build"},
            )
        if not self._generator:
            raise InvalidArgumentError(
                "Generator option has not been set.",
                hint="Call set_generator() before build().",
                context={"operation": "build"},
            )
        invocation = Invocation.create(
            executable=self.executable,
            generator=self._generator,
            import_paths=tuple(self._import_paths),
            schema_files=tuple(self._schema_files),
            destination_dir=self.destination_dir,
            settings=self.settings,
            runner=self._runner,
            logger=self._logger,
        )
        self._built = True
        return invocation

    def _ensure_not_built(self, operation: str) -> None:
        if self._built:
            raise IllegalStateError(
                "Builder has already produced an invocation.",
                hint="Create a new InvocationBuilder for another compiler run.",
                context={"operation": operation},
            )
