"""An immutable, invokable configuration of the IDL compiler."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from idlgen.command import build_compiler_command, render_command_line
from idlgen.errors import (
    ErrorCode,
    IllegalStateError,
    InvalidArgumentError,
    PathNotInSearchPathError,
)
from idlgen.observability import StructuredLogger
from idlgen.paths import is_in_search_path
from idlgen.relocate import move_generated_files
from idlgen.runner import OutputCapture, ProcessRunner, SubprocessRunner
from idlgen.settings import CompilerSettings
from idlgen.workdir import allocate_working_directory


@dataclass(frozen=True, slots=True, eq=False)
class Invocation:
    """One configured run of the compiler over a set of schema files.

    Each schema file is compiled into a private working directory; once every
    file compiles, the generated tree is relocated to ``destination_dir`` and
    the working directory is deleted.  Instances are normally produced by
    :class:`idlgen.builder.InvocationBuilder`.
    """

    executable: str
    generator: str
    import_paths: tuple[Path, ...]
    schema_files: tuple[Path, ...]
    destination_dir: Path
    working_dir: Path
    settings: CompilerSettings = field(default_factory=CompilerSettings)
    runner: ProcessRunner = field(default_factory=SubprocessRunner)
    capture: OutputCapture = field(default_factory=OutputCapture)
    logger: StructuredLogger = field(default_factory=StructuredLogger)

    @classmethod
    def create(
        cls,
        *,
        executable: str,
        generator: str,
        import_paths: Iterable[Path],
        schema_files: Iterable[Path],
        destination_dir: Path,
        settings: CompilerSettings | None = None,
        runner: ProcessRunner | None = None,
        logger: StructuredLogger | None = None,
    ) -> Invocation:
        """Validate inputs, allocate a fresh working directory and build the instance."""
        resolved_settings = settings or CompilerSettings()
        files = tuple(sorted(dict.fromkeys(Path(f) for f in schema_files), key=str))
        if not executable:
            raise InvalidArgumentError(
                "Compiler executable must be a non-empty string.",
                context={"operation": "create_invocation"},
            )
        if not generator:
            raise InvalidArgumentError(
                "Generator option must be a non-empty string.",
                hint="Set a generator such as 'java' or 'py:new_style'.",
                context={"operation": "create_invocation"},
            )
        if not files:
            raise IllegalStateError(
                "At least one schema file is required.",
                context={"operation": "create_invocation"},
            )
        if not Path(destination_dir).is_dir():
            raise InvalidArgumentError(
                "Destination must be an existing directory.",
                context={"operation": "create_invocation", "path": str(destination_dir)},
            )
        paths = tuple(dict.fromkeys(Path(p) for p in import_paths))
        for import_path in paths:
            if not import_path.is_dir():
                raise InvalidArgumentError(
                    "Import path must be an existing directory.",
                    context={"operation": "create_invocation", "path": str(import_path)},
                )
        for schema_file in files:
            if not is_in_search_path(schema_file, paths):
                raise PathNotInSearchPathError(
                    "Schema file is not beneath any import path.",
                    context={
                        "operation": "create_invocation",
                        "path": str(schema_file),
                        "import_paths": ", ".join(str(p) for p in paths),
                    },
                )

        active_logger = logger if logger is not None else StructuredLogger()
        working_dir = allocate_working_directory(resolved_settings)
        active_logger.log(
            operation="create_invocation",
            phase="allocate",
            schema_file=None,
            message="Allocated working directory.",
            extra={"working_dir": str(working_dir)},
        )
        return cls(
            executable=executable,
            generator=generator,
            import_paths=paths,
            schema_files=files,
            destination_dir=Path(destination_dir),
            working_dir=working_dir,
            settings=resolved_settings,
            runner=runner if runner is not None else SubprocessRunner(),
            logger=active_logger,
        )

    def compiler_arguments(self, schema_file: Path) -> tuple[str, ...]:
        return build_compiler_command(
            import_paths=self.import_paths,
            generator=self.generator,
            working_dir=self.working_dir,
            schema_file=schema_file,
        )

    def compile(self) -> int:
        """Run the compiler once per schema file, then relocate the output.

        Returns the exit status of the first failing compiler run, leaving the
        working directory in place, or 0 once relocation has completed.
        Relocation problems raise :class:`idlgen.errors.EnvironmentFaultError`.
        """
        for schema_file in self.schema_files:
            arguments = self.compiler_arguments(schema_file)
            outcome = self.runner.run((self.executable, *arguments))
            self.capture.append(outcome)
            self.logger.log(
                operation="compile",
                phase="compile",
                schema_file=str(schema_file),
                message="Compiler finished.",
                extra={"returncode": outcome.returncode, "runner": self.runner.name},
            )
            if outcome.returncode != 0:
                self.logger.log(
                    operation="compile",
                    phase="compile",
                    schema_file=str(schema_file),
                    message="Compiler rejected schema file; skipping relocation.",
                    level="error",
                    extra={
                        "code": ErrorCode.COMPILER_FAILURE.value,
                        "returncode": outcome.returncode,
                        "command": render_command_line(self.executable, arguments),
                        "working_dir": str(self.working_dir),
                    },
                )
                return outcome.returncode

        written = move_generated_files(
            self.working_dir,
            self.destination_dir,
            prefix=self.settings.generated_dir_prefix,
        )
        self.logger.log(
            operation="compile",
            phase="relocate",
            schema_file=None,
            message="Relocated generated files.",
            extra={"destination_dir": str(self.destination_dir), "files": len(written)},
        )
        return 0

    @property
    def output(self) -> str:
        return self.capture.stdout

    @property
    def error(self) -> str:
        return self.capture.stderr

    def command_lines(self) -> tuple[str, ...]:
        return tuple(
            render_command_line(self.executable, self.compiler_arguments(schema_file))
            for schema_file in self.schema_files
        )

    def __str__(self) -> str:
        return "\n".join(self.command_lines())
