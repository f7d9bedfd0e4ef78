"""Shared test fixtures."""

from __future__ import annotations

import stat
import sys
import textwrap
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from idlgen import CompilerSettings, InvocationBuilder, ProcessOutcome

# Mimics the thrift output layout: <out>/gen-<lang>/<namespace path>/<Type>.java
FAKE_COMPILER_SOURCE = textwrap.dedent("""\
    import re
    import sys
    from pathlib import Path

    args = sys.argv[1:]
    out_dir = None
    generator = None
    index = 0
    while index < len(args) - 1:
        flag, value = args[index], args[index + 1]
        if flag == "-o":
            out_dir = value
        elif flag == "--gen":
            generator = value
        elif flag != "-I":
            break
        index += 2

    schema = Path(args[-1])
    if not schema.is_file():
        print(f"[FAILURE:{schema}] Could not open input file", file=sys.stderr)
        sys.exit(1)

    language = generator.split(":")[0]
    text = schema.read_text(encoding="utf-8")
    match = re.search(r"namespace\\s+" + re.escape(language) + r"\\s+([\\w.]+)", text)
    package = match.group(1).split(".") if match else []
    target = Path(out_dir, "gen-" + language, *package)
    target.mkdir(parents=True, exist_ok=True)
    for kind, name in re.findall(r"^(struct|service|exception|enum)\\s+(\\w+)", text, re.M):
        (target / f"{name}.java").write_text(
            f"// {kind} {name} generated with {generator}\\n", encoding="utf-8"
        )
    print(f"compiled {schema.name}")
""")

SHARED_THRIFT = textwrap.dedent("""\
    namespace java shared

    struct SharedStruct {
      1: i32 key
      2: string value
    }

    service SharedService {
      SharedStruct getStruct(1: i32 key)
    }
""")

TUTORIAL_THRIFT = textwrap.dedent("""\
    include "shared.thrift"

    namespace java tutorial

    enum Operation {
      ADD = 1,
      SUBTRACT = 2
    }

    struct Work {
      1: i32 num1 = 0,
      2: i32 num2,
      3: Operation op
    }

    exception InvalidOperation {
      1: i32 whatOp,
      2: string why
    }

    service Calculator extends shared.SharedService {
      i32 calculate(1: i32 logid, 2: Work w) throws (1: InvalidOperation ouch)
    }
""")


@dataclass(slots=True)
class ScriptedRunner:
    """In-process runner that records commands and replays scripted outcomes."""

    outcomes: dict[str, ProcessOutcome] = field(default_factory=dict)
    on_run: Callable[[Sequence[str]], None] | None = None
    commands: list[tuple[str, ...]] = field(default_factory=list)
    name: str = "scripted"

    def run(self, command: Sequence[str]) -> ProcessOutcome:
        self.commands.append(tuple(command))
        if self.on_run is not None:
            self.on_run(command)
        return self.outcomes.get(Path(command[-1]).name, ProcessOutcome(returncode=0))


@pytest.fixture
def fake_compiler(tmp_path: Path) -> str:
    """Write an executable stand-in for the thrift compiler and return its path."""
    script = tmp_path / "bin" / "fake-thrift"
    script.parent.mkdir()
    script.write_text(f"#!{sys.executable}\n{FAKE_COMPILER_SOURCE}", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(script)


@pytest.fixture
def idl_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "idl"
    directory.mkdir()
    (directory / "shared.thrift").write_text(SHARED_THRIFT, encoding="utf-8")
    (directory / "tutorial.thrift").write_text(TUTORIAL_THRIFT, encoding="utf-8")
    return directory


@pytest.fixture
def destination(tmp_path: Path) -> Path:
    directory = tmp_path / "generated-sources"
    directory.mkdir()
    return directory


@pytest.fixture
def settings(tmp_path: Path) -> CompilerSettings:
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    return CompilerSettings(temp_root=scratch)


@pytest.fixture
def builder(
    fake_compiler: str,
    destination: Path,
    settings: CompilerSettings,
    idl_dir: Path,
) -> InvocationBuilder:
    return InvocationBuilder(fake_compiler, destination, settings=settings).set_generator(
        "java"
    ).add_import_path(idl_dir)
