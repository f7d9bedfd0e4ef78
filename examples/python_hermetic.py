"""Compile Python bindings with an explicit scratch root and a JSON-lines log."""

from pathlib import Path

from idlgen import CompilerSettings, InvocationBuilder, StructuredLogger


def build_python_bindings(build_dir: Path = Path("build")) -> int:
    scratch = build_dir / "scratch"
    scratch.mkdir(parents=True, exist_ok=True)
    output = build_dir / "gen-src"
    output.mkdir(parents=True, exist_ok=True)

    logger = StructuredLogger()
    invocation = (
        InvocationBuilder(
            "/usr/local/bin/thrift",
            output,
            settings=CompilerSettings(temp_root=scratch),
            logger=logger,
        )
        .set_generator("py:new_style")
        .add_import_paths([Path("idl"), Path("third_party/idl")])
        .add_schema_file(Path("idl/tutorial.thrift"))
        .build()
    )
    try:
        return invocation.compile()
    finally:
        logger.to_json_lines(build_dir / "idlgen.jsonl")


if __name__ == "__main__":
    raise SystemExit(build_python_bindings())
