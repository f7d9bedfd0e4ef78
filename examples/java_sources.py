"""Generate Java sources for every schema under ``idl/`` into ``src/main/gen-java``."""

from pathlib import Path

from idlgen import InvocationBuilder


def generate_java_sources(
    idl_dir: Path = Path("idl"),
    output: Path = Path("src/main/gen-java"),
) -> int:
    output.mkdir(parents=True, exist_ok=True)
    invocation = (
        InvocationBuilder("thrift", output)
        .set_generator("java:private-members,hashcode")
        .add_import_path(idl_dir)
        .add_schema_files(sorted(idl_dir.rglob("*.thrift")))
        .build()
    )
    result = invocation.compile()
    if result != 0:
        print(f"thrift failed output: {invocation.output}")
        print(f"thrift failed error: {invocation.error}")
        print(f"thrift command: [{invocation}]")
    return result


if __name__ == "__main__":
    raise SystemExit(generate_java_sources())
