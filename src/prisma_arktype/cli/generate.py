import asyncio
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from prisma_arktype.config import DEFAULT_OUTPUT, GeneratorConfig, resolve_config
from prisma_arktype.core.annotations import InvalidAnnotationError
from prisma_arktype.core.generate import GeneratedSchemas
from prisma_arktype.core.generate import generate as _generate
from prisma_arktype.loader import load_datamodel
from prisma_arktype.watcher.watchfiles_adapter import SchemaWatcher
from prisma_arktype.writer import write_files

console = Console()


def _render_summary(schemas: GeneratedSchemas, written: int, config: GeneratorConfig) -> None:
    table = Table(show_lines=False)
    table.add_column("view")
    table.add_column("schemas", justify="right")
    table.add_row("Enum", str(len(schemas.enums)))
    for suffix, rows in schemas.views:
        table.add_row(suffix, str(len(rows)))
    console.print(table)
    console.print(f"[green]Wrote[/green] {written} file(s) to {config.output}")


def run_once(schema: Path, config: GeneratorConfig) -> GeneratedSchemas:
    datamodel = load_datamodel(schema)
    schemas = _generate(datamodel, config)
    written = write_files(schemas, config)
    _render_summary(schemas, len(written), config)
    return schemas


def _watch(schema: Path, config: GeneratorConfig) -> None:
    async def _regenerate(path: Path) -> None:
        try:
            await asyncio.to_thread(run_once, path, config)
        except (FileNotFoundError, ValueError) as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")

    async def _run() -> None:
        watcher = SchemaWatcher(schema, _regenerate)
        await watcher.start()
        try:
            await watcher.wait()
        finally:
            await watcher.stop()

    console.print(f"[green]Watching[/green] {schema} (Ctrl+C to stop)")
    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        console.print("Stopped.")


def generate(
    schema: Annotated[Path, typer.Argument(help="Path to a DMMF JSON document.")],
    output: Annotated[Path, typer.Option("--output", "-o", help="Directory for generated modules.")] = Path(
        DEFAULT_OUTPUT
    ),
    import_name: Annotated[str, typer.Option(help="Module to import ArkType's `type` from.")] = "arktype",
    ignore_key: Annotated[
        list[str] | None, typer.Option(help="Field name to drop from input schemas (repeatable).")
    ] = None,
    watch: Annotated[bool, typer.Option(help="Regenerate whenever the schema file changes.")] = False,
) -> None:
    """Compile a datamodel into ArkType validators."""
    options: dict[str, Any] = {"arktypeImportDependencyName": import_name}
    if ignore_key is not None:
        options["ignoredKeysOnInputModels"] = ignore_key
    config = resolve_config(options, output=output)

    try:
        run_once(schema, config)
    except InvalidAnnotationError as exc:
        console.print(f"[red]Invalid annotation:[/red] {escape(exc.line.strip())}")
        raise typer.Exit(code=1) from None
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    if watch:
        _watch(schema, config)
