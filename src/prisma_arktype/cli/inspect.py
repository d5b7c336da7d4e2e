from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from prisma_arktype.core.annotations import InvalidAnnotationError
from prisma_arktype.core.generate import VIEWS, generate
from prisma_arktype.loader import load_datamodel

console = Console()


def inspect(
    schema: Annotated[Path, typer.Argument(help="Path to a DMMF JSON document.")],
    model: Annotated[str, typer.Option("--model", "-m", help="Model to show.")],
    view: Annotated[str | None, typer.Option(help=f"One of: {', '.join(VIEWS)}.")] = None,
) -> None:
    """Print compiled expressions for one model without writing files."""
    if view is not None and view not in VIEWS:
        console.print(f"[red]Unknown view[/red] '{view}'. Supported: {', '.join(VIEWS)}")
        raise typer.Exit(code=1)

    try:
        schemas = generate(load_datamodel(schema))
    except InvalidAnnotationError as exc:
        console.print(f"[red]Invalid annotation:[/red] {escape(exc.line.strip())}")
        raise typer.Exit(code=1) from None
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    suffixes = [view] if view else list(VIEWS)
    found = False
    for suffix in suffixes:
        expression = schemas.get(model, suffix)
        if expression is None:
            continue
        found = True
        console.rule(f"{model}{suffix}")
        console.print(expression, markup=False, highlight=False)

    if not found:
        console.print(f"(no schemas for {model})")
