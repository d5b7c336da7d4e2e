import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from prisma_arktype.cli.generate import generate
from prisma_arktype.cli.generator import generator
from prisma_arktype.cli.inspect import inspect

app = typer.Typer(
    name="prisma-arktype",
    help="Generate ArkType validators from a Prisma datamodel.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _root(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log compiler progress.")] = False,
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


app.command("generate")(generate)
app.command("inspect")(inspect)
app.command("generator")(generator)


def main() -> None:
    app()
