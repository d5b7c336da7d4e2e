"""Render a compiled table into TypeScript modules and write them to disk."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from prisma_arktype.config import GeneratorConfig
from prisma_arktype.core.generate import VIEWS, GeneratedSchemas

logger = logging.getLogger(__name__)

FILE_SUFFIX = ".ts"
BARREL_NAME = "index"


def _import_line(config: GeneratorConfig) -> str:
    return f'import {{ type }} from "{config.arktype_import_dependency_name}";\n\n'


def _combined_model(name: str, has_relations: bool, header: str) -> str:
    if has_relations:
        return (
            f"{header}"
            f'import {{ {name}Plain }} from "./{name}Plain";\n'
            f'import {{ {name}Relations }} from "./{name}Relations";\n\n'
            f"export const {name} = type(() => {name}Plain.and({name}Relations));\n"
        )
    return f'{header}import {{ {name}Plain }} from "./{name}Plain";\n\nexport const {name} = {name}Plain;\n'


def render_files(schemas: GeneratedSchemas, config: GeneratorConfig) -> dict[str, str]:
    """Map each export name to its module source, in write order."""
    header = _import_line(config)
    files: dict[str, str] = {}

    for enum in schemas.enums:
        files[enum.name] = f"{header}export const {enum.name} = {enum.expression};\n"

    related = {row.name for row in schemas.view("Relations")}
    for suffix in VIEWS:
        for row in schemas.view(suffix):
            export_name = f"{row.name}{suffix}"
            files[export_name] = f"{header}export const {export_name} = type({row.expression});\n"
        if suffix == "Plain":
            for row in schemas.view("Plain"):
                files[row.name] = _combined_model(row.name, row.name in related, header)

    return files


def render_barrel(names: list[str]) -> str:
    return "".join(f'export * from "./{name}";\n' for name in names)


def write_files(schemas: GeneratedSchemas, config: GeneratorConfig) -> list[Path]:
    """Replace the output directory with freshly rendered modules; returns written paths."""
    output = Path(config.output)
    if output.exists():
        shutil.rmtree(output)
    output.mkdir(parents=True, exist_ok=True)

    files = render_files(schemas, config)
    written: list[Path] = []
    for name, content in files.items():
        path = output / f"{name}{FILE_SUFFIX}"
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", path)
        written.append(path)

    barrel = output / f"{BARREL_NAME}{FILE_SUFFIX}"
    barrel.write_text(render_barrel(list(files)), encoding="utf-8")
    written.append(barrel)

    logger.info("Wrote %d file(s) to %s", len(written), output)
    return written
