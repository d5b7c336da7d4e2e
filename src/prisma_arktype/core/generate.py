from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from pydantic import BaseModel, ConfigDict

from prisma_arktype.config import GeneratorConfig
from prisma_arktype.core.enums import EnumRegistry
from prisma_arktype.core.generators.base import CompileContext
from prisma_arktype.core.generators.create import process_create
from prisma_arktype.core.generators.include import process_include
from prisma_arktype.core.generators.order_by import process_order_by
from prisma_arktype.core.generators.plain import process_plain
from prisma_arktype.core.generators.relations import (
    process_relations,
    process_relations_create,
    process_relations_update,
)
from prisma_arktype.core.generators.select import process_select
from prisma_arktype.core.generators.update import process_update
from prisma_arktype.core.generators.where import process_where, process_where_unique
from prisma_arktype.models import CompiledEnum, CompiledView, Datamodel, Model

logger = logging.getLogger(__name__)

ViewProcessor = Callable[[Sequence[Model], CompileContext], tuple[CompiledView, ...]]

# Export-name suffix per view, in compilation order.
VIEWS: dict[str, ViewProcessor] = {
    "Plain": process_plain,
    "Where": process_where,
    "WhereUnique": process_where_unique,
    "Create": process_create,
    "Update": process_update,
    "Select": process_select,
    "Include": process_include,
    "OrderBy": process_order_by,
    "Relations": process_relations,
    "RelationsCreate": process_relations_create,
    "RelationsUpdate": process_relations_update,
}


class GeneratedSchemas(BaseModel):
    """Frozen output table: compiled enums plus ``(suffix, rows)`` pairs in compilation order."""

    model_config = ConfigDict(frozen=True)

    enums: tuple[CompiledEnum, ...] = ()
    views: tuple[tuple[str, tuple[CompiledView, ...]], ...] = ()

    def view(self, suffix: str) -> tuple[CompiledView, ...]:
        if suffix not in VIEWS:
            raise ValueError(f"Unknown view '{suffix}'. Supported: {list(VIEWS)}")
        for name, rows in self.views:
            if name == suffix:
                return rows
        return ()

    def get(self, model_name: str, suffix: str) -> str | None:
        for row in self.view(suffix):
            if row.name == model_name:
                return row.expression
        return None

    def rows(self) -> list[tuple[str, str, str]]:
        """Flatten to ``(model, view, expression)`` triples in compilation order."""
        return [(row.name, suffix, row.expression) for suffix, rows in self.views for row in rows]


def generate(datamodel: Datamodel, config: GeneratorConfig | None = None) -> GeneratedSchemas:
    """Compile every view of every model in ``datamodel``.

    Raises ``InvalidAnnotationError`` on the first malformed directive.
    """
    registry = EnumRegistry.from_enums(datamodel.enums)
    context = CompileContext(
        models=tuple(datamodel.models),
        enums=registry,
        config=config or GeneratorConfig(),
    )

    views: list[tuple[str, tuple[CompiledView, ...]]] = []
    for suffix, processor in VIEWS.items():
        rows = processor(context.models, context)
        logger.info("Compiled %d %s schema(s)", len(rows), suffix)
        views.append((suffix, rows))

    return GeneratedSchemas(enums=registry.compiled, views=tuple(views))
