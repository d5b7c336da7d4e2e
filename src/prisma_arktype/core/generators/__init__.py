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

__all__ = [
    "CompileContext",
    "process_create",
    "process_include",
    "process_order_by",
    "process_plain",
    "process_relations",
    "process_relations_create",
    "process_relations_update",
    "process_select",
    "process_update",
    "process_where",
    "process_where_unique",
]
