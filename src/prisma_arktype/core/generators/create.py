from __future__ import annotations

from collections.abc import Sequence

from prisma_arktype.core.generators.base import CompileContext, process_models
from prisma_arktype.core.generators.plain import stringify_plain_input_create
from prisma_arktype.models import CompiledView, Model


def process_create(models: Sequence[Model], context: CompileContext) -> tuple[CompiledView, ...]:
    return process_models(models, lambda model: stringify_plain_input_create(model, context))
