from __future__ import annotations

from collections.abc import Sequence

from prisma_arktype.core.generators.base import CompileContext, process_models
from prisma_arktype.core.generators.plain import stringify_plain_input_update
from prisma_arktype.models import CompiledView, Model


def process_update(models: Sequence[Model], context: CompileContext) -> tuple[CompiledView, ...]:
    """Update inputs: the create field set with input-update exclusions, every key optional."""
    return process_models(models, lambda model: stringify_plain_input_update(model, context))
