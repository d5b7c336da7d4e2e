from __future__ import annotations

from collections.abc import Sequence

from prisma_arktype.core.annotations import extract_annotations
from prisma_arktype.core.generators.base import CompileContext, process_models, render_key, render_object, visible_fields
from prisma_arktype.models import CompiledView, Model


def process_select(models: Sequence[Model], context: CompileContext) -> tuple[CompiledView, ...]:
    return process_models(models, stringify_select)


def stringify_select(model: Model) -> str | None:
    model_result = extract_annotations(model.documentation)
    if model_result.hidden:
        return None

    entries = [f'{render_key(model_field.name, True)}: "boolean"' for model_field, _ in visible_fields(model)]
    return render_object(entries, model_result.annotations)
