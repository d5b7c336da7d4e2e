from __future__ import annotations

from collections.abc import Sequence

from prisma_arktype.core.annotations import extract_annotations
from prisma_arktype.core.generators.base import CompileContext, process_models, render_key, render_object, visible_fields
from prisma_arktype.models import CompiledView, Model

SORT_ORDER = "\"'asc' | 'desc'\""


def process_order_by(models: Sequence[Model], context: CompileContext) -> tuple[CompiledView, ...]:
    return process_models(models, stringify_order_by)


def stringify_order_by(model: Model) -> str | None:
    model_result = extract_annotations(model.documentation)
    if model_result.hidden:
        return None

    entries = [
        f"{render_key(model_field.name, True)}: {SORT_ORDER}"
        for model_field, _ in visible_fields(model)
        if model_field.kind in ("scalar", "enum")
    ]
    return render_object(entries, model_result.annotations)
