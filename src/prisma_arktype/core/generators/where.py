from __future__ import annotations

from collections.abc import Sequence

from prisma_arktype.core.annotations import extract_annotations
from prisma_arktype.core.generators.base import (
    CompileContext,
    process_models,
    render_key,
    render_object,
    resolve_field_type,
    visible_fields,
    wrap_field_type,
)
from prisma_arktype.models import CompiledView, Model


def process_where(models: Sequence[Model], context: CompileContext) -> tuple[CompiledView, ...]:
    return process_models(models, lambda model: stringify_where(model, context))


def process_where_unique(models: Sequence[Model], context: CompileContext) -> tuple[CompiledView, ...]:
    return process_models(models, lambda model: stringify_where_unique(model, context))


def _where_entries(model: Model, context: CompileContext, unique_only: bool) -> list[str]:
    entries: list[str] = []
    for model_field, result in visible_fields(model):
        if model_field.kind == "object":
            continue
        if unique_only and not (model_field.is_id or model_field.is_unique):
            continue

        field_type = resolve_field_type(model_field, result, context.enums)
        if field_type is None:
            continue
        field_type, _ = wrap_field_type(model_field, field_type)

        # Every filter key is optional.
        entries.append(f"{render_key(model_field.name, True)}: {field_type}")
    return entries


def stringify_where(model: Model, context: CompileContext) -> str | None:
    model_result = extract_annotations(model.documentation)
    if model_result.hidden:
        return None
    return render_object(_where_entries(model, context, unique_only=False), model_result.annotations)


def stringify_where_unique(model: Model, context: CompileContext) -> str | None:
    model_result = extract_annotations(model.documentation)
    if model_result.hidden:
        return None
    entries = _where_entries(model, context, unique_only=True)
    if not entries:
        return None
    return render_object(entries, model_result.annotations)
