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
from prisma_arktype.models import CompiledView, Model, ModelField


def process_plain(models: Sequence[Model], context: CompileContext) -> tuple[CompiledView, ...]:
    return process_models(models, lambda model: stringify_plain(model, context))


def is_foreign_key(model: Model, model_field: ModelField) -> bool:
    """True for scalar ``...Id`` fields that back a relation of ``model``."""
    if not model_field.name.endswith("Id"):
        return False
    if model_field.relation_name:
        return True
    return any(
        model_field.name in other.relation_from_fields for other in model.fields if other.kind == "object"
    )


def stringify_plain(
    model: Model,
    context: CompileContext,
    is_input_create: bool = False,
    is_input_update: bool = False,
) -> str | None:
    model_result = extract_annotations(model.documentation)
    if model_result.hidden:
        return None

    is_input = is_input_create or is_input_update
    entries: list[str] = []

    for model_field, result in visible_fields(model):
        if is_input_create and (result.hidden_input or result.hidden_input_create):
            continue
        if is_input_update and (result.hidden_input or result.hidden_input_update):
            continue

        # Relations are never inlined; see the Relations views.
        if model_field.kind == "object":
            continue

        if is_input:
            if model_field.name in context.config.ignored_keys_on_input_models:
                continue
            if is_foreign_key(model, model_field):
                continue

        field_type = resolve_field_type(model_field, result, context.enums)
        if field_type is None:
            continue

        field_type, optional = wrap_field_type(model_field, field_type)
        if model_field.has_default_value or is_input_update:
            optional = True

        entries.append(f"{render_key(model_field.name, optional)}: {field_type}")

    return render_object(entries, model_result.annotations)


def stringify_plain_input_create(model: Model, context: CompileContext) -> str | None:
    return stringify_plain(model, context, is_input_create=True)


def stringify_plain_input_update(model: Model, context: CompileContext) -> str | None:
    return stringify_plain(model, context, is_input_update=True)
