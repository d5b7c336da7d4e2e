"""Relation views.

Plain and input views never inline related models (the model graph may be
cyclic). These views cover relation fields on their own: ``Relations`` types
them with an opaque marker, the input variants as connect/disconnect payloads
keyed by the related model's id.
"""

from __future__ import annotations

from collections.abc import Sequence

from prisma_arktype.core.annotations import extract_annotations
from prisma_arktype.core.generators.base import (
    CompileContext,
    process_models,
    render_key,
    render_object,
    visible_fields,
)
from prisma_arktype.models import CompiledView, Model, ModelField


def process_relations(models: Sequence[Model], context: CompileContext) -> tuple[CompiledView, ...]:
    return process_models(models, stringify_relations)


def process_relations_create(models: Sequence[Model], context: CompileContext) -> tuple[CompiledView, ...]:
    return process_models(models, lambda model: stringify_relations_input_create(model, context))


def process_relations_update(models: Sequence[Model], context: CompileContext) -> tuple[CompiledView, ...]:
    return process_models(models, lambda model: stringify_relations_input_update(model, context))


def stringify_relations(model: Model) -> str | None:
    model_result = extract_annotations(model.documentation)
    if model_result.hidden:
        return None

    entries: list[str] = []
    for model_field, _ in visible_fields(model):
        if model_field.kind != "object":
            continue

        optional = False
        if model_field.is_list:
            field_type = '"unknown[]"'
        elif not model_field.is_required:
            field_type = '"unknown | null"'
            optional = True
        else:
            field_type = '"unknown"'

        entries.append(f"{render_key(model_field.name, optional)}: {field_type}")

    if not entries:
        return None
    return render_object(entries, model_result.annotations)


def _connect(id_type: str) -> str:
    return f'{{ "id": {id_type} }}'


def _update_payload(model_field: ModelField, id_type: str) -> str:
    if model_field.is_list:
        return f'{{ "connect"?: {_connect(id_type)}[], "disconnect"?: {_connect(id_type)}[] }}'
    if model_field.is_required:
        return f'{{ "connect": {_connect(id_type)} }}'
    return f'{{ "connect"?: {_connect(id_type)}, "disconnect"?: "boolean" }}'


def _stringify_relations_input(model: Model, context: CompileContext, is_update: bool) -> str | None:
    model_result = extract_annotations(model.documentation)
    if model_result.hidden:
        return None

    entries: list[str] = []
    for model_field, result in visible_fields(model):
        if result.hidden_input:
            continue
        if is_update and result.hidden_input_update:
            continue
        if not is_update and result.hidden_input_create:
            continue
        if model_field.kind != "object":
            continue

        id_type = context.id_type_for(model_field.type)
        if id_type is None:
            continue

        if is_update:
            payload = _update_payload(model_field, id_type)
        else:
            payload = f'{{ "connect": {_connect(id_type)} }}'
        entries.append(f"{render_key(model_field.name, True)}: {payload}")

    if not entries:
        return None
    return render_object(entries, model_result.annotations)


def stringify_relations_input_create(model: Model, context: CompileContext) -> str | None:
    return _stringify_relations_input(model, context, is_update=False)


def stringify_relations_input_update(model: Model, context: CompileContext) -> str | None:
    return _stringify_relations_input(model, context, is_update=True)
