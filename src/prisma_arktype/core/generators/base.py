"""Helpers shared by the view generators."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field

from prisma_arktype.config import GeneratorConfig
from prisma_arktype.core.annotations import (
    Annotation,
    ExtractionResult,
    extract_annotations,
    generate_arktype_options,
)
from prisma_arktype.core.enums import EnumRegistry
from prisma_arktype.core.primitives import is_primitive_prisma_field_type, stringify_primitive_type
from prisma_arktype.core.wrappers import array_of, is_expression, is_string_literal, or_null, quote
from prisma_arktype.models import CompiledView, Model, ModelField

logger = logging.getLogger(__name__)

ID_TYPE_INTEGER = '"number.integer"'
ID_TYPE_STRING = '"string"'


@dataclass(frozen=True)
class CompileContext:
    models: tuple[Model, ...]
    enums: EnumRegistry = field(default_factory=EnumRegistry)
    config: GeneratorConfig = field(default_factory=GeneratorConfig)

    def find_model(self, name: str) -> Model | None:
        for model in self.models:
            if model.name == name:
                return model
        return None

    def id_type_for(self, model_name: str) -> str | None:
        """Literal for the id of ``model_name``; None when the model is unknown."""
        related = self.find_model(model_name)
        if related is None:
            return None
        for candidate in related.fields:
            if candidate.is_id:
                return ID_TYPE_INTEGER if candidate.type in ("Int", "BigInt") else ID_TYPE_STRING
        return ID_TYPE_STRING


def visible_fields(model: Model) -> Iterator[tuple[ModelField, ExtractionResult]]:
    """Yield fields of ``model`` that carry no hide directive, with their annotations."""
    for model_field in model.fields:
        result = extract_annotations(model_field.documentation)
        if result.hidden:
            continue
        yield model_field, result


def overwrite_literal(value: str) -> str:
    """String literals and validator expressions pass through; bare definitions are quoted."""
    if is_string_literal(value) or is_expression(value):
        return value
    return quote(value)


def resolve_field_type(
    model_field: ModelField,
    annotations: ExtractionResult,
    enums: EnumRegistry,
) -> str | None:
    """Quoted definition for a scalar or enum field, or None when it cannot be typed."""
    overwrite = annotations.type_overwrite
    if overwrite is not None:
        return overwrite_literal(overwrite)
    if is_primitive_prisma_field_type(model_field.type):
        return stringify_primitive_type(model_field.type, annotations.annotations)
    if model_field.kind == "enum":
        compiled = enums.lookup(model_field.type)
        if compiled is None:
            logger.warning("Enum %s referenced by field %s is not defined; skipping", model_field.type, model_field.name)
            return None
        return quote(compiled.union)
    return None


def wrap_field_type(model_field: ModelField, field_type: str, *, nullable: bool = True) -> tuple[str, bool]:
    """Apply list and null wrapping; returns the type and whether the key is optional."""
    optional = False
    if model_field.is_list:
        field_type = array_of(field_type)
    if nullable and not model_field.is_required:
        field_type = or_null(field_type)
        optional = True
    return field_type, optional


def render_key(name: str, optional: bool) -> str:
    return f'"{name}?"' if optional else f'"{name}"'


def render_object(entries: Sequence[str], model_annotations: Sequence[Annotation]) -> str:
    options = generate_arktype_options(model_annotations)
    return "{\n  " + ",\n  ".join(entries) + "\n}" + options


def process_models(
    models: Sequence[Model],
    stringify: Callable[[Model], str | None],
) -> tuple[CompiledView, ...]:
    """Run ``stringify`` over every model, keeping the ones that produced output."""
    processed: list[CompiledView] = []
    for model in models:
        expression = stringify(model)
        if expression is not None:
            processed.append(CompiledView(name=model.name, expression=expression))
    return tuple(processed)
