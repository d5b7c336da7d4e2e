"""Prisma scalar types to ArkType string definitions.

Field-level ``options`` directives refine strings by length and numbers by
value, rendered with ArkType's range syntax (``"3 <= string <= 20"``).
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from prisma_arktype.core.annotations import Annotation, InvalidAnnotationError, option_values
from prisma_arktype.core.wrappers import quote

_PRIMITIVE_TYPES: dict[str, str] = {
    "String": "string",
    "Int": "number.integer",
    "BigInt": "bigint",
    "Float": "number",
    "Decimal": "number",
    "Boolean": "boolean",
    "DateTime": "Date",
    "Bytes": "TypedArray.Uint8",
    "Json": "unknown",
}

_NUMERIC_TYPES = frozenset({"Int", "BigInt", "Float", "Decimal"})

_LENGTH_KEYS = frozenset({"minLength", "maxLength"})
_VALUE_KEYS = frozenset({"minimum", "maximum", "exclusiveMinimum", "exclusiveMaximum"})

_NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?$")


def is_primitive_prisma_field_type(type_name: str) -> bool:
    return type_name in _PRIMITIVE_TYPES


def _parse_refinements(annotations: Sequence[Annotation]) -> dict[str, str]:
    refinements: dict[str, str] = {}
    for payload in option_values(annotations):
        for pair in payload.split(","):
            key, sep, raw = pair.partition(":")
            key = key.strip()
            if not sep or key not in _LENGTH_KEYS | _VALUE_KEYS:
                continue
            value = raw.strip()
            if not _NUMBER_RE.match(value):
                raise InvalidAnnotationError("OPTIONS", payload)
            refinements[key] = value
    return refinements


def _bounded(definition: str, lower: tuple[str, str] | None, upper: tuple[str, str] | None) -> str:
    # lower/upper are (comparator, limit)
    result = definition
    if lower is not None:
        result = f"{lower[1]} {lower[0]} {result}"
    if upper is not None:
        result = f"{result} {upper[0]} {upper[1]}"
    return result


def _as_bigint_bound(bound: tuple[str, str] | None) -> tuple[str, str] | None:
    if bound is None:
        return None
    comparator, limit = bound
    if "." in limit:
        raise InvalidAnnotationError("OPTIONS", f"BigInt bound must be an integer: {limit}")
    return comparator, f"{limit}n"


def stringify_primitive_type(type_name: str, annotations: Sequence[Annotation] = ()) -> str:
    """Return the quoted ArkType definition for a Prisma scalar, with refinements applied."""
    if not is_primitive_prisma_field_type(type_name):
        raise ValueError(f"Unsupported primitive type: {type_name}")

    definition = _PRIMITIVE_TYPES[type_name]
    refinements = _parse_refinements(annotations)
    lower: tuple[str, str] | None = None
    upper: tuple[str, str] | None = None

    if type_name == "String":
        if "minLength" in refinements:
            lower = ("<=", refinements["minLength"])
        if "maxLength" in refinements:
            upper = ("<=", refinements["maxLength"])
    elif type_name in _NUMERIC_TYPES:
        if "exclusiveMinimum" in refinements:
            lower = ("<", refinements["exclusiveMinimum"])
        elif "minimum" in refinements:
            lower = ("<=", refinements["minimum"])
        if "exclusiveMaximum" in refinements:
            upper = ("<", refinements["exclusiveMaximum"])
        elif "maximum" in refinements:
            upper = ("<=", refinements["maximum"])
        if type_name == "BigInt":
            lower = _as_bigint_bound(lower)
            upper = _as_bigint_bound(upper)

    return quote(_bounded(definition, lower, upper))
