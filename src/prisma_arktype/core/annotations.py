"""Directive extraction from ``///`` documentation comments.

Each documentation line is either a directive (consumed whole) or description
text. Directives are matched by substring against an ordered alias table; the
first entry with a matching alias wins.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

AnnotationType = Literal[
    "HIDDEN",
    "HIDDEN_INPUT",
    "HIDDEN_INPUT_CREATE",
    "HIDDEN_INPUT_UPDATE",
    "OPTIONS",
    "TYPE_OVERWRITE",
]

_PREFIX = "@prisma-arktype"

# Every alias carries the full namespace, so no alias is a substring of a
# different directive's alias.
_ANNOTATION_KEYS: tuple[tuple[AnnotationType, tuple[str, ...]], ...] = (
    ("HIDDEN", (f"{_PREFIX}.hide", f"{_PREFIX}.hidden")),
    ("HIDDEN_INPUT", (f"{_PREFIX}.input.hide", f"{_PREFIX}.input.hidden")),
    ("HIDDEN_INPUT_CREATE", (f"{_PREFIX}.create.input.hide", f"{_PREFIX}.create.input.hidden")),
    ("HIDDEN_INPUT_UPDATE", (f"{_PREFIX}.update.input.hide", f"{_PREFIX}.update.input.hidden")),
    ("OPTIONS", (f"{_PREFIX}.options",)),
    ("TYPE_OVERWRITE", (f"{_PREFIX}.typeOverwrite",)),
)

_OPTIONS_RE = re.compile(r"@prisma-arktype\.options\{(.+)\}")
_TYPE_OVERWRITE_RE = re.compile(r"@prisma-arktype\.typeOverwrite=(.+)")


class InvalidAnnotationError(ValueError):
    """A line names a directive but does not carry the payload it requires."""

    def __init__(self, annotation_type: AnnotationType, line: str) -> None:
        super().__init__(f"Invalid {annotation_type} annotation: {line}")
        self.annotation_type = annotation_type
        self.line = line


@dataclass(frozen=True)
class Annotation:
    type: AnnotationType
    value: str | None = None


@dataclass(frozen=True)
class ExtractionResult:
    annotations: tuple[Annotation, ...]
    description: str

    @property
    def hidden(self) -> bool:
        return contains(self.annotations, "HIDDEN")

    @property
    def hidden_input(self) -> bool:
        return contains(self.annotations, "HIDDEN_INPUT")

    @property
    def hidden_input_create(self) -> bool:
        return contains(self.annotations, "HIDDEN_INPUT_CREATE")

    @property
    def hidden_input_update(self) -> bool:
        return contains(self.annotations, "HIDDEN_INPUT_UPDATE")

    @property
    def type_overwrite(self) -> str | None:
        for annotation in self.annotations:
            if annotation.type == "TYPE_OVERWRITE":
                return annotation.value
        return None


def option_values(annotations: Sequence[Annotation]) -> list[str]:
    return [a.value for a in annotations if a.type == "OPTIONS" and a.value is not None]


def contains(annotations: Sequence[Annotation], annotation_type: AnnotationType) -> bool:
    return any(a.type == annotation_type for a in annotations)


def match_directive(line: str) -> AnnotationType | None:
    """Return the first directive whose alias occurs anywhere in ``line``."""
    for annotation_type, keys in _ANNOTATION_KEYS:
        if any(key in line for key in keys):
            return annotation_type
    return None


def _parse_line(annotation_type: AnnotationType, line: str) -> Annotation:
    if annotation_type == "OPTIONS":
        match = _OPTIONS_RE.search(line)
        if not match or not match.group(1):
            raise InvalidAnnotationError(annotation_type, line)
        return Annotation("OPTIONS", match.group(1))
    if annotation_type == "TYPE_OVERWRITE":
        match = _TYPE_OVERWRITE_RE.search(line)
        if not match or not match.group(1).strip():
            raise InvalidAnnotationError(annotation_type, line)
        return Annotation("TYPE_OVERWRITE", match.group(1).strip())
    return Annotation(annotation_type)


def extract_annotations(documentation: str | None = None) -> ExtractionResult:
    annotations: list[Annotation] = []
    description_lines: list[str] = []

    if documentation:
        for line in documentation.split("\n"):
            annotation_type = match_directive(line)
            if annotation_type is None:
                description_lines.append(line)
                continue
            annotations.append(_parse_line(annotation_type, line))

    return ExtractionResult(
        annotations=tuple(annotations),
        description="\n".join(description_lines).strip(),
    )


def generate_arktype_options(annotations: Sequence[Annotation]) -> str:
    """Render entity-level Options payloads as a ``.pipe(...)`` suffix."""
    values = option_values(annotations)
    if not values:
        return ""
    return f".pipe({', '.join(values)})"
