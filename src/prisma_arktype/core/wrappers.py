import re
from collections.abc import Callable

_STRING_LITERAL_RE = re.compile(r""""(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'""", re.DOTALL)
_CALL_RE = re.compile(r"[A-Za-z_$][\w$]*\s*\(")


def quote(definition: str) -> str:
    escaped = definition.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def is_string_literal(text: str) -> bool:
    """True for a complete single- or double-quoted JS string literal."""
    return _STRING_LITERAL_RE.fullmatch(text) is not None


def is_expression(text: str) -> bool:
    """True for JS code such as ``type("string.email")`` that is not a string literal."""
    return not is_string_literal(text) and _CALL_RE.search(text) is not None


def _needs_grouping(definition: str) -> bool:
    return any(token in definition for token in ("|", "<", ">", "&"))


def wrap_with_array(definition: str) -> str:
    if _needs_grouping(definition):
        return f"({definition})[]"
    return f"{definition}[]"


def wrap_with_null(definition: str) -> str:
    return f"{definition} | null"


def _wrap_literal(literal: str, wrap: Callable[[str], str]) -> str:
    delimiter = literal[0]
    return f"{delimiter}{wrap(literal[1:-1])}{delimiter}"


def array_of(field_type: str) -> str:
    """List form of a quoted definition or a validator expression."""
    if is_string_literal(field_type):
        return _wrap_literal(field_type, wrap_with_array)
    return f"{field_type}.array()"


def or_null(field_type: str) -> str:
    """Nullable form of a quoted definition or a validator expression."""
    if is_string_literal(field_type):
        return _wrap_literal(field_type, wrap_with_null)
    return f'{field_type}.or("null")'
