from __future__ import annotations

from collections.abc import Iterable, Sequence

from prisma_arktype.models import CompiledEnum, DatamodelEnum


def stringify_enum(enum: DatamodelEnum) -> CompiledEnum:
    union = " | ".join(f"'{value.name}'" for value in enum.values)
    return CompiledEnum(name=enum.name, expression=f'type("{union}")', union=union)


def compile_enums(enums: Iterable[DatamodelEnum]) -> tuple[CompiledEnum, ...]:
    return tuple(stringify_enum(enum) for enum in enums)


class EnumRegistry:
    """Compiled enums, looked up by name when typing enum fields."""

    def __init__(self, compiled: Sequence[CompiledEnum] = ()) -> None:
        self._compiled = tuple(compiled)
        self._by_name = {enum.name: enum for enum in self._compiled}

    @classmethod
    def from_enums(cls, enums: Iterable[DatamodelEnum]) -> EnumRegistry:
        return cls(compile_enums(enums))

    @property
    def compiled(self) -> tuple[CompiledEnum, ...]:
        return self._compiled

    def lookup(self, name: str) -> CompiledEnum | None:
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._compiled)
