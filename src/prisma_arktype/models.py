from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

FieldKind = Literal["scalar", "enum", "object", "unsupported"]


class _DmmfModel(BaseModel):
    # DMMF documents use camelCase; snake_case is accepted for hand-built inputs.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="ignore")


class ModelField(_DmmfModel):
    name: str
    kind: FieldKind
    type: str
    is_list: bool = False
    is_required: bool = True
    is_id: bool = False
    is_unique: bool = False
    has_default_value: bool = False
    relation_name: str | None = None
    relation_from_fields: list[str] = Field(default_factory=list)
    documentation: str | None = None

    @field_validator("relation_from_fields", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return [] if value is None else value


class Model(_DmmfModel):
    name: str
    fields: list[ModelField] = Field(default_factory=list)
    documentation: str | None = None


class EnumValue(_DmmfModel):
    name: str
    db_name: str | None = None


class DatamodelEnum(_DmmfModel):
    name: str
    values: list[EnumValue] = Field(default_factory=list)
    documentation: str | None = None


class Datamodel(_DmmfModel):
    models: list[Model] = Field(default_factory=list)
    enums: list[DatamodelEnum] = Field(default_factory=list)


class CompiledView(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    expression: str


class CompiledEnum(CompiledView):
    union: str
