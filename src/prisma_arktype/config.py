from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_OUTPUT = "./prisma/generated/validators"
DEFAULT_IGNORED_KEYS = ("id", "createdAt", "updatedAt")


class GeneratorConfig(BaseModel):
    """Resolved options from the Prisma ``generator`` block or the CLI."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    output: Path = Path(DEFAULT_OUTPUT)
    arktype_import_dependency_name: str = Field(default="arktype", alias="arktypeImportDependencyName")
    ignored_keys_on_input_models: tuple[str, ...] = Field(
        default=DEFAULT_IGNORED_KEYS, alias="ignoredKeysOnInputModels"
    )

    @field_validator("ignored_keys_on_input_models", mode="before")
    @classmethod
    def _split_keys(cls, value: Any) -> Any:
        # Prisma generator config values arrive as strings.
        if isinstance(value, str):
            return tuple(key.strip() for key in value.split(",") if key.strip())
        return value

    @field_validator("arktype_import_dependency_name")
    @classmethod
    def _non_empty_import(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("arktypeImportDependencyName must not be empty")
        return value.strip()


def resolve_config(generator_config: dict[str, Any] | None = None, output: str | Path | None = None) -> GeneratorConfig:
    """Build a config from raw generator options, letting an explicit output win."""
    values: dict[str, Any] = dict(generator_config or {})
    if output is not None:
        values["output"] = output
    return GeneratorConfig.model_validate(values)
