"""Shared fixtures and helpers for tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from prisma_arktype.models import Datamodel


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared datamodel fixtures
# ---------------------------------------------------------------------------


def _scalar(name: str, type: str = "String", **extra: Any) -> dict[str, Any]:
    return {"name": name, "kind": "scalar", "type": type, "isList": False, "isRequired": True, **extra}


@pytest.fixture
def datamodel_document() -> dict[str, Any]:
    """A DMMF datamodel in the camelCase shape Prisma emits."""
    return {
        "models": [
            {
                "name": "AnnotatedModel",
                "documentation": None,
                "fields": [
                    _scalar("id", isId=True, hasDefaultValue=True),
                    _scalar("hiddenField", documentation="@prisma-arktype.hide"),
                    _scalar("computedField", documentation="@prisma-arktype.input.hide"),
                    _scalar("updateOnlyField", documentation="@prisma-arktype.create.input.hide"),
                    _scalar("createOnlyField", documentation="@prisma-arktype.update.input.hide"),
                    _scalar("email", documentation='@prisma-arktype.typeOverwrite="string.email"'),
                    _scalar("normalField"),
                ],
            },
            {
                "name": "HiddenModel",
                "documentation": "@prisma-arktype.hide",
                "fields": [_scalar("id", isId=True)],
            },
            {
                "name": "User",
                "documentation": "A registered user.",
                "fields": [
                    _scalar("id", "Int", isId=True, hasDefaultValue=True),
                    _scalar("email", isUnique=True),
                    _scalar("nickname", isRequired=False),
                    _scalar("tags", isList=True),
                    {"name": "role", "kind": "enum", "type": "Role", "isList": False, "isRequired": True,
                     "hasDefaultValue": True},
                    _scalar("createdAt", "DateTime", hasDefaultValue=True),
                    {"name": "posts", "kind": "object", "type": "Post", "isList": True, "isRequired": True,
                     "relationName": "PostToUser", "relationFromFields": []},
                    {"name": "profile", "kind": "object", "type": "Profile", "isList": False, "isRequired": False,
                     "relationName": "ProfileToUser", "relationFromFields": []},
                ],
            },
            {
                "name": "Post",
                "documentation": None,
                "fields": [
                    _scalar("id", isId=True, hasDefaultValue=True),
                    _scalar("title", documentation="@prisma-arktype.options{minLength: 3, maxLength: 120}"),
                    _scalar("authorId", "Int"),
                    {"name": "author", "kind": "object", "type": "User", "isList": False, "isRequired": True,
                     "relationName": "PostToUser", "relationFromFields": ["authorId"]},
                ],
            },
            {
                "name": "Profile",
                "documentation": None,
                "fields": [
                    _scalar("id", isId=True),
                    _scalar("bio", isRequired=False),
                    _scalar("userId", "Int", isUnique=True),
                    {"name": "user", "kind": "object", "type": "User", "isList": False, "isRequired": True,
                     "relationName": "ProfileToUser", "relationFromFields": ["userId"]},
                ],
            },
        ],
        "enums": [
            {"name": "Role", "values": [{"name": "USER"}, {"name": "ADMIN"}]},
        ],
    }


@pytest.fixture
def datamodel(datamodel_document: dict[str, Any]) -> Datamodel:
    return Datamodel.model_validate(datamodel_document)


@pytest.fixture
def schema_file(tmp_path: Path, datamodel_document: dict[str, Any]) -> Path:
    """A full DMMF document written to disk."""
    path = tmp_path / "dmmf.json"
    path.write_text(json.dumps({"datamodel": datamodel_document}), encoding="utf-8")
    return path
