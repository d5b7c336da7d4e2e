"""Tests for the full compilation pass."""

from typing import Any

import pytest
from pydantic import ValidationError

from prisma_arktype.config import GeneratorConfig
from prisma_arktype.core.annotations import InvalidAnnotationError
from prisma_arktype.core.generate import VIEWS, GeneratedSchemas, generate
from prisma_arktype.models import Datamodel


def test_every_view_is_compiled(datamodel: Datamodel) -> None:
    schemas = generate(datamodel)
    assert [suffix for suffix, _ in schemas.views] == list(VIEWS)
    assert [e.name for e in schemas.enums] == ["Role"]


def test_hidden_model_has_no_row_in_any_view(datamodel: Datamodel) -> None:
    schemas = generate(datamodel)
    assert all(name != "HiddenModel" for name, _, _ in schemas.rows())


def test_hidden_field_never_appears(datamodel: Datamodel) -> None:
    schemas = generate(datamodel)
    for name, _, expression in schemas.rows():
        if name == "AnnotatedModel":
            assert "hiddenField" not in expression


def test_annotated_model_end_to_end(datamodel: Datamodel) -> None:
    schemas = generate(datamodel)

    plain = schemas.get("AnnotatedModel", "Plain")
    assert plain is not None
    for key in ("id", "computedField", "updateOnlyField", "createOnlyField", "email", "normalField"):
        assert f'"{key}' in plain
    assert '"email": "string.email"' in plain

    create = schemas.get("AnnotatedModel", "Create")
    assert create is not None
    assert "computedField" not in create
    assert "updateOnlyField" not in create
    for key in ("createOnlyField", "email", "normalField"):
        assert f'"{key}"' in create

    update = schemas.get("AnnotatedModel", "Update")
    assert update is not None
    assert "computedField" not in update
    assert "createOnlyField" not in update
    assert '"updateOnlyField?"' in update


def test_create_hidden_field_is_kept_outside_create(datamodel: Datamodel) -> None:
    schemas = generate(datamodel)
    for suffix in ("Plain", "Where", "Update"):
        expression = schemas.get("AnnotatedModel", suffix)
        assert expression is not None
        assert "updateOnlyField" in expression


def test_model_options_apply_to_every_view() -> None:
    datamodel = Datamodel.model_validate(
        {
            "models": [
                {
                    "name": "Account",
                    "documentation": "@prisma-arktype.options{v1}\n@prisma-arktype.options{v2}",
                    "fields": [
                        {"name": "id", "kind": "scalar", "type": "String", "isId": True},
                        {"name": "owner", "kind": "object", "type": "Account", "isRequired": False},
                    ],
                }
            ],
            "enums": [],
        }
    )
    schemas = generate(datamodel)
    assert schemas.rows()
    for _, _, expression in schemas.rows():
        assert expression.endswith(".pipe(v1, v2)")


def test_ignored_keys_come_from_config(datamodel: Datamodel) -> None:
    schemas = generate(datamodel, GeneratorConfig(ignoredKeysOnInputModels=[]))
    create = schemas.get("User", "Create")
    assert create is not None
    assert '"id?": "number.integer"' in create
    assert '"createdAt?": "Date"' in create


def test_malformed_directive_aborts_whole_pass(datamodel_document: dict[str, Any]) -> None:
    datamodel_document["models"][-1]["fields"][1]["documentation"] = "@prisma-arktype.options broken"
    datamodel = Datamodel.model_validate(datamodel_document)
    with pytest.raises(InvalidAnnotationError) as excinfo:
        generate(datamodel)
    assert excinfo.value.line == "@prisma-arktype.options broken"


def test_result_is_frozen(datamodel: Datamodel) -> None:
    schemas = generate(datamodel)
    with pytest.raises(ValidationError):
        schemas.enums = ()  # type: ignore[misc]
    assert isinstance(schemas.view("Plain"), tuple)


def test_view_table_cannot_be_mutated(datamodel: Datamodel) -> None:
    schemas = generate(datamodel)
    plain = schemas.view("Plain")
    with pytest.raises(TypeError):
        schemas.views["Plain"] = ()  # type: ignore[index]
    with pytest.raises(ValidationError):
        schemas.views = ()  # type: ignore[misc]
    assert schemas.view("Plain") == plain
    assert plain


def test_unknown_view_name(datamodel: Datamodel) -> None:
    with pytest.raises(ValueError, match="Unknown view"):
        generate(datamodel).view("Nope")


def test_get_missing_model_returns_none(datamodel: Datamodel) -> None:
    assert generate(datamodel).get("Missing", "Plain") is None


def test_empty_datamodel() -> None:
    schemas = generate(Datamodel())
    assert schemas.rows() == []
    assert schemas.enums == ()


def test_logs_row_counts(datamodel: Datamodel, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("INFO", logger="prisma_arktype.core.generate"):
        generate(datamodel)
    assert "Compiled 4 Plain schema(s)" in caplog.text


def test_generated_schemas_defaults() -> None:
    assert GeneratedSchemas().view("Plain") == ()


def test_views_are_ordered_pairs(datamodel: Datamodel) -> None:
    views = generate(datamodel).views
    assert isinstance(views, tuple)
    assert all(isinstance(rows, tuple) for _, rows in views)
