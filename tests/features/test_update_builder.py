"""Unit tests for ChatUpdateBuilder: field mapping and rejection rules."""

import pytest
from sqlalchemy.dialects import postgresql

from api.features.conversation.update_builder import ChatUpdateBuilder
from api.shared.exceptions import ValidationError


def compile_pg(stmt):
    return stmt.compile(dialect=postgresql.dialect())


def test_empty_field_set_is_rejected():
    with pytest.raises(ValidationError) as excinfo:
        ChatUpdateBuilder().build(chat_id=1, user_id=2)

    assert excinfo.value.message == "No fields to update"
    assert excinfo.value.status_code == 400


def test_only_supplied_fields_are_set():
    stmt = ChatUpdateBuilder.from_fields({"title": "New"}).build(chat_id=1, user_id=2)
    compiled = compile_pg(stmt)
    sql = str(compiled)

    assert "title=" in sql
    assert "user_input=" not in sql
    assert "advice_output=" not in sql
    assert "updated_at=" in sql
    assert "RETURNING" in sql
    assert compiled.params["title"] == "New"


def test_scoped_by_chat_and_owner():
    stmt = ChatUpdateBuilder.from_fields({"user_input": "q"}).build(chat_id=7, user_id=3)
    compiled = compile_pg(stmt)

    assert "chats.id =" in str(compiled)
    assert "chats.user_id =" in str(compiled)
    assert 7 in compiled.params.values()
    assert 3 in compiled.params.values()


def test_values_are_bound_parameters():
    hostile = "x'; DROP TABLE chats; --"
    stmt = ChatUpdateBuilder.from_fields({"advice_output": hostile}).build(chat_id=1, user_id=1)
    compiled = compile_pg(stmt)

    assert hostile not in str(compiled)
    assert compiled.params["advice_output"] == hostile


def test_unknown_field_is_rejected():
    with pytest.raises(ValidationError):
        ChatUpdateBuilder.from_fields({"user_id": 99})


@pytest.mark.parametrize("field", ["user_input", "advice_output"])
def test_required_columns_cannot_be_nulled(field):
    with pytest.raises(ValidationError):
        ChatUpdateBuilder.from_fields({field: None})


def test_title_can_be_cleared():
    builder = ChatUpdateBuilder.from_fields({"title": None})

    assert builder.fields == {"title": None}


def test_overlong_title_is_rejected():
    with pytest.raises(ValidationError):
        ChatUpdateBuilder.from_fields({"title": "t" * 256})
