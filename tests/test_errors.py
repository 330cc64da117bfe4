"""
Tests for store error classification and the error envelope.
"""
import pytest
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import ConflictError, InternalError, NotFoundError, ValidationError
from app.crud.errors import ConstraintKind, constraint_kind


class PgDriverError(Exception):
    def __init__(self, sqlstate):
        super().__init__("duplicate key value violates unique constraint")
        self.sqlstate = sqlstate


class SqliteDriverError(Exception):
    def __init__(self, code):
        super().__init__("UNIQUE constraint failed: categories.name")
        self.sqlite_errorcode = code


def integrity_error(orig) -> IntegrityError:
    return IntegrityError("INSERT INTO categories (id, name) VALUES (?, ?)", {}, orig)


@pytest.mark.parametrize("sqlstate, kind", [
    ("23505", ConstraintKind.UNIQUE),
    ("23503", ConstraintKind.FOREIGN_KEY),
    ("23502", ConstraintKind.NOT_NULL),
    ("23514", ConstraintKind.UNKNOWN),
])
def test_postgres_sqlstate(sqlstate, kind):
    assert constraint_kind(integrity_error(PgDriverError(sqlstate))) is kind


@pytest.mark.parametrize("code, kind", [
    (2067, ConstraintKind.UNIQUE),
    (1555, ConstraintKind.UNIQUE),
    (787, ConstraintKind.FOREIGN_KEY),
    (1299, ConstraintKind.NOT_NULL),
    (275, ConstraintKind.UNKNOWN),
])
def test_sqlite_extended_code(code, kind):
    assert constraint_kind(integrity_error(SqliteDriverError(code))) is kind


def test_code_found_on_wrapped_cause():
    wrapper = Exception("adapted driver error")
    wrapper.__cause__ = PgDriverError("23505")
    assert constraint_kind(integrity_error(wrapper)) is ConstraintKind.UNIQUE


def test_message_text_is_not_used():
    orig = Exception("duplicate key value violates unique constraint \"uq_categories_name\"")
    assert constraint_kind(integrity_error(orig)) is ConstraintKind.UNKNOWN


def test_envelope_omits_empty_keys():
    assert NotFoundError("Product not found").to_dict() == {"error": "Product not found"}
    assert InternalError().to_dict() == {"error": "An unexpected error occurred"}


def test_envelope_with_details_and_field():
    error = ConflictError(details="A category with this name already exists", field="name")
    assert error.status_code == 409
    assert error.to_dict() == {
        "error": "Duplicate entry",
        "details": "A category with this name already exists",
        "field": "name",
    }


def test_status_codes():
    assert ValidationError().status_code == 400
    assert NotFoundError().status_code == 404
    assert ConflictError().status_code == 409
    assert InternalError().status_code == 500
