"""Classify store integrity failures by the driver's error code.

PostgreSQL drivers (asyncpg through SQLAlchemy's adapter, psycopg) expose the
SQLSTATE as ``sqlstate``/``pgcode``; sqlite3 exposes the extended result code
as ``sqlite_errorcode``. Async adapters may wrap the driver exception, so the
``__cause__`` is checked as well. Message text is never inspected.
"""
from enum import Enum

from sqlalchemy.exc import IntegrityError


class ConstraintKind(str, Enum):
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    NOT_NULL = "not_null"
    UNKNOWN = "unknown"


PG_CODES = {
    "23505": ConstraintKind.UNIQUE,
    "23503": ConstraintKind.FOREIGN_KEY,
    "23502": ConstraintKind.NOT_NULL,
}

SQLITE_CODES = {
    2067: ConstraintKind.UNIQUE,       # SQLITE_CONSTRAINT_UNIQUE
    1555: ConstraintKind.UNIQUE,       # SQLITE_CONSTRAINT_PRIMARYKEY
    787: ConstraintKind.FOREIGN_KEY,   # SQLITE_CONSTRAINT_FOREIGNKEY
    1299: ConstraintKind.NOT_NULL,     # SQLITE_CONSTRAINT_NOTNULL
}


def _driver_errors(exc: IntegrityError):
    orig = exc.orig
    yield orig
    cause = getattr(orig, "__cause__", None)
    if cause is not None:
        yield cause


def constraint_kind(exc: IntegrityError) -> ConstraintKind:
    for error in _driver_errors(exc):
        sqlstate = getattr(error, "sqlstate", None) or getattr(error, "pgcode", None)
        if sqlstate:
            return PG_CODES.get(str(sqlstate), ConstraintKind.UNKNOWN)

        sqlite_code = getattr(error, "sqlite_errorcode", None)
        if sqlite_code is not None:
            return SQLITE_CODES.get(sqlite_code, ConstraintKind.UNKNOWN)

    return ConstraintKind.UNKNOWN
