"""Map engine integrity failures onto the application error taxonomy.

SQLite reports the violated rule in the message text; PostgreSQL drivers
expose a SQLSTATE code. Both are checked so the same repositories work on
either engine.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError

from goatfarm.application.errors import (
    AppError,
    ConflictError,
    DuplicateError,
    InvalidEnumValue,
    MissingReferenceError,
    ValidationError,
)

CHECK_VIOLATION = "23514"
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
NOT_NULL_VIOLATION = "23502"


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def translate_integrity_error(exc: IntegrityError, *, entity: str) -> AppError:
    state = _sqlstate(exc)
    text = str(exc.orig).lower()
    details = {"entity": entity, "reason": str(exc.orig)}
    if state == CHECK_VIOLATION or "check constraint" in text:
        return InvalidEnumValue(f"{entity} has a value outside its allowed set", details=details)
    if state == UNIQUE_VIOLATION or "unique constraint" in text:
        return DuplicateError(f"{entity} already exists", details=details)
    if state == FOREIGN_KEY_VIOLATION or "foreign key constraint" in text:
        return MissingReferenceError(f"{entity} references a missing row", details=details)
    if state == NOT_NULL_VIOLATION or "not null constraint" in text:
        return ValidationError(f"{entity} is missing a required value", details=details)
    return ConflictError(f"Failed to write {entity}", details=details)
