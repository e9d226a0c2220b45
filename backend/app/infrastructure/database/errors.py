"""Classify driver-level database errors into PersistenceErrorCode members.

PostgreSQL drivers expose a SQLSTATE on the wrapped exception; SQLite and
others only give us the message text, so keywords are matched as a fallback.
"""

import logging

from sqlalchemy.exc import DBAPIError, IntegrityError

from app.domain.exceptions import PersistenceErrorCode

logger = logging.getLogger(__name__)

# https://www.postgresql.org/docs/current/errcodes-appendix.html
SQLSTATE_CODES: dict[str, PersistenceErrorCode] = {
    "23505": PersistenceErrorCode.UNIQUE_VIOLATION,
    "23502": PersistenceErrorCode.NOT_NULL_VIOLATION,
    "23503": PersistenceErrorCode.FOREIGN_KEY_VIOLATION,
    "23514": PersistenceErrorCode.CHECK_VIOLATION,
}

_MESSAGE_KEYWORDS: list[tuple[PersistenceErrorCode, tuple[str, ...]]] = [
    (PersistenceErrorCode.UNIQUE_VIOLATION, ("unique constraint", "unique violation", "duplicate")),
    (PersistenceErrorCode.NOT_NULL_VIOLATION, ("not null constraint", "null value in column")),
    (PersistenceErrorCode.FOREIGN_KEY_VIOLATION, ("foreign key constraint", "is not present in table")),
    (PersistenceErrorCode.CHECK_VIOLATION, ("check constraint",)),
]


def error_message(exc: DBAPIError) -> str:
    """The driver's own message, without SQLAlchemy's statement dump."""
    return str(exc.orig) if exc.orig is not None else str(exc)


def _sqlstate(orig: object) -> str | None:
    # asyncpg exposes ``sqlstate``; psycopg and SQLAlchemy's adapters ``pgcode``
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def classify_database_error(exc: DBAPIError) -> PersistenceErrorCode:
    """Map a SQLAlchemy DBAPIError onto a PersistenceErrorCode."""
    if not isinstance(exc, IntegrityError):
        return PersistenceErrorCode.UNKNOWN

    sqlstate = _sqlstate(exc.orig)
    if sqlstate:
        code = SQLSTATE_CODES.get(sqlstate, PersistenceErrorCode.UNKNOWN)
        logger.debug("Integrity error sqlstate=%s classified as %s", sqlstate, code.value)
        return code

    normalized = error_message(exc).lower()
    for code, keywords in _MESSAGE_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return code

    logger.warning("Unrecognized integrity error: %s", normalized[:200])
    return PersistenceErrorCode.UNKNOWN
