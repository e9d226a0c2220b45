"""Domain-specific exceptions — framework-independent."""

from enum import Enum


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class PersistenceErrorCode(str, Enum):
    """Kinds of persistence failure the HTTP layer knows how to report.

    Drivers surface these in different ways (SQLSTATE codes, message text);
    the infrastructure layer normalizes them to one of these members.
    """

    UNIQUE_VIOLATION = "unique_violation"
    NOT_NULL_VIOLATION = "not_null_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    CHECK_VIOLATION = "check_violation"
    UNKNOWN = "unknown"
