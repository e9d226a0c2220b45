"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

_MUTABLE_FIELDS = frozenset({"title", "description", "body", "published"})


@dataclass
class Article:
    """A titled piece of content that is either published or a draft."""

    title: str
    body: str
    description: str | None = None
    published: bool = False
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: object) -> None:
        """Apply the given field changes and refresh the updated_at timestamp.

        Only fields present in ``changes`` are touched, so ``description=None``
        clears the description.
        """
        for name, value in changes.items():
            if name not in _MUTABLE_FIELDS:
                raise ValueError(f"Article field '{name}' cannot be updated")
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
