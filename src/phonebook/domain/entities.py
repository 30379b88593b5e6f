"""Domain entities: Person and its identifier format."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


class InvalidIdentifier(ValueError):
    """Raised when a person id is not in the store's identifier format."""

    def __init__(self, person_id: object) -> None:
        super().__init__(f"Malformed person id: {person_id!r}")
        self.person_id = person_id


def new_person_id() -> str:
    return str(uuid.uuid4())


def validate_person_id(person_id: str) -> str:
    """Return the canonical form of person_id, or raise InvalidIdentifier."""
    try:
        return str(uuid.UUID(str(person_id)))
    except (TypeError, ValueError, AttributeError):
        raise InvalidIdentifier(person_id) from None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Person:
    """
    A phonebook entry.
    Name and number must be non-empty; both are stored stripped.
    """

    id: str = field(default_factory=new_person_id)
    name: str = field(default="")
    number: str = field(default="")
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        name = (self.name or "").strip()
        if not name:
            raise ValueError("Person name must be non-empty.")
        number = (self.number or "").strip()
        if not number:
            raise ValueError("Person number must be non-empty.")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "number", number)
