"""Domain layer: entities and value objects. No dependencies on outer layers."""

from phonebook.domain.entities import (
    InvalidIdentifier,
    Person,
    new_person_id,
    validate_person_id,
)

__all__ = ["InvalidIdentifier", "Person", "new_person_id", "validate_person_id"]
