"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from phonebook.domain import Person


class PersonRepository(Protocol):
    """Persists and queries Person records.

    Methods taking a person_id raise InvalidIdentifier when it is malformed.
    """

    async def add(self, person: Person) -> None:
        """Store a new person."""
        ...

    async def list_all(self) -> list[Person]:
        """Return all persons. Adapters use insertion or creation order."""
        ...

    async def count(self) -> int:
        """Return the number of stored persons."""
        ...

    async def get_by_id(self, person_id: str) -> Person | None:
        """Return the person with the given id, or None."""
        ...

    async def find_by_name(self, name: str) -> Person | None:
        """Return a person whose name equals name exactly, or None."""
        ...

    async def update_number(self, person_id: str, number: str) -> Person | None:
        """Replace the number, re-running Person validators. None if not found."""
        ...

    async def delete(self, person_id: str) -> bool:
        """Remove the person. Returns True if it existed."""
        ...
