"""In-memory implementation of PersonRepository (no DB)."""

from dataclasses import replace

from phonebook.domain import Person, validate_person_id


class InMemoryPersonRepository:
    """Stores persons in a dict. Order preserved by insertion."""

    def __init__(self) -> None:
        self._by_id: dict[str, Person] = {}

    async def add(self, person: Person) -> None:
        self._by_id[validate_person_id(person.id)] = person

    async def list_all(self) -> list[Person]:
        return list(self._by_id.values())

    async def count(self) -> int:
        return len(self._by_id)

    async def get_by_id(self, person_id: str) -> Person | None:
        return self._by_id.get(validate_person_id(person_id))

    async def find_by_name(self, name: str) -> Person | None:
        for person in self._by_id.values():
            if person.name == name:
                return person
        return None

    async def update_number(self, person_id: str, number: str) -> Person | None:
        key = validate_person_id(person_id)
        person = self._by_id.get(key)
        if person is None:
            return None
        updated = replace(person, number=number)
        self._by_id[key] = updated
        return updated

    async def delete(self, person_id: str) -> bool:
        return self._by_id.pop(validate_person_id(person_id), None) is not None
