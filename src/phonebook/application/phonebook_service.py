"""Phonebook use cases: list, info, get, delete, and create-or-update by name."""

import logging
from collections.abc import Callable
from datetime import datetime

from phonebook.application.dto import (
    Deleted,
    Invalid,
    InvalidId,
    NotFound,
    PersonInput,
    PersonRecord,
    PersonSaved,
    PhonebookInfo,
)
from phonebook.application.ports import PersonRepository
from phonebook.domain import InvalidIdentifier, Person

logger = logging.getLogger(__name__)


def _missing_fields(data: PersonInput) -> list[str]:
    missing = []
    if not (data.name or "").strip():
        missing.append("name")
    if not (data.number or "").strip():
        missing.append("number")
    return missing


class PhonebookService:
    """Stateless request handlers over a PersonRepository.

    Create-or-update looks the name up and then writes; the two steps are not
    atomic, so concurrent saves of a new name can create two records.
    """

    def __init__(
        self,
        repository: PersonRepository,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._repo = repository
        self._clock = clock or (lambda: datetime.now().astimezone())

    async def list_persons(self) -> list[PersonRecord]:
        return [PersonRecord.from_person(p) for p in await self._repo.list_all()]

    async def info(self) -> PhonebookInfo:
        count = await self._repo.count()
        return PhonebookInfo(count=count, generated_at=self._clock())

    async def get_person(self, person_id: str) -> PersonRecord | NotFound | InvalidId:
        try:
            person = await self._repo.get_by_id(person_id)
        except InvalidIdentifier:
            return InvalidId(person_id=person_id)
        if person is None:
            return NotFound(person_id=person_id)
        return PersonRecord.from_person(person)

    async def delete_person(self, person_id: str) -> Deleted | InvalidId:
        """Delete by id. Deleting an id that does not exist still succeeds."""
        try:
            existed = await self._repo.delete(person_id)
        except InvalidIdentifier:
            return InvalidId(person_id=person_id)
        if existed:
            logger.info("Deleted person %s", person_id)
        return Deleted(person_id=person_id, existed=existed)

    async def save_person(self, data: PersonInput) -> PersonSaved | Invalid:
        """Update the number of the person with this name, or create one."""
        missing = _missing_fields(data)
        if missing:
            return Invalid(reason=f"{' and '.join(missing)} missing")
        name = data.name.strip()
        number = data.number.strip()

        existing = await self._repo.find_by_name(name)
        if existing is not None:
            try:
                updated = await self._repo.update_number(existing.id, number)
            except ValueError as e:
                return Invalid(reason=str(e))
            if updated is not None:
                logger.info("Updated number of %s (%s)", updated.name, updated.id)
                return PersonSaved(person=PersonRecord.from_person(updated), created=False)
            # Deleted between lookup and update; create it afresh.

        person = Person(name=name, number=number)
        await self._repo.add(person)
        logger.info("Created person %s (%s)", person.name, person.id)
        return PersonSaved(person=PersonRecord.from_person(person), created=True)
