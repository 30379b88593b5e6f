"""Unit tests for PhonebookService. In-memory repo only."""

from datetime import datetime, timezone

import pytest

from phonebook.application import (
    Deleted,
    Invalid,
    InvalidId,
    NotFound,
    PersonInput,
    PersonRecord,
    PersonSaved,
    PhonebookService,
)
from phonebook.domain import Person
from phonebook.infrastructure import InMemoryPersonRepository

MISSING_ID = "7b1f7c5e-3c43-4a4e-9a57-1d2f0e0c9a11"


def _service(repo: InMemoryPersonRepository | None = None) -> PhonebookService:
    return PhonebookService(repository=repo or InMemoryPersonRepository())


@pytest.mark.asyncio
async def test_save_new_name_creates_one_person() -> None:
    service = _service()
    result = await service.save_person(PersonInput(name="Ada", number="123"))
    assert isinstance(result, PersonSaved)
    assert result.created is True
    assert result.person.name == "Ada"
    assert result.person.number == "123"

    listed = await service.list_persons()
    assert listed == [result.person]


@pytest.mark.asyncio
async def test_save_existing_name_updates_number_and_keeps_id() -> None:
    service = _service()
    first = await service.save_person(PersonInput(name="Ada", number="123"))
    assert isinstance(first, PersonSaved)

    second = await service.save_person(PersonInput(name="Ada", number="456"))
    assert isinstance(second, PersonSaved)
    assert second.created is False
    assert second.person.id == first.person.id
    assert second.person.number == "456"

    listed = await service.list_persons()
    assert len(listed) == 1
    assert listed[0] == PersonRecord(id=first.person.id, name="Ada", number="456")
    assert (await service.info()).count == 1


@pytest.mark.asyncio
async def test_save_name_match_is_exact() -> None:
    service = _service()
    await service.save_person(PersonInput(name="Ada", number="123"))
    await service.save_person(PersonInput(name="ada", number="999"))
    assert len(await service.list_persons()) == 2


@pytest.mark.asyncio
async def test_save_strips_whitespace() -> None:
    service = _service()
    result = await service.save_person(PersonInput(name="  Ada ", number=" 123 "))
    assert isinstance(result, PersonSaved)
    assert result.person.name == "Ada"
    assert result.person.number == "123"

    again = await service.save_person(PersonInput(name="Ada", number="456"))
    assert isinstance(again, PersonSaved)
    assert again.created is False


@pytest.mark.parametrize(
    ("data", "reason"),
    [
        (PersonInput(name="Bob"), "number missing"),
        (PersonInput(name="Bob", number=""), "number missing"),
        (PersonInput(number="123"), "name missing"),
        (PersonInput(name="   ", number="123"), "name missing"),
        (PersonInput(), "name and number missing"),
    ],
)
@pytest.mark.asyncio
async def test_save_missing_fields_is_invalid_and_stores_nothing(data, reason) -> None:
    service = _service()
    result = await service.save_person(data)
    assert isinstance(result, Invalid)
    assert result.reason == reason
    assert await service.list_persons() == []


@pytest.mark.asyncio
async def test_save_blank_number_for_existing_name_leaves_record_unchanged() -> None:
    repo = InMemoryPersonRepository()
    service = _service(repo)
    await service.save_person(PersonInput(name="Ada", number="123"))
    result = await service.save_person(PersonInput(name="Ada", number=" "))
    assert result == Invalid(reason="number missing")
    assert (await repo.find_by_name("Ada")).number == "123"


class RejectingRepository(InMemoryPersonRepository):
    """Store whose field validator rejects every number update."""

    async def update_number(self, person_id, number):
        raise ValueError("number too short")


@pytest.mark.asyncio
async def test_save_store_validator_failure_is_invalid_with_store_message() -> None:
    repo = RejectingRepository()
    service = _service(repo)
    first = await service.save_person(PersonInput(name="Ada", number="123"))
    assert isinstance(first, PersonSaved)

    result = await service.save_person(PersonInput(name="Ada", number="4"))
    assert result == Invalid(reason="number too short")
    assert [p.number for p in await repo.list_all()] == ["123"]


@pytest.mark.asyncio
async def test_save_recreates_when_record_vanishes_between_find_and_update() -> None:
    class VanishingRepository(InMemoryPersonRepository):
        async def update_number(self, person_id, number):
            await self.delete(person_id)
            return None

    repo = VanishingRepository()
    service = _service(repo)
    first = await service.save_person(PersonInput(name="Ada", number="123"))
    second = await service.save_person(PersonInput(name="Ada", number="456"))
    assert isinstance(second, PersonSaved)
    assert second.created is True
    assert second.person.id != first.person.id
    assert [p.number for p in await repo.list_all()] == ["456"]


@pytest.mark.asyncio
async def test_get_person_found_and_not_found() -> None:
    service = _service()
    saved = await service.save_person(PersonInput(name="Ada", number="123"))
    assert await service.get_person(saved.person.id) == saved.person

    missing = await service.get_person(MISSING_ID)
    assert isinstance(missing, NotFound)
    assert missing.person_id == MISSING_ID


@pytest.mark.asyncio
async def test_get_person_malformed_id() -> None:
    service = _service()
    result = await service.get_person("not-an-id")
    assert isinstance(result, InvalidId)
    assert result.person_id == "not-an-id"


@pytest.mark.asyncio
async def test_delete_is_idempotent() -> None:
    service = _service()
    saved = await service.save_person(PersonInput(name="Ada", number="123"))
    person_id = saved.person.id

    first = await service.delete_person(person_id)
    second = await service.delete_person(person_id)
    assert first == Deleted(person_id=person_id, existed=True)
    assert second == Deleted(person_id=person_id, existed=False)
    assert await service.list_persons() == []
    assert isinstance(await service.get_person(person_id), NotFound)


@pytest.mark.asyncio
async def test_delete_malformed_id() -> None:
    service = _service()
    assert isinstance(await service.delete_person("123"), InvalidId)


@pytest.mark.asyncio
async def test_info_counts_persons_and_uses_clock() -> None:
    repo = InMemoryPersonRepository()
    now = datetime(2026, 10, 19, 11, 31, 2, tzinfo=timezone.utc)
    service = PhonebookService(repo, clock=lambda: now)
    assert (await service.info()).count == 0

    await repo.add(Person(name="Ada", number="123"))
    await repo.add(Person(name="Bob", number="456"))
    info = await service.info()
    assert info.count == 2
    assert info.generated_at == now


@pytest.mark.asyncio
async def test_store_errors_propagate() -> None:
    class BrokenRepository(InMemoryPersonRepository):
        async def find_by_name(self, name):
            raise ConnectionError("store down")

    service = _service(BrokenRepository())
    with pytest.raises(ConnectionError):
        await service.save_person(PersonInput(name="Ada", number="123"))
