"""Data passed in and out of the application layer. Results are plain values, not exceptions."""

from dataclasses import dataclass
from datetime import datetime

from phonebook.domain import Person


@dataclass(frozen=True)
class PersonInput:
    """Raw create-or-update payload. Fields may be missing or blank."""

    name: str | None = None
    number: str | None = None


@dataclass(frozen=True)
class PersonRecord:
    id: str
    name: str
    number: str

    @classmethod
    def from_person(cls, person: Person) -> "PersonRecord":
        return cls(id=person.id, name=person.name, number=person.number)


@dataclass(frozen=True)
class PhonebookInfo:
    count: int
    generated_at: datetime


@dataclass(frozen=True)
class PersonSaved:
    person: PersonRecord
    created: bool


@dataclass(frozen=True)
class Invalid:
    reason: str


@dataclass(frozen=True)
class NotFound:
    person_id: str


@dataclass(frozen=True)
class InvalidId:
    person_id: str


@dataclass(frozen=True)
class Deleted:
    person_id: str
    existed: bool
