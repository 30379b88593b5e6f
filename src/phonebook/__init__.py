"""
Phonebook core: clean-architecture layout.

- domain: the Person entity and its identifier format. No outer dependencies.
- application: use cases (PhonebookService), ports (PersonRepository), DTOs.
- infrastructure: adapters (InMemoryPersonRepository, Neo4jPersonRepository), settings.
"""

from phonebook.application import (
    Deleted,
    Invalid,
    InvalidId,
    NotFound,
    PersonInput,
    PersonRecord,
    PersonRepository,
    PersonSaved,
    PhonebookInfo,
    PhonebookService,
)
from phonebook.domain import InvalidIdentifier, Person
from phonebook.infrastructure import InMemoryPersonRepository, Neo4jPersonRepository

__all__ = [
    "Deleted",
    "InMemoryPersonRepository",
    "Invalid",
    "InvalidId",
    "InvalidIdentifier",
    "Neo4jPersonRepository",
    "NotFound",
    "Person",
    "PersonInput",
    "PersonRecord",
    "PersonRepository",
    "PersonSaved",
    "PhonebookInfo",
    "PhonebookService",
]
