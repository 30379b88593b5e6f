"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

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
from phonebook.application.phonebook_service import PhonebookService
from phonebook.application.ports import PersonRepository

__all__ = [
    "Deleted",
    "Invalid",
    "InvalidId",
    "NotFound",
    "PersonInput",
    "PersonRecord",
    "PersonRepository",
    "PersonSaved",
    "PhonebookInfo",
    "PhonebookService",
]
