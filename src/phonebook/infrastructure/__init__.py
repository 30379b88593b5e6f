"""Infrastructure layer: concrete implementations of application ports."""

from phonebook.infrastructure.config import Settings, load_env, open_driver
from phonebook.infrastructure.memory_repository import InMemoryPersonRepository
from phonebook.infrastructure.persistence.neo4j_repository import Neo4jPersonRepository

__all__ = [
    "InMemoryPersonRepository",
    "Neo4jPersonRepository",
    "Settings",
    "load_env",
    "open_driver",
]
