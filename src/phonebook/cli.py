"""
Seed or list the phonebook straight from the store.

Usage: phonebook-cli PASSWORD [NAME NUMBER]
With NAME and NUMBER, adds one entry. With only PASSWORD, lists every entry.
NEO4J_URI and NEO4J_USER come from the environment (or .env); PASSWORD
replaces NEO4J_PASSWORD.
"""

import asyncio
import logging
import sys
from typing import TextIO

from phonebook.application import PersonRepository
from phonebook.domain import Person
from phonebook.infrastructure import (
    Neo4jPersonRepository,
    Settings,
    load_env,
    open_driver,
)

logger = logging.getLogger(__name__)


async def run_command(
    repository: PersonRepository,
    name: str | None,
    number: str | None,
    out: TextIO | None = None,
) -> int:
    """Add one person when both name and number are given, otherwise list all."""
    if out is None:
        out = sys.stdout
    if name and number:
        try:
            person = Person(name=name, number=number)
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return 1
        await repository.add(person)
        print(f"added {person.name} number {person.number} to phonebook", file=out)
        return 0

    print("phonebook:", file=out)
    for person in await repository.list_all():
        print(f"{person.name} {person.number}", file=out)
    return 0


async def _run(settings: Settings, name: str | None, number: str | None) -> int:
    logger.debug("Opening Neo4j at %s", settings.neo4j_uri)
    driver = open_driver(settings)
    try:
        repository = Neo4jPersonRepository(driver, database=settings.neo4j_database)
        return await run_command(repository, name, number)
    finally:
        await driver.close()


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("give password as argument", file=sys.stderr)
        return 1
    password = args[0]
    name = args[1] if len(args) > 1 else None
    number = args[2] if len(args) > 2 else None

    load_env()
    settings = Settings.from_env().with_password(password)
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )
    return asyncio.run(_run(settings, name, number))


if __name__ == "__main__":
    sys.exit(main())
