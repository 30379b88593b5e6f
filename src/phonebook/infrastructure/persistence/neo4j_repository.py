"""Neo4j implementation of PersonRepository.
Graph: one (:Person {id, name, number, created_at}) node per phonebook entry.
Name uniqueness is left to the application; no constraint is created.
"""

from dataclasses import replace
from datetime import datetime

from phonebook.domain import Person, validate_person_id


def _datetime_to_iso(dt: datetime) -> str:
    return dt.isoformat()


def _iso_to_datetime(s: str) -> datetime:
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


class Neo4jPersonRepository:
    """Stores persons in Neo4j through an AsyncDriver."""

    def __init__(self, driver: object, database: str | None = None) -> None:
        self._driver = driver
        self._database = database

    def _session(self):
        return self._driver.session(database=self._database)

    async def add(self, person: Person) -> None:
        async with self._session() as session:
            result = await session.run(
                """
                CREATE (p:Person {
                    id: $id,
                    name: $name,
                    number: $number,
                    created_at: $created_at
                })
                """,
                id=validate_person_id(person.id),
                name=person.name,
                number=person.number,
                created_at=_datetime_to_iso(person.created_at),
            )
            await result.consume()

    async def list_all(self) -> list[Person]:
        async with self._session() as session:
            result = await session.run(
                """
                MATCH (p:Person)
                RETURN p
                ORDER BY p.created_at
                """
            )
            return [_record_to_person(rec) async for rec in result]

    async def count(self) -> int:
        async with self._session() as session:
            result = await session.run("MATCH (p:Person) RETURN count(p) AS n")
            record = await result.single()
        return record["n"] if record else 0

    async def get_by_id(self, person_id: str) -> Person | None:
        person_id = validate_person_id(person_id)
        async with self._session() as session:
            result = await session.run(
                "MATCH (p:Person {id: $id}) RETURN p",
                id=person_id,
            )
            record = await result.single()
        if not record:
            return None
        return _record_to_person(record)

    async def find_by_name(self, name: str) -> Person | None:
        async with self._session() as session:
            result = await session.run(
                """
                MATCH (p:Person)
                WHERE p.name = $name
                RETURN p
                ORDER BY p.created_at
                LIMIT 1
                """,
                name=name,
            )
            record = await result.single()
        if not record:
            return None
        return _record_to_person(record)

    async def update_number(self, person_id: str, number: str) -> Person | None:
        """Validate the new number against Person, then SET it. None if not found."""
        existing = await self.get_by_id(person_id)
        if existing is None:
            return None
        updated = replace(existing, number=number)
        async with self._session() as session:
            result = await session.run(
                """
                MATCH (p:Person {id: $id})
                SET p.number = $number
                RETURN p
                """,
                id=updated.id,
                number=updated.number,
            )
            record = await result.single()
        if not record:
            return None
        return _record_to_person(record)

    async def delete(self, person_id: str) -> bool:
        person_id = validate_person_id(person_id)
        async with self._session() as session:
            result = await session.run(
                "MATCH (p:Person {id: $id}) DETACH DELETE p",
                id=person_id,
            )
            summary = await result.consume()
        return summary.counters.nodes_deleted > 0


def _record_to_person(record) -> Person:
    p = record["p"]
    return Person(
        id=p["id"],
        name=p.get("name") or "",
        number=p.get("number") or "",
        created_at=_iso_to_datetime(p["created_at"]),
    )
