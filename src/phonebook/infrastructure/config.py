"""Settings read from the environment once at startup, plus store driver construction."""

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv
from neo4j import AsyncGraphDatabase

# Repo root: src/phonebook/infrastructure/config.py -> four levels up.
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def load_env() -> None:
    """Load .env from repo root or current dir (first one found)."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


@dataclass(frozen=True)
class Settings:
    port: int = 3001
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"
    neo4j_database: str | None = None
    static_dir: str = "dist"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            port=int(env.get("PORT", "3001").strip() or "3001"),
            neo4j_uri=env.get("NEO4J_URI", "bolt://localhost:7687").strip(),
            neo4j_user=env.get("NEO4J_USER", "neo4j").strip(),
            neo4j_password=env.get("NEO4J_PASSWORD", "password").strip(),
            neo4j_database=(env.get("NEO4J_DATABASE") or "").strip() or None,
            static_dir=env.get("STATIC_DIR", "dist").strip(),
            log_level=env.get("LOG_LEVEL", "INFO").strip().upper(),
        )

    def with_password(self, password: str) -> "Settings":
        return replace(self, neo4j_password=password)


def open_driver(settings: Settings):
    """Create an AsyncDriver. Caller closes it."""
    return AsyncGraphDatabase.driver(
        settings.neo4j_uri,
        auth=(settings.neo4j_user, settings.neo4j_password),
    )
