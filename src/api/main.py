"""
FastAPI backend: phonebook REST API.
Run with uvicorn: uvicorn api.main:app --reload (or python -m api).
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.middleware import RequestLoggingMiddleware
from phonebook.application import (
    Invalid,
    InvalidId,
    NotFound,
    PersonInput,
    PersonRecord,
    PersonRepository,
    PhonebookService,
)
from phonebook.infrastructure import (
    Neo4jPersonRepository,
    Settings,
    load_env,
    open_driver,
)

logger = logging.getLogger(__name__)

UNKNOWN_ENDPOINT = {"error": "unknown endpoint"}
MALFORMATTED_ID = {"error": "malformatted id"}


class PersonBody(BaseModel):
    name: str | None = None
    number: str | None = None


class PersonOut(BaseModel):
    id: str
    name: str
    number: str

    @classmethod
    def from_record(cls, record: PersonRecord) -> "PersonOut":
        return cls(id=record.id, name=record.name, number=record.number)


def format_timestamp(dt: datetime) -> str:
    """Human-readable server time, e.g. 'Mon Oct 19 2026 11:31:02 GMT+0000 (UTC)'."""
    dt = dt if dt.tzinfo else dt.astimezone()
    return dt.strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")


def get_service(request: Request) -> PhonebookService:
    return request.app.state.service


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            return "malformatted JSON body"
        loc = ".".join(
            str(x) for x in err.get("loc", ()) if x != "body" and not isinstance(x, int)
        )
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "invalid request body"


def create_app(
    repository: PersonRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the application.

    With an injected repository the service is ready immediately. Without one,
    the lifespan opens a Neo4j driver from settings and closes it on shutdown.
    """
    settings = settings or Settings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if repository is not None:
            yield
            return
        app.state.driver = open_driver(settings)
        try:
            app.state.service = PhonebookService(
                Neo4jPersonRepository(app.state.driver, database=settings.neo4j_database)
            )
            logger.info("Using Neo4j at %s", settings.neo4j_uri)
            yield
        finally:
            await app.state.driver.close()
            app.state.driver = None

    app = FastAPI(title="Phonebook API", lifespan=lifespan)
    app.state.driver = None
    if repository is not None:
        app.state.service = PhonebookService(repository)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content=UNKNOWN_ENDPOINT)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": "internal server error"})

    # --- REST: health ---

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    # --- REST: persons ---

    @app.get("/api/persons", response_model=list[PersonOut])
    async def list_persons(request: Request):
        records = await get_service(request).list_persons()
        return [PersonOut.from_record(r) for r in records]

    @app.get("/info", response_class=HTMLResponse)
    async def info(request: Request):
        result = await get_service(request).info()
        return HTMLResponse(
            f"<p>Phonebook has info for {result.count} people</p>"
            f"<p>{format_timestamp(result.generated_at)}</p>"
        )

    @app.get("/api/persons/{person_id}")
    async def get_person(person_id: str, request: Request):
        result = await get_service(request).get_person(person_id)
        if isinstance(result, InvalidId):
            return JSONResponse(status_code=400, content=MALFORMATTED_ID)
        if isinstance(result, NotFound):
            return Response(status_code=404)
        return PersonOut.from_record(result)

    @app.delete("/api/persons/{person_id}")
    async def delete_person(person_id: str, request: Request):
        result = await get_service(request).delete_person(person_id)
        if isinstance(result, InvalidId):
            return JSONResponse(status_code=400, content=MALFORMATTED_ID)
        return Response(status_code=204)

    @app.post("/api/persons", response_model=PersonOut)
    async def save_person(body: PersonBody, request: Request):
        result = await get_service(request).save_person(
            PersonInput(name=body.name, number=body.number)
        )
        if isinstance(result, Invalid):
            return JSONResponse(status_code=400, content={"error": result.reason})
        return PersonOut.from_record(result.person)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


load_env()
settings = Settings.from_env()
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=settings.log_level,
)
app = create_app(settings=settings)
