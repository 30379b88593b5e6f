"""
Run the phonebook API: python -m api (from repo root, with .env or env vars set).
"""

import logging

import uvicorn

from api.main import app, settings

logger = logging.getLogger(__name__)


def main() -> None:
    logger.info("Server running on port %s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
