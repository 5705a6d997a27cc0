"""projecthub: open source project tracker service."""
from __future__ import annotations
import logging
import sys
from typing import Optional
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from projecthub import __version__
from projecthub.api import ADMIN_PATH, admin_portal, projects_router
from projecthub.api._state import BodyReadError
from projecthub.config import ConfigError, Settings, load_settings
from projecthub.store import ProjectStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[ProjectStore] = None) -> FastAPI:
    """Build the app. Raises ConfigError when the admin password is missing."""
    settings = settings or load_settings()

    app = FastAPI(title="projecthub", version=__version__)
    app.state.settings = settings
    app.state.store = store if store is not None else ProjectStore.seeded()

    @app.exception_handler(BodyReadError)
    async def body_read_failed(request: Request, exc: BodyReadError):
        logger.error("Failed to read request body: %s", exc)
        return PlainTextResponse(str(exc), status_code=500)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        # Unrouted verbs get a plain-text 405 on every path.
        if exc.status_code == 405:
            return PlainTextResponse("Method not allowed", status_code=405, headers=exc.headers)
        return await http_exception_handler(request, exc)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": __version__}

    app.include_router(projects_router, tags=["projects"])
    # Plain route without a method list: the admin page answers any verb.
    app.add_route(ADMIN_PATH, admin_portal)
    return app


def run() -> None:
    """Console entry point: serve the app until interrupted."""
    try:
        settings = load_settings()
    except ConfigError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("%s", exc)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(settings)
    logger.info("Start server on %s:%d", settings.host, settings.port)
    # uvicorn exits with status 1 when the port cannot be bound.
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
