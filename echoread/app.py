import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from echoread.config import LOG_LEVEL
from echoread.errors import field_errors
from echoread.routers import (
    authors,
    books,
    bookmarks,
    categories,
    navigation,
    notes,
    reading,
    subscriptions,
    summaries,
    users,
)

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        root.addHandler(handler)
    logging.getLogger("echoread").setLevel(getattr(logging, LOG_LEVEL, logging.INFO))


def create_app() -> FastAPI:
    _configure_logging()
    app = FastAPI(title="Echoread", version="0.1.0")
    app.include_router(users.router)
    app.include_router(categories.router)
    app.include_router(authors.router)
    app.include_router(books.router)
    app.include_router(summaries.router)
    app.include_router(reading.router)
    app.include_router(bookmarks.router)
    app.include_router(notes.router)
    app.include_router(subscriptions.router)
    app.include_router(navigation.router)

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=422, content={"detail": field_errors(exc.errors())})

    @app.exception_handler(IntegrityError)
    async def _integrity_error_handler(request: Request, exc: IntegrityError):
        # Storage message is passed through as-is
        return JSONResponse(status_code=409, content={"detail": str(exc.orig)})

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    return app


app = create_app()
