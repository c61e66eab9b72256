"""FastAPI application for the Scratchpad REST API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scratchpad.api.middleware import api_key_middleware
from scratchpad.api.routes import folders, health, notes
from scratchpad.core.config import (
    SCRATCHPAD_CORS_ORIGINS,
    SCRATCHPAD_HOST,
    SCRATCHPAD_PORT,
)
from scratchpad.vault.errors import NoteNotFoundError, StorageError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Scratchpad API starting up...")
    yield
    logger.info("Scratchpad API shutting down...")


async def note_not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Scratchpad API",
        description="REST API for Scratchpad notes and folders",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=SCRATCHPAD_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(api_key_middleware)

    # Handlers resolve by exception MRO: NoteNotFoundError -> 404
    app.add_exception_handler(NoteNotFoundError, note_not_found_handler)
    app.add_exception_handler(StorageError, storage_error_handler)

    # Include routers
    app.include_router(health.router, prefix="/api/v1", tags=["Health"])
    app.include_router(notes.router, prefix="/api/v1", tags=["Notes"])
    app.include_router(folders.router, prefix="/api/v1", tags=["Folders"])

    return app


# Create the default app instance
app = create_app()


def run_server(host: str | None = None, port: int | None = None):
    """Run the API server."""
    import uvicorn

    uvicorn.run(
        "scratchpad.api.app:app",
        host=host or SCRATCHPAD_HOST or "127.0.0.1",
        port=port or SCRATCHPAD_PORT,
        reload=False,
    )


if __name__ == "__main__":
    run_server()
