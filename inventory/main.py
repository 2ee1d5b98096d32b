"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory.api import categories, items, lists
from inventory.api.dependencies import get_store
from inventory.config import get_settings
from inventory.exceptions import (
    IntegrityError,
    InvalidArgumentError,
    PersistenceError,
    ValidationError,
)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    # Startup: open the store so a corrupt file fails fast
    store = app.dependency_overrides.get(get_store, get_store)()
    logger.info(f"Store ready at {store.filepath}: {store.counts()}")
    yield


app = FastAPI(
    title="Inventory API",
    description="Self-hosted inventory of categories, items and lists",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for the browser UI during development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request parameters or bodies are client errors (400)."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(InvalidArgumentError)
@app.exception_handler(ValidationError)
async def store_validation_handler(request: Request, exc: ValueError):
    """Rejected store input."""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


@app.exception_handler(PersistenceError)
async def persistence_handler(request: Request, exc: PersistenceError):
    """The change is applied in memory but could not be written to disk."""
    logger.error(f"{request.method} {request.url.path} not persisted: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)}
    )


@app.exception_handler(IntegrityError)
async def integrity_handler(request: Request, exc: IntegrityError):
    logger.error(
        f"Store integrity check failed on {request.method} {request.url.path}", exc_info=exc
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "internal store error"},
    )


# Register routers
app.include_router(categories.router)
app.include_router(items.router)
app.include_router(lists.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
