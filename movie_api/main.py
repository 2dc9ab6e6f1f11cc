"""FastAPI application entry point with lifespan, logging, and middleware."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movie_api.config import settings
from movie_api.errors import (
    ConcurrencyConflictError,
    EmptySelectionError,
    InvalidArgumentError,
    MovieServiceError,
    NotFoundError,
)
from movie_api.models import HealthResponse
from movie_api.routers import movies
from movie_api.services.database import DatabaseService

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    NotFoundError: 404,
    InvalidArgumentError: 400,
    EmptySelectionError: 404,
    ConcurrencyConflictError: 409,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store = DatabaseService(settings.db_path)

    logger.info("Application started: db=%s", settings.db_path)
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Movie API",
    description=(
        "A small REST API over a movie collection: CRUD, alphabetical "
        "title/genre listings, title and genre search, and random picks."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s → %d  (%.0f ms)",
        request.method, request.url.path, response.status_code, elapsed,
    )
    return response


@app.exception_handler(MovieServiceError)
async def movie_service_error_handler(request: Request, exc: MovieServiceError):
    status = next(
        (code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)), 500
    )
    logger.info("%s %s failed: %s (%s)", request.method, request.url.path, exc.code, exc)
    return JSONResponse(
        status_code=status,
        content={"detail": str(exc), "error": exc.code},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal error occurred. Please try again."},
    )


@app.get("/health", response_model=HealthResponse, tags=["system"])
async def health():
    """Check database connectivity."""
    db: DatabaseService = app.state.store
    db_ok = db.health_check()
    return HealthResponse(status="healthy" if db_ok else "degraded", database=db_ok)


app.include_router(movies.router)
