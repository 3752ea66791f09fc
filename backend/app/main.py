"""
Application entry point for the course platform backend.

Builds the FastAPI app, wires routers, CORS, request logging and error
handlers, and manages the MongoDB client over the app's lifetime.
"""

from contextlib import asynccontextmanager
from typing import Optional
from bson.errors import InvalidId
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo import MongoClient
from pymongo.errors import PyMongoError
from starlette.concurrency import run_in_threadpool
import logging
import time

from app.core.config import settings
from app.core.database import check_database_connection, create_client
from app.core.logging_config import setup_logging
from app.routers import api_router


setup_logging()
logger = logging.getLogger(__name__)
request_logger = logging.getLogger("course_platform.requests")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A failed connection is logged only; the server still starts.
    await run_in_threadpool(check_database_connection, app.state.mongo_client)
    try:
        yield
    finally:
        app.state.mongo_client.close()
        logger.info("MongoDB client closed")


async def storage_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.exception(f"Database error on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


async def invalid_id_handler(request: Request, exc: InvalidId) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


def create_app(mongo_client: Optional[MongoClient] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        mongo_client: Optional client to use instead of one built from
            ``DATABASE_URL``

    Returns:
        FastAPI: Configured application
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.mongo_client = mongo_client if mongo_client is not None else create_client()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials="*" not in settings.BACKEND_CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        request_logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f} ms)"
        )
        return response

    app.add_exception_handler(PyMongoError, storage_error_handler)
    app.add_exception_handler(InvalidId, invalid_id_handler)

    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Liveness check."""
        return "Route is working"

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on ``HOST:PORT``."""
    import uvicorn

    logger.info(f"Course platform listening on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
