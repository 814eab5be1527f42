"""
FastAPI application factory.

* Registers the school and health routes.
* Maps ``ClientError`` to 400 and ``StorageError`` to 500 JSON bodies.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.routes import health, schools
from src.config import settings
from src.domain.entities import ClientError, StorageError

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"error": exc.message})


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"error": exc.message, "details": exc.details},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("School Locator API started")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="School Locator API",
        description=(
            "Registers schools and lists them ordered by great-circle "
            "distance from a caller-supplied coordinate."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)

    app.include_router(schools.router)
    app.include_router(health.router)

    return app
