# fruit_app/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fruit_app.api.fruits import router as fruits_router
from fruit_app.core.config import Settings
from fruit_app.core.exceptions import (
    ConstraintViolationError,
    StorageUnavailableError,
)
from fruit_app.core.logging_config import setup_logging
from fruit_app.db.engine import get_engine
from fruit_app.repositories.fruit_repository import (
    FruitRepository,
    SqlFruitRepository,
)
from fruit_app.services.fruit_service import FruitService

logger = logging.getLogger(__name__)


def _validation_errors(exc: RequestValidationError) -> list:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append(
            {
                "field": ".".join(loc) or "body",
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
            }
        )
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        errors = _validation_errors(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
        return JSONResponse(
            status_code=400,
            content={"detail": "Validation failed", "errors": errors},
        )

    @app.exception_handler(ConstraintViolationError)
    async def constraint_handler(request: Request, exc: ConstraintViolationError):
        return JSONResponse(status_code=409, content={"detail": "Constraint violation"})

    @app.exception_handler(StorageUnavailableError)
    async def storage_handler(request: Request, exc: StorageUnavailableError):
        return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[FruitRepository] = None,
) -> FastAPI:
    """
    Build the FastAPI app; engine -> repository -> service is wired on startup.

    Pass ``repository`` to run the HTTP layer over something other than the
    SQL-backed repository; no engine is built and no schema is created then.
    """
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)

        engine = None
        repo = repository
        if repo is None:
            engine = get_engine(settings.database_url, echo=settings.database_echo)
            repo = SqlFruitRepository(engine)
            if settings.create_schema_on_startup:
                repo.create_schema()
                logger.info("Schema ready on %s", engine.url)

        app.state.fruit_service = FruitService(repo)
        yield
        if engine is not None:
            engine.dispose()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        lifespan=lifespan,
    )

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(fruits_router)
    register_exception_handlers(app)
    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = Settings()
    uvicorn.run("fruit_app:app", host=settings.host, port=settings.port)
