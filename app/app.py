import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import app.api.routes_health as routes_health
import app.api.routes_movie as routes_movie
import app.api.routes_screening as routes_screening
from app.core.config import settings
from app.core.exceptions import CinemaError, ValidationFailedError
from app.db import session
from app.scripts import seed_data

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up...")
    await session.init_db()
    if settings.ENV == 'development' and settings.SEED_DATA:
        await seed_data.seed()
    yield
    logger.info("Shutting down...")
    await session.engine.dispose()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=settings.APP_DESCRIPTION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        routes_health.router,
        prefix=settings.API_PREFIX
    )

    app.include_router(
        routes_movie.router,
        prefix=settings.API_PREFIX
    )

    app.include_router(
        routes_screening.router,
        prefix=settings.API_PREFIX
    )

    @app.exception_handler(CinemaError)
    async def cinema_error_handler(request: Request, ex: CinemaError):
        content = {"message": ex.message}
        if isinstance(ex, ValidationFailedError):
            content["errors"] = ex.errors
        return JSONResponse(status_code=ex.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, ex: RequestValidationError):
        errors: dict[str, list[str]] = {}
        for error in ex.errors():
            field = str(error["loc"][-1]) if error["loc"] else "request"
            errors.setdefault(field, []).append(error["msg"])
        return JSONResponse(status_code=422, content={"message": "Validation failed", "errors": errors})

    @app.get("/")
    async def root():
        return {"message": "Cinema API is running"}

    return app


app = create_app()
