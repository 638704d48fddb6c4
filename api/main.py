import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from auth import router as auth_router
from core import db, errors, health
from core.config import Settings, load_settings
from core.log import configure_logging, log_requests
from tracking import router as tracking_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool(app.state.settings.database_url)
    try:
        yield
    finally:
        await db.close_pool()


async def _api_error_handler(_: Request, exc: errors.ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = errors.describe_validation_errors(list(exc.errors()))
    logger.info("request_invalid path=%s message=%s", request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error path=%s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server error"},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    # Fails here, at boot, when JWT_SECRET is missing.
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="shipment tracking api", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_origin_regex=settings.cors_origin_regex,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(errors.ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(tracking_router.public_router, prefix="/tracking", tags=["public"])
    app.include_router(tracking_router.public_router, prefix="/public/tracking", tags=["public"])
    app.include_router(auth_router.router, tags=["auth"])
    app.include_router(tracking_router.admin_router, tags=["admin"])

    @app.get("/health")
    async def health_check() -> JSONResponse:
        healthy, body = await health.report(app.state.settings)
        return JSONResponse(
            status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body,
        )

    @app.get("/")
    def root() -> dict:
        return {"message": "shipment tracking api"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
