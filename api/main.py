import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.shared.dtos import HealthCheckResponse
from api.shared.entities.registry import BaseEntity
from api.shared.exceptions import MaternalAPIException
from core.logging import configure_logging
from core.settings import Settings, get_settings
from di.container import ApplicationContainer as DependencyContainer

logger = logging.getLogger("maternal")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "*",
    "Access-Control-Allow-Headers": "*",
}


class CustomFastAPI(FastAPI):
    container: DependencyContainer


async def bootstrap_schema(db_resource) -> None:
    """Create the users and chats tables if they do not exist yet."""
    async with db_resource.engine.begin() as _conn:
        await _conn.execute(text("SELECT 1"))
        await _conn.run_sync(BaseEntity.metadata.create_all)
    for table_name in BaseEntity.metadata.tables:
        logger.info(f"✅ {table_name.capitalize()} table ready")


@asynccontextmanager
async def lifespan(_app: CustomFastAPI):
    logger.info("Starting application initialization...")
    start_time = time.time()

    try:
        logger.info("Initializing database connection...")
        db_start = time.time()
        db_resource = _app.container.infrastructure.database()
        await db_resource.init()
        await bootstrap_schema(db_resource)
        logger.info(
            f"✅ Database connection established in {time.time() - db_start:.2f}s"
        )
        logger.info(
            f"✅ Application startup completed in {time.time() - start_time:.2f}s"
        )
    except Exception as e:
        logger.exception(f"❌ Failed to initialize application: {str(e)}")
        raise

    yield

    try:
        db_resource = _app.container.infrastructure.database()
        if db_resource:
            await db_resource.shutdown()
        logger.info("Application shutdown complete")
    except Exception:
        logger.exception("Error during shutdown")


def _error_body(message: str, details: Optional[dict] = None) -> dict:
    body = {"error": message}
    if details:
        body["details"] = details
    return body


def register_exception_handlers(_app: FastAPI) -> None:
    @_app.exception_handler(MaternalAPIException)
    async def maternal_exception_handler(request: Request, exc: MaternalAPIException):
        if exc.status_code >= 500:
            logger.error(
                f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}"
            )
        else:
            logger.info(
                f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}"
            )
        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(_error_body(exc.message, exc.details)),
        )

    @_app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail)),
        )

    @_app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        return JSONResponse(
            status_code=400,
            content=_error_body(
                "Invalid request", {"errors": jsonable_encoder(exc.errors())}
            ),
        )

    @_app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content=_error_body("Internal Server Error"),
            headers=CORS_HEADERS,
        )


def create_fastapi_app(settings: Optional[Settings] = None) -> CustomFastAPI:
    settings = settings or get_settings()
    configure_logging(settings.APP)

    _app = CustomFastAPI(
        title="Maternal Health Advice API",
        description="Accounts, chat history and Gemini-backed maternal health advice",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Initialize dependency container
    _app.container = DependencyContainer()
    _app.container.config.from_dict(settings.model_dump())
    _app.container.init_resources()

    # Permissive CORS; every OPTIONS request is answered here with 204
    @_app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    register_exception_handlers(_app)

    # Include feature routers
    from api.features.advice.router import router as advice_router
    from api.features.auth.router import router as auth_router
    from api.features.conversation.router import router as conversation_router

    _app.include_router(auth_router, tags=["Auth"])
    _app.include_router(advice_router, prefix="/api", tags=["Advice"])
    _app.include_router(conversation_router, prefix="/api/chats", tags=["Chats"])

    @_app.get("/health", response_model=HealthCheckResponse, tags=["Health"])
    async def health():
        return HealthCheckResponse(status="ok")

    return _app


app = create_fastapi_app()
