import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from onboarding.core.config import Settings, get_settings
from onboarding.core.database import build_engine, build_session_factory, init_db
from onboarding.core.errors import AppError
from onboarding.core.logging import configure_logging
from onboarding.routers import auth, users, well_known
from onboarding.services.auth_service import current_millis
from onboarding.services.password import PasswordHasher
from onboarding.services.tokens import TokenIssuer

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    clock: Callable[[], int] = current_millis,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_db(engine)
        logger.info("Database ready", extra={"app": settings.APP_NAME})
        yield
        engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Multi-role rental onboarding and session authentication",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.password_hasher = PasswordHasher.from_settings(settings)
    app.state.token_issuer = TokenIssuer(settings)
    app.state.clock = clock

    # Credentialed cross-origin requests from the one configured site only
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.SITE_URL.rstrip("/")],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            field = ".".join(str(part) for part in errors[0]["loc"] if part != "body")
            message = f"Invalid request: {field or 'body'} - {errors[0]['msg']}"
        else:
            message = "Invalid request"
        return JSONResponse(status_code=400, content={"detail": message})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    app.include_router(auth.router)
    app.include_router(well_known.router)
    app.include_router(users.router)

    @app.get("/")
    def root():
        return {
            "message": settings.APP_NAME,
            "version": "1.0.0",
            "status": "active",
            "documentation": "/docs"
        }

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "service": settings.APP_NAME,
            "timestamp": datetime.now(timezone.utc)
        }

    return app
