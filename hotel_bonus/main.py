# hotel_bonus/main.py
from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from hotel_bonus.api.auth import router as auth_router
from hotel_bonus.api.bonuses import router as bonuses_router
from hotel_bonus.api.guests import router as guests_router
from hotel_bonus.api.responses import fail
from hotel_bonus.core.config import Settings, get_settings
from hotel_bonus.core.database import make_engine, make_session_factory
from hotel_bonus.core.errors import (
    AuthenticationError,
    AuthValidationError,
    CheckoutValidationError,
    RepositoryError,
)
from hotel_bonus.core.logging_setup import configure_logging
from hotel_bonus.core.security import PasswordChecker
from hotel_bonus.services.guests import ping

# ✅ чтобы SQLAlchemy увидел модели
import hotel_bonus.models  # noqa: F401

logger = logging.getLogger(__name__)


def _public_error(settings: Settings, e: Exception, fallback: str) -> str:
    # сырой текст ошибки: только в development
    return str(e) if settings.is_development else fallback


def _install_error_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(CheckoutValidationError)
    async def _checkout_invalid(request: Request, e: CheckoutValidationError):
        return fail(
            400,
            e.message,
            errors=[{"field": i.field, "message": i.message} for i in e.issues],
        )

    @app.exception_handler(AuthValidationError)
    async def _auth_invalid(request: Request, e: AuthValidationError):
        return fail(400, e.message)

    @app.exception_handler(AuthenticationError)
    async def _auth_failed(request: Request, e: AuthenticationError):
        return fail(401, e.message)

    @app.exception_handler(RepositoryError)
    async def _repository_failed(request: Request, e: RepositoryError):
        logger.error(
            "Repository error on %s %s (retryable=%s)",
            request.method,
            request.url.path,
            e.retryable,
            exc_info=e if logger.isEnabledFor(logging.DEBUG) else None,
        )
        return fail(500, _public_error(settings, e, "❌ Ошибка при работе с базой данных"))

    @app.exception_handler(RequestValidationError)
    async def _request_invalid(request: Request, e: RequestValidationError):
        return fail(400, "Некорректный запрос")

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, e: StarletteHTTPException):
        if e.status_code == 404:
            return fail(404, "🚫 Маршрут не найден")
        return fail(e.status_code, str(e.detail))

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return fail(500, _public_error(settings, e, "Внутренняя ошибка сервера"))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    # без пароля (или явного AUTH_DISABLED) не стартуем
    checker = PasswordChecker.from_settings(settings)

    engine = make_engine(settings)

    app = FastAPI(title="Hotel Guests API")
    app.state.settings = settings
    app.state.password_checker = checker
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        allow_credentials=True,
    )

    _install_error_handlers(app, settings)

    app.include_router(auth_router, prefix="/api")
    app.include_router(guests_router, prefix="/api")
    app.include_router(bonuses_router, prefix="/api")

    @app.get("/health")
    def health():
        db = app.state.session_factory()
        try:
            ping(db)
        except RepositoryError as e:
            logger.error("Health check: database unavailable")
            return fail(
                500,
                "DB connection error",
                status="❌ Error",
                database="Disconnected",
                error=_public_error(settings, e, "DB connection error"),
            )
        finally:
            db.close()
        return {
            "status": "✅ OK",
            "database": "Connected",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/")
    def root():
        return {
            "message": "🚀 Hotel Guests API работает!",
            "status": "OK",
            "build": settings.BUILD_VERSION,
        }

    logger.info(
        "App configured: env=%s, auth=%s, origins=%s",
        settings.APP_ENV,
        "disabled" if checker.disabled else "enabled",
        ",".join(settings.allowed_origins),
    )
    return app
