from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routers import api_routers
from app.core.repositories.submission_repository import SubmissionRepository
from app.core.services.auth_service import AuthService
from app.core.services.session_service import SessionService
from app.infrastructure.config.config import (
    ADMIN_CONFIG,
    APP_CONFIG,
    DB_CONFIG,
    RATE_LIMIT_CONFIG,
    SESSION_CONFIG,
    AdminConfig,
    AppConfig,
    DBConfig,
    RateLimitConfig,
    SessionConfig,
)
from app.infrastructure.database.adapters.sqlite_connection import DatabaseConnection
from app.infrastructure.errors.handlers import register_exception_handlers
from app.infrastructure.logging.logger import configure_logging, get_logger
from app.infrastructure.middleware import GlobalRateLimitMiddleware, LoggingMiddleware
from app.infrastructure.rate_limit import FixedWindowRateLimiter


logger = get_logger(__name__)


def create_app(
    app_config: AppConfig = APP_CONFIG,
    admin_config: AdminConfig = ADMIN_CONFIG,
    session_config: SessionConfig = SESSION_CONFIG,
    db_config: DBConfig = DB_CONFIG,
    rate_limit_config: RateLimitConfig = RATE_LIMIT_CONFIG,
) -> FastAPI:
    configure_logging(level=app_config.LOG_LEVEL, json_logs=app_config.is_production)
    db_connection = DatabaseConnection(db_config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "application_startup",
            app_name=app_config.APP_NAME,
            env=app_config.APP_ENV,
            debug=app_config.DEBUG,
        )

        await db_connection.create_tables()
        async with await db_connection.get_session() as session:
            submissions = await SubmissionRepository(session=session).count()
        logger.info("database_connected", path=db_config.DB_PATH, submissions=submissions)

        yield

        await db_connection.dispose()
        logger.info("application_shutdown")

    app = FastAPI(
        title=app_config.APP_NAME,
        debug=app_config.DEBUG,
        lifespan=lifespan,
    )

    app.state.app_config = app_config
    app.state.db_connection = db_connection
    app.state.auth_service = AuthService(admin_config)
    app.state.session_service = SessionService(session_config)
    app.state.strict_limiter = FixedWindowRateLimiter(
        max_requests=rate_limit_config.STRICT_MAX_REQUESTS,
        window_seconds=rate_limit_config.STRICT_WINDOW_SECONDS,
    )
    app.state.global_limiter = FixedWindowRateLimiter(
        max_requests=rate_limit_config.GLOBAL_MAX_REQUESTS,
        window_seconds=rate_limit_config.GLOBAL_WINDOW_SECONDS,
    )

    app.add_middleware(
        GlobalRateLimitMiddleware,
        limiter=app.state.global_limiter,
        trust_proxy=app_config.TRUST_PROXY,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_config.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)
    app.include_router(api_routers)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=APP_CONFIG.HOST, port=APP_CONFIG.PORT, log_config=None)
