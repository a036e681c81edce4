from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dto.auth import SessionStatus
from app.infrastructure.config.config import AppConfig
from app.infrastructure.errors.auth_errors import AuthError
from app.infrastructure.errors.rate_limit_errors import RateLimitError
from app.infrastructure.logging import get_logger
from app.infrastructure.rate_limit import get_client_ip
import app.core.repositories as repositories
import app.core.services as services


logger = get_logger(__name__)


async def get_db_session(
    request: Request,
) -> AsyncGenerator[AsyncSession, None]:
    session = await request.app.state.db_connection.get_session()
    try:
        yield session
    finally:
        await session.close()


async def get_app_config(request: Request) -> AppConfig:
    return request.app.state.app_config


async def get_submission_service(session=Depends(get_db_session)) -> services.SubmissionService:
    return services.SubmissionService(
        repository=repositories.SubmissionRepository(session=session)
    )


async def get_auth_service(request: Request) -> services.AuthService:
    return request.app.state.auth_service


async def get_session_service(request: Request) -> services.SessionService:
    return request.app.state.session_service


async def get_session_token(
    request: Request,
    session_service: Annotated[services.SessionService, Depends(get_session_service)],
) -> str | None:
    return request.cookies.get(session_service.cookie_name)


async def get_session_status(
    session_service: Annotated[services.SessionService, Depends(get_session_service)],
    token: Annotated[str | None, Depends(get_session_token)],
) -> SessionStatus:
    return await session_service.validate(token)


async def get_current_admin_dependency(
    session_status: Annotated[SessionStatus, Depends(get_session_status)],
) -> SessionStatus:
    if not session_status.authenticated:
        raise AuthError()
    return session_status


async def strict_rate_limit(
    request: Request,
    app_config: Annotated[AppConfig, Depends(get_app_config)],
) -> None:
    client_ip = get_client_ip(request, app_config.TRUST_PROXY)
    result = await request.app.state.strict_limiter.hit(client_ip)
    if not result.allowed:
        logger.warning("strict_rate_limit_exceeded", client=client_ip, path=request.url.path)
        raise RateLimitError(retry_after=result.retry_after)
