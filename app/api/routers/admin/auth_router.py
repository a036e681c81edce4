from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from app.api.dependencies import (
    get_app_config,
    get_auth_service,
    get_session_service,
    get_session_status,
    get_session_token,
    strict_rate_limit,
)
from app.core.dto.auth import AuthStatusModel, LoginModel, SessionStatus
from app.core.dto.common import SuccessResponse
from app.core.services.auth_service import AuthService
from app.core.services.session_service import SessionService
from app.infrastructure.config.config import AppConfig
from app.infrastructure.errors.auth_errors import InvalidCredentials
from app.infrastructure.errors.base import ValidationError
from app.infrastructure.errors.rate_limit_errors import RateLimitError
from app.infrastructure.logging import get_logger
from app.infrastructure.rate_limit import get_client_ip
from app.utils.error_extra import error_response


logger = get_logger(__name__)
router = APIRouter()


def _set_session_cookie(
    response: Response, session_service: SessionService, token: str, secure: bool
) -> None:
    response.set_cookie(
        key=session_service.cookie_name,
        value=token,
        max_age=session_service.max_age_seconds,
        path="/",
        httponly=True,
        secure=secure,
        samesite="lax",
    )


@router.post(
    "/login",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(strict_rate_limit)],
    responses={
        **error_response(ValidationError),
        **error_response(InvalidCredentials),
        **error_response(RateLimitError),
    },
)
async def login(
    form: LoginModel,
    request: Request,
    response: Response,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    session_service: Annotated[SessionService, Depends(get_session_service)],
    current_token: Annotated[str | None, Depends(get_session_token)],
    app_config: Annotated[AppConfig, Depends(get_app_config)],
) -> SuccessResponse:
    """
    Log the administrator in.

    On success a fresh server-side session is created and its signed id is
    set as an HTTP-only cookie. Any session the client already held is
    discarded first.

    Raises:
        InvalidCredentials (401): wrong username or password.
    """
    if not await auth_service.verify(form.username, form.password):
        logger.warning("admin_login_failed", client=get_client_ip(request, app_config.TRUST_PROXY))
        raise InvalidCredentials()

    await session_service.destroy(current_token)
    token = await session_service.create(form.username)
    _set_session_cookie(response, session_service, token, secure=app_config.is_production)
    return SuccessResponse()


@router.post(
    "/logout",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
)
async def logout(
    response: Response,
    session_service: Annotated[SessionService, Depends(get_session_service)],
    current_token: Annotated[str | None, Depends(get_session_token)],
    app_config: Annotated[AppConfig, Depends(get_app_config)],
) -> SuccessResponse:
    await session_service.destroy(current_token)
    response.delete_cookie(
        key=session_service.cookie_name,
        path="/",
        httponly=True,
        secure=app_config.is_production,
        samesite="lax",
    )
    return SuccessResponse()


@router.get("/check-auth")
async def check_auth(
    session_status: Annotated[SessionStatus, Depends(get_session_status)],
) -> AuthStatusModel:
    return AuthStatusModel(authenticated=session_status.authenticated)
