from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import get_submission_service
from app.core.dto.submission import SubmissionListResponse
from app.core.services.submission_service import SubmissionService
from app.infrastructure.errors.auth_errors import AuthError
from app.infrastructure.errors.base import StorageError
from app.utils.error_extra import error_response


router = APIRouter()


@router.get(
    "/submissions",
    responses={**error_response(AuthError), **error_response(StorageError)},
    summary="List contact submissions, newest first",
)
async def list_submissions(
    service: Annotated[SubmissionService, Depends(get_submission_service)],
) -> SubmissionListResponse:
    return SubmissionListResponse(data=await service.get_submissions())
