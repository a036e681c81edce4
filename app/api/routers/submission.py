from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import get_submission_service, strict_rate_limit
from app.core.dto.common import SuccessResponse
from app.core.dto.submission import SubmissionCreateModel
from app.core.services.submission_service import SubmissionService
from app.infrastructure.errors.base import StorageError, ValidationError
from app.infrastructure.errors.rate_limit_errors import RateLimitError
from app.utils.error_extra import error_response


router = APIRouter()


@router.post(
    "/submit",
    response_model=SuccessResponse,
    response_model_exclude_none=True,
    dependencies=[Depends(strict_rate_limit)],
    responses={
        **error_response(ValidationError),
        **error_response(RateLimitError),
        **error_response(StorageError),
    },
    summary="Submit a contact request",
)
async def submit(
    data: SubmissionCreateModel,
    service: Annotated[SubmissionService, Depends(get_submission_service)],
) -> SuccessResponse:
    """
    Store a public contact-form submission.

    ``full_name``, ``phone`` and ``message`` are required; ``email`` is
    optional but must be a valid address when given.
    """
    await service.create_submission(data)
    return SuccessResponse(message="Submission received")
