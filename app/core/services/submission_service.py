from app.core.dto.submission import SubmissionCreateModel, SubmissionModel
from app.core.repositories.submission_repository import SubmissionRepository
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)


class SubmissionService:

    def __init__(self, repository: SubmissionRepository):
        self.repository = repository

    async def create_submission(self, data: SubmissionCreateModel) -> int:
        submission_id = await self.repository.insert(
            full_name=data.full_name,
            phone=data.phone,
            email=data.email,
            message=data.message,
        )
        logger.info("submission_created", submission_id=submission_id, has_email=data.email is not None)
        return submission_id

    async def get_submissions(self) -> list[SubmissionModel]:
        submissions = await self.repository.list_all()
        return [SubmissionModel.model_validate(submission, from_attributes=True) for submission in submissions]
