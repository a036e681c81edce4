from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.repositories.base import SqlAlchemyRepository
from app.infrastructure.database.models.submission import Submission
from app.infrastructure.errors.base import StorageError, ValidationError
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)

REQUIRED_FIELDS = ("full_name", "phone", "message")


class SubmissionRepository(SqlAlchemyRepository[Submission]):
    """Append-only store of contact requests."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Submission)

    async def insert(
        self,
        full_name: str,
        phone: str,
        email: str | None,
        message: str,
    ) -> int:
        values = {"full_name": full_name, "phone": phone, "message": message}
        missing = [field for field in REQUIRED_FIELDS if not (values[field] or "").strip()]
        if missing:
            raise ValidationError()

        submission = Submission(full_name=full_name, phone=phone, email=email or None, message=message)
        try:
            created = await self.add_item(submission)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("submission_insert_failed", error=str(e), exc_info=True)
            raise StorageError()

        return created.id

    async def list_all(self) -> Sequence[Submission]:
        try:
            return await self.get_all_items(Submission.submitted_at.desc(), Submission.id.desc())
        except SQLAlchemyError as e:
            logger.error("submission_list_failed", error=str(e), exc_info=True)
            raise StorageError()
