from app.core.repositories.submission_repository import SubmissionRepository


__all__ = ["SubmissionRepository"]
