from app.core.services.auth_service import AuthService
from app.core.services.session_service import SessionService
from app.core.services.submission_service import SubmissionService


__all__ = ["AuthService", "SessionService", "SubmissionService"]
