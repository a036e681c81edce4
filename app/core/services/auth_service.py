import secrets

from passlib.context import CryptContext
from passlib.exc import UnknownHashError
from starlette.concurrency import run_in_threadpool

from app.infrastructure.config.config import ADMIN_CONFIG, AdminConfig
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class AuthService:
    """Checks a username/password pair against the configured admin credential.

    Every call costs one hash verification, whether or not the username
    matches, so timing does not reveal which half of the pair was wrong.
    """

    def __init__(self, config: AdminConfig = ADMIN_CONFIG):
        self._username = config.ADMIN_USERNAME
        self._password_hash = config.ADMIN_PASSWORD_HASH
        self._dummy_hash = pwd_context.hash(secrets.token_urlsafe(16))

        if not self._password_hash:
            logger.warning("admin_password_hash_not_configured")

    def _username_matches(self, candidate: str) -> bool:
        return secrets.compare_digest(candidate.encode("utf-8"), self._username.encode("utf-8"))

    def _verify_password(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except (UnknownHashError, ValueError, TypeError):
            logger.error("admin_password_hash_invalid")
            return False

    def verify_sync(self, candidate_username: str, candidate_password: str) -> bool:
        username_ok = self._username_matches(candidate_username)
        if username_ok and self._password_hash:
            return self._verify_password(candidate_password, self._password_hash)

        self._verify_password(candidate_password, self._dummy_hash)
        return False

    async def verify(self, candidate_username: str, candidate_password: str) -> bool:
        return await run_in_threadpool(self.verify_sync, candidate_username, candidate_password)
