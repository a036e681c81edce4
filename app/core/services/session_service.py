import secrets
from datetime import datetime, timedelta, timezone

from itsdangerous import BadSignature, TimestampSigner

from app.core.dto.auth import SessionStatus
from app.infrastructure.config.config import SESSION_CONFIG, SessionConfig
from app.infrastructure.logging import get_logger
from app.infrastructure.sessions import MemorySessionStore, SessionRecord, SessionStore


logger = get_logger(__name__)


class SessionService:
    """Issues, validates and destroys admin sessions.

    The cookie carries a random session id signed with the session secret;
    the session itself lives in ``store``. Expiry is absolute, counted from
    issuance.
    """

    def __init__(
        self,
        config: SessionConfig = SESSION_CONFIG,
        store: SessionStore | None = None,
        ttl: timedelta | None = None,
    ):
        secret = config.SESSION_SECRET
        if not secret:
            secret = secrets.token_hex(32)
            logger.warning("session_secret_not_configured", detail="using a random per-process secret")

        self.store = store if store is not None else MemorySessionStore()
        self.ttl = ttl if ttl is not None else timedelta(hours=config.SESSION_TTL_HOURS)
        self.cookie_name = config.SESSION_COOKIE_NAME
        self._signer = TimestampSigner(secret, salt="admin-session")

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    @property
    def max_age_seconds(self) -> int:
        return int(self.ttl.total_seconds())

    def _unsign(self, token: str | None) -> str | None:
        if not token:
            return None
        try:
            return self._signer.unsign(token).decode("utf-8")
        except (BadSignature, UnicodeDecodeError):
            return None

    async def create(self, username: str) -> str:
        now = self._now()
        await self.store.purge_expired(now)

        session_id = secrets.token_urlsafe(32)
        record = SessionRecord(username=username, created_at=now, expires_at=now + self.ttl)
        await self.store.save(session_id, record)

        logger.info("admin_session_created", username=username, expires_at=record.expires_at.isoformat())
        return self._signer.sign(session_id).decode("utf-8")

    async def validate(self, token: str | None) -> SessionStatus:
        session_id = self._unsign(token)
        if session_id is None:
            return SessionStatus(authenticated=False)

        record = await self.store.get(session_id, self._now())
        if record is None:
            return SessionStatus(authenticated=False)
        return SessionStatus(authenticated=True, username=record.username)

    async def destroy(self, token: str | None) -> None:
        session_id = self._unsign(token)
        if session_id is None:
            return
        await self.store.delete(session_id)
        logger.info("admin_session_destroyed")
