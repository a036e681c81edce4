from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class SessionRecord:
    username: str
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class SessionStore(ABC):
    """Server-side storage for admin sessions, keyed by session id."""

    @abstractmethod
    async def save(self, session_id: str, record: SessionRecord) -> None: ...

    @abstractmethod
    async def get(self, session_id: str, now: datetime) -> SessionRecord | None:
        """Return the live record, dropping it if it has expired."""

    @abstractmethod
    async def delete(self, session_id: str) -> None: ...

    @abstractmethod
    async def purge_expired(self, now: datetime) -> int: ...
