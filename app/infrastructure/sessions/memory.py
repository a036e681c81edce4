import asyncio
from datetime import datetime

from app.infrastructure.sessions.base import SessionRecord, SessionStore


class MemorySessionStore(SessionStore):
    """Process-local store. Sessions are not shared between workers."""

    def __init__(self):
        self._records: dict[str, SessionRecord] = {}
        self._lock = asyncio.Lock()

    async def save(self, session_id: str, record: SessionRecord) -> None:
        async with self._lock:
            self._records[session_id] = record

    async def get(self, session_id: str, now: datetime) -> SessionRecord | None:
        async with self._lock:
            record = self._records.get(session_id)
            if record is None:
                return None
            if record.is_expired(now):
                del self._records[session_id]
                return None
            return record

    async def delete(self, session_id: str) -> None:
        async with self._lock:
            self._records.pop(session_id, None)

    async def purge_expired(self, now: datetime) -> int:
        async with self._lock:
            expired = [key for key, record in self._records.items() if record.is_expired(now)]
            for key in expired:
                del self._records[key]
            return len(expired)

    def __len__(self) -> int:
        return len(self._records)
