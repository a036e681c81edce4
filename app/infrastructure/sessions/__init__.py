from app.infrastructure.sessions.base import SessionRecord, SessionStore
from app.infrastructure.sessions.memory import MemorySessionStore


__all__ = ["MemorySessionStore", "SessionRecord", "SessionStore"]
