from pathlib import Path

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.infrastructure.config.config import DB_CONFIG, DBConfig
from app.infrastructure.database.models.base import Base
from app.infrastructure.logging import get_logger


logger = get_logger(__name__)


def _set_sqlite_pragmas(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=FULL")
    cursor.execute("PRAGMA busy_timeout=5000")
    cursor.close()


class DatabaseConnection:
    def __init__(self, config: DBConfig = DB_CONFIG):
        self._config = config
        self._engine = create_async_engine(url=config.get_url(is_async=True))
        event.listen(self._engine.sync_engine, "connect", _set_sqlite_pragmas)
        self._session_maker = async_sessionmaker(bind=self._engine, expire_on_commit=False)

    async def get_session(self) -> AsyncSession:
        return self._session_maker()

    async def create_tables(self) -> None:
        Path(self._config.DB_PATH).parent.mkdir(parents=True, exist_ok=True)
        async with self._engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)
        logger.info("database_tables_ready", path=self._config.DB_PATH)

    async def dispose(self) -> None:
        await self._engine.dispose()
