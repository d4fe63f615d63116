from collections.abc import AsyncIterator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from libris.config import DATABASE_URL
from libris.id import fold_case


class Base(DeclarativeBase):
    pass


def create_engine(url: str = DATABASE_URL) -> AsyncEngine:
    engine = create_async_engine(url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _configure_sqlite_connection)
    return engine


def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    # SQLite's own lower() only folds ASCII; case-insensitive filters compile to lower()
    dbapi_connection.create_function("lower", 1, fold_case, deterministic=True)
    # foreign keys are unenforced unless switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = create_engine()
SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_session() -> AsyncIterator[AsyncSession]:
    async with SessionLocal() as session:
        yield session
