import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///app/storage/orderdesk.db")
SQL_ECHO = os.getenv("SQL_ECHO", "").lower() in {"1", "true", "yes"}


class Base(DeclarativeBase):
    pass


def make_engine(url: Optional[str] = None, **kwargs) -> AsyncEngine:
    return create_async_engine(url or DATABASE_URL, echo=SQL_ECHO, **kwargs)


def make_session_factory(target: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(target, expire_on_commit=False)


engine = make_engine()
SessionLocal = make_session_factory(engine)


def _ensure_sqlite_dir(target: AsyncEngine) -> None:
    url = target.url
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


async def init_db(target: Optional[AsyncEngine] = None) -> None:
    # Registers the tables on Base.metadata
    from orderdesk import models  # noqa: F401

    target = target or engine
    _ensure_sqlite_dir(target)
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


def get_session_factory() -> async_sessionmaker:
    """FastAPI dependency; tests override it to point at a throwaway database."""
    return SessionLocal
