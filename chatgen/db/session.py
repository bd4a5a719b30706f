# chatgen/db/session.py
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def build_engine(db_url: str) -> AsyncEngine:
    # Timeouts cortos: si la DB no responde → falla rápido (5s)
    if db_url.startswith("postgresql+asyncpg"):
        return create_async_engine(
            db_url,
            pool_pre_ping=True,
            pool_recycle=300,
            pool_size=5,
            max_overflow=10,
            connect_args={
                "timeout": 5,
                "server_settings": {"client_encoding": "UTF8"},
            },
        )
    if db_url.startswith("postgresql+psycopg"):
        return create_async_engine(
            db_url,
            pool_pre_ping=True,
            pool_recycle=300,
            connect_args={"connect_timeout": 5},
        )
    # sqlite+aiosqlite: sin pool_size (usa su propio pool)
    return create_async_engine(db_url, connect_args={"timeout": 5})


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


def sqlite_path(db_url: str) -> str | None:
    """Ruta del archivo si la URL es SQLite en disco; None en otro caso."""
    url = make_url(db_url)
    if not url.drivername.startswith("sqlite"):
        return None
    if not url.database or url.database == ":memory:":
        return None
    return url.database
