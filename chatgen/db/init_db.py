# chatgen/db/init_db.py
import logging
import os

from sqlalchemy.ext.asyncio import AsyncEngine

from chatgen.db.base import Base
from chatgen.db.session import sqlite_path

# 👇 importa los modelos que deben existir en la DB
from chatgen.users.models import User  # noqa: F401

log = logging.getLogger("uvicorn")


async def init_models(engine: AsyncEngine, db_url: str) -> None:
    """
    Crea/verifica las tablas declaradas en Base.metadata (idempotente).
    Si la DB es un archivo SQLite, crea antes su carpeta.
    """
    path = sqlite_path(db_url)
    if path:
        folder = os.path.dirname(os.path.abspath(path))
        os.makedirs(folder, exist_ok=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("✅ DB init: tablas creadas/verificadas.")
