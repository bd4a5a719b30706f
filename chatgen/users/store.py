# chatgen/users/store.py
from __future__ import annotations

import asyncio
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from chatgen.core.errors import ConflictError, StoreError
from chatgen.users import repository as repo
from chatgen.users.models import User

log = logging.getLogger("uvicorn")


class UserStore:
    """
    Credential store sobre la tabla `users`.

    Una sesión nueva por llamada (un SELECT o un INSERT + commit). Los handlers
    lo reciben inyectado vía `get_store`, así los tests pueden cambiarlo por
    un fake en memoria con la misma interfaz (get_by_email / create_user).
    """

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession], timeout: float | None = 5.0):
        self.sessionmaker = sessionmaker
        self.timeout = timeout

    async def _bounded(self, coro, what: str):
        try:
            return await asyncio.wait_for(coro, timeout=self.timeout)
        except asyncio.TimeoutError:
            log.error(f"⏱️ store timeout en {what} (>{self.timeout}s)")
            raise StoreError()

    async def get_by_email(self, email: str) -> User | None:
        async def _run():
            async with self.sessionmaker() as db:
                return await repo.get_by_email(db, email)

        try:
            return await self._bounded(_run(), "get_by_email")
        except SQLAlchemyError as e:
            log.error(f"❌ DB error en get_by_email: {e!r}")
            raise StoreError() from e

    async def create_user(self, username: str, email: str, hashed_password: str) -> User:
        try:
            async with self.sessionmaker() as db:
                try:
                    # timeout solo sobre el INSERT; el commit queda fuera
                    user = await self._bounded(
                        repo.create_user(db, username, email, hashed_password),
                        "create_user",
                    )
                    await db.commit()
                    return user
                except Exception:
                    await db.rollback()
                    raise
        except IntegrityError as e:
            # otro signup con el mismo email ganó la carrera: manda el UNIQUE
            log.info(f"⚠️ UNIQUE(email) violado al insertar: {e.orig!r}")
            raise ConflictError("email already registered") from e
        except SQLAlchemyError as e:
            log.error(f"❌ DB error en create_user: {e!r}")
            raise StoreError() from e
