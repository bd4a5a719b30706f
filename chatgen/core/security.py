# chatgen/core/security.py
from functools import lru_cache

from fastapi.concurrency import run_in_threadpool
from passlib.context import CryptContext

# argon2 para todos los hashes (sal por registro incluida en el hash)
pwd_context = CryptContext(
    schemes=["argon2"],
    default="argon2",
    deprecated="auto",
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)


async def hash_password_async(password: str) -> str:
    """
    Igual que hash_password pero en el threadpool: argon2 es CPU puro
    y no queremos frenar el event loop mientras hashea.
    """
    return await run_in_threadpool(hash_password, password)


async def verify_password_async(password: str, hashed: str) -> bool:
    return await run_in_threadpool(verify_password, password, hashed)


@lru_cache(maxsize=1)
def dummy_hash() -> str:
    """Hash fijo para verificar contra él cuando el email no existe."""
    return hash_password("not-a-real-password")
