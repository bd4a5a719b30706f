# chatgen/users/service.py
from __future__ import annotations

from chatgen.core.errors import AuthError, ConflictError
from chatgen.core.security import dummy_hash, hash_password_async, verify_password_async
from chatgen.users.models import User
from chatgen.users.schemas import LoginIn, SignupIn
from chatgen.users.store import UserStore
from chatgen.users.validation import (
    normalize_email,
    require_fields,
    validate_email,
    validate_password,
)


async def signup(store: UserStore, data: SignupIn, password_policy: str = "strict") -> User:
    require_fields(data.username, data.email, data.password)

    email = normalize_email(data.email)
    validate_email(email)
    validate_password(data.password, password_policy)

    # pre-check solo para el mensaje bonito; el UNIQUE de la tabla decide
    if await store.get_by_email(email):
        raise ConflictError("email already registered")

    hashed = await hash_password_async(data.password)
    return await store.create_user(data.username.strip(), email, hashed)


async def login(store: UserStore, data: LoginIn) -> User:
    require_fields(data.email, data.password)

    email = normalize_email(data.email)
    user = await store.get_by_email(email)
    # mismo error y mismo costo (un verify argon2) para "no existe" y
    # "password malo"
    hashed = user.hashed_password if user else dummy_hash()
    if not await verify_password_async(data.password, hashed) or not user:
        raise AuthError("invalid credentials")
    return user
