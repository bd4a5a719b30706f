# chatgen/users/schemas.py
from pydantic import BaseModel, ConfigDict


# Campos opcionales a nivel de schema: el "missing fields" lo decide
# validation.require_fields para devolver siempre el mismo 400.
class SignupIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str | None = None
    email: str | None = None
    password: str | None = None


class LoginIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str | None = None
    password: str | None = None


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str


class SignupOut(BaseModel):
    success: bool = True
    message: str = "signup successful"


class LoginOut(BaseModel):
    success: bool = True
    message: str = "login successful"
    user: UserOut
