# chatgen/chat/schemas.py
from pydantic import BaseModel, ConfigDict


class ChatIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    message: str | None = None


class ChatOut(BaseModel):
    reply: str
