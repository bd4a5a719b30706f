# chatgen/images/schemas.py
from pydantic import BaseModel, ConfigDict


class ImageIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    prompt: str | None = None


class ImageOut(BaseModel):
    imageUrl: str
