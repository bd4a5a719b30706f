# chatgen/core/json.py
import json
from typing import Any

from starlette.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """
    JSON compacto en UTF-8 y sin escapes \\uXXXX: las respuestas del chat
    pueden venir en hindi u otros alfabetos y el front las pinta tal cual.
    FastAPI ya entrega `content` serializable (response_model / dicts).
    """
    media_type = "application/json; charset=utf-8"

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def error_body(message: str) -> dict:
    return {"success": False, "message": message}


def error_response(status_code: int, message: str) -> UTF8JSONResponse:
    """Sobre común de error: {"success": false, "message": ...}."""
    return UTF8JSONResponse(status_code=status_code, content=error_body(message))
