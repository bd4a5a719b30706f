# chatgen/chat/service.py
from __future__ import annotations

import logging
from typing import Any

import httpx

from chatgen.core.config import Settings
from chatgen.core.errors import UpstreamError, ValidationError

log = logging.getLogger("uvicorn")


def _first_content(data: Any) -> str | None:
    """choices[0].message.content, o None si el shape no es el esperado."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return content if isinstance(content, str) and content.strip() else None


class ChatClient:
    """
    Proxy hacia un endpoint /chat/completions compatible con OpenAI (Groq).
    Sin reintentos ni cache: un request entra, un request sale.
    """

    def __init__(self, cfg: Settings, client: httpx.AsyncClient | None = None):
        self.cfg = cfg
        self.client = client or httpx.AsyncClient(timeout=cfg.UPSTREAM_TIMEOUT_SECONDS)

    def _payload(self, message: str) -> dict:
        return {
            "model": self.cfg.GROQ_MODEL,
            "messages": [
                {"role": "system", "content": self.cfg.CHAT_SYSTEM_PROMPT},
                {"role": "user", "content": message},
            ],
        }

    async def reply(self, message: str | None) -> str:
        if message is None or not message.strip():
            raise ValidationError("message missing")

        headers = {
            "Authorization": f"Bearer {self.cfg.GROQ_API_KEY or ''}",
            "Content-Type": "application/json",
        }
        try:
            r = await self.client.post(self.cfg.GROQ_API_URL, json=self._payload(message), headers=headers)
        except httpx.HTTPError as e:
            log.error(f"❌ Groq API error: {e!r}")
            raise UpstreamError("chat service unavailable") from e

        if r.status_code >= 400:
            log.error(f"❌ Groq API error {r.status_code}: {r.text[:500]}")
            raise UpstreamError("chat service unavailable")

        try:
            data = r.json()
        except ValueError as e:
            log.error(f"❌ Groq API devolvió algo que no es JSON: {r.text[:200]!r}")
            raise UpstreamError("chat service unavailable") from e

        return _first_content(data) or self.cfg.CHAT_EMPTY_REPLY

    async def aclose(self) -> None:
        await self.client.aclose()
