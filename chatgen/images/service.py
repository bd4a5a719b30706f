# chatgen/images/service.py
from __future__ import annotations

import logging
from typing import Any

import httpx

from chatgen.core.config import Settings
from chatgen.core.errors import UpstreamError, ValidationError

log = logging.getLogger("uvicorn")


def _first_url(data: Any) -> str | None:
    try:
        url = data["output"][0]["url"]
    except (KeyError, IndexError, TypeError):
        return None
    return url if isinstance(url, str) and url else None


class ImageClient:
    def __init__(self, cfg: Settings, client: httpx.AsyncClient | None = None):
        self.cfg = cfg
        self.client = client or httpx.AsyncClient(timeout=cfg.UPSTREAM_TIMEOUT_SECONDS)

    async def generate(self, prompt: str | None) -> str:
        """
        Manda el prompt a la API de imágenes y devuelve output[0].url.
        """
        if prompt is None or not prompt.strip():
            raise ValidationError("prompt is required")

        log.info(f"🖼️ IMAGE PROMPT: {prompt}")
        payload = {
            "prompt": prompt,
            "width": self.cfg.IMAGE_WIDTH,
            "height": self.cfg.IMAGE_HEIGHT,
            "samples": self.cfg.IMAGE_SAMPLES,
        }
        try:
            r = await self.client.post(self.cfg.IMAGE_API_URL, json=payload)
        except httpx.HTTPError as e:
            log.error(f"❌ image API error: {e!r}")
            raise UpstreamError("image generation failed") from e

        if r.status_code >= 400:
            log.error(f"❌ image API error {r.status_code}: {r.text[:500]}")
            raise UpstreamError("image generation failed")

        try:
            data = r.json()
        except ValueError as e:
            raise UpstreamError("image generation failed") from e

        url = _first_url(data)
        if not url:
            log.error(f"❌ image API sin URL: {data!r}")
            raise UpstreamError("image url not found")

        log.info(f"✅ FINAL IMAGE URL: {url}")
        return url

    async def aclose(self) -> None:
        await self.client.aclose()
