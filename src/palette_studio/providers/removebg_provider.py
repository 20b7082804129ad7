from __future__ import annotations

import logging

import httpx

from palette_studio.errors import GenerationError
from palette_studio.prompts.data_urls import strip_data_url, to_data_url

logger = logging.getLogger(__name__)

REMOVEBG_URL = "https://api.remove.bg/v1.0/removebg"


class RemoveBgProvider:
    name = "removebg"

    def __init__(self, api_key: str, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._api_key = api_key
        self._transport = transport

    async def remove_background(self, image_data: str, size: str = "auto") -> str:
        form = {"image_file_b64": strip_data_url(image_data), "size": size or "auto"}
        async with httpx.AsyncClient(timeout=60.0, transport=self._transport) as client:
            resp = await client.post(REMOVEBG_URL, headers={"X-Api-Key": self._api_key}, data=form)
        if resp.status_code >= 400:
            logger.error("remove.bg error %s: %s", resp.status_code, resp.text[:200])
            raise GenerationError(f"API error: {resp.status_code} - {resp.text}")
        mime = resp.headers.get("content-type", "image/png").split(";")[0]
        return to_data_url(resp.content, mime)
