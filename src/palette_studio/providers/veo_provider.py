from __future__ import annotations

import asyncio
import logging
import re
import time
from typing import Any

import httpx

from palette_studio.config import settings
from palette_studio.errors import GenerationError
from palette_studio.logging_setup import preview
from palette_studio.prompts.data_urls import to_data_url
from palette_studio.prompts.video import build_enhanced_video_prompt, build_negative_prompt, duration_seconds
from palette_studio.providers.base import DownloadedFile, VideoOptions

logger = logging.getLogger(__name__)

FILES_API_BASE = "https://generativelanguage.googleapis.com/v1beta/files"
_FILE_ID = re.compile(r"files/([^:]+):")


class UpstreamError(GenerationError):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


def normalize_video_url(video: Any) -> str | None:
    """Inline bytes become a data URL; Files API uris go through the local proxy."""
    if video is None:
        return None
    video_bytes = getattr(video, "video_bytes", None)
    if video_bytes:
        return to_data_url(video_bytes, getattr(video, "mime_type", None) or "video/mp4")
    uri = getattr(video, "uri", None)
    if uri:
        m = _FILE_ID.search(uri)
        if m:
            return f"/api/video/{m.group(1)}"
        return uri
    logger.warning("Video response did not include uri or bytes")
    return None


class VeoVideoProvider:
    name = "veo"

    def __init__(
        self,
        api_key: str,
        poll_interval_s: float | None = None,
        timeout_s: float | None = None,
        client: Any = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if client is None:
            from google import genai  # type: ignore

            client = genai.Client(api_key=api_key)
        self._api_key = api_key
        self._transport = transport
        self.client = client
        self.poll_interval_s = settings.video_poll_interval_s if poll_interval_s is None else poll_interval_s
        self.timeout_s = settings.video_poll_timeout_s if timeout_s is None else timeout_s

    async def generate_video(self, prompt: str, options: VideoOptions | None = None) -> str | None:
        from google.genai import types  # type: ignore

        options = options or VideoOptions()
        enhanced = build_enhanced_video_prompt(prompt, options)
        logger.info("Generating video with Veo: %s", preview(enhanced))

        # The SDK is synchronous; keep it off the event loop.
        operation = await asyncio.to_thread(
            self.client.models.generate_videos,
            model=settings.veo_video_model,
            prompt=enhanced,
            config=types.GenerateVideosConfig(
                number_of_videos=1,
                aspect_ratio=options.aspect_ratio,
                duration_seconds=duration_seconds(options.duration),
                negative_prompt=build_negative_prompt(options.style),
            ),
        )
        operation = await self._wait(operation)

        response = getattr(operation, "response", None)
        videos = getattr(response, "generated_videos", None) or []
        if not videos:
            logger.warning("No video returned from Veo generation")
            return None
        return normalize_video_url(getattr(videos[0], "video", None))

    async def _wait(self, operation: Any) -> Any:
        start = time.monotonic()
        while not operation.done:
            if time.monotonic() - start > self.timeout_s:
                raise GenerationError("Video generation timed out")
            await asyncio.sleep(self.poll_interval_s)
            operation = await asyncio.to_thread(self.client.operations.get, operation)
        error = getattr(operation, "error", None)
        if error:
            raise GenerationError(f"Video generation failed: {error}")
        return operation

    async def download_file(self, file_id: str) -> DownloadedFile:
        url = f"{FILES_API_BASE}/{file_id}:download"
        async with httpx.AsyncClient(timeout=120.0, follow_redirects=True, transport=self._transport) as client:
            resp = await client.get(url, params={"alt": "media", "key": self._api_key})
        if resp.status_code >= 400:
            logger.error("Files API download failed for %s: %s", file_id, resp.status_code)
            raise UpstreamError(resp.status_code, "Failed to fetch video from Gemini")
        return DownloadedFile(
            content=resp.content,
            content_type=resp.headers.get("content-type", "video/mp4"),
        )
