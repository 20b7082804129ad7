from __future__ import annotations

import logging

from palette_studio.config import settings
from palette_studio.errors import GenerationError
from palette_studio.logging_setup import preview
from palette_studio.prompts.data_urls import to_data_url

logger = logging.getLogger(__name__)


class OpenAIImageProvider:
    """Prompt-only image generation, used when the product image cannot be placed in context."""

    name = "openai"

    def __init__(self, api_key: str) -> None:
        from openai import AsyncOpenAI  # type: ignore

        self.client = AsyncOpenAI(api_key=api_key)

    async def generate_image(self, prompt: str) -> str:
        logger.info("Generating image with %s: %s", settings.openai_image_model, preview(prompt))
        resp = await self.client.images.generate(
            model=settings.openai_image_model,
            prompt=prompt,
            n=1,
            size="1024x1024",
            quality="standard",
            response_format="b64_json",
        )
        data = getattr(resp, "data", None) or []
        b64 = getattr(data[0], "b64_json", None) if data else None
        if not b64:
            raise GenerationError("No image in OpenAI response")
        return to_data_url(b64, "image/png")
