from __future__ import annotations

import asyncio
import logging
from io import BytesIO
from typing import Any

from PIL import Image

from palette_studio.config import settings
from palette_studio.errors import GenerationError, InvalidRequest
from palette_studio.logging_setup import preview
from palette_studio.prompts.data_urls import decode_data_url, to_data_url
from palette_studio.providers.base import ImageResult, ModelKey

logger = logging.getLogger(__name__)


def background_removal_prompt(product_description: str | None) -> str:
    context = f"The product is: {product_description}. " if product_description else ""
    return (
        f"{context}Please isolate the main product/subject from this image and place it on a pure transparent "
        "background. Remove all background elements completely. Keep only the product with clean edges suitable "
        "for e-commerce use. Output the isolated product image."
    )


def placement_prompt(environment_prompt: str, product_description: str | None) -> str:
    context = f"Product: {product_description}. " if product_description else "Product shown in the image. "
    return (
        f"{context}Take this product and place it naturally in the following environment/scene: "
        f"{environment_prompt}.\n\n"
        "Create a professional product photography shot where the product is seamlessly integrated into the scene "
        "with realistic lighting, shadows, and reflections that match the environment. The product should be the "
        "hero of the image while the environment provides context and appeal.\n\n"
        "Generate a high-quality, commercial-grade product placement image."
    )


class GeminiImageProvider:
    name = "gemini"

    def __init__(self, api_key: str, client: Any = None) -> None:
        if client is None:
            # Imported lazily so the app can start without the dependency installed.
            from google import genai  # type: ignore

            client = genai.Client(api_key=api_key)
        self.client = client

    def _model_id(self, model: ModelKey) -> str:
        return settings.gemini_models.get(model, settings.gemini_flash_image_model)

    def _send(self, model_id: str, message: Any) -> ImageResult:
        from google.genai import types  # type: ignore

        chat = self.client.chats.create(
            model=model_id,
            config=types.GenerateContentConfig(response_modalities=["TEXT", "IMAGE"]),
        )
        resp = chat.send_message(message)
        image_data, text = _extract_image_and_text(resp)
        if image_data is None:
            raise GenerationError(f"No image data in response from {model_id}", text_response=text)
        return ImageResult(image_data=image_data, model_used=model_id, text_response=text)

    async def generate_image(self, prompt: str, model: ModelKey = "flash") -> ImageResult:
        model_id = self._model_id(model)
        logger.info("Generating image with Gemini %s (%s): %s", model, model_id, preview(prompt))
        return await asyncio.to_thread(self._send, model_id, prompt)

    async def remove_background(
        self,
        image_data: str,
        product_description: str | None = None,
        model: ModelKey = "pro",
    ) -> ImageResult:
        model_id = self._model_id(model)
        logger.info("Removing background with Gemini %s", model)
        message = [background_removal_prompt(product_description), _open_image(image_data)]
        return await asyncio.to_thread(self._send, model_id, message)

    async def place_product(
        self,
        product_image: str,
        environment_prompt: str,
        product_description: str | None = None,
        model: ModelKey = "pro",
    ) -> ImageResult:
        model_id = self._model_id(model)
        logger.info("Placing product with Gemini %s: %s", model, preview(environment_prompt))
        prompt = placement_prompt(environment_prompt, product_description)
        return await asyncio.to_thread(self._send, model_id, [prompt, _open_image(product_image)])


def _open_image(image_data: str) -> Image.Image:
    try:
        return Image.open(BytesIO(decode_data_url(image_data)))
    except (OSError, ValueError) as exc:
        raise InvalidRequest("Image data could not be decoded") from exc


def _extract_image_and_text(resp: Any) -> tuple[str | None, str | None]:
    """Return (data URL, text) from the first candidate; the last part of each kind wins."""
    image_data: str | None = None
    text: str | None = None
    candidates = getattr(resp, "candidates", None) or []
    if not candidates:
        return None, None
    content = getattr(candidates[0], "content", None)
    for part in getattr(content, "parts", None) or []:
        part_text = getattr(part, "text", None)
        if part_text:
            text = part_text
            continue
        inline = getattr(part, "inline_data", None)
        data = getattr(inline, "data", None) if inline else None
        if data:
            mime = getattr(inline, "mime_type", None) or "image/png"
            image_data = to_data_url(data, mime)
    return image_data, text
