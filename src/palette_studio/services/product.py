from __future__ import annotations

import logging
from dataclasses import dataclass

from palette_studio.catalogs.environments import get_category, get_variation
from palette_studio.errors import GenerationError, InvalidRequest, ProviderNotConfigured
from palette_studio.placeholders import DEMO_MODE_SUFFIX, demo_pixel
from palette_studio.prompts.product import build_placement_prompt, build_product_video_prompt
from palette_studio.providers.base import (
    BackgroundRemover,
    FallbackImageProvider,
    ImageProvider,
    ModelKey,
    TextProvider,
    VideoOptions,
    VideoProvider,
)
from palette_studio.services.persistence import record_quietly
from palette_studio.storage import AssetRecord, AssetStore

logger = logging.getLogger(__name__)


@dataclass
class PlacementResult:
    image_data: str
    prompt_used: str
    provider: str
    image_url: str | None = None


@dataclass
class ProductVideo:
    video_url: str
    prompt_used: str
    category_name: str
    variation_name: str | None


class ProductService:
    """Product placement: Gemini in-context edit, then OpenAI prompt-only, then a demo placeholder."""

    def __init__(
        self,
        text: TextProvider | None = None,
        images: ImageProvider | None = None,
        fallback: FallbackImageProvider | None = None,
        video: VideoProvider | None = None,
        background_remover: BackgroundRemover | None = None,
        store: AssetStore | None = None,
    ) -> None:
        self.text = text
        self.images = images
        self.fallback = fallback
        self.video = video
        self.background_remover = background_remover
        self.store = store

    async def place(
        self,
        product_image: str,
        category_id: str,
        variation_id: str | None = None,
        custom_prompt: str | None = None,
        product_description: str | None = None,
        enhance_with_claude: bool = False,
        model: ModelKey = "pro",
        color_palette: list[str] | None = None,
        aspect_ratio: str | None = None,
        session_id: str | None = None,
    ) -> PlacementResult:
        if not product_image:
            raise InvalidRequest("Product image is required")
        if not category_id:
            raise InvalidRequest("Category ID is required")
        if not variation_id and not custom_prompt:
            raise InvalidRequest("Either variation ID or custom prompt is required")

        if enhance_with_claude and custom_prompt and product_description and self.text is not None:
            custom_prompt = await self.text.enhance_prompt(custom_prompt, product_description)

        prompt = build_placement_prompt(category_id, variation_id, custom_prompt, product_description, color_palette)
        result = await self._place_with_fallbacks(prompt, product_image, product_description, model)

        if result.provider != "demo":
            record_quietly(
                self.store,
                AssetRecord(
                    app_mode="product",
                    kind="image",
                    source="product-placement",
                    session_key=session_id,
                    data_url=result.image_data,
                    prompt=result.prompt_used,
                    metadata={
                        "categoryId": category_id,
                        "variationId": variation_id,
                        "aspectRatio": aspect_ratio,
                        "model": model,
                        "provider": result.provider,
                        "colorPalette": color_palette,
                    },
                ),
            )
        return result

    async def _place_with_fallbacks(
        self,
        prompt: str,
        product_image: str,
        product_description: str | None,
        model: ModelKey,
    ) -> PlacementResult:
        if self.images is not None:
            try:
                placed = await self.images.place_product(product_image, prompt, product_description, model=model)
                return PlacementResult(image_data=placed.image_data, prompt_used=prompt, provider=self.images.name)
            except Exception as exc:
                logger.warning("Gemini placement failed: %s", exc)

        if self.fallback is not None:
            try:
                image = await self.fallback.generate_image(prompt)
                return PlacementResult(image_data=image, prompt_used=prompt, provider=self.fallback.name)
            except Exception as exc:
                logger.warning("%s fallback failed: %s", self.fallback.name, exc)

        logger.info("Demo mode active; image generation would use this prompt: %s", prompt)
        return PlacementResult(image_data=demo_pixel(), prompt_used=prompt + DEMO_MODE_SUFFIX, provider="demo")

    async def generate_video(
        self,
        category_id: str,
        variation_id: str | None = None,
        custom_prompt: str | None = None,
        aspect_ratio: str = "9:16",
        product_description: str | None = None,
        session_id: str | None = None,
        color_palette: list[str] | None = None,
    ) -> ProductVideo:
        if not category_id:
            raise InvalidRequest("Category ID is required")
        category = get_category(category_id)
        if category is None:
            raise InvalidRequest("Invalid category ID")
        if self.video is None:
            raise ProviderNotConfigured("GOOGLE_GENERATIVE_AI_API_KEY")

        variation = get_variation(category_id, variation_id) if variation_id else None
        prompt = build_product_video_prompt(category, variation, custom_prompt, product_description, color_palette)
        logger.info("Generating product video with prompt: %s...", prompt[:200])

        video_url = await self.video.generate_video(
            prompt,
            VideoOptions(aspect_ratio=aspect_ratio, resolution="720p", duration="short", style="professional"),
        )
        if not video_url:
            raise GenerationError("Failed to generate video")

        record_quietly(
            self.store,
            AssetRecord(
                app_mode="product",
                kind="video",
                source="product-video",
                session_key=session_id,
                url=video_url,
                data_url=video_url,
                prompt=prompt,
                metadata={
                    "categoryId": category_id,
                    "variationId": variation_id,
                    "aspectRatio": aspect_ratio,
                    "colorPalette": color_palette,
                },
            ),
        )
        return ProductVideo(
            video_url=video_url,
            prompt_used=prompt,
            category_name=category.name,
            variation_name=variation.name if variation else None,
        )

    async def remove_background(
        self,
        image_data: str,
        size: str = "auto",
        product_description: str | None = None,
    ) -> str:
        """remove.bg when configured, else Gemini subject isolation."""
        if not image_data:
            raise InvalidRequest("No image data provided")
        if self.background_remover is not None:
            return await self.background_remover.remove_background(image_data, size=size)
        if self.images is not None:
            result = await self.images.remove_background(image_data, product_description, model="pro")
            return result.image_data
        raise ProviderNotConfigured("REMOVEBG_API_KEY")
