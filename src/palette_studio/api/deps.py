from __future__ import annotations

from fastapi import Depends

from palette_studio.config import settings
from palette_studio.providers.anthropic_provider import AnthropicProvider
from palette_studio.providers.base import BackgroundRemover, FallbackImageProvider, ImageProvider, TextProvider, VideoProvider
from palette_studio.providers.gemini_provider import GeminiImageProvider
from palette_studio.providers.openai_provider import OpenAIImageProvider
from palette_studio.providers.removebg_provider import RemoveBgProvider
from palette_studio.providers.veo_provider import VeoVideoProvider
from palette_studio.services.creative import CreativeService
from palette_studio.services.invitation import InvitationService
from palette_studio.services.product import ProductService
from palette_studio.storage import AssetStore, get_store

# Providers resolve to None when their key is unset; services decide whether that is fatal.


def get_text_provider() -> TextProvider | None:
    if not settings.anthropic_api_key:
        return None
    return AnthropicProvider(api_key=settings.anthropic_api_key)


def get_image_provider() -> ImageProvider | None:
    if not settings.google_generative_ai_api_key:
        return None
    return GeminiImageProvider(api_key=settings.google_generative_ai_api_key)


def get_video_provider() -> VideoProvider | None:
    if not settings.google_generative_ai_api_key:
        return None
    return VeoVideoProvider(api_key=settings.google_generative_ai_api_key)


def get_fallback_image_provider() -> FallbackImageProvider | None:
    if not settings.openai_api_key:
        return None
    return OpenAIImageProvider(api_key=settings.openai_api_key)


def get_background_remover() -> BackgroundRemover | None:
    if not settings.removebg_api_key:
        return None
    return RemoveBgProvider(api_key=settings.removebg_api_key)


def get_asset_store() -> AssetStore:
    return get_store()


def get_creative_service(
    text: TextProvider | None = Depends(get_text_provider),
    images: ImageProvider | None = Depends(get_image_provider),
    video: VideoProvider | None = Depends(get_video_provider),
    store: AssetStore = Depends(get_asset_store),
) -> CreativeService:
    return CreativeService(text=text, images=images, video=video, store=store)


def get_invitation_service(
    images: ImageProvider | None = Depends(get_image_provider),
    video: VideoProvider | None = Depends(get_video_provider),
    store: AssetStore = Depends(get_asset_store),
) -> InvitationService:
    return InvitationService(images=images, video=video, store=store)


def get_product_service(
    text: TextProvider | None = Depends(get_text_provider),
    images: ImageProvider | None = Depends(get_image_provider),
    fallback: FallbackImageProvider | None = Depends(get_fallback_image_provider),
    video: VideoProvider | None = Depends(get_video_provider),
    background_remover: BackgroundRemover | None = Depends(get_background_remover),
    store: AssetStore = Depends(get_asset_store),
) -> ProductService:
    return ProductService(
        text=text,
        images=images,
        fallback=fallback,
        video=video,
        background_remover=background_remover,
        store=store,
    )
