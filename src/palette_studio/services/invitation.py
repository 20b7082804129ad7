from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

from palette_studio.catalogs.invitation_templates import get_template
from palette_studio.catalogs.invitation_variations import get_variation
from palette_studio.catalogs.invitations import (
    EventDetails,
    InvitationCategory,
    InvitationStyle,
    get_category,
    get_style,
)
from palette_studio.errors import GenerationError, InvalidRequest, ProviderNotConfigured
from palette_studio.placeholders import invitation_placeholder
from palette_studio.prompts.invitation import (
    build_invitation_prompt,
    build_invitation_video_prompt,
    normalize_video_aspect_ratio,
)
from palette_studio.providers.base import ImageProvider, ModelKey, VideoOptions, VideoProvider
from palette_studio.services.persistence import record_quietly
from palette_studio.storage import AssetRecord, AssetStore

logger = logging.getLogger(__name__)

MAX_VARIANTS = 5


@dataclass
class InvitationVariant:
    id: str
    image_data: str
    prompt_used: str
    model_used: str
    category_name: str
    style_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "imageData": self.image_data,
            "promptUsed": self.prompt_used,
            "modelUsed": self.model_used,
            "categoryName": self.category_name,
            "styleName": self.style_name,
        }


@dataclass
class InvitationVideo:
    video_url: str
    prompt_used: str
    category_name: str
    style_name: str


def clamp_variant_count(count: int) -> int:
    return min(max(count, 1), MAX_VARIANTS)


class InvitationService:
    def __init__(
        self,
        images: ImageProvider | None,
        video: VideoProvider | None = None,
        store: AssetStore | None = None,
    ) -> None:
        self.images = images
        self.video = video
        self.store = store

    def _resolve(self, details: EventDetails, category_id: str, style_id: str) -> tuple[InvitationCategory, InvitationStyle]:
        if not details.title:
            raise InvalidRequest("Event title is required")
        if not category_id or not style_id:
            raise InvalidRequest("Category and style are required")
        category = get_category(category_id)
        style = get_style(category_id, style_id)
        if category is None or style is None:
            raise InvalidRequest("Invalid category or style")
        return category, style

    async def generate(
        self,
        details: EventDetails,
        category_id: str,
        style_id: str,
        aspect_ratio: str = "4:5",
        variant_count: int = 3,
        model: ModelKey = "pro",
        session_id: str | None = None,
        template_id: str | None = None,
        color_palette: list[str] | None = None,
        variation_modes: list[str] | None = None,
    ) -> list[InvitationVariant]:
        category, style = self._resolve(details, category_id, style_id)
        template = get_template(template_id) if template_id else None
        if self.images is None:
            logger.warning("GOOGLE_GENERATIVE_AI_API_KEY missing - using placeholder invitation output")

        results: list[InvitationVariant] = []
        for index in range(clamp_variant_count(variant_count)):
            directive_id = variation_modes[index % len(variation_modes)] if variation_modes else None
            directive = get_variation(directive_id) if directive_id else None
            prompt = build_invitation_prompt(
                details,
                category,
                style,
                aspect_ratio,
                index,
                custom_palette=color_palette,
                template=template,
                variation=directive,
            )

            image_data = invitation_placeholder()
            prompt_used = prompt
            notes: str | None = None
            if self.images is not None:
                try:
                    generated = await self.images.generate_image(prompt, model=model)
                except GenerationError as exc:
                    logger.warning("Invitation generation fallback triggered: %s", exc)
                    notes = exc.text_response
                except Exception as exc:
                    logger.warning("Invitation generation fallback triggered: %s", exc)
                else:
                    image_data = generated.image_data
                    notes = generated.text_response
            # Notes are kept even when the model answered without an image.
            if notes:
                prompt_used = f"{prompt}\n\nAssistant notes: {notes}"

            variant = InvitationVariant(
                id=f"invitation-{category.id}-{style.id}-{int(time.time() * 1000)}-{index}",
                image_data=image_data,
                prompt_used=prompt_used,
                model_used=model,
                category_name=category.name,
                style_name=style.name,
            )
            results.append(variant)
            record_quietly(
                self.store,
                AssetRecord(
                    app_mode="invitation",
                    kind="image",
                    source="invitation-generate",
                    session_key=session_id,
                    data_url=image_data,
                    prompt=prompt_used,
                    metadata={
                        "categoryId": category.id,
                        "styleId": style.id,
                        "aspectRatio": aspect_ratio,
                        "variantIndex": index,
                        "model": model,
                        "templateId": template_id,
                        "variationDirectiveId": directive_id,
                    },
                ),
            )
        return results

    async def generate_video(
        self,
        details: EventDetails,
        category_id: str,
        style_id: str,
        aspect_ratio: str = "9:16",
        session_id: str | None = None,
    ) -> InvitationVideo:
        category, style = self._resolve(details, category_id, style_id)
        if self.video is None:
            raise ProviderNotConfigured("GOOGLE_GENERATIVE_AI_API_KEY")

        prompt = build_invitation_video_prompt(details, category, style, aspect_ratio)
        video_url = await self.video.generate_video(
            prompt,
            VideoOptions(aspect_ratio=normalize_video_aspect_ratio(aspect_ratio), duration="short", style="artistic"),
        )
        if not video_url:
            raise GenerationError("Video generation failed")

        record_quietly(
            self.store,
            AssetRecord(
                app_mode="invitation",
                kind="video",
                source="invitation-video",
                session_key=session_id,
                url=video_url,
                data_url=video_url,
                prompt=prompt,
                metadata={"categoryId": category.id, "styleId": style.id, "aspectRatio": aspect_ratio},
            ),
        )
        return InvitationVideo(
            video_url=video_url,
            prompt_used=prompt,
            category_name=category.name,
            style_name=style.name,
        )
