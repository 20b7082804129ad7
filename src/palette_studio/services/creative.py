from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from palette_studio.errors import ProviderNotConfigured
from palette_studio.prompts.creative import build_domain_image_prompt, build_ideas_request, with_image_directives
from palette_studio.prompts.series import build_image_series_prompts
from palette_studio.prompts.video import SERIES_SEPARATOR, build_domain_video_prompt, build_series_prompts
from palette_studio.providers.base import ImageProvider, PaletteEntry, TextProvider, VideoOptions, VideoProvider
from palette_studio.services.persistence import record_quietly
from palette_studio.storage import AssetRecord, AssetStore

logger = logging.getLogger(__name__)

UNKNOWN_PATH_IDEAS = "This creative path is not yet implemented."

FORMATS = ("image", "video", "series", "image-series", "combined")


@dataclass
class IdeasResult:
    ideas: str
    image_url: str | None = None


@dataclass
class ImageSeriesResult:
    image_series_urls: list[str]
    ideas: str
    errors: list[str] = field(default_factory=list)


@dataclass
class VideoResult:
    ideas: str
    video_url: str | None = None
    series_urls: list[str] | None = None


@dataclass
class CreativeRequest:
    path: str
    palette: list[PaletteEntry]
    image_prompt_choice: str
    customizations: dict[str, Any] = field(default_factory=dict)
    formats: list[str] = field(default_factory=lambda: ["image"])
    image_aspect_ratio: str = "1:1"
    video_aspect_ratio: str = "9:16"
    series_theme_id: str = "auto"
    series_count: int = 5
    series_aspect_ratio: str = "1:1"
    session_id: str | None = None


@dataclass
class CreativeResult:
    ideas: str = ""
    image_url: str | None = None
    video_url: str | None = None
    series_urls: list[str] | None = None
    image_series_urls: list[str] | None = None
    formats_generated: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"ideas": self.ideas, "formats_generated": self.formats_generated}
        for key in ("image_url", "video_url", "series_urls", "image_series_urls"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        if self.errors:
            out["errors"] = self.errors
        return out


class CreativeService:
    """Palette-driven ideas, images, image series and videos for one creative path."""

    def __init__(
        self,
        text: TextProvider | None,
        images: ImageProvider | None,
        video: VideoProvider | None = None,
        store: AssetStore | None = None,
    ) -> None:
        self.text = text
        self.images = images
        self.video = video
        self.store = store

    def _text(self) -> TextProvider:
        if self.text is None:
            raise ProviderNotConfigured("ANTHROPIC_API_KEY")
        return self.text

    def _images(self) -> ImageProvider:
        if self.images is None:
            raise ProviderNotConfigured("GOOGLE_GENERATIVE_AI_API_KEY")
        return self.images

    def _video(self) -> VideoProvider:
        if self.video is None:
            raise ProviderNotConfigured("GOOGLE_GENERATIVE_AI_API_KEY")
        return self.video

    async def generate_ideas(
        self,
        path: str,
        palette: list[PaletteEntry],
        customizations: dict[str, Any],
        image_prompt_choice: str,
        aspect_ratio: str = "1:1",
    ) -> IdeasResult:
        images = self._images()
        request = build_ideas_request(path, customizations)
        if request is None:
            ideas = UNKNOWN_PATH_IDEAS
        else:
            domain, additional_context = request
            ideas = await self._text().generate_ideas(palette, domain, customizations, additional_context)

        prompt = build_domain_image_prompt(path, ideas, palette, image_prompt_choice, aspect_ratio)
        try:
            image = await images.generate_image(prompt, model="flash")
        except Exception:
            # The ideas text is still useful without an image.
            logger.exception("Domain image generation failed for %s", path)
            return IdeasResult(ideas=ideas)
        return IdeasResult(ideas=ideas, image_url=image.image_data)

    async def generate_image_series(
        self,
        path: str,
        palette: list[PaletteEntry],
        customizations: dict[str, Any],
        theme_id: str = "auto",
        count: int = 5,
        aspect_ratio: str = "1:1",
    ) -> ImageSeriesResult:
        images = self._images()
        prompts = build_image_series_prompts(path, palette, customizations, theme_id, count)
        urls: list[str] = []
        errors: list[str] = []
        for i, prompt in enumerate(prompts):
            logger.info("Generating series image %d/%d", i + 1, len(prompts))
            try:
                result = await images.generate_image(with_image_directives(prompt, "photorealistic", aspect_ratio))
            except Exception as exc:
                logger.warning("Series image %d failed: %s", i + 1, exc)
                errors.append(f"Failed to generate image {i + 1}: {exc}")
                continue
            urls.append(result.image_data)
        return ImageSeriesResult(image_series_urls=urls, ideas=SERIES_SEPARATOR.join(prompts), errors=errors)

    async def generate_creative_video(
        self,
        path: str,
        palette: list[PaletteEntry],
        customizations: dict[str, Any],
        format: str,
        image_angle: str,
        aspect_ratio: str = "9:16",
    ) -> VideoResult:
        video = self._video()
        options = VideoOptions(aspect_ratio=aspect_ratio, resolution="720p", duration="short", style="cinematic")

        if format == "single":
            prompt = build_domain_video_prompt(path, palette, customizations, image_angle)
            return VideoResult(ideas=prompt, video_url=await video.generate_video(prompt, options))

        prompts = build_series_prompts(path, palette, customizations)
        urls: list[str] = []
        for i, prompt in enumerate(prompts):
            logger.info("Generating series part %d/%d", i + 1, len(prompts))
            url = await video.generate_video(prompt, options)
            if url:
                urls.append(url)
        return VideoResult(ideas=SERIES_SEPARATOR.join(prompts), series_urls=urls)

    async def generate_creative(self, request: CreativeRequest) -> CreativeResult:
        result = CreativeResult()
        logger.info("Generating %s for %s", ", ".join(request.formats), request.path)

        for fmt in request.formats:
            if fmt not in FORMATS:
                logger.warning("Unknown format: %s", fmt)
                continue
            try:
                await self._generate_format(fmt, request, result)
            except Exception as exc:
                logger.exception("Error generating %s", fmt)
                result.errors.append(f"Failed to generate {fmt}: {exc}")

        self._persist(request, result)
        return result

    async def _generate_format(self, fmt: str, req: CreativeRequest, result: CreativeResult) -> None:
        if fmt == "image":
            ideas = await self.generate_ideas(
                req.path, req.palette, req.customizations, req.image_prompt_choice, req.image_aspect_ratio
            )
            result.image_url = ideas.image_url
            result.ideas = result.ideas or ideas.ideas
            result.formats_generated.append("image")

        elif fmt == "video":
            single = await self.generate_creative_video(
                req.path, req.palette, req.customizations, "single", req.image_prompt_choice, req.video_aspect_ratio
            )
            if single.video_url:
                result.video_url = single.video_url
                result.ideas = result.ideas or single.ideas
                result.formats_generated.append("video")
            else:
                result.errors.append("Failed to generate video")

        elif fmt == "series":
            series = await self.generate_creative_video(
                req.path, req.palette, req.customizations, "series", req.image_prompt_choice, req.video_aspect_ratio
            )
            if series.series_urls:
                result.series_urls = series.series_urls
                result.ideas = result.ideas or series.ideas
                result.formats_generated.append("series")
            else:
                result.errors.append("Failed to generate video series")

        elif fmt == "image-series":
            image_series = await self.generate_image_series(
                req.path,
                req.palette,
                req.customizations,
                req.series_theme_id,
                req.series_count,
                req.series_aspect_ratio,
            )
            if image_series.image_series_urls:
                result.image_series_urls = image_series.image_series_urls
                result.ideas = result.ideas or image_series.ideas
                result.formats_generated.append("image-series")
                result.errors.extend(image_series.errors)
            else:
                result.errors.append("Failed to generate image series")

        elif fmt == "combined":
            logger.info("Generating complete package")
            ideas = await self.generate_ideas(
                req.path, req.palette, req.customizations, req.image_prompt_choice, req.image_aspect_ratio
            )
            result.image_url = ideas.image_url
            result.ideas = result.ideas or ideas.ideas
            result.formats_generated.append("image")
            # A failed video part keeps the image and ideas already collected.
            for part in ("video", "series"):
                try:
                    await self._generate_format(part, req, result)
                except Exception as exc:
                    logger.exception("Error generating %s for combined package", part)
                    result.errors.append(f"Failed to generate {part}: {exc}")

    def _persist(self, req: CreativeRequest, result: CreativeResult) -> None:
        if not req.session_id:
            return
        palette = [{"hex": p.hex, "name": p.name, "suggested_role": p.suggested_role} for p in req.palette]
        metadata = {"path": req.path, "imagePromptChoice": req.image_prompt_choice}

        images = ([result.image_url] if result.image_url else []) + (result.image_series_urls or [])
        videos = ([result.video_url] if result.video_url else []) + (result.series_urls or [])
        for url in images:
            record_quietly(
                self.store,
                AssetRecord(
                    app_mode="color",
                    kind="image",
                    source="generate-creative",
                    session_key=req.session_id,
                    data_url=url,
                    prompt=result.ideas,
                    metadata=metadata,
                    palette=palette,
                ),
            )
        for url in videos:
            record_quietly(
                self.store,
                AssetRecord(
                    app_mode="color",
                    kind="video",
                    source="generate-creative",
                    session_key=req.session_id,
                    url=url,
                    data_url=url,
                    prompt=result.ideas,
                    metadata=metadata,
                    palette=palette,
                ),
            )
