from __future__ import annotations

import logging
import re
from dataclasses import asdict
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, Response

from palette_studio.api.deps import (
    get_asset_store,
    get_creative_service,
    get_invitation_service,
    get_product_service,
    get_text_provider,
    get_video_provider,
)
from palette_studio.api.models import (
    ExtractPaletteRequest,
    GenerateCreativeRequest,
    GenerateIdeasRequest,
    InvitationGenerateRequest,
    InvitationVideoRequest,
    ProductPlacementRequest,
    ProductVideoRequest,
    RemoveBackgroundRequest,
    SessionStateRequest,
)
from palette_studio.catalogs.aspect_ratios import ASPECT_RATIOS, DOMAIN_ASPECT_DEFAULTS
from palette_studio.catalogs.creative_paths import CREATIVE_PATHS, IMAGE_PROMPT_OPTIONS
from palette_studio.catalogs.environments import ENVIRONMENT_CATEGORIES
from palette_studio.catalogs.invitation_templates import INVITATION_TEMPLATES
from palette_studio.catalogs.invitation_variations import INVITATION_VARIATIONS
from palette_studio.catalogs.invitations import INVITATION_CATEGORIES
from palette_studio.catalogs.themes import IMAGE_SERIES_THEMES
from palette_studio.config import settings
from palette_studio.errors import GenerationError, InvalidRequest, ProviderNotConfigured
from palette_studio.logging_setup import configure_logging
from palette_studio.providers.base import TextProvider, VideoProvider
from palette_studio.providers.veo_provider import UpstreamError
from palette_studio.services.creative import CreativeRequest, CreativeService
from palette_studio.services.invitation import InvitationService
from palette_studio.services.product import ProductService
from palette_studio.storage import AssetStore

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="palette_studio")

_DATA_URL_PREFIX = re.compile(r"^data:image/[a-z]+;base64,")


@app.exception_handler(ProviderNotConfigured)
async def _provider_not_configured(request: Request, exc: ProviderNotConfigured) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(InvalidRequest)
async def _invalid_request(request: Request, exc: InvalidRequest) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(GenerationError)
async def _generation_error(request: Request, exc: GenerationError) -> JSONResponse:
    status = exc.status_code if isinstance(exc, UpstreamError) else 500
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error in %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/catalog")
def catalog() -> dict[str, Any]:
    return {
        "creative_paths": list(CREATIVE_PATHS),
        "image_prompt_options": {path: list(options) for path, options in IMAGE_PROMPT_OPTIONS.items()},
        "aspect_ratios": [asdict(ar) for ar in ASPECT_RATIOS],
        "domain_aspect_defaults": DOMAIN_ASPECT_DEFAULTS,
        "image_series_themes": {path: asdict(themes) for path, themes in IMAGE_SERIES_THEMES.items()},
        "environment_categories": [asdict(c) for c in ENVIRONMENT_CATEGORIES],
        "invitation_categories": [asdict(c) for c in INVITATION_CATEGORIES],
        "invitation_templates": [asdict(t) for t in INVITATION_TEMPLATES],
        "invitation_variations": [asdict(v) for v in INVITATION_VARIATIONS],
    }


@app.post("/api/extract-palette")
async def extract_palette(
    body: ExtractPaletteRequest,
    text: TextProvider | None = Depends(get_text_provider),
):
    if not body.image_base64:
        raise HTTPException(status_code=400, detail="Image data is required")
    if text is None:
        raise ProviderNotConfigured("ANTHROPIC_API_KEY")

    image_b64 = _DATA_URL_PREFIX.sub("", body.image_base64)
    logger.info("Extracting %d colors from image (%d chars)", body.swatches, len(image_b64))
    try:
        palette = await text.extract_palette(image_b64, swatches=body.swatches)
    except GenerationError as exc:
        logger.error("Palette extraction failed: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to extract color palette from image") from exc
    return asdict(palette)


@app.post("/api/generate-ideas")
async def generate_ideas(
    body: GenerateIdeasRequest,
    service: CreativeService = Depends(get_creative_service),
):
    if not body.path or not body.palette or not body.image_prompt_choice:
        raise HTTPException(status_code=400, detail="Path, palette, and image prompt choice are required")
    result = await service.generate_ideas(
        body.path,
        body.palette_entries(),
        body.customizations,
        body.image_prompt_choice,
        body.image_aspect_ratio,
    )
    return {"ideas": result.ideas, "image_url": result.image_url}


@app.post("/api/generate-creative")
async def generate_creative(
    body: GenerateCreativeRequest,
    service: CreativeService = Depends(get_creative_service),
):
    if not body.path or not body.palette or not body.image_prompt_choice or not body.formats:
        raise HTTPException(status_code=400, detail="Path, palette, image prompt choice, and formats are required")

    series = body.image_series_config
    result = await service.generate_creative(
        CreativeRequest(
            path=body.path,
            palette=body.palette_entries(),
            image_prompt_choice=body.image_prompt_choice,
            customizations=body.customizations,
            formats=body.formats,
            image_aspect_ratio=body.image_aspect_ratio,
            video_aspect_ratio=body.video_aspect_ratio,
            series_theme_id=series.theme_id,
            series_count=series.count,
            series_aspect_ratio=series.aspect_ratio,
            session_id=body.session_id,
        )
    )
    if not result.ideas and not result.formats_generated:
        raise HTTPException(status_code=500, detail="Failed to generate any content")
    return result.to_dict()


@app.post("/api/invitation-generate")
async def invitation_generate(
    body: InvitationGenerateRequest,
    service: InvitationService = Depends(get_invitation_service),
):
    results = await service.generate(
        body.event_details.to_details(),
        body.category_id,
        body.style_id,
        aspect_ratio=body.aspect_ratio,
        variant_count=body.variant_count,
        model=body.model,
        session_id=body.session_id,
        template_id=body.template_id,
        color_palette=body.color_palette,
        variation_modes=body.variation_modes,
    )
    return {"success": True, "results": [r.to_dict() for r in results]}


@app.post("/api/invitation-video")
async def invitation_video(
    body: InvitationVideoRequest,
    service: InvitationService = Depends(get_invitation_service),
):
    video = await service.generate_video(
        body.event_details.to_details(),
        body.category_id,
        body.style_id,
        aspect_ratio=body.aspect_ratio,
        session_id=body.session_id,
    )
    return {
        "success": True,
        "videoUrl": video.video_url,
        "promptUsed": video.prompt_used,
        "categoryName": video.category_name,
        "styleName": video.style_name,
    }


@app.post("/api/product-placement")
async def product_placement(
    body: ProductPlacementRequest,
    service: ProductService = Depends(get_product_service),
):
    result = await service.place(
        body.product_image,
        body.category_id,
        variation_id=body.variation_id,
        custom_prompt=body.custom_prompt,
        product_description=body.product_description,
        enhance_with_claude=body.enhance_with_claude,
        model=body.model,
        color_palette=body.color_palette,
        aspect_ratio=body.aspect_ratio,
        session_id=body.session_id,
    )
    return {
        "success": True,
        "imageUrl": result.image_url,
        "imageData": result.image_data,
        "promptUsed": result.prompt_used,
    }


@app.post("/api/product-video")
async def product_video(
    body: ProductVideoRequest,
    service: ProductService = Depends(get_product_service),
):
    video = await service.generate_video(
        body.category_id,
        variation_id=body.variation_id,
        custom_prompt=body.custom_prompt,
        aspect_ratio=body.aspect_ratio,
        product_description=body.product_description,
        session_id=body.session_id,
        color_palette=body.color_palette,
    )
    return {
        "success": True,
        "videoUrl": video.video_url,
        "promptUsed": video.prompt_used,
        "categoryName": video.category_name,
        "variationName": video.variation_name,
    }


@app.post("/api/remove-background")
async def remove_background(
    body: RemoveBackgroundRequest,
    service: ProductService = Depends(get_product_service),
):
    image = await service.remove_background(body.image_data, size=body.size, product_description=body.product_description)
    return {"success": True, "imageUrl": None, "imageData": image}


@app.get("/api/session")
def get_session(sessionId: str = "", store: AssetStore = Depends(get_asset_store)):
    if not sessionId:
        raise HTTPException(status_code=400, detail="sessionId is required")
    return {"session": store.fetch_session_state(sessionId)}


@app.post("/api/session")
def save_session(body: SessionStateRequest, store: AssetStore = Depends(get_asset_store)):
    if not body.session_id or not body.mode:
        raise HTTPException(status_code=400, detail="sessionId and mode are required")
    store.save_session_state(body.session_id, body.mode, body.state)
    return {"success": True}


@app.get("/api/assets")
def list_assets(sessionId: str = "", kind: str | None = None, store: AssetStore = Depends(get_asset_store)):
    if not sessionId:
        raise HTTPException(status_code=400, detail="sessionId is required")
    return {"assets": store.list_assets(sessionId, kind=kind)}


@app.get("/api/video/{file_id}")
async def proxy_video(file_id: str, video: VideoProvider | None = Depends(get_video_provider)):
    if video is None:
        raise HTTPException(status_code=500, detail="GOOGLE_GENERATIVE_AI_API_KEY is not configured")
    downloaded = await video.download_file(file_id)
    return Response(
        content=downloaded.content,
        media_type=downloaded.content_type,
        headers={"Accept-Ranges": "bytes", "Cache-Control": "private, max-age=3600"},
    )
