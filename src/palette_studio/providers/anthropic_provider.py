from __future__ import annotations

import json
import logging
import re
from typing import Any

from palette_studio.config import settings
from palette_studio.errors import GenerationError
from palette_studio.logging_setup import preview
from palette_studio.prompts.creative import build_ideas_prompt
from palette_studio.prompts.data_urls import detect_mime_type
from palette_studio.prompts.product import build_enhancement_request
from palette_studio.providers.base import PaletteEntry, PaletteOutput

logger = logging.getLogger(__name__)

_FULL_OBJECT = re.compile(r"\{[\s\S]*\}")
_FENCED_OBJECT = re.compile(r"```(?:json)?\s*(\{[\s\S]*?\})\s*```")
_MOOD_OBJECT = re.compile(r"\{[^}]*\"mood_description\"[^}]*\}")


def _palette_prompt(swatches: int) -> str:
    return (
        f"Analyze this image carefully. Identify the {swatches} most dominant and characteristic colors that define "
        "its visual identity.\n\n"
        "For each color, determine its approximate hex code, a common descriptive name, and suggest its role based "
        "on its visual prominence and usage in the image (e.g., 'Dominant Background', 'Primary Subject', "
        "'Highlight/Accent', 'Neutral Complement', 'Shadow/Depth').\n\n"
        "Additionally, provide a single sentence describing the overall mood or feeling conveyed by the image's "
        "color scheme.\n\n"
        "Return ONLY a valid JSON object adhering strictly to this schema:\n"
        "{\n"
        '  "mood_description": "A single sentence describing the mood.",\n'
        '  "palette": [\n'
        "    {\n"
        '      "hex": "#RRGGBB",\n'
        '      "name": "<Descriptive Color Name>",\n'
        '      "suggested_role": "<Suggested Role>"\n'
        "    }\n"
        "  ]\n"
        "}\n\n"
        "Ensure hex codes are accurate. Be perceptive in naming colors and suggesting roles."
    )


def _extract_json_block(text: str) -> str | None:
    m = _FULL_OBJECT.search(text)
    if m:
        return m.group(0)
    m = _FENCED_OBJECT.search(text)
    if m:
        return m.group(1)
    m = _MOOD_OBJECT.search(text)
    if m:
        return m.group(0)
    return None


def parse_palette_response(text: str) -> PaletteOutput:
    """Pull the palette JSON out of a free-text model reply."""
    block = _extract_json_block(text)
    if block is None:
        raise GenerationError("No JSON found in palette response")
    try:
        data: Any = json.loads(block)
    except json.JSONDecodeError as exc:
        raise GenerationError(f"Palette response is not valid JSON: {exc}") from exc

    palette = data.get("palette") if isinstance(data, dict) else None
    if not isinstance(palette, list) or not palette:
        raise GenerationError("Palette response has no colors")
    return PaletteOutput(
        mood_description=str(data.get("mood_description", "")),
        palette=[PaletteEntry.from_dict(p) for p in palette if isinstance(p, dict)],
    )


def _first_text(resp: Any) -> str | None:
    content = getattr(resp, "content", None) or []
    if not content:
        return None
    block = content[0]
    if getattr(block, "type", None) != "text":
        return None
    return getattr(block, "text", None)


class AnthropicProvider:
    name = "anthropic"

    def __init__(self, api_key: str) -> None:
        import anthropic

        self.client = anthropic.AsyncAnthropic(api_key=api_key)

    async def extract_palette(self, image_b64: str, swatches: int = 5) -> PaletteOutput:
        mime = detect_mime_type(image_b64)
        logger.info("Extracting %d-color palette (%d chars, %s)", swatches, len(image_b64), mime)
        resp = await self.client.messages.create(
            model=settings.anthropic_model,
            max_tokens=1000,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "image", "source": {"type": "base64", "media_type": mime, "data": image_b64}},
                        {"type": "text", "text": _palette_prompt(swatches)},
                    ],
                }
            ],
        )
        text = _first_text(resp)
        if text is None:
            raise GenerationError("Palette response did not contain text")
        return parse_palette_response(text)

    async def generate_ideas(
        self,
        palette: list[PaletteEntry],
        domain: str,
        customizations: dict[str, Any],
        additional_context: str | None = None,
    ) -> str:
        prompt = build_ideas_prompt(palette, domain, customizations, additional_context)
        logger.info("Generating ideas for %s: %s", domain, preview(prompt))
        resp = await self.client.messages.create(
            model=settings.anthropic_model,
            max_tokens=1500,
            messages=[{"role": "user", "content": prompt}],
        )
        return _first_text(resp) or "Unable to generate ideas."

    async def enhance_prompt(self, base_prompt: str, product_description: str) -> str:
        try:
            resp = await self.client.messages.create(
                model=settings.anthropic_enhance_model,
                max_tokens=200,
                messages=[{"role": "user", "content": build_enhancement_request(base_prompt, product_description)}],
            )
        except Exception:
            logger.exception("Prompt enhancement failed; using base prompt")
            return base_prompt
        text = _first_text(resp)
        return text.strip() if text else base_prompt
