from __future__ import annotations

from palette_studio.catalogs.environments import EnvironmentCategory, EnvironmentVariation, get_variation
from palette_studio.errors import InvalidRequest

_QUALITY_KEYWORDS = ("professional", "high resolution", "commercial")


def enhance_custom_prompt(
    custom_prompt: str,
    product_description: str | None = None,
    color_palette: list[str] | None = None,
) -> str:
    prompt = custom_prompt
    if product_description:
        prompt = f"{product_description} {prompt}"
    if color_palette:
        prompt = f"{prompt}, color story inspired by {', '.join(color_palette)} guiding lighting and art direction"
    if not any(k in prompt.lower() for k in _QUALITY_KEYWORDS):
        prompt += ", professional photography, high resolution, commercial quality"
    return prompt


def build_placement_prompt(
    category_id: str,
    variation_id: str | None = None,
    custom_prompt: str | None = None,
    product_description: str | None = None,
    color_palette: list[str] | None = None,
) -> str:
    """Scene prompt for placing a product: a custom prompt wins over the variation template."""
    if custom_prompt and custom_prompt.strip():
        return enhance_custom_prompt(custom_prompt, product_description, color_palette)

    if not variation_id:
        raise InvalidRequest("Either variation ID or custom prompt is required")
    variation = get_variation(category_id, variation_id)
    if variation is None:
        raise InvalidRequest("Invalid category or variation ID")

    prompt = variation.prompt_template.replace("{product}", product_description or "the product")
    prompt += ", professional photography, high resolution, detailed, sharp focus, commercial quality"
    if color_palette:
        prompt += f". Palette cues: {', '.join(color_palette)} applied to lighting, props, and set design"
    return prompt


def build_enhancement_request(base_prompt: str, product_description: str) -> str:
    return (
        "You are an expert product photography prompt engineer. Enhance this product photography prompt to be more "
        "specific and visually compelling while keeping it concise (under 100 words).\n\n"
        f"Product: {product_description}\n"
        f"Base prompt: {base_prompt}\n\n"
        "Enhanced prompt:"
    )


def build_product_video_prompt(
    category: EnvironmentCategory,
    variation: EnvironmentVariation | None = None,
    custom_prompt: str | None = None,
    product_description: str | None = None,
    color_palette: list[str] | None = None,
) -> str:
    palette_line = (
        f"Color direction: {', '.join(color_palette)} applied to lighting, wardrobe, and set dressing."
        if color_palette
        else ""
    )

    if custom_prompt:
        return (
            f"Professional product showcase video. {custom_prompt}.\n"
            f"{palette_line}\n"
            "The video should feature smooth camera movements, professional lighting, and highlight the product "
            "naturally within the scene.\n"
            "Style: cinematic, high-end commercial quality, 4K resolution aesthetic."
        )

    product_context = f"featuring a {product_description}" if product_description else "featuring the product"
    scene_description = variation.prompt_template if variation else category.description
    scene_name = variation.name if variation else category.name
    return (
        f"Professional product showcase video {product_context} in a {scene_name} setting.\n"
        f"Scene: {scene_description}\n"
        f"{palette_line}\n"
        "The video should feature:\n"
        "- Smooth, cinematic camera movements (slow dolly, gentle pan, or subtle zoom)\n"
        "- Professional lighting that highlights the product\n"
        "- Natural integration of the product within the environment\n"
        "- High-end commercial quality aesthetic\n"
        "- Clean, modern visual style\n"
        "Duration: 5-8 seconds, loopable if possible.\n"
        "Style: cinematic, professional commercial, 4K resolution aesthetic."
    )
