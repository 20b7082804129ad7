from __future__ import annotations

from typing import Any

from palette_studio.catalogs.creative_paths import (
    ART_CRAFT,
    COOKING,
    DESIGN,
    EVENT,
    FASHION,
    INTERIOR,
    MAKEUP,
)
from palette_studio.prompts.creative import accent_color, dominant_color, palette_names
from palette_studio.providers.base import PaletteEntry, VideoOptions

_STYLE_TEXT = {
    "cinematic": "Professional cinematic photography style, dramatic lighting, shallow depth of field. ",
    "artistic": "Artistic visual style, creative composition, enhanced colors and textures. ",
    "social": "Social media optimized, engaging visual style, trending aesthetics. ",
    "professional": "Professional commercial style, clean composition, product photography quality. ",
}

_DURATION_TEXT = {
    "short": "EXACTLY 5 SECONDS LONG. BRIEF DURATION. SHORT VIDEO CLIP. ",
    "medium": "EXACTLY 6 SECONDS LONG. MEDIUM DURATION. ",
    "long": "EXACTLY 8 SECONDS LONG. LONGER DURATION. ",
}

_DURATION_SECONDS = {"short": 5, "medium": 6, "long": 8}

_BASE_NEGATIVE = (
    "low quality, blurry, distorted, pixelated, artifacts, glitches, flickering, unstable motion, poor lighting, "
    "overexposed, underexposed, noisy, grainy, compressed, watermarks, logos, text overlay, subtitles"
)

_STYLE_NEGATIVE = {
    "cinematic": ", amateur, handheld camera shake, poor framing, bad composition",
    "artistic": ", generic, boring, lifeless, flat colors, mundane",
    "social": ", outdated trends, poor engagement, unprofessional",
    "professional": ", casual, informal, inconsistent branding, poor production value",
}


def duration_seconds(duration: str) -> int:
    return _DURATION_SECONDS.get(duration, 5)


def build_enhanced_video_prompt(base_prompt: str, options: VideoOptions) -> str:
    prefix = f"VERTICAL {options.aspect_ratio} aspect ratio, portrait composition. "
    prefix += _STYLE_TEXT.get(options.style, "")
    duration_text = _DURATION_TEXT.get(options.duration, "")
    suffix = "No text overlay, no subtitles, no watermarks. High quality, smooth motion."
    return f"{prefix}{base_prompt} {duration_text}{suffix}"


def build_negative_prompt(style: str) -> str:
    return _BASE_NEGATIVE + _STYLE_NEGATIVE.get(style, "")


def build_video_context(path: str, customizations: dict[str, Any]) -> str:
    parts: list[str] = []
    c = customizations
    if path == COOKING:
        if c.get("dish_type") and c["dish_type"] != "Chef's choice":
            parts.append(f"Dish: {c['dish_type']}")
        if c.get("cuisine_style"):
            parts.append(f"Style: {c['cuisine_style']}")
        if c.get("primary_cooking_method") and c["primary_cooking_method"] != "Any":
            parts.append(f"Method: {c['primary_cooking_method']}")
    elif path == FASHION:
        if c.get("style_preference") and c["style_preference"] != "Any":
            parts.append(f"Style: {c['style_preference']}")
        if c.get("key_garment") and c["key_garment"] != "Any":
            parts.append(f"Garment: {c['key_garment']}")
    elif path == INTERIOR:
        if c.get("room_type") and c["room_type"] != "Any Room":
            parts.append(f"Room: {c['room_type']}")
        if c.get("design_style") and c["design_style"] != "Any Style":
            parts.append(f"Style: {c['design_style']}")
    return ", ".join(parts)


def build_domain_video_prompt(
    path: str,
    palette: list[PaletteEntry],
    customizations: dict[str, Any],
    angle: str,
) -> str:
    colors = palette_names(palette)
    dominant = dominant_color(palette)
    accent = accent_color(palette, include_highlight=False)
    context = build_video_context(path, customizations)
    ctx = f" {context}." if context else ""
    shot = f" Shot focus: {angle}." if angle else ""

    if path == COOKING:
        if angle == "Dish Plated":
            return (
                f"Professional culinary video of elegant dish plating.{ctx} Beautiful presentation emphasizing "
                f"{dominant} tones with {accent} accents. Cinematic food styling, dramatic lighting, appetizing "
                f"close-ups. Colors: {colors}. Smooth plating motions, artistic arrangement."
            )
        if angle == "Cooking Process":
            return (
                f"Dynamic cooking process video.{ctx} Professional kitchen action, sizzling and steam, chef's hands "
                f"working. Colors inspired by {colors}, emphasizing {dominant} and {accent}. Realistic cooking "
                "cinematography."
            )
        if angle == "Artistic Ingredients":
            return (
                f"Artistic ingredient arrangement video.{ctx} Fresh ingredients floating and arranging themselves, "
                f"featuring colors {colors}. Magical food styling, clean background, professional food photography "
                "motion."
            )
        return (
            f"Culinary concept video.{ctx} Beautiful food presentation featuring colors {colors}, emphasizing "
            f"{dominant} with {accent} accents. Professional food cinematography."
        )

    if path == FASHION:
        if angle == "Full Outfit Look":
            return (
                f"High fashion video showcasing complete outfit.{ctx} Model presenting coordinated pieces in colors "
                f"{colors}. Professional fashion cinematography, elegant movement, clean background."
            )
        if angle == "Fabric/Detail Focus":
            return (
                f"Close-up fashion detail video.{ctx} Macro shots of fabric textures and details, emphasizing "
                f"{dominant} with {accent} highlights. Luxury fashion cinematography."
            )
        return (
            f"Fashion concept video.{ctx} Elegant styling featuring colors {colors}, professional fashion "
            "photography in motion."
        )

    if path == INTERIOR:
        if angle == "Room Perspective View":
            return (
                f"Cinematic interior design walkthrough.{ctx} Wide angle room reveal showcasing color scheme "
                f"{colors}. Professional architectural videography, natural lighting, smooth camera movement."
            )
        return f"Interior design concept video.{ctx} Beautiful space featuring colors {colors}, architectural cinematography."

    if path == ART_CRAFT:
        if angle == "Finished Artwork":
            return (
                f"Art creation video showcasing finished piece.{ctx} Gallery-quality artwork featuring {colors}. "
                "Artistic cinematography, dramatic lighting, creative composition."
            )
        if angle == "Studio Context":
            return (
                f"Artist studio video.{ctx} Creative workspace with art in progress, natural lighting, colors "
                f"{colors}. Documentary-style artistic cinematography."
            )
        return f"Art concept video.{ctx} Creative artwork featuring colors {colors}, artistic cinematography."

    if path == MAKEUP:
        return (
            f"Professional makeup video.{ctx}{shot} Beautiful makeup application showcasing colors {colors}, "
            f"emphasizing {dominant} with {accent} accents. Beauty cinematography, perfect lighting."
        )

    if path == EVENT:
        return (
            f"Event design video.{ctx}{shot} Beautiful event setup featuring color palette {colors}. Professional "
            "event cinematography, elegant atmosphere."
        )

    if path == DESIGN:
        return (
            f"Design concept video.{ctx}{shot} Modern graphic design elements featuring colors {colors}. "
            "Professional motion graphics style, clean composition."
        )

    return (
        f"Creative concept video featuring colors {colors}. Professional cinematic style showcasing the beauty and "
        "harmony of these colors in a creative context."
    )


def build_series_prompts(path: str, palette: list[PaletteEntry], customizations: dict[str, Any]) -> list[str]:
    """Five-part sequence taking the palette from raw colors to a finished concept."""
    colors = palette_names(palette)
    context = build_video_context(path, customizations)
    ctx = f" {context}." if context else ""
    return [
        f"Part 1: Color palette inspiration.{ctx} Beautiful display of colors {colors} in artistic arrangement. "
        "Professional cinematography, clean presentation.",
        f"Part 2: Color transformation begins.{ctx} Colors start to take shape and form, magical transition effects. "
        "Smooth motion, artistic lighting.",
        f"Part 3: Creative elements emerge.{ctx} Colors transform into domain-specific elements, featuring {colors}. "
        "Professional cinematography.",
        f"Part 4: Elements combine and arrange.{ctx} Creative elements move and arrange themselves harmoniously. "
        f"Colors {colors}, elegant choreography.",
        f"Part 5: Final creative presentation.{ctx} Complete creative concept showcasing {colors} in perfect "
        "harmony. Professional presentation, dramatic finale.",
    ]


SERIES_SEPARATOR = "\n\n---\n\n"
