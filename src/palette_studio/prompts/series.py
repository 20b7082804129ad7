from __future__ import annotations

import math
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
from palette_studio.catalogs.themes import get_theme
from palette_studio.prompts.creative import accent_color, dominant_color, palette_names
from palette_studio.providers.base import PaletteEntry

_PROGRESS_STEPS = ("initial", "early stage", "mid-development", "advanced stage", "final result")
_PORTFOLIO_ANGLES = ("straight-on view", "45-degree angle", "overhead shot", "close-up detail", "wide context shot")
_SOCIAL_STYLES = ("candid moment", "stylized shot", "behind-the-scenes", "detailed close-up", "atmospheric wide")
_GENERIC_EMPHASES = ("primary focus", "alternative angle", "detail showcase", "context view", "creative interpretation")


def build_series_context(path: str, customizations: dict[str, Any]) -> str:
    c = customizations
    parts: list[str] = []
    if path == COOKING:
        if c.get("dish_type") and c["dish_type"] != "Chef's choice":
            parts.append(str(c["dish_type"]))
        if c.get("cuisine_style"):
            parts.append(f"{c['cuisine_style']} cuisine")
        if c.get("primary_cooking_method") and c["primary_cooking_method"] != "Any":
            parts.append(f"{c['primary_cooking_method']} cooking")
    elif path == FASHION:
        if c.get("style_preference") and c["style_preference"] != "Any":
            parts.append(f"{c['style_preference']} style")
        if c.get("key_garment") and c["key_garment"] != "Any":
            parts.append(f"featuring {c['key_garment']}")
    elif path == INTERIOR:
        if c.get("room_type") and c["room_type"] != "Any Room":
            parts.append(str(c["room_type"]))
        if c.get("design_style") and c["design_style"] != "Any Style":
            parts.append(f"{c['design_style']} design")
    elif path == ART_CRAFT:
        if c.get("art_style"):
            parts.append(f"{c['art_style']} style")
        if c.get("complexity"):
            parts.append(f"{c['complexity']} complexity")
    elif path == MAKEUP:
        if c.get("occasion") and c["occasion"] != "Any Event":
            parts.append(f"for {c['occasion']}")
        if c.get("intensity"):
            parts.append(f"{c['intensity']} intensity")
    elif path == EVENT:
        if c.get("event_type") and c["event_type"] != "Any Event":
            parts.append(str(c["event_type"]))
        if c.get("season"):
            parts.append(f"{c['season']} season")
    elif path == DESIGN:
        if c.get("project_type"):
            parts.append(f"{c['project_type']} project")
        if c.get("design_style"):
            parts.append(f"{c['design_style']} aesthetic")
    return ", ".join(parts)


def _variations(base: str, count: int, theme_id: str) -> list[str]:
    out: list[str] = []
    for i in range(count):
        head = f"{base} Image {i + 1} of {count}:"
        if "transformation" in theme_id or "tutorial" in theme_id:
            idx = math.floor(i / count * len(_PROGRESS_STEPS))
            step = _PROGRESS_STEPS[idx] if idx < len(_PROGRESS_STEPS) else "stage"
            out.append(f"{head} {step}.")
        elif "portfolio" in theme_id or "catalog" in theme_id:
            out.append(f"{head} {_PORTFOLIO_ANGLES[i % len(_PORTFOLIO_ANGLES)]}, professional composition.")
        elif "social" in theme_id:
            out.append(f"{head} {_SOCIAL_STYLES[i % len(_SOCIAL_STYLES)]}, social media optimized.")
        else:
            out.append(f"{head} {_GENERIC_EMPHASES[i % len(_GENERIC_EMPHASES)]}.")
    return out


def _generic_prompts(palette: list[PaletteEntry], count: int) -> list[str]:
    colors = palette_names(palette)
    return [
        f"Professional photography series image {i + 1} of {count}. "
        f"Creative concept featuring colors: {colors}. "
        "High quality, professional composition, cohesive visual style."
        for i in range(count)
    ]


def build_image_series_prompts(
    path: str,
    palette: list[PaletteEntry],
    customizations: dict[str, Any],
    theme_id: str,
    count: int,
) -> list[str]:
    theme = get_theme(path, theme_id)
    if theme is None:
        return _generic_prompts(palette, count)

    base = (
        theme.prompt_template.replace("{colors}", palette_names(palette))
        .replace("{dominant}", dominant_color(palette))
        .replace("{accent}", accent_color(palette, include_highlight=False))
        .replace("{context}", build_series_context(path, customizations))
    )
    return _variations(base, count, theme.id)
