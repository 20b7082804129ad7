from __future__ import annotations

from dataclasses import dataclass

from palette_studio.catalogs.creative_paths import ART_CRAFT, COOKING, DESIGN, EVENT, FASHION, INTERIOR, MAKEUP


@dataclass(frozen=True)
class AspectRatio:
    id: str
    label: str
    description: str
    best_for: tuple[str, ...]
    width: int
    height: int


ASPECT_RATIOS: tuple[AspectRatio, ...] = (
    AspectRatio("9:16", "Vertical", "Portrait orientation", ("Instagram Stories", "TikTok", "Reels", "Mobile"), 1080, 1920),
    AspectRatio("16:9", "Horizontal", "Landscape orientation", ("YouTube", "Web", "Presentations", "Desktop"), 1920, 1080),
    AspectRatio("1:1", "Square", "Equal sides", ("Instagram Feed", "Portfolio", "Universal"), 1080, 1080),
)

DOMAIN_ASPECT_DEFAULTS: dict[str, dict[str, str]] = {
    COOKING: {"image": "1:1", "video": "9:16"},
    FASHION: {"image": "9:16", "video": "9:16"},
    INTERIOR: {"image": "16:9", "video": "16:9"},
    ART_CRAFT: {"image": "1:1", "video": "9:16"},
    MAKEUP: {"image": "1:1", "video": "9:16"},
    EVENT: {"image": "16:9", "video": "16:9"},
    DESIGN: {"image": "16:9", "video": "16:9"},
}


def get_aspect_ratio(ratio_id: str) -> AspectRatio:
    return next((ar for ar in ASPECT_RATIOS if ar.id == ratio_id), ASPECT_RATIOS[0])


def domain_defaults(path: str) -> dict[str, str]:
    return dict(DOMAIN_ASPECT_DEFAULTS.get(path) or {"image": "1:1", "video": "9:16"})
