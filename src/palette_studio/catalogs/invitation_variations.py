from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VariationDirective:
    id: str
    name: str
    description: str
    prompt_cue: str


INVITATION_VARIATIONS: tuple[VariationDirective, ...] = (
    VariationDirective(
        "collage-energy", "Collage Energy", "Layered scraps, paper rips, and bold color blocking.",
        "collage-inspired layout with layered paper scraps, taped corners, and painterly strokes",
    ),
    VariationDirective(
        "letterpress-luxe", "Letterpress Luxe", "Debossed typography, thick cotton paper, foil edges.",
        "letterpress impression with thick cotton paper, debossed serif typography, and gold foil edges",
    ),
    VariationDirective(
        "photo-forward", "Photo Forward", "Hero photographic frame with translucent overlays.",
        "photo-forward layout featuring cinematic photo frame, translucent gradient overlays, and minimal copy blocks",
    ),
    VariationDirective(
        "illustrated-story", "Illustrated Story", "Hand-drawn motifs and whimsical doodles framing the copy.",
        "hand-drawn illustrated motifs wrapping the copy, whimsical doodles, gentle pencil texture",
    ),
    VariationDirective(
        "kinetic-type", "Kinetic Type", "Dynamic stacked typography and perspective grids.",
        "kinetic typography with perspective grids, tilted letters, and glowing shadow trails",
    ),
    VariationDirective(
        "minimal-air", "Minimal Air", "Ultra-clean spacing, micro details, and whisper colors.",
        "ultra minimal swiss layout, micro typographic details, airy spacing, whisper pastel palette",
    ),
)


def get_variation(variation_id: str) -> VariationDirective | None:
    return next((v for v in INVITATION_VARIATIONS if v.id == variation_id), None)
