from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InvitationTemplate:
    id: str
    category_id: str
    title: str
    description: str
    prompt_cues: tuple[str, ...]
    thumbnail: str | None = None
    layout_notes: str | None = None


INVITATION_TEMPLATES: tuple[InvitationTemplate, ...] = (
    InvitationTemplate(
        id="editorial-save-the-date",
        category_id="wedding",
        title="Editorial Save the Date",
        description="Asymmetrical type, negative space hero photo, subtle embossing.",
        thumbnail="/templates/editorial-save-the-date.png",
        prompt_cues=(
            "editorial typography hierarchy with oversized serif numerals",
            "full-bleed hero photo masked with oval cutout",
            "blind deboss border and vellum overlay texture",
        ),
        layout_notes="Headline left, details right. include subtle debossed monogram in the footer.",
    ),
    InvitationTemplate(
        id="retro-poster-party",
        category_id="celebration",
        title="Retro Poster Party",
        description="70s gig-poster energy with halftone gradients and chunky type.",
        thumbnail="/templates/retro-poster-party.png",
        prompt_cues=(
            "retro gig poster layout with stacked typography and halftone gradients",
            "grainy paper texture with misregistered CMYK ink",
            "bold ribbon banners framing key details",
        ),
        layout_notes="Use curved text for the headliner and layered tickets behind the copy.",
    ),
    InvitationTemplate(
        id="boardroom-luxe",
        category_id="corporate",
        title="Boardroom Luxe",
        description="Marble split layout, metallic separators, premium sans-serif.",
        thumbnail="/templates/boardroom-luxe.png",
        prompt_cues=(
            "split layout featuring deep marble slab and bright negative space",
            "thin metallic separators and micro-grid annotations",
            "premium sans-serif typography with high-contrast weights",
        ),
        layout_notes="Focus on agenda modules with iconography for each segment.",
    ),
    InvitationTemplate(
        id="neon-deco-birthday",
        category_id="birthday",
        title="Neon Deco Poster",
        description="Chrome numerals, stacked deco type, holographic gradients.",
        prompt_cues=(
            "multi-column deco typography with oversized numerals",
            "chrome balloons and neon tube accents framing the title",
            "gradient dance-floor reflection beneath the hero type",
        ),
        layout_notes="Center the age badge, anchor RSVP bottom-right in a pill label.",
    ),
    InvitationTemplate(
        id="crestfolio-grad",
        category_id="graduation",
        title="Foil Crest Announcement",
        description="Formal crest lockup with photo strip and micro serif labels.",
        prompt_cues=(
            "top crest with laurel branches and monogram inside gold foil circle",
            "vertical photo strip framed in letterpress texture",
            "micro-serif informational labels separated by hairline rules",
        ),
        layout_notes="Keep crest + headline above the fold, pair serif + sans in a 60/40 split.",
    ),
    InvitationTemplate(
        id="storybook-shower",
        category_id="baby-shower",
        title="Storybook Spread",
        description="Soft scalloped frames, watercolor critters, dotted borders.",
        prompt_cues=(
            "left/right storybook layout with scalloped borders",
            "hand-painted baby animals sitting on watercolor clouds",
            "dotted line dividers with whimsical script subheads",
        ),
        layout_notes="Hero illustration on the left, copy on right, add floating cloud labels for time + RSVP.",
    ),
)


def templates_for_category(category_id: str) -> list[InvitationTemplate]:
    return [t for t in INVITATION_TEMPLATES if t.category_id == category_id]


def get_template(template_id: str) -> InvitationTemplate | None:
    return next((t for t in INVITATION_TEMPLATES if t.id == template_id), None)
