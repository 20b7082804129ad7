from __future__ import annotations

import re
from typing import Mapping

from palette_studio.catalogs.invitation_templates import InvitationTemplate
from palette_studio.catalogs.invitation_variations import VariationDirective
from palette_studio.catalogs.invitations import (
    EventDetails,
    InvitationCategory,
    InvitationStyle,
    format_event_details,
)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def apply_template(template: str, context: Mapping[str, str]) -> str:
    """Fill `{key}` placeholders; unknown keys become empty strings."""
    return _PLACEHOLDER.sub(lambda m: context.get(m.group(1), ""), template)


def _detail_lines(details: EventDetails, rsvp_label: str) -> list[str]:
    if details.date and details.time:
        when: str | None = f"{details.date} • {details.time}"
    else:
        when = details.date
    lines = [
        details.title,
        details.subtitle,
        when,
        details.location,
        f"Hosted by {details.host_name}" if details.host_name else None,
        f"{rsvp_label} {details.rsvp_info}" if details.rsvp_info else None,
    ]
    return [line for line in lines if line]


def build_invitation_prompt(
    details: EventDetails,
    category: InvitationCategory,
    style: InvitationStyle,
    aspect_ratio: str,
    variation_index: int,
    custom_palette: list[str] | None = None,
    template: InvitationTemplate | None = None,
    variation: VariationDirective | None = None,
) -> str:
    if custom_palette:
        palette_text = ", ".join(custom_palette)
    else:
        palette_text = ", ".join(style.color_scheme) or "designer-selected palette"

    context = {
        "eventTitle": details.title or f"{category.name} Celebration",
        "eventSubtitle": details.subtitle or "",
        "eventDescription": details.description or category.description,
        "categoryName": category.name,
        "styleName": style.name,
        "toneDescription": style.description,
        "detailsBlock": format_event_details(details),
        "colorPalette": palette_text,
    }

    style_prompt = apply_template(style.prompt_template, context)
    palette_line = f"Use this palette: {', '.join(custom_palette)}." if custom_palette else ""
    template_line = ""
    if template is not None and template.prompt_cues:
        template_line = f'Template inspiration "{template.title or "reference"}": {"; ".join(template.prompt_cues)}.'
    variation_line = f"Variation focus: {variation.prompt_cue}." if variation is not None and variation.prompt_cue else ""

    lines = _detail_lines(details, "RSVP:")
    copy_block = "\n".join(f"- {line}" for line in lines) if lines else "- Event details TBD"

    return (
        f"Design a {style.name} {category.name.lower()} invitation in aspect ratio {aspect_ratio}.\n"
        f"{style_prompt}\n"
        f"{palette_line}\n"
        f"{template_line}\n"
        f"{variation_line}\n"
        "Typography must clearly communicate:\n"
        f"{copy_block}\n"
        f"Layout should feel {style.description.lower()}. Include painterly imperfections for variation "
        f"{variation_index + 1}.\n"
        "Avoid spelling errors. Export as high-resolution, print-ready artwork."
    )


def build_invitation_video_prompt(
    details: EventDetails,
    category: InvitationCategory,
    style: InvitationStyle,
    aspect_ratio: str,
) -> str:
    copy_block = "\n".join(f"- {line}" for line in _detail_lines(details, "RSVP"))
    return (
        f'Animated {category.name.lower()} invitation video for "{details.title}" in {aspect_ratio} aspect ratio.\n'
        f"Style: {style.name} • {style.description}.\n"
        "Scene direction: start with establishing textures, reveal hero typography, animate supporting "
        "illustrations, add soft particle motion. Use camera pushes and parallax.\n"
        "Copy to display:\n"
        f"{copy_block}\n"
        "Tone should feel premium and loop seamlessly. No audio, subtitles, or brand watermarks."
    )


def normalize_video_aspect_ratio(aspect_ratio: str) -> str:
    if aspect_ratio == "1:1":
        return "1:1"
    if aspect_ratio in ("16:9", "3:2"):
        return "16:9"
    return "9:16"
