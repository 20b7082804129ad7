from __future__ import annotations

from typing import Any, Callable

from palette_studio.catalogs.creative_paths import (
    ART_CRAFT,
    COOKING,
    DESIGN,
    DOMAIN_BRIEFS,
    EVENT,
    FASHION,
    INTERIOR,
    MAKEUP,
)
from palette_studio.providers.base import PaletteEntry

Customizations = dict[str, Any]

# Values that mean "no preference" and are left out of the ideas prompt.
_IDEAS_SKIP_VALUES = {"Any", "Chef's choice"}


def palette_names(palette: list[PaletteEntry]) -> str:
    return ", ".join(p.name for p in palette)


def dominant_color(palette: list[PaletteEntry]) -> str:
    if not palette:
        return ""
    hit = next((p for p in palette if "Dominant" in p.suggested_role), None)
    return (hit or palette[0]).name


def accent_color(palette: list[PaletteEntry], include_highlight: bool = True) -> str:
    if not palette:
        return ""
    hit = next(
        (
            p
            for p in palette
            if "Accent" in p.suggested_role or (include_highlight and "Highlight" in p.suggested_role)
        ),
        None,
    )
    return (hit or palette[-1]).name


def _pick(customizations: Customizations, key: str, label: str, skip: str | None = None) -> str | None:
    value = customizations.get(key)
    if not value or (skip is not None and value == skip):
        return None
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(v) for v in value)
    return f"{label}: {value}"


# (key, label, sentinel) per creative path, in prompt order.
_CONTEXT_FIELDS: dict[str, tuple[tuple[str, str, str | None], ...]] = {
    COOKING: (
        ("dish_type", "Dish type", "Chef's choice"),
        ("cuisine_style", "Cuisine style", None),
        ("primary_cooking_method", "Cooking method", "Any"),
        ("dietary_needs", "Dietary needs", None),
    ),
    FASHION: (
        ("style_preference", "Style", "Any"),
        ("season", "Season", "Any"),
        ("key_garment", "Key garment", "Any"),
        ("fabric_texture", "Fabric focus", "Any"),
    ),
    INTERIOR: (
        ("room_type", "Room", "Any Room"),
        ("design_style", "Style", "Any Style"),
        ("budget_range", "Budget", "Any Budget"),
    ),
    ART_CRAFT: (
        ("art_medium", "Medium", "Any Medium"),
        ("artistic_style", "Style", "Any Style"),
        ("skill_level", "Skill Level", "Any Complexity"),
        ("subject_matter", "Subject", "Any Subject"),
        ("art_color_scheme", "Color Scheme", "Any Colors"),
        ("art_purpose", "Purpose", "Any Purpose"),
    ),
    MAKEUP: (
        ("makeup_style", "Makeup style", "Any Look"),
        ("occasion", "Occasion", "Any Occasion"),
        ("focus_feature", "Focus feature", "Balanced Look"),
        ("color_scheme", "Color scheme", "Any Colors"),
        ("intensity_level", "Intensity", "Any Intensity"),
        ("age_group", "Age group", "Any Age"),
    ),
    EVENT: (
        ("event_type", "Event", "Any Event"),
        ("atmosphere", "Atmosphere", "Any Atmosphere"),
        ("event_size", "Size", "Any Size"),
        ("event_color_theme", "Color theme", "Any Colors"),
        ("venue_type", "Venue", "Any Venue"),
        ("event_budget", "Budget", "Any Budget"),
    ),
    DESIGN: (
        ("project_type", "Project", "Any Project"),
        ("design_approach", "Design style", "Any Style"),
        ("target_industry", "Industry", "Any Industry"),
        ("color_palette", "Color palette", "Any Colors"),
        ("complexity_level", "Complexity", "Any Complexity"),
        ("target_audience", "Target audience", "Any Audience"),
    ),
}


def build_context(path: str, customizations: Customizations) -> str:
    """Summarize the customizations that matter for a creative path, e.g. "Dish type: Dessert. Cuisine style: Thai"."""
    fields = _CONTEXT_FIELDS.get(path, ())
    parts = [_pick(customizations, key, label, skip) for key, label, skip in fields]
    return ". ".join(p for p in parts if p)


def build_ideas_request(path: str, customizations: Customizations) -> tuple[str, str] | None:
    """Domain phrase and additional context for the ideas model, or None for an unknown path."""
    brief = DOMAIN_BRIEFS.get(path)
    if brief is None:
        return None
    domain, deliverable = brief
    return domain, f"{build_context(path, customizations)} {deliverable}"


def _customizations_text(customizations: Customizations) -> str:
    parts: list[str] = []
    for key, value in customizations.items():
        if key == "text_length" or not value or (isinstance(value, str) and value in _IDEAS_SKIP_VALUES):
            continue
        if isinstance(value, (list, tuple)):
            value = ", ".join(str(v) for v in value)
        parts.append(f"{key}: {value}")
    return ", ".join(parts)


def build_ideas_prompt(
    palette: list[PaletteEntry],
    domain: str,
    customizations: Customizations,
    additional_context: str | None = None,
) -> str:
    palette_description = ", ".join(f"{p.name} ({p.hex}) - {p.suggested_role}" for p in palette)
    custom_text = _customizations_text(customizations)
    text_length = customizations.get("text_length") or "300-500"
    custom_line = f"Customizations: {custom_text}" if custom_text else ""
    context_line = f"Additional Context: {additional_context}" if additional_context else ""
    return (
        f"You are a creative expert in {domain}. Create inspiring and detailed ideas based on this color palette:\n\n"
        f"Color Palette: {palette_description}\n\n"
        f"{custom_line}\n"
        f"{context_line}\n\n"
        "Generate creative, detailed, and inspiring ideas that make the most of these colors. "
        "Be specific, creative, and provide actionable concepts. "
        f"The response should be between {text_length} words."
    )


ImageTemplate = Callable[[str, str, str, str], str]


def _image_templates() -> dict[str, tuple[str, dict[str, tuple[str, ImageTemplate]], ImageTemplate]]:
    """Per path: (default style, {angle: (style, template)}, fallback template).

    Templates take (concept, colors, dominant, accent).
    """
    return {
        COOKING: (
            "photorealistic",
            {
                "Dish Plated": ("photorealistic", lambda c, cols, d, a: (
                    f"Professional food photography of {c}. Beautiful plating on elegant dishware. Colors emphasizing "
                    f"{d} tones with {a} accents. Cinematic lighting, shallow depth of field, appetizing presentation."
                )),
                "Artistic Ingredients": ("photorealistic", lambda c, cols, d, a: (
                    f"Artistic flat lay arrangement of ingredients for {c}. Clean background, beautiful composition "
                    f"using colors from palette: {cols}. High-end food styling."
                )),
                "Cooking Process": ("photorealistic", lambda c, cols, d, a: (
                    f"Dynamic cooking action shot preparing {c}. Professional kitchen setting, steam and movement, "
                    f"colors inspired by {cols}. Realistic cooking photography."
                )),
                "Concept Sketch": ("artistic", lambda c, cols, d, a: (
                    f"Beautiful culinary illustration concept sketch of {c}. Watercolor and ink style, showing plating "
                    f"and presentation. Color palette: {cols}."
                )),
            },
            lambda c, cols, d, a: f"Professional food photography of {c} using colors: {cols}.",
        ),
        FASHION: (
            "photorealistic",
            {
                "Full Outfit Look": ("photorealistic", lambda c, cols, d, a: (
                    f"High fashion photography of complete outfit inspired by {c}. Model wearing coordinated pieces "
                    f"in colors: {cols}. Professional fashion photography, clean background."
                )),
                "Flat Lay Styling": ("photorealistic", lambda c, cols, d, a: (
                    f"Luxury fashion flat lay styling of {c}. Arranged on marble surface, using color palette: "
                    f"{cols}. High-end fashion photography style."
                )),
                "Fabric/Detail Focus": ("photorealistic", lambda c, cols, d, a: (
                    f"Close-up detailed shot of fabric textures and details from {c}. Emphasizing {d} with {a} "
                    "details. Macro fashion photography."
                )),
                "Fashion Illustration": ("artistic", lambda c, cols, d, a: (
                    f"Elegant fashion illustration of {c}. Watercolor and ink style, featuring colors: {cols}. "
                    "Modern fashion sketch aesthetic."
                )),
            },
            lambda c, cols, d, a: f"High fashion photography of {c} using colors: {cols}.",
        ),
        INTERIOR: (
            "photorealistic",
            {
                "Room Perspective View": ("photorealistic", lambda c, cols, d, a: (
                    f"Stunning interior design photography of {c}. Wide angle room view showcasing color scheme: "
                    f"{cols}. Professional architectural photography, natural lighting."
                )),
                "Mood Board / Style Tile": ("artistic", lambda c, cols, d, a: (
                    f"Interior design mood board for {c}. Collage style showing materials, textures, and colors: "
                    f"{cols}. Design presentation style."
                )),
                "Color Vignette": ("photorealistic", lambda c, cols, d, a: (
                    f"Detailed interior vignette showcasing {c}. Focus on color harmony using {cols}. Cozy corner or "
                    "styled surface, lifestyle photography."
                )),
                "Blueprint/Sketch with Color": ("artistic", lambda c, cols, d, a: (
                    f"Architectural sketch with color wash of {c}. Technical drawing style with watercolor accents in "
                    f"{cols}. Design presentation aesthetic."
                )),
            },
            lambda c, cols, d, a: f"Interior design photography of {c} using colors: {cols}.",
        ),
        ART_CRAFT: (
            "artistic",
            {
                "Finished Artwork": ("artistic", lambda c, cols, d, a: (
                    f"Completed artwork inspired by {c}. Fine art piece featuring color palette: {cols}. Gallery "
                    "lighting, artistic composition."
                )),
                "Studio Context": ("photorealistic", lambda c, cols, d, a: (
                    f"Artist studio scene with {c} in progress. Creative workspace with art supplies, natural "
                    f"lighting, colors: {cols}."
                )),
                "Material/Texture Focus": ("photorealistic", lambda c, cols, d, a: (
                    f"Close-up macro shot of art materials and textures for {c}. Paint, brushes, canvas textures in "
                    f"colors: {cols}."
                )),
                "Concept Sketchbook": ("artistic", lambda c, cols, d, a: (
                    f"Open sketchbook showing concept drawings for {c}. Hand-drawn sketches with color notes, "
                    f"featuring palette: {cols}."
                )),
            },
            lambda c, cols, d, a: f"Artistic creation of {c} using colors: {cols}.",
        ),
        MAKEUP: (
            "photorealistic",
            {
                "Close-up Beauty Shot": ("photorealistic", lambda c, cols, d, a: (
                    f"Professional beauty photography close-up of {c}. Flawless makeup featuring colors: {cols}. "
                    "Studio lighting, high detail."
                )),
                "Full Face Look": ("photorealistic", lambda c, cols, d, a: (
                    f"Full face beauty portrait showcasing {c}. Complete makeup look using color palette: {cols}. "
                    "Professional beauty photography."
                )),
                "Product Swatch Art": ("artistic", lambda c, cols, d, a: (
                    f"Artistic makeup product swatches and color story for {c}. Beautiful arrangement on marble "
                    f"surface, colors: {cols}."
                )),
                "Makeup Chart/Illustration": ("artistic", lambda c, cols, d, a: (
                    f"Professional makeup chart illustration for {c}. Beauty diagram style showing color placement, "
                    f"palette: {cols}."
                )),
            },
            lambda c, cols, d, a: f"Beauty photography of {c} using colors: {cols}.",
        ),
        EVENT: (
            "photorealistic",
            {
                "Table Setting Detail": ("photorealistic", lambda c, cols, d, a: (
                    f"Elegant table setting detail for {c}. Luxury event styling using color scheme: {cols}. "
                    "Professional event photography."
                )),
                "Overall Venue Atmosphere": ("photorealistic", lambda c, cols, d, a: (
                    f"Wide shot of event venue decorated for {c}. Atmospheric lighting, full decoration scheme in "
                    f"colors: {cols}. Event photography."
                )),
                "Decor Vignette": ("photorealistic", lambda c, cols, d, a: (
                    f"Beautiful decorative vignette for {c}. Styled detail shot featuring color palette: {cols}. "
                    "Event styling photography."
                )),
                "Invitation Suite Mockup": ("photorealistic", lambda c, cols, d, a: (
                    f"Luxury invitation suite mockup for {c}. Flat lay of stationery and decor elements, colors: "
                    f"{cols}. High-end design photography."
                )),
            },
            lambda c, cols, d, a: f"Event styling photography of {c} using colors: {cols}.",
        ),
        DESIGN: (
            "minimal",
            {
                "UI Mockup (Website/App)": ("minimal", lambda c, cols, d, a: (
                    f"Modern website/app UI mockup for {c}. Clean interface design using color palette: {cols}. "
                    "Contemporary web design, minimal aesthetic."
                )),
                "Brand Application Mockup": ("minimal", lambda c, cols, d, a: (
                    f"Brand identity mockup showing {c}. Logo applications on various materials, color scheme: "
                    f"{cols}. Professional branding presentation."
                )),
                "Abstract Color Background": ("artistic", lambda c, cols, d, a: (
                    f"Abstract geometric background design for {c}. Modern gradient and shape composition using "
                    f"colors: {cols}. Digital art style."
                )),
                "Style Guide Snippet": ("minimal", lambda c, cols, d, a: (
                    f"Brand style guide page showing {c}. Typography, colors, and design elements featuring palette: "
                    f"{cols}. Design documentation style."
                )),
            },
            lambda c, cols, d, a: f"Graphic design mockup of {c} using colors: {cols}.",
        ),
    }


_IMAGE_TEMPLATES = _image_templates()


def with_image_directives(prompt: str, style: str, aspect_ratio: str) -> str:
    return (
        f"{prompt}\n\n"
        f"Style: {style}, high quality, detailed, professional composition.\n"
        f"Aspect ratio: {aspect_ratio}.\n"
        "NO text, watermarks, or logos in the image.\n"
        "Ensure colors are vibrant and true to the description."
    )


def build_domain_image_prompt(
    path: str,
    concept: str,
    palette: list[PaletteEntry],
    image_angle: str,
    aspect_ratio: str = "1:1",
) -> str:
    colors = palette_names(palette)
    entry = _IMAGE_TEMPLATES.get(path)
    if entry is None:
        body = (
            f"Creative visualization of {concept} using color palette: {colors}. "
            "Professional, high-quality composition."
        )
        return with_image_directives(body, "photorealistic", aspect_ratio)

    default_style, angles, fallback = entry
    style, template = angles.get(image_angle, (default_style, fallback))
    body = template(concept, colors, dominant_color(palette), accent_color(palette))
    return with_image_directives(body, style, aspect_ratio)
