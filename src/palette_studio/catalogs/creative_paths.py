from __future__ import annotations

# Path labels are sent verbatim by clients, emoji included.
COOKING = "🍽️ Cooking"
FASHION = "👗 Fashion"
INTERIOR = "🛋️ Interior Design"
ART_CRAFT = "🎨 Art/Craft"
MAKEUP = "💄 Makeup"
EVENT = "🎉 Event Theme"
DESIGN = "🌐 Graphic/Web Design"

CREATIVE_PATHS: tuple[str, ...] = (COOKING, FASHION, INTERIOR, ART_CRAFT, MAKEUP, EVENT, DESIGN)

IMAGE_PROMPT_OPTIONS: dict[str, tuple[str, ...]] = {
    COOKING: ("Dish Plated", "Artistic Ingredients", "Cooking Process", "Concept Sketch"),
    FASHION: ("Full Outfit Look", "Flat Lay Styling", "Fabric/Detail Focus", "Fashion Illustration"),
    INTERIOR: ("Room Perspective View", "Mood Board / Style Tile", "Color Vignette", "Blueprint/Sketch with Color"),
    ART_CRAFT: ("Finished Artwork", "Studio Context", "Material/Texture Focus", "Concept Sketchbook"),
    MAKEUP: ("Close-up Beauty Shot", "Full Face Look", "Product Swatch Art", "Makeup Chart/Illustration"),
    EVENT: ("Table Setting Detail", "Overall Venue Atmosphere", "Decor Vignette", "Invitation Suite Mockup"),
    DESIGN: ("UI Mockup (Website/App)", "Brand Application Mockup", "Abstract Color Background", "Style Guide Snippet"),
}

# Domain phrase handed to the ideas model, and the deliverable it should describe.
DOMAIN_BRIEFS: dict[str, tuple[str, str]] = {
    COOKING: (
        "culinary arts and cooking",
        "Create a detailed dish concept including: dish name, description, key ingredients, plating suggestions, "
        "and cooking techniques. Focus on how the colors inspire the flavors and presentation.",
    ),
    FASHION: (
        "fashion design and styling",
        "Create a complete outfit concept including: style description, key pieces, fabric suggestions, accessories, "
        "and styling tips. Explain how each color can be incorporated into the look.",
    ),
    INTERIOR: (
        "interior design and home decor",
        "Create a complete room design concept including: color scheme application, furniture suggestions, "
        "materials and textures, lighting ideas, and decorative elements.",
    ),
    ART_CRAFT: (
        "art and craft creation",
        "Create a detailed art project concept including: artistic vision, techniques to use, materials needed, "
        "composition ideas, and step-by-step creative process.",
    ),
    MAKEUP: (
        "makeup artistry and beauty",
        "Create a complete makeup look concept including: color placement, techniques, product suggestions, "
        "and application tips. Explain how to use each color in the palette.",
    ),
    EVENT: (
        "event planning and design",
        "Create a comprehensive event theme concept including: overall aesthetic, decoration ideas, table settings, "
        "lighting, floral arrangements, and guest experience elements.",
    ),
    DESIGN: (
        "graphic and web design",
        "Create a complete design concept including: visual hierarchy, typography suggestions, layout ideas, "
        "brand applications, and user experience considerations.",
    ),
}
