from __future__ import annotations

from dataclasses import dataclass

from palette_studio.catalogs.creative_paths import ART_CRAFT, COOKING, DESIGN, EVENT, FASHION, INTERIOR, MAKEUP


@dataclass(frozen=True)
class SeriesTheme:
    id: str
    label: str
    description: str
    size_min: int
    size_max: int
    size_default: int
    preferred_aspect_ratio: str
    prompt_template: str


@dataclass(frozen=True)
class DomainThemes:
    domain: str
    auto_theme: SeriesTheme
    themes: tuple[SeriesTheme, ...]


def _t(id: str, label: str, description: str, size: tuple[int, int, int], ratio: str, template: str) -> SeriesTheme:
    return SeriesTheme(id, label, description, size[0], size[1], size[2], ratio, template)


IMAGE_SERIES_THEMES: dict[str, DomainThemes] = {
    COOKING: DomainThemes(
        domain=COOKING,
        auto_theme=_t(
            "menu-catalog", "Restaurant Menu Catalog", "Professional dish photography for menus and promotion",
            (5, 8, 6), "16:9",
            "Professional restaurant menu photography series. {context}. Signature dish showcase with cinematic "
            "lighting, 45° angle, minimalist styling. Clean backgrounds, authentic presentation. Colors: {colors}.",
        ),
        themes=(
            _t(
                "menu-catalog", "Restaurant Menu Catalog", "Professional dish photography for menus",
                (5, 8, 6), "16:9",
                "Professional restaurant menu photography series. {context}. Signature dish showcase with cinematic "
                "lighting, 45° angle, minimalist styling. Colors: {colors}.",
            ),
            _t(
                "social-content", "Social Media Series", "Behind-the-scenes and flat lay content",
                (3, 5, 4), "9:16",
                "Social media food content series. {context}. Authentic cooking process, flat lay ingredients, "
                "overhead shots. Vertical mobile-first composition. Colors: {colors}.",
            ),
            _t(
                "recipe-story", "Recipe Story Progression", "Ingredient to final dish journey",
                (4, 6, 5), "1:1",
                "Recipe story photography series. {context}. Ingredient sourcing, preparation steps, cooking "
                "process, final plated presentation. Square format for versatility. Colors: {colors}.",
            ),
        ),
    ),
    FASHION: DomainThemes(
        domain=FASHION,
        auto_theme=_t(
            "lookbook", "Model Lookbook", "Editorial fashion portraits with generous negative space",
            (6, 10, 8), "9:16",
            "Editorial fashion lookbook series. {context}. Vertical portrait framing, generous negative space, "
            "authentic emotion. Professional model photography, natural lighting. Colors: {colors}.",
        ),
        themes=(
            _t(
                "lookbook", "Model Lookbook", "Editorial fashion portraits", (6, 10, 8), "9:16",
                "Editorial fashion lookbook series. {context}. Vertical portrait framing, generous negative space, "
                "authentic emotion. Colors: {colors}.",
            ),
            _t(
                "product-catalog", "Product Catalog", "Fabric details and styling variations", (5, 8, 6), "9:16",
                "Fashion product catalog series. {context}. Close-up fabric textures, styling variations, detail "
                "showcase. Vertical composition. Colors: {colors}.",
            ),
            _t(
                "flat-lay", "Flat Lay Styling", "Outfit components arranged artistically", (3, 5, 4), "1:1",
                "Fashion flat lay series. {context}. Outfit components arranged artistically, overhead shots, clean "
                "backgrounds. Square composition. Colors: {colors}.",
            ),
        ),
    ),
    INTERIOR: DomainThemes(
        domain=INTERIOR,
        auto_theme=_t(
            "magazine-spread", "Magazine Portfolio Spread", "Professional room photography for editorial",
            (5, 8, 6), "16:9",
            "Interior design magazine series. {context}. Wide-angle room photography, natural lighting, clean "
            "minimalist presentation. Horizontal landscape format. Colors: {colors}.",
        ),
        themes=(
            _t(
                "magazine-spread", "Magazine Portfolio", "Professional room photography", (5, 8, 6), "16:9",
                "Interior design magazine series. {context}. Wide-angle room views, architectural photography, "
                "authentic lived-in spaces. Colors: {colors}.",
            ),
            _t(
                "transformation", "Room Transformation", "Before, during, after renovation", (4, 6, 5), "16:9",
                "Room transformation series. {context}. Same space evolution, renovation journey, design "
                "progression. Horizontal format. Colors: {colors}.",
            ),
            _t(
                "vignettes", "Styling Vignettes", "Corner details and arrangements", (4, 6, 5), "9:16",
                "Interior styling vignette series. {context}. Corner details, shelf arrangements, decorative "
                "elements. Vertical composition. Colors: {colors}.",
            ),
        ),
    ),
    ART_CRAFT: DomainThemes(
        domain=ART_CRAFT,
        auto_theme=_t(
            "portfolio", "Portfolio Showcase", "Curated best works collection", (8, 12, 10), "1:1",
            "Art portfolio showcase series. {context}. Gallery-quality artwork presentation, studio lighting, "
            "authentic artistic process. Square format for uniformity. Colors: {colors}.",
        ),
        themes=(
            _t(
                "portfolio", "Portfolio Showcase", "Best works collection", (8, 12, 10), "1:1",
                "Art portfolio series. {context}. Curated best works, diverse techniques, professional gallery "
                "presentation. Colors: {colors}.",
            ),
            _t(
                "process", "Process Documentation", "Sketch to finished artwork", (6, 8, 7), "1:1",
                "Art creation process series. {context}. Sketches, work-in-progress stages, final artwork. "
                "Documentary style. Colors: {colors}.",
            ),
            _t(
                "exhibition", "Gallery Exhibition", "Thematic art collection", (5, 10, 7), "1:1",
                "Gallery exhibition series. {context}. Thematic artwork collection, unified concept, professional "
                "lighting. Colors: {colors}.",
            ),
        ),
    ),
    MAKEUP: DomainThemes(
        domain=MAKEUP,
        auto_theme=_t(
            "tutorial", "Tutorial Series", "Step-by-step makeup application", (5, 8, 6), "9:16",
            "Makeup tutorial series. {context}. Step-by-step application progression, beauty close-ups, perfect "
            "lighting. Vertical portrait format. Colors: {colors}.",
        ),
        themes=(
            _t(
                "tutorial", "Tutorial Series", "Step-by-step application", (5, 8, 6), "9:16",
                "Makeup tutorial series. {context}. Application steps, transformation stages, beauty photography. "
                "Vertical format. Colors: {colors}.",
            ),
            _t(
                "product-campaign", "Product Campaign", "Color swatches and beauty shots", (3, 6, 4), "1:1",
                "Makeup product campaign series. {context}. Color swatches, product arrangements, beauty close-ups. "
                "Square format. Colors: {colors}.",
            ),
            _t(
                "transformation", "Day to Night", "Natural to dramatic looks", (4, 6, 5), "9:16",
                "Makeup transformation series. {context}. Natural daytime to dramatic evening evolution. Vertical "
                "beauty photography. Colors: {colors}.",
            ),
        ),
    ),
    EVENT: DomainThemes(
        domain=EVENT,
        auto_theme=_t(
            "wedding", "Wedding Photography", "Ceremony and reception moments", (8, 15, 10), "16:9",
            "Wedding photography series. {context}. Candid documentary style, emotional moments, authentic "
            "celebration. Horizontal format for venues. Colors: {colors}.",
        ),
        themes=(
            _t(
                "wedding", "Wedding Collection", "Ceremony and reception", (8, 15, 10), "16:9",
                "Wedding photography series. {context}. Ceremony moments, reception details, candid emotions. "
                "Documentary style. Colors: {colors}.",
            ),
            _t(
                "corporate", "Corporate Event", "Professional event coverage", (5, 10, 7), "16:9",
                "Corporate event series. {context}. Professional networking, brand integration, event "
                "storytelling. Horizontal format. Colors: {colors}.",
            ),
            _t(
                "party", "Themed Party", "Decoration and atmosphere", (4, 8, 6), "16:9",
                "Themed party series. {context}. Decoration showcase, color scheme execution, celebration "
                "atmosphere. Colors: {colors}.",
            ),
        ),
    ),
    DESIGN: DomainThemes(
        domain=DESIGN,
        auto_theme=_t(
            "brand-identity", "Brand Identity Package", "Logo applications and guidelines", (6, 12, 8), "16:9",
            "Brand identity series. {context}. Logo applications, mockups, brand guidelines, design system. "
            "Horizontal presentation format. Colors: {colors}.",
        ),
        themes=(
            _t(
                "brand-identity", "Brand Identity", "Complete brand system", (6, 12, 8), "16:9",
                "Brand identity series. {context}. Logo mockups, business cards, marketing materials, brand "
                "applications. Colors: {colors}.",
            ),
            _t(
                "ui-portfolio", "UI/UX Portfolio", "App and website designs", (5, 8, 6), "16:9",
                "UI/UX portfolio series. {context}. Website designs, app interfaces, user flows, responsive "
                "mockups. Colors: {colors}.",
            ),
            _t(
                "social-campaign", "Social Campaign", "Multi-platform graphics", (4, 6, 5), "1:1",
                "Social media campaign series. {context}. Multi-platform graphics, cohesive visual theme, modern "
                "design. Colors: {colors}.",
            ),
        ),
    ),
}


def get_domain_themes(domain: str) -> DomainThemes | None:
    return IMAGE_SERIES_THEMES.get(domain)


def get_theme(domain: str, theme_id: str) -> SeriesTheme | None:
    """Resolve a theme id for a path; "auto" and unknown ids fall back to the path's auto theme."""
    domain_themes = get_domain_themes(domain)
    if domain_themes is None:
        return None
    if theme_id == "auto":
        return domain_themes.auto_theme
    return next((t for t in domain_themes.themes if t.id == theme_id), domain_themes.auto_theme)
