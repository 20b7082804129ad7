from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EnvironmentType = Literal["promotional", "lifestyle"]


@dataclass(frozen=True)
class EnvironmentVariation:
    id: str
    name: str
    description: str
    prompt_template: str  # "{product}" is substituted with the product description


@dataclass(frozen=True)
class EnvironmentCategory:
    id: str
    name: str
    icon: str
    description: str
    type: EnvironmentType
    suggested_aspect_ratios: tuple[str, ...]
    variations: tuple[EnvironmentVariation, ...]


V = EnvironmentVariation

ENVIRONMENT_CATEGORIES: tuple[EnvironmentCategory, ...] = (
    EnvironmentCategory(
        "ecommerce-catalog", "🛍️ E-commerce Catalog", "🛍️", "Professional product photography for online stores",
        "promotional", ("1:1", "4:5"),
        (
            V("clean-white", "Clean White Background", "Minimal white studio backdrop",
              "professional product photography, {product} on pure white background, studio lighting, high-end "
              "commercial photography, sharp focus, clean composition, centered product"),
            V("shadow-depth", "With Shadow Depth", "White background with natural shadows",
              "professional product photography, {product} on white background with soft natural shadow, studio "
              "lighting, depth and dimension, commercial quality, clean aesthetic"),
            V("subtle-gradient", "Subtle Gradient", "Soft gradient background",
              "professional product photography, {product} on subtle gradient background, soft lighting, elegant "
              "composition, premium commercial photography, modern aesthetic"),
            V("floating", "Floating Effect", "Product appears to float",
              "professional product photography, {product} floating in mid-air, white background, dramatic "
              "lighting, shadow beneath product, dynamic composition, high-end commercial"),
        ),
    ),
    EnvironmentCategory(
        "social-media-ad", "📱 Social Media Ad", "📱", "Instagram and TikTok optimized promotional content",
        "promotional", ("9:16", "1:1", "4:5"),
        (
            V("lifestyle-flat-lay", "Lifestyle Flat Lay", "Top-down styled scene",
              "social media product photography, {product} in lifestyle flat lay composition, styled with "
              "complementary items, natural lighting, Instagram aesthetic, vibrant and engaging"),
            V("hands-interaction", "In-Hand Interaction", "Hands holding or using product",
              "social media content, hands elegantly holding {product}, lifestyle photography, natural "
              "interaction, aesthetic composition, warm lighting, relatable and authentic"),
            V("colorful-backdrop", "Colorful Backdrop", "Bold colored background",
              "social media product ad, {product} against vibrant colored backdrop, bold and eye-catching, modern "
              "aesthetic, perfect lighting, scroll-stopping composition"),
            V("minimal-modern", "Minimal Modern", "Clean contemporary style",
              "modern social media content, {product} in minimal contemporary setting, clean lines, trendy "
              "aesthetic, soft natural light, Instagram-worthy composition"),
        ),
    ),
    EnvironmentCategory(
        "magazine-editorial", "📰 Magazine Editorial", "📰", "High-fashion editorial style photography",
        "promotional", ("2:3", "4:5"),
        (
            V("high-fashion", "High Fashion", "Sophisticated editorial style",
              "high-fashion editorial photography, {product} in sophisticated artistic composition, dramatic "
              "lighting, luxury aesthetic, magazine quality, cinematic mood"),
            V("artistic-moody", "Artistic & Moody", "Dark artistic composition",
              "artistic editorial photography, {product} in moody atmospheric setting, dramatic shadows, artistic "
              "composition, magazine editorial style, sophisticated lighting"),
            V("bright-airy", "Bright & Airy", "Light elegant editorial",
              "bright editorial photography, {product} in airy elegant composition, soft natural light, "
              "minimalist aesthetic, magazine quality, refined and sophisticated"),
            V("creative-concept", "Creative Concept", "Unique artistic vision",
              "creative editorial photography, {product} in unique artistic concept, innovative composition, "
              "striking visual, magazine cover quality, memorable and distinctive"),
        ),
    ),
    EnvironmentCategory(
        "tv-commercial", "📺 TV Commercial", "📺", "Cinematic advertising photography",
        "promotional", ("16:9", "21:9"),
        (
            V("hero-shot", "Hero Shot", "Dramatic spotlight on product",
              "cinematic commercial photography, {product} as hero shot, dramatic lighting, advertising quality, "
              "professional production, spotlight effect, premium aesthetic"),
            V("lifestyle-cinematic", "Lifestyle Cinematic", "Cinematic lifestyle scene",
              "cinematic lifestyle commercial, {product} in beautiful lifestyle scene, movie-quality lighting, "
              "advertising photography, emotional storytelling, premium production value"),
            V("motion-blur", "Dynamic Motion", "Movement and energy",
              "dynamic commercial photography, {product} with sense of motion and energy, cinematic composition, "
              "advertising quality, dramatic lighting, action-oriented"),
            V("luxury-showcase", "Luxury Showcase", "Premium luxury presentation",
              "luxury commercial photography, {product} in premium showcase, sophisticated lighting, high-end "
              "advertising, elegant composition, aspirational aesthetic"),
        ),
    ),
    EnvironmentCategory(
        "home-interior", "🏠 Home Interior", "🏠", "Cozy home and living space settings",
        "lifestyle", ("16:9", "4:3", "1:1"),
        (
            V("living-room", "Living Room", "Comfortable living space",
              "lifestyle photography, {product} in modern cozy living room, natural window light, comfortable home "
              "interior, warm atmosphere, realistic home setting"),
            V("bedroom", "Bedroom", "Peaceful bedroom scene",
              "lifestyle photography, {product} in serene bedroom setting, soft morning light, peaceful "
              "atmosphere, comfortable home interior, intimate and relaxing"),
            V("kitchen", "Kitchen", "Functional kitchen space",
              "lifestyle photography, {product} in bright modern kitchen, natural lighting, clean and functional "
              "space, home interior, everyday life setting"),
            V("home-office", "Home Office", "Productive workspace",
              "lifestyle photography, {product} in organized home office, natural desk lighting, productive "
              "workspace, contemporary interior, work-from-home aesthetic"),
        ),
    ),
    EnvironmentCategory(
        "outdoor-adventure", "🌳 Outdoor Adventure", "🌳", "Natural outdoor and adventure settings",
        "lifestyle", ("16:9", "3:2", "9:16"),
        (
            V("beach", "Beach Scene", "Sunny beach environment",
              "outdoor lifestyle photography, {product} at beautiful beach, golden hour sunlight, ocean in "
              "background, summer vibes, vacation aesthetic, natural outdoor setting"),
            V("park", "Park Setting", "Green park environment",
              "outdoor lifestyle photography, {product} in lush green park, natural daylight, trees and nature, "
              "peaceful outdoor setting, fresh and natural"),
            V("street", "Urban Street", "City street scene",
              "urban lifestyle photography, {product} on city street, modern architecture background, natural "
              "daylight, metropolitan vibe, contemporary urban setting"),
            V("mountain", "Mountain/Nature", "Scenic nature backdrop",
              "outdoor adventure photography, {product} with mountain landscape, natural scenic background, "
              "adventure aesthetic, beautiful nature setting, inspiring outdoor scene"),
        ),
    ),
    EnvironmentCategory(
        "professional-setting", "💼 Professional Setting", "💼", "Business and office environments",
        "lifestyle", ("16:9", "4:3"),
        (
            V("office", "Modern Office", "Professional workspace",
              "professional lifestyle photography, {product} in modern office environment, business setting, "
              "professional lighting, corporate aesthetic, clean and organized"),
            V("conference", "Conference Room", "Meeting room setting",
              "business photography, {product} in conference room, professional meeting setting, business "
              "environment, corporate lighting, professional aesthetic"),
            V("co-working", "Co-Working Space", "Contemporary shared workspace",
              "modern workplace photography, {product} in stylish co-working space, contemporary office design, "
              "collaborative environment, trendy professional setting"),
            V("desk-setup", "Desk Setup", "Organized work desk",
              "professional desk photography, {product} on organized work desk, business workspace, professional "
              "setup, clean and efficient, work-life aesthetic"),
        ),
    ),
    EnvironmentCategory(
        "cafe-restaurant", "☕ Cafe/Restaurant", "☕", "Social dining and cafe atmospheres",
        "lifestyle", ("1:1", "4:5", "16:9"),
        (
            V("coffee-shop", "Coffee Shop", "Cozy cafe setting",
              "lifestyle photography, {product} in cozy coffee shop, warm cafe lighting, casual social atmosphere, "
              "coffee culture aesthetic, inviting and comfortable"),
            V("restaurant", "Restaurant", "Dining environment",
              "lifestyle dining photography, {product} in elegant restaurant setting, ambient lighting, dining "
              "atmosphere, social gathering, upscale casual"),
            V("outdoor-patio", "Outdoor Patio", "Outdoor dining area",
              "outdoor dining photography, {product} on restaurant patio, natural daylight, outdoor dining "
              "atmosphere, fresh air setting, casual and relaxed"),
            V("breakfast-table", "Breakfast Table", "Morning dining scene",
              "morning lifestyle photography, {product} at breakfast table, soft morning light, fresh start "
              "aesthetic, casual dining scene, warm and inviting"),
        ),
    ),
    EnvironmentCategory(
        "seasonal-context", "🍂 Seasonal Context", "🍂", "Season-specific atmospheric settings",
        "lifestyle", ("16:9", "1:1", "9:16"),
        (
            V("summer", "Summer Vibes", "Bright sunny atmosphere",
              "summer lifestyle photography, {product} in bright summer setting, warm sunlight, vibrant colors, "
              "summer season aesthetic, energetic and fresh"),
            V("autumn", "Autumn Aesthetic", "Warm fall colors",
              "autumn lifestyle photography, {product} in fall setting, warm autumn colors, cozy atmosphere, "
              "seasonal aesthetic, golden hour lighting"),
            V("winter-cozy", "Winter Cozy", "Warm winter scene",
              "winter lifestyle photography, {product} in cozy winter setting, warm indoor lighting, cold weather "
              "aesthetic, comfort and warmth, seasonal atmosphere"),
            V("spring-fresh", "Spring Fresh", "Fresh spring scene",
              "spring lifestyle photography, {product} in fresh spring setting, natural light, blooming flowers, "
              "renewal aesthetic, bright and optimistic"),
        ),
    ),
    EnvironmentCategory(
        "event-celebration", "🎉 Event Celebration", "🎉", "Special occasions and celebrations",
        "lifestyle", ("16:9", "1:1", "9:16"),
        (
            V("party", "Party Scene", "Festive celebration",
              "celebration photography, {product} at lively party, festive lighting, joyful atmosphere, "
              "celebration aesthetic, fun and energetic"),
            V("wedding", "Wedding Elegance", "Elegant wedding setting",
              "wedding photography, {product} in elegant wedding setting, romantic lighting, sophisticated "
              "celebration, special occasion aesthetic, refined and beautiful"),
            V("concert", "Concert/Event", "Live event atmosphere",
              "event photography, {product} at concert or live event, dynamic lighting, energetic atmosphere, "
              "entertainment setting, vibrant and exciting"),
            V("holiday", "Holiday Gathering", "Festive holiday scene",
              "holiday photography, {product} at festive holiday gathering, warm celebratory lighting, special "
              "occasion atmosphere, joyful and festive"),
        ),
    ),
    EnvironmentCategory(
        "fitness-active", "💪 Fitness/Active", "💪", "Sport and wellness environments",
        "lifestyle", ("9:16", "16:9", "1:1"),
        (
            V("gym", "Gym Environment", "Fitness facility",
              "fitness photography, {product} in modern gym, athletic lighting, workout environment, active "
              "lifestyle aesthetic, energetic and motivating"),
            V("yoga", "Yoga/Wellness", "Peaceful wellness space",
              "wellness photography, {product} in serene yoga studio, soft natural light, peaceful wellness "
              "environment, mindful aesthetic, calm and balanced"),
            V("outdoor-sport", "Outdoor Sport", "Outdoor athletic activity",
              "sports photography, {product} during outdoor athletic activity, natural daylight, active lifestyle, "
              "dynamic sport setting, energetic and inspiring"),
            V("running", "Running/Jogging", "Active running scene",
              "active lifestyle photography, {product} during running or jogging, outdoor setting, morning light, "
              "athletic aesthetic, movement and energy"),
        ),
    ),
    EnvironmentCategory(
        "travel-vacation", "✈️ Travel/Vacation", "✈️", "Travel and destination settings",
        "lifestyle", ("16:9", "3:2", "9:16"),
        (
            V("hotel", "Hotel Room", "Luxury hotel setting",
              "travel photography, {product} in luxury hotel room, elegant interior, vacation atmosphere, "
              "hospitality aesthetic, comfortable and upscale"),
            V("resort", "Resort/Pool", "Resort poolside scene",
              "vacation photography, {product} at beautiful resort, poolside setting, tropical atmosphere, "
              "relaxation aesthetic, luxury vacation vibe"),
            V("sightseeing", "Sightseeing", "Tourist destination",
              "travel photography, {product} at famous landmark or tourist destination, cultural setting, "
              "exploration aesthetic, adventure and discovery"),
            V("airplane", "Travel/Airplane", "In-flight or airport",
              "travel photography, {product} during air travel, airplane or airport setting, journey aesthetic, "
              "modern travel lifestyle, adventure awaits"),
        ),
    ),
)


def get_category(category_id: str) -> EnvironmentCategory | None:
    return next((c for c in ENVIRONMENT_CATEGORIES if c.id == category_id), None)


def get_variation(category_id: str, variation_id: str) -> EnvironmentVariation | None:
    category = get_category(category_id)
    if category is None:
        return None
    return next((v for v in category.variations if v.id == variation_id), None)


def categories_by_type(env_type: EnvironmentType) -> list[EnvironmentCategory]:
    return [c for c in ENVIRONMENT_CATEGORIES if c.type == env_type]
