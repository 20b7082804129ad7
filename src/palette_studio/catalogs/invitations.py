from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EventDetails:
    title: str
    date: str = ""
    subtitle: str | None = None
    time: str | None = None
    location: str | None = None
    description: str | None = None
    host_name: str | None = None
    rsvp_info: str | None = None
    mood_keywords: str | None = None
    dress_code: str | None = None


@dataclass(frozen=True)
class InvitationStyle:
    id: str
    name: str
    description: str
    # Placeholders: categoryName, eventTitle, eventSubtitle, eventDescription,
    # styleName, toneDescription, detailsBlock, colorPalette.
    prompt_template: str
    color_scheme: tuple[str, ...] = ()
    color_presets: tuple[tuple[str, ...], ...] = field(default=())


@dataclass(frozen=True)
class InvitationCategory:
    id: str
    name: str
    icon: str
    description: str
    suggested_aspect_ratios: tuple[str, ...]
    styles: tuple[InvitationStyle, ...]


def _lines(*parts: str) -> str:
    return "\n".join(parts)


S = InvitationStyle

INVITATION_CATEGORIES: tuple[InvitationCategory, ...] = (
    InvitationCategory(
        "birthday", "Birthday Celebrations", "🎂", "Playful designs for kids, adults, and milestone birthdays.",
        ("4:5", "1:1", "3:2"),
        (
            S("kids-fun", "Kids Fun", "Vibrant illustrated scenes with balloons, confetti, and cute characters.",
              _lines("Design a joyful {categoryName} invitation for {eventTitle}.",
                     "Focus: {toneDescription}.",
                     "Use bright illustrated elements, layered paper textures, and bold playful typography.",
                     "Include event details ({detailsBlock}) within stylish text blocks. Palette: {colorPalette}."),
              ("#FF6B6B", "#FFD93D", "#6BCB77", "#4D96FF"),
              (("#FF6B6B", "#FFD93D", "#4D96FF", "#F9F5FF"),
               ("#F97316", "#FDE68A", "#34D399", "#2563EB"),
               ("#FF8FAB", "#FFDAC1", "#E0BBE4", "#B5EAD7"))),
            S("adult-modern", "Modern Adult", "Bold typography with abstract shapes and metallic accents.",
              _lines("Create a modern {categoryName} invitation for {eventTitle} blending geometric shapes and luxury foil accents.",
                     "Typography should be elegant sans-serif paired with a cursive highlight.",
                     "Incorporate subtle gradients, clean spacing, and the following details: {detailsBlock}. Primary palette: {colorPalette}."),
              ("#0F172A", "#EAB308", "#F87171", "#FFFFFF"),
              (("#0F172A", "#F87171", "#FDE68A", "#EEF2FF"),
               ("#111827", "#D4AF37", "#F1F5F9", "#B45309"),
               ("#0F172A", "#F472B6", "#C084FC", "#F5F3FF"))),
            S("milestone-elegant", "Milestone Elegance", "Refined layout with photo frames and textured backgrounds.",
              _lines("Elegant {styleName} invitation celebrating {eventTitle}.",
                     "Use layered vellum textures, serif typography, and delicate foil line art.",
                     "Feature a hero number or badge for the milestone with supporting copy showing {detailsBlock}. Palette inspiration: {colorPalette}."),
              ("#B77BFF", "#FDE68A", "#1E1B4B", "#F4F1EB")),
            S("retro-pop-celebration", "Retro Pop Celebration", "70s-inspired poster layout with bold typography and halftone bursts.",
              _lines("Design a retro-inspired {categoryName} invitation for {eventTitle}.",
                     "Use halftone gradients, offset typography, and curved frames.",
                     "Highlight milestone copy ({detailsBlock}) with sticker-style callouts. Palette: {colorPalette}."),
              ("#FF66C4", "#FFBD59", "#00C2BA", "#2E0249")),
            S("garden-cake-soiree", "Garden Cake Soiree", "Watercolor botanicals with tiered cake illustration focal points.",
              _lines("Paint a whimsical {categoryName} invitation for {eventTitle}.",
                     "Layer watercolor florals, frosting piping borders, and handwritten notes.",
                     "Showcase event info ({detailsBlock}) tucked into ribbon labels. Palette {colorPalette}."),
              ("#FFB3C1", "#FEE1E8", "#C1E1C1", "#FFECD1")),
            S("neon-arcade-bash", "Neon Arcade Bash", "Glow-stick gradients, chrome typography, and motion streaks.",
              _lines("Create a neon-charged {categoryName} invitation for {eventTitle}.",
                     "Blend retro arcade grids, chrome numbers, and glitched typography.",
                     "Call out {detailsBlock} using glowing chips and ticker panels. Palette {colorPalette}."),
              ("#F72585", "#7209B7", "#3A0CA3", "#4CC9F0")),
        ),
    ),
    InvitationCategory(
        "wedding", "Wedding & Formal", "💍", "Romantic save-the-dates, ceremony invitations, and reception cards.",
        ("3:2", "4:5", "1:1"),
        (
            S("save-the-date", "Save the Date", "Soft florals, hand-painted textures, and script typography.",
              _lines("Create a romantic {categoryName} invitation titled {eventTitle}.",
                     "Incorporate watercolor botanicals, linen texture, and flowing calligraphy.",
                     "Layout should highlight couple names and {detailsBlock}. Palette focus: {colorPalette}."),
              ("#F3D9DC", "#E2D4BA", "#D6EADF", "#8C7A6B"),
              (("#F3D9DC", "#E2D4BA", "#8C7A6B", "#FFFFFF"),
               ("#EADDDC", "#BFA7A0", "#7A6248", "#F5F1EB"),
               ("#FDEDEB", "#E8D8CE", "#C0A299", "#806F63"))),
            S("formal-invite", "Formal Invitation", "Classic serif type, gold foil borders, and symmetrical layout.",
              _lines("Design a sophisticated {styleName} suite for {eventTitle}.",
                     "Use thick cotton paper texture, letterpress impression, and gilded borders.",
                     "Typography: small caps serif with monogram. Highlight {detailsBlock}. Palette: {colorPalette}."),
              ("#FFFFFF", "#C58C4D", "#1F2937", "#D1D5DB")),
            S("reception-modern", "Reception Modern", "Minimal layout with avant-garde typography and tonal color blocking.",
              _lines("Modern reception invitation for {eventTitle}.",
                     "Combine oversized sans-serif typography, translucent overlays, and editorial photography blends.",
                     "Showcase event details ({detailsBlock}) with asymmetrical layout. Use palette {colorPalette}."),
              ("#0B1120", "#9F1239", "#F1F5F9", "#FACC15")),
            S("boho-terracotta", "Boho Terracotta", "Organic arches, pressed florals, and terracotta gradients.",
              _lines("Design a bohemian {categoryName} invitation for {eventTitle}.",
                     "Layer deckled arches, hand-drawn botanicals, and micro serif typography.",
                     "Emphasize relaxed details ({detailsBlock}) with tone-on-tone frames. Palette {colorPalette}."),
              ("#CE8E6D", "#F2D3B9", "#663A2F", "#F5EEE2")),
            S("art-deco-gala", "Art Deco Gala", "Symmetrical deco motifs, champagne foil, and mirrored typography.",
              _lines("Create an art deco {categoryName} suite for {eventTitle}.",
                     "Use mirrored borders, geometric rays, and condensed type.",
                     "Highlight {detailsBlock} inside layered panels with metallic rules. Palette {colorPalette}."),
              ("#0F172A", "#C89B3C", "#FDF5E6", "#2E2E3A")),
            S("coastal-destination", "Coastal Destination", "Airy linen textures with sun-bleached gradients and travel stamps.",
              _lines("Craft a breezy destination invitation for {eventTitle}.",
                     "Blend watercolor shoreline scenes, vellum overlays, and passport stamps.",
                     "List {detailsBlock} with relaxed serif + handwritten pairing. Palette {colorPalette}."),
              ("#A7C6ED", "#F6E7D8", "#2F4858", "#F4F9FF")),
        ),
    ),
    InvitationCategory(
        "corporate", "Corporate Events", "🏢", "Professional conferences, launches, and leadership events.",
        ("16:9", "3:2"),
        (
            S("conference", "Conference", "Grid-based layout with data-inspired accents.",
              _lines("Design a professional {categoryName} invitation for {eventTitle}.",
                     "Incorporate isometric shapes, gradient lines, and tech-inspired iconography.",
                     "Call out speakers and schedule from {detailsBlock}. Palette: {colorPalette}."),
              ("#0F172A", "#2563EB", "#22D3EE", "#F8FAFC")),
            S("executive", "Executive Dinner", "Dark backgrounds, metallic foils, and premium materials.",
              _lines("Create an upscale executive invite for {eventTitle}.",
                     "Use deep tones, marble textures, and rose-gold foil borders.",
                     "Typography should be refined serif. Include event details ({detailsBlock}) with discrete icons. Palette {colorPalette}."),
              ("#0B0F19", "#F5D0C5", "#94A3B8", "#1E293B")),
            S("product-launch", "Product Launch", "Futuristic gradients with glowing elements and motion blur.",
              _lines("Futuristic {styleName} invitation for {eventTitle}.",
                     "Blend neon gradients, motion trails, and sleek sans-serif type.",
                     "Highlight launch info and {detailsBlock}. Palette {colorPalette}."),
              ("#9333EA", "#14B8A6", "#0EA5E9", "#020617")),
            S("panel-roundtable", "Panel Roundtable", "Modular grid, speaker portraits, and info badges.",
              _lines("Design a modular {categoryName} invite for {eventTitle}.",
                     "Include headshot frames, agenda badges, and layered grids.",
                     "Call out {detailsBlock} using pill-shaped callouts. Palette {colorPalette}."),
              ("#0F172A", "#38BDF8", "#FACC15", "#F8FAFC")),
            S("minimal-blueprint", "Minimal Blueprint", "Technical blueprint lines with monochrome typography.",
              _lines("Craft a minimal {categoryName} invitation for {eventTitle}.",
                     "Use blueprint grids, thin sans-serif captions, and subtle embossing.",
                     "Highlight {detailsBlock} like a project spec sheet. Palette {colorPalette}."),
              ("#0F172A", "#1D4ED8", "#93C5FD", "#E2E8F0")),
            S("immersive-keynote", "Immersive Keynote", "Large-scale projection visuals with motion blur typography.",
              _lines("Create an immersive keynote invitation for {eventTitle}.",
                     "Blend projector light streaks, hero gradient spheres, and kinetic type.",
                     "Show {detailsBlock} stacked with micro-icons. Palette {colorPalette}."),
              ("#05051A", "#4C1D95", "#22D3EE", "#F472B6")),
        ),
    ),
    InvitationCategory(
        "holiday", "Holiday & Seasonal", "🎄", "Festive invitations for Christmas, New Year, and seasonal gatherings.",
        ("4:5", "1:1"),
        (
            S("christmas-classic", "Classic Christmas", "Traditional palette with botanical illustrations and foil accents.",
              _lines("Classic holiday invitation for {eventTitle}.",
                     "Use pine foliage borders, hand-drawn ornaments, and script typography.",
                     "Feature cozy textures and include {detailsBlock}. Palette emphasis: {colorPalette}."),
              ("#165B33", "#146B3A", "#F8B229", "#EA4630")),
            S("new-year-modern", "Modern New Year", "Bold typographic countdowns with confetti gradients.",
              _lines("Design a striking New Year invitation for {eventTitle}.",
                     "Combine dynamic numerals, shimmering confetti blur, and metallic gradients.",
                     "Highlight {detailsBlock}. Palette {colorPalette}."),
              ("#0F172A", "#FACC15", "#E879F9", "#38BDF8")),
            S("autumn-harvest", "Autumn Harvest", "Warm earthy tones with watercolor foliage and hand lettering.",
              _lines("Warm seasonal invitation for {eventTitle}.",
                     "Blend watercolor leaves, speckled paper texture, and hand-lettered headers.",
                     "Include detailed copy ({detailsBlock}). Palette inspiration: {colorPalette}."),
              ("#B45309", "#92400E", "#FBBF24", "#FEE2B3")),
            S("winter-minimal", "Winter Minimal", "Frosted gradients, blind embossing, and micro serif typography.",
              _lines("Design a minimal {categoryName} invite for {eventTitle}.",
                     "Use frosted glass blocks, embossed snowflakes, and calm typography.",
                     "Emphasize {detailsBlock} with slim dividers. Palette {colorPalette}."),
              ("#E0F2F1", "#A7C4D5", "#0F172A", "#FFFFFF")),
            S("harvest-folk", "Harvest Folk", "Folk art illustrations, stitched borders, and warm quilt textures.",
              _lines("Create a folk-inspired {categoryName} invitation for {eventTitle}.",
                     "Layer stitched borders, folk patterns, and vintage typography.",
                     "List {detailsBlock} on crafted labels. Palette {colorPalette}."),
              ("#8C3B0E", "#FFC857", "#7FB069", "#F4E4D7")),
            S("spooky-neon", "Spooky Neon", "Glow-in-the-dark typography with illustrated holographic ghosts.",
              _lines("Craft a spooky {categoryName} invitation for {eventTitle}.",
                     "Blend neon type, illustrated spirits, and textured gradients.",
                     "Show {detailsBlock} with horror ticket stubs. Palette {colorPalette}."),
              ("#050505", "#7C3AED", "#F472B6", "#FBBF24")),
        ),
    ),
    InvitationCategory(
        "baby-shower", "Baby Shower", "🍼", "Sweet designs for baby showers and gender reveals.",
        ("4:5", "1:1"),
        (
            S("classic", "Classic Storybook", "Soft watercolor animals and storybook frames.",
              _lines("Design a gentle {categoryName} invitation for {eventTitle}.",
                     "Include illustrated baby animals, scalloped frames, and pastel gradients.",
                     "Highlight key info ({detailsBlock}). Palette {colorPalette}."),
              ("#F4E1F2", "#BDE0FE", "#CDEAC0", "#FFD6A5")),
            S("modern-minimal", "Modern Minimal", "Monoline illustrations and clean typography.",
              _lines("Minimal baby shower invitation for {eventTitle}.",
                     "Use abstract shapes, monoline icons, and soft sans-serif fonts.",
                     "Keep layout airy and highlight {detailsBlock}. Palette {colorPalette}."),
              ("#0F172A", "#F5F5F4", "#94A3B8", "#F59E0B")),
            S("themed-adventure", "Adventure Theme", "Whimsical travel motifs and stamped details.",
              _lines("Adventure-inspired invitation for {eventTitle}.",
                     "Blend illustrated maps, hot air balloons, and textured kraft paper.",
                     "Include detailed copy ({detailsBlock}) using playful type. Palette {colorPalette}."),
              ("#264653", "#2A9D8F", "#E9C46A", "#F4A261")),
            S("storybook-neutral", "Storybook Neutral", "Gender-neutral palette with illustrated story frames.",
              _lines("Design a storybook {categoryName} invitation for {eventTitle}.",
                     "Use neutral animal characters, scalloped borders, and textured backdrops.",
                     "Outline {detailsBlock} with ribbon tabs. Palette {colorPalette}."),
              ("#ECE2D0", "#C9ADA7", "#D5B9B2", "#413C58")),
            S("celestial-dream", "Celestial Dream", "Moon phases, stardust gradients, and metallic constellations.",
              _lines("Craft a celestial {categoryName} invitation for {eventTitle}.",
                     "Blend moon motifs, cloud gradients, and foil constellations.",
                     "List {detailsBlock} with dreamy serif + script pairing. Palette {colorPalette}."),
              ("#1B1F3B", "#7353BA", "#F0E7FF", "#F7B801")),
            S("candy-pop", "Candy Pop", "Bubble letters, sprinkle textures, and gummy gradients.",
              _lines("Create a candy-inspired {categoryName} invitation for {eventTitle}.",
                     "Use bubbly typography, sprinkle borders, and pastel gradients.",
                     "Highlight {detailsBlock} with gummy drop labels. Palette {colorPalette}."),
              ("#FF9AA2", "#FFDAC1", "#E2F0CB", "#C7CEEA")),
        ),
    ),
    InvitationCategory(
        "graduation", "Graduation", "🎓", "Commencement announcements and celebration invites.",
        ("3:2", "16:9"),
        (
            S("announcement", "Announcement", "Photo-forward layout with editorial typography.",
              _lines("Create a polished graduation announcement for {eventTitle}.",
                     "Feature hero portrait area, serif + sans type pairing, and gold foil accents.",
                     "Include academic info ({detailsBlock}). Palette {colorPalette}."),
              ("#0F172A", "#D97706", "#E2E8F0", "#F8FAFC")),
            S("celebration", "Celebration Party", "Confetti bursts, ribbon streamers, and neon lighting.",
              _lines("High-energy celebration invite for {eventTitle}.",
                     "Use confetti overlays, neon tubes, and upbeat typography.",
                     "Call out {detailsBlock}. Palette {colorPalette}."),
              ("#D946EF", "#6366F1", "#14B8A6", "#FDE047")),
            S("minimal-grad", "Minimal Grad", "Clean typographic layout with micro-grid details.",
              _lines("Minimalist graduation invitation for {eventTitle}.",
                     "Rely on structured grid, thin line illustrations, and grayscale palette with one accent color.",
                     "Feature event info ({detailsBlock}). Palette {colorPalette}."),
              ("#0B1120", "#CBD5F5", "#475569", "#F8FAFC")),
            S("heritage-crest", "Heritage Crest", "Traditional crest motifs, laurel borders, and archival textures.",
              _lines("Design a heritage {categoryName} announcement for {eventTitle}.",
                     "Use crest emblems, letterpress textures, and formal serif typography.",
                     "Spotlight {detailsBlock} within ribbon scrolls. Palette {colorPalette}."),
              ("#1D3557", "#A8DADC", "#F1FAEE", "#E63946")),
            S("modern-foil-panel", "Modern Foil Panel", "Split panels with foil outlines and oversized numerals.",
              _lines("Create a modern {categoryName} invite for {eventTitle}.",
                     "Combine oversized numerals, foil lines, and minimalist type.",
                     "Call out {detailsBlock} inside stacked panels. Palette {colorPalette}."),
              ("#05070E", "#E5E5E5", "#F4B860", "#AEB8FE")),
            S("studio-spotlight", "Studio Spotlight", "Magazine-style layout with monochrome photography and spotlight lighting.",
              _lines("Craft a studio spotlight graduation invite for {eventTitle}.",
                     "Use monochrome portraits, light flares, and editorial captions.",
                     "List {detailsBlock} with timeline dots. Palette {colorPalette}."),
              ("#0E0E0E", "#333333", "#FFD369", "#EEEEEE")),
        ),
    ),
    InvitationCategory(
        "celebration", "Celebrations", "🎉", "Anniversaries, engagements, and housewarming parties.",
        ("4:5", "3:2"),
        (
            S("anniversary", "Anniversary Luxe", "Foil-pressed botanicals with layered vellum.",
              _lines("Elegant anniversary invitation for {eventTitle}.",
                     "Blend etched floral borders, vellum overlay effect, and metallic foil text.",
                     "Showcase {detailsBlock}. Palette {colorPalette}."),
              ("#78350F", "#F5F5F4", "#B45309", "#FCD34D")),
            S("engagement", "Engagement Modern", "Editorial photography with translucent gradients.",
              _lines("Chic engagement invite for {eventTitle}.",
                     "Combine couple photography area, translucent gradients, and modern serif typography.",
                     "Include {detailsBlock}. Palette {colorPalette}."),
              ("#FDF2F8", "#DB2777", "#F8FAFC", "#111827")),
            S("housewarming", "Housewarming", "Cozy illustrated homes and hand-drawn details.",
              _lines("Friendly housewarming invite for {eventTitle}.",
                     "Use illustrated architecture, warm textures, and handwritten accents.",
                     "Highlight {detailsBlock}. Palette {colorPalette}."),
              ("#C084FC", "#FDBA74", "#FED7AA", "#1E1B4B")),
            S("speakeasy-soiree", "Speakeasy Soirée", "Moody speakeasy aesthetics with gilded line work.",
              _lines("Design a speakeasy-inspired {categoryName} invitation for {eventTitle}.",
                     "Use dark velvet textures, deco borders, and cocktail illustrations.",
                     "Highlight {detailsBlock} with ticket-style labels. Palette {colorPalette}."),
              ("#0B090C", "#8C6A3A", "#F2E9E4", "#2E1F27")),
            S("desert-moon", "Desert Moon Party", "Terracotta gradients, crescent moons, and woven textures.",
              _lines("Craft a desert-inspired {categoryName} invitation for {eventTitle}.",
                     "Blend terracotta arches, moon icons, and boho typography.",
                     "Showcase {detailsBlock} with woven label motifs. Palette {colorPalette}."),
              ("#E07A5F", "#F4A259", "#F5D5AE", "#2F3E46")),
            S("poolside-lounge", "Poolside Lounge", "Playful Memphis shapes, acrylic waves, and floating typography.",
              _lines("Design a poolside celebration invite for {eventTitle}.",
                     "Use acrylic wave patterns, floating type, and sunburst gradients.",
                     "Call out {detailsBlock} using buoy tags. Palette {colorPalette}."),
              ("#00B4D8", "#FFC300", "#FF7B9C", "#1F2041")),
        ),
    ),
)


def get_category(category_id: str) -> InvitationCategory | None:
    return next((c for c in INVITATION_CATEGORIES if c.id == category_id), None)


def get_style(category_id: str, style_id: str) -> InvitationStyle | None:
    category = get_category(category_id)
    if category is None:
        return None
    return next((s for s in category.styles if s.id == style_id), None)


def format_event_details(details: EventDetails) -> str:
    parts: list[str] = []
    if details.date:
        parts.append(f"Date: {details.date}")
    if details.time:
        parts.append(f"Time: {details.time}")
    if details.location:
        parts.append(f"Location: {details.location}")
    if details.host_name:
        parts.append(f"Host: {details.host_name}")
    if details.rsvp_info:
        parts.append(f"RSVP: {details.rsvp_info}")
    if details.mood_keywords:
        parts.append(f"Mood: {details.mood_keywords}")
    if details.dress_code:
        parts.append(f"Dress: {details.dress_code}")
    if details.description:
        parts.append(f"About: {details.description}")
    return ", ".join(parts)
