import pytest

from conftest import PALETTE
from palette_studio.catalogs.creative_paths import ART_CRAFT, COOKING, FASHION
from palette_studio.catalogs.environments import get_category as get_environment
from palette_studio.catalogs.invitation_templates import get_template
from palette_studio.catalogs.invitation_variations import get_variation
from palette_studio.catalogs.invitations import EventDetails, get_category, get_style
from palette_studio.errors import InvalidRequest
from palette_studio.prompts.creative import (
    accent_color,
    build_context,
    build_domain_image_prompt,
    build_ideas_prompt,
    build_ideas_request,
    dominant_color,
)
from palette_studio.prompts.data_urls import detect_mime_type, strip_data_url, to_data_url
from palette_studio.prompts.invitation import (
    apply_template,
    build_invitation_prompt,
    build_invitation_video_prompt,
    normalize_video_aspect_ratio,
)
from palette_studio.prompts.product import build_placement_prompt, build_product_video_prompt
from palette_studio.prompts.series import build_image_series_prompts
from palette_studio.prompts.video import (
    build_enhanced_video_prompt,
    build_negative_prompt,
    build_series_prompts,
    duration_seconds,
)
from palette_studio.providers.base import PaletteEntry, VideoOptions


def test_dominant_and_accent_use_roles():
    assert dominant_color(PALETTE) == "Deep Teal"
    assert accent_color(PALETTE) == "Burnt Sienna"


def test_accent_falls_back_to_last_color():
    palette = [PaletteEntry("#000000", "Black", "Base"), PaletteEntry("#FFFFFF", "White", "Support")]
    assert dominant_color(palette) == "Black"
    assert accent_color(palette) == "White"


def test_highlight_counts_as_accent_only_when_asked():
    palette = [PaletteEntry("#000000", "Black", "Base"), PaletteEntry("#FFD700", "Gold", "Highlight"), PaletteEntry("#FFFFFF", "White", "Support")]
    assert accent_color(palette) == "Gold"
    assert accent_color(palette, include_highlight=False) == "White"


def test_build_context_skips_sentinels():
    ctx = build_context(ART_CRAFT, {"art_medium": "Watercolor", "artistic_style": "Any Style", "subject_matter": "Landscapes"})
    assert ctx == "Medium: Watercolor. Subject: Landscapes"


def test_ideas_request_unknown_path():
    assert build_ideas_request("Pottery", {}) is None
    domain, context = build_ideas_request(COOKING, {"dish_type": "Dessert"})
    assert domain == "culinary arts and cooking"
    assert context.startswith("Dish type: Dessert Create a detailed dish concept")


def test_ideas_prompt_lists_palette_and_length():
    prompt = build_ideas_prompt(PALETTE, "fashion", {"season": "Winter", "text_length": "100-200"}, "Extra")
    assert "Deep Teal (#1B3A4B) - Dominant Base" in prompt
    assert "Customizations: season: Winter" in prompt
    assert "Additional Context: Extra" in prompt
    assert "between 100-200 words" in prompt


def test_domain_image_prompt_uses_angle_style():
    prompt = build_domain_image_prompt(FASHION, "a linen suit", PALETTE, "Fashion Illustration", "9:16")
    assert prompt.startswith("Elegant fashion illustration of a linen suit.")
    assert "Style: artistic" in prompt
    assert "Aspect ratio: 9:16." in prompt
    assert "NO text, watermarks, or logos in the image." in prompt


def test_domain_image_prompt_unknown_path():
    prompt = build_domain_image_prompt("Pottery", "a vase", PALETTE, "anything")
    assert prompt.startswith("Creative visualization of a vase")
    assert "Style: photorealistic" in prompt


def test_video_helpers():
    assert duration_seconds("short") == 5
    assert duration_seconds("medium") == 6
    assert duration_seconds("long") == 8
    enhanced = build_enhanced_video_prompt("A scene.", VideoOptions(aspect_ratio="16:9", style="social"))
    assert enhanced.startswith("VERTICAL 16:9 aspect ratio")
    assert "EXACTLY 5 SECONDS LONG" in enhanced
    assert build_negative_prompt("artistic").endswith("mundane")


def test_series_prompts_have_five_parts():
    prompts = build_series_prompts(COOKING, PALETTE, {"dish_type": "Soup"})
    assert len(prompts) == 5
    assert prompts[0].startswith("Part 1: Color palette inspiration. Dish: Soup.")


def test_image_series_prompts_unknown_path_are_generic():
    prompts = build_image_series_prompts("Pottery", PALETTE, {}, "auto", 3)
    assert len(prompts) == 3
    assert prompts[2].startswith("Professional photography series image 3 of 3.")


def test_image_series_prompts_use_theme():
    prompts = build_image_series_prompts(COOKING, PALETTE, {}, "auto", 4)
    assert len(prompts) == 4
    assert "Image 1 of 4:" in prompts[0]
    assert "{colors}" not in prompts[0]


def test_apply_template_blanks_unknown_keys():
    assert apply_template("Hi {name}, {missing}!", {"name": "Ada"}) == "Hi Ada, !"


def test_invitation_prompt():
    category = get_category("birthday")
    style = get_style("birthday", "kids-fun")
    details = EventDetails(title="Mia turns 5", date="June 1", time="3 PM", host_name="The Lees")
    prompt = build_invitation_prompt(
        details,
        category,
        style,
        "4:5",
        1,
        custom_palette=["#111111", "#EEEEEE"],
        template=get_template("neon-deco-birthday"),
        variation=get_variation("minimal-air"),
    )
    assert prompt.startswith("Design a Kids Fun birthday celebrations invitation in aspect ratio 4:5.")
    assert "Use this palette: #111111, #EEEEEE." in prompt
    assert "- June 1 • 3 PM" in prompt
    assert "- Hosted by The Lees" in prompt
    assert "Variation focus: ultra minimal swiss layout" in prompt
    assert "variation 2." in prompt


def test_invitation_video_prompt():
    category = get_category("wedding")
    style = category.styles[0]
    prompt = build_invitation_video_prompt(EventDetails(title="Ana & Ben", rsvp_info="by May 1"), category, style, "9:16")
    assert prompt.startswith('Animated wedding')
    assert "- RSVP by May 1" in prompt


@pytest.mark.parametrize("given,expected", [("1:1", "1:1"), ("3:2", "16:9"), ("16:9", "16:9"), ("4:5", "9:16")])
def test_normalize_video_aspect_ratio(given, expected):
    assert normalize_video_aspect_ratio(given) == expected


def test_placement_prompt_from_variation():
    prompt = build_placement_prompt("ecommerce-catalog", "clean-white", product_description="a ceramic mug")
    assert "a ceramic mug on pure white background" in prompt
    assert prompt.endswith("commercial quality")


def test_placement_prompt_custom_wins_and_keeps_quality_words():
    prompt = build_placement_prompt("ecommerce-catalog", "clean-white", custom_prompt="on a beach, high resolution")
    assert prompt == "on a beach, high resolution"
    plain = build_placement_prompt("ecommerce-catalog", None, custom_prompt="on a beach", color_palette=["teal"])
    assert plain.endswith(", professional photography, high resolution, commercial quality")
    assert "color story inspired by teal" in plain


def test_placement_prompt_errors():
    with pytest.raises(InvalidRequest, match="Either variation ID or custom prompt is required"):
        build_placement_prompt("ecommerce-catalog")
    with pytest.raises(InvalidRequest, match="Invalid category or variation ID"):
        build_placement_prompt("ecommerce-catalog", "nope")


def test_product_video_prompt():
    category = get_environment("ecommerce-catalog")
    prompt = build_product_video_prompt(category, category.variations[0], product_description="sneaker")
    assert prompt.startswith("Professional product showcase video featuring a sneaker in a Clean White Background setting.")
    custom = build_product_video_prompt(category, None, custom_prompt="Spin on a turntable")
    assert custom.startswith("Professional product showcase video. Spin on a turntable.")


def test_data_urls():
    assert detect_mime_type("/9j/4AAQ") == "image/jpeg"
    assert detect_mime_type("iVBORw0KGgo") == "image/png"
    assert detect_mime_type("UklGRiQ") == "image/webp"
    assert detect_mime_type("R0lGODlh") == "image/gif"
    assert detect_mime_type("????") == "image/jpeg"
    assert strip_data_url("data:image/png;base64,QUJD") == "QUJD"
    assert to_data_url(b"ABC", "image/png") == "data:image/png;base64,QUJD"
