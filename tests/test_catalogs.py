from palette_studio.catalogs.aspect_ratios import domain_defaults, get_aspect_ratio
from palette_studio.catalogs.creative_paths import CREATIVE_PATHS, IMAGE_PROMPT_OPTIONS, INTERIOR
from palette_studio.catalogs.environments import categories_by_type, get_category, get_variation
from palette_studio.catalogs.invitation_templates import get_template, templates_for_category
from palette_studio.catalogs.invitations import EventDetails, INVITATION_CATEGORIES, format_event_details, get_style
from palette_studio.catalogs.themes import get_theme


def test_every_path_has_prompt_options():
    assert len(CREATIVE_PATHS) == 7
    for path in CREATIVE_PATHS:
        assert len(IMAGE_PROMPT_OPTIONS[path]) == 4


def test_aspect_ratio_fallbacks():
    assert get_aspect_ratio("16:9").width == 1920
    assert get_aspect_ratio("5:4").id == "9:16"
    assert domain_defaults(INTERIOR) == {"image": "16:9", "video": "16:9"}
    assert domain_defaults("Pottery") == {"image": "1:1", "video": "9:16"}


def test_theme_lookup():
    auto = get_theme(INTERIOR, "auto")
    assert auto is not None
    assert get_theme(INTERIOR, "no-such-theme") == auto
    assert get_theme("Pottery", "auto") is None


def test_environment_lookup():
    assert get_category("ecommerce-catalog").type == "promotional"
    assert get_variation("ecommerce-catalog", "clean-white").name == "Clean White Background"
    assert get_variation("ecommerce-catalog", "missing") is None
    assert get_variation("missing", "clean-white") is None
    assert all(c.type == "lifestyle" for c in categories_by_type("lifestyle"))


def test_invitation_catalog():
    assert len(INVITATION_CATEGORIES) == 7
    for category in INVITATION_CATEGORIES:
        assert category.styles
        for style in category.styles:
            assert style.prompt_template
    assert get_style("birthday", "missing") is None
    assert get_style("missing", "kids-fun") is None


def test_templates_by_category():
    assert [t.id for t in templates_for_category("wedding")] == ["editorial-save-the-date"]
    assert get_template("missing") is None


def test_format_event_details():
    details = EventDetails(title="Gala", date="May 3", location="Hall A", dress_code="Black tie")
    assert format_event_details(details) == "Date: May 3, Location: Hall A, Dress: Black tie"
