import asyncio

import pytest

from conftest import PALETTE, PNG_DATA_URL, FakeFallback, FakeImages, FakeRemover, FakeText, FakeVideo
from palette_studio.catalogs.creative_paths import COOKING, FASHION
from palette_studio.catalogs.invitations import EventDetails, get_category
from palette_studio.errors import GenerationError, InvalidRequest, ProviderNotConfigured
from palette_studio.placeholders import DEMO_MODE_SUFFIX, demo_pixel, invitation_placeholder
from palette_studio.services.creative import UNKNOWN_PATH_IDEAS, CreativeRequest, CreativeService
from palette_studio.services.invitation import InvitationService, clamp_variant_count
from palette_studio.services.product import ProductService


class ExplodingStore:
    def record_generated_asset(self, record):
        raise RuntimeError("disk full")


def run(coro):
    return asyncio.run(coro)


def corporate_style():
    return get_category("corporate").styles[0].id


# creative


def test_generate_ideas_returns_ideas_and_image():
    text, images = FakeText(), FakeImages()
    result = run(CreativeService(text, images).generate_ideas(COOKING, PALETTE, {}, "Dish Plated"))
    assert result.ideas == "Ideas for culinary arts and cooking"
    assert result.image_url == PNG_DATA_URL
    assert images.prompts[0].startswith("Professional food photography of Ideas for culinary arts and cooking.")


def test_generate_ideas_unknown_path_skips_text_model():
    text = FakeText()
    result = run(CreativeService(text, FakeImages()).generate_ideas("Pottery", PALETTE, {}, "anything"))
    assert result.ideas == UNKNOWN_PATH_IDEAS
    assert text.ideas_calls == []


def test_generate_ideas_keeps_ideas_when_image_fails():
    result = run(CreativeService(FakeText(), FakeImages(fail=True)).generate_ideas(FASHION, PALETTE, {}, "Full Outfit Look"))
    assert result.ideas
    assert result.image_url is None


def test_generate_ideas_requires_keys():
    with pytest.raises(ProviderNotConfigured, match="GOOGLE_GENERATIVE_AI_API_KEY is not set"):
        run(CreativeService(FakeText(), None).generate_ideas(COOKING, PALETTE, {}, "Dish Plated"))
    with pytest.raises(ProviderNotConfigured, match="ANTHROPIC_API_KEY is not set"):
        run(CreativeService(None, FakeImages()).generate_ideas(COOKING, PALETTE, {}, "Dish Plated"))


def test_image_series_collects_per_image_errors():
    images = FakeImages(fail_on={2})
    result = run(CreativeService(FakeText(), images).generate_image_series(COOKING, PALETTE, {}, "auto", 3, "16:9"))
    assert len(result.image_series_urls) == 2
    assert result.errors == ["Failed to generate image 2: No image data in response"]
    assert all("Aspect ratio: 16:9." in p for p in images.prompts)


def test_generate_creative_runs_formats_in_order(store):
    video = FakeVideo()
    service = CreativeService(FakeText(), FakeImages(), video, store)
    result = run(
        service.generate_creative(
            CreativeRequest(path=COOKING, palette=PALETTE, image_prompt_choice="Dish Plated", formats=["image", "video", "bogus"], session_id="s1")
        )
    )
    assert result.formats_generated == ["image", "video"]
    assert result.video_url == "/api/video/abc123"
    assert result.errors == []
    assert video.calls[0][1].aspect_ratio == "9:16"
    kinds = sorted(r["kind"] for r in store.list_assets("s1"))
    assert kinds == ["image", "video"]


def test_generate_creative_reports_format_failures():
    service = CreativeService(FakeText(), FakeImages(), None)
    result = run(
        service.generate_creative(
            CreativeRequest(path=COOKING, palette=PALETTE, image_prompt_choice="Dish Plated", formats=["video", "image"])
        )
    )
    assert result.formats_generated == ["image"]
    assert result.errors == ["Failed to generate video: GOOGLE_GENERATIVE_AI_API_KEY is not set"]
    out = result.to_dict()
    assert "video_url" not in out
    assert out["errors"] == result.errors


def test_generate_creative_empty_video_and_series():
    service = CreativeService(FakeText(), FakeImages(), FakeVideo(url=None))
    result = run(
        service.generate_creative(
            CreativeRequest(path=COOKING, palette=PALETTE, image_prompt_choice="Dish Plated", formats=["video", "series"])
        )
    )
    assert result.formats_generated == []
    assert result.errors == ["Failed to generate video", "Failed to generate video series"]


def test_generate_creative_combined():
    video = FakeVideo()
    service = CreativeService(FakeText(), FakeImages(), video)
    result = run(
        service.generate_creative(
            CreativeRequest(path=COOKING, palette=PALETTE, image_prompt_choice="Dish Plated", formats=["combined"])
        )
    )
    assert result.formats_generated == ["image", "video", "series"]
    assert len(result.series_urls) == 5
    assert len(video.calls) == 6


def test_generate_creative_combined_keeps_image_when_video_fails(store):
    video = FakeVideo(fail=True)
    service = CreativeService(FakeText(), FakeImages(), video, store)
    result = run(
        service.generate_creative(
            CreativeRequest(path=COOKING, palette=PALETTE, image_prompt_choice="Dish Plated", formats=["combined"], session_id="c1")
        )
    )
    assert result.formats_generated == ["image"]
    assert result.image_url == PNG_DATA_URL
    assert result.ideas == "Ideas for culinary arts and cooking"
    assert result.errors == [
        "Failed to generate video: Video generation timed out",
        "Failed to generate series: Video generation timed out",
    ]
    assert result.video_url is None
    assert [r["kind"] for r in store.list_assets("c1")] == ["image"]


# invitation


def test_clamp_variant_count():
    assert clamp_variant_count(0) == 1
    assert clamp_variant_count(3) == 3
    assert clamp_variant_count(9) == 5


def test_invitation_placeholder_without_image_provider(store):
    service = InvitationService(images=None, store=store)
    results = run(service.generate(EventDetails(title="Gala"), "corporate", corporate_style(), variant_count=2, session_id="inv"))
    assert len(results) == 2
    assert all(r.image_data == invitation_placeholder() for r in results)
    assert results[0].id.startswith("invitation-corporate-")
    assert len(store.list_assets("inv")) == 2


def test_invitation_notes_and_variation_cycle():
    images = FakeImages(text_response="Used gold foil")
    service = InvitationService(images=images)
    results = run(
        service.generate(
            EventDetails(title="Gala"),
            "corporate",
            corporate_style(),
            variant_count=3,
            variation_modes=["minimal-air", "kinetic-type"],
        )
    )
    assert results[0].prompt_used.endswith("\n\nAssistant notes: Used gold foil")
    assert "Variation focus: ultra minimal swiss layout" in images.prompts[0]
    assert "Variation focus: kinetic typography" in images.prompts[1]
    assert "Variation focus: ultra minimal swiss layout" in images.prompts[2]


def test_invitation_failed_generation_keeps_placeholder():
    results = run(InvitationService(images=FakeImages(fail=True)).generate(EventDetails(title="Gala"), "corporate", corporate_style(), variant_count=1))
    assert results[0].image_data == invitation_placeholder()


def test_invitation_notes_kept_when_no_image_returned():
    images = FakeImages(fail=True, text_response="I can only describe this layout")
    results = run(InvitationService(images=images).generate(EventDetails(title="Gala"), "corporate", corporate_style(), variant_count=1))
    assert results[0].image_data == invitation_placeholder()
    assert results[0].prompt_used.endswith("\n\nAssistant notes: I can only describe this layout")


def test_invitation_persistence_failure_is_not_fatal():
    results = run(InvitationService(images=FakeImages(), store=ExplodingStore()).generate(EventDetails(title="Gala"), "corporate", corporate_style()))
    assert len(results) == 3


@pytest.mark.parametrize(
    "title,category,style,message",
    [
        ("", "corporate", "x", "Event title is required"),
        ("Gala", "", "x", "Category and style are required"),
        ("Gala", "corporate", "nope", "Invalid category or style"),
    ],
)
def test_invitation_validation(title, category, style, message):
    with pytest.raises(InvalidRequest, match=message):
        run(InvitationService(images=None).generate(EventDetails(title=title), category, style))


def test_invitation_video():
    video = FakeVideo()
    out = run(InvitationService(images=None, video=video).generate_video(EventDetails(title="Gala"), "corporate", corporate_style(), "3:2"))
    assert out.video_url == "/api/video/abc123"
    options = video.calls[0][1]
    assert options.aspect_ratio == "16:9"
    assert options.style == "artistic"


def test_invitation_video_failure():
    with pytest.raises(GenerationError, match="Video generation failed"):
        run(InvitationService(images=None, video=FakeVideo(url=None)).generate_video(EventDetails(title="Gala"), "corporate", corporate_style()))


# product


def test_place_uses_gemini_first(store):
    service = ProductService(images=FakeImages(), fallback=FakeFallback(), store=store)
    result = run(service.place(PNG_DATA_URL, "ecommerce-catalog", "clean-white", session_id="p"))
    assert result.image_data == "data:image/png;base64,placed"
    assert result.provider == "gemini"
    assert store.list_assets("p")[0]["source"] == "product-placement"


def test_place_falls_back_to_openai_then_demo():
    service = ProductService(images=FakeImages(fail=True), fallback=FakeFallback())
    assert run(service.place(PNG_DATA_URL, "ecommerce-catalog", "clean-white")).image_data == "data:image/png;base64,dalle"

    service = ProductService(images=FakeImages(fail=True), fallback=FakeFallback(fail=True))
    demo = run(service.place(PNG_DATA_URL, "ecommerce-catalog", "clean-white"))
    assert demo.image_data == demo_pixel()
    assert demo.prompt_used.endswith(DEMO_MODE_SUFFIX)


def test_place_enhances_custom_prompt():
    text, images = FakeText(), FakeImages()
    service = ProductService(text=text, images=images)
    run(service.place(PNG_DATA_URL, "ecommerce-catalog", custom_prompt="on a beach", product_description="mug", enhance_with_claude=True))
    assert text.enhance_calls == ["on a beach"]
    assert images.prompts[0].startswith("mug Enhanced: on a beach")


@pytest.mark.parametrize(
    "image,category,variation,message",
    [
        ("", "ecommerce-catalog", "clean-white", "Product image is required"),
        (PNG_DATA_URL, "", "clean-white", "Category ID is required"),
        (PNG_DATA_URL, "ecommerce-catalog", None, "Either variation ID or custom prompt is required"),
    ],
)
def test_place_validation(image, category, variation, message):
    with pytest.raises(InvalidRequest, match=message):
        run(ProductService().place(image, category, variation))


def test_product_video(store):
    video = FakeVideo()
    service = ProductService(video=video, store=store)
    out = run(service.generate_video("ecommerce-catalog", "clean-white", session_id="p"))
    assert out.variation_name == "Clean White Background"
    assert video.calls[0][1].style == "professional"
    assert store.list_assets("p", kind="video")[0]["source"] == "product-video"


def test_product_video_errors():
    with pytest.raises(InvalidRequest, match="Invalid category ID"):
        run(ProductService(video=FakeVideo()).generate_video("nope"))
    with pytest.raises(GenerationError, match="Failed to generate video"):
        run(ProductService(video=FakeVideo(url=None)).generate_video("ecommerce-catalog"))


def test_remove_background_prefers_removebg():
    assert run(ProductService(images=FakeImages(), background_remover=FakeRemover()).remove_background("QUJD")) == "data:image/png;base64,cutout"
    assert run(ProductService(images=FakeImages()).remove_background("QUJD")) == "data:image/png;base64,gemini-cutout"
    with pytest.raises(ProviderNotConfigured, match="REMOVEBG_API_KEY"):
        run(ProductService().remove_background("QUJD"))
