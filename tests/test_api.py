from fastapi.testclient import TestClient

from conftest import FakeImages, FakeVideo
from palette_studio.api import deps
from palette_studio.api.app import app
from palette_studio.catalogs.creative_paths import COOKING

PALETTE_BODY = [
    {"hex": "#1B3A4B", "name": "Deep Teal", "suggested_role": "Dominant Base"},
    {"hex": "#E76F51", "name": "Burnt Sienna", "suggested_role": "Accent"},
]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_catalog_lists_reference_data(client):
    body = client.get("/api/catalog").json()
    assert COOKING in body["creative_paths"]
    assert body["aspect_ratios"][0]["id"] == "9:16"
    assert any(c["id"] == "wedding" for c in body["invitation_categories"])
    assert body["invitation_variations"][0]["id"] == "collage-energy"


def test_extract_palette(client):
    resp = client.post("/api/extract-palette", json={"imageBase64": "data:image/png;base64,iVBORw0K", "swatches": 2})
    assert resp.status_code == 200
    body = resp.json()
    assert body["mood_description"] == "Coastal calm"
    assert len(body["palette"]) == 2


def test_extract_palette_validation_and_failure(client):
    assert client.post("/api/extract-palette", json={}).json() == {"detail": "Image data is required"}
    resp = client.post("/api/extract-palette", json={"imageBase64": "broken"})
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to extract color palette from image"


def test_missing_key_is_a_400(client):
    app.dependency_overrides[deps.get_text_provider] = lambda: None
    resp = client.post("/api/extract-palette", json={"imageBase64": "iVBORw0K"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "ANTHROPIC_API_KEY is not set"


def test_generate_ideas(client):
    resp = client.post(
        "/api/generate-ideas",
        json={"path": COOKING, "palette": PALETTE_BODY, "imagePromptChoice": "Dish Plated"},
    )
    assert resp.status_code == 200
    assert resp.json()["ideas"] == "Ideas for culinary arts and cooking"


def test_generate_ideas_requires_fields(client):
    resp = client.post("/api/generate-ideas", json={"path": COOKING, "palette": PALETTE_BODY})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Path, palette, and image prompt choice are required"


def test_generate_creative(client, store):
    resp = client.post(
        "/api/generate-creative",
        json={
            "path": COOKING,
            "palette": PALETTE_BODY,
            "imagePromptChoice": "Dish Plated",
            "formats": ["image", "image-series"],
            "imageSeriesConfig": {"themeId": "auto", "count": 2, "aspectRatio": "16:9"},
            "sessionId": "web-1",
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["formats_generated"] == ["image", "image-series"]
    assert len(body["image_series_urls"]) == 2
    assert "video_url" not in body
    assert len(store.list_assets("web-1")) == 3


def test_generate_creative_nothing_generated(client, fakes):
    fakes["video"].url = None
    resp = client.post(
        "/api/generate-creative",
        json={"path": COOKING, "palette": PALETTE_BODY, "imagePromptChoice": "Dish Plated", "formats": ["video"]},
    )
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to generate any content"


def test_invitation_generate(client):
    resp = client.post(
        "/api/invitation-generate",
        json={
            "eventDetails": {"title": "Launch Night", "date": "Oct 2", "hostName": "Acme"},
            "categoryId": "birthday",
            "styleId": "kids-fun",
            "variantCount": 2,
        },
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert [r["styleName"] for r in body["results"]] == ["Kids Fun", "Kids Fun"]
    assert "Hosted by Acme" in body["results"][0]["promptUsed"]


def test_invitation_generate_validation(client):
    resp = client.post("/api/invitation-generate", json={"eventDetails": {"title": "X"}, "categoryId": "birthday", "styleId": "nope"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid category or style"


def test_invitation_video(client):
    resp = client.post(
        "/api/invitation-video",
        json={"eventDetails": {"title": "Launch"}, "categoryId": "birthday", "styleId": "kids-fun"},
    )
    assert resp.status_code == 200
    assert resp.json()["videoUrl"] == "/api/video/abc123"


def test_invitation_video_failure(client):
    app.dependency_overrides[deps.get_video_provider] = lambda: FakeVideo(url=None)
    resp = client.post(
        "/api/invitation-video",
        json={"eventDetails": {"title": "Launch"}, "categoryId": "birthday", "styleId": "kids-fun"},
    )
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Video generation failed"


def test_product_placement(client):
    resp = client.post(
        "/api/product-placement",
        json={"productImage": "data:image/png;base64,iVBORw0K", "categoryId": "ecommerce-catalog", "variationId": "clean-white"},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body == {
        "success": True,
        "imageUrl": None,
        "imageData": "data:image/png;base64,placed",
        "promptUsed": body["promptUsed"],
    }


def test_product_placement_validation(client):
    resp = client.post("/api/product-placement", json={"productImage": "x", "categoryId": "ecommerce-catalog"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Either variation ID or custom prompt is required"


def test_product_placement_demo_mode(client):
    app.dependency_overrides[deps.get_image_provider] = lambda: FakeImages(fail=True)
    app.dependency_overrides[deps.get_fallback_image_provider] = lambda: None
    resp = client.post(
        "/api/product-placement",
        json={"productImage": "x", "categoryId": "ecommerce-catalog", "customPrompt": "on a rooftop"},
    )
    assert resp.status_code == 200
    assert "[DEMO MODE" in resp.json()["promptUsed"]


def test_product_video(client):
    resp = client.post("/api/product-video", json={"categoryId": "ecommerce-catalog", "variationId": "clean-white"})
    assert resp.status_code == 200
    assert resp.json()["variationName"] == "Clean White Background"
    assert client.post("/api/product-video", json={"categoryId": "nope"}).status_code == 400


def test_remove_background(client):
    resp = client.post("/api/remove-background", json={"imageData": "QUJD"})
    assert resp.json() == {"success": True, "imageUrl": None, "imageData": "data:image/png;base64,cutout"}
    assert client.post("/api/remove-background", json={}).json()["detail"] == "No image data provided"


def test_session_roundtrip(client):
    assert client.get("/api/session").status_code == 400
    assert client.get("/api/session", params={"sessionId": "s9"}).json() == {"session": None}

    resp = client.post("/api/session", json={"sessionId": "s9", "mode": "invitation", "state": {"step": 2}})
    assert resp.json() == {"success": True}
    session = client.get("/api/session", params={"sessionId": "s9"}).json()["session"]
    assert session["state"] == {"step": 2}

    bad = client.post("/api/session", json={"sessionId": "s9"})
    assert bad.status_code == 400
    assert bad.json()["detail"] == "sessionId and mode are required"


def test_assets_listing(client):
    assert client.get("/api/assets").status_code == 400
    client.post("/api/product-video", json={"categoryId": "ecommerce-catalog", "sessionId": "s3"})
    assets = client.get("/api/assets", params={"sessionId": "s3", "kind": "video"}).json()["assets"]
    assert [a["source"] for a in assets] == ["product-video"]


def test_video_proxy(client):
    resp = client.get("/api/video/abc123")
    assert resp.status_code == 200
    assert resp.content == b"video-bytes"
    assert resp.headers["content-type"] == "video/mp4"
    assert resp.headers["cache-control"] == "private, max-age=3600"
    assert resp.headers["accept-ranges"] == "bytes"


def test_video_proxy_without_key(client):
    app.dependency_overrides[deps.get_video_provider] = lambda: None
    resp = client.get("/api/video/abc123")
    assert resp.status_code == 500
    assert resp.json()["detail"] == "GOOGLE_GENERATIVE_AI_API_KEY is not configured"


def test_video_proxy_keeps_upstream_status(client):
    app.dependency_overrides[deps.get_video_provider] = lambda: FakeVideo(download_status=404)
    resp = client.get("/api/video/gone")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Failed to fetch video from Gemini"}


def test_unexpected_errors_are_500(client):
    class Boom:
        name = "boom"

        async def generate_video(self, prompt, options=None):
            raise KeyError("operation")

    app.dependency_overrides[deps.get_video_provider] = lambda: Boom()
    resp = TestClient(app, raise_server_exceptions=False).post(
        "/api/product-video", json={"categoryId": "ecommerce-catalog"}
    )
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}
