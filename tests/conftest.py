from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from palette_studio.api import deps
from palette_studio.api.app import app
from palette_studio.errors import GenerationError
from palette_studio.providers.base import DownloadedFile, ImageResult, PaletteEntry, PaletteOutput, VideoOptions
from palette_studio.providers.veo_provider import UpstreamError
from palette_studio.storage import LocalAssetStore

PNG_DATA_URL = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUg=="

PALETTE = [
    PaletteEntry("#1B3A4B", "Deep Teal", "Dominant Base"),
    PaletteEntry("#F4A261", "Sandy Orange", "Secondary"),
    PaletteEntry("#E76F51", "Burnt Sienna", "Accent"),
    PaletteEntry("#F1FAEE", "Honeydew", "Highlight"),
]


class FakeText:
    name = "fake-text"

    def __init__(self) -> None:
        self.ideas_calls: list[tuple[str, str | None]] = []
        self.enhance_calls: list[str] = []

    async def extract_palette(self, image_b64: str, swatches: int = 5) -> PaletteOutput:
        if image_b64 == "broken":
            raise GenerationError("No JSON found in palette response")
        return PaletteOutput(mood_description="Coastal calm", palette=PALETTE[:swatches])

    async def generate_ideas(self, palette, domain, customizations, additional_context=None) -> str:
        self.ideas_calls.append((domain, additional_context))
        return f"Ideas for {domain}"

    async def enhance_prompt(self, base_prompt: str, product_description: str) -> str:
        self.enhance_calls.append(base_prompt)
        return f"Enhanced: {base_prompt}"


class FakeImages:
    name = "gemini"

    def __init__(self, fail: bool = False, text_response: str | None = None, fail_on: set[int] | None = None) -> None:
        self.fail = fail
        self.text_response = text_response
        self.fail_on = fail_on or set()
        self.prompts: list[str] = []
        self.calls = 0

    async def generate_image(self, prompt: str, model: str = "flash") -> ImageResult:
        self.calls += 1
        self.prompts.append(prompt)
        if self.fail or self.calls in self.fail_on:
            raise GenerationError("No image data in response", text_response=self.text_response)
        return ImageResult(image_data=PNG_DATA_URL, model_used=model, text_response=self.text_response)

    async def remove_background(self, image_data, product_description=None, model="pro") -> ImageResult:
        return ImageResult(image_data="data:image/png;base64,gemini-cutout", model_used=model)

    async def place_product(self, product_image, environment_prompt, product_description=None, model="pro") -> ImageResult:
        self.prompts.append(environment_prompt)
        if self.fail:
            raise GenerationError("No image data in response")
        return ImageResult(image_data="data:image/png;base64,placed", model_used=model)


class FakeVideo:
    name = "veo"

    def __init__(self, url: str | None = "/api/video/abc123", fail: bool = False, download_status: int | None = None) -> None:
        self.url = url
        self.fail = fail
        self.download_status = download_status
        self.calls: list[tuple[str, VideoOptions | None]] = []

    async def generate_video(self, prompt: str, options: VideoOptions | None = None) -> str | None:
        self.calls.append((prompt, options))
        if self.fail:
            raise GenerationError("Video generation timed out")
        return self.url

    async def download_file(self, file_id: str) -> DownloadedFile:
        if self.download_status is not None:
            raise UpstreamError(self.download_status, "Failed to fetch video from Gemini")
        return DownloadedFile(content=b"video-bytes", content_type="video/mp4")


class FakeFallback:
    name = "openai"

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail

    async def generate_image(self, prompt: str) -> str:
        if self.fail:
            raise GenerationError("No image in OpenAI response")
        return "data:image/png;base64,dalle"


class FakeRemover:
    name = "removebg"

    async def remove_background(self, image_data: str, size: str = "auto") -> str:
        return "data:image/png;base64,cutout"


@pytest.fixture
def store(tmp_path):
    return LocalAssetStore(tmp_path)


@pytest.fixture
def fakes():
    return {
        "text": FakeText(),
        "images": FakeImages(),
        "video": FakeVideo(),
        "fallback": FakeFallback(),
        "remover": FakeRemover(),
    }


@pytest.fixture
def client(store, fakes):
    app.dependency_overrides[deps.get_asset_store] = lambda: store
    app.dependency_overrides[deps.get_text_provider] = lambda: fakes["text"]
    app.dependency_overrides[deps.get_image_provider] = lambda: fakes["images"]
    app.dependency_overrides[deps.get_video_provider] = lambda: fakes["video"]
    app.dependency_overrides[deps.get_fallback_image_provider] = lambda: fakes["fallback"]
    app.dependency_overrides[deps.get_background_remover] = lambda: fakes["remover"]
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
