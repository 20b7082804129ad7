from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Protocol

ModelKey = Literal["flash", "pro"]
VideoDuration = Literal["short", "medium", "long"]
VideoStyle = Literal["cinematic", "artistic", "social", "professional"]


@dataclass(frozen=True)
class PaletteEntry:
    hex: str
    name: str
    suggested_role: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PaletteEntry":
        return cls(
            hex=str(data.get("hex", "")),
            name=str(data.get("name", "")),
            suggested_role=str(data.get("suggested_role", "")),
        )


@dataclass(frozen=True)
class PaletteOutput:
    mood_description: str
    palette: list[PaletteEntry]


@dataclass(frozen=True)
class ImageResult:
    image_data: str  # data URL
    model_used: str
    text_response: str | None = None


@dataclass(frozen=True)
class VideoOptions:
    aspect_ratio: str = "9:16"
    resolution: str = "720p"
    duration: VideoDuration = "short"
    style: VideoStyle = "cinematic"


@dataclass(frozen=True)
class DownloadedFile:
    content: bytes
    content_type: str = "video/mp4"
    headers: dict[str, str] = field(default_factory=dict)


class TextProvider(Protocol):
    name: str

    async def extract_palette(self, image_b64: str, swatches: int = 5) -> PaletteOutput: ...

    async def generate_ideas(
        self,
        palette: list[PaletteEntry],
        domain: str,
        customizations: dict[str, Any],
        additional_context: str | None = None,
    ) -> str: ...

    async def enhance_prompt(self, base_prompt: str, product_description: str) -> str: ...


class ImageProvider(Protocol):
    name: str

    async def generate_image(self, prompt: str, model: ModelKey = "flash") -> ImageResult: ...

    async def remove_background(
        self,
        image_data: str,
        product_description: str | None = None,
        model: ModelKey = "pro",
    ) -> ImageResult: ...

    async def place_product(
        self,
        product_image: str,
        environment_prompt: str,
        product_description: str | None = None,
        model: ModelKey = "pro",
    ) -> ImageResult: ...


class VideoProvider(Protocol):
    name: str

    async def generate_video(self, prompt: str, options: VideoOptions | None = None) -> str | None: ...

    async def download_file(self, file_id: str) -> DownloadedFile: ...


class FallbackImageProvider(Protocol):
    name: str

    async def generate_image(self, prompt: str) -> str: ...


class BackgroundRemover(Protocol):
    name: str

    async def remove_background(self, image_data: str, size: str = "auto") -> str: ...
