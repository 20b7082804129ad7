from __future__ import annotations

from functools import lru_cache
from io import BytesIO

from PIL import Image

from palette_studio.prompts.data_urls import to_data_url

DEMO_MODE_SUFFIX = " [DEMO MODE: Add API Key for actual generation]"


@lru_cache(maxsize=8)
def placeholder_png(size: int = 8, rgba: tuple[int, int, int, int] = (236, 230, 246, 255)) -> str:
    """Solid-color PNG data URL shown when no image model is available."""
    buf = BytesIO()
    Image.new("RGBA", (size, size), rgba).save(buf, format="PNG")
    return to_data_url(buf.getvalue(), "image/png")


def invitation_placeholder() -> str:
    return placeholder_png(8)


def demo_pixel() -> str:
    return placeholder_png(1, (128, 64, 192, 255))
