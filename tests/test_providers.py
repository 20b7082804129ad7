import asyncio
from types import SimpleNamespace

import httpx
import pytest

from palette_studio.errors import GenerationError
from palette_studio.providers.anthropic_provider import parse_palette_response
from palette_studio.providers.gemini_provider import GeminiImageProvider
from palette_studio.providers.removebg_provider import RemoveBgProvider
from palette_studio.providers.veo_provider import UpstreamError, VeoVideoProvider, normalize_video_url


def test_parse_palette_plain_json():
    out = parse_palette_response(
        '{"mood_description": "Warm dusk", "palette": [{"hex": "#FF7F50", "name": "Coral", "suggested_role": "Accent"}]}'
    )
    assert out.mood_description == "Warm dusk"
    assert out.palette[0].name == "Coral"


def test_parse_palette_with_surrounding_text():
    text = (
        "Here is the palette:\n```json\n"
        '{"mood_description": "Cool", "palette": [{"hex": "#000080", "name": "Navy", "suggested_role": "Dominant"}]}\n'
        "```\nEnjoy!"
    )
    assert parse_palette_response(text).palette[0].hex == "#000080"


@pytest.mark.parametrize(
    "text",
    [
        "no json here",
        '{"mood_description": "Empty", "palette": []}',
        '{"mood_description": "Broken", "palette": [}',
    ],
)
def test_parse_palette_rejects_unusable_replies(text):
    with pytest.raises(GenerationError):
        parse_palette_response(text)


def test_normalize_video_url():
    assert normalize_video_url(None) is None
    assert normalize_video_url(SimpleNamespace(video_bytes=b"\x00\x01", mime_type="video/mp4")) == "data:video/mp4;base64,AAE="
    files_uri = "https://generativelanguage.googleapis.com/v1beta/files/abc123:download?alt=media"
    assert normalize_video_url(SimpleNamespace(video_bytes=None, uri=files_uri)) == "/api/video/abc123"
    assert normalize_video_url(SimpleNamespace(video_bytes=None, uri="https://cdn.example/v.mp4")) == "https://cdn.example/v.mp4"
    assert normalize_video_url(SimpleNamespace(video_bytes=None, uri=None)) is None


def test_removebg_returns_data_url():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["key"] = request.headers["X-Api-Key"]
        seen["body"] = request.content.decode()
        return httpx.Response(200, content=b"PNG", headers={"content-type": "image/png"})

    provider = RemoveBgProvider("rb-key", transport=httpx.MockTransport(handler))
    out = asyncio.run(provider.remove_background("data:image/jpeg;base64,QUJD", size="preview"))
    assert out == "data:image/png;base64,UE5H"
    assert seen["key"] == "rb-key"
    assert "image_file_b64=QUJD" in seen["body"]
    assert "size=preview" in seen["body"]


def test_removebg_error_status():
    provider = RemoveBgProvider("rb-key", transport=httpx.MockTransport(lambda r: httpx.Response(402, text="no credits")))
    with pytest.raises(GenerationError, match="API error: 402 - no credits"):
        asyncio.run(provider.remove_background("QUJD"))


FILES_URI = "https://generativelanguage.googleapis.com/v1beta/files/abc123:download?alt=media"


class FakeOperations:
    def __init__(self, finished_after: int, error=None, response=None) -> None:
        self.finished_after = finished_after
        self.error = error
        self.response = response
        self.polls = 0

    def get(self, operation):
        self.polls += 1
        done = self.polls >= self.finished_after
        return SimpleNamespace(done=done, error=self.error if done else None, response=self.response if done else None)


class FakeModels:
    def __init__(self) -> None:
        self.kwargs = {}

    def generate_videos(self, **kwargs):
        self.kwargs = kwargs
        return SimpleNamespace(done=False)


def veo(operations, transport=None, timeout_s=5.0):
    client = SimpleNamespace(models=FakeModels(), operations=operations)
    return VeoVideoProvider("veo-key", poll_interval_s=0.01, timeout_s=timeout_s, client=client, transport=transport)


def test_veo_generate_video_polls_until_done():
    response = SimpleNamespace(generated_videos=[SimpleNamespace(video=SimpleNamespace(video_bytes=None, uri=FILES_URI))])
    operations = FakeOperations(finished_after=3, response=response)
    provider = veo(operations)
    assert asyncio.run(provider.generate_video("sunrise over dunes")) == "/api/video/abc123"
    assert operations.polls == 3
    config = provider.client.models.kwargs["config"]
    assert config.aspect_ratio == "9:16"
    assert config.number_of_videos == 1


def test_veo_generate_video_without_videos_returns_none():
    provider = veo(FakeOperations(finished_after=1, response=SimpleNamespace(generated_videos=[])))
    assert asyncio.run(provider.generate_video("sunrise")) is None


def test_veo_wait_times_out():
    provider = veo(FakeOperations(finished_after=10_000), timeout_s=0.05)
    with pytest.raises(GenerationError, match="Video generation timed out"):
        asyncio.run(provider._wait(SimpleNamespace(done=False)))


def test_veo_wait_surfaces_operation_error():
    provider = veo(FakeOperations(finished_after=1, error={"code": 3, "message": "prompt blocked"}))
    with pytest.raises(GenerationError, match="Video generation failed: .*prompt blocked"):
        asyncio.run(provider._wait(SimpleNamespace(done=False)))


def test_veo_download_file():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        return httpx.Response(200, content=b"MP4", headers={"content-type": "video/mp4"})

    out = asyncio.run(veo(FakeOperations(1), transport=httpx.MockTransport(handler)).download_file("abc123"))
    assert out.content == b"MP4"
    assert out.content_type == "video/mp4"
    assert "/files/abc123:download" in seen["url"]
    assert "alt=media" in seen["url"]
    assert "key=veo-key" in seen["url"]


def test_veo_download_file_keeps_upstream_status():
    provider = veo(FakeOperations(1), transport=httpx.MockTransport(lambda r: httpx.Response(404, text="not found")))
    with pytest.raises(UpstreamError, match="Failed to fetch video from Gemini") as excinfo:
        asyncio.run(provider.download_file("gone"))
    assert excinfo.value.status_code == 404


def test_gemini_keeps_text_when_no_image_returned():
    reply = SimpleNamespace(
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=[SimpleNamespace(text="Here is a description instead")]))]
    )
    chat = SimpleNamespace(send_message=lambda message: reply)
    client = SimpleNamespace(chats=SimpleNamespace(create=lambda model, config: chat))
    provider = GeminiImageProvider("gemini-key", client=client)
    with pytest.raises(GenerationError, match="No image data in response") as excinfo:
        asyncio.run(provider.generate_image("gold foil invitation"))
    assert excinfo.value.text_response == "Here is a description instead"
