from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from palette_studio.catalogs.invitations import EventDetails
from palette_studio.providers.base import ModelKey, PaletteEntry


class _Body(BaseModel):
    # Clients send camelCase keys; snake_case is accepted too.
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PaletteColor(_Body):
    hex: str
    name: str = ""
    suggested_role: str = ""

    def to_entry(self) -> PaletteEntry:
        return PaletteEntry(hex=self.hex, name=self.name, suggested_role=self.suggested_role)


class ExtractPaletteRequest(_Body):
    image_base64: str = Field("", alias="imageBase64")
    swatches: int = Field(5, ge=1, le=12)


class GenerateIdeasRequest(_Body):
    path: str = ""
    palette: list[PaletteColor] = Field(default_factory=list)
    customizations: dict[str, Any] = Field(default_factory=dict)
    image_prompt_choice: str = Field("", alias="imagePromptChoice")
    image_aspect_ratio: str = Field("1:1", alias="imageAspectRatio")

    @field_validator("customizations", mode="before")
    @classmethod
    def normalize_customizations(cls, v: Any) -> dict[str, Any]:
        if v is None or v == "":
            return {}
        if isinstance(v, str):
            try:
                parsed = json.loads(v)
            except json.JSONDecodeError:
                raise ValueError("Invalid JSON string")
            if not isinstance(parsed, dict):
                raise ValueError("Expected JSON object")
            return parsed
        return v

    def palette_entries(self) -> list[PaletteEntry]:
        return [c.to_entry() for c in self.palette]


class ImageSeriesConfig(_Body):
    theme_id: str = Field("auto", alias="themeId")
    count: int = Field(5, ge=1, le=10)
    aspect_ratio: str = Field("1:1", alias="aspectRatio")


class GenerateCreativeRequest(GenerateIdeasRequest):
    formats: list[str] = Field(default_factory=lambda: ["image"])
    video_aspect_ratio: str = Field("9:16", alias="videoAspectRatio")
    image_series_config: ImageSeriesConfig = Field(default_factory=ImageSeriesConfig, alias="imageSeriesConfig")
    session_id: str | None = Field(None, alias="sessionId")

    @field_validator("formats", mode="before")
    @classmethod
    def normalize_formats(cls, v: Any) -> list[str]:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return [str(x) for x in v]


class EventDetailsBody(_Body):
    title: str = ""
    date: str = ""
    subtitle: str | None = None
    time: str | None = None
    location: str | None = None
    description: str | None = None
    host_name: str | None = Field(None, alias="hostName")
    rsvp_info: str | None = Field(None, alias="rsvpInfo")
    mood_keywords: str | None = Field(None, alias="moodKeywords")
    dress_code: str | None = Field(None, alias="dressCode")

    def to_details(self) -> EventDetails:
        return EventDetails(**self.model_dump())


class InvitationGenerateRequest(_Body):
    event_details: EventDetailsBody = Field(default_factory=EventDetailsBody, alias="eventDetails")
    category_id: str = Field("", alias="categoryId")
    style_id: str = Field("", alias="styleId")
    aspect_ratio: str = Field("4:5", alias="aspectRatio")
    variant_count: int = Field(3, alias="variantCount")
    model: ModelKey = "pro"
    session_id: str | None = Field(None, alias="sessionId")
    template_id: str | None = Field(None, alias="templateId")
    color_palette: list[str] | None = Field(None, alias="colorPalette")
    variation_modes: list[str] | None = Field(None, alias="variationModes")


class InvitationVideoRequest(_Body):
    event_details: EventDetailsBody = Field(default_factory=EventDetailsBody, alias="eventDetails")
    category_id: str = Field("", alias="categoryId")
    style_id: str = Field("", alias="styleId")
    aspect_ratio: str = Field("9:16", alias="aspectRatio")
    session_id: str | None = Field(None, alias="sessionId")


class ProductPlacementRequest(_Body):
    product_image: str = Field("", alias="productImage")
    category_id: str = Field("", alias="categoryId")
    variation_id: str | None = Field(None, alias="variationId")
    custom_prompt: str | None = Field(None, alias="customPrompt")
    aspect_ratio: str | None = Field(None, alias="aspectRatio")
    product_description: str | None = Field(None, alias="productDescription")
    enhance_with_claude: bool = Field(False, alias="enhanceWithClaude")
    model: ModelKey = "pro"
    color_palette: list[str] | None = Field(None, alias="colorPalette")
    session_id: str | None = Field(None, alias="sessionId")


class ProductVideoRequest(_Body):
    category_id: str = Field("", alias="categoryId")
    variation_id: str | None = Field(None, alias="variationId")
    custom_prompt: str | None = Field(None, alias="customPrompt")
    aspect_ratio: str = Field("9:16", alias="aspectRatio")
    product_description: str | None = Field(None, alias="productDescription")
    session_id: str | None = Field(None, alias="sessionId")
    color_palette: list[str] | None = Field(None, alias="colorPalette")


class RemoveBackgroundRequest(_Body):
    image_data: str = Field("", alias="imageData")
    format: str = "png"
    size: str = "auto"
    product_description: str | None = Field(None, alias="productDescription")


class SessionStateRequest(_Body):
    session_id: str = Field("", alias="sessionId")
    mode: str = ""
    state: dict[str, Any] = Field(default_factory=dict)
