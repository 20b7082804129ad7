from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Loads keys from process env, and also from a local .env file for convenience.
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8")

    data_dir: str = "data"
    log_level: str = "INFO"

    # Keys
    anthropic_api_key: str | None = None
    google_generative_ai_api_key: str | None = None
    openai_api_key: str | None = None
    removebg_api_key: str | None = None

    # Persistence. Both must be set to use Supabase; otherwise assets go to data_dir.
    supabase_url: str | None = None
    supabase_service_role_key: str | None = None

    # Models
    anthropic_model: str = "claude-sonnet-4-20250514"
    anthropic_enhance_model: str = "claude-3-5-sonnet-20241022"
    gemini_flash_image_model: str = "gemini-2.5-flash-image"
    gemini_pro_image_model: str = "gemini-3-pro-image-preview"
    veo_video_model: str = "veo-2.0-generate-001"
    openai_image_model: str = "dall-e-3"

    # Video polling
    video_poll_timeout_s: float = 240.0
    video_poll_interval_s: float = 5.0

    @property
    def gemini_models(self) -> dict[str, str]:
        return {"flash": self.gemini_flash_image_model, "pro": self.gemini_pro_image_model}


settings = Settings()
