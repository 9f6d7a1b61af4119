"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All credentials come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Missing credentials are NOT validated at startup; dependent routes fail at call time

Design Decisions:
    - Upstream base URLs are settings, not constants: placeholder/broken upstreams
      from earlier deployments become a configuration choice
    - missing_parameter_status defaults to 500 (historical client contract);
      400 is accepted for deployments that want the corrected status
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Envelope
    creator: str = "Crazy"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]
    static_dir: str = "static"

    # Credentials (HF_TOKEN, GENIUS_TOKEN, REMOVE_BG_KEY, UNSPLASH_ACCESS_KEY)
    hf_token: str | None = None
    genius_token: str | None = None
    remove_bg_key: str | None = None
    unsplash_access_key: str | None = None

    # Upstream behaviour
    upstream_timeout_seconds: float = 30.0
    upstream_concurrency_limit: int = 8
    expose_upstream_errors: bool = True
    missing_parameter_status: int = 500

    @field_validator("missing_parameter_status")
    @classmethod
    def check_missing_parameter_status(cls, v: int) -> int:
        if v not in (400, 500):
            raise ValueError("missing_parameter_status must be 400 or 500")
        return v

    # Capability knobs
    text_max_new_tokens: int = 180
    text_temperature: float = 0.7
    enhance_width: int = 1920
    search_result_limit: int = 10

    # Upstream endpoints
    npm_registry_url: str = "https://registry.npmjs.org"
    unsplash_api_url: str = "https://api.unsplash.com"
    genius_api_url: str = "https://api.genius.com"
    remove_bg_url: str = "https://api.remove.bg/v1.0/removebg"
    quotes_url: str = "https://api.quotable.io/random"
    waifu_url: str = "https://api.waifu.pics/sfw/waifu"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
