from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATALOG_URL = "https://store-site-backend-static.ak.epicgames.com/freeGamesPromotions"
DEFAULT_SUMMARY_API_URL = "https://api.openai.com/v1/chat/completions"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = Field(default="dev", alias="APP_ENV")
    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=8000, alias="APP_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    enable_openapi_docs: bool = Field(default=True, alias="ENABLE_OPENAPI_DOCS")

    catalog_source: Literal["fixture", "remote"] = Field(default="fixture", alias="CATALOG_SOURCE")
    catalog_url: str = Field(default=DEFAULT_CATALOG_URL, alias="CATALOG_URL")
    catalog_timeout_seconds: float = Field(default=10.0, gt=0, alias="CATALOG_TIMEOUT_SECONDS")

    store_host: str = Field(default="epicgames.com", alias="STORE_HOST")
    store_locale: str = Field(default="en-US", alias="STORE_LOCALE")
    placeholder_image_url: str = Field(
        default="https://picsum.photos/400/225",
        alias="PLACEHOLDER_IMAGE_URL",
    )

    summary_api_url: str = Field(default=DEFAULT_SUMMARY_API_URL, alias="SUMMARY_API_URL")
    summary_api_key: str = Field(default="", alias="SUMMARY_API_KEY")
    summary_model: str = Field(default="gpt-4o-mini", alias="SUMMARY_MODEL")
    summary_timeout_seconds: float = Field(default=20.0, gt=0, alias="SUMMARY_TIMEOUT_SECONDS")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
