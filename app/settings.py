from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "posts"
    PUBLIC_DIR: str = "public"
    OUTPUT_DIR: str = "out"

    # Site
    SITE_TITLE: str = "Aayush Kumar Sahu"
    SITE_AUTHOR: str = "Aayush Kumar Sahu"
    SITE_DESCRIPTION: str = "Personal website and blog of Aayush Kumar Sahu"

    # Indexing
    WORDS_PER_MINUTE: int = 200
    MALFORMED_POST_POLICY: Literal["skip", "abort"] = "skip"
    HOME_RECENT_POSTS: int = 3

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def output_path(self) -> Path:
        return Path(self.OUTPUT_DIR)

    @property
    def public_path(self) -> Path:
        return Path(self.PUBLIC_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
