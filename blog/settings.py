from pathlib import Path

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
    POSTS_DIR: str = "content/posts"
    ABOUT_FILE: str = "content/about.md"
    IMAGES_DIR: str = "content/images"

    # "development" bypasses the post index cache so edits show up on reload
    ENVIRONMENT: str = "production"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Listings
    PAGE_SIZE: int = 10
    LIST_PREVIEW_SIZE: int = 100
    PAGE_PREVIEW_SIZE: int = 250
    WORDS_PER_MINUTE: int = 240

    # Ingestion
    READ_WORKERS: int = 8

    # Static export
    EXPORT_DIR: str = "dist"

    @property
    def dev_mode(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)

    @property
    def about_path(self) -> Path:
        return Path(self.ABOUT_FILE)

    @property
    def images_path(self) -> Path:
        return Path(self.IMAGES_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
