"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Jurisdiction packs shipped with the engine (registration order)
SUPPORTED_LOCALES = ("fr-BE", "fr-FR", "fr-CH", "nl-BE", "de-BE")

# Fallback for quotes created before a locale field existed
DEFAULT_LOCALE = "fr-BE"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Quote Compliance"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"

    # Server
    host: str = "127.0.0.1"
    port: int = 8001

    # Risk engine defaults
    default_locale: str = DEFAULT_LOCALE
    default_sensitivity: Literal["strict", "normal", "permissive"] = "normal"
    enable_auto_fix: bool = True
    fields_to_analyze: list[str] = Field(
        default_factory=lambda: ["notes", "description", "client_address", "title"]
    )
    context_window_chars: int = 50

    # CORS
    cors_origins: list[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]
    )

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Field(default_factory=lambda: Path("./logs"))
    log_to_file: bool = False

    def ensure_log_dir(self) -> None:
        """Ensure log directory exists."""
        self.log_dir.mkdir(parents=True, exist_ok=True)


settings = Settings()
