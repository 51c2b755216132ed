"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ThreadSettings(BaseModel):
    """Comment thread engine configuration."""

    # Maximum length of comment text accepted on submit/edit
    max_comment_length: int = Field(default=500, ge=1)

    # Root ordering used when a snapshot request doesn't specify one
    default_sort: Literal["top", "newest", "oldest"] = "top"

    # Show the pinned comment above all others
    pinned_first: bool = True

    # Walk the full forest after every command and reject inconsistent results
    verify_invariants: bool = True


class SourceSettings(BaseModel):
    """Comment source configuration."""

    # JSON file mapping video IDs to raw comment records
    # When unset, the source starts empty and every thread opens with no comments
    fixture_path: str | None = None


class APISettings(BaseModel):
    """API configuration."""

    host: str = "0.0.0.0"
    port: int = 8000

    # Frontend origins allowed by CORS
    allowed_origins: list[str] = [
        "http://localhost:3000",  # Local development
        "http://localhost:5173",  # Vite default
    ]


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using "__" for nested values:

        ENVIRONMENT=production
        THREADS__MAX_COMMENT_LENGTH=1000
        SOURCE__FIXTURE_PATH=/data/comments.json
        API__PORT=8080
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows THREADS__DEFAULT_SORT syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    # Nested settings
    threads: ThreadSettings = ThreadSettings()
    source: SourceSettings = SourceSettings()
    api: APISettings = APISettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def load_git_sha(self) -> "Settings":
        """Load git SHA from the version file when deployed."""
        version_file = Path("/app/version.txt")
        if self.git_sha == "unknown" and version_file.exists():
            try:
                self.git_sha = version_file.read_text().strip()
            except OSError:
                # Unreadable version file: keep "unknown"
                pass
        return self
