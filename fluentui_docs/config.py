"""Application settings for the FluentUI docs server.

Settings are resolved from environment variables prefixed with ``FLUENTUI_``
(for example ``FLUENTUI_DOCS_PATH`` or ``FLUENTUI_VERSION``), an optional
``.env`` file, and the defaults below.

No docs tree ships with the package. Point ``FLUENTUI_DOCS_PATH`` at a
docs root, or run from a directory containing ``docs/<version>``; startup
fails with ``DocsRootNotFoundError`` when neither exists.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .engine.scoring.constants import (
    BM25_B,
    BM25_K1,
    DEFAULT_FIELD_WEIGHTS,
    MODULE_KINDS,
    ScoringConfig,
)


class Settings(BaseSettings):
    """Server configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FLUENTUI_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Docs source
    version: str = Field(default="v9", description="FluentUI docs version to serve")
    docs_path: Path | None = Field(
        default=None, description="Docs root (defaults to ./docs/<version> in the working directory)"
    )
    module_kinds: dict[str, str] = Field(
        default_factory=lambda: dict(MODULE_KINDS),
        description="Top-level module folder name -> document kind",
    )

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    cors_allowed_origins: str = Field(
        default="*", description="Comma-separated CORS origins, or '*' for any"
    )

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # Search
    default_search_limit: int = Field(default=10, ge=1)
    max_search_limit: int = Field(default=50, ge=1)
    field_weights: dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_FIELD_WEIGHTS))
    bm25_k1: float = Field(default=BM25_K1, gt=0)
    bm25_b: float = Field(default=BM25_B, ge=0, le=1)
    snippet_length: int = Field(default=200, ge=40)
    extra_stop_words: list[str] = Field(default_factory=list)
    extra_component_aliases: dict[str, str] = Field(default_factory=dict)

    # Synthesis
    suggestion_limit: int = Field(default=10, ge=1)
    guide_per_category: int = Field(default=2, ge=1)
    guide_max_entries: int = Field(default=8, ge=1)

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def cors_origins_list(self) -> list[str]:
        if self.cors_allowed_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    @property
    def server_name(self) -> str:
        return f"fluentui-{self.version}-docs"

    @property
    def resolved_docs_path(self) -> Path:
        """Docs root: ``docs_path`` if set, else ``docs/<version>`` under the working directory."""
        if self.docs_path is not None:
            return self.docs_path.expanduser().resolve()
        return (Path.cwd() / "docs" / self.version).resolve()

    def scoring_config(self) -> ScoringConfig:
        """Build the immutable scoring configuration consumed by the engine."""
        return ScoringConfig.create(
            field_weights=self.field_weights,
            k1=self.bm25_k1,
            b=self.bm25_b,
            snippet_length=self.snippet_length,
            extra_stop_words=self.extra_stop_words,
            extra_aliases=self.extra_component_aliases,
        )


settings = Settings()
