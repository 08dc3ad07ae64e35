"""Resolver configuration models."""
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from metafetch.core.errors import ConfigError


class GitConfig(BaseModel):
    """Settings applied to every git invocation."""

    proxy: Optional[str] = Field(
        default=None,
        description="Proxy endpoint used for both http.proxy and https.proxy",
    )

    @field_validator("proxy")
    @classmethod
    def blank_proxy_is_unset(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty or whitespace-only proxy as no proxy."""
        if v is None:
            return None
        v = v.strip()
        return v or None


class ResolverConfig(BaseModel):
    """Top-level configuration handed to the metadata fetchers.

    Only the git section is consumed here; unknown keys are ignored so the
    same file can carry settings for other resolver strategies.
    """

    git: GitConfig = Field(default_factory=GitConfig)

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "git": {"proxy": "http://proxy.local:3128"},
            }
        },
    )

    def with_proxy(self, proxy: Optional[str]) -> "ResolverConfig":
        """Return a copy with the git proxy replaced."""
        return self.model_copy(update={"git": GitConfig(proxy=proxy)})

    def save(self, path: Path) -> None:
        """Write configuration to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))

    @classmethod
    def load(cls, path: Path) -> "ResolverConfig":
        """Load configuration from JSON file.

        Raises:
            ConfigError: If the file does not exist or is not a valid config
        """
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        try:
            return cls.model_validate_json(raw)
        except (ValidationError, UnicodeDecodeError) as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e
