"""Core configuration and error types."""
from metafetch.core.config import GitConfig, ResolverConfig
from metafetch.core.errors import (
    ConfigError,
    GitCloneError,
    GitOperationError,
    InvalidContentError,
    MetafetchError,
)

__all__ = [
    "GitConfig",
    "ResolverConfig",
    "ConfigError",
    "GitCloneError",
    "GitOperationError",
    "InvalidContentError",
    "MetafetchError",
]
