"""metafetch - read module metadata from git remotes."""
from metafetch.core.config import GitConfig, ResolverConfig
from metafetch.core.errors import (
    GitCloneError,
    InvalidContentError,
    MetafetchError,
)
from metafetch.git import ModuleSpec, clone_and_read_file, metadata

__version__ = "0.1.0"

__all__ = [
    "GitConfig",
    "ResolverConfig",
    "GitCloneError",
    "InvalidContentError",
    "MetafetchError",
    "ModuleSpec",
    "clone_and_read_file",
    "metadata",
]
