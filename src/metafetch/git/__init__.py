"""Git-backed metadata retrieval."""
from metafetch.git.gclone import (
    METADATA_FILE,
    clone_and_read_file,
    metadata,
    select_ref,
)
from metafetch.git.module import ModuleSpec
from metafetch.git.runner import CommandResult, run_command
from metafetch.git.urls import valid_http_url

__all__ = [
    "METADATA_FILE",
    "CommandResult",
    "ModuleSpec",
    "clone_and_read_file",
    "metadata",
    "run_command",
    "select_ref",
    "valid_http_url",
]
