"""Core exception types for metafetch."""
from typing import Optional


class MetafetchError(Exception):
    """Base exception for all metafetch errors."""
    pass


class GitOperationError(MetafetchError):
    """Raised when a git operation fails."""
    pass


class GitCloneError(GitOperationError):
    """Raised when the shallow clone of a remote repository fails."""

    def __init__(self, url: str, output: str, proxy: Optional[str] = None):
        self.url = url
        self.output = output
        self.proxy = proxy
        message = f"Failed to clone {url}"
        if proxy:
            message += f" with proxy {proxy}"
        super().__init__(f"{message}: {output}")


class InvalidContentError(GitOperationError):
    """Raised when a file read from a clone is missing or too short to trust."""

    def __init__(self, url: str, ref: str, file: str, output: str = ""):
        self.url = url
        self.ref = ref
        self.file = file
        self.output = output
        super().__init__(
            f"InvalidContent: could not read {ref}:{file} from {url}"
        )


class ConfigError(MetafetchError):
    """Raised when a configuration file is missing or invalid."""
    pass
