"""Repository URL validation."""
import re
from urllib.parse import urlparse

# user@host: prefix of scp-like git URLs, e.g. git@github.com:org/repo.git.
# The user part may not start with "-" so git never reads it as an option.
_SSH_PREFIX = re.compile(r"^[^-@/:\s][^@/:\s]*@[^:/\s]+:")

HTTP_SCHEMES = ("http", "https")


def is_ssh_url(url: str) -> bool:
    """Return True for scp-like ``user@host:path`` locators."""
    return bool(_SSH_PREFIX.match(url))


def valid_http_url(url: str) -> bool:
    """Decide whether a repository URL is usable for cloning.

    SSH-style URLs are accepted as-is since urlparse cannot make sense of
    them. Anything else must be an http(s) URL with a host. Parse failures
    yield False rather than an exception.

    Examples:
        git@github.com:puppetlabs/puppetlabs-stdlib.git -> True
        https://github.com/puppetlabs/puppetlabs-stdlib -> True
        ftp://example.com/repo.git -> False
        https:///repo.git -> False
    """
    if not isinstance(url, str) or not url:
        return False

    if is_ssh_url(url):
        return True

    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
    except ValueError:
        return False

    return parsed.scheme.lower() in HTTP_SCHEMES and bool(hostname)
