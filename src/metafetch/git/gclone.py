"""Read module metadata from a git remote through a throwaway shallow clone.

This is the last resort for git-hosted modules: it needs no local checkout
but transfers a whole (depth 1) revision, so resolvers should prefer cheaper
remote queries when they are available.
"""
import logging
import tempfile
from typing import Callable, List, Optional

from metafetch.core.config import ResolverConfig
from metafetch.core.errors import GitCloneError, InvalidContentError
from metafetch.git.runner import CommandResult, run_command
from metafetch.git.urls import valid_http_url

logger = logging.getLogger(__name__)

CLONE_CMD = ["git", "clone", "--bare", "--depth=1", "--single-branch"]
METADATA_FILE = "metadata.json"
DEFAULT_REF = "HEAD"

# "{}" and "" are the common shapes of an empty read
MIN_CONTENT_LENGTH = 2

Runner = Callable[..., CommandResult]


def select_ref(module) -> str:
    """Pick the revision to read: ref, then tag, commit, branch, else HEAD."""
    for attr in ("ref", "tag", "commit", "branch"):
        value = getattr(module, attr, None)
        if value:
            return value
    return DEFAULT_REF


def _proxy_of(config: Optional[ResolverConfig]) -> Optional[str]:
    return getattr(getattr(config, "git", None), "proxy", None)


def build_clone_args(
    url: str,
    ref: str,
    target_dir: str,
    proxy: Optional[str] = None,
) -> List[str]:
    """Build the argv for a bare, single-branch, depth 1 clone.

    HEAD is not a valid --branch value, so the remote default is cloned
    instead. Options end at "--" so the url is never parsed as one.
    """
    args = list(CLONE_CMD)
    if ref != DEFAULT_REF:
        args.append(f"--branch={ref}")
    if proxy:
        args.extend([
            "--config", f"http.proxy={proxy}",
            "--config", f"https.proxy={proxy}",
        ])
    args.extend(["--", url, target_dir])
    return args


def clone_and_read_file(
    url: str,
    ref: str,
    file: str,
    config: Optional[ResolverConfig] = None,
    runner: Runner = run_command,
) -> str:
    """Clone a repository into a temporary directory and read one file.

    The temporary directory is removed when this returns or raises.

    Args:
        url: Repository URL (http(s) or ssh)
        ref: Branch, tag, commit or HEAD
        file: Path of the file relative to the repository root
        config: Resolver configuration; only git.proxy is used
        runner: Command runner, see run_command

    Returns:
        File content

    Raises:
        GitCloneError: If the clone fails
        InvalidContentError: If the file cannot be read or is near-empty
    """
    proxy = _proxy_of(config)

    with tempfile.TemporaryDirectory(prefix="metafetch-clone-") as tmpdir:
        logger.info(f"Cloning {url} at {ref}")
        out, successful = runner(
            build_clone_args(url, ref, tmpdir, proxy),
            silent=True,
        )
        if not successful:
            raise GitCloneError(url, out, proxy=proxy)

        logger.info(f"Reading {ref}:{file}")
        content, successful = runner(
            ["git", "show", f"{ref}:{file}"],
            silent=False,
            cwd=tmpdir,
        )
        if not successful or len(content) <= MIN_CONTENT_LENGTH:
            logger.warning(f"Rejected content of {ref}:{file} from {url}")
            raise InvalidContentError(url, ref, file, output=content)

        return content


def metadata(
    module,
    config: Optional[ResolverConfig] = None,
    runner: Runner = run_command,
) -> Optional[str]:
    """Fetch a module's metadata.json from its git remote.

    Args:
        module: Object exposing remote, ref, tag, commit and branch
        config: Resolver configuration
        runner: Command runner, see run_command

    Returns:
        Raw metadata.json content, or None when the module has no usable
        git remote

    Raises:
        GitCloneError: If the clone fails
        InvalidContentError: If metadata.json is missing or near-empty
    """
    repo_url = getattr(module, "remote", None)
    if not repo_url:
        logger.debug("Module has no git remote; skipping")
        return None
    if not valid_http_url(repo_url):
        logger.debug(f"Skipping unsupported git remote {repo_url}")
        return None

    ref = select_ref(module)
    logger.debug(f"Querying git repository {repo_url}")
    return clone_and_read_file(repo_url, ref, METADATA_FILE, config, runner)
