"""metafetch CLI - Command line interface for metafetch."""
import logging
import sys
from pathlib import Path

import click

from metafetch.core.config import ResolverConfig
from metafetch.core.errors import ConfigError, GitCloneError, InvalidContentError
from metafetch.git import ModuleSpec, clone_and_read_file, metadata, select_ref
from metafetch.git.urls import valid_http_url

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(name)s: %(message)s",
)
logger = logging.getLogger("metafetch")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """metafetch - Read module metadata from git repositories."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


@main.command()
@click.option("--remote", required=True, help="Git repository URL")
@click.option("--ref", default=None, help="Explicit git ref (highest priority)")
@click.option("--tag", default=None, help="Git tag")
@click.option("--commit", default=None, help="Git commit SHA")
@click.option("--branch", default=None, help="Git branch")
@click.option("--proxy", default=None, help="HTTP(S) proxy for git")
@click.option(
    "--config",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Resolver configuration file (JSON)",
)
@click.option(
    "--file",
    "file_path",
    default=None,
    help="File to read instead of metadata.json",
)
def fetch(
    remote: str,
    ref: str,
    tag: str,
    commit: str,
    branch: str,
    proxy: str,
    config: Path,
    file_path: str,
):
    """Fetch a file from a git remote through a shallow clone.

    Examples:
        metafetch fetch --remote https://github.com/puppetlabs/puppetlabs-stdlib --tag v9.6.0
        metafetch fetch --remote git@github.com:org/module.git --proxy http://proxy.local:3128

    Exit codes:
        0: Success
        1: Generic runtime failure
        2: Invalid CLI usage
        3: Clone failed
        5: File missing or empty at the requested revision
        6: Remote URL not usable
        7: Configuration file error
    """
    try:
        resolver_config = ResolverConfig.load(config) if config else ResolverConfig()
    except ConfigError as e:
        logger.error(str(e))
        sys.exit(7)

    if proxy:
        resolver_config = resolver_config.with_proxy(proxy)

    module = ModuleSpec(
        remote=remote,
        ref=ref,
        tag=tag,
        commit=commit,
        branch=branch,
    )

    try:
        if file_path:
            if not valid_http_url(remote):
                content = None
            else:
                content = clone_and_read_file(
                    remote, select_ref(module), file_path, resolver_config
                )
        else:
            content = metadata(module, resolver_config)

        if content is None:
            logger.error(f"Remote is not a usable git URL: {remote}")
            sys.exit(6)

        click.echo(content, nl=not content.endswith("\n"))
        sys.exit(0)

    except GitCloneError as e:
        logger.error(str(e))
        sys.exit(3)

    except InvalidContentError as e:
        logger.error(str(e))
        sys.exit(5)

    except Exception as e:
        logger.error(f"Fetch failed: {str(e)}")
        sys.exit(1)


@main.command(name="check-url")
@click.argument("url")
def check_url(url: str):
    """Report whether URL can be used as a git remote."""
    if valid_http_url(url):
        click.echo("valid")
        sys.exit(0)
    click.echo("invalid")
    sys.exit(6)


if __name__ == "__main__":
    main()
