"""CLI for WebGit."""

import sys

import click

from webgit import __version__
from webgit.config.logging import configure_logging
from webgit.core.exceptions import ConfigurationError

MIN_PORT = 1
MAX_PORT = 65535


def validate_port(value: str | int) -> int:
    """Parse a TCP port number, raising ConfigurationError when out of range."""
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"Invalid port number: {value}",
            details={"port": value},
        ) from None
    if port < MIN_PORT or port > MAX_PORT:
        raise ConfigurationError(
            f"Invalid port number: {value}",
            details={"port": value},
        )
    return port


@click.command()
@click.version_option(__version__, prog_name="webgit")
@click.option("--port", "-p", default="3000", show_default=True, help="Port to run the server on")
@click.option("--dir", "-d", "repo_dir", default=None, help="Path to the git repository (defaults to current directory)")
@click.option("--open", "-o", "open_browser", is_flag=True, help="Open browser automatically after starting")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(port: str, repo_dir: str | None, open_browser: bool, verbose: bool) -> None:
    """WebGit: browse and operate a git repository from the browser.

    The server listens on 127.0.0.1 only.
    """
    from webgit.api.main import run
    from webgit.config.settings import Settings
    from webgit.security.paths import resolve_repository_root

    log_level = "DEBUG" if verbose else "INFO"
    configure_logging(log_level=log_level)

    try:
        repo_path = resolve_repository_root(repo_dir or ".")
        port_number = validate_port(port)
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        if "Not a git repository" in e.message:
            click.echo(
                "Please run webgit from a git repository or specify a valid path with --dir",
                err=True,
            )
        sys.exit(1)

    settings = Settings(
        repo_path=str(repo_path),
        port=port_number,
        log_level=log_level,
        open_browser=open_browser,
    )
    run(settings)


if __name__ == "__main__":
    cli()
