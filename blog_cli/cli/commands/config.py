"""
Config Commands.

Show and change the blog server location stored in the config file.
"""

from typing import Optional

import typer

from blog_cli.cli.output import print_error, print_plain
from blog_cli.cli.state import CliState
from blog_cli.core.config import save_config
from blog_cli.core.config_schema import ServerConfig
from blog_cli.core.exceptions import ConfigurationError
from blog_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


def set_config(
    ctx: typer.Context,
    server: Optional[str] = typer.Option(None, "--server", "-s", help="Host address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", min=0, max=65535, help="Port number"),
) -> None:
    """
    Set the server and port.

    Options left out keep their current value.

    Examples:
        blog-cli set -s blog.example.com -p 8080
    """
    state: CliState = ctx.obj

    state.config = ServerConfig(
        host=server if server is not None else state.config.host,
        port=port if port is not None else state.config.port,
    )

    try:
        save_config(state.config_path, state.config)
    except ConfigurationError as e:
        log_with_source(logger, "config", "error", "Config save failed", path=str(state.config_path), error=e.message)
        print_error(e.message)
        raise typer.Exit(1)

    log_with_source(
        logger,
        "config",
        "info",
        "Config saved",
        path=str(state.config_path),
        host=state.config.host,
        port=state.config.port,
    )
    _print_config("Configuration updated:", state.config)


def get_config(ctx: typer.Context) -> None:
    """Get the current server and port configuration."""
    state: CliState = ctx.obj
    _print_config("Current configuration:", state.config)


def _print_config(heading: str, config: ServerConfig) -> None:
    print_plain(heading)
    print_plain(f"Host: {config.host}")
    print_plain(f"Port: {config.port}")
