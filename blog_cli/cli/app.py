"""
Typer Application.

Root callback configures logging and loads the config file; a config that
cannot be loaded stops every command before it runs.
"""

from pathlib import Path
from typing import Optional

import typer

from blog_cli.cli.commands import add, get_config, ping, set_config
from blog_cli.cli.output import print_error
from blog_cli.cli.state import CliState
from blog_cli.core.config import get_settings, load_config, resolve_config_path
from blog_cli.core.exceptions import ApplicationError
from blog_cli.core.logging import get_logger, log_with_source, setup_logging

logger = get_logger(__name__)

app = typer.Typer(
    name="blog-cli",
    help="A simple CLI tool for managing blogs.",
    no_args_is_help=True,
    add_completion=False,
)

app.command("set")(set_config)
app.command("get")(get_config)
app.command("ping")(ping)
app.command("add")(add)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file to use instead of ~/blog-cli.yaml",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also write JSON log records to this file",
    ),
) -> None:
    """
    A simple CLI tool for managing blogs.

    Stores the blog server location in ~/blog-cli.yaml, pings the server
    and publishes markdown files to it.
    """
    if ctx.resilient_parsing:
        return

    try:
        settings = get_settings()
        if debug:
            level = "DEBUG"
        elif verbose:
            level = "INFO"
        else:
            level = settings.log_level
        setup_logging(
            level=level,
            format_type=settings.log_format,
            log_file=log_file or settings.log_file,
        )
    except (ValueError, OSError) as e:
        print_error(f"Error configuring logging: {e}")
        raise typer.Exit(1)

    try:
        config_path = resolve_config_path(config)
        server_config = load_config(config_path)
    except ApplicationError as e:
        log_with_source(logger, "config", "error", "Startup failed", code=e.code, error=e.message)
        print_error(e.message)
        raise typer.Exit(1)

    log_with_source(
        logger,
        "config",
        "debug",
        "Config loaded",
        path=str(config_path),
        host=server_config.host,
        port=server_config.port,
    )
    ctx.obj = CliState(config_path=config_path, config=server_config)
