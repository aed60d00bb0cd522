"""Per-run state handed from the root callback to every command."""

from dataclasses import dataclass
from pathlib import Path

from blog_cli.core.config_schema import ServerConfig


@dataclass
class CliState:
    """Config loaded at startup and the file it came from."""

    config_path: Path
    config: ServerConfig
