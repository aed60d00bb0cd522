"""
CLI Commands.

Organized by domain/feature area.
"""

from blog_cli.cli.commands.blog import add
from blog_cli.cli.commands.config import get_config, set_config
from blog_cli.cli.commands.server import ping

__all__ = [
    "add",
    "get_config",
    "ping",
    "set_config",
]
