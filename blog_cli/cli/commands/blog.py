"""
Blog Commands.

Publish a local markdown file to the blog server.
"""

import asyncio
from pathlib import Path

import httpx
import typer

from blog_cli.cli.client import APIClient
from blog_cli.cli.output import print_error, print_plain
from blog_cli.cli.state import CliState
from blog_cli.core.config_schema import ServerConfig
from blog_cli.core.logging import get_logger, log_with_source
from blog_cli.schemas.blog import BlogPost

logger = get_logger(__name__)

UPDATE_OR_ADD_PATH = "/blogs/updateOrAdd"


def add(
    ctx: typer.Context,
    filename: str = typer.Argument(..., help="Markdown file holding the post content"),
    post_id: int = typer.Option(0, "--id", "-i", help="blog id"),
    title: str = typer.Option("", "--title", "-t", help="blog title"),
) -> None:
    """
    Add a new blog post from a markdown file.

    The file content is sent as-is; the server creates the post or updates
    the one with the same id. Category, tags, view count and author are
    left empty.

    Examples:
        blog-cli add hello.md -i 1 -t "Hello world"
    """
    state: CliState = ctx.obj

    try:
        post = BlogPost.from_file(Path(filename), post_id=post_id, title=title)
    except OSError as e:
        log_with_source(logger, "cli", "info", "Post file unreadable", filename=filename, error=str(e))
        print_error(f"Failed to read file: {e}")
        return

    print_plain(f"Adding blog post from file: {filename}")
    asyncio.run(_add(state.config, post))


async def _add(config: ServerConfig, post: BlogPost) -> None:
    """Async implementation of add command."""
    client = APIClient.from_config(config)

    try:
        response = await client.post(UPDATE_OR_ADD_PATH, json=post.to_payload())
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        print_error(f"Failed to send POST request: {e}")
        return
    finally:
        await client.close()

    print_plain(f"Response from server: {response.text}")
