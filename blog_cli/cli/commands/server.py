"""
Server Commands.

Reachability check against the configured blog server.
"""

import asyncio

import httpx
import typer

from blog_cli.cli.client import APIClient
from blog_cli.cli.output import print_error, print_plain
from blog_cli.cli.state import CliState
from blog_cli.core.config_schema import ServerConfig

PING_PATH = "/ping"
PING_TIMEOUT_SECONDS = 5.0


def ping(ctx: typer.Context) -> None:
    """
    Ping the configured host.

    Prints the server's answer on HTTP 200, the status code otherwise.
    Exits with status 1 if the server cannot be reached within 5 seconds.

    Examples:
        blog-cli ping
    """
    state: CliState = ctx.obj
    print_plain(f"Pinging {state.config.base_url}{PING_PATH}...")
    asyncio.run(_ping(state.config))


async def _ping(config: ServerConfig) -> None:
    """Async implementation of ping command."""
    client = APIClient.from_config(config)

    try:
        # httpx applies the timeout per phase; wait_for caps the whole request.
        response = await asyncio.wait_for(
            client.get(PING_PATH, timeout=PING_TIMEOUT_SECONDS),
            PING_TIMEOUT_SECONDS,
        )

        if response.status_code == 200:
            print_plain(f"Ping successful: {response.text}")
        else:
            print_plain(f"Ping failed with status code: {response.status_code}")

    except (httpx.HTTPError, httpx.InvalidURL) as e:
        print_error(f"Failed to ping: {e}")
        raise typer.Exit(1)

    except asyncio.TimeoutError:
        print_error(f"Failed to ping: no response within {PING_TIMEOUT_SECONDS:g} seconds")
        raise typer.Exit(1)

    finally:
        await client.close()
