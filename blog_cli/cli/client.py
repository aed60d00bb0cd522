"""
HTTP Client for CLI.

Provides async HTTP client for communicating with the blog server.
One client per command invocation; it is closed when the command ends.
"""

from typing import Any

import httpx

from blog_cli import __version__
from blog_cli.core.config_schema import ServerConfig
from blog_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

USER_AGENT = f"blog-cli/{__version__}"


class APIClient:
    """
    HTTP client for blog server communication.

    Features:
    - Base URL from the loaded server config
    - No timeout unless one is given, per client or per request
    - Structured logging of requests/responses
    - Transport errors logged and re-raised as httpx.HTTPError

    Usage:
        client = APIClient.from_config(config)
        response = await client.get("/ping", timeout=5.0)
        response = await client.post("/blogs/updateOrAdd", json=payload)
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Blog server base URL, e.g. http://localhost:8080.
            timeout: Default request timeout in seconds. None disables it.
            transport: Optional httpx transport, used to swap the network out.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_config(cls, config: ServerConfig, **kwargs: Any) -> "APIClient":
        """Create a client pointed at the configured server."""
        return cls(config.base_url, **kwargs)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"User-Agent": USER_AGENT},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the blog server.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: Server path (e.g., /ping, /blogs/updateOrAdd)
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            httpx.HTTPError: On request failure
        """
        client = await self._get_client()

        log_with_source(
            logger,
            "http",
            "debug",
            "API request",
            method=method,
            url=f"{self.base_url}{path}",
        )

        try:
            response = await client.request(method, path, **kwargs)

            log_with_source(
                logger,
                "http",
                "debug",
                "API response",
                method=method,
                path=path,
                status_code=response.status_code,
            )

            return response

        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "http",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a POST request."""
        return await self.request("POST", path, **kwargs)
