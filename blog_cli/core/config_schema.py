"""
Configuration Schemas.

Pydantic models defining the expected structure of the config file.
Used by load_config to validate the YAML at load time. If the file has
missing keys, wrong types, or unknown fields, a clear ValidationError is
raised at startup instead of a cryptic KeyError deep in command code.

    ServerConfig → ~/blog-cli.yaml
"""

from pydantic import BaseModel, ConfigDict, Field


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


class ServerConfig(_StrictBase):
    # No coercion: `port: "8080"` or `port: true` is a type error.
    model_config = ConfigDict(strict=True)

    host: str
    port: int = Field(ge=0, le=65535)

    @property
    def base_url(self) -> str:
        """Root URL of the blog server."""
        return f"http://{self.host}:{self.port}"
