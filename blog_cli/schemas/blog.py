"""
Blog Post Schema.

Payload for POST /blogs/updateOrAdd. The server expects capitalised keys
(Id, Title, Content, ...) with every field present, so models are built
with Python names and dumped by alias.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class BlogPost(BaseModel):
    """A blog post as the server stores it."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(default=0, alias="Id")
    title: str = Field(default="", alias="Title")
    content: str = Field(default="", alias="Content")
    category: str = Field(default="", alias="Category")
    tags: str = Field(default="", alias="Tags")
    view_count: int = Field(default=0, alias="ViewCount")
    author: str = Field(default="", alias="Author")

    @classmethod
    def from_file(cls, path: Path, post_id: int = 0, title: str = "") -> "BlogPost":
        """
        Build a post whose content is the file's text.

        Bytes that are not valid UTF-8 are replaced with U+FFFD rather than
        rejected.

        Raises:
            OSError: If the file cannot be read.
        """
        content = path.read_bytes().decode("utf-8", errors="replace")
        return cls(id=post_id, title=title, content=content)

    def to_payload(self) -> dict:
        """JSON-ready dict with the server's field names."""
        return self.model_dump(by_alias=True)
