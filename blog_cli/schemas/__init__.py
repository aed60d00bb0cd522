"""
Payload Schemas.

Pydantic models describing what is sent to the blog server.
"""

from blog_cli.schemas.blog import BlogPost

__all__ = ["BlogPost"]
