"""
Blog CLI.

- core/: Configuration store, logging, exceptions
- schemas/: Payload models sent to the blog server
- cli/: Typer application, commands and HTTP client
"""

__version__ = "0.1.0"
