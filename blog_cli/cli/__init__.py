"""
CLI Module.

Command-line client built with Typer for talking to the blog server.

Architecture:
- CLI is a thin presentation layer
- Server location comes from ~/blog-cli.yaml, loaded once per run
- CLI calls the server via HTTP (httpx), one request per command

Usage:
    blog-cli set -s localhost -p 8080
    blog-cli get
    blog-cli ping
    blog-cli add post.md -i 1 -t "Hello"
"""
