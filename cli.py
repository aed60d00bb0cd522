#!/usr/bin/env python3
"""
Blog CLI.

Command-line client for a blog server: keeps the server location in
~/blog-cli.yaml, pings the server and publishes markdown files to it.
Built with Typer for type-safe commands and Rich for output.

Usage:
    python cli.py --help                      # Show help

    # Server location
    python cli.py set -s localhost -p 8080    # Save host and port
    python cli.py get                         # Show saved host and port

    # Server interaction
    python cli.py ping                        # GET /ping (5 second timeout)
    python cli.py add post.md -i 1 -t "Hi"    # POST post.md to /blogs/updateOrAdd

Options:
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --config, -c      Use another config file
    --log-file        Also write JSON logs to a file
    --help            Show help message
"""

import sys
from pathlib import Path

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from blog_cli.cli.app import app

if __name__ == "__main__":
    app()
