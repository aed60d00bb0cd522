"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test runs with HOME pointed at its own tmp_path and with the
BLOG_CLI_* environment cleared, so the real ~/blog-cli.yaml is never read
or written.
"""

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import yaml

from blog_cli.core.config import get_settings


# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point the home directory at tmp_path and drop BLOG_CLI_* overrides."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("BLOG_CLI_CONFIG", "BLOG_CLI_LOG_LEVEL", "BLOG_CLI_LOG_FORMAT", "BLOG_CLI_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield home
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None, None, None]:
    """Drop handlers added by setup_logging; CliRunner streams close after each invoke."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


# =============================================================================
# Config File Fixtures
# =============================================================================


@pytest.fixture
def write_config(isolated_home: Path) -> Callable[..., Path]:
    """
    Write a config file into the isolated home directory.

    Usage:
        def test_something(write_config):
            path = write_config(host="example.com", port=9000)
            path = write_config(raw="not: [valid")
    """

    def _write(host: str = "localhost", port: int = 8080, raw: str | None = None) -> Path:
        path = isolated_home / "blog-cli.yaml"
        if raw is None:
            raw = yaml.safe_dump({"host": host, "port": port}, sort_keys=False)
        path.write_text(raw, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_file(write_config: Callable[..., Path]) -> Path:
    """A valid config file pointing at localhost:8080."""
    return write_config()
