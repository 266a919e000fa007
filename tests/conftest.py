"""Shared pytest fixtures for slugline tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from slugline.config.settings import SluglineSettings
from slugline.services.slug import SlugService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config discovery away from the developer's environment.

    Runs every test from an empty temp directory with no ``SLUGLINE_*``
    variables set, so no stray slugline.toml or env override leaks in.
    """
    import os

    for key in list(os.environ):
        if key.startswith("SLUGLINE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("slugline")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def settings(tmp_path: Path) -> SluglineSettings:
    """Default settings (no TOML, no env)."""
    return SluglineSettings.from_cli(start=tmp_path)


@pytest.fixture
def service(settings: SluglineSettings) -> SlugService:
    return SlugService(settings)


@pytest.fixture
def int_digit_limit() -> Generator[int]:
    """Pin the interpreter's int/str conversion limit to its default (4300 digits)."""
    import sys

    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)
