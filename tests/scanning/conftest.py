"""Shared pytest fixtures for the scanning test suite."""

from __future__ import annotations

import types
from pathlib import Path

import pytest
from scan_helpers import make_module, make_type

from typescan.scanning.registry import ScannerRegistry


# ---------------------------------------------------------------------------
# Module file templates
# ---------------------------------------------------------------------------

PLUGIN_TEMPLATE = """\
class {class_name}:
    plugin_name = "{plugin_name}"
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def registry() -> ScannerRegistry:
    """A registry with default settings."""
    return ScannerRegistry()


@pytest.fixture
def t1() -> type:
    return make_type("T1")


@pytest.fixture
def t2() -> type:
    return make_type("T2")


@pytest.fixture
def sample_module(t1: type, t2: type) -> types.ModuleType:
    """An in-memory module named ``app.plugins`` defining T1 and T2."""
    return make_module("app.plugins", t1, t2)


@pytest.fixture
def plugins_dir(tmp_path: Path) -> Path:
    """A directory with two plugin source files and two non-module files."""
    plugins = tmp_path / "plugins"
    plugins.mkdir()
    (plugins / "alpha.py").write_text(PLUGIN_TEMPLATE.format(class_name="AlphaPlugin", plugin_name="alpha"))
    (plugins / "beta.py").write_text(PLUGIN_TEMPLATE.format(class_name="BetaPlugin", plugin_name="beta"))
    (plugins / "notes.txt").write_text("not a module")
    (plugins / "readme.md").write_text("# plugins")
    return plugins
