"""Shared test fixtures for create-boot.

Provides:
- workspace: Temporary directory used as the working directory
- config: BootConfig rooted at the workspace (npm, bundled templates)
- fake_template_root: Minimal template tree with a dotfile and package.json
- cli_runner: Click CliRunner
"""

import json

import pytest
from click.testing import CliRunner

from boot.core.config import BootConfig
from boot.templates import BUNDLED_TEMPLATE_ROOT


@pytest.fixture
def workspace(tmp_path):
    """Working directory for a run."""
    ws = tmp_path / "ws"
    ws.mkdir()
    return ws


@pytest.fixture
def config(workspace):
    return BootConfig(cwd=workspace, template_root=BUNDLED_TEMPLATE_ROOT)


@pytest.fixture
def fake_template_root(tmp_path):
    """Template root holding a single ``boot-demo`` template."""
    root = tmp_path / "templates"
    demo = root / "boot-demo"
    (demo / "src" / "nested").mkdir(parents=True)
    (demo / "_gitignore").write_text("node_modules\n")
    (demo / "README.md").write_text("# demo\n")
    (demo / "src" / "main.js").write_text("console.log('hi')\n")
    (demo / "src" / "nested" / "_gitignore").write_text("*.log\n")
    (demo / "src" / "logo.bin").write_bytes(bytes(range(256)))
    (demo / "package.json").write_text(json.dumps({
        "name": "boot-demo",
        "version": "0.0.0",
        "scripts": {"dev": "vite"},
    }, indent=4))
    return root


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing CLI commands."""
    return CliRunner()
