import sys
import textwrap
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from installer_build.config import ToolchainConfig


MANIFEST = """
[package]
name = "hello"
version = "1.2.3"
"""


@pytest.fixture(scope="session")
def toolchain_config() -> ToolchainConfig:
    return ToolchainConfig()


@pytest.fixture
def make_project(tmp_path):
    """Create a project folder with a manifest and optional wix sources"""

    def _make_project(manifest: str = MANIFEST, sources=("main.wxs",)) -> Path:
        (tmp_path / "Cargo.toml").write_text(textwrap.dedent(manifest))
        wix_dir = tmp_path / "wix"
        wix_dir.mkdir(exist_ok=True)
        for name in sources:
            (wix_dir / name).write_text("<Wix/>")
        return tmp_path

    return _make_project
