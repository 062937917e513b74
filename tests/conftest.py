from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    """A directory carrying the markers of the Rust learning workspace."""

    root = tmp_path / "rust-hoex"
    root.mkdir()
    (root / "Cargo.toml").write_text('[workspace]\nmembers = []\n', encoding="utf-8")
    (root / "examples").mkdir()
    (root / "utils").mkdir()
    return root
