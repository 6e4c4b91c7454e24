from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Makes the 'src' directory importable without installation.
2. Provides shared configuration dictionaries and sample directory trees.
3. Redirects the user data directory to a temporary location.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_user_data_dir(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep config.json and log files out of the real home directory."""
    data_dir = tmp_path_factory.mktemp("user_data")
    monkeypatch.setattr("sizetree.domain.config.get_user_data_dir", lambda: str(data_dir))
    monkeypatch.setattr("sizetree.infra.logging.core.get_user_data_dir", lambda: str(data_dir))
    return data_dir


@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a complete, valid configuration dictionary.

    Mirrors the keys defined in 'sizetree.domain.config'.
    """
    return {
        "input_path": str(tmp_path),
        "max_depth": 3,
        "output_path": str(tmp_path / "out" / "tree.yaml"),
        "output_format": "yaml",
        "print_tree": False,
        "save_error_log": False,
        "error_log_path": str(tmp_path / "out" / "errors.txt"),
    }


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a small directory tree with known file sizes.

    Structure (sizes in bytes):
    /project
      a.txt            (10)
      b.bin            (100)
      /docs
        readme.md      (25)
        /img
          logo.png     (300)
      /empty
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.txt").write_bytes(b"x" * 10)
    (root / "b.bin").write_bytes(b"\0" * 100)

    docs = root / "docs"
    docs.mkdir()
    (docs / "readme.md").write_bytes(b"#" * 25)

    img = docs / "img"
    img.mkdir()
    (img / "logo.png").write_bytes(b"p" * 300)

    (root / "empty").mkdir()
    return root
