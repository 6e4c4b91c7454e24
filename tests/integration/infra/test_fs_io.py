from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates data directory resolution and path normalization.
"""

import os
from pathlib import Path
from unittest.mock import patch

from sizetree.infra.fs import get_user_data_dir, normalize_path


def test_get_user_data_dir_windows() -> None:
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert "sizetree" in path


def test_get_user_data_dir_unix() -> None:
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value="/home/testuser"):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert path.replace("\\", "/").endswith("/home/testuser/.sizetree")


def test_get_user_data_dir_tolerates_read_only_home() -> None:
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value="/readonly"):
            with patch("os.makedirs", side_effect=PermissionError("read-only")):
                assert get_user_data_dir().replace("\\", "/").endswith("/readonly/.sizetree")


def test_normalize_path_expansion() -> None:
    with patch.dict(os.environ, {"SIZETREE_TEST_VAR": "my_folder"}):
        path = normalize_path("$SIZETREE_TEST_VAR/sub", fallback=".")
        assert path.endswith(os.path.join("my_folder", "sub"))

    with patch("os.path.expanduser", side_effect=lambda p: p.replace("~", "/home/user")):
        assert "code" in Path(normalize_path("~/code", fallback=".")).parts


def test_normalize_path_empty_uses_fallback(tmp_path: Path) -> None:
    assert normalize_path("  ", fallback=str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, fallback=str(tmp_path)) == str(tmp_path)

