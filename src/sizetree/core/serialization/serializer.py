from __future__ import annotations

"""
Size Tree Serialization and Persistence.

Renders a SizeNode tree into structured text (YAML or JSON) and writes the
result to disk.
"""

import json
import logging
import os
from typing import Any, Dict, Tuple

import yaml

from sizetree.domain.tree_models import SizeNode

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS: Tuple[str, ...] = ("yaml", "json")

_EXTENSION_FORMATS: Dict[str, str] = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def tree_to_mapping(node: SizeNode) -> Dict[str, Any]:
    """Return the tree as nested ``{"size": ..., "files": {...}}`` dicts."""
    return node.to_dict()


def serialize_tree(node: SizeNode, fmt: str = "yaml") -> str:
    """
    Serialize a size tree to text.

    Args:
        node: Root of the tree.
        fmt: Either ``"yaml"`` or ``"json"``.

    Returns:
        str: The serialized document.

    Raises:
        ValueError: If the format is not supported.
    """
    fmt = (fmt or "").strip().lower()
    data = tree_to_mapping(node)

    if fmt == "yaml":
        return yaml.safe_dump(
            data,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    if fmt == "json":
        return json.dumps(data, ensure_ascii=False, indent=2) + "\n"

    raise ValueError(f"Unsupported output format '{fmt}'. Expected one of: {', '.join(SUPPORTED_FORMATS)}")


def format_from_path(path: str, default: str = "yaml") -> str:
    """Guess the output format from a file extension."""
    _, ext = os.path.splitext(path or "")
    return _EXTENSION_FORMATS.get(ext.lower(), default)


def write_output(output_path: str, text: str) -> int:
    """
    Write serialized text to a file, creating parent directories.

    Args:
        output_path: Destination file.
        text: Document content.

    Returns:
        int: Number of bytes written.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    out_dir = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(out_dir, exist_ok=True)

    payload = text.encode("utf-8")
    with open(output_path, "wb") as f:
        f.write(payload)

    logger.debug(f"Wrote {len(payload)} bytes to {output_path}")
    return len(payload)
