from __future__ import annotations

"""
Size Tree Renderer.

Converts a SizeNode tree into an ASCII listing where every entry is
labelled with its human-readable size.
"""

from typing import List, Optional

from sizetree.domain.tree_models import SizeNode
from sizetree.utils.formatting import format_size

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_size_tree(
        node: SizeNode,
        lines: List[str],
        prefix: str = "",
) -> None:
    """
    Recursively append the children of ``node`` to ``lines``.

    Uses standard connectors (├──, └──), with entries sorted by name.

    Args:
        node: Directory node whose children are rendered.
        lines: Accumulator for output lines.
        prefix: Indentation prefix for the current level.
    """
    entries = sorted(node.children)
    total = len(entries)

    for i, name in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        child = node.children[name]

        lines.append(f"{prefix}{connector}{name} ({format_size(child.size)})")

        if child.children:
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_size_tree(child, lines, prefix=new_prefix)


def render_tree_lines(node: SizeNode, root_label: Optional[str] = None) -> List[str]:
    """Return the full listing, headed by the root label and total size."""
    lines: List[str] = []
    if root_label is not None:
        lines.append(f"{root_label} ({format_size(node.size)})")
    render_size_tree(node, lines)
    return lines
