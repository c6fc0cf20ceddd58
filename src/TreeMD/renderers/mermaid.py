"""Mermaid ``graph TD`` output."""

from __future__ import annotations

from TreeMD.models import TreeNode


def render_mermaid(nodes: list[TreeNode]) -> str:
    """Render the tree as a top-down Mermaid flowchart.

    Ids are ``n1``, ``n2``, ... in pre-order; each child's edge follows its
    node line.
    """
    lines: list[str] = ["graph TD"]
    counter = 0

    pending: list[tuple[TreeNode, str | None]] = [
        (node, None) for node in reversed(nodes)
    ]
    while pending:
        node, parent_id = pending.pop()
        counter += 1
        node_id = f"n{counter}"
        label = f"{node.name}/" if node.is_folder else node.name
        label = label.replace('"', '\\"')
        lines.append(f'{node_id}["{label}"]')
        if parent_id:
            lines.append(f"{parent_id} --> {node_id}")
        pending.extend((child, node_id) for child in reversed(node.children))

    return "\n".join(lines)
