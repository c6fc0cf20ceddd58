"""Plain indented text output."""

from __future__ import annotations

from TreeMD.models import TreeNode

INDENT = "  "


def render_text(nodes: list[TreeNode]) -> str:
    """Render one line per node, two spaces per level, folders ending in ``/``.

    Example output:
        src/
          app/
            page.tsx

    Parsing the output again gives back the same names and depths, except
    for names that themselves start with a branch glyph or connector
    (``├``, ``└``, ``│``). Those characters are read as tree drawing on the
    next parse, so a node named ``└x`` comes back as ``x``.
    """
    lines: list[str] = []
    pending: list[tuple[TreeNode, int]] = [(node, 0) for node in reversed(nodes)]
    while pending:
        node, depth = pending.pop()
        label = f"{node.name}/" if node.is_folder else node.name
        lines.append(f"{INDENT * depth}{label}")
        pending.extend((child, depth + 1) for child in reversed(node.children))
    return "\n".join(lines)
