"""Collapsible HTML list output."""

from __future__ import annotations

from TreeMD.models import TreeNode

_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}


def escape_html(value: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in value)


def render_html(nodes: list[TreeNode], root_class: str = "tree") -> str:
    """Render the tree as nested ``<ul>`` lists.

    Folders are wrapped in ``<details open>`` so they collapse without any
    script. Example output for ``src/`` containing ``main.py``:

        <ul class="tree"><li class="tree-node folder" data-type="folder">
        <details open><summary><span class="tree-label">src</span></summary>
        <ul><li class="tree-node file" ...>...</li></ul></details></li></ul>
    """
    parts: list[str] = [f'<ul class="{escape_html(root_class)}">']
    # Closing tags are pushed as strings so deep trees need no recursion.
    pending: list[TreeNode | str] = list(reversed(nodes))
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        kind = item.type.value
        label = f'<span class="tree-label">{escape_html(item.name)}</span>'
        parts.append(f'<li class="tree-node {kind}" data-type="{kind}">')

        if item.is_folder:
            parts.append(f"<details open><summary>{label}</summary>")
            if item.children:
                parts.append("<ul>")
                pending.append("</ul></details></li>")
                pending.extend(reversed(item.children))
            else:
                pending.append("</details></li>")
        else:
            parts.append(label)
            parts.append("</li>")

    parts.append("</ul>")
    return "".join(parts)
