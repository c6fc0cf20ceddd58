"""Assemble line tokens into a nested file/folder tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

from TreeMD.classifier import classify_leaf
from TreeMD.errors import ErrorCategory, raise_or_repair
from TreeMD.indentation import resolve_options
from TreeMD.models import LineToken, NodeType, ParseOptions, TreeNode

LeafClassifier = Callable[[str], NodeType]


@dataclass
class _WorkingNode:
    name: str
    explicit_folder: bool
    children: list[_WorkingNode] = field(default_factory=list)


def build_tree(
    tokens: Iterable[LineToken],
    options: ParseOptions | None = None,
    classify: LeafClassifier = classify_leaf,
) -> list[TreeNode]:
    """Build root nodes from *tokens* using a stack of open nodes.

    The stack holds the path from a root to the most recent node, so its
    length is the current depth. A token deeper than ``len(stack)`` skipped
    a level: strict mode rejects it, tolerant mode clamps it to
    ``len(stack)``.

    Types are assigned afterwards: nodes with children or a trailing ``/``
    are folders, other leaves go through *classify*.
    """
    resolved = resolve_options(options)
    roots: list[_WorkingNode] = []
    stack: list[_WorkingNode] = []

    for token in tokens:
        level = token.level
        if level > len(stack):
            raise_or_repair(
                resolved.mode,
                ErrorCategory.NON_MONOTONIC,
                token.line,
                f"level {level} after depth {len(stack)}",
            )
            level = len(stack)

        del stack[level:]
        # Cannot fire after the clamp above; guards the stack invariant only.
        if len(stack) != level:
            raise_or_repair(resolved.mode, ErrorCategory.INVALID_STATE, token.line)
            stack.clear()

        node = _WorkingNode(token.name, token.explicit_folder)
        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)

        stack.append(node)

    return [_finalize(root, classify) for root in roots]


def _finalize(root: _WorkingNode, classify: LeafClassifier) -> TreeNode:
    """Freeze a working subtree post-order without recursing."""
    built: dict[int, TreeNode] = {}
    pending: list[tuple[_WorkingNode, bool]] = [(root, False)]
    while pending:
        node, expanded = pending.pop()
        if not expanded:
            pending.append((node, True))
            pending.extend((child, False) for child in node.children)
            continue

        children = tuple(built.pop(id(child)) for child in node.children)
        if children or node.explicit_folder:
            node_type = NodeType.FOLDER
        else:
            node_type = classify(node.name)
        built[id(node)] = TreeNode(name=node.name, type=node_type, children=children)

    return built[id(root)]
