"""Entry point for turning a tree block into typed nodes."""

from __future__ import annotations

from TreeMD.models import ParseOptions, TreeNode
from TreeMD.tokenizer import tokenize_lines
from TreeMD.tree_builder import build_tree


def parse_tree_block(text: str, options: ParseOptions | None = None) -> list[TreeNode]:
    """Parse ASCII tree text into root nodes.

    Raises:
        TreeParseError: only when ``options.mode`` is strict.
    """
    tokens = tokenize_lines(text, options)
    return build_tree(tokens, options)
