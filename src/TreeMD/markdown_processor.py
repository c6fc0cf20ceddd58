"""Rewrite fenced ```tree blocks inside a Markdown document."""

from __future__ import annotations

import logging
import re

from TreeMD.models import ParseOptions, TreeBlock
from TreeMD.parser import parse_tree_block
from TreeMD.renderers.html import render_html
from TreeMD.renderers.text import render_text
from TreeMD.renderers.theme import DEFAULT_TREE_THEME

logger = logging.getLogger(__name__)

# Only explicit ```tree fences are rewritten, never auto-detected trees.
_FENCE_OPEN = re.compile(r"^(`{3,})\s*(tree(?:\s.*)?)$")
_FENCE_CLOSE = re.compile(r"^(`{3,})\s*$")
_LINE_SPLIT = re.compile(r"\r?\n")

CSS_MARKER = 'data-tree-markdown="true"'
CSS_STYLE_TAG = f"<style {CSS_MARKER}>\n{DEFAULT_TREE_THEME}\n</style>"
CSS_LINK_TAG = f'<link rel="stylesheet" href="tree.css" {CSS_MARKER} />'


class MarkdownProcessError(Exception):
    """Raised when a Markdown document has a malformed ```tree fence."""

    def __init__(self, message: str, line: int):
        self.line = line
        super().__init__(f"Line {line}: {message}")


def find_tree_blocks(markdown: str) -> list[TreeBlock]:
    """Locate every ```tree block in *markdown*.

    Raises:
        MarkdownProcessError: if a ```tree fence is never closed.
    """
    lines = _LINE_SPLIT.split(markdown)
    blocks: list[TreeBlock] = []
    i = 0
    while i < len(lines):
        match = _FENCE_OPEN.match(lines[i])
        if not match:
            i += 1
            continue

        fence, info = match.group(1), match.group(2).strip()
        start = i
        i += 1
        content: list[str] = []
        while i < len(lines):
            closing = _FENCE_CLOSE.match(lines[i])
            if closing and len(closing.group(1)) == len(fence):
                break
            content.append(lines[i])
            i += 1
        else:
            raise MarkdownProcessError("Unclosed ```tree block", start + 1)

        blocks.append(
            TreeBlock(
                content="\n".join(content),
                start_line=start + 1,
                end_line=i + 1,
                info=info,
            )
        )
        i += 1

    return blocks


def replace_tree_blocks(
    markdown: str,
    *,
    text: bool = False,
    html_only: bool = False,
    options: ParseOptions | None = None,
) -> str:
    """Replace each ```tree block with rendered output.

    Args:
        markdown: the source document.
        text: emit a ```text fence of indented plain text instead of HTML.
        html_only: emit HTML but skip stylesheet injection (e.g. for GitHub,
            which strips ``<link>`` and shows ``<style>`` as text).
        options: parse options applied to every block.

    Raises:
        MarkdownProcessError: for an unclosed fence.
        TreeParseError: for a malformed block in strict mode.
    """
    lines = _LINE_SPLIT.split(markdown)
    output: list[str] = []
    cursor = 0

    blocks = find_tree_blocks(markdown)
    for block in blocks:
        output.extend(lines[cursor : block.start_line - 1])
        output.extend(_render_block(block, text, options))
        cursor = block.end_line

    output.extend(lines[cursor:])
    logger.debug("Rewrote %d tree block(s)", len(blocks))

    replaced = "\n".join(output)
    if text or html_only or CSS_MARKER in markdown:
        return replaced
    return inject_css(replaced)


def _render_block(
    block: TreeBlock, text: bool, options: ParseOptions | None
) -> list[str]:
    tree = parse_tree_block(block.content, options)
    if text:
        return ["```text", render_text(tree), "```"]
    return [render_html(tree)]


def inject_css(markdown: str) -> str:
    """Insert the tree stylesheet after YAML front matter, or at the top."""
    lines = _LINE_SPLIT.split(markdown)
    css = [CSS_STYLE_TAG, CSS_LINK_TAG, ""]

    if lines and lines[0] == "---":
        for index in range(1, len(lines)):
            if lines[index] == "---":
                return "\n".join(lines[: index + 1] + css + lines[index + 1 :])

    return "\n".join(css + lines)
