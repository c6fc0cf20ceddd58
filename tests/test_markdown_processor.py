"""Tests for markdown_processor module."""

import pytest

from TreeMD.errors import TreeParseError
from TreeMD.markdown_processor import (
    CSS_LINK_TAG,
    CSS_MARKER,
    CSS_STYLE_TAG,
    MarkdownProcessError,
    find_tree_blocks,
    inject_css,
    replace_tree_blocks,
)
from TreeMD.models import ParseOptions

DOC = """\
# Project

```tree
src/
├── main.py
└── LICENSE
```

Done."""


class TestFindTreeBlocks:
    def test_locates_block(self):
        (block,) = find_tree_blocks(DOC)
        assert block.start_line == 3
        assert block.end_line == 7
        assert block.content == "src/\n├── main.py\n└── LICENSE"
        assert block.info == "tree"

    def test_ignores_other_fences(self):
        doc = "```python\nprint('hi')\n```\n```treehouse\nx\n```"
        assert find_tree_blocks(doc) == []

    @pytest.mark.parametrize("info", ["tree-sitter", "tree.txt", "tree:demo"])
    def test_ignores_tree_prefixed_languages(self, info):
        doc = f"```{info}\n(identifier) @name\n```"
        assert find_tree_blocks(doc) == []

    def test_trailing_space_after_tree(self):
        (block,) = find_tree_blocks("```tree  \na/\n```")
        assert block.info == "tree"

    def test_info_string_with_extras(self):
        (block,) = find_tree_blocks("```` tree title=demo\na/\n````")
        assert block.info == "tree title=demo"
        assert block.content == "a/"

    def test_closing_fence_length_must_match(self):
        (block,) = find_tree_blocks("````tree\na/\n```\n````")
        assert block.content == "a/\n```"

    def test_unclosed_block(self):
        with pytest.raises(MarkdownProcessError, match="Line 2: Unclosed"):
            find_tree_blocks("intro\n```tree\na/\n")


class TestReplaceTreeBlocks:
    def test_html_replacement_with_css(self):
        result = replace_tree_blocks(DOC)
        assert result.startswith(CSS_STYLE_TAG + "\n" + CSS_LINK_TAG + "\n\n# Project")
        assert '<ul class="tree">' in result
        assert "```tree" not in result
        assert result.endswith("Done.")

    def test_html_only_skips_css(self):
        result = replace_tree_blocks(DOC, html_only=True)
        assert CSS_MARKER not in result
        assert result.split("\n")[2].startswith('<ul class="tree">')

    def test_text_mode(self):
        result = replace_tree_blocks(DOC, text=True)
        assert CSS_MARKER not in result
        assert "```text\nsrc/\n  main.py\n  LICENSE\n```" in result

    def test_css_injected_once(self):
        once = replace_tree_blocks(DOC)
        twice = replace_tree_blocks(once)
        assert twice.count(CSS_MARKER) == once.count(CSS_MARKER) == 2

    def test_passthrough_lines_untouched(self):
        doc = "a\n```js\nx\n```\nb"
        assert replace_tree_blocks(doc, html_only=True) == doc

    def test_tree_sitter_fence_untouched(self):
        doc = "queries\n```tree-sitter\n(identifier) @name\n```\nend"
        assert replace_tree_blocks(doc, html_only=True) == doc
        assert "```tree-sitter" in replace_tree_blocks(doc, text=True)

    def test_multiple_blocks(self):
        doc = "```tree\na.txt\n```\nmiddle\n```tree\nb.txt\n```"
        result = replace_tree_blocks(doc, text=True)
        assert result == "```text\na.txt\n```\nmiddle\n```text\nb.txt\n```"

    def test_strict_errors_propagate(self):
        doc = "```tree\nsrc/\n\t  app/\n```"
        with pytest.raises(TreeParseError, match="Line 2"):
            replace_tree_blocks(doc, options=ParseOptions(mode="strict"))

    def test_tolerant_by_default(self):
        doc = "```tree\nsrc/\n\t  app/\n```"
        assert "app" in replace_tree_blocks(doc, html_only=True)


class TestInjectCss:
    def test_after_front_matter(self):
        lines = inject_css("---\ntitle: x\n---\nbody").split("\n")
        assert lines[:3] == ["---", "title: x", "---"]
        assert lines[3] == CSS_STYLE_TAG.split("\n")[0]
        assert lines[-1] == "body"

    def test_unterminated_front_matter_goes_to_top(self):
        result = inject_css("---\ntitle: x")
        assert result.startswith(CSS_STYLE_TAG)
