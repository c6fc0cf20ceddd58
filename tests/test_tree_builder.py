"""Tests for tree_builder module."""

import pytest

from TreeMD.errors import ErrorCategory, TreeParseError
from TreeMD.models import LineToken, NodeType, ParseOptions, TreeNode
from TreeMD.tree_builder import build_tree

STRICT = ParseOptions(mode="strict")


def _tok(name: str, level: int, line: int, explicit: bool = False) -> LineToken:
    return LineToken(name=name, level=level, explicit_folder=explicit, line=line)


class TestBuildTree:
    def test_empty(self):
        assert build_tree([]) == []

    def test_single_file(self):
        assert build_tree([_tok("README.md", 0, 1)]) == [
            TreeNode("README.md", NodeType.FILE)
        ]

    def test_multiple_roots(self):
        roots = build_tree([_tok("a.txt", 0, 1), _tok("b.txt", 0, 2)])
        assert [r.name for r in roots] == ["a.txt", "b.txt"]

    def test_nested_structure(self):
        roots = build_tree(
            [
                _tok("src", 0, 1, explicit=True),
                _tok("main.py", 1, 2),
                _tok("utils", 1, 3),
                _tok("io.py", 2, 4),
                _tok("README.md", 0, 5),
            ]
        )
        src, readme = roots
        assert [c.name for c in src.children] == ["main.py", "utils"]
        assert src.children[1].children[0].name == "io.py"
        assert readme.children == ()

    def test_pops_back_to_shallower_level(self):
        roots = build_tree(
            [
                _tok("a", 0, 1),
                _tok("b", 1, 2),
                _tok("c", 2, 3),
                _tok("d", 1, 4),
            ]
        )
        assert [c.name for c in roots[0].children] == ["b", "d"]

    def test_order_preserved(self):
        roots = build_tree([_tok("z.txt", 0, 1), _tok("a.txt", 0, 2)])
        assert [r.name for r in roots] == ["z.txt", "a.txt"]


class TestFolderTypes:
    def test_parent_is_folder_even_with_extension(self):
        roots = build_tree([_tok("archive.d", 0, 1), _tok("x.txt", 1, 2)])
        assert roots[0].type == NodeType.FOLDER

    def test_explicit_marker_wins_over_heuristics(self):
        roots = build_tree([_tok("LICENSE", 0, 1, explicit=True)])
        assert roots[0].type == NodeType.FOLDER
        assert roots[0].children == ()

    def test_leaf_heuristics(self):
        roots = build_tree(
            [_tok("LICENSE", 0, 1), _tok("vendor", 0, 2), _tok("app.py", 0, 3)]
        )
        assert [r.type for r in roots] == [
            NodeType.FILE,
            NodeType.FOLDER,
            NodeType.FILE,
        ]

    def test_custom_classifier(self):
        roots = build_tree([_tok("vendor", 0, 1)], classify=lambda name: NodeType.FILE)
        assert roots[0].type == NodeType.FILE


class TestLevelJumps:
    tokens = [_tok("src", 0, 1, explicit=True), _tok("page.tsx", 2, 2)]

    def test_tolerant_clamps_to_child(self):
        roots = build_tree(self.tokens)
        assert len(roots) == 1
        assert roots[0].children[0].name == "page.tsx"

    def test_strict_raises_with_line(self):
        with pytest.raises(TreeParseError, match="(?i)non-monotonic indentation") as excinfo:
            build_tree(self.tokens, STRICT)
        assert excinfo.value.category == ErrorCategory.NON_MONOTONIC
        assert excinfo.value.line == 2

    def test_first_token_indented(self):
        roots = build_tree([_tok("a", 1, 1), _tok("b", 2, 2)])
        assert roots[0].name == "a"
        assert roots[0].children[0].name == "b"

    def test_first_token_indented_strict(self):
        with pytest.raises(TreeParseError, match="Line 1"):
            build_tree([_tok("a", 1, 1)], STRICT)


class TestDeepNesting:
    def test_thousands_of_levels(self):
        tokens = [_tok(f"d{level}", level, level + 1) for level in range(3000)]
        node = build_tree(tokens)[0]
        depth = 0
        while node.children:
            assert node.type == NodeType.FOLDER
            (node,) = node.children
            depth += 1
        assert depth == 2999
        assert node.name == "d2999"
