"""Data classes for TreeMD."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeType(Enum):
    FILE = "file"
    FOLDER = "folder"


class ParseMode(Enum):
    STRICT = "strict"
    TOLERANT = "tolerant"


@dataclass(frozen=True)
class TreeNode:
    name: str
    type: NodeType
    children: tuple[TreeNode, ...] = ()

    @property
    def is_folder(self) -> bool:
        return self.type is NodeType.FOLDER


@dataclass(frozen=True)
class LineToken:
    name: str
    level: int
    explicit_folder: bool = False
    line: int = 0  # 1-based source line


@dataclass(frozen=True)
class ParseOptions:
    """How a tree block is interpreted.

    ``mode`` also accepts the plain strings ``"strict"`` / ``"tolerant"``.
    """

    mode: ParseMode = ParseMode.TOLERANT
    tab_width: int = 2
    indent_width: int = 2

    def __post_init__(self) -> None:
        if not isinstance(self.mode, ParseMode):
            object.__setattr__(self, "mode", ParseMode(self.mode))
        for name in ("tab_width", "indent_width"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    @property
    def strict(self) -> bool:
        return self.mode is ParseMode.STRICT


@dataclass
class TreeBlock:
    """A fenced ```tree block located inside a Markdown document."""

    content: str
    start_line: int  # opening fence, 1-based
    end_line: int  # closing fence, 1-based
    info: str = "tree"
