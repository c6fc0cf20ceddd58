"""Leading-indentation interpretation for a single tree line.

Two notations are understood, and may be mixed line by line:

    src/                      src/
    ├── app/                    app/
    │   └── page.tsx              page.tsx

A vertical connector (``│``) followed by spaces counts as one level, a plain
run of spaces counts as ``run // indent_width`` levels, and a branch glyph
(``├`` / ``└``) adds one more level on top.
"""

from __future__ import annotations

from typing import NamedTuple

from TreeMD.errors import ErrorCategory, raise_or_repair
from TreeMD.models import ParseOptions

VERTICAL = "│"
BRANCHES = frozenset("├└")
HORIZONTALS = frozenset("─-")


class IndentResult(NamedTuple):
    level: int
    content: str


def resolve_options(options: ParseOptions | None) -> ParseOptions:
    """Return *options*, or the defaults when none were given."""
    return options if options is not None else ParseOptions()


def _normalize_tabs(line: str, options: ParseOptions, line_number: int) -> str:
    idx = 0
    has_tab = has_space = False
    while idx < len(line) and line[idx] in " \t":
        if line[idx] == "\t":
            has_tab = True
        else:
            has_space = True
        idx += 1

    if has_tab and has_space:
        raise_or_repair(options.mode, ErrorCategory.MIXED_INDENTATION, line_number)

    if not has_tab:
        return line
    leading = line[:idx].replace("\t", " " * options.tab_width)
    return leading + line[idx:]


def _read_indent_units(
    line: str, options: ParseOptions, line_number: int
) -> tuple[int, int]:
    """Scan connector and space units; return (level, cursor)."""
    level = 0
    cursor = 0

    while cursor < len(line):
        if line[cursor] == VERTICAL:
            spaces = 0
            probe = cursor + 1
            while probe < len(line) and line[probe] == " ":
                spaces += 1
                probe += 1
            if spaces == 0:
                raise_or_repair(
                    options.mode, ErrorCategory.EMPTY_CONNECTOR, line_number
                )
                # Bare connector ends the indentation without adding a level.
                cursor = probe
                break
            level += 1
            cursor = probe
            continue

        if line[cursor] == " ":
            spaces = 0
            while cursor < len(line) and line[cursor] == " ":
                spaces += 1
                cursor += 1
            if spaces % options.indent_width:
                raise_or_repair(
                    options.mode,
                    ErrorCategory.MISALIGNED_INDENT,
                    line_number,
                    f"{spaces} spaces, indent width {options.indent_width}",
                )
            level += spaces // options.indent_width
            continue

        break

    return level, cursor


def _read_branch_prefix(line: str, cursor: int) -> tuple[int, int]:
    """Consume ``├──`` / ``└─ `` style prefixes; return (level boost, cursor)."""
    if cursor >= len(line) or line[cursor] not in BRANCHES:
        return 0, cursor

    cursor += 1
    while cursor < len(line) and line[cursor] in HORIZONTALS:
        cursor += 1
    if cursor < len(line) and line[cursor] == " ":
        cursor += 1
    return 1, cursor


def parse_indentation(
    raw_line: str,
    options: ParseOptions,
    line_number: int,
) -> IndentResult:
    """Split *raw_line* into its nesting level and trimmed content.

    Raises:
        TreeParseError: in strict mode, for mixed tabs and spaces, a connector
            with no following space, a misaligned space run or empty content.
    """
    line = _normalize_tabs(raw_line, options, line_number)
    level, cursor = _read_indent_units(line, options, line_number)
    boost, cursor = _read_branch_prefix(line, cursor)
    content = line[cursor:].strip()

    if not content:
        raise_or_repair(options.mode, ErrorCategory.EMPTY_LINE, line_number)

    return IndentResult(level + boost, content)
