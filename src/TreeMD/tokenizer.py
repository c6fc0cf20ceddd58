"""Split a tree block into per-line tokens."""

from __future__ import annotations

import re

from TreeMD.errors import ErrorCategory, raise_or_repair
from TreeMD.indentation import parse_indentation, resolve_options
from TreeMD.models import LineToken, ParseOptions

_LINE_SPLIT = re.compile(r"\r?\n")


def tokenize_lines(text: str, options: ParseOptions | None = None) -> list[LineToken]:
    """Return one token per non-blank line of *text*, in source order.

    Line numbers are 1-based and refer to the original text, so skipped
    lines leave gaps rather than shifting later tokens.
    """
    resolved = resolve_options(options)
    tokens: list[LineToken] = []

    for index, raw_line in enumerate(_LINE_SPLIT.split(text)):
        if not raw_line.strip():
            continue

        line_number = index + 1
        level, content = parse_indentation(raw_line, resolved, line_number)
        explicit_folder = content.endswith("/")
        name = content[:-1].strip() if explicit_folder else content

        if not name:
            raise_or_repair(resolved.mode, ErrorCategory.EMPTY_NAME, line_number)
            continue

        tokens.append(
            LineToken(
                name=name,
                level=level,
                explicit_folder=explicit_folder,
                line=line_number,
            )
        )

    return tokens
