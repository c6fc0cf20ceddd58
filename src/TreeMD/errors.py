"""Parse errors and the strict/tolerant decision point."""

from __future__ import annotations

import logging
from enum import Enum

from TreeMD.models import ParseMode

logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    MIXED_INDENTATION = "Mixed tabs and spaces in indentation"
    MISALIGNED_INDENT = "Indentation not aligned to indent width"
    EMPTY_CONNECTOR = "Invalid tree prefix after vertical connector"
    EMPTY_LINE = "Empty tree line"
    EMPTY_NAME = "Invalid empty node name"
    NON_MONOTONIC = "Non-monotonic indentation"
    INVALID_STATE = "Invalid tree structure"


class TreeParseError(ValueError):
    """Raised in strict mode when a tree block is malformed."""

    def __init__(self, category: ErrorCategory, line: int, detail: str = ""):
        self.category = category
        self.line = line
        self.detail = detail
        message = f"Line {line}: {category.value}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


def raise_or_repair(
    mode: ParseMode,
    category: ErrorCategory,
    line: int,
    detail: str = "",
) -> None:
    """Raise for *category* in strict mode; otherwise log and return.

    Callers apply their own fallback when this returns.
    """
    if mode is ParseMode.STRICT:
        raise TreeParseError(category, line, detail)
    logger.debug("Line %d: repairing %s %s", line, category.name, detail)
