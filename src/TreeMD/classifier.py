"""File-vs-folder guessing for leaves that carry no trailing ``/``."""

from __future__ import annotations

import re

from TreeMD.models import NodeType

_NON_LETTERS = re.compile(r"[^A-Za-z]")


def has_interior_dot(name: str) -> bool:
    """True if a ``.`` appears anywhere except the first or last character.

    ``main.py`` and ``.env.local`` qualify; ``.gitignore`` and ``notes.`` do not.
    """
    return "." in name[1:-1]


def is_all_caps(name: str) -> bool:
    """True for names like ``LICENSE``, ``README (draft)`` or ``CHANGELOG-2``.

    Only the part before the first space or ``(`` is considered, and only
    its ASCII letters; a name with no letters there is not all caps.
    """
    trimmed = name.strip()
    cut = len(trimmed)
    for marker in (" ", "("):
        pos = trimmed.find(marker)
        if pos != -1:
            cut = min(cut, pos)
    letters = _NON_LETTERS.sub("", trimmed[:cut])
    return bool(letters) and letters == letters.upper()


def classify_leaf(name: str) -> NodeType:
    """Default leaf policy: extension, then all caps, else folder."""
    if has_interior_dot(name) or is_all_caps(name):
        return NodeType.FILE
    return NodeType.FOLDER
