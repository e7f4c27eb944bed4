"""
Blank-line normalization over the full text of a document.

Both transforms are pure: they take the current text and return the new text.
Committing the result back to the document is the caller's job
(see apply_to_document).
"""
from __future__ import annotations

import re
from typing import Callable

from ..host.base import Document

# Two or more consecutive whitespace-only lines, anchored at a line start.
_DOUBLED_BLANK_LINES_RE = re.compile(r"^(?:[^\S\n]*\n){2,}", re.MULTILINE)

# A whitespace run spanning at least two newlines, entered only at the first
# whitespace character of the run so long runs are scanned once. Greedy, so a
# single match swallows every blank line in the run.
_BLANK_LINES_RE = re.compile(r"(?<![^\S\n])[^\S\n]*\n(?:[^\S\n]*\n)+")


def collapse_doubled_blank_lines(text: str) -> str:
    """Collapse every run of 2+ blank lines into one empty line."""
    return _DOUBLED_BLANK_LINES_RE.sub("\n", text)


def remove_blank_lines(text: str) -> str:
    """Drop blank lines entirely, keeping the indentation of the next line."""
    return _BLANK_LINES_RE.sub("\n", text)


def apply_to_document(document: Document, transform: Callable[[str], str]) -> bool:
    """Run transform over the document's text and write it back in one go.

    Returns True when the text changed.
    """
    current = document.get_value()
    updated = transform(current)
    document.set_value(updated)
    return updated != current
