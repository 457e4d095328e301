"""Checklist text <-> item parsing for checksync.

Recognizes lines of the form:
    [ ] Open item
    [x] Done item
    [X] Done item

Any other non-blank line is kept as an unchecked item.
"""

from __future__ import annotations

import re
from typing import Iterable

from checksync.models import ChecklistItem

CHECKED_MARKERS = ("[x]", "[X]")
UNCHECKED_MARKER = "[ ]"
MARKERS = CHECKED_MARKERS + (UNCHECKED_MARKER,)

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str | None) -> list[str]:
    """Split on '\\n' or '\\r\\n'."""
    if not text:
        return []
    return _LINE_BREAK.split(text)


def is_checklist(text: str | None) -> bool:
    """True if the first line starts with a checklist marker."""
    return text is not None and text.startswith(MARKERS)


def looks_like_checklist(text: str | None) -> bool:
    """Looser check: any line starts with a marker.

    Used to pick the initial editing mode only; progress is gated by is_checklist.
    """
    if is_checklist(text):
        return True
    return any(line.startswith(MARKERS) for line in split_lines(text)[1:])


def parse_line(line: str) -> ChecklistItem | None:
    """Parse one line; returns None if nothing but whitespace remains."""
    checked = False
    if line.startswith(CHECKED_MARKERS):
        checked = True
        line = line[3:]
    elif line.startswith(UNCHECKED_MARKER):
        line = line[3:]
    label = line.strip()
    if not label:
        return None
    return ChecklistItem(checked=checked, label=label)


def parse(text: str | None) -> list[ChecklistItem]:
    """Parse checklist text into items, in line order. Never raises."""
    out = []
    for line in split_lines(text):
        item = parse_line(line)
        if item is not None:
            out.append(item)
    return out


def serialize(items: Iterable[ChecklistItem], as_checklist: bool = True) -> str:
    """Flatten items back to text, one per line, skipping blank labels.

    With as_checklist=False only the labels are written.
    """
    lines = []
    for item in items:
        label = item.label.strip()
        if not label:
            continue
        if as_checklist:
            lines.append(("[x] " if item.checked else "[ ] ") + label)
        else:
            lines.append(label)
    return "\n".join(lines)


def to_checklist(text: str | None) -> str:
    """Convert plain text (or an existing checklist) to normalized checklist text."""
    return serialize(parse(text), as_checklist=True)


def to_plain(text: str | None) -> str:
    """Drop markers and checked state, keeping one label per line."""
    return serialize(parse(text), as_checklist=False)
