"""Editing session for a checklist text field.

Holds the per-row state a checklist editor needs (checkbox + label) and the
plain-text buffer, and writes back through a TextField only when the
flattened text actually changed. Rows always end with one empty placeholder
so there is somewhere to type a new entry; the placeholder is never written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from checksync.checklist import looks_like_checklist, parse, serialize
from checksync.fields import TextField, Values
from checksync.models import ChecklistDocument, ChecklistItem

logger = logging.getLogger(__name__)


@dataclass
class EditorRow:
    checked: bool = False
    label: str = ""

    def to_item(self) -> ChecklistItem:
        return ChecklistItem(checked=self.checked, label=self.label)


class ChecklistEditor:
    def __init__(self, field: TextField, values: Values) -> None:
        self.field = field
        self.values = values
        self.checklist_mode = False
        self.text = ""
        self.rows: list[EditorRow] = [EditorRow()]
        self.current_value: str | None = None

    # ── Loading ────────────────────────────────────────────────

    def load(self) -> None:
        """Read the field and choose the initial mode from its content."""
        value = self.field.get(self.values)
        self.checklist_mode = looks_like_checklist(value)
        self.current_value = value
        self.text = value or ""
        self._build_rows(value)

    def content_changed(self) -> bool:
        """Refresh from the value bag after an outside write.

        Returns False when the stored text is what this editor last wrote.
        """
        value = self.field.get(self.values)
        if value == self.current_value:
            return False
        if self.checklist_mode:
            self._build_rows(value)
        else:
            self.text = value or ""
        self.current_value = value
        return True

    def _build_rows(self, text: str | None) -> None:
        self.rows = [EditorRow(item.checked, item.label) for item in parse(text)]
        self.rows.append(EditorRow())

    # ── State ──────────────────────────────────────────────────

    @property
    def placeholder_index(self) -> int:
        return len(self.rows) - 1

    def document(self) -> ChecklistDocument:
        return ChecklistDocument(items=tuple(r.to_item() for r in self.rows if r.label.strip()))

    def flatten(self, as_checklist: bool = True) -> str:
        return serialize((r.to_item() for r in self.rows), as_checklist)

    def pending_text(self) -> str:
        return self.flatten(True) if self.checklist_mode else self.text

    # ── Edits ──────────────────────────────────────────────────

    def commit(self) -> bool:
        """Write the edited text back if it differs from the stored value."""
        new_text = self.pending_text()
        if new_text == self.field.get(self.values):
            return False
        self.current_value = new_text
        self.field.validate_and_set(self.values, new_text)
        logger.debug("Committed %s (%d chars)", self.field.key, len(new_text))
        return True

    def set_mode(self, checklist: bool) -> bool:
        """Switch between checklist and plain text, converting the content."""
        if checklist == self.checklist_mode:
            return False
        self.checklist_mode = checklist
        if checklist:
            self._build_rows(self.text)
            self.text = self.flatten(True)
        else:
            self.text = self.flatten(False)
        return self.commit()

    def toggle(self, index: int, checked: bool | None = None) -> bool:
        row = self.rows[index]
        row.checked = (not row.checked) if checked is None else checked
        return self.commit()

    def edit(self, index: int, label: str) -> bool:
        """Change a row label.

        Typing into the placeholder commits at once so a new placeholder
        appears; other rows are committed on blur().
        """
        self.rows[index].label = label
        if index == self.placeholder_index and label.strip():
            written = self.commit()
            self._build_rows(self.field.get(self.values))
            return written
        return False

    def edit_text(self, text: str) -> None:
        self.text = text

    def blur(self) -> bool:
        """Commit pending row edits and drop rows that became blank."""
        written = self.commit()
        if self.checklist_mode:
            self._build_rows(self.field.get(self.values))
        return written
