"""Typed dataclasses for the checksync data model.

Items and documents are immutable: every edit produces a new value.
Dict forms use plain JSON-friendly keys; unknown keys are ignored and
missing keys use defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Any


# ── Status ────────────────────────────────────────────────────


class TaskStatus(IntEnum):
    """Coarse task lifecycle, stored as the task store's integer code."""

    NEEDS_ACTION = 0
    IN_PROCESS = 1
    COMPLETED = 2
    CANCELLED = 3

    @classmethod
    def coerce(cls, value: Any) -> TaskStatus | None:
        """Accept a member, an integer code, or a name like 'in-process' / 'InProcess'."""
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid status: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            s = value.strip()
            if s.isdigit():
                return cls(int(s))
            key = s.replace("-", "").replace("_", "").replace(" ", "").lower()
            for member in cls:
                if member.name.replace("_", "").lower() == key:
                    return member
        raise ValueError(f"Invalid status: {value!r}")

    def label(self) -> str:
        """CamelCase name, e.g. 'InProcess'."""
        return "".join(part.capitalize() for part in self.name.split("_"))


# ── Checklist ─────────────────────────────────────────────────


@dataclass(frozen=True)
class ChecklistItem:
    checked: bool = False
    label: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> ChecklistItem:
        return cls(checked=bool(d.get("checked", False)), label=str(d.get("label", "") or ""))

    def to_dict(self) -> dict[str, Any]:
        return {"checked": self.checked, "label": self.label}

    def is_blank(self) -> bool:
        """True for the empty placeholder row; such items are never serialized."""
        return not self.label.strip()


@dataclass(frozen=True)
class ChecklistDocument:
    """An ordered, immutable checklist parsed from a single text value."""

    items: tuple[ChecklistItem, ...] = field(default_factory=tuple)

    @classmethod
    def from_text(cls, text: str | None) -> ChecklistDocument:
        from checksync.checklist import parse

        return cls(items=tuple(parse(text)))

    def to_text(self, as_checklist: bool = True) -> str:
        from checksync.checklist import serialize

        return serialize(self.items, as_checklist)

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def checked_count(self) -> int:
        return sum(1 for item in self.items if item.checked)

    def with_item(self, index: int, checked: bool | None = None, label: str | None = None) -> ChecklistDocument:
        """Return a copy with the item at *index* replaced."""
        old = self.items[index]
        new = replace(
            old,
            checked=old.checked if checked is None else checked,
            label=old.label if label is None else label,
        )
        items = list(self.items)
        items[index] = new
        return ChecklistDocument(items=tuple(items))

    def toggled(self, index: int) -> ChecklistDocument:
        return self.with_item(index, checked=not self.items[index].checked)

    def appended(self, item: ChecklistItem) -> ChecklistDocument:
        return ChecklistDocument(items=self.items + (item,))

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [i.to_dict() for i in self.items],
            "total": self.total,
            "checked": self.checked_count,
        }


# ── Progress ──────────────────────────────────────────────────


@dataclass(frozen=True)
class ProgressState:
    percent_complete: int
    status: TaskStatus

    def __post_init__(self) -> None:
        if not 0 <= self.percent_complete <= 100:
            raise ValueError(f"percent_complete out of range: {self.percent_complete}")

    def to_dict(self) -> dict[str, Any]:
        return {"percent_complete": self.percent_complete, "status": self.status.label()}
