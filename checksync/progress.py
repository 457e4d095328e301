"""Progress derivation from checklist items.

percent = floor(checked * 100 / total), and the status follows the percent:
    100   -> COMPLETED
    0     -> NEEDS_ACTION
    other -> IN_PROCESS

A CANCELLED status is never overwritten by an automatic recompute.
"""

from __future__ import annotations

import logging
from typing import Sequence

from checksync.checklist import is_checklist, parse
from checksync.fields import IntegerField, StatusField, Values
from checksync.models import ChecklistItem, ProgressState, TaskStatus

logger = logging.getLogger(__name__)


def status_for_percent(percent: int) -> TaskStatus:
    if percent == 100:
        return TaskStatus.COMPLETED
    if percent == 0:
        return TaskStatus.NEEDS_ACTION
    return TaskStatus.IN_PROCESS


def derive(items: Sequence[ChecklistItem]) -> ProgressState:
    """Compute percent complete and candidate status for a non-empty item list."""
    total = len(items)
    if total == 0:
        raise ValueError("derive() needs at least one item")
    checked = sum(1 for item in items if item.checked)
    percent = checked * 100 // total
    return ProgressState(percent_complete=percent, status=status_for_percent(percent))


def apply(
    current_status: TaskStatus | None,
    current_percent: int | None,
    items: Sequence[ChecklistItem],
) -> tuple[TaskStatus | None, int | None]:
    """Decide the stored (status, percent) after a checklist change.

    Empty items leave both values untouched. Status takes the candidate
    unless the current one is CANCELLED; percent always follows.
    """
    if not items:
        return current_status, current_percent

    progress = derive(items)

    new_status = current_status
    if current_status is None or (current_status != progress.status and current_status != TaskStatus.CANCELLED):
        new_status = progress.status
    elif current_status != progress.status:
        logger.debug("Keeping cancelled status; candidate was %s", progress.status.label())

    new_percent = current_percent
    if current_percent is None or current_percent != progress.percent_complete:
        new_percent = progress.percent_complete

    return new_status, new_percent


class ChecklistConstraint:
    """Keeps status and percent complete in sync with a checklist text field.

    Either field may be None, in which case that half of the update is skipped.
    The text value itself is passed through unchanged.
    """

    def __init__(
        self,
        status_field: StatusField | None = None,
        percent_field: IntegerField | None = None,
    ) -> None:
        self.status_field = status_field
        self.percent_field = percent_field

    def apply(self, values: Values, old_value: str | None, new_value: str | None) -> str | None:
        if not is_checklist(new_value):
            return new_value

        items = parse(new_value)
        if not items:
            return new_value

        current_status = self.status_field.get(values) if self.status_field else None
        current_percent = self.percent_field.get(values) if self.percent_field else None
        new_status, new_percent = apply(current_status, current_percent, items)

        if self.status_field is not None and new_status != current_status:
            logger.debug("Setting %s: %s -> %s", self.status_field.key, current_status, new_status)
            self.status_field.set(values, new_status)

        if self.percent_field is not None and new_percent != current_percent:
            logger.debug("Setting %s: %s -> %s", self.percent_field.key, current_percent, new_percent)
            self.percent_field.set(values, new_percent)

        return new_value

    def __repr__(self) -> str:
        return f"ChecklistConstraint(status={self.status_field!r}, percent={self.percent_field!r})"
