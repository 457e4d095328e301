"""Typed accessors for values kept in a caller-owned mutable mapping."""

from __future__ import annotations

from typing import Any, MutableMapping, Protocol, Sequence

from checksync.models import TaskStatus

Values = MutableMapping[str, Any]


class Constraint(Protocol):
    def apply(self, values: Values, old_value: str | None, new_value: str | None) -> str | None: ...


class IntegerField:
    """Integer value stored under *key*; missing or None reads as None."""

    def __init__(self, key: str) -> None:
        self.key = key

    def get(self, values: Values) -> int | None:
        raw = values.get(self.key)
        if raw is None:
            return None
        try:
            return int(raw)
        except TypeError:
            raise ValueError(f"Invalid integer for {self.key}: {raw!r}") from None

    def set(self, values: Values, value: int | None) -> None:
        values[self.key] = None if value is None else int(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"


class StatusField(IntegerField):
    """Task status stored as its integer code."""

    def get(self, values: Values) -> TaskStatus | None:
        return TaskStatus.coerce(values.get(self.key))

    def set(self, values: Values, value: TaskStatus | int | None) -> None:
        status = TaskStatus.coerce(value)
        values[self.key] = None if status is None else int(status)


class TextField:
    """Text value whose writes pass through a chain of constraints."""

    def __init__(self, key: str, constraints: Sequence[Constraint] = ()) -> None:
        self.key = key
        self.constraints = list(constraints)

    def get(self, values: Values) -> str | None:
        raw = values.get(self.key)
        return None if raw is None else str(raw)

    def set(self, values: Values, value: str | None) -> None:
        values[self.key] = value

    def validate_and_set(self, values: Values, value: str | None) -> None:
        old = self.get(values)
        for constraint in self.constraints:
            value = constraint.apply(values, old, value)
        self.set(values, value)

    def __repr__(self) -> str:
        return f"TextField({self.key!r}, constraints={len(self.constraints)})"
