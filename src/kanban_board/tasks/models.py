"""
Task models for the Kanban board.

Wire format (REST API):
    { "_id": ..., "content": "...", "dueDate": "...", "assignee": "...", "status": "backlog" }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

TaskId = Union[str, int]

# Ключи, которые Task разбирает сам; всё остальное уходит в extra
_WIRE_KEYS = ("_id", "content", "dueDate", "assignee", "status")


@dataclass
class Task:
    """A task as the server returns it."""
    id: TaskId
    content: str
    status: str
    due_date: Optional[str] = None  # ISO-8601, as sent by the server
    assignee: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        result = dict(self.extra)
        result.update({
            "_id": self.id,
            "content": self.content,
            "dueDate": self.due_date,
            "assignee": self.assignee,
            "status": self.status,
        })
        return result

    @classmethod
    def from_dict(cls, data: dict) -> Task:
        """
        Parse the wire shape.

        Raises:
            KeyError: no ``_id``
            TypeError: content/status not str, dueDate/assignee not str or null
        """
        for key in ("content", "status"):
            if not isinstance(data.get(key, ""), str):
                raise TypeError(f"task field {key!r} must be a string, got {type(data[key]).__name__}")
        for key in ("dueDate", "assignee"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"task field {key!r} must be a string or null, got {type(value).__name__}")

        return cls(
            id=data["_id"],
            content=data.get("content", ""),
            status=data.get("status", ""),
            due_date=data.get("dueDate"),
            assignee=data.get("assignee"),
            extra={k: v for k, v in data.items() if k not in _WIRE_KEYS},
        )

    def due_date_display(self) -> Optional[str]:
        """Due date as a local date string, or None when unset."""
        if not self.due_date:
            return None
        raw = self.due_date
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return self.due_date
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone()
        return parsed.date().isoformat()

    def __str__(self) -> str:
        return f"[{self.id}] {self.content} ({self.status})"


@dataclass(frozen=True)
class ColumnSpec:
    """Display metadata of a column."""
    id: str
    name: str
    icon: str = ""
    color: str = "white"


DEFAULT_COLUMNS: List[ColumnSpec] = [
    ColumnSpec("backlog", "Backlog", "🎒", "#2196f3"),
    ColumnSpec("design", "Design", "🎨", "#9c27b0"),
    ColumnSpec("todo", "To-Do", "🤔", "#f44336"),
    ColumnSpec("doing", "Doing", "🤓", "#ff5722"),
]


@dataclass
class Column:
    """Client-side grouping of tasks; never persisted on its own."""
    id: str
    name: str
    icon: str = ""
    color: str = "white"
    items: List[Task] = field(default_factory=list)

    @classmethod
    def from_spec(cls, spec: ColumnSpec, items: Optional[List[Task]] = None) -> Column:
        return cls(
            id=spec.id,
            name=spec.name,
            icon=spec.icon,
            color=spec.color,
            items=list(items or []),
        )

    def with_items(self, items: List[Task]) -> Column:
        return Column(id=self.id, name=self.name, icon=self.icon, color=self.color, items=items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class Board:
    """Column id -> Column, in display order."""
    columns: Dict[str, Column] = field(default_factory=dict)

    def __getitem__(self, column_id: str) -> Column:
        return self.columns[column_id]

    def __contains__(self, column_id: object) -> bool:
        return column_id in self.columns

    @property
    def column_ids(self) -> List[str]:
        return list(self.columns)

    def all_tasks(self) -> List[Task]:
        return [task for column in self.columns.values() for task in column.items]
