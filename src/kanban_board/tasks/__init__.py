"""Task models and Kanban board state."""

from .models import Task, TaskId, Column, ColumnSpec, Board, DEFAULT_COLUMNS
from .board import (
    BoardState,
    UnknownStatusPolicy,
    append_task,
    empty_board,
    group_tasks,
    move_task,
)

__all__ = [
    "Task",
    "TaskId",
    "Column",
    "ColumnSpec",
    "Board",
    "DEFAULT_COLUMNS",
    "BoardState",
    "UnknownStatusPolicy",
    "append_task",
    "empty_board",
    "group_tasks",
    "move_task",
]
