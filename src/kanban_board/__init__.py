"""Kanban task board client: board state, REST sync and drag reordering."""

from .tasks import Board, BoardState, Column, ColumnSpec, Task, UnknownStatusPolicy, DEFAULT_COLUMNS
from .client import TasksClient
from .sync import RemoteSync
from .drag import DragLocation, DragResult, DragReorderHandler
from .view import BoardView, NewTaskForm
from .errors import KanbanError, RequestFailed, UnknownStatusError

__version__ = "0.1.0"

__all__ = [
    "Board",
    "BoardState",
    "Column",
    "ColumnSpec",
    "Task",
    "UnknownStatusPolicy",
    "DEFAULT_COLUMNS",
    "TasksClient",
    "RemoteSync",
    "DragLocation",
    "DragResult",
    "DragReorderHandler",
    "BoardView",
    "NewTaskForm",
    "KanbanError",
    "RequestFailed",
    "UnknownStatusError",
]
