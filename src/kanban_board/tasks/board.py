"""
Board state for the Kanban board.

Update functions are pure: they take a Board and return a new one, leaving
the input untouched. BoardState is the container the view owns; it applies
those functions and tells subscribers when the board changed.

Usage:
    from kanban_board.tasks import BoardState, DEFAULT_COLUMNS

    state = BoardState(DEFAULT_COLUMNS)
    state.replace(group_tasks(tasks, DEFAULT_COLUMNS))
    state.move_task(task_id, "backlog", 0, "design", 0)
"""

from __future__ import annotations

import logging
from dataclasses import replace as dc_replace
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..errors import UnknownStatusError
from .models import Board, Column, ColumnSpec, Task, TaskId

logger = logging.getLogger(__name__)


class UnknownStatusPolicy(str, Enum):
    """
    What to do with a task whose status matches no column.

    FIRST_COLUMN keeps the server status on the task, so such a task sits in
    a column whose id differs from its status until it is moved.
    """
    DROP = "drop"
    FIRST_COLUMN = "first_column"
    ERROR = "error"


def empty_board(specs: Sequence[ColumnSpec]) -> Board:
    return Board(columns={spec.id: Column.from_spec(spec) for spec in specs})


def group_tasks(
    tasks: Iterable[Task],
    specs: Sequence[ColumnSpec],
    policy: UnknownStatusPolicy = UnknownStatusPolicy.DROP,
) -> Board:
    """
    Build a board from the full task list.

    Every task lands in the column matching its status, once, in input order.
    The one exception is FIRST_COLUMN: an unknown-status task goes to the
    first column with its status left as received, so column id and status
    differ for it.

    Args:
        tasks: Tasks as returned by the server
        specs: Column specs in display order
        policy: Handling of tasks whose status matches no column

    Returns:
        New Board
    """
    board = empty_board(specs)
    first_id = specs[0].id if specs else None

    for task in tasks:
        column = board.columns.get(task.status)
        if column is None:
            if policy == UnknownStatusPolicy.ERROR:
                raise UnknownStatusError(task.id, task.status)
            if policy == UnknownStatusPolicy.FIRST_COLUMN and first_id is not None:
                column = board.columns[first_id]
            else:
                logger.warning(f"[BOARD] dropped task with unknown status | id={task.id} status={task.status!r}")
                continue
        column.items.append(task)

    return board


def move_task(
    board: Board,
    task_id: TaskId,
    from_column: str,
    from_index: int,
    to_column: str,
    to_index: int,
) -> Board:
    """
    Move one task, returning the new board.

    The task at ``from_index`` of ``from_column`` is removed and inserted at
    ``to_index`` of ``to_column``. Crossing columns rewrites the task status.

    Raises:
        KeyError: unknown column id
        IndexError: index out of range
        ValueError: task_id is not the task found at from_index
    """
    source = board.columns[from_column]
    dest = board.columns[to_column]

    if not 0 <= from_index < len(source.items):
        raise IndexError(f"source index {from_index} out of range for column {from_column!r}")

    source_items = list(source.items)
    removed = source_items.pop(from_index)
    # Drag events carry string ids; the server may send numbers
    if str(removed.id) != str(task_id):
        raise ValueError(f"task at {from_column}[{from_index}] is {removed.id!r}, not {task_id!r}")

    columns = dict(board.columns)

    if from_column == to_column:
        if not 0 <= to_index <= len(source_items):
            raise IndexError(f"destination index {to_index} out of range for column {to_column!r}")
        source_items.insert(to_index, removed)
        columns[from_column] = source.with_items(source_items)
        return Board(columns=columns)

    dest_items = list(dest.items)
    if not 0 <= to_index <= len(dest_items):
        raise IndexError(f"destination index {to_index} out of range for column {to_column!r}")
    dest_items.insert(to_index, dc_replace(removed, status=to_column))

    columns[from_column] = source.with_items(source_items)
    columns[to_column] = dest.with_items(dest_items)
    return Board(columns=columns)


def append_task(board: Board, column_id: str, task: Task) -> Board:
    column = board.columns[column_id]
    columns = dict(board.columns)
    columns[column_id] = column.with_items(list(column.items) + [task])
    return Board(columns=columns)


class BoardState:
    """
    Holds the current Board.

    Single-threaded: mutate only from the event loop that owns the view.
    """

    def __init__(self, specs: Sequence[ColumnSpec]):
        if not specs:
            raise ValueError("At least one column is required")
        self.specs: List[ColumnSpec] = list(specs)
        self._board: Board = empty_board(self.specs)
        self._subscribers: List[Callable[[Board], None]] = []

    @property
    def board(self) -> Board:
        return self._board

    @property
    def first_column_id(self) -> str:
        return self.specs[0].id

    def column(self, column_id: str) -> Column:
        return self._board.columns[column_id]

    def find(self, task_id: TaskId) -> Optional[Tuple[str, int, Task]]:
        """Locate a task by id (compared as strings): (column id, index, task) or None."""
        for column_id, column in self._board.columns.items():
            for index, task in enumerate(column.items):
                if str(task.id) == str(task_id):
                    return column_id, index, task
        return None

    def subscribe(self, callback: Callable[[Board], None]) -> None:
        self._subscribers.append(callback)

    def replace(self, board: Board) -> None:
        self._board = board
        self._notify()

    def move_task(
        self,
        task_id: TaskId,
        from_column: str,
        from_index: int,
        to_column: str,
        to_index: int,
    ) -> Task:
        """Apply a move and return the moved task as it now sits on the board."""
        self._board = move_task(self._board, task_id, from_column, from_index, to_column, to_index)
        self._notify()
        return self._board.columns[to_column].items[to_index]

    def append_task(self, column_id: str, task: Task) -> None:
        self._board = append_task(self._board, column_id, task)
        self._notify()

    def _notify(self) -> None:
        for callback in self._subscribers:
            callback(self._board)
