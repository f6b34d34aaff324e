"""Drag-end handling: local reorder first, remote write after."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Coroutine, Optional

from .sync import RemoteSync
from .tasks.board import BoardState
from .tasks.models import Task, TaskId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DragLocation:
    column_id: str
    index: int


@dataclass(frozen=True)
class DragResult:
    """A finished drag. destination is None when dropped outside any column."""
    task_id: TaskId
    source: DragLocation
    destination: Optional[DragLocation] = None


# Schedules a coroutine without awaiting it
Scheduler = Callable[[Coroutine[Any, Any, object]], object]


class DragReorderHandler:
    def __init__(self, state: BoardState, sync: RemoteSync, schedule: Scheduler):
        self.state = state
        self.sync = sync
        self.schedule = schedule

    def on_drag_end(self, result: DragResult) -> Optional[Task]:
        """
        Apply a drag result to the board.

        Same-column drops only reorder locally. Cross-column drops are applied
        optimistically and the status write is scheduled afterwards.

        Returns:
            The moved task, or None when there was no destination
        """
        destination = result.destination
        if destination is None:
            return None

        source = result.source
        moved = self.state.move_task(
            result.task_id,
            source.column_id,
            source.index,
            destination.column_id,
            destination.index,
        )

        if source.column_id != destination.column_id:
            logger.info(f"[DRAG] {moved.id}: {source.column_id} → {destination.column_id}")
            self.schedule(self.sync.persist_move(moved, destination.column_id))

        return moved
