"""
Board view: owns the board state, the new-task form and background calls.

Использование:
    view = BoardView.from_config(load_config())
    view.mount()
    await view.wait_idle()

    view.form.content = "Write docs"
    view.add_task()
    view.on_drag_end(DragResult(task_id, DragLocation("backlog", 0), DragLocation("design", 0)))
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Coroutine, Optional, Set

import httpx

from .client import TasksClient
from .config import AppConfig
from .drag import DragReorderHandler, DragResult
from .sync import RemoteSync
from .tasks.board import BoardState
from .tasks.models import Board, Task

logger = logging.getLogger(__name__)


@dataclass
class NewTaskForm:
    """Input fields of the add-task form."""
    content: str = ""
    due_date: Optional[str] = None
    assignee: str = ""

    def clear(self) -> None:
        self.content = ""
        self.due_date = None
        self.assignee = ""


class BoardView:
    """
    Kanban board view.

    Remote calls are fire-and-forget: each public action returns right away
    and the call runs as a background asyncio task on the running loop.
    """

    def __init__(self, state: BoardState, sync: RemoteSync):
        self.state = state
        self.sync = sync
        self.form = NewTaskForm()
        self.drag = DragReorderHandler(state, sync, self._schedule)
        self._pending: Set[asyncio.Task] = set()

    @classmethod
    def from_config(
        cls,
        cfg: AppConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> BoardView:
        state = BoardState(cfg.column_specs())
        client = TasksClient(cfg.api_url, timeout=cfg.timeout, transport=transport)
        return cls(state, RemoteSync(client, state, cfg.unknown_status))

    @property
    def board(self) -> Board:
        return self.state.board

    def on_change(self, callback: Callable[[Board], None]) -> None:
        self.state.subscribe(callback)

    def mount(self) -> None:
        """Initial load."""
        self._schedule(self.sync.load_all())

    def reload(self) -> None:
        self._schedule(self.sync.load_all())

    def add_task(self) -> bool:
        """
        Submit the form.

        Returns:
            False when the content is blank and nothing was sent
        """
        if self.form.content.strip() == "":
            return False

        self._schedule(self._submit(
            self.form.content,
            self.form.due_date,
            self.form.assignee or None,
        ))
        return True

    def on_drag_end(self, result: DragResult) -> Optional[Task]:
        return self.drag.on_drag_end(result)

    async def wait_idle(self) -> None:
        """Wait until every scheduled call has finished."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def _submit(self, content: str, due_date: Optional[str], assignee: Optional[str]) -> None:
        task = await self.sync.create_task(content, due_date, assignee)
        if task is not None:
            self.form.clear()

    def _schedule(self, coro: Coroutine[Any, Any, object]) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"[VIEW] background call failed | error={error!r}", exc_info=error)
