"""
Remote sync between BoardState and the tasks API.

Failure policy: every RequestFailed is caught here and logged. Nothing is
retried, nothing is rolled back, nothing reaches the user.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from .client import TasksClient
from .errors import RequestFailed
from .tasks.board import BoardState, UnknownStatusPolicy, group_tasks
from .tasks.models import Task

logger = logging.getLogger(__name__)


class RemoteSync:
    """Fetch-all, create-on-add and update-status-on-move."""

    def __init__(
        self,
        client: TasksClient,
        state: BoardState,
        unknown_status: UnknownStatusPolicy = UnknownStatusPolicy.DROP,
    ):
        self.client = client
        self.state = state
        self.unknown_status = unknown_status

    async def load_all(self) -> bool:
        """
        Rebuild the board from the server.

        Returns:
            True if the board was replaced, False if the fetch failed
        """
        try:
            tasks = await self.client.list_tasks()
        except RequestFailed as e:
            logger.error(f"[SYNC] load_all failed | error={e}")
            return False

        self.state.replace(group_tasks(tasks, self.state.specs, self.unknown_status))
        logger.info(f"[SYNC] loaded {len(tasks)} tasks")
        return True

    async def create_task(
        self,
        content: str,
        due_date: Optional[str] = None,
        assignee: Optional[str] = None,
    ) -> Optional[Task]:
        """
        Create a task in the first column.

        Returns:
            The server's task (with its id), or None on failure
        """
        column_id = self.state.first_column_id
        try:
            task = await self.client.create_task(content, column_id, due_date, assignee)
        except RequestFailed as e:
            logger.error(f"[SYNC] create_task failed | content={content!r} error={e}")
            return None

        self.state.append_task(column_id, task)
        logger.info(f"[SYNC] created {task}")
        return task

    async def persist_move(self, task: Task, new_status: str) -> bool:
        """Write the new status. Local state is kept even when this fails."""
        try:
            await self.client.update_task(replace(task, status=new_status))
        except RequestFailed as e:
            logger.error(f"[SYNC] persist_move failed | id={task.id} status={new_status} error={e}")
            return False
        return True
