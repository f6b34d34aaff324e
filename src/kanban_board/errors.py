from __future__ import annotations

from typing import Optional


class KanbanError(Exception):
    """Base error of the kanban board client."""


class RequestFailed(KanbanError):
    """A remote call failed: transport error, error status or bad body."""

    def __init__(self, method: str, url: str, cause: Optional[BaseException] = None):
        self.method = method
        self.url = url
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{method} {url} failed{detail}")


class UnknownStatusError(KanbanError):
    """A task carries a status that matches no configured column."""

    def __init__(self, task_id, status: str):
        self.task_id = task_id
        self.status = status
        super().__init__(f"Task {task_id} has unknown status {status!r}")
