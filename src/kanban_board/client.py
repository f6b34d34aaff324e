"""
Tasks REST client
=================

Async wrapper over the tasks endpoint:

    GET  {api_url}        -> [task, ...]
    POST {api_url}        -> created task (with server-assigned _id)
    PUT  {api_url}/{id}   -> updated task

Any failure (transport, error status, bad JSON) is raised as RequestFailed.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from .errors import RequestFailed
from .tasks.models import Task, TaskId


class TasksClient:
    """HTTP client for the tasks API."""

    def __init__(
        self,
        api_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        # Injected in tests (httpx.MockTransport)
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def _request(
        self,
        method: str,
        url: str,
        json: Optional[Dict[str, Any]] = None,
        parse: bool = True,
    ) -> Any:
        try:
            async with self._client() as client:
                response = await client.request(method, url, json=json)
                response.raise_for_status()
                return response.json() if parse else None
        except (httpx.HTTPError, ValueError) as e:
            raise RequestFailed(method, url, e) from e

    async def list_tasks(self) -> List[Task]:
        data = await self._request("GET", self.api_url)
        if not isinstance(data, list):
            raise RequestFailed("GET", self.api_url, ValueError("expected a JSON array"))
        try:
            return [Task.from_dict(item) for item in data]
        except (KeyError, TypeError, AttributeError) as e:
            raise RequestFailed("GET", self.api_url, e) from e

    async def create_task(
        self,
        content: str,
        status: str,
        due_date: Optional[str] = None,
        assignee: Optional[str] = None,
    ) -> Task:
        body = {
            "content": content,
            "dueDate": due_date,
            "assignee": assignee,
            "status": status,
        }
        data = await self._request("POST", self.api_url, json=body)
        return self._parse_task("POST", self.api_url, data)

    async def update_task(self, task: Task) -> None:
        """PUT the full task body. The response body is not read."""
        url = self.task_url(task.id)
        await self._request("PUT", url, json=task.to_dict(), parse=False)

    def task_url(self, task_id: TaskId) -> str:
        return f"{self.api_url}/{task_id}"

    @staticmethod
    def _parse_task(method: str, url: str, data: Any) -> Task:
        try:
            return Task.from_dict(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise RequestFailed(method, url, e) from e
