"""
Pytest configuration and fixtures.
"""

import json
import shutil
import tempfile
from pathlib import Path

import httpx
import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp = tempfile.mkdtemp()
    yield Path(temp)
    shutil.rmtree(temp, ignore_errors=True)


@pytest.fixture
def home_dir(temp_dir, monkeypatch):
    """Point Path.home() at a temp dir so config files stay isolated."""
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: temp_dir))
    monkeypatch.delenv("KANBAN_API_URL", raising=False)
    monkeypatch.delenv("KANBAN_LOG_LEVEL", raising=False)
    return temp_dir


class FakeTasksServer:
    """In-memory tasks API served through httpx.MockTransport."""

    def __init__(self, tasks=None):
        self.tasks = [dict(t) for t in (tasks or [])]
        self.requests = []
        self.fail_methods = set()
        self._next_id = 100

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method in self.fail_methods:
            return httpx.Response(500, json={"error": "boom"})

        path = request.url.path
        if request.method == "GET" and path == "/api/tasks":
            return httpx.Response(200, json=self.tasks)

        if request.method == "POST" and path == "/api/tasks":
            body = json.loads(request.content)
            body["_id"] = str(self._next_id)
            self._next_id += 1
            self.tasks.append(body)
            return httpx.Response(201, json=body)

        if request.method == "PUT" and path.startswith("/api/tasks/"):
            task_id = path.rsplit("/", 1)[1]
            body = json.loads(request.content)
            for i, task in enumerate(self.tasks):
                if str(task["_id"]) == task_id:
                    self.tasks[i] = body
                    return httpx.Response(200, json=body)
            return httpx.Response(404, json={"error": "not found"})

        return httpx.Response(404)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def bodies(self, method: str):
        return [json.loads(r.content) for r in self.requests if r.method == method]


@pytest.fixture
def sample_tasks():
    return [
        {"_id": "1", "content": "Sketch wireframes", "status": "backlog"},
        {"_id": "2", "content": "Pick palette", "status": "design", "assignee": "ana"},
        {"_id": "3", "content": "Write API", "status": "todo", "dueDate": "2026-11-02T00:00:00.000Z"},
        {"_id": "4", "content": "Fix login", "status": "backlog"},
    ]


@pytest.fixture
def server(sample_tasks):
    return FakeTasksServer(sample_tasks)
