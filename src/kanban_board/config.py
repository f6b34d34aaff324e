from __future__ import annotations

import json
import os
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, field_validator

from .tasks.board import UnknownStatusPolicy
from .tasks.models import DEFAULT_COLUMNS, ColumnSpec

DEFAULT_API_URL = "http://localhost:5000/api/tasks"


class ColumnConfig(BaseModel):
    """One board column: id must match the task status values on the server."""

    id: str
    name: str
    icon: str = ""
    color: str = "white"

    def to_spec(self) -> ColumnSpec:
        return ColumnSpec(id=self.id, name=self.name, icon=self.icon, color=self.color)


def _default_columns() -> List[ColumnConfig]:
    return [ColumnConfig(id=c.id, name=c.name, icon=c.icon, color=c.color) for c in DEFAULT_COLUMNS]


class AppConfig(BaseModel):
    """Kanban board client config."""

    api_url: str = Field(default=DEFAULT_API_URL)
    timeout: float = 10.0
    log_level: str = Field(default="WARNING")

    # drop | first_column | error
    unknown_status: UnknownStatusPolicy = UnknownStatusPolicy.DROP

    # First column receives new tasks
    columns: List[ColumnConfig] = Field(default_factory=_default_columns)

    @field_validator("columns")
    @classmethod
    def _check_columns(cls, value: List[ColumnConfig]) -> List[ColumnConfig]:
        if not value:
            raise ValueError("at least one column is required")
        ids = [c.id for c in value]
        if len(set(ids)) != len(ids):
            raise ValueError(f"duplicate column ids: {ids}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level

    def column_specs(self) -> List[ColumnSpec]:
        return [c.to_spec() for c in self.columns]


def config_dir() -> Path:
    return Path.home() / ".kanban-board"


def config_path() -> Path:
    return config_dir() / "config.json"


def load_config(apply_env: bool = True) -> AppConfig:
    path = config_path()
    data = {}
    if path.exists():
        data = json.loads(path.read_text(encoding="utf-8"))

    # Env overrides the file
    if apply_env and os.environ.get("KANBAN_API_URL"):
        data["api_url"] = os.environ["KANBAN_API_URL"]
    if apply_env and os.environ.get("KANBAN_LOG_LEVEL"):
        data["log_level"] = os.environ["KANBAN_LOG_LEVEL"]

    return AppConfig(**data)


def save_config(cfg: AppConfig) -> None:
    d = config_dir()
    d.mkdir(parents=True, exist_ok=True)
    config_path().write_text(cfg.model_dump_json(indent=2), encoding="utf-8")
