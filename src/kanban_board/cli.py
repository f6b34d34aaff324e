from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Optional

import typer
from rich.console import Console

from .config import AppConfig, load_config, save_config
from .drag import DragLocation, DragResult
from .errors import KanbanError
from .log import setup_logging
from .render import print_board
from .tasks.board import UnknownStatusPolicy
from .view import BoardView

app = typer.Typer(no_args_is_help=True, help="Kanban task board client")

console = Console()


def _build_view(cfg: AppConfig) -> BoardView:
    return BoardView.from_config(cfg)


def _load_cfg() -> AppConfig:
    cfg = load_config()
    setup_logging(cfg.log_level)
    return cfg


@app.command()
def show() -> None:
    """Load and show the board."""
    view = _build_view(_load_cfg())

    async def run() -> None:
        await view.sync.load_all()

    try:
        asyncio.run(run())
    except KanbanError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    print_board(view.board, console)


@app.command()
def add(
    content: str = typer.Argument(..., help="Task text"),
    due: Optional[datetime] = typer.Option(None, "--due", formats=["%Y-%m-%d"], help="Due date (YYYY-MM-DD)"),
    assignee: str = typer.Option("", "--assignee", "-a", help="Assignee name"),
) -> None:
    """Create a task in the first column."""
    view = _build_view(_load_cfg())
    view.form.content = content
    view.form.due_date = due.date().isoformat() if due else None
    view.form.assignee = assignee

    if not content.strip():
        console.print("[red]Task content is empty[/red]")
        raise typer.Exit(1)

    async def run() -> None:
        await view.sync.load_all()
        view.add_task()
        await view.wait_idle()

    try:
        asyncio.run(run())
    except KanbanError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    # Форма очищается только после успешного создания
    if view.form.content:
        console.print("[red]Task was not created (see log)[/red]")
        raise typer.Exit(1)

    print_board(view.board, console)


@app.command()
def move(
    task_id: str = typer.Argument(..., help="Task id"),
    column: str = typer.Argument(..., help="Destination column id"),
    index: Optional[int] = typer.Option(None, "--index", "-i", help="Position in the column (default: end)"),
) -> None:
    """Move a task to a column."""
    view = _build_view(_load_cfg())

    async def run() -> None:
        await view.sync.load_all()

        found = view.state.find(task_id)
        if found is None:
            raise typer.BadParameter(f"Task not found: {task_id}")
        if column not in view.board:
            raise typer.BadParameter(f"Unknown column: {column} (known: {', '.join(view.board.column_ids)})")

        from_column, from_index, task = found
        to_index = index
        if to_index is None:
            to_index = len(view.board[column].items)
            if column == from_column:
                to_index -= 1

        view.on_drag_end(DragResult(
            task_id=task.id,
            source=DragLocation(from_column, from_index),
            destination=DragLocation(column, to_index),
        ))
        await view.wait_idle()

    try:
        asyncio.run(run())
    except typer.BadParameter as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except (KanbanError, IndexError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    print_board(view.board, console)


@app.command("config")
def config_set(
    api_url: Optional[str] = typer.Option(None, "--api-url"),
    timeout: Optional[float] = typer.Option(None, "--timeout"),
    log_level: Optional[str] = typer.Option(None, "--log-level"),
    unknown_status: Optional[UnknownStatusPolicy] = typer.Option(None, "--unknown-status"),
) -> None:
    """Show or update the saved config."""
    cfg = load_config(apply_env=False)
    data = cfg.model_dump()
    changed = False
    if api_url is not None:
        data["api_url"] = api_url
        changed = True
    if timeout is not None:
        data["timeout"] = timeout
        changed = True
    if log_level is not None:
        data["log_level"] = log_level
        changed = True
    if unknown_status is not None:
        data["unknown_status"] = unknown_status
        changed = True

    if not changed:
        console.print(cfg.model_dump_json(indent=2))
        return

    try:
        cfg = AppConfig(**data)
    except ValueError as e:
        console.print(f"[red]Invalid config: {e}[/red]")
        raise typer.Exit(1)

    save_config(cfg)
    console.print("OK")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
