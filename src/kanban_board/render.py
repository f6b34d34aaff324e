"""Rich rendering of the Kanban board."""

from __future__ import annotations

from typing import List, Optional

from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .tasks.models import Board, Column, Task

console = Console()

MAX_CARDS = 10
COLUMN_WIDTH = 30


def render_card(task: Task) -> Panel:
    """One task card: content, due date and assignee when set."""
    body = Text(task.content)
    due = task.due_date_display()
    if due:
        body.append(f"\nDue: {due}", style="dim")
    if task.assignee:
        body.append(f"\nAssigned to: {task.assignee}", style="dim")
    return Panel(body, subtitle=str(task.id), subtitle_align="right", border_style="white")


def render_column(column: Column) -> Panel:
    cards: List = [render_card(task) for task in column.items[:MAX_CARDS]]
    if len(column.items) > MAX_CARDS:
        cards.append(Text(f"... +{len(column.items) - MAX_CARDS} more", style="dim"))
    if not cards:
        cards.append(Text("No tasks", style="dim"))

    title = f"{column.icon} {column.name} ({len(column.items)})".strip()
    return Panel(
        Group(*cards),
        title=title,
        border_style=column.color,
        width=COLUMN_WIDTH,
    )


def render_board(board: Board) -> Columns:
    return Columns([render_column(column) for column in board.columns.values()])


def print_board(board: Board, out: Optional[Console] = None) -> None:
    """
    Print the board columns side by side with a one-line summary.

    Args:
        board: Board to print
        out: Console to print to (module console by default)
    """
    out = out or console
    out.print(render_board(board))

    counts = " | ".join(f"{c.name}: {len(c.items)}" for c in board.columns.values())
    out.print(f"\n[dim]Total: {len(board.all_tasks())} tasks | {counts}[/dim]")
