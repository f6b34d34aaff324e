"""
Tests for render.py - rich board output.
"""

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kanban_board.render import MAX_CARDS, print_board, render_card
from kanban_board.tasks.board import empty_board, group_tasks
from kanban_board.tasks.models import DEFAULT_COLUMNS, Task


class TestBoardPrinting:
    """Tests for board printing functions."""

    def test_print_empty_board(self, capsys):
        print_board(empty_board(DEFAULT_COLUMNS))

        out = capsys.readouterr().out
        assert "Backlog (0)" in out
        assert "To-Do (0)" in out
        assert "No tasks" in out
        assert "Total: 0 tasks" in out

    def test_print_board_with_tasks(self, capsys):
        board = group_tasks(
            [
                Task(id="1", content="Wireframes", status="backlog"),
                Task(id="2", content="Palette", status="design", assignee="ana"),
                Task(id="3", content="API", status="todo", due_date="2026-11-02"),
            ],
            DEFAULT_COLUMNS,
        )

        print_board(board)

        out = capsys.readouterr().out
        assert "Wireframes" in out
        assert "Assigned to: ana" in out
        assert "Due: 2026-11-02" in out
        assert "Design (1)" in out
        assert "Total: 3 tasks" in out

    def test_long_column_is_truncated(self, capsys):
        tasks = [Task(id=i, content=f"t{i}", status="doing") for i in range(MAX_CARDS + 3)]

        print_board(group_tasks(tasks, DEFAULT_COLUMNS))

        assert "+3 more" in capsys.readouterr().out

    def test_render_card_plain(self, capsys):
        from rich.console import Console

        Console().print(render_card(Task(id="9", content="Plain", status="backlog")))

        out = capsys.readouterr().out
        assert "Plain" in out
        assert "Due:" not in out
        assert "Assigned to:" not in out
