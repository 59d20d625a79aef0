"""Tests for CLI utility functions."""
from datetime import date
from unittest.mock import patch

from taskpad.cli.util import fill_draft_interactively, get_text_from_editor
from taskpad.models.task import Category, Priority, TaskDraft


class TestGetTextFromEditor:
    """Tests for get_text_from_editor."""

    @patch('taskpad.cli.util.open_in_editor')
    def test_strips_comment_lines(self, mock_editor):
        """Test that comment lines are removed."""
        mock_editor.return_value = "# Task\n# comment\n\nBuy milk\nand bread"

        assert get_text_from_editor() == "Buy milk\nand bread"

    @patch('taskpad.cli.util.open_in_editor')
    def test_prefills_initial_content(self, mock_editor):
        """Test that initial content is put in the template."""
        mock_editor.return_value = "Old text"

        get_text_from_editor("Old text")

        assert "Old text" in mock_editor.call_args[0][0]

    @patch('taskpad.cli.util.open_in_editor')
    def test_editor_failure(self, mock_editor):
        """Test editor failure returns None."""
        mock_editor.return_value = ""

        assert get_text_from_editor() is None

    @patch('taskpad.cli.util.open_in_editor')
    def test_only_comments_gives_empty_text(self, mock_editor):
        """Test that a template left alone gives empty text."""
        mock_editor.return_value = "# Task\n# nothing else"

        assert get_text_from_editor() == ""


class TestFillDraftInteractively:
    """Tests for fill_draft_interactively."""

    @patch('taskpad.cli.util.questionary')
    def test_fills_every_field(self, mock_questionary):
        """Test filling every draft field from prompts."""
        mock_questionary.text.return_value.ask.side_effect = ["Buy milk", "2024-01-05"]
        mock_questionary.select.return_value.ask.side_effect = ["Personal", "High"]
        draft = TaskDraft(due_date=date(2024, 1, 1))

        filled = fill_draft_interactively(draft)

        assert filled.text == "Buy milk"
        assert filled.category == Category.PERSONAL
        assert filled.priority == Priority.HIGH
        assert filled.due_date == date(2024, 1, 5)
        assert filled.is_new

    @patch('taskpad.cli.util.questionary')
    def test_defaults_come_from_draft(self, mock_questionary):
        """Test prompt defaults come from the draft."""
        mock_questionary.text.return_value.ask.side_effect = ["Keep", "2024-02-02"]
        mock_questionary.select.return_value.ask.side_effect = ["Work", "Low"]
        draft = TaskDraft(task_id=5, text="Keep", priority=Priority.LOW, due_date=date(2024, 2, 2))

        filled = fill_draft_interactively(draft)

        first_text_call = mock_questionary.text.call_args_list[0]
        assert first_text_call.kwargs['default'] == "Keep"
        assert mock_questionary.select.call_args_list[1].kwargs['default'] == "Low"
        assert filled.task_id == 5

    @patch('taskpad.cli.util.questionary')
    def test_cancel(self, mock_questionary):
        """Test cancelling the form."""
        mock_questionary.text.return_value.ask.return_value = None

        assert fill_draft_interactively(TaskDraft()) is None
