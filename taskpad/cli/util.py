"""Shared utility functions for CLI commands."""

from typing import Optional

import click
import questionary

from taskpad.cli.helpers import open_in_editor
from taskpad.models.task import Category, Priority, TaskDraft, parse_due_date


def get_text_from_editor(initial_content: str = "") -> Optional[str]:
    """Open editor for user to write task text."""
    template = f"""# Task
# Write the task below. Lines starting with '#' will be removed.
# An empty task is allowed.

{initial_content}
"""

    content = open_in_editor(template)

    if not content:
        return None

    lines = [line for line in content.split('\n') if not line.strip().startswith('#')]
    return '\n'.join(lines).strip()


def _validate_due_date(value: str):
    try:
        parse_due_date(value)
    except ValueError:
        return "Use YYYY-MM-DD or 'Mon Jan 01 2024'"
    return True


def fill_draft_interactively(draft: TaskDraft) -> Optional[TaskDraft]:
    """Ask for every draft field, starting from the draft's current values.

    Returns:
        The filled-in draft, or None if the user cancelled
    """
    title = "Add Task" if draft.is_new else "Edit Task"
    click.echo(click.style(title, bold=True))

    text = questionary.text("Task:", default=draft.text).ask()
    if text is None:
        return None

    category = questionary.select(
        "Category:",
        choices=[c.value for c in Category],
        default=draft.category.value
    ).ask()
    if category is None:
        return None

    priority = questionary.select(
        "Priority:",
        choices=[p.value for p in Priority],
        default=draft.priority.value
    ).ask()
    if priority is None:
        return None

    due = questionary.text(
        "Due date:",
        default=draft.due_date.isoformat(),
        validate=_validate_due_date
    ).ask()
    if due is None:
        return None

    return draft.with_changes(
        text=text,
        category=Category(category),
        priority=Priority(priority),
        due_date=parse_due_date(due)
    )
