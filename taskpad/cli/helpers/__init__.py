"""CLI Helper Functions for taskpad.

This module provides reusable helper functions for CLI commands to reduce
code duplication and standardize behavior across all commands.

The helpers provide:
- Data directory and configuration lookup
- Task store construction
- Task ID resolution with short ID support
- Due date option parsing
- Consistent table formatting for output
- Editor integration for user input
"""

import logging
import os
import subprocess
import sys
import tempfile
from datetime import date, timedelta
from pathlib import Path
from typing import List, Optional

import click
from tabulate import tabulate

from taskpad.core.constants import DEFAULT_DATA_DIR, MAX_TEXT_LENGTH
from taskpad.core.kv_store import FileKeyValueStore
from taskpad.core.task_store import TaskStore
from taskpad.models.config import TaskpadConfig
from taskpad.models.task import Priority, Task, parse_due_date
from taskpad.utils.config_manager import ConfigManager

logger = logging.getLogger(__name__)


def get_data_dir(ctx: click.Context) -> Path:
    """Get the data directory chosen on the root command."""
    obj = ctx.find_root().obj or {}
    return obj.get("data_dir") or DEFAULT_DATA_DIR


def get_config(ctx: click.Context) -> TaskpadConfig:
    """Get the loaded configuration, reading it if the root command did not."""
    obj = ctx.find_root().obj or {}
    config = obj.get("config")
    if config is None:
        config = ConfigManager(get_data_dir(ctx)).load_or_default()
    return config


def get_task_store(ctx: click.Context) -> TaskStore:
    """Create a task store over the data directory and load it.

    A missing or corrupt task list loads as empty; the failure is only logged.
    """
    data_dir = get_data_dir(ctx)
    store = TaskStore(FileKeyValueStore(data_dir))
    store.load()
    if store.last_error is not None:
        click.echo(f"Warning: could not load saved tasks ({store.last_error}); starting empty.", err=True)
    return store


def ensure_saved(store: TaskStore) -> None:
    """Exit with an error when the last mutation could not be persisted.

    The store keeps its previous state in that case, so nothing changed.
    """
    if store.last_error is not None:
        click.echo(f"Error: changes were not saved: {store.last_error}", err=True)
        sys.exit(1)


def resolve_task_id(store: TaskStore, task_id: str) -> Task:
    """Resolve a task ID with short ID support.

    Ids are creation timestamps, so they share leading digits; a short ID is
    a unique trailing part of the full id.

    Args:
        store: The loaded task store
        task_id: Full id or trailing digits of one

    Returns:
        The resolved task

    Note:
        Exits with error if task not found or multiple matches.
    """
    task_id = task_id.strip()
    if task_id.isdigit():
        task = store.get(int(task_id))
        if task:
            return task

    matching_tasks = [t for t in store.tasks if task_id and str(t.id).endswith(task_id)]
    if len(matching_tasks) == 1:
        return matching_tasks[0]
    if len(matching_tasks) > 1:
        click.echo(f"Error: Multiple tasks found ending with '{task_id}':", err=True)
        for task in matching_tasks:
            click.echo(f"  - {task.id}: {truncate(task.text)}", err=True)
        sys.exit(1)

    click.echo(f"Error: No task found with ID: {task_id}", err=True)
    sys.exit(1)


def parse_due_date_option(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[date]:
    """Click callback turning a --due value into a date.

    Accepts ``today``, ``tomorrow``, ISO ``YYYY-MM-DD`` and the stored
    ``Mon Jan 01 2024`` form.
    """
    if value is None:
        return None
    keyword = value.strip().lower()
    if keyword == "today":
        return date.today()
    if keyword == "tomorrow":
        return date.today() + timedelta(days=1)
    try:
        return parse_due_date(value)
    except ValueError:
        raise click.BadParameter(
            f"'{value}' is not a date. Use today, tomorrow, YYYY-MM-DD or 'Mon Jan 01 2024'."
        )


def truncate(text: str, max_length: int = MAX_TEXT_LENGTH) -> str:
    """First line of text, shortened to max_length."""
    lines = text.split('\n')
    line = lines[0] if lines else ""
    if len(line) > max_length:
        line = line[:max_length - 3] + "..."
    return line


def format_task_table(tasks: List[Task],
                      headers: Optional[List[str]] = None,
                      max_text_length: int = MAX_TEXT_LENGTH) -> str:
    """Format tasks as a table with consistent styling.

    Args:
        tasks: List of tasks to display, in list order
        headers: Optional custom headers (defaults to standard headers)
        max_text_length: Maximum text length before truncation

    Returns:
        Formatted table string
    """
    if headers is None:
        headers = ["ID", "DONE", "TASK", "CATEGORY", "PRIORITY", "DUE"]

    priority_colors = {
        Priority.HIGH: 'red',
        Priority.MEDIUM: 'yellow',
        Priority.LOW: 'green'
    }

    table_data = []
    for task_item in tasks:
        text = truncate(task_item.text, max_text_length)
        if task_item.completed:
            text = click.style(text, fg='bright_black', strikethrough=True)

        row = [
            task_item.id,
            "✓" if task_item.completed else "",
            text,
            task_item.category.value,
            click.style(task_item.priority.value, fg=priority_colors.get(task_item.priority, 'white')),
            task_item.due_date_display
        ]
        table_data.append(row)

    return tabulate(table_data, headers=headers, tablefmt="simple", disable_numparse=True)


def open_in_editor(template: str = "", suffix: str = ".md") -> str:
    """Open text in editor for user input.

    Args:
        template: Initial text to show in editor
        suffix: File suffix for temporary file

    Returns:
        The edited text

    Note:
        Returns empty string if user cancels or editor fails.
    """
    editor = os.environ.get('EDITOR', 'vim')

    try:
        with tempfile.NamedTemporaryFile(mode='w+', suffix=suffix, delete=False) as f:
            if template:
                f.write(template)
            f.flush()
            path = Path(f.name)

        try:
            result = subprocess.run([editor, str(path)], check=False)
            if result.returncode != 0:
                click.echo("Editor exited with error.", err=True)
                return ""
            return path.read_text().strip()
        finally:
            path.unlink(missing_ok=True)

    except OSError as e:
        logger.debug(f"Editor {editor!r} failed: {e}")
        click.echo(f"Error opening editor: {e}", err=True)
        return ""


__all__ = [
    'get_data_dir',
    'get_config',
    'get_task_store',
    'ensure_saved',
    'resolve_task_id',
    'parse_due_date_option',
    'truncate',
    'format_task_table',
    'open_in_editor',
]
