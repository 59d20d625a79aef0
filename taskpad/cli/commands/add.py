"""Add task command."""

import click

from taskpad.cli.helpers import (
    ensure_saved,
    get_config,
    get_task_store,
    parse_due_date_option,
    truncate,
)
from taskpad.cli.util import fill_draft_interactively, get_text_from_editor
from taskpad.models.task import Category, Priority, TaskDraft


@click.command()
@click.argument('text', nargs=-1)
@click.option('--category', '-c', type=click.Choice([c.value for c in Category], case_sensitive=False),
              help='Task category (default from config)')
@click.option('--priority', '-p', type=click.Choice([p.value for p in Priority], case_sensitive=False),
              help='Task priority (default from config)')
@click.option('--due', '-d', callback=parse_due_date_option,
              help='Due date: today, tomorrow, YYYY-MM-DD (default today)')
@click.option('--editor', '-e', 'use_editor', is_flag=True, help='Write the task text in $EDITOR')
@click.option('--interactive', '-i', is_flag=True, help='Fill in every field with prompts')
@click.pass_context
def add(ctx, text, category, priority, due, use_editor, interactive):
    """Add a new task"""
    store = get_task_store(ctx)

    draft = TaskDraft.new(get_config(ctx)).with_changes(
        text=' '.join(text) if text else None,
        category=Category(category) if category else None,
        priority=Priority(priority) if priority else None,
        due_date=due
    )

    if interactive:
        draft = fill_draft_interactively(draft)
        if draft is None:
            click.echo("Cancelled.")
            return
    elif not text:
        body = get_text_from_editor() if use_editor else None
        if body is None:
            body = click.prompt("Task", default="", show_default=False)
        draft = draft.with_changes(text=body)

    tasks = store.save(draft)
    ensure_saved(store)

    task = tasks[-1]
    click.echo(f"✅ Added task {task.id}: {truncate(task.text)}")
    click.echo(f"   {task.category.value} · {task.priority.value} · due {task.due_date_display}")
