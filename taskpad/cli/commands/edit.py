"""Edit task command."""

import click

from taskpad.cli.helpers import (
    ensure_saved,
    get_task_store,
    parse_due_date_option,
    resolve_task_id,
    truncate,
)
from taskpad.cli.util import fill_draft_interactively, get_text_from_editor
from taskpad.models.task import Category, Priority, TaskDraft


@click.command()
@click.argument('task_id')
@click.option('--text', '-t', help='New task text')
@click.option('--category', '-c', type=click.Choice([c.value for c in Category], case_sensitive=False),
              help='New category')
@click.option('--priority', '-p', type=click.Choice([p.value for p in Priority], case_sensitive=False),
              help='New priority')
@click.option('--due', '-d', callback=parse_due_date_option,
              help='New due date: today, tomorrow, YYYY-MM-DD')
@click.option('--editor', '-e', 'use_editor', is_flag=True, help='Edit the task text in $EDITOR')
@click.option('--interactive', '-i', is_flag=True, help='Edit every field with prompts')
@click.pass_context
def edit(ctx, task_id, text, category, priority, due, use_editor, interactive):
    """Edit a task's text, category, priority or due date"""
    store = get_task_store(ctx)
    task = resolve_task_id(store, task_id)

    draft = TaskDraft.from_task(task).with_changes(
        text=text,
        category=Category(category) if category else None,
        priority=Priority(priority) if priority else None,
        due_date=due
    )

    if use_editor:
        body = get_text_from_editor(draft.text)
        if body is not None:
            draft = draft.with_changes(text=body)

    if interactive:
        draft = fill_draft_interactively(draft)
        if draft is None:
            click.echo("Cancelled.")
            return
    elif draft == TaskDraft.from_task(task):
        click.echo("Nothing to change. Use --text, --category, --priority, --due or --interactive.")
        return

    store.save(draft)
    ensure_saved(store)

    updated = store.get(task.id)
    click.echo(f"✏️  Updated task {updated.id}: {truncate(updated.text)}")
    click.echo(f"   {updated.category.value} · {updated.priority.value} · due {updated.due_date_display}")
