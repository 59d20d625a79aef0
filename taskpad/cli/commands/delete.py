"""Delete task command."""

import click

from taskpad.cli.helpers import ensure_saved, get_task_store, resolve_task_id, truncate


@click.command()
@click.argument('task_id')
@click.confirmation_option(prompt='Are you sure you want to delete this task?')
@click.pass_context
def delete(ctx, task_id):
    """Delete a task"""
    store = get_task_store(ctx)
    task_metadata = resolve_task_id(store, task_id)

    store.delete(task_metadata.id)
    ensure_saved(store)

    click.echo(f"🗑️  Task {task_metadata.id} deleted")
    click.echo(f"   Task: {truncate(task_metadata.text)}")
