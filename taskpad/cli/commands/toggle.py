"""Toggle task completion command."""

import click

from taskpad.cli.helpers import ensure_saved, get_task_store, resolve_task_id, truncate


@click.command()
@click.argument('task_id')
@click.pass_context
def toggle(ctx, task_id):
    """Mark a task done, or not done again"""
    store = get_task_store(ctx)
    task = resolve_task_id(store, task_id)

    store.toggle_completion(task.id)
    ensure_saved(store)

    if store.get(task.id).completed:
        click.echo(f"✅ Completed: {truncate(task.text)}")
    else:
        click.echo(f"↩️  Reopened: {truncate(task.text)}")
