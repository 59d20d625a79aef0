"""Show task command."""

import click

from taskpad.cli.helpers import get_task_store, resolve_task_id


@click.command()
@click.argument('task_id')
@click.pass_context
def show(ctx, task_id):
    """Show detailed information about a task"""
    store = get_task_store(ctx)

    # Get task (support short IDs)
    task_metadata = resolve_task_id(store, task_id)
    position = store.tasks.index(task_metadata) + 1

    click.echo("\n" + "=" * 60)
    click.echo(f"Task Details: {task_metadata.id}")
    click.echo("=" * 60)

    status = click.style("DONE", fg='green') if task_metadata.completed else click.style("OPEN", fg='yellow')
    click.echo("\n📋 Basic Information:")
    click.echo(f"   ID: {task_metadata.id}")
    click.echo(f"   Position: {position} of {len(store.tasks)}")
    click.echo(f"   Status: {status}")
    click.echo(f"   Category: {task_metadata.category.value}")
    click.echo(f"   Priority: {task_metadata.priority.value}")
    click.echo(f"   Due: {task_metadata.due_date_display}")

    click.echo("\n📄 Task:")
    for line in (task_metadata.text or "(empty)").split('\n'):
        click.echo(f"   {line}")
