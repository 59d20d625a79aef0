"""List tasks command."""

import click

from taskpad.cli.helpers import format_task_table, get_task_store
from taskpad.models.task import Category, Priority


@click.command()
@click.option('--category', '-c', type=click.Choice([c.value for c in Category], case_sensitive=False),
              help='Only tasks in this category')
@click.option('--priority', '-p', type=click.Choice([p.value for p in Priority], case_sensitive=False),
              help='Only tasks with this priority')
@click.option('--done/--pending', 'completed', default=None,
              help='Only completed or only open tasks')
@click.pass_context
def list_tasks(ctx, category, priority, completed):
    """List tasks in the order they were added"""
    store = get_task_store(ctx)

    tasks = store.filter(
        category=Category(category) if category else None,
        priority=Priority(priority) if priority else None,
        completed=completed
    )

    if not tasks:
        if store.tasks:
            click.echo("No tasks match the given filters")
        else:
            click.echo("No tasks yet. Add one with 'taskpad add'.")
        return

    click.echo(format_task_table(tasks))

    done = sum(1 for task in tasks if task.completed)
    click.echo(f"\n{len(tasks)} task(s), {done} done")
