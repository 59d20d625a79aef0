"""Search tasks command."""

import click

from taskpad.cli.helpers import format_task_table, get_task_store


@click.command()
@click.argument('query')
@click.pass_context
def search(ctx, query):
    """Search tasks by text"""
    store = get_task_store(ctx)

    matching_tasks = store.search(query)

    if not matching_tasks:
        click.echo(f"\nNo tasks found matching '{query}'")
        return

    click.echo(f"\n📋 Tasks matching '{query}':")
    click.echo(format_task_table(matching_tasks))

    click.echo(f"\nFound {len(matching_tasks)} matching task(s)")
