"""Main CLI entry point for taskpad."""

import logging
from pathlib import Path

import click

from ..core.constants import DATA_DIR_ENV_VAR, DEFAULT_DATA_DIR
from ..utils.config_manager import ConfigManager
from ..utils.logging_setup import configure_logging
from .commands.add import add
from .commands.edit import edit
from .commands.toggle import toggle
from .commands.delete import delete
from .commands.list_tasks import list_tasks
from .commands.show import show
from .commands.search import search
from .commands.config import config


@click.group()
@click.option('--data-dir', envvar=DATA_DIR_ENV_VAR,
              type=click.Path(file_okay=False, path_type=Path),
              help=f'Directory holding tasks and config (default {DEFAULT_DATA_DIR})')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
@click.pass_context
def cli(ctx, data_dir, verbose):
    """taskpad - a to-do list for the terminal"""
    data_dir = data_dir or DEFAULT_DATA_DIR
    config = ConfigManager(data_dir).load_or_default()
    configure_logging(logging.DEBUG if verbose else config.log_level_value)
    ctx.obj = {"data_dir": data_dir, "config": config}


# Register commands
cli.add_command(add)
cli.add_command(edit)
cli.add_command(toggle)
cli.add_command(delete)
cli.add_command(list_tasks, name='list')
cli.add_command(show)
cli.add_command(search)
cli.add_command(config)


if __name__ == '__main__':
    cli()
