"""Configuration management commands for taskpad."""

import click
from rich.console import Console
from rich.table import Table

from taskpad.cli.helpers import get_data_dir
from taskpad.models.config import LOG_LEVELS, TaskpadConfig
from taskpad.models.task import Category, Priority
from taskpad.utils.config_manager import ConfigManager


def _normalize(key, value):
    """Map user input onto the stored spelling of enum values."""
    if key == "default_category":
        return Category.from_label(value).value
    if key == "default_priority":
        return Priority.from_label(value).value
    return value


@click.group()
def config():
    """Manage taskpad configuration"""
    pass


@config.command()
@click.pass_context
def show(ctx):
    """Display current configuration"""
    console = Console()
    config_manager = ConfigManager(get_data_dir(ctx))

    stored = config_manager.get_config()
    current = stored or TaskpadConfig()

    table = Table(title="taskpad configuration")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for key, value in current.model_dump(mode="json").items():
        table.add_row(key, str(value))

    console.print(table)
    console.print(f"Data directory: {config_manager.data_dir}")
    if stored is None:
        console.print("[yellow]No configuration file found; showing defaults.[/yellow]")


@config.command(name='set')
@click.argument('key', type=click.Choice(list(TaskpadConfig.model_fields)))
@click.argument('value')
@click.pass_context
def set_value(ctx, key, value):
    """Set a configuration value

    \b
    Keys:
      default_category   Work or Personal
      default_priority   High, Medium or Low
      log_level          DEBUG, INFO, WARNING, ERROR or CRITICAL
    """
    console = Console()
    config_manager = ConfigManager(get_data_dir(ctx))

    try:
        config_manager.set_value(key, _normalize(key, value))
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        if key == "log_level":
            console.print(f"Valid levels: {', '.join(LOG_LEVELS)}")
        ctx.exit(1)

    console.print(f"[green]Set {key} = {value}[/green]")


@config.command()
@click.pass_context
def reset(ctx):
    """Reset configuration to defaults"""
    config_manager = ConfigManager(get_data_dir(ctx))
    config_manager.reset()
    click.echo("Configuration reset to defaults")
