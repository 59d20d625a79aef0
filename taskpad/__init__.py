"""taskpad - a local to-do list with a command-line front end."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
