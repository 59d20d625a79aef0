"""Allow running taskpad as ``python -m taskpad``."""

from taskpad.cli.main import cli

if __name__ == '__main__':
    cli()
