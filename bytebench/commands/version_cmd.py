"""Version command - displays bytebench version information."""

import platform

import click

from bytebench import __version__


def run_version(verbose: bool = False) -> None:
    """Display bytebench version information.

    Args:
        verbose: If True, also show the interpreter and machine.
    """
    click.echo(f"bytebench {__version__}")
    if verbose:
        click.echo(f"  Python:  {platform.python_version()}")
        click.echo(f"  Machine: {platform.machine()}")
