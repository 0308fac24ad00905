"""Report versions of posrewrite and its parser backend."""

__copyright__ = """
Copyright (c) 2025 RapidStream Design Automation, Inc. and contributors.
All rights reserved. The contributor(s) of this file has/have agreed to the
RapidStream Contributor License Agreement.
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_distribution_version

import click

from posrewrite import __version__


def get_pyslang_version() -> str:
    """Return the installed pyslang version, as edits are located by it."""
    try:
        return get_distribution_version("pyslang")
    except PackageNotFoundError:
        return "not installed"


@click.command()
@click.option(
    "--short",
    is_flag=True,
    help="Print only the posrewrite version.",
)
def version(short: bool) -> None:
    """Print versions of posrewrite and pyslang."""
    if short:
        click.echo(__version__)
        return
    click.echo(f"posrewrite {__version__}")
    click.echo(f"pyslang {get_pyslang_version()}")
