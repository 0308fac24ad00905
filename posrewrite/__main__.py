"""The main entry point for posrewrite."""

__copyright__ = """
Copyright (c) 2025 RapidStream Design Automation, Inc. and contributors.
All rights reserved. The contributor(s) of this file has/have agreed to the
RapidStream Contributor License Agreement.
"""

import logging

import click

from posrewrite import __version__
from posrewrite.steps.apply import apply
from posrewrite.steps.version import version
from posrewrite.util import Options, setup_logging

_logger = logging.getLogger().getChild(__name__)


@click.group()
@click.option(
    "--verbose",
    "-v",
    default=0,
    count=True,
    help="Increase logging verbosity.",
)
@click.option(
    "--quiet",
    "-q",
    default=0,
    count=True,
    help="Decrease logging verbosity.",
)
@click.option(
    "--work-dir",
    "-w",
    metavar="DIR",
    default="./work.out/",
    type=click.Path(file_okay=False),
    help="Use DIR for log files.",
)
@click.option(
    "--text-encoding",
    default=Options.text_encoding,
    help="Encoding of the text in edit scripts.",
)
@click.version_option(__version__, prog_name="posrewrite")
def entry_point(
    verbose: int,
    quiet: int,
    work_dir: str,
    text_encoding: str,
) -> None:
    """Rewrite source files with edits addressed by original positions."""
    setup_logging(verbose, quiet, work_dir)

    Options.text_encoding = text_encoding

    _logger.info("posrewrite version: %s", __version__)


entry_point.add_command(apply)
entry_point.add_command(version)

if __name__ == "__main__":
    entry_point(prog_name="posrewrite")
