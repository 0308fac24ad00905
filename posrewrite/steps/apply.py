"""Apply an edit script to source files."""

__copyright__ = """
Copyright (c) 2025 RapidStream Design Automation, Inc. and contributors.
All rights reserved. The contributor(s) of this file has/have agreed to the
RapidStream Contributor License Agreement.
"""

import logging
from pathlib import Path

import click

from posrewrite.edit_script import FileEdits, load_edit_script
from posrewrite.rewriter import RewriteError

_logger = logging.getLogger().getChild(__name__)


@click.command()
@click.option(
    "edits_file",
    "--edits",
    "-e",
    required=True,
    type=click.Path(dir_okay=False, readable=True, exists=True),
    help="Edit script, in JSON or YAML.",
)
@click.option(
    "--root",
    "-r",
    metavar="DIR",
    default=".",
    type=click.Path(file_okay=False, exists=True),
    help="Directory that file paths in the edit script are relative to.",
)
@click.option(
    "--output-dir",
    "-o",
    metavar="DIR",
    required=True,
    type=click.Path(file_okay=False),
    help="Directory to write rewritten files to.",
)
def apply(edits_file: str, root: str, output_dir: str) -> None:
    """Apply an edit script to source files."""
    script = load_edit_script(edits_file)
    for file_edits in script.files:
        rewrite_file(file_edits, Path(root), Path(output_dir))
    _logger.info("rewrote %d files into `%s`.", len(script.files), output_dir)


def rewrite_file(file_edits: FileEdits, root: Path, output_dir: Path) -> None:
    """Rewrite one file of an edit script from `root` into `output_dir`."""
    input_file = root / file_edits.path
    output_file = output_dir / file_edits.path

    try:
        original = input_file.read_bytes()
    except FileNotFoundError:
        msg = f"Input file {input_file} does not exist."
        raise click.BadArgumentUsage(msg)

    try:
        data = file_edits.rewrite(original)
    except RewriteError as e:
        _logger.error("cannot rewrite `%s`: %s", input_file, e)
        msg = f"cannot rewrite {input_file}: {e}"
        raise click.ClickException(msg) from e

    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_bytes(data)
    _logger.info("wrote `%s`.", output_file)
