"""Declarative edits for source files sharing one position numbering."""

from __future__ import annotations

__copyright__ = """
Copyright (c) 2025 RapidStream Design Automation, Inc. and contributors.
All rights reserved. The contributor(s) of this file has/have agreed to the
RapidStream Contributor License Agreement.
"""

import logging
from pathlib import Path
from typing import Annotated, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field

from posrewrite.rewriter import Rewriter
from posrewrite.util import encode_text

_logger = logging.getLogger().getChild(__name__)


class Model(BaseModel):
    """The base model of immutable edit script types."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class ReplaceEdit(Model):
    """Replace original positions `[start, end)` with `text`."""

    kind: Literal["replace"] = "replace"
    start: int
    end: int
    text: str

    def apply_to(self, rewriter: Rewriter) -> None:
        rewriter.replace(self.start, self.end, encode_text(self.text))


class InsertEdit(Model):
    """Insert `text` before original position `pos`."""

    kind: Literal["insert"] = "insert"
    pos: int
    text: str

    def apply_to(self, rewriter: Rewriter) -> None:
        rewriter.insert(self.pos, encode_text(self.text))


class DeleteEdit(Model):
    """Delete original positions `[start, end)`."""

    kind: Literal["delete"] = "delete"
    start: int
    end: int

    def apply_to(self, rewriter: Rewriter) -> None:
        rewriter.delete(self.start, self.end)


class AppendEdit(Model):
    """Append `text` after all content."""

    kind: Literal["append"] = "append"
    text: str

    def apply_to(self, rewriter: Rewriter) -> None:
        rewriter.append(encode_text(self.text))


AnyEdit = Annotated[
    ReplaceEdit | InsertEdit | DeleteEdit | AppendEdit,
    Field(discriminator="kind"),
]


class FileEdits(Model):
    """Edits of a single file.

    Positions of the edits are offsets into the file shifted by `base`, so
    that files of one script can share a global position numbering.
    """

    path: str
    base: int = 0
    edits: tuple[AnyEdit, ...] = ()

    def rewrite(self, original: bytes) -> bytes:
        """Apply the edits in order to `original` and return the result."""
        rewriter = Rewriter(original, self.base)
        for edit in self.edits:
            edit.apply_to(rewriter)
        _logger.debug("applied %d edits to `%s`", len(self.edits), self.path)
        return rewriter.data()


class EditScript(Model):
    """Edits of a set of files."""

    files: tuple[FileEdits, ...] = ()


def load_edit_script(path: str | Path) -> EditScript:
    """Load an edit script from a YAML or JSON file."""
    path = Path(path)
    _logger.info("loading edit script from `%s`.", path)
    with open(path, encoding="utf-8") as fp:
        if path.suffix in {".yaml", ".yml"}:
            return EditScript.model_validate(yaml.safe_load(fp))
        return EditScript.model_validate_json(fp.read())
