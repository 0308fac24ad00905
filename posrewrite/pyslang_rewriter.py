"""Rewrite a pyslang syntax tree through its source positions."""

__copyright__ = """
Copyright (c) 2025 RapidStream Design Automation, Inc. and contributors.
All rights reserved. The contributor(s) of this file has/have agreed to the
RapidStream Contributor License Agreement.
"""

import pyslang

from posrewrite.rewriter import Rewriter
from posrewrite.util import decode_text, encode_text


class PyslangRewriter:
    def __init__(self, syntax_tree: pyslang.SyntaxTree) -> None:
        self._syntax_tree = syntax_tree

        # Created on the first edit from the source text of its buffer.
        self._rewriter: Rewriter | None = None

        # All edits must happen on the same buffer ID.
        self._buffer_id: pyslang.BufferID | None = None

    def add_before(self, location: pyslang.SourceLocation, text: str) -> None:
        rewriter = self._get_rewriter(location.buffer)
        rewriter.insert(location.offset, encode_text(text))

    def remove(self, range_: pyslang.SourceRange) -> None:
        rewriter = self._get_rewriter(range_.start.buffer, range_.end.buffer)
        rewriter.delete(range_.start.offset, range_.end.offset)

    def replace(self, range_: pyslang.SourceRange, text: str) -> None:
        rewriter = self._get_rewriter(range_.start.buffer, range_.end.buffer)
        rewriter.replace(range_.start.offset, range_.end.offset, encode_text(text))

    def append(self, text: str) -> None:
        rewriter = self._get_rewriter(
            self._syntax_tree.root.sourceRange.start.buffer,
        )
        rewriter.append(encode_text(text))

    def _get_rewriter(self, *buffer_ids: pyslang.BufferID) -> Rewriter:
        for buffer_id in buffer_ids:
            if self._buffer_id is None:
                self._buffer_id = buffer_id
            else:
                assert self._buffer_id == buffer_id

        if self._rewriter is None:
            text = self._syntax_tree.sourceManager.getSourceText(self._buffer_id)
            assert ord(text[-1]) == 0, "original source must be null-terminated"
            self._rewriter = Rewriter(encode_text(text[:-1]))
        return self._rewriter

    def commit(self) -> pyslang.SyntaxTree:
        if self._rewriter is None:
            return self._syntax_tree

        self._syntax_tree = pyslang.SyntaxTree.fromText(
            decode_text(self._rewriter.data()),
        )
        self._rewriter = None
        self._buffer_id = None
        return self._syntax_tree
