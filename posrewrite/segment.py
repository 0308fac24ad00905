"""A run of output bytes tagged with the original range it stands for."""

from __future__ import annotations

__copyright__ = """
Copyright (c) 2025 RapidStream Design Automation, Inc. and contributors.
All rights reserved. The contributor(s) of this file has/have agreed to the
RapidStream Contributor License Agreement.
"""

from typing import NamedTuple

Buffer = bytes | bytearray | memoryview


class Segment(NamedTuple):
    """Contiguous output bytes standing for original positions `[start, end)`.

    For unedited spans `data` is a view into the original buffer and its
    length equals `end - start`.  Replacement spans hold the caller's bytes,
    whose length is unrelated to the range.  A zero-width range holds text
    inserted at `start`.
    """

    start: int
    end: int
    data: Buffer

    @property
    def width(self) -> int:
        return self.end - self.start

    def prefix(self, offset: int) -> Segment:
        """Return the part of an unedited segment before `offset`."""
        if offset == self.width:
            return self
        return Segment(self.start, self.start + offset, self.data[:offset])

    def suffix(self, offset: int) -> Segment:
        """Return the part of an unedited segment from `offset` on."""
        if offset == 0:
            return self
        return Segment(self.start + offset, self.end, self.data[offset:])

    def is_void(self) -> bool:
        """Return if the segment neither covers a position nor emits bytes."""
        return self.start == self.end and not self.data
