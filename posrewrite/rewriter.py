"""Rewrite a source buffer with edits addressed by original positions."""

from __future__ import annotations

__copyright__ = """
Copyright (c) 2025 RapidStream Design Automation, Inc. and contributors.
All rights reserved. The contributor(s) of this file has/have agreed to the
RapidStream Contributor License Agreement.
"""

import bisect
import logging
from itertools import chain

from intervaltree import IntervalTree

from posrewrite.segment import Buffer, Segment

_logger = logging.getLogger().getChild(__name__)


class RewriteError(Exception):
    """Base class of errors raised by `Rewriter`."""


class PositionError(RewriteError, IndexError):
    """A position does not belong to the coordinate space of the rewriter."""


class OverlappingEditError(RewriteError, ValueError):
    """An edit lands on a range that was already edited."""


class Rewriter:
    """Splices edits into an immutable buffer.

    Positions are always expressed in the coordinate space of the original
    buffer, i.e., `[base, base + len(original)]`, regardless of the edits made
    before.  Edits may be issued in any order but must not overlap.  Text
    inserted at the same position is emitted in the order of the calls.

    >>> rewriter = Rewriter(b"0123456789")
    >>> rewriter.replace(2, 5, b"XYZ")
    >>> rewriter.insert(8, b"-")
    >>> rewriter.append(b"!")
    >>> rewriter.data()
    b'01XYZ567-89!'
    """

    def __init__(self, original: Buffer, base: int = 0) -> None:
        self._base = base
        self._end = base + len(original)

        # Segments tagged with original positions, sorted by position.
        self._segments = [Segment(base, self._end, memoryview(original))]

        # Appended segments, emitted after every positioned segment.
        self._tail: list[Segment] = []

        # Non-empty ranges replaced so far, and positions of insertions.
        self._replaced = IntervalTree()
        self._inserted: list[int] = []

    @property
    def base(self) -> int:
        return self._base

    @property
    def end(self) -> int:
        return self._end

    @property
    def segments(self) -> tuple[Segment, ...]:
        return (*self._segments, *self._tail)

    def locate(self, pos: int, as_end: bool = False) -> tuple[int, int]:
        """Find the segment covering `pos`.

        A position on the boundary of two segments resolves to the following
        segment, or to the preceding segment if `as_end` is set.  This way an
        edit ending at a position never collides with one starting there.

        Args:
            pos (int): Position in the original coordinate space.
            as_end (bool): Whether `pos` is the exclusive end of a range.

        Returns:
            tuple[int, int]: Index of the segment and the offset in it.

        Raises:
            PositionError: If no segment covers `pos`.
        """
        for idx, seg in enumerate(self._segments):
            if as_end:
                found = seg.start < pos <= seg.end
            else:
                found = seg.start <= pos < seg.end
            if found:
                return idx, pos - seg.start

        kind = "end" if as_end else "start"
        msg = (
            f"no segment covers {kind} position {pos} "
            f"in [{self._base}, {self._end}]"
        )
        raise PositionError(msg)

    def replace(self, start: int, end: int, data: Buffer) -> None:
        """Replace original positions `[start, end)` with `data`."""
        data = memoryview(data)
        self._check_range(start, end)
        if start == end:
            self.insert(start, data)
            return
        self._check_replacement(start, end)
        _logger.debug("replacing [%d, %d) with %d bytes", start, end, len(data))

        si, so = self.locate(start)
        ei, eo = self.locate(end, as_end=True)

        # Segments strictly between `si` and `ei` are dropped with their data.
        pieces = (
            self._segments[si].prefix(so),
            Segment(start, end, data),
            self._segments[ei].suffix(eo),
        )
        self._segments[si : ei + 1] = [seg for seg in pieces if not seg.is_void()]
        self._replaced.addi(start, end)

    def insert(self, pos: int, data: Buffer) -> None:
        """Insert `data` before original position `pos`."""
        data = memoryview(data)
        self._check_position(pos)
        if not data:
            return
        self._check_insertion(pos)
        _logger.debug("inserting %d bytes at %d", len(data), pos)

        # The end of the domain is not covered by any segment as a start.
        if pos == self._end:
            self._segments.append(Segment(pos, pos, data))
        else:
            idx, offset = self.locate(pos)
            seg = self._segments[idx]
            pieces = (seg.prefix(offset), Segment(pos, pos, data), seg.suffix(offset))
            self._segments[idx : idx + 1] = [s for s in pieces if not s.is_void()]
        bisect.insort(self._inserted, pos)

    def delete(self, start: int, end: int) -> None:
        """Delete original positions `[start, end)`."""
        self.replace(start, end, b"")

    def append(self, data: Buffer) -> None:
        """Append `data` after all content, unreachable by positions."""
        data = memoryview(data)
        start = self._tail[-1].end if self._tail else self._end
        self._tail.append(Segment(start, start + len(data), data))
        _logger.debug("appending %d bytes", len(data))

    def data(self) -> bytes:
        """Return the rewritten buffer."""
        return b"".join(seg.data for seg in chain(self._segments, self._tail))

    def _check_position(self, pos: int) -> None:
        if not self._base <= pos <= self._end:
            msg = f"position {pos} is out of [{self._base}, {self._end}]"
            raise PositionError(msg)

    def _check_range(self, start: int, end: int) -> None:
        self._check_position(start)
        self._check_position(end)
        if start > end:
            msg = f"range [{start}, {end}) is inverted"
            raise PositionError(msg)

    def _check_replacement(self, start: int, end: int) -> None:
        if overlapping := self._replaced.overlap(start, end):
            interval = min(overlapping)
            msg = (
                f"range [{start}, {end}) overlaps replaced range "
                f"[{interval.begin}, {interval.end})"
            )
            raise OverlappingEditError(msg)

        idx = bisect.bisect_right(self._inserted, start)
        if idx < len(self._inserted) and self._inserted[idx] < end:
            msg = (
                f"range [{start}, {end}) overlaps insertion "
                f"at {self._inserted[idx]}"
            )
            raise OverlappingEditError(msg)

    def _check_insertion(self, pos: int) -> None:
        for interval in sorted(self._replaced.at(pos)):
            if interval.begin < pos:
                msg = (
                    f"insertion at {pos} is inside replaced range "
                    f"[{interval.begin}, {interval.end})"
                )
                raise OverlappingEditError(msg)
