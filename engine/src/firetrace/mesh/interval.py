"""Scanline status intervals and the overlay algorithm.

An IntervalLine is a horizontal or vertical scanline at a fixed world
position holding an ordered, non-overlapping sequence of IntervalSegments.
Adjacent, connected segments never share a status: the overlay merges them
as it rebuilds the line.

A line built with `IntervalLine.filled()` spans [begins, ends] and always
ends with a zero-width EDGE sentinel at `ends`. Sentinel segments (EDGE or
UNBURNABLE at either extremity) are never split, moved or removed by an
overlay. Overlays are clamped to the line extent: the span between the
sentinels, or the first or last segment where a sentinel is missing.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from firetrace.types import BurnStatus


@dataclass(frozen=True)
class IntervalSegment:
    """A [begins, ends) interval of constant burn status."""

    begins: float
    ends: float
    status: BurnStatus

    def __post_init__(self) -> None:
        if self.begins > self.ends:
            lo, hi = self.ends, self.begins
            object.__setattr__(self, "begins", lo)
            object.__setattr__(self, "ends", hi)

    @property
    def length(self) -> float:
        return self.ends - self.begins

    def connects(self, other: IntervalSegment) -> bool:
        """True if this segment and `other` share an endpoint."""
        return self.begins == other.ends or self.ends == other.begins

    def overlaps(self, begins: float, ends: float) -> bool:
        return self.begins < ends and self.ends > begins

    def contains(self, distance: float) -> bool:
        return self.begins <= distance < self.ends


def _extend(segments: list[IntervalSegment], begins: float, ends: float, status: BurnStatus) -> None:
    """Append [begins, ends) to the builder, merging into a connected equal-status tail."""
    if segments:
        last = segments[-1]
        if last.ends == begins and last.status == status:
            segments[-1] = IntervalSegment(last.begins, ends, status)
            return
    segments.append(IntervalSegment(begins, ends, status))


class IntervalLine:
    """Ordered burn-status intervals along one scanline."""

    def __init__(self, pos: float, segments: Sequence[IntervalSegment] = ()):
        self._pos = pos
        self._segments: tuple[IntervalSegment, ...] = tuple(segments)

    @classmethod
    def filled(
        cls,
        pos: float,
        begins: float,
        ends: float,
        status: BurnStatus = BurnStatus.UNBURNED,
    ) -> IntervalLine:
        """Create a line spanning [begins, ends] with a trailing EDGE sentinel."""
        return cls(pos).fill(begins, ends, status)

    def __repr__(self) -> str:
        return f"IntervalLine(pos={self._pos!r}, segments={list(self._segments)!r})"

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[IntervalSegment]:
        return iter(self._segments)

    def __getitem__(self, idx: int) -> IntervalSegment:
        return self._segments[idx]

    @property
    def pos(self) -> float:
        """World coordinate of the scanline."""
        return self._pos

    @property
    def segments(self) -> tuple[IntervalSegment, ...]:
        return self._segments

    @property
    def begins(self) -> float | None:
        return self._segments[0].begins if self._segments else None

    @property
    def ends(self) -> float | None:
        return self._segments[-1].ends if self._segments else None

    def fill(
        self, begins: float, ends: float, status: BurnStatus = BurnStatus.UNBURNED
    ) -> IntervalLine:
        """Reset the line to a single `status` segment plus the EDGE sentinel."""
        lo, hi = min(begins, ends), max(begins, ends)
        self._segments = (
            IntervalSegment(lo, hi, status),
            IntervalSegment(hi, hi, BurnStatus.EDGE),
        )
        return self

    def _partition(
        self,
    ) -> tuple[tuple[IntervalSegment, ...], tuple[IntervalSegment, ...], tuple[IntervalSegment, ...]]:
        """Split the segments into (leading sentinel, interior, trailing sentinel)."""
        segments = self._segments
        tail: tuple[IntervalSegment, ...] = ()
        head: tuple[IntervalSegment, ...] = ()
        if segments and segments[-1].status.is_sentinel:
            tail = segments[-1:]
            segments = segments[:-1]
        if segments and segments[0].status.is_sentinel:
            head = segments[:1]
            segments = segments[1:]
        return head, segments, tail

    def _build_overlay(
        self, begins: float, ends: float, status: BurnStatus
    ) -> tuple[IntervalSegment, ...]:
        begins, ends = min(begins, ends), max(begins, ends)
        head, interior, tail = self._partition()
        if head:
            begins = max(begins, head[0].ends)
        elif interior:
            begins = max(begins, interior[0].begins)
        if tail:
            ends = min(ends, tail[0].begins)
        elif interior:
            ends = min(ends, interior[-1].ends)
        if begins >= ends:
            return self._segments

        out: list[IntervalSegment] = list(head)
        n = len(interior)
        idx = 0
        # Segments entirely before the overlay are kept as-is
        while idx < n and interior[idx].ends < begins:
            out.append(interior[idx])
            idx += 1
        # Leading portion of the segment containing `begins`
        if idx < n and interior[idx].begins < begins:
            segment = interior[idx]
            _extend(out, segment.begins, begins, segment.status)
        _extend(out, begins, ends, status)
        # Segments covered by the overlay are dropped
        while idx < n and interior[idx].ends <= ends:
            idx += 1
        # Trailing portion of the segment containing `ends`
        if idx < n and interior[idx].begins < ends:
            segment = interior[idx]
            _extend(out, ends, segment.ends, segment.status)
            idx += 1
        for segment in interior[idx:]:
            _extend(out, segment.begins, segment.ends, segment.status)
        out.extend(tail)
        return tuple(out)

    def overlay(self, begins: float, ends: float, status: BurnStatus) -> IntervalLine:
        """Incorporate [begins, ends) with `status` into this line.

        Reversed ranges are normalized and ranges reaching past the line
        extent are clamped. Partially covered segments are split, covered
        segments are replaced and connected equal-status neighbors merge.

        Returns:
            This line, updated.
        """
        self._segments = self._build_overlay(begins, ends, status)
        return self

    def overlaid(self, begins: float, ends: float, status: BurnStatus) -> IntervalLine:
        """Return a new line equal to this one overlaid with [begins, ends)."""
        return IntervalLine(self._pos, self._build_overlay(begins, ends, status))

    def value_at(self, distance: float) -> BurnStatus | None:
        """Status at `distance` along the line, or None outside any segment."""
        for segment in self._segments:
            if segment.contains(distance) or segment.begins == distance == segment.ends:
                return segment.status
            if segment.begins > distance:
                break
        return None

    def scanline_fire_fronts(self) -> list[float]:
        """Interior positions where the status flips between unburned and burnt."""
        _, interior, _ = self._partition()
        fronts = []
        for prev, segment in zip(interior, interior[1:]):
            if prev.ends != segment.begins:
                continue
            if (prev.status is BurnStatus.UNBURNED and segment.status.is_burnt) or (
                prev.status.is_burnt and segment.status is BurnStatus.UNBURNED
            ):
                fronts.append(segment.begins)
        return fronts

    def segments_between(self, begins: float, ends: float) -> list[IntervalSegment]:
        """Segments overlapping [begins, ends)."""
        begins, ends = min(begins, ends), max(begins, ends)
        return [s for s in self._segments if s.overlaps(begins, ends)]

    def burned_length(self) -> float:
        return math.fsum(s.length for s in self._segments if s.status.is_burnt)

    def is_consolidated(self) -> bool:
        """True if segments are ordered, disjoint and never repeat a connected status."""
        for prev, segment in zip(self._segments, self._segments[1:]):
            if segment.begins < prev.ends:
                return False
            if prev.ends == segment.begins and prev.status == segment.status:
                return False
        return True
