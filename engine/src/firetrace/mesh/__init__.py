"""Ordered status intervals along a single scanline."""

from firetrace.mesh.interval import IntervalLine, IntervalSegment

__all__ = ["IntervalLine", "IntervalSegment"]
