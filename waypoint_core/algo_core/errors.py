from __future__ import annotations
from typing import Optional

class SmootherError(Exception):
    """Base for everything the smoothing core raises."""

class InsufficientPointsError(SmootherError, ValueError):
    def __init__(self, count: int, needed: int = 2):
        self.count = count
        self.needed = needed
        super().__init__(f"need at least {needed} points, got {count}")

class DegenerateSegmentError(SmootherError, ValueError):
    """Adjacent control points coincide, so a knot interval collapses to zero."""
    def __init__(self, distance: float, segment: Optional[int] = None):
        self.distance = distance
        self.segment = segment
        where = "" if segment is None else f" in segment {segment}"
        super().__init__(f"adjacent control points {distance:g} apart{where}")

    def at(self, segment: int) -> "DegenerateSegmentError":
        return DegenerateSegmentError(self.distance, segment)
