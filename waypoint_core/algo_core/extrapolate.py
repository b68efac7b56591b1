from __future__ import annotations
import logging

from .contracts import Path
from .errors import InsufficientPointsError

logger = logging.getLogger(__name__)

def inject_boundary_controls(path: Path) -> Path:
    """
    Return a copy of `path` with one control point prepended and one appended.

    Each boundary control is collinear with the two nearest waypoints, mirrored
    across the end waypoint, so the first and last segments get a tangent.
    """
    n = len(path)
    if n < 2:
        raise InsufficientPointsError(n)
    out = path.copy()

    first, second = path.get_point(0), path.get_point(1)
    out.push_front(first + (first - second))

    last, before = path.get_point(-1), path.get_point(-2)
    out.add_point(last + (last - before))

    logger.debug("boundary controls: start=%s end=%s", out.get_point(0), out.get_point(-1))
    return out
