from __future__ import annotations
from typing import List
import logging, math

from .contracts import Path, Point, Segment
from .errors import DegenerateSegmentError, InsufficientPointsError

logger = logging.getLogger(__name__)

ALPHA = 0.75          # knot exponent (centripetal family)
TENSION = 0.0         # no tangent damping
MIN_KNOT_DIST = 0.0   # adjacent controls at or below this distance are treated as coincident

def _dist(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)

def calc_coefficients(alpha: float, tension: float,
                      p0: Point, p1: Point, p2: Point, p3: Point,
                      min_dist: float = MIN_KNOT_DIST) -> Segment:
    """
    Power-basis coefficients of the Catmull-Rom piece running from p1 (t=0)
    to p2 (t=1); p0 and p3 only shape the end tangents.
    """
    d01, d12, d23 = _dist(p0, p1), _dist(p1, p2), _dist(p2, p3)
    for d in (d01, d12, d23):
        # NaN compares False, so finiteness is checked explicitly
        if not math.isfinite(d) or d <= min_dist:
            raise DegenerateSegmentError(d)

    t01 = d01 ** alpha
    t12 = d12 ** alpha
    t23 = d23 ** alpha
    for d, t in ((d01, t01), (d12, t12), (d23, t23)):
        if t <= 0.0:
            raise DegenerateSegmentError(d)

    span = p2 - p1
    m1 = (1.0 - tension) * (span + t12 * ((p1 - p0) / t01 - (p2 - p0) / (t01 + t12)))
    m2 = (1.0 - tension) * (span + t12 * ((p3 - p2) / t23 - (p3 - p1) / (t12 + t23)))

    seg = Segment(a=2.0 * (p1 - p2) + m1 + m2,
                  b=-3.0 * (p1 - p2) - 2.0 * m1 - m2,
                  c=m1,
                  d=p1)
    if not all(math.isfinite(v) for coef in (seg.a, seg.b, seg.c, seg.d) for v in coef):
        raise DegenerateSegmentError(max(d01, d12, d23))
    return seg

def build_segments(controls: Path,
                   alpha: float = ALPHA,
                   tension: float = TENSION,
                   min_dist: float = MIN_KNOT_DIST) -> List[Segment]:
    """One segment per 4-point window of an already extrapolated path."""
    n = len(controls)
    if n < 4:
        raise InsufficientPointsError(n, needed=4)
    segments = []
    for i in range(n - 3):
        try:
            seg = calc_coefficients(alpha, tension,
                                    controls.get_point(i), controls.get_point(i+1),
                                    controls.get_point(i+2), controls.get_point(i+3),
                                    min_dist=min_dist)
        except DegenerateSegmentError as e:
            raise e.at(i) from e
        segments.append(seg)
    logger.debug("built %d segments from %d control points", len(segments), n)
    return segments
