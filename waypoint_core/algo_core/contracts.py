from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple
import math

XY = Tuple[float, float]   # raw (x, y) pair as supplied by callers

@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __post_init__(self):
        # no integer truncation anywhere downstream
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def of(cls, xy: Sequence[float]) -> "Point":
        if isinstance(xy, Point):
            return xy
        if len(xy) != 2:
            raise ValueError(f"point needs exactly 2 coordinates, got {len(xy)}")
        p = cls(xy[0], xy[1])
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            raise ValueError(f"point coordinates must be finite, got {tuple(xy)!r}")
        return p

    def __add__(self, o: "Point") -> "Point":
        return Point(self.x + o.x, self.y + o.y)

    def __sub__(self, o: "Point") -> "Point":
        return Point(self.x - o.x, self.y - o.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Point":
        return Point(self.x / k, self.y / k)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def as_tuple(self) -> XY:
        return self.x, self.y

@dataclass
class Path:
    """Ordered point sequence; order is the traversal order."""
    points: List[Point] = field(default_factory=list)

    def __post_init__(self):
        self.points = [Point.of(p) for p in self.points]

    @classmethod
    def from_xy(cls, pts: Iterable[Sequence[float]]) -> "Path":
        return cls(list(pts))

    def get_point(self, i: int) -> Point:
        return self.points[i]

    def add_point(self, p: Point) -> "Path":
        self.points.append(p)
        return self

    def push_front(self, p: Point) -> "Path":
        self.points.insert(0, p)
        return self

    def copy(self) -> "Path":
        return Path(list(self.points))

    def as_tuples(self) -> List[XY]:
        return [p.as_tuple() for p in self.points]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

@dataclass(frozen=True)
class Segment:
    # P(t) = a*t^3 + b*t^2 + c*t + d, t in [0,1]
    a: Point
    b: Point
    c: Point
    d: Point

    def evaluate(self, t: float) -> Point:
        t2 = t * t
        t3 = t2 * t
        return Point(self.a.x*t3 + self.b.x*t2 + self.c.x*t + self.d.x,
                     self.a.y*t3 + self.b.y*t2 + self.c.y*t + self.d.y)
