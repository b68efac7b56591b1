from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Union
from dataclasses import dataclass, field
import argparse, logging, os, sys, yaml

from .contracts import Path, Point, XY
from .errors import SmootherError
from .extrapolate import inject_boundary_controls
from .spline import ALPHA, TENSION, MIN_KNOT_DIST, build_segments
from .sampler import sample_segments

logger = logging.getLogger(__name__)

DEFAULT_CFG_PATH = os.path.join(os.path.dirname(__file__), "..", "config.yaml")
CFG_ERRORS = (OSError, ValueError, yaml.YAMLError)

DEMO_WAYPOINTS: List[XY] = [
    (10, 7), (15, 10), (20, 13), (25, 12), (30, 7), (35, 8), (40, 10),
]

def generate_smooth_path(path: Union[Path, Iterable[Sequence[float]]],
                         alpha: float = ALPHA,
                         tension: float = TENSION,
                         min_dist: float = MIN_KNOT_DIST) -> Path:
    """
    Waypoints -> densely sampled curve through every waypoint.

    Raises InsufficientPointsError for fewer than 2 waypoints and
    DegenerateSegmentError when adjacent control points coincide. No partial
    output is ever returned.
    """
    if not isinstance(path, Path):
        path = Path.from_xy(path)
    controls = inject_boundary_controls(path)
    segments = build_segments(controls, alpha=alpha, tension=tension, min_dist=min_dist)
    smoothed = sample_segments(segments)
    logger.debug("smoothed %d waypoints -> %d points", len(path), len(smoothed))
    return smoothed

# ===== output helpers =====
def format_point(p: Point) -> str:
    return f"{p.x:g}, {p.y:g}"

def format_path(path: Path) -> List[str]:
    return [format_point(p) for p in path]

@dataclass
class Cfg:
    alpha: float = ALPHA
    tension: float = TENSION
    min_knot_dist: float = MIN_KNOT_DIST
    log_level: str = "INFO"
    waypoints: List[XY] = field(default_factory=lambda: list(DEMO_WAYPOINTS))

    def smooth(self, waypoints: Optional[Iterable[Sequence[float]]] = None) -> Path:
        pts = self.waypoints if waypoints is None else waypoints
        return generate_smooth_path(pts, alpha=self.alpha, tension=self.tension,
                                    min_dist=self.min_knot_dist)

def _parse_waypoints(raw) -> List[XY]:
    if not isinstance(raw, list):
        raise ValueError(f"waypoints must be a list, got {type(raw).__name__}")
    out = []
    for i, wp in enumerate(raw):
        if not isinstance(wp, (list, tuple)) or len(wp) != 2:
            raise ValueError(f"waypoint #{i} must be an [x, y] pair, got {wp!r}")
        out.append(Point.of((float(wp[0]), float(wp[1]))).as_tuple())
    return out

def _load_cfg(path: str) -> Cfg:
    with open(path, "r", encoding="utf-8") as f:
        y = yaml.safe_load(f) or {}
    if not isinstance(y, dict):
        raise ValueError(f"config root must be a mapping, got {type(y).__name__}")
    spline = y.get("spline") or {}
    log = y.get("logging") or {}
    for name, sec in (("spline", spline), ("logging", log)):
        if not isinstance(sec, dict):
            raise ValueError(f"config section '{name}' must be a mapping")
    cfg = Cfg(
        alpha = float(spline.get("alpha", ALPHA)),
        tension = float(spline.get("tension", TENSION)),
        min_knot_dist = float(spline.get("min_knot_dist", MIN_KNOT_DIST)),
        log_level = str(log.get("level", "INFO")).upper(),
    )
    if "waypoints" in y:
        cfg.waypoints = _parse_waypoints(y["waypoints"])
    return cfg

def _emit(path: Path, out=None) -> None:
    out = out or sys.stdout
    for line in format_path(path):
        out.write(line + "\n")

# ===== DEMO / CLI =====
def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Catmull-Rom waypoint smoother")
    ap.add_argument("--demo", action="store_true", help="smooth the built-in demo waypoints")
    ap.add_argument("--config", default=None, help="YAML config with spline params and waypoints")
    args = ap.parse_args(argv)

    try:
        cfg = _load_cfg(args.config) if args.config else Cfg()
    except CFG_ERRORS as e:
        logging.basicConfig()
        logger.error("bad config %s: %s", args.config, e)
        return 1
    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO))
    if not args.demo and not args.config:
        ap.print_help()
        return 2

    waypoints = DEMO_WAYPOINTS if args.demo else cfg.waypoints
    try:
        smoothed = cfg.smooth(waypoints)
    except SmootherError as e:
        logger.error("smoothing failed: %s", e)
        return 1
    logger.info("%d waypoints -> %d points", len(waypoints), len(smoothed))
    _emit(smoothed)
    return 0

if __name__ == "__main__":
    sys.exit(main())
