from __future__ import annotations
from typing import Sequence

from .contracts import Path, Segment

SAMPLES_PER_SEGMENT = 10   # t = 0.1, 0.2, ..., 1.0

def sample_segments(segments: Sequence[Segment]) -> Path:
    out = Path()
    if not segments:
        return out
    # t=0 of the first piece; every later start equals the previous t=1
    out.add_point(segments[0].d)
    for seg in segments:
        # integer counter so each piece gets exactly SAMPLES_PER_SEGMENT points
        for k in range(1, SAMPLES_PER_SEGMENT + 1):
            out.add_point(seg.evaluate(k / float(SAMPLES_PER_SEGMENT)))
    return out
