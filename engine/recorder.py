"""
recorder.py — Trace Recorder & Run Metrics
==========================================
Runs one registered tracer to completion against a working copy of a
structure and packs everything it yielded into a Trace.

Usage:
    rec   = Recorder()
    trace = rec.record(REGISTRY["bfs"], graph.copy(), start=0)
    rec.metrics                      # RunMetrics for the card
    rec.export()                     # serialisable snapshot

Tracer contract:
  - Calling `info.fn(structure, **kwargs)` validates the inputs and may
    raise TraceInputError.  Nothing has been recorded at that point.
  - The generator yields frames.  Its return value, if any, is an error
    message for an operation the tracer rejected (queue overflow, …);
    it ends up on Trace.error.
  - Tracers tagged "mutating" leave their end state in the structure
    they were given; it becomes Trace.result.
"""

import logging
import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from algorithms import AlgoInfo
from algorithms.frame import Trace

logger = logging.getLogger(__name__)


@dataclass
class RunMetrics:
    algo_key:      str   = ""
    algo_label:    str   = ""
    total_frames:  int   = 0
    wall_time_ms:  float = 0.0
    error:         Optional[str] = None


class Recorder:
    """
    Attributes:
        trace   : The most recent Trace (None before the first run).
        metrics : RunMetrics for that trace.
    """

    def __init__(self):
        self.trace:   Optional[Trace]      = None
        self.metrics: Optional[RunMetrics] = None

    def record(self, info: AlgoInfo, structure: Any, **kwargs) -> Trace:
        gen = info.fn(structure, **kwargs)

        started = time.monotonic()
        frames: List[Any] = []
        error:  Optional[str] = None
        while True:
            try:
                frames.append(next(gen))
            except StopIteration as stop:
                error = stop.value
                break
        wall_ms = (time.monotonic() - started) * 1000

        if not frames:
            raise RuntimeError(f"{info.key} produced no frames")

        self.trace = Trace(
            algorithm=info.key,
            label=info.label,
            pseudocode=tuple(info.pseudocode),
            timeline=tuple(frames),
            result=structure if "mutating" in info.tags else None,
            error=error,
        )
        self.metrics = RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            total_frames=len(frames),
            wall_time_ms=round(wall_ms, 2),
            error=error,
        )
        logger.info("Recorded %s: %d frames in %.2f ms%s", info.key, len(frames), wall_ms,
                    f" (rejected: {error})" if error else "")
        return self.trace

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    def export(self) -> Dict[str, Any]:
        return {
            "metrics": asdict(self.metrics) if self.metrics else {},
            "trace":   self.trace.to_dict() if self.trace else None,
        }
