"""
frame.py — Queue Frame Snapshot
===============================
QueueFrame mirrors the textbook array-queue picture: the contents, the
cells being touched, labelled pointer arrows (front / rear, coloured by
role) and an "internal state" panel with capacity, size, front, rear
and the operation in progress.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Any, Tuple, Iterable

from config import MAX_CAPACITY


@dataclass(frozen=True)
class QueueFrame:
    """
    Attributes:
        queue          : Contents at this instant, front first.
        highlights     : Indices being touched.
        pointers       : ({index, label, color}, …) arrows to draw.
        code_line      : 0-based pseudocode line, -1 when none applies.
        description    : What just happened.
        internal_state : {capacity, size, front, rear, current_op}.
    """

    queue:          Tuple[Any, ...]      = ()
    highlights:     Tuple[int, ...]      = ()
    pointers:       Tuple[dict, ...]     = ()
    code_line:      int                  = -1
    description:    str                  = ""
    internal_state: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def pointer(index: int, label: str, color: str = "primary") -> dict:
    return {"index": index, "label": label, "color": color}


def default_pointers(items: List[Any]) -> List[dict]:
    """front / rear arrows, or none for an empty queue."""
    if not items:
        return []
    return [pointer(0, "front"), pointer(len(items) - 1, "rear")]


class QueueFrameBuilder:
    """
    Tracers keep their own working list and pass it to build(); the
    builder copies it and fills in the internal-state panel.
    """

    def __init__(self, operation: str, capacity: int = MAX_CAPACITY):
        self.operation = operation
        self.capacity  = capacity

    def build(
        self,
        items: List[Any],
        code_line: int,
        description: str,
        highlights: Iterable[int] = (),
        pointers: Optional[Iterable[dict]] = None,
    ) -> QueueFrame:
        arrows = default_pointers(items) if pointers is None else pointers
        return QueueFrame(
            queue=tuple(items),
            highlights=tuple(highlights),
            pointers=tuple(dict(p) for p in arrows),
            code_line=code_line,
            description=description,
            internal_state={
                "capacity":   self.capacity,
                "size":       len(items),
                "front":      0 if items else -1,
                "rear":       len(items) - 1 if items else -1,
                "current_op": self.operation,
            },
        )
