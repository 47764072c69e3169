"""
frame.py — Tree Frame Snapshot
==============================
Every tree tracer is a generator that yields TreeFrame objects.  A
TreeFrame carries a private copy of the node table (with positions and
child links), the edges derived from it, the root pointer, and the
overlay state for one instant: which nodes are being compared, which
have been "evaluated" (printed, found, rejected), the running output
text and optional per-node labels such as balance factors.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional, Any, Tuple, Iterable


@dataclass(frozen=True)
class TreeFrame:
    """
    Attributes:
        nodes       : Plain-dict copies (id, value, x, y, left, right, parent_id).
        edges       : {from, to, side} dicts derived from child links.
        root_id     : Root pointer at this instant (None = empty tree).
        highlights  : Node ids under comparison.
        evaluated   : Node ids already settled (printed / matched / rejected).
        code_line   : 0-based pseudocode line, -1 when none applies.
        description : What just happened.
        output      : Running text output.
        labels      : Optional {node_id: text} annotations.
    """

    nodes:       Tuple[dict, ...]          = ()
    edges:       Tuple[dict, ...]          = ()
    root_id:     Optional[int]             = None
    highlights:  Tuple[int, ...]           = ()
    evaluated:   Tuple[int, ...]           = ()
    code_line:   int                       = -1
    description: str                       = ""
    output:      str                       = ""
    labels:      Optional[Dict[int, str]]  = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class TreeFrameBuilder:
    """
    Scratch-pad for tree tracers.  `output` and `labels` persist between
    frames until the tracer changes them; highlights and evaluated ids are
    per-frame arguments.
    """

    def __init__(self, tree):
        self.tree   = tree
        self.output: str = ""
        self.labels: Optional[Dict[int, str]] = None

    def build(
        self,
        code_line: int,
        description: str,
        highlights: Iterable[int] = (),
        evaluated: Iterable[int] = (),
        output: Optional[str] = None,
    ) -> TreeFrame:
        if output is not None:
            self.output = output
        nodes, edges = self.tree.snapshot()
        return TreeFrame(
            nodes=nodes,
            edges=edges,
            root_id=self.tree.root_id,
            highlights=tuple(h for h in highlights if h is not None),
            evaluated=tuple(e for e in evaluated if e is not None),
            code_line=code_line,
            description=description,
            output=self.output,
            labels=None if self.labels is None else dict(self.labels),
        )

    def empty(self) -> TreeFrame:
        """The one-frame trace for read-only tracers run on an empty tree."""
        return self.build(-1, "Tree is empty.")
