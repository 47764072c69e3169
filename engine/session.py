"""
session.py — Live Structure + Playback Sessions
===============================================
One session per structure family.  A session owns the live structure,
a Recorder and a Playback, and enforces the editing / tracing contract:

  - every edit discards the current trace (playback returns to IDLE);
  - every run snapshots the structure, records a trace against the
    snapshot, adopts the trace's end state when the tracer changed it,
    and loads the trace into playback;
  - with no trace loaded, `current_frame()` is a "live" frame of the
    structure at rest (description "Ready", code_line -1).

Edits arrive as (op, payload) pairs from the HTTP layer; `edit()`
dispatches to the matching `edit_<op>` method.
"""

import logging
import random
from typing import Any, Dict, Optional

from errors import TraceInputError, QueueOverflowError, QueueUnderflowError
from algorithms import AlgoInfo, GraphFrameBuilder, Trace, require_algorithm, tracer_kwargs, select_params
from graph import Graph
from graph.examples import load_example
from tree import BinaryTree
from tree_algorithms import TreeFrameBuilder, require_tree_algorithm
from queues import BoundedQueue, parse_item
from queue_algorithms import QueueFrameBuilder, require_queue_algorithm
from interpreter import Memory, run_code
from engine.playback import Playback
from engine.recorder import Recorder

logger = logging.getLogger(__name__)

READY = "Ready"


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------
def _field(data: Dict[str, Any], key: str, cast=int, default: Any = ...) -> Any:
    """data[key] converted with `cast`; missing or malformed → TraceInputError."""
    raw = data.get(key)
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        if default is not ...:
            return default
        raise TraceInputError(f"Missing field '{key}'.")
    try:
        return cast(raw)
    except (TypeError, ValueError):
        raise TraceInputError(f"Invalid {key}: {raw!r}") from None


def _flag(data: Dict[str, Any], key: str, default: bool = False) -> bool:
    raw = data.get(key, default)
    if isinstance(raw, str):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    return bool(raw)


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------
class Session:
    family = ""

    def __init__(self):
        self.playback = Playback()
        self.recorder = Recorder()
        self.structure: Any = None

    @property
    def trace(self) -> Optional[Trace]:
        return self.playback.trace

    # --- editing -------------------------------------------------------------
    def edit(self, op: str, payload: Optional[Dict[str, Any]] = None) -> None:
        handler = getattr(self, f"edit_{op}", None)
        if handler is None:
            raise TraceInputError(f"Unknown {self.family} edit: {op}")
        handler(payload or {})
        self.invalidate()
        logger.debug("%s edit %s applied", self.family, op)

    def invalidate(self) -> None:
        self.playback.unload()

    # --- tracing -------------------------------------------------------------
    def _record(self, info: AlgoInfo, kwargs: Dict[str, Any]) -> Trace:
        trace = self.recorder.record(info, self.structure.copy(), **kwargs)
        if trace.result is not None:
            self.structure = trace.result
        self.playback.load(trace)
        return trace

    # --- reading -------------------------------------------------------------
    def live_frame(self):
        raise NotImplementedError

    def structure_dict(self) -> Dict[str, Any]:
        return self.structure.to_dict()

    def current_frame(self):
        frame = self.playback.current_frame
        return frame if frame is not None else self.live_frame()

    def state(self) -> Dict[str, Any]:
        trace = self.trace
        return {
            "family":    self.family,
            "structure": self.structure_dict(),
            "playback":  self.playback.to_dict(),
            "frame":     self.current_frame().to_dict(),
            "trace": None if trace is None else {
                "algorithm":  trace.algorithm,
                "label":      trace.label,
                "pseudocode": list(trace.pseudocode),
                "error":      trace.error,
            },
        }


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------
class GraphSession(Session):
    family = "graph"

    def __init__(self, graph: Optional[Graph] = None):
        super().__init__()
        self.structure: Graph = graph if graph is not None else Graph.initial()

    @property
    def graph(self) -> Graph:
        return self.structure

    def run(self, key: str, params: Optional[Dict[str, Any]] = None) -> Trace:
        info   = require_algorithm(key)
        kwargs = tracer_kwargs(info, self.graph, (params or {}).get("start"))
        return self._record(info, kwargs)

    def live_frame(self):
        return GraphFrameBuilder(self.graph).build(-1, READY)

    # --- edits ---------------------------------------------------------------
    def edit_add_node(self, data):
        self.graph.add_node(_field(data, "x", float), _field(data, "y", float), snap=_flag(data, "snap"))

    def edit_remove_node(self, data):
        self.graph.remove_node(_field(data, "id"))

    def edit_move_node(self, data):
        self.graph.move_node(_field(data, "id"), _field(data, "x", float), _field(data, "y", float))

    def edit_add_edge(self, data):
        self.graph.add_edge(
            _field(data, "from"), _field(data, "to"),
            weight=_field(data, "weight", int, None),
            manual=_flag(data, "manual"),
        )

    def edit_remove_edge(self, data):
        self.graph.remove_edge(_field(data, "from"), _field(data, "to"))

    def edit_clear(self, data):
        self.graph.clear()

    def edit_set_directed(self, data):
        self.graph.directed = _flag(data, "directed", True)

    def edit_set_weighted(self, data):
        self.graph.weighted = _flag(data, "weighted", True)

    def edit_weights_by_distance(self, data):
        self.graph.update_weights_by_distance()

    def edit_example(self, data):
        self.structure = load_example(str(data.get("category", "")), _field(data, "index", int, 0))

    def edit_random(self, data):
        self.structure = Graph.generate_random(
            num_nodes=_field(data, "nodes", int, 8),
            directed=_flag(data, "directed"),
            weighted=_flag(data, "weighted", True),
            seed=_field(data, "seed", int, None),
        )


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------
class TreeSession(Session):
    family = "tree"

    def __init__(self, tree: Optional[BinaryTree] = None):
        super().__init__()
        self.structure: BinaryTree = tree if tree is not None else BinaryTree.initial()

    @property
    def tree(self) -> BinaryTree:
        return self.structure

    def run(self, key: str, params: Optional[Dict[str, Any]] = None) -> Trace:
        info = require_tree_algorithm(key)
        return self._record(info, select_params(info, params))

    def live_frame(self):
        return TreeFrameBuilder(self.tree).build(-1, READY)

    # --- edits ---------------------------------------------------------------
    def edit_add_node(self, data):
        self.tree.add_node(_field(data, "x", float), _field(data, "y", float), data.get("value"))

    def edit_remove_node(self, data):
        self.tree.remove_node(_field(data, "id"))

    def edit_move_node(self, data):
        self.tree.move_node(_field(data, "id"), _field(data, "x", float), _field(data, "y", float))

    def edit_add_edge(self, data):
        self.tree.add_edge(_field(data, "parent"), _field(data, "child"))

    def edit_remove_edge(self, data):
        self.tree.remove_edge(_field(data, "parent"), _field(data, "child"))

    def edit_clear(self, data):
        self.tree.clear()

    def edit_random(self, data):
        # ids keep counting from the current tree
        self.structure = BinaryTree.random_tree(_field(data, "seed", int, None), next_id=self.tree.next_id)


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
class QueueSession(Session):
    family = "queue"

    def __init__(self, queue: Optional[BoundedQueue] = None, seed: Optional[int] = None):
        super().__init__()
        self.structure: BoundedQueue = queue if queue is not None else BoundedQueue.default()
        self._rng = random.Random(seed)

    @property
    def queue(self) -> BoundedQueue:
        return self.structure

    def run(self, key: str, params: Optional[Dict[str, Any]] = None) -> Trace:
        """
        Record and load the trace.  A rejected enqueue / dequeue / peek is
        still loaded (its frames show the failed check) and then reported
        as QueueOverflowError / QueueUnderflowError.
        """
        info  = require_queue_algorithm(key)
        trace = self._record(info, select_params(info, params))
        if trace.error:
            logger.warning("Queue %s rejected: %s", key, trace.error)
            if key == "enqueue":
                raise QueueOverflowError(self.queue.capacity)
            raise QueueUnderflowError(key)
        return trace

    def live_frame(self):
        return QueueFrameBuilder("None", self.queue.capacity).build(self.queue.items, -1, READY)

    # --- edits ---------------------------------------------------------------
    def edit_enqueue(self, data):
        value = data.get("value")
        self.queue.enqueue(self._rng.randint(1, 99) if value is None else parse_item(value))

    def edit_dequeue(self, data):
        self.queue.dequeue()

    def edit_clear(self, data):
        self.queue.clear()

    def edit_update(self, data):
        self.queue.update(_field(data, "index"), parse_item(data.get("value")))

    def edit_example(self, data):
        self.structure = BoundedQueue.example(_field(data, "size", int, 5), seed=_field(data, "seed", int, None))


# ---------------------------------------------------------------------------
# Code
# ---------------------------------------------------------------------------
SAMPLE_PROGRAM = """int x = 10;
int arr[] = {10, 20, 30};
int* p = &arr[1];
Node* head = new Node(1);
head->next = new Node(2);
printf("%d", x);"""


class CodeSession(Session):
    family = "code"

    def __init__(self, source: str = SAMPLE_PROGRAM):
        super().__init__()
        self.structure: str = source

    @property
    def source(self) -> str:
        return self.structure

    def run(self, source: Optional[str] = None) -> Trace:
        if source is not None:
            self.structure = source
        trace = run_code(self.structure)
        self.playback.load(trace)
        return trace

    def edit_source(self, data):
        self.structure = str(data.get("source", ""))

    def live_frame(self):
        return Memory().snapshot(-1)

    def structure_dict(self) -> Dict[str, Any]:
        return {"source": self.structure}
