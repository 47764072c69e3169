"""
errors.py — Error Taxonomy
===========================
Every rejection the core can report to its caller.

    TraceInputError      – bad start node, malformed numeric input, …
                           raised before a single frame is produced.
    StructureError       – an edit would break a structural invariant
                           (third child, cycle, second parent, …).
    QueueOverflowError   – enqueue on a full bounded queue.
    QueueUnderflowError  – dequeue / peek on an empty queue.
    UnknownAlgorithmError– registry lookup miss.

Algorithmic dead ends (value not in the tree, no successor, …) are NOT
errors; the trace simply ends on a frame that says so.
"""


class TraceInputError(ValueError):
    """Invalid input to a tracer or construction operation."""


class StructureError(ValueError):
    """An edit was rejected because it would break the structure."""


class QueueOverflowError(StructureError):
    def __init__(self, capacity: int):
        super().__init__(f"Queue Overflow: capacity {capacity} reached")
        self.capacity = capacity


class QueueUnderflowError(StructureError):
    def __init__(self, operation: str = "dequeue"):
        super().__init__(f"Queue Underflow: cannot {operation} an empty queue")
        self.operation = operation


class UnknownAlgorithmError(KeyError):
    def __init__(self, family: str, key: str):
        super().__init__(f"Unknown {family} algorithm: {key}")
        self.family = family
        self.key    = key

    def __str__(self) -> str:
        return self.args[0]


__all__ = [
    "TraceInputError",
    "StructureError",
    "QueueOverflowError",
    "QueueUnderflowError",
    "UnknownAlgorithmError",
]
