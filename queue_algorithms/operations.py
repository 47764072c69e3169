"""
operations.py — Traced Queue Primitives
=======================================
enqueue / dequeue / peek / create against a BoundedQueue.

The narration follows the textbook array queue: check for overflow or
underflow, move `front` / `rear`, touch the cell, report.  A rejected
operation (overflow, underflow, peek on empty) is not an exception here:
the frames show the failed check and the generator returns the error
message, which the recorder stores on Trace.error.  The queue itself is
left untouched in that case.
"""

from typing import Generator, List, Optional

from errors import TraceInputError
from queues import BoundedQueue, parse_item
from queue_algorithms.frame import QueueFrame, QueueFrameBuilder, pointer


ENQUEUE_PSEUDOCODE: List[str] = [
    "if rear == capacity - 1, return Queue Overflow",   # 0
    "if front == -1, front = 0",                        # 1
    "rear = rear + 1",                                  # 2
    "queue[rear] = value",                              # 3
    "return",                                           # 4
]

DEQUEUE_PSEUDOCODE: List[str] = [
    "if front == -1, return Queue Underflow",           # 0
    "value = queue[front]",                             # 1
    "if front == rear, front = rear = -1",              # 2
    "else front = front + 1",                           # 3
    "return value",                                     # 4
]

PEEK_PSEUDOCODE: List[str] = [
    "if front == -1, return Queue Empty",
    "return queue[front]",
]

CREATE_PSEUDOCODE: List[str] = [
    "allocate memory for size N",
    "front = -1, rear = -1",
    "return queue reference",
]

TracerResult = Generator[QueueFrame, None, Optional[str]]


# ---------------------------------------------------------------------------
# enqueue
# ---------------------------------------------------------------------------
def enqueue(queue: BoundedQueue, value) -> TracerResult:
    return _enqueue(queue, parse_item(value))


def _enqueue(queue: BoundedQueue, val) -> TracerResult:
    fb    = QueueFrameBuilder(f"ENQUEUE({val})", queue.capacity)
    items = list(queue.items)
    rear  = len(items) - 1

    yield fb.build(items, 0, "Check for Queue Overflow...")

    if queue.is_full():
        yield fb.build(items, 0, "Error: Queue Overflow", pointers=[pointer(rear, "rear", "red")])
        return f"Queue Overflow: capacity {queue.capacity} reached"

    if not items:
        yield fb.build(items, 1, "Initialize front = 0", pointers=[pointer(0, "front", "green")])

    arrows = [pointer(rear + 1, "rear")]
    if items:
        arrows.insert(0, pointer(0, "front"))
    yield fb.build(items, 2, "Increment rear pointer", pointers=arrows)
    yield fb.build(items, 3, f'Assign queue[rear] = "{val}"', pointers=arrows)

    queue.enqueue(val)
    items = list(queue.items)
    rear  = len(items) - 1
    yield fb.build(
        items, 4, f'Enqueued "{val}"',
        highlights=[rear],
        pointers=[pointer(0, "front"), pointer(rear, "rear", "green")],
    )
    yield fb.build(items, 4, "Done")
    return None


# ---------------------------------------------------------------------------
# dequeue
# ---------------------------------------------------------------------------
def dequeue(queue: BoundedQueue) -> TracerResult:
    fb    = QueueFrameBuilder("DEQUEUE()", queue.capacity)
    items = list(queue.items)

    yield fb.build(items, 0, "Check for Queue Underflow...")

    if queue.is_empty():
        yield fb.build(items, 0, "Error: Queue Underflow", pointers=[])
        return "Queue Underflow: cannot dequeue an empty queue"

    val = items[0]
    yield fb.build(items, 1, f'Read value "{val}"', highlights=[0])

    last = len(items) == 1
    yield fb.build(
        items, 2 if last else 3,
        "Last element: front = rear = -1" if last else "Removing element from front...",
        highlights=[0],
        pointers=[pointer(0, "front", "red"), pointer(len(items) - 1, "rear")],
    )

    queue.dequeue()
    yield fb.build(list(queue.items), 4, f'Returned "{val}"')
    return None


# ---------------------------------------------------------------------------
# peek
# ---------------------------------------------------------------------------
def peek(queue: BoundedQueue) -> TracerResult:
    fb    = QueueFrameBuilder("PEEK()", queue.capacity)
    items = list(queue.items)

    if not items:
        yield fb.build(items, 0, "Error: Queue Empty", pointers=[])
        return "Queue Underflow: cannot peek an empty queue"

    yield fb.build(
        items, 1, f'Front value is "{items[0]}"',
        highlights=[0],
        pointers=[pointer(0, "front", "green"), pointer(len(items) - 1, "rear")],
    )
    return None


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------
def create(queue: BoundedQueue, size, values=None) -> TracerResult:
    """Replace the contents with a fresh queue; validated before any frame."""
    fresh = BoundedQueue.create(size, values)
    return _create(queue, fresh, int(str(size).strip()))


def _create(queue: BoundedQueue, fresh: BoundedQueue, size: int) -> TracerResult:
    fb = QueueFrameBuilder("CREATE", queue.capacity)

    yield fb.build([], 0, f"Allocate memory for {size} slots.", pointers=[])
    yield fb.build([], 1, "front = -1, rear = -1", pointers=[])

    queue.items = list(fresh.items)
    yield fb.build(list(queue.items), 2, f"Queue Initialized (Size {size})")
    return None


def parse_count(raw, name: str, low: int, high: Optional[int] = None) -> int:
    """Integer input bounded below by `low` and, optionally, above by `high`."""
    try:
        n = int(str(raw).strip())
    except ValueError:
        raise TraceInputError(f"Invalid {name}: {raw!r}") from None
    if n < low or (high is not None and n > high):
        if high is None:
            raise TraceInputError(f"{name.capitalize()} must be >= {low}")
        raise TraceInputError(f"{name.capitalize()} must be between {low} and {high}")
    return n
