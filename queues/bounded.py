"""
bounded.py — Capacity-Bounded Array Queue
=========================================
A textbook array queue, not a ring buffer: elements always sit at
indices 0..size-1, `front` is 0 and `rear` is size-1, and both are -1
when the queue is empty.  Items are ints or short strings ("P3", "101").
"""

import logging
import random
from typing import Any, List, Optional, Union

from config import MAX_CAPACITY, DEFAULT_QUEUE
from errors import QueueOverflowError, QueueUnderflowError, StructureError, TraceInputError

logger = logging.getLogger(__name__)

QueueItem = Union[int, str]


def parse_item(raw: Any) -> QueueItem:
    """'42' → 42, ' abc ' → 'abc'.  Blank input is an error."""
    if isinstance(raw, bool):
        raise TraceInputError(f"Invalid value: {raw!r}")
    if isinstance(raw, int):
        return raw
    text = "" if raw is None else str(raw).strip()
    if text == "":
        raise TraceInputError("Invalid Input: empty value.")
    try:
        return int(text)
    except ValueError:
        return text


class BoundedQueue:
    """
    Attributes:
        items    : Current contents, front first.
        capacity : Hard upper bound on len(items).
    """

    def __init__(self, items: Optional[List[QueueItem]] = None, capacity: int = MAX_CAPACITY):
        self.capacity: int             = capacity
        self.items:    List[QueueItem] = list(items or [])[:capacity]

    # ------------------------------------------------------------------
    # Pointers
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return len(self.items)

    @property
    def front(self) -> int:
        return 0 if self.items else -1

    @property
    def rear(self) -> int:
        return len(self.items) - 1 if self.items else -1

    def is_empty(self) -> bool:
        return not self.items

    def is_full(self) -> bool:
        return len(self.items) >= self.capacity

    def __len__(self) -> int:
        return len(self.items)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def enqueue(self, value: QueueItem) -> None:
        if self.is_full():
            raise QueueOverflowError(self.capacity)
        self.items.append(value)

    def dequeue(self) -> QueueItem:
        if self.is_empty():
            raise QueueUnderflowError("dequeue")
        return self.items.pop(0)

    def peek(self) -> QueueItem:
        if self.is_empty():
            raise QueueUnderflowError("peek")
        return self.items[0]

    def update(self, index: int, value: QueueItem) -> None:
        if not 0 <= index < len(self.items):
            raise StructureError(f"Index {index} is outside the queue.")
        self.items[index] = value

    def clear(self) -> None:
        self.items.clear()

    # ------------------------------------------------------------------
    # Copy / serialisation
    # ------------------------------------------------------------------
    def copy(self) -> "BoundedQueue":
        return BoundedQueue(self.items, self.capacity)

    def to_dict(self) -> dict:
        return {
            "items":    list(self.items),
            "capacity": self.capacity,
            "front":    self.front,
            "rear":     self.rear,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BoundedQueue":
        return cls(data.get("items", []), data.get("capacity", MAX_CAPACITY))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def default(cls) -> "BoundedQueue":
        return cls(DEFAULT_QUEUE)

    @classmethod
    def create(cls, size: Any, values: Any = None) -> "BoundedQueue":
        """
        A queue holding at most `size` of `values` (comma-separated text or
        a list).  1 <= size <= MAX_CAPACITY, else TraceInputError.
        """
        try:
            size = int(str(size).strip())
        except ValueError:
            raise TraceInputError(f"Invalid size: {size!r}") from None
        if not 1 <= size <= MAX_CAPACITY:
            raise TraceInputError(f"Size must be between 1 and {MAX_CAPACITY}.")

        if values is None:
            raw = []
        elif isinstance(values, str):
            raw = [v for v in values.split(",") if v.strip()]
        else:
            raw = list(values)
        items = [parse_item(v) for v in raw][:size]
        return cls(items)

    @classmethod
    def example(cls, size: int = 5, seed: Optional[int] = None) -> "BoundedQueue":
        rng = random.Random(seed)
        size = max(1, min(size, MAX_CAPACITY))
        queue = cls([rng.randint(1, 99) for _ in range(size)])
        logger.debug("Example queue loaded: %s (seed=%s)", queue.items, seed)
        return queue

    def __repr__(self) -> str:
        return f"BoundedQueue({self.items}, capacity={self.capacity})"

    def __eq__(self, other) -> bool:
        return isinstance(other, BoundedQueue) and (self.items, self.capacity) == (other.items, other.capacity)
