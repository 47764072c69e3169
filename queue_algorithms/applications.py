"""
applications.py — Queue Applications
====================================
Two classic uses of a FIFO queue, traced step by step:

    binary_numbers(n)            – print 1..n in binary by BFS over "0"/"1"
    hot_potato(players, passes)  – Josephus elimination with P1..Pn

Both run on a scratch queue of their own; the live queue passed in is
only read for its capacity and is never modified.
"""

from typing import Generator, List, Optional

from config import MAX_CAPACITY
from queues import BoundedQueue
from queue_algorithms.frame import QueueFrame, QueueFrameBuilder, pointer
from queue_algorithms.operations import parse_count


BINARY_PSEUDOCODE: List[str] = [
    "queue.enqueue('1')",                   # 0
    "while N > 0:",                         # 1
    "  current = queue.dequeue()",          # 2
    "  print(current)",                     # 3
    "  queue.enqueue(current + '0')",       # 4
    "  queue.enqueue(current + '1')",       # 5
    "  N--",                                # 6
]

HOT_POTATO_PSEUDOCODE: List[str] = [
    "for player in players: queue.enqueue(player)",   # 0
    "while queue.size > 1:",                          # 1
    "  for i = 0 to K:",                              # 2
    "    queue.enqueue(queue.dequeue())",             # 3
    "  queue.dequeue() // eliminate",                 # 4
    "return queue.dequeue() // winner",               # 5
]


# ---------------------------------------------------------------------------
# Binary numbers 1..N
# ---------------------------------------------------------------------------
def binary_numbers(queue: BoundedQueue, n) -> Generator[QueueFrame, None, None]:
    return _binary_numbers(queue.capacity, parse_count(n, "number", 1, MAX_CAPACITY))


def _binary_numbers(capacity: int, n: int) -> Generator[QueueFrame, None, None]:
    fb      = QueueFrameBuilder("APP", capacity)
    work    = BoundedQueue(capacity=capacity)
    printed: List[str] = []

    work.enqueue("1")
    yield fb.build(work.items, 0, 'Initial Queue: ["1"]', highlights=[0])

    for remaining in range(n, 0, -1):
        yield fb.build(work.items, 1, f"N = {remaining}, keep going.")

        current = work.dequeue()
        yield fb.build(work.items, 2, f'Dequeued "{current}".')

        printed.append(current)
        yield fb.build(work.items, 3, f"Generated {current}. Output: {', '.join(printed)}")

        for line, suffix in ((4, "0"), (5, "1")):
            child = current + suffix
            if work.is_full():
                yield fb.build(work.items, line, f"Queue full, {child} not appended.")
                continue
            work.enqueue(child)
            yield fb.build(
                work.items, line, f"Appended {child}.",
                highlights=[work.rear],
                pointers=[pointer(0, "front"), pointer(work.rear, "rear", "green")],
            )

    yield fb.build(work.items, 6, f"First {n} binary numbers: {', '.join(printed)}")


# ---------------------------------------------------------------------------
# Hot potato (Josephus)
# ---------------------------------------------------------------------------
def hot_potato(queue: BoundedQueue, players, passes) -> Generator[QueueFrame, None, None]:
    count = parse_count(players, "players", 2, MAX_CAPACITY)
    k     = parse_count(passes, "passes", 0)
    return _hot_potato(queue.capacity, count, k)


def _hot_potato(capacity: int, count: int, k: int) -> Generator[QueueFrame, None, None]:
    fb   = QueueFrameBuilder("APP", capacity)
    work = BoundedQueue([f"P{i}" for i in range(1, count + 1)], capacity)

    yield fb.build(work.items, 0, f"Initialized with {count} players")

    while work.size > 1:
        yield fb.build(work.items, 1, f"{work.size} players remain.", highlights=[0])

        for _ in range(k):
            holder = work.dequeue()
            work.enqueue(holder)
            yield fb.build(
                work.items, 3, f"{holder} passes the potato to {work.items[0]}",
                highlights=[work.rear],
            )

        out = work.peek()
        yield fb.build(work.items, 4, f"{out} holds the potato.", highlights=[0],
                       pointers=[pointer(0, "front", "red"), pointer(work.rear, "rear")])
        work.dequeue()
        yield fb.build(work.items, 4, f"{out} is eliminated!")

    winner: Optional[str] = work.peek()
    yield fb.build(work.items, 5, f"{winner} wins the game!", highlights=[0],
                   pointers=[pointer(0, "front", "green")])
