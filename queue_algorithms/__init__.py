"""
queue_algorithms/__init__.py — Queue Algorithm Registry
========================================================

    from queue_algorithms import QUEUE_REGISTRY, require_queue_algorithm

Same AlgoInfo cards as the graph and tree registries.  Primitives that
change the queue are tagged "mutating"; the applications work on their
own scratch queue.
"""

from typing import Dict

from errors import UnknownAlgorithmError
from algorithms import AlgoInfo
from queue_algorithms.frame import QueueFrame, QueueFrameBuilder
from queue_algorithms import operations, applications


QUEUE_REGISTRY: Dict[str, AlgoInfo] = {

    "enqueue": AlgoInfo(
        key="enqueue", label="Enqueue", fn=operations.enqueue,
        pseudocode=operations.ENQUEUE_PSEUDOCODE, tags=["primitive", "mutating"], start="none",
        params=["value"], complexity_time="O(1)", complexity_space="O(1)",
        description="Adds a value at the rear.",
    ),

    "dequeue": AlgoInfo(
        key="dequeue", label="Dequeue", fn=operations.dequeue,
        pseudocode=operations.DEQUEUE_PSEUDOCODE, tags=["primitive", "mutating"], start="none",
        complexity_time="O(1)", complexity_space="O(1)",
        description="Removes the value at the front.",
    ),

    "peek": AlgoInfo(
        key="peek", label="Peek", fn=operations.peek,
        pseudocode=operations.PEEK_PSEUDOCODE, tags=["primitive"], start="none",
        complexity_time="O(1)", complexity_space="O(1)",
        description="Reads the front value without removing it.",
    ),

    "create": AlgoInfo(
        key="create", label="Create Queue", fn=operations.create,
        pseudocode=operations.CREATE_PSEUDOCODE, tags=["primitive", "mutating"], start="none",
        params=["size"], optional=["values"],
        complexity_time="O(1)", complexity_space="O(N)",
        description="Allocates a fresh queue of up to N values.",
    ),

    "binary_numbers": AlgoInfo(
        key="binary_numbers", label="Generate Binary Numbers", fn=applications.binary_numbers,
        pseudocode=applications.BINARY_PSEUDOCODE, tags=["application"], start="none",
        params=["n"], complexity_time="O(N)", complexity_space="O(N)",
        description="Prints 1..N in binary using a queue of strings.",
    ),

    "hot_potato": AlgoInfo(
        key="hot_potato", label="Hot Potato (Josephus)", fn=applications.hot_potato,
        pseudocode=applications.HOT_POTATO_PSEUDOCODE, tags=["application"], start="none",
        params=["players", "passes"], complexity_time="O(N*K)", complexity_space="O(N)",
        description="Passes the potato K times, then eliminates the holder.",
    ),
}


def require_queue_algorithm(key: str) -> AlgoInfo:
    info = QUEUE_REGISTRY.get(key)
    if info is None:
        raise UnknownAlgorithmError("queue", key)
    return info


__all__ = [
    "QUEUE_REGISTRY",
    "QueueFrame",
    "QueueFrameBuilder",
    "require_queue_algorithm",
]
