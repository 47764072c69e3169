"""
queues/
-------
Bounded queue data layer.  Public API:

    from queues import BoundedQueue, parse_item
"""

from queues.bounded import BoundedQueue, QueueItem, parse_item

__all__ = ["BoundedQueue", "QueueItem", "parse_item"]
