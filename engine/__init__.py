"""
engine/
-------
Recording, playback and the per-family sessions built on them.

    from engine import Playback, Recorder, GraphSession, TreeSession, QueueSession, CodeSession
"""

from engine.playback import Playback, PlaybackState
from engine.recorder import Recorder, RunMetrics
from engine.session  import Session, GraphSession, TreeSession, QueueSession, CodeSession

__all__ = [
    "Playback",
    "PlaybackState",
    "Recorder",
    "RunMetrics",
    "Session",
    "GraphSession",
    "TreeSession",
    "QueueSession",
    "CodeSession",
]
