"""
engine.py — Line-by-Line Program Runner
=======================================
run_code(source) walks the source one line at a time and returns a
Trace whose timeline is one MemoryState per executed line:

    trace[0]    empty main frame, current_line_index = -1
    trace[1..]  state after each non-blank, non-comment line
    trace[-1]   exit state, current_line_index = len(lines), output
                ends with "> Exit code 0"

A line may hold several statements ("int a = 1; int b = 2;").  They run
in order and the line still produces a single state.
"""

import logging
import time
from typing import Generator, List

from algorithms.frame import Trace
from interpreter.memory import Memory, MemoryState
from interpreter.rules import apply_statement

logger = logging.getLogger(__name__)

EXIT_LINE = "> Exit code 0"

_OPENERS = {"(": ")", "{": "}", "[": "]"}


def is_comment(line: str) -> bool:
    return line.startswith("//") or line.startswith("#")


def split_statements(line: str) -> List[str]:
    """
    Split on ';' outside quotes and brackets, keeping the ';' on each
    piece.  A trailing fragment without ';' is kept as-is.
    """
    parts: List[str] = []
    depth: List[str] = []
    quote = None
    start = 0
    for i, ch in enumerate(line):
        if quote:
            if ch == quote and line[i - 1] != "\\":
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch in _OPENERS:
            depth.append(_OPENERS[ch])
        elif depth and ch == depth[-1]:
            depth.pop()
        elif ch == ";" and not depth:
            parts.append(line[start:i + 1].strip())
            start = i + 1
    tail = line[start:].strip()
    if tail:
        parts.append(tail)
    return [p for p in parts if p and p != ";"]


def execute(source: str) -> Generator[MemoryState, None, None]:
    mem   = Memory()
    lines = source.split("\n")

    yield mem.snapshot(-1)

    for index, raw in enumerate(lines):
        line = raw.strip()
        if not line or is_comment(line):
            continue
        for statement in split_statements(line):
            apply_statement(mem, statement)
        yield mem.snapshot(index)

    mem.output.append(EXIT_LINE)
    yield mem.snapshot(len(lines))


def run_code(source: str) -> Trace:
    start    = time.perf_counter()
    timeline = tuple(execute(source))
    elapsed  = (time.perf_counter() - start) * 1000
    logger.info("run_code: %d lines -> %d states in %.1f ms",
                len(source.split("\n")), len(timeline), elapsed)
    return Trace(
        algorithm="run_code",
        label="Run Code",
        pseudocode=tuple(source.split("\n")),
        timeline=timeline,
    )
