"""
interpreter/
------------
Pattern-matching interpreter for a small C-like subset with a simulated
stack and heap.

    from interpreter import run_code
    trace = run_code("int x = 5;\\nint* p = &x;")
    trace.final.variable("p").target_address
"""

from interpreter.memory import Variable, StackFrame, HeapBlock, MemoryState, Memory
from interpreter.rules import RULES, apply_statement
from interpreter.engine import run_code, split_statements, EXIT_LINE

__all__ = [
    "Variable",
    "StackFrame",
    "HeapBlock",
    "MemoryState",
    "Memory",
    "RULES",
    "apply_statement",
    "run_code",
    "split_statements",
    "EXIT_LINE",
]
