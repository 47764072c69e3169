"""
memory.py — Simulated Stack & Heap
==================================
Value types for the memory view plus the mutable working machine the
statement rules act on.

Addresses are synthetic: the stack starts at STACK_BASE and grows down
one word per variable, the heap starts at HEAP_BASE and grows up one
block at a time.  They are formatted as lowercase hex strings and only
exist so pointers can name their targets by string equality.

Variable / StackFrame / HeapBlock / MemoryState are frozen.  The working
machine never edits one in place: every change builds a replacement
with dataclasses.replace, so a snapshot can share the objects that were
current when it was taken and still never see a later change.
"""

from dataclasses import dataclass, field, asdict, replace
from typing import Any, Dict, List, Optional, Tuple

from config import STACK_BASE, HEAP_BASE, WORD_SIZE, HEAP_BLOCK_SIZE


def format_address(value: int) -> str:
    return "0x" + format(value, "x")


def parse_address(text: str) -> int:
    return int(text, 16)


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Variable:
    id:             str
    name:           str
    type:           str
    value:          str
    address:        str
    is_pointer:     bool                     = False
    target_address: Optional[str]            = None
    is_array:       bool                     = False
    array_values:   Optional[Tuple[int, ...]] = None


@dataclass(frozen=True)
class StackFrame:
    id:            str
    function_name: str
    variables:     Tuple[Variable, ...] = ()

    def find(self, name: str) -> Optional[Variable]:
        for var in self.variables:
            if var.name == name:
                return var
        return None


@dataclass(frozen=True)
class HeapBlock:
    """
    A `new Type(args)` allocation.  `fields` holds `val` (the raw
    constructor argument) plus null-initialised link fields: `next` for
    list-like types, `left` / `right` for tree-like ones.  Link fields
    hold the address of another block, or None.
    """

    id:      str
    address: str
    value:   str
    type:    str
    size:    int            = HEAP_BLOCK_SIZE
    fields:  Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class MemoryState:
    """
    One frame of the memory view: everything as it stands after the
    source line at `current_line_index` ran (-1 before the first line).
    """

    stack:              Tuple[StackFrame, ...] = ()
    heap:               Tuple[HeapBlock, ...]  = ()
    output:             Tuple[str, ...]        = ()
    current_line_index: int                    = -1

    @property
    def main(self) -> StackFrame:
        return self.stack[0]

    def variable(self, name: str) -> Optional[Variable]:
        return self.main.find(name) if self.stack else None

    def block(self, address: str) -> Optional[HeapBlock]:
        for blk in self.heap:
            if blk.address == address:
                return blk
        return None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Working machine
# ---------------------------------------------------------------------------
class Memory:
    """Mutable state of one program run; `snapshot()` freezes it."""

    def __init__(self):
        self.stack_pointer: int            = STACK_BASE
        self.heap_pointer:  int            = HEAP_BASE
        self.variables:     List[Variable] = []
        self.heap:          List[HeapBlock] = []
        self.output:        List[str]      = []

    # --- addresses ---------------------------------------------------------
    def next_stack_address(self) -> str:
        self.stack_pointer -= WORD_SIZE
        return format_address(self.stack_pointer)

    def next_heap_address(self) -> str:
        addr = format_address(self.heap_pointer)
        self.heap_pointer += HEAP_BLOCK_SIZE
        return addr

    # --- stack -------------------------------------------------------------
    def find_variable(self, name: str) -> Optional[Variable]:
        for var in self.variables:
            if var.name == name:
                return var
        return None

    def declare(self, name: str, type_: str, value: str, **extra) -> Variable:
        """Push a new variable onto the main frame at the next stack word."""
        var = Variable(id=f"var_{name}", name=name, type=type_, value=value,
                       address=self.next_stack_address(), **extra)
        self.variables.append(var)
        return var

    def update_variable(self, name: str, **changes) -> Optional[Variable]:
        for i, var in enumerate(self.variables):
            if var.name == name:
                self.variables[i] = replace(var, **changes)
                return self.variables[i]
        return None

    # --- heap --------------------------------------------------------------
    def find_block(self, address: Optional[str]) -> Optional[HeapBlock]:
        if address is None:
            return None
        for blk in self.heap:
            if blk.address == address:
                return blk
        return None

    def allocate(self, type_: str, args: str) -> HeapBlock:
        """`new Type(args)`: a fresh block with default link fields."""
        fields: Dict[str, Any] = {"val": args.strip()}
        if "Node" in type_ or "List" in type_:
            fields["next"] = None
        if "Tree" in type_ or "Binary" in type_:
            fields["left"]  = None
            fields["right"] = None

        addr = self.next_heap_address()
        blk  = HeapBlock(id=f"heap_{addr}", address=addr, value=f"Object({type_})",
                         type=type_, fields=fields)
        self.heap.append(blk)
        return blk

    def set_field(self, address: str, name: str, value: Any) -> None:
        for i, blk in enumerate(self.heap):
            if blk.address == address:
                fields = dict(blk.fields)
                fields[name] = value
                self.heap[i] = replace(blk, fields=fields)
                return

    # --- snapshot ----------------------------------------------------------
    def snapshot(self, line_index: int) -> MemoryState:
        main = StackFrame(id="frame_main", function_name="main", variables=tuple(self.variables))
        return MemoryState(
            stack=(main,),
            heap=tuple(replace(b, fields=dict(b.fields)) for b in self.heap),
            output=tuple(self.output),
            current_line_index=line_index,
        )
