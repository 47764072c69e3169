"""
rules.py — Ordered Statement Rules
==================================
The interpreter does not parse.  Each statement is tried against the
rules below, top to bottom, and the first pattern that matches applies
its action to the Memory.  A statement no rule recognises is inert.

    output      printf("..."), printf("%d", x), cout << x
    array       int arr[] = {1, 2, 3};
    alloc       Node* head = new Node(10);
    pointer     int* p = &x;   int* p = &arr[2];
    arrow       head->next = new Node(20);   a->next = b;   a->val = 5;
    declare     int x = 10;
    assign      x = 20;

Order matters: "Node* head = new Node(1);" would also satisfy the plain
declaration shape if it were tried first.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from config import WORD_SIZE, NULL_ADDRESS
from interpreter.memory import Memory, format_address, parse_address

logger = logging.getLogger(__name__)

_NAME = r"[a-zA-Z0-9_]+"


@dataclass(frozen=True)
class Rule:
    name:    str
    pattern: re.Pattern
    action:  Callable[[Memory, re.Match], None]


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------
def _resolve(mem: Memory, ref: str) -> Optional[str]:
    """Value of `name` or `ptr->field`, or None when it does not resolve."""
    ref = ref.strip()
    var = mem.find_variable(ref)
    if var is not None:
        return var.value
    if "->" in ref:
        ptr_name, fld = ref.split("->", 1)
        ptr = mem.find_variable(ptr_name.strip())
        blk = mem.find_block(ptr.target_address) if ptr else None
        if blk is not None and blk.fields.get(fld.strip()) is not None:
            return str(blk.fields[fld.strip()])
    return None


def _output(mem: Memory, m: re.Match) -> None:
    stmt = m.string
    if stmt.startswith("cout"):
        parts = [p.strip() for p in stmt.rstrip(";").split("<<")[1:]]
        pieces = []
        for part in parts:
            if part == "endl":
                continue
            quoted = re.fullmatch(r'"([^"]*)"', part)
            value  = quoted.group(1) if quoted else _resolve(mem, part)
            if value is not None:
                pieces.append(value)
        if pieces:
            mem.output.append("".join(pieces))
        return

    # printf: a bare literal is printed as-is; with arguments, the first
    # argument's value is printed.
    args   = stmt[stmt.find("(") + 1: stmt.rfind(")")] if "(" in stmt else ""
    quoted = re.match(r'\s*"([^"]*)"\s*(?:,(.*))?$', args)
    if quoted is None:
        ref = args
    elif quoted.group(2) and quoted.group(2).strip():
        ref = quoted.group(2).split(",")[0]
    else:
        mem.output.append(quoted.group(1).replace("\\n", ""))
        return
    value = _resolve(mem, ref)
    if value is not None:
        mem.output.append(value)


def _array(mem: Memory, m: re.Match) -> None:
    type_, name, body = m.groups()
    values = []
    for token in body.split(","):
        try:
            values.append(int(token.strip()))
        except ValueError:
            continue
    mem.declare(name, f"{type_}[]", "{" + ", ".join(map(str, values)) + "}",
                is_array=True, array_values=tuple(values))


def _alloc(mem: Memory, m: re.Match) -> None:
    type_, name, ctor, args = m.groups()
    blk = mem.allocate(ctor, args)
    mem.declare(name, f"{type_}*", blk.address, is_pointer=True, target_address=blk.address)


def _pointer(mem: Memory, m: re.Match) -> None:
    type_, name, target_name, index = m.groups()
    target = mem.find_variable(target_name)
    addr   = NULL_ADDRESS
    if target is not None:
        if index is not None and target.is_array:
            addr = format_address(parse_address(target.address) + int(index) * WORD_SIZE)
        else:
            addr = target.address
    mem.declare(name, f"{type_}*", addr, is_pointer=True, target_address=addr)


_NEW = re.compile(rf"new\s+({_NAME})\((.*)\)")


def _arrow(mem: Memory, m: re.Match) -> None:
    ptr_name, fld, rhs = m.groups()
    rhs = rhs.strip()
    ptr = mem.find_variable(ptr_name)
    blk = mem.find_block(ptr.target_address) if ptr else None
    if blk is None:
        return

    alloc = _NEW.match(rhs)
    if alloc:
        child = mem.allocate(alloc.group(1), alloc.group(2))
        mem.set_field(blk.address, fld, child.address)
        return

    other = mem.find_variable(rhs)
    if other is not None and other.is_pointer:
        mem.set_field(blk.address, fld, other.target_address)
    elif rhs in ("NULL", "nullptr"):
        mem.set_field(blk.address, fld, None)
    else:
        mem.set_field(blk.address, fld, rhs)


def _declare(mem: Memory, m: re.Match) -> None:
    type_, name, expr = m.groups()
    mem.declare(name, type_, expr.strip())


def _assign(mem: Memory, m: re.Match) -> None:
    name, expr = m.groups()
    expr   = expr.strip()
    target = mem.find_variable(name)
    if target is None:
        return
    source = mem.find_variable(expr)
    if target.is_pointer and source is not None and source.is_pointer:
        mem.update_variable(name, value=source.value, target_address=source.target_address)
    else:
        mem.update_variable(name, value=expr)


# ---------------------------------------------------------------------------
# The rule table (first match wins)
# ---------------------------------------------------------------------------
RULES: List[Rule] = [
    Rule("output",  re.compile(r"^(printf|cout)\b"), _output),
    Rule("array",   re.compile(rf"^({_NAME})\s+({_NAME})\[.*\]\s*=\s*\{{([^}}]*)\}};"), _array),
    Rule("alloc",   re.compile(rf"^({_NAME})\*\s+({_NAME})\s*=\s*new\s+({_NAME})\((.*)\);"), _alloc),
    Rule("pointer", re.compile(rf"^({_NAME})\s*\*\s*({_NAME})\s*=\s*&({_NAME})(?:\[(\d+)\])?;?$"), _pointer),
    Rule("arrow",   re.compile(rf"^({_NAME})->({_NAME})\s*=\s*(.+);"), _arrow),
    Rule("declare", re.compile(rf"^({_NAME})\s+({_NAME})\s*=\s*(.+);"), _declare),
    Rule("assign",  re.compile(rf"^({_NAME})\s*=\s*(.+);"), _assign),
]


def apply_statement(mem: Memory, statement: str) -> Optional[str]:
    """Run the first matching rule; returns its name, or None if inert."""
    for rule in RULES:
        m = rule.pattern.match(statement)
        if m:
            logger.debug("rule %-7s <- %s", rule.name, statement)
            rule.action(mem, m)
            return rule.name
    logger.debug("no rule    <- %s", statement)
    return None
