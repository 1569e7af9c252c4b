"""
Expression AST
==============
Immutable tagged nodes produced by the parser:
Literal | Variable | UnaryOp | BinaryOp | Call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    value: float


@dataclass(frozen=True)
class Variable:
    name: str = "x"


@dataclass(frozen=True)
class UnaryOp:
    op: str  # only "-"
    operand: Node


@dataclass(frozen=True)
class BinaryOp:
    op: str  # one of + - * / ^
    left: Node
    right: Node


@dataclass(frozen=True)
class Call:
    function: str
    args: tuple[Node, ...]


Node = Union[Literal, Variable, UnaryOp, BinaryOp, Call]
