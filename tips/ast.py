"""Abstract Syntax Tree (AST) definitions for the TIPS language.

Each node corresponds to a construct of the TIPS grammar. Nodes are
frozen dataclasses: the parser builds the tree once and nothing mutates
it afterwards, so the same Program can be printed and interpreted any
number of times. Operators are stored as token kinds (``PLUS``, ``MOD``,
``CUSTOM_OPER``, ``INCREMENT`` ...).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


# Expressions

@dataclass(frozen=True)
class IntegerLiteral(Node):
    value: int


@dataclass(frozen=True)
class RealLiteral(Node):
    value: float


@dataclass(frozen=True)
class Identifier(Node):
    name: str


@dataclass(frozen=True)
class UnaryOperation(Node):
    op: str
    operand: Node


@dataclass(frozen=True)
class BinaryOperation(Node):
    op: str
    left: Node
    right: Node


# Statements

@dataclass(frozen=True)
class Assignment(Node):
    target: str
    value: Node


@dataclass(frozen=True)
class Read(Node):
    target: str


@dataclass(frozen=True)
class Write(Node):
    content: str
    is_identifier: bool


@dataclass(frozen=True)
class Compound(Node):
    statements: Tuple[Node, ...]


# Program structure

@dataclass(frozen=True)
class Declaration(Node):
    name: str
    type_name: str  # 'INTEGER' or 'REAL'
    line: int = 0


@dataclass(frozen=True)
class Block(Node):
    declarations: Tuple[Declaration, ...]
    compound: Compound


@dataclass(frozen=True)
class Program(Node):
    name: str
    block: Block
