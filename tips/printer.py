"""Indented tree rendering of a TIPS AST.

``render`` returns one line per node, drawing ``├── `` for a node that
has later siblings and ``└── `` for the last one. Children of a node are
rendered with the parent's prefix extended by ``│   `` or four spaces
depending on whether the parent itself was the last sibling.
"""

from __future__ import annotations

from typing import Any, List, Tuple, Union

from .ast import (
    Program, Block, Declaration, Compound, Assignment, Read, Write,
    IntegerLiteral, RealLiteral, Identifier, UnaryOperation, BinaryOperation,
    Node,
)
from .errors import NestingError
from .lexer import tok_name
from .types import to_fixed

BRANCH = '├── '
LAST_BRANCH = '└── '
PIPE = '│   '
SPACE = '    '

# A tree item is a node, a plain leaf label, or a (label, children) group
Item = Union[Node, str, Tuple[str, List[Any]]]


def describe(node: Node) -> Tuple[str, List[Item]]:
    """Return the label of ``node`` and the items shown beneath it."""
    if isinstance(node, Program):
        return 'Program', [f'name: {node.name}', node.block]
    if isinstance(node, Block):
        items: List[Item] = []
        if node.declarations:
            items.append(('Declarations', list(node.declarations)))
        items.append(node.compound)
        return 'Block', items
    if isinstance(node, Declaration):
        return f'{node.name} : {node.type_name}', []
    if isinstance(node, Compound):
        return 'Compound', list(node.statements)
    if isinstance(node, Assignment):
        return f'Assign {node.target} :=', [node.value]
    if isinstance(node, Read):
        return f'Read: {node.target}', []
    if isinstance(node, Write):
        kind = 'IDENT' if node.is_identifier else 'STRING'
        return f'Write ({kind}): {node.content}', []
    if isinstance(node, IntegerLiteral):
        return f'IntLit: {node.value}', []
    if isinstance(node, RealLiteral):
        return f'RealLit: {to_fixed(node.value)}', []
    if isinstance(node, Identifier):
        return f'Ident: {node.name}', []
    if isinstance(node, UnaryOperation):
        return f'Unary {tok_name(node.op)}', [node.operand]
    if isinstance(node, BinaryOperation):
        return f'Binary {tok_name(node.op)}', [node.left, node.right]
    raise NotImplementedError(f"render: unexpected node type {type(node)}")


def render(item: Item, prefix: str = '', is_last: bool = True) -> List[str]:
    if isinstance(item, str):
        label, children = item, []
    elif isinstance(item, tuple):
        label, children = item
    else:
        label, children = describe(item)
    lines = [prefix + (LAST_BRANCH if is_last else BRANCH) + label]
    inner = prefix + (SPACE if is_last else PIPE)
    for i, child in enumerate(children):
        lines.extend(render(child, inner, i == len(children) - 1))
    return lines


def format_tree(program: Program) -> str:
    """Render a whole program; the root line carries no branch glyph."""
    label, children = describe(program)
    lines = [label]
    try:
        for i, child in enumerate(children):
            lines.extend(render(child, "", i == len(children) - 1))
    except RecursionError:
        raise NestingError() from None
    return '\n'.join(lines)
