"""Recursive-descent parser for the TIPS language.

The parser pulls tokens one at a time from a ``TokenStream`` and keeps a
single token of lookahead. Each grammar production has one ``parse_*``
method:

    Program     := PROGRAM IDENT ';' Block EOF
    Block       := [ VAR { Declaration } ] Compound
    Declaration := IDENT ':' (INTEGER | REAL) ';'
    Compound    := BEGIN Statement { ';' Statement } [ ';' ] END
    Statement   := Assignment | Read | Write | Compound
    Assignment  := IDENT ':=' Value
    Read        := READ '(' IDENT ')'
    Write       := WRITE '(' (STRINGLIT | IDENT) ')'
    Value       := Term { ('+'|'-') Term }
    Term        := Factor { ('*'|'/'|MOD|'^^') Factor }
    Factor      := [ '++' | '--' | '-' ] Primary
    Primary     := INTLIT | FLOATLIT | IDENT | '(' Value ')'

There is no error recovery: the first unexpected token raises a
``ParseError`` and no partial tree is returned. Declarations are entered
into the ``Environment`` as they are parsed and the environment is sealed
once the VAR section ends.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import (
    Program, Block, Declaration, Compound, Assignment, Read, Write,
    IntegerLiteral, RealLiteral, Identifier, UnaryOperation, BinaryOperation,
    Node,
)
from .debug import DebugLog
from .environment import Environment
from .errors import DeclarationError, LexerError, NestingError, ParseError
from .lexer import Token, TokenStream, tok_name
from .types import INTEGER, REAL

INT64_MAX = (1 << 63) - 1

ADDITIVE_OPS = ('PLUS', 'MINUS')
MULTIPLICATIVE_OPS = ('MULTIPLY', 'DIVIDE', 'MOD', 'CUSTOM_OPER')
PREFIX_OPS = ('INCREMENT', 'DECREMENT', 'MINUS')
STATEMENT_STARTS = ('IDENT', 'BEGIN', 'READ', 'WRITE')
PRIMARY_STARTS = ('INTLIT', 'FLOATLIT', 'IDENT', 'OPENPAREN')


class Parser:
    def __init__(self, tokens: TokenStream, env: Environment, debug: Optional[DebugLog] = None):
        self.tokens = tokens
        self.env = env
        self.debug = debug if debug is not None else DebugLog()
        self.lookahead: Optional[Token] = None

    # One-token lookahead

    def peek(self) -> Token:
        if self.lookahead is None:
            token = self.tokens.next_token()
            lexeme = f" [{token.value}]" if token.value else ''
            self.debug(f"peek: {tok_name(token.type)}{lexeme} @ line {token.line}", 3)
            if token.type == 'UNKNOWN':
                raise LexerError(f"Lexical error (line {token.line}): unknown lexeme '{token.value}'")
            self.lookahead = token
        return self.lookahead

    def consume(self) -> Token:
        token = self.peek()
        self.debug(f"consume: {tok_name(token.type)}", 3)
        self.lookahead = None
        return token

    def match(self, *kinds: str) -> bool:
        return self.peek().type in kinds

    def expect(self, kind: str, context: str) -> Token:
        if not self.match(kind):
            self.debug(f"expect FAIL: wanted {tok_name(kind)}, got {tok_name(self.peek().type)}", 3)
            self.fail((kind,), context)
        return self.consume()

    def fail(self, expected, context: str):
        token = self.peek()
        wanted = ' or '.join(tok_name(k) for k in expected)
        raise ParseError(
            f"Parse error (line {token.line}): expected {wanted} ({context}), "
            f"got {tok_name(token.type)} [{token.value}]"
        )

    # Program structure

    def parse_program(self) -> Program:
        self.debug("parse: program", 1)
        self.expect('PROGRAM', 'start of program')
        name = self.expect('IDENT', 'program name').value
        self.expect('SEMICOLON', 'after program name')
        block = self.parse_block()
        self.expect('EOF', 'no trailing tokens after program')
        self.debug(f"parse: program {name} complete", 1)
        return Program(name, block)

    def parse_block(self) -> Block:
        declarations: List[Declaration] = []
        if self.match('VAR'):
            self.consume()
            while self.match('IDENT'):
                declarations.append(self.parse_declaration())
        self.env.seal()
        compound = self.parse_compound()
        return Block(tuple(declarations), compound)

    def parse_declaration(self) -> Declaration:
        name_token = self.expect('IDENT', 'variable name')
        self.expect('COLON', 'after variable name')
        if not self.match(INTEGER, REAL):
            self.fail((INTEGER, REAL), 'variable type')
        type_name = self.consume().type
        self.expect('SEMICOLON', 'after variable type')
        name = name_token.value
        if name in self.env:
            raise DeclarationError(f"Parse error (line {name_token.line}): duplicate declaration of {name}")
        self.env.declare(name, type_name)
        self.debug(f"declare {name}: {type_name}", 2)
        return Declaration(name, type_name, name_token.line)

    # Statements

    def parse_compound(self) -> Compound:
        self.expect('BEGIN', 'start of compound statement')
        statements: List[Node] = [self.parse_statement()]
        while self.match('SEMICOLON'):
            self.consume()
            if self.match('END'):
                break
            statements.append(self.parse_statement())
        self.expect('END', 'end of compound statement')
        return Compound(tuple(statements))

    def parse_statement(self) -> Node:
        token = self.peek()
        if token.type == 'IDENT':
            return self.parse_assignment()
        if token.type == 'BEGIN':
            return self.parse_compound()
        if token.type == 'READ':
            return self.parse_read()
        if token.type == 'WRITE':
            return self.parse_write()
        self.fail(STATEMENT_STARTS, 'start of statement')

    def parse_assignment(self) -> Assignment:
        target = self.expect('IDENT', 'assignment target').value
        self.expect('ASSIGN', 'after assignment target')
        value = self.parse_value()
        return Assignment(target, value)

    def parse_read(self) -> Read:
        self.expect('READ', 'start of read')
        self.expect('OPENPAREN', 'after READ')
        target = self.expect('IDENT', 'read target').value
        self.expect('CLOSEPAREN', 'to close READ')
        return Read(target)

    def parse_write(self) -> Write:
        self.expect('WRITE', 'start of write')
        self.expect('OPENPAREN', 'after WRITE')
        if not self.match('STRINGLIT', 'IDENT'):
            self.fail(('STRINGLIT', 'IDENT'), 'write content')
        token = self.consume()
        self.expect('CLOSEPAREN', 'to close WRITE')
        if token.type == 'STRINGLIT':
            return Write(token.value[1:-1], False)
        return Write(token.value, True)

    # Expressions

    def parse_value(self) -> Node:
        node = self.parse_term()
        while self.match(*ADDITIVE_OPS):
            op = self.consume().type
            right = self.parse_term()
            node = BinaryOperation(op, node, right)
        return node

    def parse_term(self) -> Node:
        node = self.parse_factor()
        while self.match(*MULTIPLICATIVE_OPS):
            op = self.consume().type
            right = self.parse_factor()
            node = BinaryOperation(op, node, right)
        return node

    def parse_factor(self) -> Node:
        if self.match(*PREFIX_OPS):
            op = self.consume().type
            return UnaryOperation(op, self.parse_primary())
        return self.parse_primary()

    def parse_primary(self) -> Node:
        token = self.peek()
        if token.type == 'INTLIT':
            self.consume()
            value = int(token.value)
            if value > INT64_MAX:
                raise ParseError(f"Parse error (line {token.line}): integer literal out of range [{token.value}]")
            return IntegerLiteral(value)
        if token.type == 'FLOATLIT':
            self.consume()
            return RealLiteral(float(token.value))
        if token.type == 'IDENT':
            self.consume()
            return Identifier(token.value)
        if token.type == 'OPENPAREN':
            self.consume()
            node = self.parse_value()
            self.expect('CLOSEPAREN', 'to close parenthesized value')
            return node
        self.fail(PRIMARY_STARTS, 'operand')


def parse_program(source: str, env: Environment, debug: Optional[DebugLog] = None) -> Program:
    """Parse TIPS source code into a Program AST, declaring its variables in ``env``."""
    parser = Parser(TokenStream(source), env, debug)
    try:
        return parser.parse_program()
    except RecursionError:
        raise NestingError() from None
