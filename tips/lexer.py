"""Token source for the TIPS language.

The token set is described as a Lark grammar and scanned with Lark's
basic lexer; the grammar's single rule only lists the terminals so that
Lark keeps all of them. The parser never sees Lark objects: every token
is converted to a plain ``Token`` and the stream always ends with one
``EOF`` token. Characters that belong to no token become ``UNKNOWN``
tokens instead of raising, so the parser decides when a lexical error
is reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from lark import Lark


TIPS_GRAMMAR = r"""
    start: _token*

    _token: PROGRAM | VAR | BEGIN | END | READ | WRITE
          | IF | THEN | ELSE | WHILE
          | INTEGER | REAL
          | MOD | NOT | OR | AND
          | SEMICOLON | COLON | OPENPAREN | CLOSEPAREN
          | PLUS | MINUS | MULTIPLY | DIVIDE | ASSIGN
          | EQUALTO | LESSTHAN | GREATERTHAN | NOTEQUALTO
          | CUSTOM_OPER | INCREMENT | DECREMENT
          | IDENT | INTLIT | FLOATLIT | STRINGLIT
          | UNKNOWN

    // Keywords (case-insensitive, whole words only)
    PROGRAM.2: /program\b/i
    VAR.2: /var\b/i
    BEGIN.2: /begin\b/i
    END.2: /end\b/i
    READ.2: /read\b/i
    WRITE.2: /write\b/i
    IF.2: /if\b/i
    THEN.2: /then\b/i
    ELSE.2: /else\b/i
    WHILE.2: /while\b/i

    // Datatype specifiers
    INTEGER.2: /integer\b/i
    REAL.2: /real\b/i

    // Word operators
    MOD.2: /mod\b/i
    NOT.2: /not\b/i
    OR.2: /or\b/i
    AND.2: /and\b/i

    // Punctuation
    SEMICOLON: ";"
    COLON: ":"
    OPENPAREN: "("
    CLOSEPAREN: ")"

    // Operators
    PLUS: "+"
    MINUS: "-"
    MULTIPLY: "*"
    DIVIDE: "/"
    ASSIGN: ":="
    EQUALTO: "="
    LESSTHAN: "<"
    GREATERTHAN: ">"
    NOTEQUALTO: "<>"
    CUSTOM_OPER: "^^"
    INCREMENT: "++"
    DECREMENT: "--"

    // Literals and identifiers
    FLOATLIT.1: /\d+\.\d+/
    INTLIT: /\d+/
    STRINGLIT: /"[^"\n]*"/
    IDENT: /[A-Za-z_][A-Za-z0-9_]*/

    // Anything else is a single unknown character
    UNKNOWN.-1: /\S/

    COMMENT: /\{[^}]*\}/
    %import common.WS
    %ignore WS
    %ignore COMMENT
"""


TIPS_LEXER = Lark(
    TIPS_GRAMMAR,
    parser='lalr',
    lexer='basic',
)


# Kinds whose friendly name differs from the kind itself
TOKEN_NAMES = {
    'CUSTOM_OPER': 'CUSTOM OPERATOR',
}


@dataclass
class Token:
    type: str
    value: str
    line: int
    column: int


def tok_name(kind: str) -> str:
    """Friendly token name used in diagnostics and the AST printer."""
    return TOKEN_NAMES.get(kind, kind)


def tokenize(source: str) -> Iterator[Token]:
    """Yield the tokens of ``source`` followed by a single EOF token."""
    for tok in TIPS_LEXER.lex(source):
        yield Token(tok.type, str(tok), tok.line, tok.column)
    yield Token('EOF', '', source.count('\n') + 1, 0)


class TokenStream:
    """Pull interface over ``tokenize``.

    Once the source is exhausted every further call returns the EOF token
    again.
    """
    def __init__(self, source: str):
        self._tokens = tokenize(source)
        self._eof: Optional[Token] = None

    def next_token(self) -> Token:
        if self._eof is not None:
            return self._eof
        token = next(self._tokens)
        if token.type == 'EOF':
            self._eof = token
        return token

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type == 'EOF':
                return
