import math
import re
import sys
from typing import List, Optional, TextIO

from tips.errors import TipsError
from tips.types import ErrorVal, INTEGER, Value, wrap_integer

INTEGER_INPUT = re.compile(r'[+-]?[0-9]+')
REAL_INPUT = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


class BasicIO:
    """Output sink and input source used by WRITE and READ.

    Streams left as ``None`` resolve to ``sys.stdout``/``sys.stdin`` when
    they are used. Input is consumed one whitespace-delimited token at a
    time, so several values may share a line. Only plain ASCII decimal
    numbers are accepted.
    """
    def __init__(self, output: Optional[TextIO] = None, input: Optional[TextIO] = None):
        self.output = output
        self.input = input
        self.pending: List[str] = []

    def write_line(self, text: str):
        out = self.output if self.output is not None else sys.stdout
        print(text, file=out)

    def read_token(self) -> str:
        src = self.input if self.input is not None else sys.stdin
        while not self.pending:
            line = src.readline()
            if line == '':
                raise TipsError(ErrorVal('InputError', 'READ: unexpected end of input'))
            self.pending = line.split()
        return self.pending.pop(0)

    def read_value(self, kind: str) -> Value:
        token = self.read_token()
        pattern = INTEGER_INPUT if kind == INTEGER else REAL_INPUT
        if not pattern.fullmatch(token):
            raise TipsError(ErrorVal('InputError', f'invalid {kind} input: {token}'))
        if kind == INTEGER:
            return wrap_integer(int(token))
        value = float(token)
        if math.isinf(value):
            raise TipsError(ErrorVal('InputError', f'invalid {kind} input: {token}'))
        return value
