"""Tree-walking interpreter for the TIPS language.

The interpreter executes a parsed ``Program`` against the ``Environment``
its declarations were entered into. Values are plain ``int`` (Integer)
and ``float`` (Real). Binary arithmetic stays in Integer arithmetic only
when both operands are Integers and otherwise widens both to Real;
assignments and reads convert into the variant the target slot was
declared with. Every failure is raised as a ``TipsError`` and ends the
run.
"""

from __future__ import annotations

from typing import List, Optional, TextIO

from .ast import (
    Program, Block, Compound, Assignment, Read, Write,
    IntegerLiteral, RealLiteral, Identifier, UnaryOperation, BinaryOperation,
    Node,
)
from .basic_io import BasicIO
from .debug import DebugLog
from .environment import Environment
from .errors import NestingError, TipsError
from .parser import parse_program
from .types import (
    ErrorVal, Value, is_integer, as_real, as_int_strict, wrap_integer,
    int_divide, int_remainder, real_divide, real_power, to_string,
)

ARITHMETIC_OPS = ('PLUS', 'MINUS', 'MULTIPLY', 'DIVIDE')


class Interpreter:
    """Core interpreter that executes a TIPS AST."""
    def __init__(self, debug_level: int = 0, output: Optional[TextIO] = None,
                 input: Optional[TextIO] = None, debug: Optional[DebugLog] = None):
        self.io = BasicIO(output, input)
        self._owns_debug = debug is None
        self.debug = debug if debug is not None else DebugLog(debug_level)

    # Public API
    def run(self, program: Program, env: Environment) -> Environment:
        self.debug(f"run: program {program.name}", 1)
        try:
            self.execute(program, env)
            self.debug(f"run: program {program.name} complete", 1)
        except RecursionError:
            raise NestingError() from None
        finally:
            if self._owns_debug:
                self.debug.close()
        return env

    def execute(self, node: Node, env: Environment):
        if isinstance(node, Program):
            self.execute(node.block, env)
            return
        if isinstance(node, Block):
            self.execute(node.compound, env)
            return
        if isinstance(node, Compound):
            for stmt in node.statements:
                self.execute(stmt, env)
            return
        if isinstance(node, Assignment):
            value = self.evaluate(node.value, env)
            stored = env.set(node.target, value)
            self.debug(f"assign {node.target} := {to_string(stored)}", 2)
            return
        if isinstance(node, Read):
            kind = env.type_of(node.target)
            stored = env.set(node.target, self.io.read_value(kind))
            self.debug(f"read {node.target} = {to_string(stored)}", 2)
            return
        if isinstance(node, Write):
            if node.is_identifier:
                text = to_string(env.get(node.content))
            else:
                text = node.content
            self.debug(f"write {text!r}", 2)
            self.io.write_line(text)
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Node, env: Environment) -> Value:
        if isinstance(node, (IntegerLiteral, RealLiteral)):
            return node.value
        if isinstance(node, Identifier):
            return env.get(node.name)
        if isinstance(node, UnaryOperation):
            return self.apply_unary_op(node, env)
        if isinstance(node, BinaryOperation):
            left = self.evaluate(node.left, env)
            right = self.evaluate(node.right, env)
            return self.apply_binary_op(node.op, left, right)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def apply_unary_op(self, node: UnaryOperation, env: Environment) -> Value:
        if node.op == 'MINUS':
            operand = self.evaluate(node.operand, env)
            if is_integer(operand):
                return wrap_integer(-operand)
            return -operand
        if node.op in ('INCREMENT', 'DECREMENT'):
            if not isinstance(node.operand, Identifier):
                raise TipsError(ErrorVal('TypeError', '++/-- must apply to an identifier'))
            name = node.operand.name
            current = env.get(name)
            step = 1 if node.op == 'INCREMENT' else -1
            if is_integer(current):
                updated = wrap_integer(current + step)
            else:
                updated = current + float(step)
            return env.set(name, updated)
        raise TipsError(ErrorVal('InternalError', 'Unknown unary operator'))

    def apply_binary_op(self, op: str, a: Value, b: Value) -> Value:
        try:
            if op in ARITHMETIC_OPS:
                if is_integer(a) and is_integer(b):
                    if op == 'PLUS':
                        return wrap_integer(a + b)
                    if op == 'MINUS':
                        return wrap_integer(a - b)
                    if op == 'MULTIPLY':
                        return wrap_integer(a * b)
                    return int_divide(a, b)
                x, y = as_real(a), as_real(b)
                if op == 'PLUS':
                    return x + y
                if op == 'MINUS':
                    return x - y
                if op == 'MULTIPLY':
                    return x * y
                return real_divide(x, y)
            if op == 'MOD':
                try:
                    x, y = as_int_strict(a), as_int_strict(b)
                except TypeError as e:
                    raise TipsError(ErrorVal('TypeError', str(e)))
                return int_remainder(x, y)
            if op == 'CUSTOM_OPER':
                # only the both-Integer case is rejected
                if is_integer(a) and is_integer(b):
                    raise TipsError(ErrorVal('TypeError', 'EXPON must only have doubles.'))
                return real_power(as_real(a), as_real(b))
        except ZeroDivisionError as e:
            raise TipsError(ErrorVal('ArithmeticError', str(e)))
        raise TipsError(ErrorVal('InternalError', 'BinaryOp: Fails to match any case.'))


def symbol_lines(env: Environment) -> List[str]:
    """Symbol table dump, one ``name is value`` line per slot in declaration order."""
    return [f"{name} is {to_string(value)}" for name, value in env.items()]


def run_program(source: str, output: Optional[TextIO] = None, input: Optional[TextIO] = None,
                debug_level: int = 0) -> Environment:
    """Convenience function to parse and run a TIPS program from source string."""
    env = Environment()
    debug = DebugLog(debug_level)
    try:
        program = parse_program(source, env, debug)
        Interpreter(output=output, input=input, debug=debug).run(program, env)
    finally:
        debug.close()
    return env
