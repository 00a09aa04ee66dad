# TIPS language package
# This package provides a parser and interpreter for a subset of the TIPS language.
from .environment import Environment
from .errors import TipsError
from .interpreter import Interpreter, run_program
from .parser import parse_program

__all__ = [
    'parse_program',
    'run_program',
    'Interpreter',
    'Environment',
    'TipsError',
]
