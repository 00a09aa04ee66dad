"""CLI entry point for the TIPS interpreter.

Usage:
    python -m tips [-v|-vv|-vvv] [-t] [-p] [-s] [program_file]

Options:
  -v            Increase debug verbosity (can be repeated)
  -t            Dump the token stream and exit
  -p            Print the AST after parsing
  -s            Print the symbol table after interpretation

The program is read from standard input when no file is given. Debug
information is written to `debug.txt` in the current directory when
verbosity is greater than zero. Parse and runtime errors are printed to
standard error and exit with status 2; bad command lines and unreadable
program files exit with status 1.
"""

import argparse
import sys
from pathlib import Path

from .debug import DebugLog
from .environment import Environment
from .errors import TipsError
from .interpreter import Interpreter, symbol_lines
from .lexer import TokenStream, tok_name
from .parser import parse_program
from .printer import format_tree


class ArgumentParser(argparse.ArgumentParser):
    """Usage errors exit with status 1 rather than argparse's 2."""
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def dump_tokens(source: str) -> int:
    for token in TokenStream(source):
        line = f"{token.line} {tok_name(token.type)}"
        if token.type in ('IDENT', 'STRINGLIT'):
            line += f" {token.value}"
        print(line)
        if token.type == 'UNKNOWN':
            print(f"Lexical error near: '{token.value}'", file=sys.stderr)
            return 2
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = ArgumentParser(prog='tips', description="TIPS language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('-t', dest='tokens', action='store_true', help='dump tokens and exit')
    parser.add_argument('-p', dest='print_ast', action='store_true', help='print the AST after parsing')
    parser.add_argument('-s', dest='symbols', action='store_true', help='print the symbol table after interpretation')
    parser.add_argument('program', nargs='?', help='TIPS program file to execute (default: stdin)')
    args = parser.parse_args(argv)

    if args.program:
        program_file = Path(args.program)
        if not program_file.exists():
            print(f"Error: file {program_file} not found", file=sys.stderr)
            sys.exit(1)
        try:
            with open(program_file, 'r', encoding='utf-8') as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read {program_file}: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        source = sys.stdin.read()

    # Token dump mode
    if args.tokens:
        rc = dump_tokens(source)
        if rc:
            sys.exit(rc)
        return

    env = Environment()
    debug = DebugLog(args.v)
    try:
        ast_program = parse_program(source, env, debug)
        if args.print_ast:
            print(format_tree(ast_program))
        Interpreter(debug=debug).run(ast_program, env)
    except TipsError as e:
        print(e, file=sys.stderr)
        sys.exit(2)
    finally:
        debug.close()

    if args.symbols:
        for line in symbol_lines(env):
            print(line)


if __name__ == '__main__':
    main()
