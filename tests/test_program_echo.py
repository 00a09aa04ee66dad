import io
from pathlib import Path

import pytest

from tips import Environment, Interpreter, TipsError, parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_echo_reads_per_slot_type(capsys):
    source = (EXAMPLES / 'echo.tips').read_text(encoding='utf-8')
    env = Environment()
    ast = parse_program(source, env)
    Interpreter(input=io.StringIO('21 2.25\n')).run(ast, env)
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['doubled:', '42', '4.5']


def test_program_echo_values_on_separate_lines():
    source = (EXAMPLES / 'echo.tips').read_text(encoding='utf-8')
    env = Environment()
    ast = parse_program(source, env)
    out = io.StringIO()
    Interpreter(output=out, input=io.StringIO('\n3\n\n7\n')).run(ast, env)
    assert out.getvalue() == 'doubled:\n6\n14\n'
    assert env.get('x') == 14.0


def test_program_echo_rejects_real_for_integer_slot():
    source = (EXAMPLES / 'echo.tips').read_text(encoding='utf-8')
    env = Environment()
    ast = parse_program(source, env)
    with pytest.raises(TipsError) as exc:
        Interpreter(input=io.StringIO('2.5 1.0\n')).run(ast, env)
    assert str(exc.value) == 'invalid INTEGER input: 2.5'


def test_program_echo_runs_out_of_input():
    source = (EXAMPLES / 'echo.tips').read_text(encoding='utf-8')
    env = Environment()
    ast = parse_program(source, env)
    with pytest.raises(TipsError) as exc:
        Interpreter(input=io.StringIO('5\n')).run(ast, env)
    assert str(exc.value) == 'READ: unexpected end of input'
    assert exc.value.name == 'InputError'
    assert env.get('n') == 5


@pytest.mark.parametrize('stdin, message', [
    ('1_000 1.0\n', 'invalid INTEGER input: 1_000'),
    ('٣ 1.0\n', 'invalid INTEGER input: ٣'),
    ('0x10 1.0\n', 'invalid INTEGER input: 0x10'),
    ('4 nan\n', 'invalid REAL input: nan'),
    ('4 inf\n', 'invalid REAL input: inf'),
    ('4 1e999\n', 'invalid REAL input: 1e999'),
    ('4 ٣\n', 'invalid REAL input: ٣'),
    ('4 1_0.5\n', 'invalid REAL input: 1_0.5'),
])
def test_program_echo_rejects_non_decimal_input(stdin, message):
    source = (EXAMPLES / 'echo.tips').read_text(encoding='utf-8')
    env = Environment()
    ast = parse_program(source, env)
    with pytest.raises(TipsError) as exc:
        Interpreter(input=io.StringIO(stdin)).run(ast, env)
    assert str(exc.value) == message
    assert exc.value.name == 'InputError'


@pytest.mark.parametrize('stdin, n, x', [
    ('-4 +2.5e1\n', -8, 50.0),
    ('+3 .5\n', 6, 1.0),
    ('007 3.\n', 14, 6.0),
])
def test_program_echo_accepts_signed_decimal_input(stdin, n, x):
    source = (EXAMPLES / 'echo.tips').read_text(encoding='utf-8')
    env = Environment()
    ast = parse_program(source, env)
    Interpreter(output=io.StringIO(), input=io.StringIO(stdin)).run(ast, env)
    assert env.get('n') == n
    assert env.get('x') == x
