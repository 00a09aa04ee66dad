from pathlib import Path

from tips import Environment, Interpreter, parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_slots_keep_their_type(capsys):
    source = (EXAMPLES / 'slots.tips').read_text(encoding='utf-8')
    env = Environment()
    ast = parse_program(source, env)
    Interpreter().run(ast, env)
    out = capsys.readouterr().out.strip().split('\n')
    # REAL into INTEGER truncates toward zero, INTEGER into REAL widens
    assert out == ['7', '-2', '3.5']
    assert isinstance(env.get('i'), int)
    assert isinstance(env.get('r'), float)
