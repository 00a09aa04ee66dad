from pathlib import Path

from tips import Environment, Interpreter, parse_program

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_nested_lowercase_keywords(capsys):
    source = (EXAMPLES / 'nested.tips').read_text(encoding='utf-8')
    env = Environment()
    ast = parse_program(source, env)
    Interpreter().run(ast, env)
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['inner block', '15', '3.75']


def test_program_nested_is_deterministic(capsys):
    source = (EXAMPLES / 'nested.tips').read_text(encoding='utf-8')
    outputs = []
    for _ in range(2):
        env = Environment()
        ast = parse_program(source, env)
        Interpreter().run(ast, env)
        outputs.append(capsys.readouterr().out)
    assert outputs[0] == outputs[1]
