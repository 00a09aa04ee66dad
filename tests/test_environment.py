import math

import pytest

from tips import Environment, TipsError
from tips.errors import DeclarationError


def make_env():
    env = Environment()
    env.declare('i', 'INTEGER')
    env.declare('r', 'REAL')
    env.seal()
    return env


def test_defaults_and_order():
    env = make_env()
    assert list(env.items()) == [('i', 0), ('r', 0.0)]
    assert env.type_of('i') == 'INTEGER'
    assert env.type_of('r') == 'REAL'


def test_set_preserves_slot_variant():
    env = make_env()
    assert env.set('i', 7.9) == 7
    assert env.set('i', -7.9) == -7
    assert isinstance(env.get('i'), int)
    assert env.set('r', 3) == 3.0
    assert isinstance(env.get('r'), float)


def test_undeclared_lookup():
    env = make_env()
    with pytest.raises(TipsError) as exc:
        env.get('missing')
    assert str(exc.value) == 'undeclared identifier missing'
    assert exc.value.name == 'NameError'
    with pytest.raises(TipsError):
        env.set('missing', 1)


def test_duplicate_and_sealed_declarations():
    env = Environment()
    env.declare('x', 'INTEGER')
    with pytest.raises(DeclarationError):
        env.declare('x', 'REAL')
    env.seal()
    with pytest.raises(DeclarationError):
        env.declare('y', 'REAL')
    assert 'y' not in env


def test_non_finite_real_into_integer_slot():
    env = make_env()
    with pytest.raises(TipsError) as exc:
        env.set('i', math.inf)
    assert exc.value.name == 'ArithmeticError'
