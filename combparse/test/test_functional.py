import operator

import pytest

from ..functional import apply_optional, compose, curry, keep_first, lift_optional, pipe
from ..grammars import multiply


def test_curry():
    assert curry(multiply)(2)("*")(3) == 6
    assert curry(operator.add)(1)(2) == 3
    assert curry(keep_first)("a")("b") == "a"

    inc = lambda x: x + 1
    assert curry(inc) is inc


def test_curry_explicit_arity():
    def join(*parts):
        return "".join(parts)

    assert curry(join, 3)("a")("b")("c") == "abc"


def test_curried_function_is_reusable():
    times = curry(multiply)(3)("*")
    assert times(2) == 6
    assert times(4) == 12


def test_curry_rejects_non_callable():
    with pytest.raises(TypeError):
        curry(5)


def test_compose_runs_left_to_right():
    add_one_then_double = compose(lambda x: x + 1, lambda x: x * 2)
    assert add_one_then_double(3) == 8
    assert compose()(3) == 3


def test_pipe():
    assert pipe(3, lambda x: x + 1, str) == "4"
    assert pipe("x") == "x"


def test_optional_applicative():
    assert apply_optional(None, 1) is None
    assert apply_optional(str, None) is None
    assert apply_optional(str, 1) == "1"

    add_optionals = lift_optional(operator.add)
    assert add_optionals(1, 2) == 3
    assert add_optionals(1, None) is None
    assert add_optionals(None, 2) is None
