'''
Arithmetic reducer tests
'''

from math import inf, isnan

from rpncalc.calculator import Calculator
from rpncalc.reducer import OPERATORS, reduce, truediv
from rpncalc.util import ErrorKind, RPNError

from pytest import mark, raises


def stack(calculator):
    return [calculator.at(i) for i in range(calculator.size())]


def run(symbol, *values):
    calculator = Calculator(0)
    with calculator:
        for value in values:
            calculator.push(value)
        result = reduce(calculator, symbol)
        return result, stack(calculator)


@mark.parametrize('symbol, expected', [
    ('+', 13.0),
    ('-', 7.0),
    ('*', 30.0),
    ('/', 10 / 3),
])
def test_left_operand_pushed_first(symbol, expected):
    result, after = run(symbol, 10, 3)
    assert result == expected
    assert after == [expected]


def test_rest_of_stack_untouched():
    result, after = run('-', 100, 8, 2)
    assert result == 6.0
    assert after == [6.0, 100.0]


@mark.parametrize('symbol', sorted(OPERATORS))
def test_insufficient_operands(symbol):
    calculator = Calculator(0)
    with calculator:
        for values in ([], [1.0]):
            for value in values:
                calculator.push(value)
            with raises(RPNError) as e:
                reduce(calculator, symbol)
            assert e.value.kind is ErrorKind.INSUFFICIENT_OPERANDS
            assert stack(calculator) == values


@mark.parametrize('symbol', ['?', '%', '', '++', None])
def test_unknown_operator(symbol):
    calculator = Calculator(0)
    with calculator:
        calculator.push(1)
        calculator.push(2)
        with raises(RPNError) as e:
            reduce(calculator, symbol)
        assert e.value.kind is ErrorKind.INVALID_ARGUMENT
        assert stack(calculator) == [2.0, 1.0]


def test_divide_by_zero_is_infinite():
    result, after = run('/', 10, 0)
    assert result == inf
    assert after == [inf]


def test_divide_by_negative_zero():
    assert truediv(10.0, -0.0) == -inf
    assert truediv(-10.0, 0.0) == -inf
    assert truediv(-10.0, -0.0) == inf


def test_zero_over_zero_is_nan():
    assert isnan(truediv(0.0, 0.0))
    assert isnan(truediv(float('nan'), 0.0))


def test_divide_infinity_by_zero():
    assert truediv(inf, 0.0) == inf


def test_overflow_to_infinity():
    result, _ = run('*', 1e308, 10)
    assert result == inf
