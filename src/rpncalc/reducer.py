'''
Binary arithmetic on the top two entries of a calculator.

`a b -` means a - b: the entry below the top is the left operand.
'''

from math import copysign, inf, isnan, nan
import operator

from .util import insufficient, invalid


def truediv(left, right):
    '''
    IEEE-754 division; Python raises on zero divisors, hardware doesn't.
    '''
    if right == 0:
        if left == 0 or isnan(left):
            return nan
        return copysign(inf, left) * copysign(1.0, right)
    return left / right


OPERATORS = {
    '+': operator.__add__,
    '-': operator.__sub__,
    '*': operator.__mul__,
    '/': truediv,
}


def reduce(calculator, symbol):
    '''
    Replace the top two entries of calculator with op2 <symbol> op1.

    op1 is the top, op2 the one pushed before it. The caller holds the
    instance lock. Nothing is popped unless the result is already computed,
    so a failure leaves the stack as it was.

    :return: The result, which is also the new top.
    '''
    try:
        f = OPERATORS[symbol]
    except (KeyError, TypeError):
        raise invalid('No such operator {!r}', symbol) from None
    if calculator.size() < 2:
        raise insufficient(2, calculator.size())
    op1, op2 = calculator.at(0), calculator.at(1)
    result = f(op2, op1)
    calculator.replace(2, result)
    return result
