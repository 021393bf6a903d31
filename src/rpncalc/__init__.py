'''
Multi-instance RPN calculator engine.

Any number of clients, on any number of threads, each get their own
calculator, named by an integer handle. Calculators live in a shared
registry and never see each other's stacks. Operations never raise for a
bad call; they return an ErrorKind:

    >>> from rpncalc import create, push, apply, ErrorKind
    >>> h, kind = create()
    >>> push(h, 10), push(h, 4)
    (<ErrorKind.SUCCESS: 0>, <ErrorKind.SUCCESS: 0>)
    >>> apply(h, '-')
    (6.0, <ErrorKind.SUCCESS: 0>)

Values are native floats; dividing by zero gives infinity or NaN, as the
hardware would, rather than an error.

The shell (rpncalc.shell) and CLI (rpncalc.cli) put a line-at-a-time
command language in front of the same operations.
'''

from .calculator import Calculator
from .engine import Engine, DEFAULT_ENGINE, \
    create, delete, push, pop, apply, size, at
from .registry import HandleRegistry
from .util import ErrorKind, RPNError


__all__ = ('Calculator', 'Engine', 'HandleRegistry', 'ErrorKind', 'RPNError',
           'DEFAULT_ENGINE',
           'create', 'delete', 'push', 'pop', 'apply', 'size', 'at')
