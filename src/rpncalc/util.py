from enum import IntEnum
from functools import wraps
from numbers import Integral, Real

import logging


logger = logging.getLogger(__name__)


class ErrorKind(IntEnum):
    '''
    Result of every public calculator operation.

    Values match the status codes of the kernel calculator this engine
    replaces, so transports can hand them straight back to their callers.
    '''
    SUCCESS = 0
    NO_MEMORY = -1
    INVALID_ARGUMENT = -2
    INSUFFICIENT_OPERANDS = -3


class RPNError(Exception):
    '''
    Raised inside the engine; never escapes a public operation.
    '''
    def __init__(self, kind, message=None):
        super().__init__(message or kind.name.lower().replace('_', ' '))
        self.kind = kind

    @property
    def message(self):
        return self.args[0]


def invalid(fmt, *args):
    return RPNError(ErrorKind.INVALID_ARGUMENT, fmt.format(*args))


def insufficient(needed, have):
    return RPNError(ErrorKind.INSUFFICIENT_OPERANDS,
                    'Less than {} element(s) on stack ({})'.format(needed,
                                                                  have))


def as_integer(n):
    '''
    Validate a handle or index; bools are not accepted.
    '''
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise invalid('Not an integer: {!r}', n)
    return int(n)


def as_real(value):
    '''
    Convert an operand to the engine's native float.
    '''
    if isinstance(value, bool) or not isinstance(value, Real):
        raise invalid('Not a real number: {!r}', value)
    try:
        return float(value)
    except OverflowError:
        raise invalid('Out of float range: {!r}', value) from None


def reports_errors(result=True):
    '''
    Decorator that converts raised errors into returned ErrorKinds.

    With result, the wrapped function's return value becomes (value, kind),
    and a failure gives (None, kind). Without, only the kind is returned.

    Passes through anything that isn't an RPNError or a MemoryError.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                value = f(*args, **kwargs)
            except RPNError as e:
                logger.debug('%s refused: %s', f.__name__, e.message)
                kind = e.kind
            except MemoryError:
                logger.warning('%s ran out of memory', f.__name__)
                kind = ErrorKind.NO_MEMORY
            else:
                return (value, ErrorKind.SUCCESS) if result \
                    else ErrorKind.SUCCESS
            return (None, kind) if result else kind
        return wrapper
    return decorator
