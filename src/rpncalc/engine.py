'''
The public calculator operations.

Nothing here raises for a bad call: each operation returns an ErrorKind,
paired with its output where it has one. Outputs are None on failure.

    >>> h, _ = create()
    >>> push(h, 2), push(h, 3)
    (<ErrorKind.SUCCESS: 0>, <ErrorKind.SUCCESS: 0>)
    >>> apply(h, '+')
    (5.0, <ErrorKind.SUCCESS: 0>)
'''

from .reducer import reduce
from .registry import HandleRegistry
from .util import reports_errors


class Engine:
    '''
    Calculator operations over one handle registry.

    Each operation resolves its handle under the table lock, lets go of it,
    then does its work inside the calculator, under the instance lock.
    '''

    def __init__(self, registry=None):
        self.registry = HandleRegistry() if registry is None else registry

    def _calculator(self, handle):
        return self.registry.resolve(handle)

    @reports_errors()
    def create(self):
        return self.registry.create()

    @reports_errors(result=False)
    def delete(self, handle):
        self.registry.delete(handle)

    @reports_errors(result=False)
    def push(self, handle, value):
        with self._calculator(handle) as calculator:
            calculator.push(value)

    @reports_errors()
    def pop(self, handle):
        with self._calculator(handle) as calculator:
            return calculator.pop()

    @reports_errors()
    def apply(self, handle, symbol):
        '''
        Apply one of + - * / to the top two entries; return the new top.
        '''
        with self._calculator(handle) as calculator:
            return reduce(calculator, symbol)

    @reports_errors()
    def size(self, handle):
        with self._calculator(handle) as calculator:
            return calculator.size()

    @reports_errors()
    def at(self, handle, index):
        '''
        Return the entry index places below the top of the stack.
        '''
        with self._calculator(handle) as calculator:
            return calculator.at(index)

    def handles(self):
        return self.registry.handles()

    def clear(self):
        return self.registry.clear()


# Shared by everything in the process that doesn't bring its own engine.
DEFAULT_ENGINE = Engine()

create = DEFAULT_ENGINE.create
delete = DEFAULT_ENGINE.delete
push = DEFAULT_ENGINE.push
pop = DEFAULT_ENGINE.pop
apply = DEFAULT_ENGINE.apply
size = DEFAULT_ENGINE.size
at = DEFAULT_ENGINE.at


__all__ = ('Engine', 'DEFAULT_ENGINE',
           'create', 'delete', 'push', 'pop', 'apply', 'size', 'at')
