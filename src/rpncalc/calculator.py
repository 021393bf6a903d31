from collections import deque
from threading import Lock

from .util import as_integer, as_real, insufficient, invalid


class Calculator:
    '''
    One RPN stack machine, addressed by its handle.

    The stack is a deque whose right end is the top; indexes as seen by
    callers count down from the top, so 0 is the most recently pushed value.

    Every stack method assumes the caller holds the instance lock. Entering
    the calculator as a context manager takes the lock and refuses to go on
    once the calculator has been closed.
    '''

    def __init__(self, handle):
        '''
        Create empty calculator.

        :param handle: Handle the registry assigned to it. Never changes.
        '''
        self._handle = handle
        self.lock = Lock()
        self.stack = deque()
        self.closed = False

    @property
    def handle(self):
        return self._handle

    def __repr__(self):
        return '<{} handle={} size={}{}>'.format(type(self).__name__,
                                                self.handle,
                                                len(self.stack),
                                                ' closed' if self.closed
                                                else '')

    def __enter__(self):
        self.lock.acquire()
        if self.closed:
            self.lock.release()
            raise invalid('Calculator {} has been deleted', self.handle)
        return self

    def __exit__(self, *exc_info):
        self.lock.release()

    def close(self):
        '''
        Drop all entries and refuse further use.

        Blocks until whoever holds the instance lock lets go of it.
        '''
        with self.lock:
            self.closed = True
            self.stack.clear()

    def size(self):
        return len(self.stack)

    def push(self, value):
        '''
        Push value onto the top of the stack.

        A MemoryError from the deque leaves the stack as it was.
        '''
        self._pshstack(as_real(value))

    def pop(self):
        '''
        Pop and return the top of the stack.
        '''
        return self._popstack()[0]

    def peek(self):
        '''
        Return the top of the stack, leaving it there.
        '''
        if not self.stack:
            raise insufficient(1, 0)
        return self.stack[-1]

    def at(self, index):
        '''
        Return the value index places below the top.
        '''
        index = as_integer(index)
        if not 0 <= index < len(self.stack):
            raise invalid('Index {} out of range for stack of {}',
                          index, len(self.stack))
        return self.stack[-1 - index]

    def replace(self, n, value):
        '''
        Replace the top n entries with value, all or nothing.

        Overwrites the deepest of them in place, so the stack never has to
        grow once an operand is gone.
        '''
        if len(self.stack) < n:
            raise insufficient(n, len(self.stack))
        self.stack[-n] = value
        self._popstack(n - 1)

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise insufficient(n, len(self.stack))
        return [self.stack.pop() for _ in range(n)]

