from threading import Lock

import logging

from .calculator import Calculator
from .util import ErrorKind, RPNError, as_integer, invalid


logger = logging.getLogger(__name__)


class HandleRegistry:
    '''
    Map of handles to the calculators they name.

    The table lock only guards the map itself. It is never held while a
    calculator's stack is touched, and a calculator's lock is never taken
    while holding it.

    Handles count up from 0 and are never reused. Once the next handle would
    pass max_handle, creation fails with NO_MEMORY instead of wrapping.
    '''

    MAX_HANDLE = 2 ** 63 - 1

    def __init__(self, max_handle=None):
        '''
        Create empty registry.

        :param max_handle: Largest handle to hand out.
        '''
        self.max_handle = type(self).MAX_HANDLE if max_handle is None \
            else max_handle
        self.lock = Lock()
        self.calculators = dict()
        self._next = 0
        logger.info('Calculator registry created')

    def __len__(self):
        with self.lock:
            return len(self.calculators)

    def __contains__(self, handle):
        return self.lookup(handle) is not None

    def create(self):
        '''
        Register a new, empty calculator and return its handle.
        '''
        with self.lock:
            if self._next > self.max_handle:
                raise RPNError(ErrorKind.NO_MEMORY,
                               'Handles exhausted at {}'.format(
                                   self.max_handle))
            calculator = Calculator(self._next)
            self.calculators[calculator.handle] = calculator
            self._next += 1
        logger.debug('Created calculator %d', calculator.handle)
        return calculator.handle

    def lookup(self, handle):
        '''
        Return the calculator for handle, or None.

        Only the lookup is locked; take the calculator's own lock (enter it)
        before touching it, which also catches a delete that raced in.
        '''
        try:
            handle = as_integer(handle)
        except RPNError:
            return None
        with self.lock:
            return self.calculators.get(handle)

    def resolve(self, handle):
        '''
        Like lookup, but raise for unknown handles.
        '''
        handle = as_integer(handle)
        calculator = self.lookup(handle)
        if calculator is None:
            raise invalid('No calculator with handle {}', handle)
        return calculator

    def delete(self, handle):
        '''
        Unregister handle, then close its calculator.

        Closing waits for any operation already inside the calculator.
        '''
        handle = as_integer(handle)
        with self.lock:
            calculator = self.calculators.pop(handle, None)
        if calculator is None:
            raise invalid('No calculator with handle {}', handle)
        calculator.close()
        logger.debug('Deleted calculator %d', handle)

    def handles(self):
        '''
        Return sorted live handles, as of now.
        '''
        with self.lock:
            return sorted(self.calculators)

    def clear(self):
        '''
        Delete every calculator. Return how many there were.
        '''
        with self.lock:
            calculators = list(self.calculators.values())
            self.calculators.clear()
        for calculator in calculators:
            calculator.close()
        logger.info('Calculator registry cleared (%d removed)',
                    len(calculators))
        return len(calculators)
