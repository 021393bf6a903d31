import logging
import sys

from .engine import DEFAULT_ENGINE
from .lexer import Lexer
from .util import ErrorKind, RPNError, invalid


logger = logging.getLogger(__name__)


def _handle(kind, text):
    if kind != 'number':
        raise invalid('Expected a handle, got {!r}', text)
    try:
        return int(text.replace('_', ''))
    except ValueError:
        raise invalid('Handle {} is not an integer', text) from None


_index = _handle


def _value(kind, text):
    if kind != 'number':
        raise invalid('Expected a number, got {!r}', text)
    # Handle the underscores in here. Ugly.
    return float(text.replace('_', ''))


def _symbol(kind, text):
    if kind != 'operator':
        raise invalid('Expected one of + - * /, got {!r}', text)
    return text


class Shell:
    '''
    Runs one command line at a time against an engine.

    Each command maps onto exactly one engine operation. Failures are
    reported as the ErrorKind name plus a reason on the error stream; the
    shell itself carries on.
    '''

    # name: (operation, argument converters, whether it has output)
    COMMANDS = {
        'create': ('create', (), True),
        'delete': ('delete', (_handle,), False),
        'push': ('push', (_handle, _value), False),
        'pop': ('pop', (_handle,), True),
        'op': ('apply', (_handle, _symbol), True),
        'size': ('size', (_handle,), True),
        'at': ('at', (_handle, _index), True),
        'handles': ('handles', (), True),
        'help': ('help', (), True),
    }
    # Answered by the shell itself, not the engine.
    LOCAL = {'handles', 'help'}
    USAGE = {
        'create': 'create',
        'delete': 'delete HANDLE',
        'push': 'push HANDLE VALUE',
        'pop': 'pop HANDLE',
        'op': 'op HANDLE {+,-,*,/}',
        'size': 'size HANDLE',
        'at': 'at HANDLE INDEX',
        'handles': 'handles',
        'help': 'help',
    }

    def __init__(self, engine=None, out=None, err=None):
        '''
        Create shell on engine, the process-wide one by default.

        :param out: Where results go; stdout by default.
        :param err: Where failures go; stderr by default.
        '''
        self.engine = DEFAULT_ENGINE if engine is None else engine
        self.lexer = Lexer()
        self.out = out
        self.err = err
        self.failures = 0

    def print(self, *args, **kwargs):
        return print(*args, file=self.out or sys.stdout, **kwargs)

    def report(self, kind, message):
        '''
        Print and count a failed command.
        '''
        self.failures += 1
        print('error: {}: {}'.format(kind.name, message),
              file=self.err or sys.stderr)

    def feed(self, line):
        '''
        Run one command line. Return its ErrorKind.
        '''
        try:
            tokens = self.lexer.tokens(line)
        except RPNError as e:
            self.report(e.kind, e.message)
            return e.kind
        if not tokens:
            return ErrorKind.SUCCESS
        try:
            output, kind = self.execute(tokens)
        except RPNError as e:
            self.report(e.kind, e.message)
            return e.kind
        if kind is not ErrorKind.SUCCESS:
            self.report(kind, ' '.join(text for _, text in tokens))
        elif output is not None:
            self.print(output)
        return kind

    def execute(self, tokens):
        '''
        Run lexed command; return (output or None, ErrorKind).

        Raises RPNError for commands that never reach the engine.
        '''
        (kind, name), args = tokens[0], tokens[1:]
        if kind != 'word':
            raise invalid('Expected a command, got {!r}', name)
        try:
            operation, converters, has_output = type(self).COMMANDS[name]
        except KeyError:
            raise invalid('No such command {!r}', name) from None
        if len(args) != len(converters):
            raise invalid('Usage: {}', type(self).USAGE[name])
        converted = [convert(*arg) for convert, arg in zip(converters, args)]
        logger.debug('%s%r', operation, tuple(converted))
        target = self if name in type(self).LOCAL else self.engine
        result = getattr(target, operation)(*converted)
        return result if has_output else (None, result)

    def handles(self):
        return ' '.join(map(str, self.engine.handles())), ErrorKind.SUCCESS

    def help(self):
        return '\n'.join(type(self).USAGE[name]
                         for name in sorted(type(self).USAGE)), \
            ErrorKind.SUCCESS
