from os import isatty
from sys import stdin, stdout, stderr
from argparse import ArgumentParser, REMAINDER, OPTIONAL

import logging

from prompt_toolkit import PromptSession

from .engine import Engine
from .lexer import Lexer
from .shell import Shell
from .util import RPNError


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator engine.
    '''

    DEFAULT_PROMPT = '> '
    LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'

    def dumper(self):
        '''
        Dump all lexemes matches and their kind.
        '''
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                groups = lexer.matchedgroups(match)
                print(*groups.keys(),
                      repr(match.group(0)),
                      sep='\t')
        return 0

    def executor(self):
        '''
        Run every command line against a fresh engine.
        '''
        engine = Engine()
        shell = Shell(engine)
        try:
            for line in self.args.expressions:
                shell.feed(line)
        finally:
            engine.clear()
        return 1 if shell.failures else 0

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)
        return 0

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Multi-instance RPN calculator shell')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log engine activity')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions',
                                       help='command lines to run')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.

        :return: Exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(format=self.LOG_FORMAT,
                            level=logging.DEBUG if self.args.verbose
                            else logging.WARNING)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            return self.args.action()
        except RPNError as e:
            print(e.message, file=stderr)
            return 1
        except KeyboardInterrupt:
            return 1


def main():
    return CLI().run()
