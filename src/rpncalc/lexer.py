from functools import reduce
import operator

import regex

from .reducer import OPERATORS
from .util import invalid


class Lexer:
    '''
    Lexer for shell command lines: words, numbers and operator symbols.

    Stateless; one instance can serve any number of shells.
    '''
    # Integral part of a number
    INTEGRAL = r'''
                # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                (?:
                    # 1, 12, or the 1 in 1_200.
                    \d{1,3}
                    (?:
                        # The 4, 45, etc. in 1234, 12345, etc.
                        \d
                        |
                        # Support not just digits, but thousands separators
                        (?:
                            _\d{3}
                        )
                    )*
                )
                '''
    # Fractional part of a number
    FRACTIONAL = r'''
                  # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                  (?:
                      \d+
                      (?:
                          _\d+
                      )*
                  )
                  '''
    # 1e3, 2.5E-4
    EXPONENT = r'''
                (?:
                    [eE]
                    [-+]?
                    \d+
                )
                '''
    # Number, of any kind supported by grammar.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              # A lone - or + is an operator, so the sign must touch a digit
              # or a dot.
              [-+]?
              (?:
                  (?:
                      # 1, 12, 1_200, 1_200. (notice trailing dot), 1.3
                      {INTEGRAL}
                      (?:
                          \.
                          {FRACTIONAL}?
                      )?
                  )|(?:
                      # .2, 0.2
                      {INTEGRAL}?
                      \.
                      {FRACTIONAL}
                  )
              )
              {EXPONENT}?
              # 12abc is not 12 followed by a word
              (?!\w)
              '''.format(INTEGRAL=INTEGRAL, FRACTIONAL=FRACTIONAL,
                         EXPONENT=EXPONENT)
    WORD = r'[^\W\d_]\w*'

    assert not [operator
                for operator
                in OPERATORS
                if len(operator) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, OPERATORS)) + r')'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<word>' + WORD + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Doesn't yield incomplete or incorrect lexemes, stopping on first bad.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise invalid("Couldn't lex {0}", line.strip())

    def tokens(self, line):
        '''
        Return (kind, text) for every lexeme but whitespace.
        '''
        return [(kind, text)
                for match in self.lex(line)
                for kind, text in self.matchedgroups(match).items()
                if self.isfeedable(match)]

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to the shell.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the named groups the lexeme actually matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
