from functools import reduce
import operator
import math

import regex


class Lexer:
    '''
    Lexer for the calculator's token grammar.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    # Integral part of a decimal number
    INTEGRAL = r'[0-9]+'
    # Exponent of a decimal number: e3, E-12, e+0
    EXPONENT = r'''
                (?:
                    [eE]
                    [+-]?
                    [0-9]+
                )
                '''
    # Hexadecimal mantissa and binary exponent, as strtod reads them.
    HEXADECIMAL = r'''
                   0[xX]
                   (?:
                       # 1A, 1A., 1A.8
                       [0-9a-fA-F]+
                       (?:
                           \.
                           [0-9a-fA-F]*
                       )?
                       |
                       # .8
                       \.
                       [0-9a-fA-F]+
                   )
                   (?:
                       [pP]
                       [+-]?
                       [0-9]+
                   )?
                   '''
    # Decimal number. String formatting and regex is a tricky business,
    # because of the braces. Be careful!
    DECIMAL = r'''
               (?:
                   (?:
                       # 1, 12, 12. (notice trailing dot), 1.3
                       {INTEGRAL}
                       (?:
                           \.
                           [0-9]*
                       )?
                   )|(?:
                       # .2
                       \.
                       [0-9]+
                   )
               )
               {EXPONENT}?
               '''.format(INTEGRAL=INTEGRAL, EXPONENT=EXPONENT)
    # inf, infinity, nan; any case
    SPECIAL = r'(?i:inf(?:inity)?|nan)'
    # Number, of any kind supported by grammar. Always matched against the
    # whole token: trailing garbage is not a number.
    NUMBER = r'''
              (?<sign>
                  [+-]
              )?
              (?:
                  (?<hexadecimal>{HEXADECIMAL})
                  |
                  (?<decimal>{DECIMAL})
                  |
                  (?<special>{SPECIAL})
              )
              '''.format(HEXADECIMAL=HEXADECIMAL,
                         DECIMAL=DECIMAL,
                         SPECIAL=SPECIAL)
    # Tokens are separated by spaces and tabs only.
    TOKEN = r'[^ \t]+'
    # Stripped from input lines before tokenizing
    NEWLINE = '\r\n'
    # Default regex flags for matching numbers. ASCII only, like strtod.
    FLAGS = reduce(operator.__or__,
                   {regex.ASCII,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield its tokens, in order.

        Blank lines yield nothing.
        '''
        line = line.strip(type(self).NEWLINE)
        for match in regex.finditer(type(self).TOKEN, line):
            yield match.group(0)

    def parse_number(self, token):
        '''
        Return the float the entire token spells, or None.
        '''
        match = regex.fullmatch(type(self).NUMBER, token,
                                flags=type(self).FLAGS)
        if match is None:
            return None
        if match.group('hexadecimal'):
            try:
                number = float.fromhex(match.group('hexadecimal'))
            except OverflowError:
                # strtod saturates instead.
                number = math.inf
        else:
            # float() reads decimals and the special forms alike, and
            # overflows to inf just like strtod.
            number = float(match.group('decimal') or match.group('special'))
        if match.group('sign') == '-':
            number = -number
        return number

    def isnumber(self, token):
        '''
        Return True if the entire token is a number.
        '''
        return self.parse_number(token) is not None
