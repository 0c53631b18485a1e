from functools import wraps
import logging
import math
import operator
import sys

from .lexer import Lexer
from .stack import OperandStack, STACK_MAX, DISPLAY_SLOTS
from .util import (RPNError, InsufficientOperands, DivisionByZero,
                   NegativeSqrtOperand, StackFull, InvalidToken,
                   UnknownOperator, wrap_user_errors, format_number)


logger = logging.getLogger(__name__)


HELP = '''\
RPN calculator (Reverse Polish Notation)
Usage: space separated tokens. E.g.: 3 4 +
Operators: +  -  *  /
Functions: sqrt  sin  cos  tan  pow
  - sin/cos/tan take DEGREES
Commands:
  p  -> show top of the stack
  s  -> show the whole stack
  c  -> clear the stack
  q  -> quit
  h  -> help
The 'rpn> ' prompt only shows on a terminal, or with --prompt.'''


def _divide(left, right):
    if right == 0.0:
        raise DivisionByZero('Error: division by zero')
    return left / right


@wrap_user_errors('Error: cannot compute sqrt({0})')
def _sqrt(only):
    if only < 0:
        raise NegativeSqrtOperand('Error: square root of negative number')
    return math.sqrt(only)


def _degrees(f):
    '''
    Make trigonometric function take its angle in degrees.
    '''
    @wraps(f)
    def wrapped(only):
        return f(math.radians(only))
    return wrapped


def _unknown(name):
    '''
    Stand-in for operators missing from the tables.
    '''
    def wrapped(*args):
        raise UnknownOperator("Error: invalid operator '{}'".format(name))
    return wrapped


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes tokens and runs them against a single fixed capacity stack. An
    operation that fails leaves the stack exactly as it found it.
    '''

    # Command tokens, and the method running each one.
    COMMANDS = {
        'q': 'exit',
        'h': 'help',
        'c': 'clear',
        'p': 'peek',
        's': 'show',
    }

    # Named functions of one argument. Angles are in degrees.
    UNARY = {
        'sqrt': _sqrt,
        'sin': wrap_user_errors('Error: cannot compute sin({0})')(
            _degrees(math.sin)),
        'cos': wrap_user_errors('Error: cannot compute cos({0})')(
            _degrees(math.cos)),
        'tan': wrap_user_errors('Error: cannot compute tan({0})')(
            _degrees(math.tan)),
    }

    # Named functions of two arguments.
    FUNCTIONS = {
        'pow': wrap_user_errors('Error: cannot compute {0} ** {1}')(
            math.pow),
    }

    # Single character arithmetic operators.
    OPERATORS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': _divide,
    }

    assert not [symbol
                for symbol
                in OPERATORS
                if len(symbol) != 1]

    def __init__(self, capacity=STACK_MAX, output=None):
        '''
        Create empty stack machine.

        :param capacity: Stack capacity.
        :param output: File to print to. Defaults to whatever sys.stdout is at
                       the time of printing.
        '''
        self.stack = OperandStack(capacity)
        self.lexer = Lexer()
        self.output = output
        self.running = True

    def classify(self, token):
        '''
        Return the category of token. First match wins.
        '''
        cls = type(self)
        if token in cls.COMMANDS:
            return cls.COMMANDS[token]
        elif token in cls.UNARY:
            return 'unary'
        elif token in cls.FUNCTIONS:
            return 'function'
        elif len(token) == 1 and token in cls.OPERATORS:
            return 'operator'
        elif self.lexer.isnumber(token):
            return 'number'
        else:
            return 'invalid'

    def feed(self, token):
        '''
        Run a single token on the machine.

        Returns the computed value, if any. Raises RPNError, with the stack
        untouched, if the token could not be run.
        '''
        category = self.classify(token)
        logger.debug('Feeding %r as %s', token, category)
        if category == 'number':
            return self.pshnumber(token)
        elif category == 'operator':
            return self.apply_operator(token)
        elif category == 'unary':
            return self.apply_unary(token)
        elif category == 'function':
            return self.apply_pow()
        elif category == 'invalid':
            raise InvalidToken("Invalid token: '{}'".format(token))
        return getattr(self, category)()

    def print(self, *args, **kwargs):
        return print(*args,
                     file=self.output if self.output is not None
                     else sys.stdout,
                     **kwargs)

    def _apply(self, name, arity, f):
        '''
        Pop arity operands, apply f to them, and push the result.

        Operands are passed deepest first. If anything fails, the operands go
        back on the stack in their original order before the error
        propagates.
        '''
        operands = self.stack.popmany(arity)
        if operands is None:
            raise InsufficientOperands(
                "Error: not enough operands for '{}'".format(name))
        operands.reverse()
        try:
            result = f(*operands)
            if not self.stack.push(result):
                raise StackFull(
                    'Error: stack full (could not store the result)')
        except RPNError:
            logger.debug('Restoring %r after failed %r', operands, name)
            self.stack.extend(operands)
            raise
        self.print('=', format_number(result))
        return result

    def apply_operator(self, symbol):
        '''
        Pop b, then a, and push a OP b.
        '''
        f = type(self).OPERATORS.get(symbol, _unknown(symbol))
        return self._apply(symbol, 2, f)

    def apply_unary(self, name):
        '''
        Pop a, and push f(a).
        '''
        f = type(self).UNARY.get(name, _unknown(name))
        return self._apply(name, 1, f)

    def apply_pow(self):
        '''
        Pop exponent, then base, and push base ** exponent.
        '''
        return self._apply('pow', 2, type(self).FUNCTIONS['pow'])

    def pshnumber(self, token):
        '''
        Parse token and push it on the stack.
        '''
        number = self.lexer.parse_number(token)
        if number is None:
            raise InvalidToken("Invalid token: '{}'".format(token))
        if not self.stack.push(number):
            raise StackFull('Error: stack full (could not push {})'
                            .format(format_number(number)))
        return number

    def exit(self):
        '''
        Stop the machine. Nothing more gets fed.
        '''
        self.running = False

    def help(self):
        '''
        Print usage.
        '''
        self.print(HELP)

    def clear(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()
        self.print('[stack cleared]')

    def peek(self):
        '''
        Print the element on the top of the stack.
        '''
        top = self.stack.peek()
        if top is None:
            self.print('[empty stack]')
        else:
            self.print('top:', format_number(top))
        return top

    def show(self, slots=DISPLAY_SLOTS):
        '''
        Print fixed height window of the stack, top of the stack last.
        '''
        self.print('Stack:')
        for position, value in self.stack.display(slots):
            self.print('{}. {:.6f}'.format(position, value))
