'''
RPN calculator.

Plain old arithmetic (+ - * /), square root, trigonometry in degrees and
powers, on a single fixed capacity stack kept across input lines.

Tokens are separated by spaces or tabs. Commands:

- q: quit, ignoring the rest of the line.
- h: help.
- c: clear the stack.
- p: print the top of the stack.
- s: print the top eight slots of the stack.

Failed operations leave the stack as they found it.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine
from .stack import OperandStack
from .util import RPNError


__all__ = 'Machine', 'Lexer', 'OperandStack', 'RPNError', 'CLI'
