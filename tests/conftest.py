from pytest import Item, fixture

from rpncalc.lexer import Lexer
from rpncalc.machine import Machine
from rpncalc.stack import OperandStack


@fixture
def lexer():
    return Lexer()


@fixture
def stack():
    return OperandStack(capacity=4)


@fixture
def machine():
    return Machine()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Only called with enable_assertion_pass_hook set. Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
