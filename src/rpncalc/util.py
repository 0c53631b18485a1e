from functools import wraps


class RPNError(Exception):
    pass


class InsufficientOperands(RPNError):
    pass


class DivisionByZero(RPNError):
    pass


class NegativeSqrtOperand(RPNError):
    pass


class StackFull(RPNError):
    pass


class InvalidToken(RPNError):
    pass


class UnknownOperator(RPNError):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts math library exceptions to RPNErrors.

    Passes through RPNErrors. The original exception is kept as the second
    argument.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except (ArithmeticError, ValueError) as e:
                raise RPNError(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator


def format_number(number):
    '''
    Shortest text that reads back as the same float.

    Integral values lose their trailing ``.0``, like C's %g would.
    '''
    text = repr(float(number))
    if text.endswith('.0'):
        text = text[:-2]
    return text
