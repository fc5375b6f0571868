# ScientificEngine
"""""
Named mathematical functions usable in an expression.

Functions only work on constants: log(x) or sin(2*x) cannot be expressed as a
linear term, so every argument has to be free of 'x'.
"""""

import math

from . import error as E
from .Polynomial import Polynomial, EPS


def check_constants(identifier, operands):
    for value in operands:
        if not value.is_constant():
            raise E.NonConstantOperand(f"Can't use {identifier} on terms containing x")


def as_result(identifier, value):
    if not math.isfinite(value):
        raise E.DomainError(f"{identifier} result is not a real number")
    return Polynomial(value)


def isLog(number):
    if number < EPS:
        raise E.DomainError("Can't take logarithm a number less than or equal to 0")
    return math.log(number)


# identifier: (arity, implementation on plain floats)
FUNCTIONS = {
    "log": (1, isLog),
    "max": (2, max),
    "min": (2, min),
    "pow": (2, math.pow),
    "sin": (1, math.sin),
    "cos": (1, math.cos),
}


def make_function(identifier, implementation):
    """Wrap a float function into an operation on constant polynomials."""
    def apply(operands):
        check_constants(identifier, operands)
        numbers = [value.constant_term() for value in operands]
        try:
            value = implementation(*numbers)
        except (ValueError, OverflowError) as e:
            raise E.DomainError(f"{identifier}{tuple(numbers)}: {e}")
        return as_result(identifier, value)
    return apply


def lookup_function(identifier):
    """Return (arity, apply) for a named function or None if it doesn't exist."""
    if identifier not in FUNCTIONS:
        return None
    arity, implementation = FUNCTIONS[identifier]
    return arity, make_function(identifier, implementation)
