# Nodes.py
"""""
Nodes of the reverse polish notation.

A node is either
  - a Scalar, holding one Polynomial value, or
  - an Operation, consuming `arity` values and producing one.

Operations are only created through build(), which looks the identifier up in
OPERATORS (+, -, *, /, and the negation '~') or in the named functions of
ScientificEngine. Adding a new operator means adding one row to a table.
"""""

from . import error as E
from . import ScientificEngine
from . import Tokenizer as T
from .Polynomial import Polynomial


class Scalar:
    """Leaf node: a number or the variable."""

    def __init__(self, token):
        self.identifier = token.identifier
        if token.kind == T.NUMBER:
            self.value = Polynomial(float(token.identifier))
        elif token.kind == T.VARIABLE:
            self.value = Polynomial.variable()
        else:
            raise E.UnknownSymbol(f"Invalid polynomial value: {token.identifier}")

    def __repr__(self):
        return f"Scalar({self.identifier!r})"


class Operation:
    """Operator or function node. Functions have precedence 0."""

    def __init__(self, identifier, arity, precedence, function):
        self.identifier = identifier
        self.arity = arity
        self.precedence = precedence
        self.function = function

    def apply(self, operands):
        return self.function(operands)

    def __repr__(self):
        return f"Operation({self.identifier!r}, arity={self.arity})"


# identifier: (arity, precedence, function over the operand list)
OPERATORS = {
    "+": (2, 1, lambda operands: operands[0] + operands[1]),
    "-": (2, 1, lambda operands: operands[0] - operands[1]),
    "*": (2, 2, lambda operands: operands[0] * operands[1]),
    "/": (2, 2, lambda operands: operands[0] / operands[1]),
    T.NEGATION: (1, 10, lambda operands: -operands[0]),
}


def build(token):
    """Create the Operation node for an operator or function token."""
    if token.kind == T.OPERATOR:
        if token.identifier not in OPERATORS:
            raise E.UnknownSymbol(f"Invalid mathematical operator {token.identifier}")
        arity, precedence, function = OPERATORS[token.identifier]
        return Operation(token.identifier, arity, precedence, function)

    elif token.kind == T.FUNCTION:
        found = ScientificEngine.lookup_function(token.identifier)
        if found is None:
            raise E.UnknownSymbol(f"Invalid mathematical function {token.identifier}")
        arity, function = found
        return Operation(token.identifier, arity, 0, function)

    raise E.UnknownSymbol(f"Unknown token: {token.identifier}")