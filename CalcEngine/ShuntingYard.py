# ShuntingYard.py
"""""
Shunting-yard algorithm: reorders infix tokens into reverse polish notation.

Numbers and the variable go straight to the output queue. Operators wait on a
buffer until an operator of lower precedence arrives; operators of equal
precedence are popped first, which makes all binary operators
left-associative. Function names wait on the buffer until the ')' that closes
their argument list.
"""""

import sys

from . import error as E
from . import Nodes
from . import Tokenizer as T


def build_reverse_polish_notation(tokens, verbose=False):
    """Return the postfix list of nodes for a token list."""
    if verbose:
        print("Building reverse polish notation", file=sys.stderr)

    output_queue = []
    buffer = []

    for token in tokens:
        if verbose:
            print(f"Processing: {token.identifier} {token.kind}", file=sys.stderr)

        if token.kind == T.WHITESPACE:
            continue

        # ----------- NUMBERS / VARIABLE
        elif token.kind in (T.NUMBER, T.VARIABLE):
            output_queue.append(Nodes.Scalar(token))

        # ----------- OPERATOR
        elif token.kind == T.OPERATOR:
            next_operator = Nodes.build(token)
            while buffer and buffer[-1].kind == T.OPERATOR:
                peek_operator = Nodes.build(buffer[-1])
                if peek_operator.precedence >= next_operator.precedence:
                    output_queue.append(peek_operator)
                    buffer.pop()
                else:
                    break
            buffer.append(token)

        # ----------- FUNCTIONS
        elif token.kind == T.FUNCTION:
            buffer.append(token)

        # ----------- SEPARATORS
        elif token.kind == T.COMMA:
            while buffer and buffer[-1].kind != T.LPAREN:
                output_queue.append(Nodes.build(buffer.pop()))
            if not buffer:
                raise E.MismatchedParentheses("Invalid function declaration: missing left parenthesis")

        # ---------- LEFT PARENTHESIS
        elif token.kind == T.LPAREN:
            buffer.append(token)

        # ---------- RIGHT PARENTHESIS
        elif token.kind == T.RPAREN:
            while buffer and buffer[-1].kind != T.LPAREN:
                output_queue.append(Nodes.build(buffer.pop()))
            if not buffer:
                raise E.MismatchedParentheses("Invalid parentheses: missing left parenthesis")
            buffer.pop()
            # the function owning this argument list follows its arguments
            if buffer and buffer[-1].kind == T.FUNCTION:
                output_queue.append(Nodes.build(buffer.pop()))

        else:
            raise E.UnknownSymbol(f"Unknown token: {token.identifier}")

    # Push the remaining operators onto the output queue
    while buffer:
        if buffer[-1].kind in (T.LPAREN, T.RPAREN):
            raise E.MismatchedParentheses("Mismatched parentheses")
        output_queue.append(Nodes.build(buffer.pop()))

    if verbose:
        print("Finished building reverse polish notation: "
              + " ".join(node.identifier for node in output_queue), file=sys.stderr)

    return output_queue
