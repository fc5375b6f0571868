# Tokenizer.py
"""""
Tokenizer: converts a raw input string into typed tokens.

Example: "4 +7=x" -> 4, whitespace, +, 7, =, x

The tokenizer walks an index over the input and never copies the remaining
text. A single flag, expect_operator, remembers whether the previous token
could end an operand; it decides whether '-' is a subtraction or a negation.
"""""

import string
from collections import namedtuple

from . import error as E

Token = namedtuple("Token", "identifier kind")

WHITESPACE, COMMA, NUMBER, OPERATOR, FUNCTION, LPAREN, RPAREN, VARIABLE, EQUALS = \
    "WHITESPACE COMMA NUMBER OPERATOR FUNCTION LPAREN RPAREN VARIABLE EQUALS".split()

VARIABLE_SYMBOL = "x"
NEGATION = "~"
Operations = ["+", "-", "*", "/"]

# Tokens after which a binary operator is expected
OPERAND_ENDINGS = (NUMBER, VARIABLE, RPAREN)

BLANKS = " \t"
DIGITS = string.digits
LETTERS = string.ascii_letters


class Tokenizer:
    """Cursor over an immutable expression string."""

    def __init__(self, expression):
        self.expression = expression
        self.position = 0
        self.expect_operator = False

    def peek(self, offset=0):
        index = self.position + offset
        if index < len(self.expression):
            return self.expression[index]
        return None

    def tokens(self):
        """Yield tokens until the input is consumed."""
        while self.position < len(self.expression):
            token = self.next_token()
            if token.kind in OPERAND_ENDINGS:
                self.expect_operator = True
            elif token.kind != WHITESPACE:
                self.expect_operator = False
            yield token

    def next_token(self):
        current_char = self.peek()

        # --- Whitespace ---
        if current_char in BLANKS:
            self.position += 1
            return Token("whitespace", WHITESPACE)

        elif current_char == ",":
            self.position += 1
            return Token(",", COMMA)

        # --- Numbers: digits and decimal separator ---
        elif current_char in DIGITS:
            return Token(self.parse_number(), NUMBER)

        # --- The variable (but not the start of a longer name like 'xyz') ---
        elif current_char == VARIABLE_SYMBOL and not is_letter(self.peek(1)):
            self.position += 1
            return Token(current_char, VARIABLE)

        # --- Function names ---
        elif current_char in LETTERS:
            return Token(self.parse_function_name(), FUNCTION)

        elif current_char == "(":
            self.position += 1
            return Token(current_char, LPAREN)
        elif current_char == ")":
            self.position += 1
            return Token(current_char, RPAREN)
        elif current_char == "=":
            self.position += 1
            return Token(current_char, EQUALS)

        # --- Negation sign ---
        elif current_char == "-" and not self.expect_operator:
            self.position += 1
            return Token(NEGATION, OPERATOR)

        # --- Operators ---
        elif current_char in Operations:
            self.position += 1
            return Token(current_char, OPERATOR)

        raise E.InvalidOperator(f"Invalid operator: {current_char!r}")

    def parse_number(self):
        """Consume a literal like '12' or '3.25' and return it."""
        start = self.position
        end = start + 1
        number_dots = 0
        while end < len(self.expression):
            char = self.expression[end]
            if char in LETTERS or char == "(":
                raise E.InvalidNumber(f"Invalid floating number: contains invalid characters: {self.expression[start:end + 1]!r}")
            elif char not in DIGITS and char != ".":
                break
            if char == ".":
                number_dots += 1
            end += 1

        if number_dots > 1:
            raise E.InvalidNumber(f"Invalid floating number: too many dots: {self.expression[start:end]!r}")

        self.position = end
        return self.expression[start:end]

    def parse_function_name(self):
        start = self.position
        end = start + 1
        while end < len(self.expression) and self.expression[end] in LETTERS:
            end += 1

        if end < len(self.expression) and self.expression[end] != "(" and self.expression[end] not in BLANKS:
            raise E.InvalidFunctionSyntax(f"Invalid function definition: {self.expression[start:end + 1]!r}")

        self.position = end
        return self.expression[start:end]


def is_letter(char):
    return char is not None and char in LETTERS


def tokenize(expression):
    """Return the full token list for an expression."""
    return list(Tokenizer(expression).tokens())
