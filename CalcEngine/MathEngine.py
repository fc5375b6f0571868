# MathEngine.py
"""""
Core calculation engine for the Linear Equation Calculator.

Pipeline
--------
1) Tokenizer: converts a raw input string into a flat list of tokens.
2) Classifier: decides between a plain expression and an equation in 'x',
   and rewrites the '=' token into a binary '-'.
3) Shunting-yard: reorders the tokens into reverse polish notation.
4) Evaluator: reduces the postfix queue to one Polynomial with a single stack.
5) Solver / Formatter: returns the constant (expression) or the root
   (equation) and renders it as text.

Nothing is kept between two calls; the only configuration (verbose output,
significant digits, fractions) is passed in by the caller.
"""""

import sys
import math
import fractions

from . import config_manager as config_manager
from . import error as E
from . import Nodes
from . import Tokenizer as T
from .ShuntingYard import build_reverse_polish_notation
from .Tokenizer import tokenize

# Stage labels used as prefix of rendered error messages
STAGE_TOKENIZER = "tokenizer"
STAGE_REORDER = "building reverse polish notation"
STAGE_PROCESSING = "processing reverse polish notation"


# -----------------------------
# Postfix evaluation
# -----------------------------

def process_reverse_polish_notation(output_queue, verbose=False):
    """Compute the result Polynomial of a postfix node list."""
    if verbose:
        print("Process reverse polish notation", file=sys.stderr)

    buffer = []

    for node in output_queue:
        if isinstance(node, Nodes.Scalar):
            buffer.append(node.value)
            continue

        if len(buffer) < node.arity:
            raise E.InsufficientOperands(f"Insufficient number of operands for {node.identifier}")

        operands = buffer[-node.arity:]
        del buffer[-node.arity:]
        buffer.append(node.apply(operands))

    if not buffer:
        raise E.InsufficientOperands("Insufficient scalars left")
    if len(buffer) > 1:
        raise E.ExcessOperands("Too many scalars left")

    return buffer[0]


# -----------------------------
# Equation classification
# -----------------------------

def classify(tokens):
    """Return (rewritten tokens, is_equation).

    An equation needs exactly one '=' and at least one 'x'; a plain
    expression has neither. The '=' token becomes a binary '-', so the root
    of the rewritten expression is the solution.
    """
    nr_equal_signs = 0
    contains_variable = False
    for token in tokens:
        if token.kind == T.EQUALS:
            nr_equal_signs += 1
        elif token.kind == T.VARIABLE:
            contains_variable = True

    if nr_equal_signs > 1:
        raise E.MultipleEqualitySigns("Expression contains too many equal signs")

    if contains_variable != (nr_equal_signs == 1):
        raise E.InconsistentEquationForm("Expression must contain both a variable and equal sign or neither")

    rewritten = [T.Token("-", T.OPERATOR) if token.kind == T.EQUALS else token for token in tokens]

    return rewritten, contains_variable


# -----------------------------
# Result formatting
# -----------------------------

def cleanup(ergebnis, settings):
    """Render a float as text, either as a fraction or with N significant digits."""
    if ergebnis == 0:
        ergebnis = 0.0  # no "-0"

    if settings["fractions"]:
        bruch_ergebnis = fractions.Fraction(ergebnis).limit_denominator(100000)
        zaehler = bruch_ergebnis.numerator
        nenner = bruch_ergebnis.denominator
        if abs(zaehler) > nenner:
            # Mixed fraction form (e.g., 3/2 -> "1 1/2")
            ganzzahl = zaehler // nenner
            rest_zaehler = zaehler % nenner

            if rest_zaehler == 0:
                return str(ganzzahl)
            # Adjust for negatives so that the remainder part is positive
            if ganzzahl < 0:
                ganzzahl += 1
                rest_zaehler = nenner - rest_zaehler
            return f"{ganzzahl} {rest_zaehler}/{nenner}"
        return str(bruch_ergebnis)

    digits = max(1, int(settings["significant_digits"]))
    return f"{ergebnis:.{digits}g}"


# -----------------------------
# Public entry points
# -----------------------------

def calculate(problem, verbose=False, settings=None):
    """Main API: tokenize -> classify -> reorder -> evaluate -> solve -> format.

    Returns (rendered_result, is_equation). Raises MathError subclasses with
    the equation and the failing stage attached.
    """
    merged_settings = dict(config_manager.DEFAULT_SETTINGS)
    if settings:
        merged_settings.update(settings)

    try:
        try:
            tokens = tokenize(problem)
        except E.MathError as e:
            e.stage = STAGE_TOKENIZER
            raise

        if verbose:
            print("Tokenizer finished:", file=sys.stderr)
            for token in tokens:
                print(f"Token: {token.identifier} {token.kind}", file=sys.stderr)

        tokens, is_equation = classify(tokens)

        try:
            output_queue = build_reverse_polish_notation(tokens, verbose)
        except E.MathError as e:
            e.stage = STAGE_REORDER
            raise

        try:
            result = process_reverse_polish_notation(output_queue, verbose)
        except E.MathError as e:
            e.stage = STAGE_PROCESSING
            raise

        # '*' and '+' overflow to inf without raising
        if not all(math.isfinite(c) for c in result.coefficients):
            raise E.DomainError("Result is not a finite number")

        if is_equation:
            if verbose:
                print(f"Final polynomial: {list(result.coefficients)}", file=sys.stderr)
            ergebnis = result.solve_linear()
        else:
            ergebnis = result.constant_term()

        if not math.isfinite(ergebnis):
            raise E.DomainError("Result is not a finite number")

        return cleanup(ergebnis, merged_settings), is_equation

    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        raise
    # Convert unexpected Python exceptions to our unified error type
    except Exception as e:
        raise E.MathError(message=f"Unexpected Error: {e}", code="9999", equation=problem) from e


def evaluate(problem, verbose=False, settings=None):
    """Return the result or the error message as a string; never raises MathError."""
    try:
        ausgabe_string, is_equation = calculate(problem, verbose, settings)
        return ausgabe_string
    except E.MathError as e:
        return e.render()


SELF_TEST_CASES = [
    ("4 + 9", "13"),
    ("x + 5 = 11", "6"),
    ("x * 0 = 10", "Constant can't equal 0, no solutions"),
    ("=", "Expression must contain both a variable and equal sign or neither"),
    ("max(1)", "Error in processing reverse polish notation: Insufficient number of operands for max"),
    ("x + x * (10 / cos(2)) = min(15, pow(2, 3))", "-0.347373"),
    ("(5", "Error in building reverse polish notation: Mismatched parentheses"),
    ("lag(10)", "Error in building reverse polish notation: Invalid mathematical function lag"),
]


def self_test():
    """Run the fixed scenarios; return a list of (problem, expected, actual) mismatches."""
    failures = []
    for problem, expected in SELF_TEST_CASES:
        actual = evaluate(problem)
        if actual != expected:
            failures.append((problem, expected, actual))
    return failures
