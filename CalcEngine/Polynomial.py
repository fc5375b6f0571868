# Polynomial.py
"""""
Polynomial values in the single variable 'x'.

A value is either a constant [c0] or a linear term [c0, c1] (c0 + c1*x).
Arithmetic rules are decided on the coefficient count, not on the
mathematical degree: a constant has a count of 1, a linear term a count of 2.
Operations whose result would need more coefficients raise
UnsupportedOperation.
"""""

from . import error as E

EPS = 1e-6


class Polynomial:
    """Immutable coefficient tuple, index = power of x."""

    __slots__ = ("coefficients",)

    def __init__(self, coefficients=(0.0,)):
        if isinstance(coefficients, (int, float)):
            coefficients = (coefficients,)
        coefficients = tuple(float(c) for c in coefficients)
        if len(coefficients) not in (1, 2):
            raise E.UnsupportedOperation(f"Only constant and linear terms are supported, got {len(coefficients)} coefficients")
        object.__setattr__(self, "coefficients", coefficients)

    def __setattr__(self, name, value):
        raise AttributeError("Polynomial is immutable")

    @classmethod
    def variable(cls):
        """The polynomial 'x' (0 + 1*x)."""
        return cls((0.0, 1.0))

    @property
    def coefficient_count(self):
        return len(self.coefficients)

    def is_constant(self):
        return self.coefficient_count == 1

    def constant_term(self):
        return self.coefficients[0]

    # -----------------------------
    # Arithmetic
    # -----------------------------

    def negate(self):
        return Polynomial(-c for c in self.coefficients)

    def add(self, other):
        count = max(self.coefficient_count, other.coefficient_count)
        new_coefficients = [0.0] * count
        for i in range(count):
            if i < self.coefficient_count:
                new_coefficients[i] += self.coefficients[i]
            if i < other.coefficient_count:
                new_coefficients[i] += other.coefficients[i]
        return Polynomial(new_coefficients)

    def subtract(self, other):
        # (A*x + B) - (C*x + D) is rejected even though it stays linear
        if self.coefficient_count > 1 and other.coefficient_count > 1:
            raise E.UnsupportedOperation("Subtraction not supported between two terms containing x")
        return self.add(other.negate())

    def multiply(self, other):
        # Only constant * (A*x + B) is allowed. (A*x + B)*(C*x + D) would be non-linear.
        if self.coefficient_count >= 2 and other.coefficient_count >= 2:
            raise E.UnsupportedOperation("Multiplication of two terms containing x is not linear")

        if self.coefficient_count >= other.coefficient_count:
            scaled, factor = self, other.constant_term()
        else:
            scaled, factor = other, self.constant_term()
        return Polynomial(c * factor for c in scaled.coefficients)

    def divide(self, other):
        # (A*x + B) / D is allowed; division by (C*x + D) is non-linear
        if other.coefficient_count > 1:
            raise E.UnsupportedOperation("Division by a term containing x is not linear")
        divisor = other.constant_term()
        if abs(divisor) < EPS:
            raise E.DivisionByZero("Division by zero")
        return Polynomial(c / divisor for c in self.coefficients)

    def solve_linear(self):
        """Return the root of c0 + c1*x = 0.

        Raises InfiniteSolutions if the whole term is ~0 and NoSolution if
        only the x coefficient is ~0.
        """
        linear = self.coefficients[1] if self.coefficient_count >= 2 else 0.0
        if abs(linear) < EPS:
            if abs(self.coefficients[0]) < EPS:
                raise E.InfiniteSolutions("Expression evaluates to 0, infinite number of solutions")
            raise E.NoSolution("Constant can't equal 0, no solutions")
        return -self.coefficients[0] / linear

    __neg__ = negate
    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coefficients == other.coefficients

    def __hash__(self):
        return hash(self.coefficients)

    def __repr__(self):
        return f"Polynomial({list(self.coefficients)})"
