# error.py
"""""
Error types raised by the calculation pipeline.

Every error carries a four digit code (see ERROR_MESSAGES), the equation it was
raised for and the stage of the pipeline that detected it.
"""""


class MathError(Exception):
    code_default = "9999"

    def __init__(self, message, code=None, equation=None, stage=None):
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.code_default
        self.equation = equation
        self.stage = stage

    def render(self):
        """Return the message as shown to the user, prefixed by its stage if known."""
        if self.stage:
            return f"Error in {self.stage}: {self.message}"
        return self.message


class ParseError(MathError):
    pass

class CalculationError(MathError):
    pass

class SolverError(MathError):
    pass


# --- Tokenizer / reordering ---

class InvalidNumber(ParseError):
    code_default = "3008"

class InvalidFunctionSyntax(ParseError):
    code_default = "3010"

class InvalidOperator(ParseError):
    code_default = "3004"

class UnknownSymbol(ParseError):
    code_default = "3011"

class MismatchedParentheses(ParseError):
    code_default = "3009"


# --- Postfix processing / polynomial arithmetic ---

class InsufficientOperands(CalculationError):
    code_default = "3027"

class ExcessOperands(CalculationError):
    code_default = "3029"

class NonConstantOperand(CalculationError):
    code_default = "3005"

class DomainError(CalculationError):
    code_default = "2002"

class UnsupportedOperation(CalculationError):
    code_default = "3006"

class DivisionByZero(CalculationError):
    code_default = "3003"


# --- Classification / solving ---

class MultipleEqualitySigns(SolverError):
    code_default = "3002"

class InconsistentEquationForm(SolverError):
    code_default = "3012"

class NoSolution(SolverError):
    code_default = "3014"

class InfiniteSolutions(SolverError):
    code_default = "3013"



Error_Dictionary = {

    "1" : "Missing Files",
    "2" : "Scientific Calculation Error",
    "3" : "Calculator Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "9" : "Unexpected Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number


ERROR_MESSAGES = {
    "2002" : "Invalid argument for a mathematical function.",

    "3002" : "More than one '=' in the equation.",
    "3003" : "Division by Zero",
    "3004" : "Invalid Operator.",
    "3005" : "Function applied to a term containing x.",
    "3006" : "Non linear problem.",
    "3008" : "Invalid number.",
    "3009" : "Mismatched parentheses.",
    "3010" : "Missing '(' after function name.",
    "3011" : "Unknown function or operator.",
    "3012" : "Equation needs both 'x' and '=' (or neither).",
    "3013" : "Infinite Solutions.",
    "3014" : "No Solution.",
    "3027" : "Missing Number.",
    "3029" : "Too many numbers.",

    "4002" : "Calculation already Running!",
    "4501" : "Not all Settings could be saved: ", # + Error raising setting

    "9999" : "Unexpected Error: " #+error
}
