import pytest

from CalcEngine import MathEngine
from CalcEngine import Tokenizer as T
from CalcEngine import error as E
from CalcEngine.Tokenizer import tokenize


@pytest.mark.parametrize("problem, expected", [
    ("4 + 9", "13"),
    ("42", "42"),
    ("3.25", "3.25"),
    ("2 + 3 * 4", "14"),
    ("10 - 4 - 3", "3"),
    ("100 / 10 / 5", "2"),
    ("(2 + 3) * 4", "20"),
    ("-3 + 5", "2"),
    ("2 * -3", "-6"),
    ("7 / 2", "3.5"),
    ("1 / 3", "0.333333"),
    ("0.1 + 0.2", "0.3"),
    ("1000000", "1e+06"),
    ("max(2, 7) - min(2, 7)", "5"),
    ("pow(2, 10)", "1024"),
    ("sin(0) + cos(0)", "1"),
    ("log(1)", "0"),
])
def test_expressions(problem, expected):
    assert MathEngine.evaluate(problem) == expected


@pytest.mark.parametrize("problem, expected", [
    ("x + 5 = 11", "6"),
    ("2 * x = 7", "3.5"),
    ("x / 4 = 2", "8"),
    ("-x = 3", "-3"),
    ("x = 0", "0"),
    ("x + x * (10 / cos(2)) = min(15, pow(2, 3))", "-0.347373"),
])
def test_equations(problem, expected):
    assert MathEngine.evaluate(problem) == expected


def test_equal_sign_becomes_binary_minus():
    tokens, is_equation = MathEngine.classify(tokenize("11 = x + 5"))
    assert is_equation
    assert [token.identifier for token in tokens if token.kind != T.WHITESPACE] == ["11", "-", "x", "+", "5"]
    # 11 - x + 5 = 0
    assert MathEngine.evaluate("11 = x + 5") == "16"


def test_calculate_reports_equation_mode():
    assert MathEngine.calculate("4 + 9") == ("13", False)
    assert MathEngine.calculate("x + 5 = 11") == ("6", True)


@pytest.mark.parametrize("problem, error_type", [
    ("x * 0 = 10", E.NoSolution),
    ("x * 0 = 0", E.InfiniteSolutions),
    ("=", E.InconsistentEquationForm),
    ("x + 1", E.InconsistentEquationForm),
    ("1 = 1", E.InconsistentEquationForm),
    ("x = 1 = 2", E.MultipleEqualitySigns),
    ("max(1)", E.InsufficientOperands),
    ("max(1, 2, 3)", E.ExcessOperands),
    ("1 2", E.ExcessOperands),
    ("", E.InsufficientOperands),
    ("+", E.InsufficientOperands),
    ("(5", E.MismatchedParentheses),
    ("5)", E.MismatchedParentheses),
    ("x = 5) + (1", E.MismatchedParentheses),
    ("x + 1 = 2) * (3", E.MismatchedParentheses),
    ("lag(10)", E.UnknownSymbol),
    ("3x = 1", E.InvalidNumber),
    ("2 ^ 2", E.InvalidOperator),
    ("max+1", E.InvalidFunctionSyntax),
    ("1 / 0", E.DivisionByZero),
    ("1 / x = 2", E.UnsupportedOperation),
    ("x * x = 1", E.UnsupportedOperation),
    ("x - x = 0", E.UnsupportedOperation),
    ("sin(x) = 1", E.NonConstantOperand),
    ("log(0)", E.DomainError),
    ("log(-1)", E.DomainError),
    ("pow(0 - 8, 0.5)", E.DomainError),
    ("pow(10, 308) * 10", E.DomainError),
    ("pow(10, 308) + pow(10, 308)", E.DomainError),
    ("x = pow(10, 308) * 10", E.DomainError),
])
def test_errors(problem, error_type):
    with pytest.raises(error_type) as excinfo:
        MathEngine.calculate(problem)
    assert excinfo.value.equation == problem
    assert excinfo.value.code == error_type.code_default


@pytest.mark.parametrize("problem, stage", [
    ("1.2.3", MathEngine.STAGE_TOKENIZER),
    ("(5", MathEngine.STAGE_REORDER),
    ("max(1)", MathEngine.STAGE_PROCESSING),
    ("x = 1 = 2", None),
    ("x * 0 = 10", None),
])
def test_error_stage(problem, stage):
    with pytest.raises(E.MathError) as excinfo:
        MathEngine.calculate(problem)
    assert excinfo.value.stage == stage


def test_rendered_errors():
    assert MathEngine.evaluate("(5") == "Error in building reverse polish notation: Mismatched parentheses"
    assert MathEngine.evaluate("max(1)") == \
        "Error in processing reverse polish notation: Insufficient number of operands for max"
    assert MathEngine.evaluate("3x").startswith("Error in tokenizer: Invalid floating number")
    assert MathEngine.evaluate("=") == "Expression must contain both a variable and equal sign or neither"


def test_self_test_passes():
    assert MathEngine.self_test() == []


def test_same_input_same_output():
    problem = "x + x * (10 / cos(2)) = min(15, pow(2, 3))"
    assert MathEngine.evaluate(problem) == MathEngine.evaluate(problem)
    assert MathEngine.evaluate("max(1)") == MathEngine.evaluate("max(1)")


@pytest.mark.parametrize("problem, digits, expected", [
    ("1 / 3", 3, "0.333"),
    ("2 / 3", 3, "0.667"),
    ("2 / 3", 10, "0.6666666667"),
    ("123456", 3, "1.23e+05"),
])
def test_significant_digits(problem, digits, expected):
    assert MathEngine.evaluate(problem, settings={"significant_digits": digits}) == expected


@pytest.mark.parametrize("problem, expected", [
    ("1 / 3", "1/3"),
    ("3 / 2", "1 1/2"),
    ("0 - 3 / 2", "-1 1/2"),
    ("4 / 2", "2"),
    ("x * 4 = 2", "1/2"),
])
def test_fractions(problem, expected):
    assert MathEngine.evaluate(problem, settings={"fractions": True}) == expected


@pytest.mark.parametrize("settings", [{}, {"fractions": True}])
def test_overflow_is_a_domain_error(settings):
    with pytest.raises(E.DomainError) as excinfo:
        MathEngine.calculate("pow(10, 308) * 10", settings=settings)
    assert excinfo.value.code == "2002"
    assert MathEngine.evaluate("pow(10, 308) * 10", settings=settings) == "Result is not a finite number"


def test_verbose_goes_to_stderr(capsys):
    assert MathEngine.evaluate("x + 5 = 11", verbose=True) == "6"
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Tokenizer finished" in captured.err
    assert "Finished building reverse polish notation: x 5 + 11 -" in captured.err
    assert "Final polynomial: [-6.0, 1.0]" in captured.err


def test_quiet_by_default(capsys):
    MathEngine.evaluate("x + 5 = 11")
    assert capsys.readouterr().err == ""


def test_unexpected_errors_are_wrapped(monkeypatch):
    def broken_tokenize(problem):
        raise RuntimeError("boom")

    monkeypatch.setattr(MathEngine, "tokenize", broken_tokenize)
    with pytest.raises(E.MathError) as excinfo:
        MathEngine.calculate("1 + 1")
    assert excinfo.value.code == "9999"
    assert excinfo.value.equation == "1 + 1"
    assert MathEngine.evaluate("1 + 1") == "Unexpected Error: boom"
