import pytest

# Needs PySide6; pynput is only loaded when the clipboard button is used
UI = pytest.importorskip("CalcEngine.UI", exc_type=ImportError)

from CalcEngine import config_manager
from CalcEngine import error as E


def run_worker(problem, **settings):
    merged = dict(config_manager.DEFAULT_SETTINGS, **settings)
    results = []
    worker = UI.Worker(problem, merged)
    worker.job_finished.connect(lambda result, equation, is_equation: results.append((result, equation, is_equation)))
    worker.run_Calc()
    return results


def test_worker_emits_result():
    assert run_worker("4 + 9") == [("13", "4 + 9", False)]
    assert run_worker("x + 5 = 11") == [("6", "x + 5 = 11", True)]


def test_worker_emits_math_errors():
    [(result, equation, is_equation)] = run_worker("(5")
    assert isinstance(result, E.MismatchedParentheses)
    assert equation == "(5"
    assert result.code == "3009"


def test_worker_passes_settings():
    assert run_worker("1 / 3", fractions=True) == [("1/3", "1 / 3", False)]


def test_render_result():
    assert UI.render_result("6", True) == "x = 6"
    assert UI.render_result("13", False) == "= 13"


@pytest.mark.parametrize("result, is_equation, expected", [
    ("13", False, "13"),
    ("-3.5", False, "-3.5"),
    ("1e+06", False, "0"),
    ("1 1/2", False, "0"),
    ("1/3", False, "0"),
    ("6", True, "0"),
])
def test_next_input(result, is_equation, expected):
    assert UI.next_input(result, is_equation) == expected


def test_module_docstring():
    assert UI.__doc__.splitlines()[1] == "PySide6 user interface for the Linear Equation Calculator."
