import main


def test_expression_arguments_are_joined(capsys):
    assert main.main(["4", "+", "9"]) == 0
    assert capsys.readouterr().out == "Result: 13\n"


def test_equation(capsys):
    main.main(["x+5", "=", "11"])
    assert capsys.readouterr().out == "Result: 6\n"


def test_errors_are_printed_not_raised(capsys):
    main.main(["lag(10)"])
    assert capsys.readouterr().out == \
        "Result: Error in building reverse polish notation: Invalid mathematical function lag\n"


def test_verbose_flag(capsys):
    main.main(["--verbose", "1", "+", "1"])
    captured = capsys.readouterr()
    assert captured.out == "Result: 2\n"
    assert "Evaluating expression: 1+1" in captured.err


def test_self_test(capsys):
    assert main.main(["--self-test"]) == 0
    assert "8/8 scenarios passed" in capsys.readouterr().out
