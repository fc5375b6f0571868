# Main.py
""""" Entry point for the Linear Equation Calculator.

   Responsibilities:
   - With an expression on the command line: evaluate it and print the result
   - Without one: verify required files exist and start the Qt GUI

   Example: python main.py 3 + 4*5
            python main.py "x + 5 = 11"
"""""
import sys
import argparse
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast if required files are missing / moved / renamed.
    """

    modules_dir = PROJECT_ROOT / "CalcEngine"

    REQUIRED = [
        modules_dir / "UI.py",
        modules_dir / "MathEngine.py",
        modules_dir / "config_manager.py",
        modules_dir / "config.json",
        modules_dir / "ui_strings.json",
    ]

    missing_files = [file_path.name for file_path in REQUIRED if not file_path.exists()]

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def build_parser():
    parser = argparse.ArgumentParser(description="Evaluate an expression or solve a linear equation in x.")
    parser.add_argument("expression", nargs="*", help="expression; all parts are joined without separator")
    parser.add_argument("-v", "--verbose", action="store_true", help="print diagnostics to stderr")
    parser.add_argument("--self-test", action="store_true", help="run the built-in scenarios")
    return parser


def main(argv=None):

    """
    Keep this thin: no business logic here.
    """

    from CalcEngine import MathEngine, config_manager

    args = build_parser().parse_args(argv)
    settings = config_manager.load_setting_value("all")
    verbose = args.verbose or settings["verbose"]

    if args.self_test:
        failures = MathEngine.self_test()
        for problem, expected, actual in failures:
            print(f"FAILED: {problem!r}: expected {expected!r}, got {actual!r}")
        print(f"{len(MathEngine.SELF_TEST_CASES) - len(failures)}/{len(MathEngine.SELF_TEST_CASES)} scenarios passed")
        return 1 if failures else 0

    if args.expression:
        expression = "".join(args.expression)
        if verbose:
            print(f"Evaluating expression: {expression}", file=sys.stderr)
        print("Result: " + MathEngine.evaluate(expression, verbose, settings))
        return 0

    # Delegate control to the UI layer; the UI owns the event loop.
    check_files_exist()
    from CalcEngine import UI
    UI.main()
    return 0


if __name__ == "__main__":
    sys.exit(main())
