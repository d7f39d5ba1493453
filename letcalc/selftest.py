from letcalc.common import format_number
from letcalc.exceptions import CalcError
from letcalc.session import Session
from letcalc.termui import prints, s_header, s_attention

SELF_TEST_CASES = (
    ("2", 2.0),
    ("1+2", 3.0),
    ("1-2", -1.0),
    ("0+2", 2.0),
    ("452+1000", 1452.0),
    ("6*3+2", 20.0),
    ("2+6*3", 20.0),
    ("7/3", 7.0 / 3.0),
    ("6/3+2", 4.0),
    ("2+6/3", 4.0),
    ("+1", 1.0),
    ("-1", -1.0),
    ("-1--1", 0.0),
    ("8%3", 2.0),
    ("-8%3", -2.0),
    ("8%-3", 2.0),
    ("-8%-3", -2.0),
    ("let x = 3", 3.0),
    ("let x = 2 (x + 2) * 3", 12.0),
)


def check_case(input_str, expected):
    """
    Evaluates `input_str` in a fresh session.

    Returns a tuple (passed, text) where text is the result or the error
    report.
    """
    try:
        actual = Session().evaluate(input_str)
    except CalcError as e:
        return False, f"Exception thrown: {e}"
    # Exact comparison, the expected values are computed the same way.
    return actual == expected, format_number(actual)


def run_self_test(cases=SELF_TEST_CASES, echo=prints):
    """
    Runs the self-test cases printing one line per case.

    Returns the number of failed cases.
    """
    failures = 0
    echo("Tests: ")
    for input_str, expected in cases:
        passed, text = check_case(input_str, expected)
        mark = s_header("[PASS]") if passed else s_attention("[FAIL]")
        echo(f"Input: {input_str} Result: {text} {mark}")
        if not passed:
            failures += 1
    echo("-" * 41)
    return failures
