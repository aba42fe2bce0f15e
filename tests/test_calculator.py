import io
import sys

import pytest

from calculator import Calculator, NodeType
from calculator.error.evaluator_error import EvaluatorException
from calculator.error.parser_error import ParserException
from tests.test_util import open_file

programs = [
    ("2+3*5", 17),
    ("1*2+3*5", 17),
    ("2*(3+(2*2))", 14),
    ("10-5-2", 7),
    ("  12 *\n 3\t", 36),
    # Trailing tokens are not part of the program
    ("(1 + 2) * 3 ; 4", 9),
    ("1 + 2 3", 3),
]


@pytest.mark.parametrize("program, expected", programs)
def test_execute(program: str, expected: int):
    calculator = Calculator(out=io.StringIO())
    assert calculator.execute(program) == expected


def test_execute_file(valid_file: str):
    program: str = open_file(valid_file)
    result = Calculator(out=io.StringIO()).execute(program)
    assert isinstance(result, int)


def test_execute_output():
    out = io.StringIO()
    assert Calculator(out=out).execute("2*3") == 6
    assert out.getvalue().splitlines() == [
        # The tree
        "Program",
        "    Multiplicative *",
        "        IntLiteral 2",
        "        IntLiteral 3",
        # The evaluation steps
        "Calculating: Program",
        "    Calculating: Multiplicative",
        "        Calculating: IntLiteral",
        "        Result: 2",
        "        Calculating: IntLiteral",
        "        Result: 3",
        "    Result: 6",
        "Result: 6",
    ]


def test_execute_stdout(capsys):
    assert Calculator().execute("4") == 4
    captured = capsys.readouterr()
    assert captured.out.startswith("Program\n    IntLiteral 4\nCalculating: Program\n")


def test_syntax_error_stops_pipeline():
    out = io.StringIO()
    with pytest.raises(ParserException) as excinfo:
        Calculator(out=out).execute("1*2+3*2+")
    assert "additive" in str(excinfo.value)
    # Neither the tree nor the evaluation steps are printed
    assert out.getvalue() == ""


def test_evaluation_error():
    with pytest.raises(EvaluatorException):
        Calculator(out=io.StringIO()).execute("1/(1-1)")


def test_parse():
    tree = Calculator().parse("1 + 2")
    assert tree.type == NodeType.PROGRAM
    assert tree.children[0].type == NodeType.ADDITIVE
    assert [child.text for child in tree.children[0].children] == ["1", "2"]


def test_independent_runs():
    calculator = Calculator(out=io.StringIO())
    assert calculator.execute("1+1") == 2
    assert calculator.execute("2*2") == 4
    assert calculator.execute("1+1") == 2


def test_long_chain():
    program = "+".join(["1"] * 2500)
    assert Calculator(out=io.StringIO()).execute(program) == 2500


def test_deeply_nested_brackets():
    program = "(" * 2000 + "7" + ")" * 2000
    assert Calculator(out=io.StringIO()).execute(program) == 7


def test_deeply_nested_division():
    # Right association nests every division into the next one, so the
    # results alternate between 2 and 1 from the innermost pair outwards
    program = "/".join(["2"] * 2500)
    assert Calculator(out=io.StringIO()).execute(program) == 1


def test_recursion_limit_is_restored():
    limit = sys.getrecursionlimit()
    Calculator(out=io.StringIO()).execute("-".join(["3"] * 2500))
    assert sys.getrecursionlimit() == limit

    with pytest.raises(ParserException):
        Calculator(out=io.StringIO()).execute("(" * 2500)
    assert sys.getrecursionlimit() == limit
