import logging

import pytest

from exactq.errors import Malformed_Input, Division_By_Zero
from exactq.evaluator import main, q_eval, MAX_OPERAND_EXPONENT
from exactq.rationals import Rational

def test_q_eval():
    assert q_eval(["1", "3", "/", "3", "*"]) == Rational(1)
    assert q_eval(["1/3", "1/6", "+"]) == Rational(1, 2)
    assert q_eval(["0.1", "0.2", "+"]) == Rational(3, 10)
    assert q_eval(["2/3", "-2", "pow"]) == Rational(9, 4)
    assert q_eval(["-1/2", "abs", "inv", "neg"]) == Rational(-2)
    assert q_eval(["5", "3", "-"]) == Rational(2)

def test_q_eval_errors():
    with pytest.raises(Division_By_Zero):
        q_eval(["1", "0", "/"])
    with pytest.raises(Malformed_Input):
        q_eval(["1", "+"])
    with pytest.raises(Malformed_Input):
        q_eval(["1", "2"])
    with pytest.raises(Malformed_Input):
        q_eval(["4", "1/2", "pow"])
    with pytest.raises(Malformed_Input):
        q_eval(["1/x"])

@pytest.mark.parametrize("argv, output", [
    (["1", "3", "/", "3", "*"],                     "1/1"),
    (["--no-suffix", "2", "3", "pow"],              "8"),
    (["--float", "1/3"],                            "0.3333333333333333"),
    (["--decimal", "--precision", "5", "2/3"],      "0.66667"),
    (["--decimal", "--precision", "5",
      "--rounding", "RTZ", "2/3"],                  "0.66666"),
    (["--", "-1/2", "abs"],                         "1/2"),
])
def test_main(capsys, argv, output):
    assert main(argv) == 0
    assert capsys.readouterr().out == output + "\n"

def test_main_reports_errors(capsys, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(["1", "0", "/"]) == 1
    assert "division by zero" in caplog.text
    assert capsys.readouterr().out == ""

def test_main_rejects_bad_precision():
    with pytest.raises(SystemExit):
        main(["--decimal", "--precision", "0", "1"])

@pytest.mark.parametrize("token", [
    "1e999999999",
    "1E-999999999",
    "2.5e%u" % (MAX_OPERAND_EXPONENT + 1),
    "1e" + "9" * 5000,
])
def test_operand_exponent_bound(token):
    with pytest.raises(Malformed_Input):
        q_eval([token])

def test_operand_exponent_at_bound():
    q = q_eval(["1e-0%u" % MAX_OPERAND_EXPONENT])
    assert q == Rational(1, 10 ** MAX_OPERAND_EXPONENT)

def test_main_rejects_huge_exponent(capsys):
    assert main(["1e999999999"]) == 1
    assert capsys.readouterr().out == ""
