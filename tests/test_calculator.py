import io

import pytest

from eulerkit.calculator import Operation, format_result, main, run


def session(text):
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue()


def test_operation_from_menu_number():
    assert Operation(1) is Operation.ADD
    assert Operation.POWER.title == "exponentiation"


def test_add_format():
    assert format_result(Operation.ADD, 1.5, 2.25) == "1.50 + 2.25 = 3.75"


def test_subtract_prefix():
    assert format_result(Operation.SUBTRACT, 5, 1.25).startswith("5.00 - 1.25 = ")


def test_multiply_uses_four_decimals():
    assert format_result(Operation.MULTIPLY, 2, 3).split(" = ")[1] == f"{2 * 3:.4f}"


def test_divide_by_zero_is_infinite():
    assert format_result(Operation.DIVIDE, 1, 0).endswith("inf")


def test_mod_truncates_toward_zero():
    assert format_result(Operation.MOD, -7, 3) == "-7 MOD 3 = -1"


def test_mod_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        format_result(Operation.MOD, 7, 0.5)


def test_power_truncates_operands():
    assert format_result(Operation.POWER, 2.9, 10.7) == f"2^10 = {2 ** 10}"


def test_session_single_operation_then_stop():
    out = session("1\n2 3\n0\n")
    assert out.startswith("Choose what you want to do")
    assert "----> addition" in out
    assert format_result(Operation.ADD, 2, 3) in out
    assert "EXIT..." not in out


def test_session_continues():
    out = session("3\n2 4\n1\n4\n1 2\n0\n")
    assert out.count("Choose what you want to do") == 2
    assert format_result(Operation.MULTIPLY, 2, 4) in out
    assert format_result(Operation.DIVIDE, 1, 2) in out


def test_session_exit_on_other_choice():
    assert session("9\n").endswith("EXIT...\n\n")


def test_session_exit_on_end_of_input():
    assert session("").endswith("EXIT...\n\n")


def test_session_mod_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        session("5\n7 0\n")


def test_main_reports_bad_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nx y\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err