from cmm.values import (
    FALSE, TRUE, Integer, PrintValue, has_output, is_truthy, trunc_div, trunc_mod,
    wrap_int64,
)


def test_wrap_int64():
    assert wrap_int64(2 ** 63) == -(2 ** 63)
    assert wrap_int64(-(2 ** 63) - 1) == 2 ** 63 - 1
    assert wrap_int64(2 ** 64 + 5) == 5
    assert Integer(2 ** 64 - 1).value == -1


def test_truncating_division():
    assert trunc_div(7, 2) == 3
    assert trunc_div(-7, 2) == -3
    assert trunc_div(7, -2) == -3
    assert trunc_div(-7, -2) == 3
    assert trunc_mod(-7, 2) == -1
    assert trunc_mod(7, -2) == 1


def test_rendering():
    assert Integer(-12).inspect() == '-12'
    assert PrintValue(Integer(42)).inspect() == '42'
    assert Integer(1).type == 'INTEGER'
    assert PrintValue(Integer(1)).type == 'PRINT_VALUE'


def test_truthiness():
    assert is_truthy(TRUE)
    assert is_truthy(PrintValue(Integer(1)))
    assert not is_truthy(FALSE)
    assert not is_truthy(Integer(2))
    assert not is_truthy(Integer(-1))
    assert not is_truthy(None)


def test_empty_print_value():
    empty = PrintValue(None)
    assert empty.inspect() == 'nil'
    assert not is_truthy(empty)
    assert not has_output(empty)
    assert not has_output(PrintValue(empty))
    assert not has_output(None)
    assert has_output(PrintValue(Integer(0)))
    assert has_output(Integer(7))
