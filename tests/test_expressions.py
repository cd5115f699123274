import pytest

from rustcraft.expressions import (
    DivideByZeroError,
    Op,
    Operation,
    Value,
    evaluate,
)


def test_error():
    with pytest.raises(DivideByZeroError):
        evaluate(Op(Operation.DIV, Value(99), Value(0)))


def test_error_in_nested_expression():
    inner = Op(Operation.DIV, Value(1), Op(Operation.SUB, Value(3), Value(3)))
    with pytest.raises(DivideByZeroError):
        evaluate(Op(Operation.ADD, Value(1), inner))


def test_ok():
    assert evaluate(Op(Operation.SUB, Value(20), Value(10))) == 10


def test_value():
    assert evaluate(Value(19)) == 19


def test_sum():
    assert evaluate(Op(Operation.ADD, Value(10), Value(20))) == 30


def test_recursion():
    term1 = Op(Operation.MUL, Value(10), Value(9))
    term2 = Op(
        Operation.MUL,
        Op(Operation.SUB, Value(3), Value(4)),
        Value(5),
    )
    assert evaluate(Op(Operation.ADD, term1, term2)) == 85


@pytest.mark.parametrize("op", [Operation.ADD, Operation.MUL, Operation.SUB])
def test_zeros(op):
    assert evaluate(Op(op, Value(0), Value(0))) == 0


@pytest.mark.parametrize(
    "left, right, expected",
    [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3)],
)
def test_division_truncates_toward_zero(left, right, expected):
    assert evaluate(Op(Operation.DIV, Value(left), Value(right))) == expected


def test_divide_by_zero_is_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        evaluate(Op(Operation.DIV, Value(0), Value(0)))


def test_not_an_expression():
    with pytest.raises(TypeError):
        evaluate(42)