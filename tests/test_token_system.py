import math
import warnings

import pytest

from core import (
    TokenType, OPERATORS, PRECEDENCE, RPNValidator, Operators,
    token_type, is_number_literal, format_tokens
)


def test_precedence_table_is_read_only():
    assert set(PRECEDENCE) == set(OPERATORS)
    with pytest.raises(TypeError):
        PRECEDENCE['^'] = 3


def test_token_type():
    assert token_type("+") == TokenType.OPERATOR
    assert token_type("(") == TokenType.LEFT_PAREN
    assert token_type(")") == TokenType.RIGHT_PAREN
    assert token_type("3.5") == TokenType.OPERAND


@pytest.mark.parametrize("token, expected", [
    ("0", True), ("42", True), ("1.5", True), ("1.", True), (".5", True),
    (".", False), ("", False), ("1.2.3", False), ("+1", False), ("1e3", False), ("Infinity", False),
])
def test_is_number_literal(token, expected):
    assert is_number_literal(token) is expected


def test_format_tokens():
    assert format_tokens(("1", "3", "+")) == "1, 3, +"
    assert format_tokens(("1", "3", "+"), " ") == "1 3 +"
    assert format_tokens(()) == ""


def test_stack_size():
    assert RPNValidator.calculate_stack_size(("1", "2", "+")) == 1
    assert RPNValidator.calculate_stack_size(("1", "2")) == 2
    assert RPNValidator.calculate_stack_size(("+",)) < 0
    assert RPNValidator.calculate_stack_size(()) == 0


def test_is_complete_expression():
    assert RPNValidator.is_complete_expression(("1", "2", "+", "3", "*"))
    assert not RPNValidator.is_complete_expression(("1", "2"))
    # 下溢之后即使栈深度恢复也不是完整表达式
    assert not RPNValidator.is_complete_expression(("+", "1", "2", "3"))


def test_operators_compute():
    assert Operators.apply("+", 5.0, 5.0) == 10.0
    assert Operators.apply("-", 5.0, 5.0) == 0.0
    assert Operators.apply("*", 5.0, 5.0) == 25.0
    assert Operators.apply("/", 5.0, 5.0) == 1.0


def test_operators_reject_unknown_symbol():
    with pytest.raises(ValueError, match="invalid operator: o"):
        Operators.apply("o", 5.0, 5.0)


def test_division_by_zero_emits_no_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert Operators.div(1.0, 0.0) == math.inf
        assert Operators.div(-1.0, 0.0) == -math.inf
        assert math.isnan(Operators.div(0.0, 0.0))
