import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgos.expressions import (
    evaluate_postfix,
    infix_to_postfix,
    is_balanced,
    precedence,
)


def test_precedence_ordering():
    assert precedence("+") == precedence("-")
    assert precedence("*") == precedence("/")
    assert precedence("+") < precedence("*") < precedence("^")


@pytest.mark.parametrize("char", ["(", ")", "a", " ", "%"])
def test_precedence_of_non_operator_is_zero(char):
    assert precedence(char) == 0


@pytest.mark.parametrize(
    "infix, postfix",
    [
        ("a+b*c", "abc*+"),
        ("(a+b)*c", "ab+c*"),
        ("a^b^c", "abc^^"),
    ],
)
def test_infix_to_postfix_examples(infix, postfix):
    assert infix_to_postfix(infix) == postfix


def test_whitespace_is_ignored():
    assert infix_to_postfix(" a + b * c ") == infix_to_postfix("a+b*c")


@given(st.lists(st.sampled_from("abcdxyzABC"), min_size=1, max_size=8),
       st.lists(st.sampled_from("+-*/^"), min_size=7, max_size=7))
def test_operands_keep_their_order(letters, operators):
    infix = letters[0] + "".join(op + ch for op, ch in zip(operators, letters[1:]))
    postfix = infix_to_postfix(infix)
    assert [c for c in postfix if c.isalpha()] == letters
    assert len(postfix) == len(infix)


def test_subtraction_is_left_associative():
    values = {"a": 10, "b": 3, "c": 2}
    assert evaluate_postfix(infix_to_postfix("a-b-c"), values) == 10 - 3 - 2


def test_power_is_right_associative():
    values = {"a": 2, "b": 3, "c": 2}
    assert evaluate_postfix(infix_to_postfix("a^b^c"), values) == 2 ** 3 ** 2


def test_round_trip_with_parentheses():
    values = {"a": 5, "b": 7, "c": 4, "d": 2}
    result = evaluate_postfix(infix_to_postfix("(a+b)*(c-d)/d"), values)
    assert result == (5 + 7) * (4 - 2) // 2


def test_division_truncates_toward_zero():
    assert evaluate_postfix("ab/", {"a": -7, "b": 2}) == int(-7 / 2)


def test_postfix_with_spaces():
    assert evaluate_postfix("a b +", {"a": 4, "b": 9}) == 4 + 9


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("ab/", {"a": 1, "b": 0})


def test_missing_operand_value():
    with pytest.raises(ValueError):
        evaluate_postfix("ab+", {"a": 1})


@pytest.mark.parametrize("expression", ["a+", "ab", "+", ""])
def test_malformed_postfix(expression):
    with pytest.raises(ValueError):
        evaluate_postfix(expression, {"a": 1, "b": 2})


@pytest.mark.parametrize("expression", ["(a+b", "a+b)", "a+1", "a&b"])
def test_invalid_infix(expression):
    with pytest.raises(ValueError):
        infix_to_postfix(expression)


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("", True),
        ("(a+b)", True),
        ("{[()]}", True),
        ("[a*(b+c)]-{d}", True),
        ("(", False),
        (")", False),
        ("(]", False),
        ("([)]", False),
        ("{[}", False),
    ],
)
def test_is_balanced(expression, expected):
    assert is_balanced(expression) is expected


@given(st.text(alphabet="()[]{}ab", max_size=20))
def test_wrapping_keeps_balance(expression):
    assert is_balanced("(" + expression + ")") == is_balanced(expression)