import pytest

from algokit.expressions import (
    evaluate_postfix,
    evaluate_postfix_multi,
    infix_to_postfix,
    is_balanced,
    is_matching_pair,
    precedence,
)


@pytest.mark.parametrize(
    "opening, closing, expected",
    [
        ("(", ")", True),
        ("{", "}", True),
        ("[", "]", True),
        ("(", "]", False),
        ("{", ")", False),
        (")", "(", False),
    ],
)
def test_is_matching_pair(opening, closing, expected):
    assert is_matching_pair(opening, closing) is expected


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("{()}[]", True),
        ("{(})", False),
        ("", True),
        ("(", False),
        (")", False),
        ("a(b[c]d)e", True),
        ("[(])", False),
    ],
)
def test_is_balanced(expression, expected):
    assert is_balanced(expression) is expected


def test_evaluate_postfix_driver_example():
    assert evaluate_postfix("231*+9-") == -4


def test_evaluate_postfix_single_operand():
    assert evaluate_postfix("7") == 7


def test_single_and_multi_digit_evaluators_agree():
    assert evaluate_postfix("231*+9-") == evaluate_postfix_multi("2 3 1 * + 9 -")


def test_division_truncates_towards_zero():
    assert evaluate_postfix("07-2/") == -evaluate_postfix("72/")


@pytest.mark.parametrize("expression", ["", "+", "2+", "2a"])
def test_evaluate_postfix_rejects_malformed(expression):
    with pytest.raises(ValueError):
        evaluate_postfix(expression)


def test_evaluate_postfix_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("50/")


def test_evaluate_postfix_multi_driver_example():
    assert evaluate_postfix_multi("100 200 + 2 / 5 * 7 +") == 757


def test_evaluate_postfix_multi_reads_whole_numbers():
    assert evaluate_postfix_multi("12345") == 12345


@pytest.mark.parametrize("expression", ["", "1 +", "1 2 %"])
def test_evaluate_postfix_multi_rejects_malformed(expression):
    with pytest.raises(ValueError):
        evaluate_postfix_multi(expression)


def test_precedence_ordering():
    assert precedence("+") == precedence("-")
    assert precedence("*") == precedence("/")
    assert precedence("-") < precedence("*") < precedence("^")
    assert precedence("x") < precedence("+")


def test_infix_to_postfix_driver_example():
    assert infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i") == "abcd^e-fgh*+^*+i-"


def test_infix_to_postfix_keeps_operand_order_and_drops_parentheses():
    expression = "a+b*(c^d-e)^(f+g*h)-i"
    result = infix_to_postfix(expression)
    letters = [c for c in expression if c.isalpha()]
    assert [c for c in result if c.isalpha()] == letters
    assert sorted(result) == sorted(c for c in expression if c not in "()")


def test_infix_to_postfix_single_operand():
    assert infix_to_postfix("a") == "a"


@pytest.mark.parametrize("expression", ["a+b)", "(a+b"])
def test_infix_to_postfix_unbalanced(expression):
    with pytest.raises(ValueError):
        infix_to_postfix(expression)