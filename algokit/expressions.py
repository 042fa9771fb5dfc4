"""Bracket matching, postfix evaluation and infix-to-postfix conversion."""

from __future__ import annotations

import re
import string
from collections.abc import Callable

_PAIRS = {"(": ")", "{": "}", "[": "]"}
_CLOSERS = frozenset(_PAIRS.values())
_MULTI_LEXEME = re.compile(r"[0-9]+|[^ ]")


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _truncating_div,
}


def is_matching_pair(opening: str, closing: str) -> bool:
    """Return True when ``opening`` and ``closing`` form a bracket pair."""
    return _PAIRS.get(opening) == closing


def is_balanced(expression: str) -> bool:
    """Return True when every bracket in ``expression`` is closed in the right order."""
    stack: list[str] = []
    for char in expression:
        if char in _PAIRS:
            stack.append(char)
        elif char in _CLOSERS:
            if not stack or not is_matching_pair(stack.pop(), char):
                return False
    return not stack


def _apply(stack: list[int], operator: str) -> None:
    try:
        operation = _OPERATORS[operator]
    except KeyError:
        raise ValueError(f"unsupported operator {operator!r}") from None
    if len(stack) < 2:
        raise ValueError(f"not enough operands for {operator!r}")
    right = stack.pop()
    left = stack.pop()
    stack.append(operation(left, right))


def _result(stack: list[int]) -> int:
    if not stack:
        raise ValueError("expression has no value")
    return stack[-1]


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression whose operands are single digits.

    Division truncates towards zero.
    """
    stack: list[int] = []
    for char in expression:
        if char in string.digits:
            stack.append(int(char))
        else:
            _apply(stack, char)
    return _result(stack)


def evaluate_postfix_multi(expression: str) -> int:
    """Evaluate a postfix expression with multi-digit operands separated by spaces.

    Division truncates towards zero.
    """
    stack: list[int] = []
    for match in _MULTI_LEXEME.finditer(expression):
        item = match.group()
        if item[0] in string.digits:
            stack.append(int(item))
        else:
            _apply(stack, item)
    return _result(stack)


def precedence(operator: str) -> int:
    """Return the precedence of ``operator``; higher binds tighter, -1 for anything else."""
    if operator in ("+", "-"):
        return 1
    if operator in ("*", "/"):
        return 2
    if operator == "^":
        return 3
    return -1


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression with single-letter operands to postfix."""
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char in string.ascii_letters:
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        else:
            while stack and precedence(char) <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(char)
    while stack:
        operator = stack.pop()
        if operator == "(":
            raise ValueError("unmatched '(' in expression")
        output.append(operator)
    return "".join(output)