"""Infix-to-postfix conversion, bracket matching and postfix evaluation."""

from __future__ import annotations

from collections.abc import Mapping

__all__ = ["precedence", "infix_to_postfix", "is_balanced", "evaluate_postfix"]

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_CLOSING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING.values())


def precedence(operator: str) -> int:
    """Return the binding strength of ``operator``; anything else ranks 0."""
    return _PRECEDENCE.get(operator, 0)


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalpha()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single-letter operands to postfix.

    ``^`` is right-associative, the other operators left-associative.
    Whitespace is ignored.
    """
    output: list[str] = []
    pending: list[str] = []
    for char in expression:
        if char.isspace():
            continue
        if _is_operand(char):
            output.append(char)
        elif char == "(":
            pending.append(char)
        elif char == ")":
            while pending and pending[-1] != "(":
                output.append(pending.pop())
            if not pending:
                raise ValueError("unmatched ')' in expression")
            pending.pop()
        elif char in _PRECEDENCE:
            rank = precedence(char)
            while pending and precedence(pending[-1]) >= rank:
                if char == "^" and pending[-1] == "^":
                    break
                output.append(pending.pop())
            pending.append(char)
        else:
            raise ValueError(f"unexpected character {char!r} in expression")
    while pending:
        operator = pending.pop()
        if operator == "(":
            raise ValueError("unmatched '(' in expression")
        output.append(operator)
    return "".join(output)


def is_balanced(expression: str) -> bool:
    """Return True if every (), [] and {} in ``expression`` is properly nested."""
    opened: list[str] = []
    for char in expression:
        if char in _OPENING:
            opened.append(char)
        elif char in _CLOSING:
            if not opened or opened.pop() != _CLOSING[char]:
                return False
    return not opened


def _truncating_divide(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero in expression")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        return _truncating_divide(left, right)
    if right >= 0:
        return left**right
    return int(left**right)


def evaluate_postfix(expression: str, values: Mapping[str, int]) -> int:
    """Evaluate a postfix expression, taking each operand's value from ``values``.

    Division truncates toward zero; a negative power is truncated to an integer.
    """
    operands: list[int] = []
    for char in expression:
        if char.isspace():
            continue
        if char in _PRECEDENCE:
            if len(operands) < 2:
                raise ValueError(f"operator {char!r} lacks two operands")
            right = operands.pop()
            left = operands.pop()
            operands.append(_apply(char, left, right))
        else:
            try:
                operands.append(int(values[char]))
            except KeyError:
                raise ValueError(f"no value given for operand {char!r}") from None
    if len(operands) != 1:
        raise ValueError("malformed postfix expression")
    return operands[0]