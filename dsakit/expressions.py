"""Infix-to-postfix conversion and postfix evaluation."""

from __future__ import annotations

import operator
from typing import Callable

OPERATORS = frozenset("^*/+-")

_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


class ExpressionError(ValueError):
    """Raised for a malformed infix or postfix expression."""


def is_operator(symbol: str) -> bool:
    """Return whether ``symbol`` is one of the binary operators ``^*/+-``."""
    return symbol in OPERATORS


def precedence(symbol: str) -> int:
    """Binding strength of an operator; 0 for anything else."""
    return _PRECEDENCE.get(symbol, 0)


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence associate to the left.
    """
    stack = ["("]
    output: list[str] = []

    def pop() -> str:
        if not stack:
            raise ExpressionError("stack underflow: invalid infix expression")
        return stack.pop()

    for symbol in expression + ")":
        if symbol == "(":
            stack.append(symbol)
        elif _is_operand(symbol):
            output.append(symbol)
        elif is_operator(symbol):
            top = pop()
            while is_operator(top) and precedence(top) >= precedence(symbol):
                output.append(top)
                top = pop()
            stack.append(top)
            stack.append(symbol)
        elif symbol == ")":
            top = pop()
            while top != "(":
                output.append(top)
                top = pop()
        else:
            raise ExpressionError(f"invalid character {symbol!r} in infix expression")

    if stack:
        raise ExpressionError("unbalanced parentheses in infix expression")
    return "".join(output)


def _truncating_div(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero in postfix expression")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_ARITHMETIC: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def evaluate_postfix(expression: str) -> int:
    """Evaluate a postfix expression of single-digit operands and ``+-*/``.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for symbol in expression:
        if symbol.isascii() and symbol.isdigit():
            stack.append(int(symbol))
            continue
        apply = _ARITHMETIC.get(symbol)
        if apply is None:
            raise ExpressionError(f"invalid character {symbol!r} in postfix expression")
        if len(stack) < 2:
            raise ExpressionError(f"operator {symbol!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(apply(left, right))

    if len(stack) != 1:
        raise ExpressionError("postfix expression does not reduce to a single value")
    return stack[0]