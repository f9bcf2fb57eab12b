"""Conversion of infix expressions to postfix notation."""

from __future__ import annotations

__all__ = ["precedence", "infix_to_postfix", "simple_infix_to_postfix"]


def precedence(operator: str) -> int:
    """Return the binding strength of an operator; -1 for anything else."""
    if operator == "^":
        return 3
    if operator in ("*", "/"):
        return 2
    if operator in ("+", "-"):
        return 1
    return -1


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression with letter operands and parentheses.

    Only operators of strictly higher precedence are popped before a new
    operator is pushed, so operators of equal precedence are emitted from
    right to left.
    """
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if char.isascii() and char.isalpha():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            while stack and precedence(stack[-1]) > precedence(char):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


_SIMPLE_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


def simple_infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over + - * / without parentheses.

    Every character that is not one of the four operators is an operand.
    Operators of equal precedence are emitted from left to right.
    """
    stack: list[str] = []
    output: list[str] = []
    chars = iter(expression)
    pending = next(chars, None)
    while pending is not None:
        if pending not in _SIMPLE_PRECEDENCE:
            output.append(pending)
            pending = next(chars, None)
            continue
        top = _SIMPLE_PRECEDENCE[stack[-1]] if stack else 0
        if _SIMPLE_PRECEDENCE[pending] > top:
            stack.append(pending)
            pending = next(chars, None)
        else:
            output.append(stack.pop())
    output.extend(reversed(stack))
    return "".join(output)