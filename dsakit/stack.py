"""Stack-based problems: infix to postfix conversion and next greater element."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def precedence(op: str) -> int:
    """Binding strength of an operator; 0 for anything else."""
    return _PRECEDENCE.get(op, 0)


def is_operator(char: str) -> bool:
    """True for one of + - * / ^."""
    return char in _PRECEDENCE


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over single-letter operands to postfix.

    All operators, including ``^``, associate to the left. Characters that
    are neither letters, parentheses nor operators are ignored.
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
        elif is_operator(char):
            while (
                stack
                and stack[-1] != "("
                and precedence(stack[-1]) >= precedence(char)
            ):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def next_greater_element(queries: Iterable[int], values: Sequence[int]) -> list[int]:
    """For each query, the first larger value to its right in values, or -1.

    A query missing from values also gives -1.
    """
    result = []
    for query in queries:
        try:
            start = values.index(query)
        except ValueError:
            result.append(-1)
            continue
        result.append(next((v for v in values[start + 1:] if v > query), -1))
    return result