"""String problems: whitespace normalising, word reversal, parentheses."""

from __future__ import annotations


def trim_spaces(text: str) -> str:
    """Strip leading and trailing whitespace and collapse inner runs to one space."""
    return " ".join(text.split())


def reverse_words(text: str) -> str:
    """The words of text in reverse order, separated by single spaces."""
    return " ".join(reversed(text.split()))


def remove_outer_parentheses(text: str) -> str:
    """Drop the outermost pair of every primitive group of parentheses.

    Characters other than parentheses are discarded.
    """
    result: list[str] = []
    depth = 0
    for char in text:
        if char == "(":
            if depth > 0:
                result.append(char)
            depth += 1
        elif char == ")":
            depth -= 1
            if depth > 0:
                result.append(char)
    return "".join(result)