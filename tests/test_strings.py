import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.strings import remove_outer_parentheses, reverse_words, trim_spaces

words_text = st.lists(
    st.text(alphabet="abc xyz\t\n", max_size=6), max_size=6
).map("".join)


def test_reverse_words_example():
    assert reverse_words("  the sky   is blue ") == "blue is sky the"


def test_trim_spaces_example():
    assert trim_spaces("  a   b  ") == "a b"


@given(words_text)
def test_trim_has_no_edge_or_double_spaces(text):
    trimmed = trim_spaces(text)
    assert trimmed == trimmed.strip()
    assert "  " not in trimmed
    assert trimmed.split() == text.split()


@given(words_text)
def test_trim_is_idempotent(text):
    assert trim_spaces(trim_spaces(text)) == trim_spaces(text)


@given(words_text)
def test_reverse_twice_equals_trim(text):
    assert reverse_words(reverse_words(text)) == trim_spaces(text)


@given(words_text)
def test_reverse_words_reverses_word_list(text):
    assert reverse_words(text).split() == text.split()[::-1]


def test_blank_text():
    assert trim_spaces("   ") == ""
    assert reverse_words("") == ""


def test_remove_outer_example():
    assert remove_outer_parentheses("(()())(())") == "()()()"


@pytest.mark.parametrize("inner", ["", "()", "()()", "(())", "(()())()"])
def test_wrapped_group_loses_only_outer_pair(inner):
    assert remove_outer_parentheses("(" + inner + ")") == inner


@pytest.mark.parametrize(
    "first, second",
    [("()", "(())"), ("(()())", "()"), ("((()))", "(()())")],
)
def test_removal_distributes_over_primitives(first, second):
    assert remove_outer_parentheses(first + second) == (
        remove_outer_parentheses(first) + remove_outer_parentheses(second)
    )


def test_only_pairs_gives_empty():
    assert remove_outer_parentheses("()()()") == ""


def test_other_characters_dropped():
    assert remove_outer_parentheses("(a(b)c)") == remove_outer_parentheses("(())")