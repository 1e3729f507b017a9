from __future__ import annotations

import pytest

from contract.models import ArgumentSpan
from lexer.arguments import split_arguments
from lexer.errors import ParseFailure, StructuralParseError
from lexer.window import SourceWindow


def _split(text: str, arity: int = 3) -> tuple[ArgumentSpan, ...]:
    return split_arguments(SourceWindow.from_text(text), arity=arity)


def _reason(text: str, arity: int = 3) -> ParseFailure:
    with pytest.raises(StructuralParseError) as exc_info:
        _split(text, arity)
    return exc_info.value.reason


def test_split_simple_call() -> None:
    spans = _split('("hello", buf, 5)')

    assert [span.text for span in spans] == ['"hello"', " buf", " 5"]
    assert [span.decoded_length for span in spans] == [5, None, None]
    assert (spans[0].start, spans[0].end) == (1, 8)


def test_split_ignores_text_after_closing_paren() -> None:
    spans = _split('(buf, "hello", 5) == 0) {')

    assert [span.text.strip() for span in spans] == ["buf", '"hello"', "5"]


def test_split_nested_parens_are_opaque() -> None:
    spans = _split("(f(a, b), g(c, (d, e)), h(1))")

    assert [span.text.strip() for span in spans] == ["f(a, b)", "g(c, (d, e))", "h(1)"]


def test_split_quoted_separators_are_opaque() -> None:
    spans = _split('(s, "x,)", 3)')

    assert [span.text.strip() for span in spans] == ["s", '"x,)"', "3"]
    assert spans[1].decoded_length == 3


def test_split_literal_inside_nested_call_does_not_unbalance() -> None:
    spans = _split('(g(")"), b, 3)')

    assert spans[0].text == 'g(")")'
    assert spans[0].decoded_length is None


def test_split_concatenated_literal_is_one_argument() -> None:
    spans = _split('("ab" "cd", x, 4)')

    assert spans[0].decoded_length == 4
    assert len(spans) == 3


def test_split_leading_literal_followed_by_expression_fails() -> None:
    assert _reason('("abc" + 1, x, 2)') is ParseFailure.LITERAL_EXPRESSION
    assert _reason('(s, "a" x "b", 2)') is ParseFailure.LITERAL_EXPRESSION


def test_split_literal_later_in_expression_has_no_length() -> None:
    spans = _split('(p ? "ab" : "abc", x, 2)')

    assert spans[0].decoded_length is None


def test_split_escaped_quote_inside_literal() -> None:
    spans = _split('(s, "a\\"b", 3)')

    assert spans[1].decoded_length == 3


def test_split_custom_arity() -> None:
    spans = _split('("ab", 2)', arity=2)

    assert [span.decoded_length for span in spans] == [2, None]


def test_split_rejects_arity_below_two() -> None:
    with pytest.raises(ValueError, match="arity"):
        _split("(a)", arity=1)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('("a", "b"', ParseFailure.UNBALANCED),
        ("(a, f(b, c)", ParseFailure.UNBALANCED),
        ("(", ParseFailure.UNBALANCED),
        ("(a, b)", ParseFailure.ARITY_MISMATCH),
        ("(a, b, c, d)", ParseFailure.ARITY_MISMATCH),
        ("()", ParseFailure.ARITY_MISMATCH),
        ("(a, b, )", ParseFailure.EMPTY_ARGUMENT),
        ("(a, , c)", ParseFailure.EMPTY_ARGUMENT),
        ("(, b, c)", ParseFailure.EMPTY_ARGUMENT),
        ('(a, "b, 3)', ParseFailure.UNTERMINATED_LITERAL),
        ('(a, "b\\', ParseFailure.DANGLING_ESCAPE),
        ("a, b, c)", ParseFailure.NO_ARGUMENT_LIST),
    ],
)
def test_split_structural_failures(text: str, expected: ParseFailure) -> None:
    assert _reason(text) is expected
