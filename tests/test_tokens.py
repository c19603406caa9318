"""Test SourceSpan and Token helpers."""

import pytest

from dslscan.tokens import (
    SourceSpan,
    Token,
    TokenKind,
    is_blank,
    is_digit,
    is_ident_char,
    is_ident_start,
)


def make(kind: TokenKind, text: str) -> Token:
    return Token(kind, SourceSpan(text, 0, len(text)), 0, 0)


class TestSourceSpan:
    def test_text_is_slice_of_source(self):
        span = SourceSpan("let x = 1", 4, 5)
        assert span.text == "x"
        assert str(span) == "x"
        assert len(span) == 1

    def test_empty_span(self):
        span = SourceSpan("abc", 2, 2)
        assert span.text == ""
        assert span == ""

    def test_end_before_start_rejected(self):
        with pytest.raises(ValueError):
            SourceSpan("abc", 2, 1)

    def test_end_past_source_rejected(self):
        with pytest.raises(ValueError):
            SourceSpan("abc", 0, 4)

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError):
            SourceSpan("abc", -1, 1)

    def test_equals_literal(self):
        span = SourceSpan("a == b", 2, 4)
        assert span == "=="
        assert span != "="
        assert span != "==="

    def test_prefix_is_not_equal(self):
        span = SourceSpan("abc", 0, 2)
        assert span != "abc"
        assert span != "a"

    def test_equals_other_span_by_text(self):
        a = SourceSpan("x + x", 0, 1)
        b = SourceSpan("x + x", 4, 5)
        assert a == b
        assert hash(a) == hash(b)

    def test_not_equal_to_other_types(self):
        assert SourceSpan("1", 0, 1) != 1

    def test_repr_omits_source(self):
        span = SourceSpan("a very long source", 0, 1)
        assert "a very long source" not in repr(span)


class TestNumbers:
    def test_float_literal(self):
        tok = make(TokenKind.NUMBER, "3.14")
        assert tok.is_float()
        assert tok.as_number() == pytest.approx(3.14)
        assert isinstance(tok.as_number(), float)

    def test_integer_literal(self):
        tok = make(TokenKind.NUMBER, "42")
        assert not tok.is_float()
        assert tok.as_number() == 42
        assert isinstance(tok.as_number(), int)

    def test_as_float_on_integer(self):
        assert make(TokenKind.NUMBER, "42").as_float() == 42.0

    def test_leading_dot(self):
        tok = make(TokenKind.NUMBER, ".5")
        assert tok.is_float()
        assert tok.as_number() == 0.5

    def test_trailing_dot(self):
        tok = make(TokenKind.NUMBER, "7.")
        assert tok.is_float()
        assert tok.as_number() == 7.0

    def test_identifier_with_dot_is_not_float(self):
        assert not make(TokenKind.IDENTIFIER, "a.b").is_float()

    def test_non_number_conversion_raises(self):
        with pytest.raises(ValueError, match="not a number"):
            make(TokenKind.IDENTIFIER, "x").as_number()


class TestStringClosed:
    def test_closed(self):
        assert make(TokenKind.STRING, '"abc"').is_closed()

    def test_empty_closed(self):
        assert make(TokenKind.STRING, "''").is_closed()

    def test_unterminated(self):
        assert not make(TokenKind.STRING, '"abc').is_closed()

    def test_lone_quote(self):
        assert not make(TokenKind.STRING, '"').is_closed()

    def test_escaped_closing_quote(self):
        assert not make(TokenKind.STRING, '"abc\\"').is_closed()

    def test_escaped_quote_inside(self):
        assert make(TokenKind.STRING, '"a\\"b"').is_closed()

    def test_other_quote_kind_does_not_close(self):
        assert not make(TokenKind.STRING, "\"abc'").is_closed()

    def test_not_a_string_raises(self):
        with pytest.raises(ValueError):
            make(TokenKind.NUMBER, "1").is_closed()


class TestValue:
    def test_value_is_lexeme(self):
        tok = Token(TokenKind.IDENTIFIER, SourceSpan("foo bar", 4, 7), 0, 4)
        assert tok.value == "bar"

    def test_tokens_compare_by_lexeme_and_position(self):
        a = Token(TokenKind.IDENTIFIER, SourceSpan("x x", 0, 1), 0, 0)
        b = Token(TokenKind.IDENTIFIER, SourceSpan("x x", 2, 3), 0, 0)
        c = Token(TokenKind.IDENTIFIER, SourceSpan("x x", 2, 3), 0, 2)
        assert a == b
        assert a != c


class TestClassification:
    def test_blank(self):
        assert is_blank(" ")
        assert is_blank("\t")
        assert is_blank("\r")
        assert not is_blank("\n")
        assert not is_blank("")

    def test_digit_is_ascii_only(self):
        assert is_digit("0")
        assert is_digit("9")
        assert not is_digit("²")
        assert not is_digit("")
        assert not is_digit("a")

    def test_identifier_chars(self):
        assert is_ident_start("_")
        assert is_ident_start("a")
        assert not is_ident_start("1")
        assert is_ident_char("1")
        assert not is_ident_char("-")
