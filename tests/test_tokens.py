"""
tests/test_tokens.py

Covers:
  - Token kinds, values and positions
  - Case folding and am/pm detection
  - Separators that never become tokens
  - TokenStream lookahead, advance and the END sentinel
"""

import pytest

from datephrase.tokens import Token, TokenKind, TokenStream, tokenize


# ── tokenize ──────────────────────────────────────────────────────────────────

class TestTokenize:

    def test_kinds_and_positions(self):
        tokens = list(tokenize("Next Fri 8:30pm"))
        assert [t.kind for t in tokens] == [
            TokenKind.WORD,
            TokenKind.WORD,
            TokenKind.NUMBER,
            TokenKind.COLON,
            TokenKind.NUMBER,
            TokenKind.AMPM,
            TokenKind.END,
        ]
        assert [t.position for t in tokens] == [0, 5, 9, 10, 11, 13, 15]

    def test_words_are_lower_cased(self):
        assert [t.text for t in tokenize("FRIDAY June")][:2] == ["friday", "june"]

    def test_am_pm_are_their_own_kind(self):
        tokens = list(tokenize("9AM 10pm"))
        assert tokens[1] == Token(TokenKind.AMPM, "am", 1)
        assert tokens[3] == Token(TokenKind.AMPM, "pm", 6)

    def test_numbers_keep_value_and_digits(self):
        number = next(tokenize("007"))
        assert number.value == 7
        assert number.digits == 3
        assert number.text == "007"

    def test_letters_and_digits_split(self):
        tokens = list(tokenize("30T08:20Z"))
        assert [t.text for t in tokens] == ["30", "t", "08", ":", "20", "z", ""]

    @pytest.mark.parametrize("text,kind", [
        (":", TokenKind.COLON),
        ("/", TokenKind.SLASH),
        ("-", TokenKind.DASH),
        (".", TokenKind.DOT),
        ("+", TokenKind.PLUS),
    ])
    def test_punctuation(self, text, kind):
        assert next(tokenize(text)).kind is kind

    def test_whitespace_and_commas_only_separate(self):
        tokens = list(tokenize("  June   30,    2018 "))
        assert [t.text for t in tokens[:-1]] == ["june", "30", "2018"]

    def test_end_is_at_text_length(self):
        end = list(tokenize("abc  "))[-1]
        assert end.kind is TokenKind.END
        assert end.position == 5

    def test_empty_text_is_only_end(self):
        assert list(tokenize("")) == [Token(TokenKind.END, "", 0)]


# ── TokenStream ───────────────────────────────────────────────────────────────

class TestTokenStream:

    def test_peek_does_not_consume(self):
        stream = TokenStream("3 days")
        assert stream.peek().value == 3
        assert stream.peek(1).text == "days"
        assert stream.peek().value == 3

    def test_advance_returns_consumed_tokens(self):
        stream = TokenStream("3 days ago")
        consumed = stream.advance(2)
        assert [t.text for t in consumed] == ["3", "days"]
        assert stream.peek().is_word("ago")

    def test_peek_past_end_returns_end(self):
        stream = TokenStream("now")
        assert stream.peek(5).kind is TokenKind.END

    def test_end_is_never_consumed(self):
        stream = TokenStream("now")
        assert len(stream.advance(3)) == 1
        assert stream.at_end()
        assert stream.advance() == []
        assert stream.at_end()

    def test_is_word(self):
        token = TokenStream("ago").peek()
        assert token.is_word("ago")
        assert token.is_word("later", "ago")
        assert not token.is_word("now")
