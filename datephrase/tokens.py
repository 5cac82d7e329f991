"""Lexer for date phrases.

`tokenize` turns raw text into a lazy sequence of `Token`s, always finishing with an END token
so the grammar never has to ask whether more input is left. `TokenStream` adds the small
lookahead buffer the productions need.
"""

import re
from enum import Enum
from typing import Iterator, NamedTuple


class TokenKind(Enum):
    NUMBER = "number"
    WORD = "word"
    AMPM = "am/pm"
    COLON = "':'"
    SLASH = "'/'"
    DASH = "'-'"
    DOT = "'.'"
    PLUS = "'+'"
    END = "end of input"


class Token(NamedTuple):
    kind: TokenKind
    text: str
    position: int
    value: int | None = None
    digits: int = 0

    def is_word(self, *words: str) -> bool:
        return self.kind is TokenKind.WORD and self.text in words


_PUNCTUATION = {
    ":": TokenKind.COLON,
    "/": TokenKind.SLASH,
    "-": TokenKind.DASH,
    ".": TokenKind.DOT,
    "+": TokenKind.PLUS,
}

# Anything not matched here (whitespace, commas, quotes, ...) only separates tokens.
_TOKEN_PATTERN = re.compile(
    r"""
    (?P<number>[0-9]+)
    | (?P<word>[A-Za-z]+)
    | (?P<punct>[:/\-.+])
    """,
    re.VERBOSE,
)


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of `text` left to right, then a single END token."""
    for match in _TOKEN_PATTERN.finditer(text):
        kind = match.lastgroup
        raw = match.group()
        if kind == "number":
            yield Token(TokenKind.NUMBER, raw, match.start(), value=int(raw), digits=len(raw))
        elif kind == "word":
            word = raw.lower()
            token_kind = TokenKind.AMPM if word in ("am", "pm") else TokenKind.WORD
            yield Token(token_kind, word, match.start())
        else:
            yield Token(_PUNCTUATION[raw], raw, match.start())
    yield Token(TokenKind.END, "", len(text))


class TokenStream:
    """Cursor over `tokenize` output. Only the tokens peeked at are ever buffered."""

    def __init__(self, text: str) -> None:
        self._tokens = tokenize(text)
        self._buffer: list[Token] = []

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(position={self.peek().position})"

    def peek(self, offset: int = 0) -> Token:
        while len(self._buffer) <= offset:
            if self._buffer and self._buffer[-1].kind is TokenKind.END:
                # Reading past the end keeps returning END.
                return self._buffer[-1]
            self._buffer.append(next(self._tokens))
        return self._buffer[offset]

    def advance(self, count: int = 1) -> list[Token]:
        consumed = []
        for _ in range(count):
            # END is never consumed
            if self.peek().kind is TokenKind.END:
                break
            consumed.append(self._buffer.pop(0))
        return consumed

    def at_end(self) -> bool:
        return self.peek().kind is TokenKind.END
