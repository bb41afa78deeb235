"""Split S-expression source text into classified tokens."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator
from typing import Final, NamedTuple

from sexp.errors import MalformedExpression


class TokenKind(enum.Enum):
    OPEN = "open"
    CLOSE = "close"
    DOUBLE_QUOTED = "double-quoted"
    SINGLE_QUOTED = "single-quoted"
    BASE64 = "base64"
    HEX = "hex"
    COMMENT = "comment"
    SYMBOL = "symbol"


class Token(NamedTuple):
    kind: TokenKind
    text: str
    offset: int


# Tried in order at every position; the first match wins.
_MATCHERS: Final[tuple[tuple[TokenKind, re.Pattern[str]], ...]] = (
    (TokenKind.OPEN, re.compile(r"\(")),
    (TokenKind.CLOSE, re.compile(r"\)")),
    (TokenKind.DOUBLE_QUOTED, re.compile(r'"(?:\\.|[^\\"])*"', re.DOTALL)),
    (TokenKind.SINGLE_QUOTED, re.compile(r"'(?:\\.|[^\\'])*'", re.DOTALL)),
    (TokenKind.BASE64, re.compile(r"\|[A-Za-z0-9+/=]*\|")),
    (TokenKind.HEX, re.compile(r"#[A-Fa-f0-9\s]+#")),
    (TokenKind.COMMENT, re.compile(r";[^\r\n]*")),
    (TokenKind.SYMBOL, re.compile(r"[^\s()\"'|#;]+")),
)

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s*")


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of *text* from left to right.

    Whitespace between tokens is skipped. The generator is lazy: a problem
    further into the text is only reported once scanning reaches it.

    Raises:
        MalformedExpression: If a non-whitespace position starts no token,
            e.g. an unterminated string or blob.

    """
    pos = 0
    end = len(text)
    while True:
        pos = _WHITESPACE.match(text, pos).end()
        if pos >= end:
            return
        for kind, pattern in _MATCHERS:
            m = pattern.match(text, pos)
            if m is not None:
                break
        else:
            raise MalformedExpression(f"Unexpected character {text[pos]!r}", pos)
        yield Token(kind, m.group(), pos)
        pos = m.end()
