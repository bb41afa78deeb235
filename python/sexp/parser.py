"""Build nested Python lists from S-expression source text."""

from __future__ import annotations

import base64
import binascii
import logging
import re
from typing import Final, Union

from sexp.errors import MalformedExpression
from sexp.options import DEFAULT_OPTIONS, Options
from sexp.tokenizer import TokenKind, tokenize

logger = logging.getLogger(__name__)

Atom = Union[int, float, str, bytes]
Value = Union[Atom, list["Value"]]

_INTEGER: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+(?:e([+-]?[0-9]+))?", re.IGNORECASE)
_FLOAT: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:[0-9]+\.|\.)?[0-9]+(?:e[+-]?[0-9]+)?", re.IGNORECASE)

# Below the interpreter's int/str conversion limit (4300 digits).
_MAX_INTEGER_DIGITS: Final[int] = 4000

_ESCAPE: Final[re.Pattern[str]] = re.compile(r"\\(x[0-9A-Fa-f]{1,2}|[0-7]{1,3}|.)", re.DOTALL)
_SIMPLE_ESCAPES: Final[dict[str, str]] = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}
_NON_HEX: Final[re.Pattern[str]] = re.compile(r"[^A-Fa-f0-9]+")


def is_integer(literal: str) -> bool:
    """``True`` if *literal* matches the integer grammar (exponent allowed)."""
    return _INTEGER.fullmatch(literal) is not None


def is_float(literal: str) -> bool:
    """``True`` if *literal* matches the float grammar."""
    return _FLOAT.fullmatch(literal) is not None


def _to_integer(literal: str, m: re.Match[str]) -> int | float:
    exponent_text = m.group(1)
    if exponent_text is None:
        mantissa, exponent = literal, 0
    elif len(exponent_text.lstrip("+-")) > len(str(_MAX_INTEGER_DIGITS)):
        return float(literal)
    else:
        mantissa, exponent = literal[: m.start(1) - 1], int(exponent_text)
    if exponent < 0 or len(mantissa.lstrip("+-")) + exponent > _MAX_INTEGER_DIGITS:
        # Not integral, or too long to hold as an exact int.
        return float(literal)
    return int(mantissa) * 10**exponent


def _symbol(literal: str, options: Options) -> Atom:
    if options.cast_numbers:
        m = _INTEGER.fullmatch(literal)
        if m is not None:
            return _to_integer(literal, m)
        if is_float(literal):
            return float(literal)
    return literal


def _replace_escape(m: re.Match[str]) -> str:
    seq = m.group(1)
    if seq in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[seq]
    if seq[0] == "x" and len(seq) > 1:
        return chr(int(seq[1:], 16))
    if seq[0] in "01234567":
        return chr(int(seq, 8) & 0xFF)
    return seq


def unescape(body: str) -> str:
    """Decode C-style backslash escapes in the body of a quoted string."""
    return _ESCAPE.sub(_replace_escape, body)


def _decode_base64(body: str, offset: int) -> bytes:
    data = body.rstrip("=")
    try:
        return base64.b64decode(data + "=" * (-len(data) % 4))
    except binascii.Error as e:
        raise MalformedExpression(f"Invalid base64 blob: {e}", offset) from e


def _decode_hex(body: str) -> bytes:
    digits = _NON_HEX.sub("", body)
    if len(digits) % 2:
        # An odd trailing nibble is the high half of a byte.
        digits += "0"
    return bytes.fromhex(digits)


def parse(source: str | bytes | bytearray, options: Options = DEFAULT_OPTIONS) -> Value:
    """Parse a single S-expression from *source*.

    Lists become ``list``; quoted strings and plain symbols become ``str``;
    base64 (``|...|``) and hex (``#...#``) blobs become ``bytes``. With
    ``options.cast_numbers`` enabled, symbols shaped like numbers become
    ``int`` or ``float``. Comments are dropped.

    Raises:
        MalformedExpression: If parentheses do not balance, the document does
            not hold exactly one top-level form, or a token cannot be decoded.

    """
    if isinstance(source, (bytes, bytearray)):
        try:
            source = bytes(source).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedExpression(f"Source is not valid UTF-8: {e.reason}", e.start) from e

    stack: list[list[Value]] = []
    current: list[Value] = []
    count = 0

    for token in tokenize(source):
        count += 1
        kind = token.kind
        if kind is TokenKind.OPEN:
            stack.append(current)
            current = []
        elif kind is TokenKind.CLOSE:
            if not stack:
                raise MalformedExpression("Closing paren without a matching opening paren", token.offset)
            parent = stack.pop()
            parent.append(current)
            current = parent
        elif kind is TokenKind.DOUBLE_QUOTED or kind is TokenKind.SINGLE_QUOTED:
            current.append(unescape(token.text[1:-1]))
        elif kind is TokenKind.BASE64:
            current.append(_decode_base64(token.text[1:-1], token.offset))
        elif kind is TokenKind.HEX:
            current.append(_decode_hex(token.text[1:-1]))
        elif kind is TokenKind.SYMBOL:
            current.append(_symbol(token.text, options))

    if stack:
        raise MalformedExpression(f"{len(stack)} unclosed paren(s)")
    if len(current) != 1:
        raise MalformedExpression(f"Expected exactly one top-level expression, found {len(current)}")

    logger.debug("Parsed %d tokens", count)
    return current[0]
