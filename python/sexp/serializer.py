"""Render Python values as S-expression text."""

from __future__ import annotations

import base64
import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Final

from sexp.errors import SerializationError
from sexp.options import DEFAULT_OPTIONS, Options

_NON_PRINTABLE: Final[re.Pattern[str]] = re.compile(r"[^\x20-\x7e\t\n\x0b\x0c\r]")
_NON_SYMBOL: Final[re.Pattern[str]] = re.compile(r"[^A-Za-z0-9_.:/*+\-=]")
_NEEDS_BACKSLASH: Final[re.Pattern[str]] = re.compile(r'([\\"])')

_INDENT: Final[str] = "  "


def _is_printable_ascii(value: bytes) -> bool:
    return all(0x20 <= b <= 0x7E or 0x09 <= b <= 0x0D for b in value)


def serialize_string(value: str | bytes, index: int = 0, options: Options = DEFAULT_OPTIONS) -> str:
    """Render a single string as a symbol, a quoted string or a base64 blob.

    Text holding anything other than printable ASCII and whitespace becomes
    ``|base64|`` (``str`` is UTF-8 encoded first). Text with characters that
    are not safe in a bare symbol is double-quoted, as is every string past
    the first element of its list when ``options.forced_string_escape`` is
    set, and so is the empty string. Everything else is written as is.
    """
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
        if not _is_printable_ascii(raw):
            return "|" + base64.b64encode(raw).decode("ascii") + "|"
        value = raw.decode("ascii")
    elif _NON_PRINTABLE.search(value):
        return "|" + base64.b64encode(value.encode("utf-8")).decode("ascii") + "|"

    if not value or _NON_SYMBOL.search(value) or (options.forced_string_escape and index > 0):
        return '"' + _NEEDS_BACKSLASH.sub(r"\\\1", value) + '"'
    return value


def _has_own_str(value: object) -> bool:
    return type(value).__str__ is not object.__str__


def _is_list(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray))


def _elements(value: Any) -> Iterator[tuple[int, Any]]:
    if isinstance(value, Mapping):
        return enumerate(value.values())
    return enumerate(value)


def _serialize_atom(item: Any, index: int, options: Options) -> str:
    # bool first: it is an int subclass
    if isinstance(item, bool):
        return "1" if item else "0"
    if isinstance(item, int):
        try:
            return str(item)
        except ValueError as e:
            raise SerializationError(item) from e
    if isinstance(item, float):
        return repr(item)
    if item is None:
        return '""'
    if isinstance(item, (str, bytes, bytearray)):
        return serialize_string(item, index, options)
    if _has_own_str(item):
        return serialize_string(str(item), index, options)
    raise SerializationError(item)


def _wrap(parts: list[str], depth: int, options: Options) -> str:
    out = "(" + " ".join(parts) + ")"
    if options.pretty_print and depth > 0:
        out = "\n" + _INDENT * depth + out
    return out


def serialize(value: Any, depth: int = 0, options: Options = DEFAULT_OPTIONS) -> str:
    """Serialize *value* to S-expression text.

    Lists, tuples and any other iterable become parenthesized lists; mappings
    contribute their values. A bare scalar at the top level is written as a
    one-element list. ``bool`` is written as ``1``/``0`` and ``None`` as
    ``""``. With ``options.pretty_print`` enabled every list below *depth* 0
    starts on a new line indented two spaces per level. Nesting depth is
    limited only by memory.

    Raises:
        SerializationError: If *value* contains an object that is neither one
            of the types above nor defines its own ``__str__``, or an ``int``
            too large to convert to decimal text.

    """
    if not _is_list(value):
        value = [value]

    # (elements, rendered parts, depth) for every list still open
    frames: list[tuple[Iterator[tuple[int, Any]], list[str], int]] = [(_elements(value), [], depth)]
    while True:
        elements, parts, level = frames[-1]
        for index, item in elements:
            if _is_list(item):
                frames.append((_elements(item), [], level + 1))
                break
            parts.append(_serialize_atom(item, index, options))
        else:
            frames.pop()
            out = _wrap(parts, level, options)
            if not frames:
                return out
            frames[-1][1].append(out)
