"""Stateful front end that keeps a set of flags between calls."""

from __future__ import annotations

from typing import Any

from sexp.options import DEFAULT_OPTIONS, Options
from sexp.parser import Value, parse
from sexp.serializer import serialize


class Codec:
    """Parse and serialize with flags that can be read and changed in place.

    Every flag change swaps the underlying :class:`Options` for a new frozen
    copy, so a call that is already running keeps the flags it started with.
    """

    def __init__(self, options: Options | None = None) -> None:
        self._options = options if options is not None else DEFAULT_OPTIONS

    def __repr__(self) -> str:
        return f"Codec({self._options!r})"

    @property
    def options(self) -> Options:
        return self._options

    @property
    def cast_numbers(self) -> bool:
        return self._options.cast_numbers

    @cast_numbers.setter
    def cast_numbers(self, flag: bool) -> None:
        self._options = self._options.replace(cast_numbers=bool(flag))

    @property
    def pretty_print(self) -> bool:
        return self._options.pretty_print

    @pretty_print.setter
    def pretty_print(self, flag: bool) -> None:
        self._options = self._options.replace(pretty_print=bool(flag))

    @property
    def forced_string_escape(self) -> bool:
        return self._options.forced_string_escape

    @forced_string_escape.setter
    def forced_string_escape(self, flag: bool) -> None:
        self._options = self._options.replace(forced_string_escape=bool(flag))

    def parse(self, source: str | bytes | bytearray) -> Value:
        """Parse *source* with the current flags. See :func:`sexp.parse`."""
        return parse(source, self._options)

    def serialize(self, value: Any, depth: int = 0) -> str:
        """Serialize *value* with the current flags. See :func:`sexp.serialize`."""
        return serialize(value, depth, self._options)
