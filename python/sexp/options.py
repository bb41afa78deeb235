"""Flags that change how S-expressions are parsed and serialized."""

from __future__ import annotations

import dataclasses
from typing import Final


@dataclasses.dataclass(frozen=True)
class Options:
    """Immutable parse/serialize configuration.

    Attributes:
        cast_numbers: Convert symbols shaped like numbers into ``int`` or
            ``float`` while parsing. Disable to keep every symbol as ``str``
            (e.g. to handle big numbers yourself).
        pretty_print: Put every nested list on its own indented line when
            serializing.
        forced_string_escape: Double-quote every string that is not the
            first element of its list, even when it would be a valid symbol.

    """

    cast_numbers: bool = True
    pretty_print: bool = True
    forced_string_escape: bool = False

    def replace(self, **changes: bool) -> Options:
        """Return a copy with the given flags changed.

        Raises:
            TypeError: If a name in *changes* is not one of the flags.

        """
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS: Final[Options] = Options()
