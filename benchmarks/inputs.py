from __future__ import annotations

from typing import Final

import pytest

SMALL: Final[str] = "(a b c d e)"

MEDIUM: Final[str] = (
    "(node (kind widget) (id 42) (pos 12.5 -3.2) (size 100 200) (visible 1) (zorder 3))"
)

STRINGS: Final[str] = (
    '(labels "first label" \'second label\' "escaped \\"quote\\" here"'
    ' "tab\\tand\\nnewline" plain/symbol "(parens inside)")'
)

BLOBS: Final[str] = (
    "(blobs"
    " |SGVsbG8sIHdvcmxkIQ==| #48656c6c6f2c20776f726c6421#"
    " |AAECAwQFBgcICQoLDA0ODxAREhMUFRYXGBkaGxwdHh8=|"
    " #00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f#)"
)

COMMENTED: Final[str] = (
    "; board settings\n"
    "(board ; name follows\n"
    " (name main) ; trailing note\n"
    " (layers 4) ; copper only\n"
    " (thickness 1.6))\n"
)


def generate(depth: int, width: int) -> str:
    atoms = " ".join(f"a{i}" for i in range(width))

    def _build(d: int) -> str:
        if d == 0:
            return atoms
        return f"(w{d} {_build(d - 1)} {atoms})"

    return _build(depth)


def generate_entries(count: int) -> str:
    entries = "".join(
        f" (entry {i} (p {i * 0.5} {-i * 1.25}) (label \"item {i}\") #{i:04x}#)"
        for i in range(count)
    )
    return f"(root (meta {count}){entries})"


LARGE: Final[str] = generate_entries(200)

_DEEP_DEPTH: Final[int] = 8
_DEEP_WIDTH: Final[int] = 6
DEEP: Final[str] = generate(_DEEP_DEPTH, _DEEP_WIDTH)

INPUTS: Final = [
    pytest.param(SMALL, id="small"),
    pytest.param(MEDIUM, id="medium"),
    pytest.param(STRINGS, id="strings"),
    pytest.param(BLOBS, id="blobs"),
    pytest.param(COMMENTED, id="commented"),
    pytest.param(LARGE, id="large"),
    pytest.param(DEEP, id="deep"),
]
