"""Render parse errors as caret-pointing messages."""

import unicodedata

from hostlist_expr.errors import ParseError


def _cell_width(ch: str) -> int:
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def format_error(text: str, error: ParseError) -> str:
    """Return ``text`` with a caret line under ``error.position``.

        node[3-1]
             ^
        invalid range at position 5: found '1' (range start 3 is greater than end 1)

    Built from the error's attributes only; the input is shown on one line
    with newlines and tabs replaced so the caret stays aligned. Wide (CJK)
    characters before the caret count as two terminal cells.
    """
    shown = text.replace("\t", " ").replace("\r", " ").replace("\n", " ")
    position = min(max(error.position, 0), len(shown))
    indent = sum(_cell_width(ch) for ch in shown[:position])
    caret = " " * indent + "^"
    return f"{shown}\n{caret}\n{error}"
